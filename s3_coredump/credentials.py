################################################################################
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
################################################################################
"""Ordered credential chain used to authenticate the upload.

Providers are tried in a fixed order and the first one returning a complete
key pair wins:

    static -> shared-credentials-file -> environment -> instance-metadata

When every provider misses, the ResolutionError lists the reason reported
by each of them so a single log line is enough to diagnose the host.
"""
import abc
from collections import namedtuple
from datetime import datetime
from datetime import timezone
import os

from botocore.configloader import raw_config_parse
from botocore.exceptions import ConfigNotFound
from botocore.exceptions import ConfigParseError
import requests

from .common.constants import DEFAULT_PROFILE
from .common.constants import ENV_ACCESS_KEYS
from .common.constants import ENV_SECRET_KEYS
from .common.constants import ENV_SESSION_TOKEN
from .common.constants import LOG
from .common.constants import METADATA_ENDPOINT
from .common.constants import METADATA_ROLE_PATH
from .common.constants import METADATA_TIMEOUT
from .common.constants import METADATA_TOKEN_PATH
from .common.constants import METADATA_TOKEN_TTL
from .common.exception import ProviderError
from .common.exception import ResolutionError
from .common.exception import TransportError


ResolvedCredential = namedtuple(
    'ResolvedCredential',
    'access_key secret_key session_token expiry provider',
    defaults=(None, None, None))


class CredentialProvider(object, metaclass=abc.ABCMeta):
    """Base class for a single source of credentials."""

    name = None

    @abc.abstractmethod
    def retrieve(self):
        """Return a ResolvedCredential or raise ProviderError."""


class StaticProvider(CredentialProvider):
    name = 'static'

    def __init__(self, access_key, secret_key, session_token=None):
        self.access_key = access_key
        self.secret_key = secret_key
        self.session_token = session_token

    def retrieve(self):
        if not self.access_key or not self.secret_key:
            raise ProviderError(reason="static credentials are empty")
        return ResolvedCredential(self.access_key, self.secret_key,
                                  session_token=self.session_token or None,
                                  provider=self.name)


class SharedCredentialsProvider(CredentialProvider):
    name = 'shared-credentials-file'

    def __init__(self, filename, profile=None):
        self.filename = filename
        self.profile = profile or DEFAULT_PROFILE

    def retrieve(self):
        if not self.filename:
            raise ProviderError(reason="no credentials file configured")
        try:
            profiles = raw_config_parse(self.filename, parse_subsections=False)
        except ConfigNotFound:
            raise ProviderError(
                reason="credentials file %s does not exist" % self.filename)
        except ConfigParseError as e:
            raise ProviderError(
                reason="failed to parse credentials file %s: %s" % (self.filename, e))

        if self.profile not in profiles:
            raise ProviderError(reason="profile %s not found in %s" %
                                (self.profile, self.filename))

        profile = profiles[self.profile]
        access_key = profile.get('aws_access_key_id', '').strip()
        secret_key = profile.get('aws_secret_access_key', '').strip()
        token = profile.get('aws_session_token', '').strip()
        if not access_key or not secret_key:
            raise ProviderError(reason="profile %s in %s has no complete key pair" %
                                (self.profile, self.filename))

        return ResolvedCredential(access_key, secret_key,
                                  session_token=token or None,
                                  provider=self.name)


class EnvProvider(CredentialProvider):
    name = 'environment'

    def __init__(self, environ=None):
        self._environ = environ

    def _lookup(self, names):
        environ = os.environ if self._environ is None else self._environ
        for name in names:
            value = environ.get(name)
            if value:
                return value
        return None

    def retrieve(self):
        access_key = self._lookup(ENV_ACCESS_KEYS)
        if not access_key:
            raise ProviderError(reason="%s not found in environment" %
                                " or ".join(ENV_ACCESS_KEYS))
        secret_key = self._lookup(ENV_SECRET_KEYS)
        if not secret_key:
            raise ProviderError(reason="%s not found in environment" %
                                " or ".join(ENV_SECRET_KEYS))
        return ResolvedCredential(access_key, secret_key,
                                  session_token=self._lookup([ENV_SESSION_TOKEN]),
                                  provider=self.name)


class InstanceMetadataProvider(CredentialProvider):
    """EC2 instance role credentials from the link-local metadata service.

    An IMDSv2 session token is requested first. When the service answers
    the token request with an HTTP error the lookup continues without a
    token (IMDSv1). Connection failures end the lookup.
    """
    name = 'instance-metadata'

    def __init__(self, endpoint=METADATA_ENDPOINT, timeout=METADATA_TIMEOUT):
        self.endpoint = (endpoint or METADATA_ENDPOINT).rstrip('/')
        self.timeout = timeout

    def _fetch_token(self):
        url = self.endpoint + METADATA_TOKEN_PATH
        headers = {"X-aws-ec2-metadata-token-ttl-seconds": str(METADATA_TOKEN_TTL)}
        try:
            response = requests.put(url=url, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(reason="%s: %s" % (url, e))
        if response.status_code != 200:
            LOG.debug("Metadata token request returned HTTP %s, using IMDSv1" %
                      response.status_code)
            return None
        return response.text

    def _get(self, path, token):
        url = self.endpoint + path
        headers = {"X-aws-ec2-metadata-token": token} if token else {}
        try:
            response = requests.get(url=url, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(reason="%s: %s" % (url, e))
        if response.status_code == 404:
            return None
        if response.status_code != 200:
            raise ProviderError(reason="%s returned HTTP %s" % (url, response.status_code))
        return response

    def retrieve(self):
        try:
            token = self._fetch_token()
            response = self._get(METADATA_ROLE_PATH, token)
            roles = response.text.split() if response is not None else []
            if not roles:
                raise ProviderError(reason="no EC2 instance role found")
            role = roles[0]
            response = self._get(METADATA_ROLE_PATH + role, token)
            if response is None:
                raise ProviderError(reason="no credentials for EC2 instance role %s" % role)
            document = response.json()
        except TransportError as e:
            raise ProviderError(reason=str(e))
        except ValueError as e:
            raise ProviderError(reason="invalid credentials document: %s" % e)

        if not isinstance(document, dict):
            raise ProviderError(reason="invalid credentials document for role %s" % role)
        if document.get('Code', 'Success') != 'Success':
            raise ProviderError(reason="EC2 instance role %s reported %s" %
                                (role, document.get('Code')))
        access_key = document.get('AccessKeyId')
        secret_key = document.get('SecretAccessKey')
        if not access_key or not secret_key:
            raise ProviderError(
                reason="credentials document for role %s is incomplete" % role)

        return ResolvedCredential(access_key, secret_key,
                                  session_token=document.get('Token') or None,
                                  expiry=_parse_expiration(document.get('Expiration')),
                                  provider=self.name)


def _parse_expiration(value):
    if not value:
        return None
    try:
        return datetime.strptime(value, '%Y-%m-%dT%H:%M:%SZ').replace(tzinfo=timezone.utc)
    except ValueError:
        LOG.debug("Ignoring unparsable credential expiration %s" % value)
        return None


class CredentialResolver(object):

    def __init__(self, providers):
        self.providers = list(providers)

    def resolve(self):
        failures = []
        for provider in self.providers:
            try:
                credential = provider.retrieve()
            except ProviderError as e:
                LOG.debug("Credential provider %s skipped: %s" % (provider.name, e))
                failures.append((provider.name, str(e)))
                continue
            LOG.debug("Using credentials from the %s provider" % provider.name)
            return credential
        raise ResolutionError(failures)


def providers_from_conf(conf):
    """Build the provider chain, in resolution order, from the options."""
    return [
        StaticProvider(conf.access_key, conf.secret_key, conf.session_token),
        SharedCredentialsProvider(conf.credentials_file, conf.credentials_profile),
        EnvProvider(),
        InstanceMetadataProvider(conf.metadata_endpoint),
    ]
