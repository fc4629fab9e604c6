################################################################################
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
################################################################################
from .common.constants import LOG
from .common.exception import ConfigurationError
from .credentials import CredentialResolver
from .credentials import providers_from_conf
from .object_key import DumpMetadata
from .object_key import key_from_metadata
from .stream import ReadOnlyStream
from .uploader import S3Uploader
from .uploader import UploadRequest


def metadata_from_args(args):
    """Build the DumpMetadata from the positional arguments.

    Only presence is checked, extra arguments are ignored.
    """
    args = list(args or [])
    if len(args) < len(DumpMetadata._fields):
        raise ConfigurationError(
            reason="expected <hostname> <exe> <pid> <time>, got %d argument(s)" % len(args))
    if len(args) > len(DumpMetadata._fields):
        LOG.warning("Ignoring extra arguments: %s" % args[len(DumpMetadata._fields):])

    metadata = DumpMetadata(*args[:len(DumpMetadata._fields)])
    missing = [field for field, value in zip(metadata._fields, metadata) if not value]
    if missing:
        raise ConfigurationError(reason="empty %s" % ", ".join(missing))
    return metadata


def CoreDumpHandler(metadata, source, conf, resolver=None):
    """Upload the dump read from source and return its location.

    Nothing is retried, any failure leaves as an S3CoreDumpException.
    """
    LOG.debug("Process %s (%s) on %s dumped core at %s." %
              (metadata.pid, metadata.executable, metadata.hostname, metadata.timestamp))

    if resolver is None:
        resolver = CredentialResolver(providers_from_conf(conf))
    credential = resolver.resolve()

    key = key_from_metadata(metadata, escape=conf.escape_key_fields)
    body = ReadOnlyStream(source)
    request = UploadRequest(bucket=conf.bucket, key=key, body=body)

    uploader = S3Uploader.from_credential(credential, conf.region,
                                          endpoint_url=conf.endpoint_url or None,
                                          chunksize=conf.multipart_chunksize)
    location = uploader.upload(request)

    LOG.debug("Sent %d bytes for %s" % (body.bytes_read, key))
    LOG.info("Uploaded to %s" % location)
    return location
