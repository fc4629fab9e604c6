################################################################################
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
################################################################################
from collections import namedtuple
from urllib.parse import quote

import boto3
from boto3.exceptions import S3UploadFailedError
from boto3.s3.transfer import TransferConfig
from botocore.config import Config
from botocore.exceptions import BotoCoreError
from botocore.exceptions import ClientError

from .common.constants import BUCKET_OWNER_FULL_CONTROL
from .common.constants import LOG
from .common.constants import MULTIPART_CHUNKSIZE
from .common.exception import AuthorizationError
from .common.exception import TransportError


UploadRequest = namedtuple('UploadRequest', 'bucket key body acl',
                           defaults=(BUCKET_OWNER_FULL_CONTROL,))

AUTHORIZATION_ERROR_CODES = frozenset([
    'AccessDenied',
    'AccessControlListNotSupported',
    'AllAccessDisabled',
    'ExpiredToken',
    'InvalidAccessKeyId',
    'InvalidToken',
    'SignatureDoesNotMatch',
    'TokenRefreshRequired',
])


def new_s3_client(credential, region, endpoint_url=None):
    """Create an S3 client bound to an explicit credential.

    The client never retries, a failed call is reported to the kernel as a
    failed dump.
    """
    session = boto3.session.Session(
        aws_access_key_id=credential.access_key,
        aws_secret_access_key=credential.secret_key,
        aws_session_token=credential.session_token,
        region_name=region)
    config = Config(retries={'total_max_attempts': 1, 'mode': 'standard'})
    return session.client('s3', endpoint_url=endpoint_url or None, config=config)


def translate_client_error(error):
    response = getattr(error, 'response', None) or {}
    code = response.get('Error', {}).get('Code')
    status = response.get('ResponseMetadata', {}).get('HTTPStatusCode')
    if code in AUTHORIZATION_ERROR_CODES or status in (401, 403):
        return AuthorizationError(reason=str(error))
    return TransportError(reason=str(error))


class S3Uploader(object):
    """Streams a single object to S3.

    The body is read forward only. s3transfer buffers at most one part in
    memory and switches to a multipart upload once the body grows past the
    first part; a short body goes out as a single PutObject.
    """

    def __init__(self, client, chunksize=MULTIPART_CHUNKSIZE):
        self._client = client
        self._transfer_config = TransferConfig(multipart_threshold=chunksize,
                                               multipart_chunksize=chunksize,
                                               use_threads=False)

    @classmethod
    def from_credential(cls, credential, region, endpoint_url=None,
                        chunksize=MULTIPART_CHUNKSIZE):
        return cls(new_s3_client(credential, region, endpoint_url),
                   chunksize=chunksize)

    def location(self, bucket, key):
        endpoint = self._client.meta.endpoint_url.rstrip('/')
        return "%s/%s/%s" % (endpoint, bucket, quote(key))

    def upload(self, request):
        LOG.debug("Uploading s3://%s/%s with ACL %s" %
                  (request.bucket, request.key, request.acl))
        try:
            self._client.upload_fileobj(request.body, request.bucket, request.key,
                                        ExtraArgs={'ACL': request.acl},
                                        Config=self._transfer_config)
        except ClientError as e:
            raise translate_client_error(e)
        except (BotoCoreError, S3UploadFailedError) as e:
            raise TransportError(reason=str(e))
        return self.location(request.bucket, request.key)
