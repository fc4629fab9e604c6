################################################################################
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
################################################################################
import logging


PROJECT = "s3-coredump"

DEFAULT_BUCKET = "s3-coredump"
DEFAULT_REGION = "us-east-2"
DEFAULT_PROFILE = "default"

# ACL that keeps the bucket owner in control of objects written by other accounts
BUCKET_OWNER_FULL_CONTROL = "bucket-owner-full-control"

CORE_KEY_SUFFIX = "core"
CORE_KEY_SEPARATOR = "."

# Same default as s3transfer.TransferConfig
MULTIPART_CHUNKSIZE = 8 * 1024 * 1024

METADATA_ENDPOINT = "http://169.254.169.254"
METADATA_TOKEN_PATH = "/latest/api/token"
METADATA_ROLE_PATH = "/latest/meta-data/iam/security-credentials/"
METADATA_TOKEN_TTL = 21600
METADATA_TIMEOUT = 1

ENV_ACCESS_KEYS = ("AWS_ACCESS_KEY_ID", "AWS_ACCESS_KEY")
ENV_SECRET_KEYS = ("AWS_SECRET_ACCESS_KEY", "AWS_SECRET_KEY")
ENV_SESSION_TOKEN = "AWS_SESSION_TOKEN"

LOG_FORMAT = '%(asctime)s %(levelname)s %(message)s'
LOG_DATE_FORMAT = '%FT%T'

LOG = logging.getLogger(PROJECT)
