################################################################################
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
################################################################################
""" Define configuration info for s3-coredump"""

from oslo_config import cfg

from .common.constants import DEFAULT_BUCKET
from .common.constants import DEFAULT_REGION
from .common.constants import METADATA_ENDPOINT
from .common.constants import MULTIPART_CHUNKSIZE
from .common.constants import PROJECT

CONF = cfg.CONF

storage_opts = [
    cfg.StrOpt("bucket",
               default=DEFAULT_BUCKET,
               help="Bucket name"),
    cfg.StrOpt("region",
               default=DEFAULT_REGION,
               help="AWS region"),
    cfg.StrOpt("endpoint_url",
               default="",
               help="Endpoint of an S3 compatible store (leave blank for AWS)"),
    cfg.IntOpt("multipart_chunksize",
               default=MULTIPART_CHUNKSIZE,
               min=5 * 1024 * 1024,
               help="Part size in bytes of the streamed upload"),
    cfg.BoolOpt("escape_key_fields",
                default=False,
                help="Percent-encode percent signs, periods and slashes inside the key fields"),
]

credential_opts = [
    cfg.StrOpt("access_key",
               default="",
               deprecated_name="aws_access_key",
               help="AWS access key (leave blank to use the creds file or environment)"),
    cfg.StrOpt("secret_key",
               default="",
               deprecated_name="aws_secret_key",
               secret=True,
               help="AWS secret key (leave blank to use the creds file or environment)"),
    cfg.StrOpt("session_token",
               default="",
               deprecated_name="aws_access_token",
               secret=True,
               help="AWS session token (leave blank to use the creds file or environment)"),
    cfg.StrOpt("credentials_file",
               default="",
               deprecated_name="creds_file",
               help="Path to the AWS shared credentials file"),
    cfg.StrOpt("credentials_profile",
               default="",
               deprecated_name="creds_profile",
               help="Profile name in the shared credentials file"),
    cfg.StrOpt("metadata_endpoint",
               default=METADATA_ENDPOINT,
               help="Instance metadata service queried as last resort"),
]

logging_opts = [
    cfg.StrOpt("log_file",
               default="",
               help="Write the log to this file instead of stderr"),
    cfg.BoolOpt("debug",
                default=False,
                help="Log at debug level"),
]

# %h %e %P %t in kernel.core_pattern
dump_opts = [
    cfg.MultiStrOpt("dump_args",
                    positional=True,
                    required=False,
                    help="Hostname, executable name, pid and dump time (epoch seconds)"),
]

CONF.register_cli_opts(storage_opts)
CONF.register_cli_opts(credential_opts)
CONF.register_cli_opts(logging_opts)
CONF.register_cli_opts(dump_opts)


def parse_args(argv, default_config_files=None):
    """Load the command line and the config files into CONF.

    :param argv: command line arguments, without the program name
    :param default_config_files: config files to load when --config-file is
        not given, None searches the standard locations for the project
    """
    CONF(argv,
         project=PROJECT,
         default_config_files=default_config_files)
    return CONF


def list_opts():
    return [(None, storage_opts + credential_opts + logging_opts)]
