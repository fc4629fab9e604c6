################################################################################
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
################################################################################
import sys

from oslo_config import cfg

from . import config
from . import coredump
from .common.constants import LOG
from .common.exception import S3CoreDumpException
from .log import setup_logging


def main(argv=None):
    # https://man7.org/linux/man-pages/man5/core.5.html
    # |/usr/bin/s3-coredump [options] %h %e %P %t
    if argv is None:
        argv = sys.argv[1:]

    try:
        conf = config.parse_args(argv)
    except cfg.Error as e:
        LOG.error("Invalid configuration: %s" % e)
        sys.exit(-1)
    setup_logging(conf)

    try:
        metadata = coredump.metadata_from_args(conf.dump_args)
        coredump.CoreDumpHandler(metadata, sys.stdin.buffer, conf)
    except S3CoreDumpException as e:
        LOG.error("Failed to upload core dump: %s" % e)
        sys.exit(-1)


if __name__ == "__main__":
    main()
