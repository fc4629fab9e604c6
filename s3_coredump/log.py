################################################################################
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
################################################################################
""" Logger setup for the core dump handler"""

import logging
import sys

from .common.constants import LOG
from .common.constants import LOG_DATE_FORMAT
from .common.constants import LOG_FORMAT

OSLO_CONFIG_LOG = logging.getLogger('oslo_config')


def _attach(logger, handler, level):
    for old_handler in list(logger.handlers):
        logger.removeHandler(old_handler)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def setup_logging(conf):
    """Attach a single handler to LOG, on stderr unless log_file is set.

    oslo.config shares the handler. Its warnings, such as the use of a
    deprecated flag name, are only emitted with debug enabled.
    """
    if conf.log_file:
        handler = logging.FileHandler(conf.log_file)
    else:
        handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    _attach(LOG, handler, logging.DEBUG if conf.debug else logging.INFO)
    _attach(OSLO_CONFIG_LOG, handler, logging.WARNING if conf.debug else logging.ERROR)
    return handler
