################################################################################
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
################################################################################
from collections import namedtuple

from .common.constants import CORE_KEY_SEPARATOR
from .common.constants import CORE_KEY_SUFFIX


DumpMetadata = namedtuple('DumpMetadata',
                          'hostname executable pid timestamp')

_FIELD_ESCAPES = {
    ord('%'): '%25',
    ord('.'): '%2E',
    ord('/'): '%2F',
}


def escape_field(field):
    """Percent-encode the characters that would make a key ambiguous.

    e.g.
        escape_field('python3.11') -> 'python3%2E11'
    """
    return field.translate(_FIELD_ESCAPES)


def build_key(hostname, executable, pid, timestamp, escape=False):
    """Function that builds the object key of a core dump.

    The fields map to the kernel core_pattern specifiers %h, %e, %P and %t.

    e.g.
        build_key('host1', 'myapp', '1234', '1700000000')
        returns 'host1.myapp.1234.1700000000.core'

    Parameters
    ----------
    hostname : str
    executable : str
    pid : str
    timestamp : str
        Time of the dump in seconds since the epoch (UTC).
    escape : bool
        Percent-encode '%', '.' and '/' in every field so that distinct
        fields never produce the same key.

    Returns
    -------
    str
        The object key
    """
    fields = [hostname, executable, pid, timestamp]
    if escape:
        fields = [escape_field(field) for field in fields]
    fields.append(CORE_KEY_SUFFIX)
    return CORE_KEY_SEPARATOR.join(fields)


def key_from_metadata(metadata, escape=False):
    return build_key(metadata.hostname, metadata.executable,
                     metadata.pid, metadata.timestamp, escape=escape)
