################################################################################
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
################################################################################


class ReadOnlyStream(object):
    """Forward-only view over a byte stream.

    Only ``read`` is exported. s3transfer checks ``seekable``, ``seek`` and
    ``tell`` to decide whether it may rewind the body; a kernel pipe cannot
    be rewound, so none of them exist here even when the wrapped source has
    them. Unknown attributes are not forwarded to the source.
    """

    __slots__ = ('_source', '_bytes_read')

    def __init__(self, source):
        self._source = source
        self._bytes_read = 0

    def read(self, size=-1):
        if size is None:
            size = -1
        data = self._source.read(size)
        if not data:
            return b''
        self._bytes_read += len(data)
        return data

    def readable(self):
        return True

    @property
    def bytes_read(self):
        return self._bytes_read
