################################################################################
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
################################################################################
from s3transfer.compat import seekable

from s3_coredump.stream import ReadOnlyStream
from s3_coredump.tests.base import BaseTestCase
from s3_coredump.tests.base import SeekableSource


class TestReadOnlyStream(BaseTestCase):

    def setUp(self):
        super(TestReadOnlyStream, self).setUp()
        self.source = SeekableSource(b"0123456789" * 10)
        self.stream = ReadOnlyStream(self.source)

    def test_no_positioning_operations(self):
        for name in ('seek', 'tell', 'seekable', 'fileno', 'peek', 'readinto', 'truncate'):
            self.assertFalse(hasattr(self.stream, name), name)
            self.assertRaises(AttributeError, getattr, self.stream, name)

    def test_source_attributes_not_forwarded(self):
        self.assertTrue(hasattr(self.source, 'getvalue'))
        self.assertFalse(hasattr(self.stream, 'getvalue'))

    def test_no_new_attributes(self):
        self.assertRaises(AttributeError, setattr, self.stream, 'seek', lambda *a: 0)

    def test_not_seekable_for_s3transfer(self):
        self.assertTrue(seekable(self.source))
        self.assertFalse(seekable(self.stream))

    def test_read_forward(self):
        self.assertEqual(b"0123", self.stream.read(4))
        self.assertEqual(b"4567", self.stream.read(4))
        self.assertEqual(8, self.stream.bytes_read)
        self.assertTrue(self.stream.readable())

    def test_read_all(self):
        self.stream.read(10)
        self.assertEqual(b"0123456789" * 9, self.stream.read())
        self.assertEqual(b"", self.stream.read())
        self.assertEqual(100, self.stream.bytes_read)
        self.assertEqual(0, self.source.seek_calls)

    def test_read_none_size(self):
        self.assertEqual(100, len(self.stream.read(None)))

    def test_empty_source(self):
        stream = ReadOnlyStream(SeekableSource(b""))
        self.assertEqual(b"", stream.read(1024))
        self.assertEqual(0, stream.bytes_read)
