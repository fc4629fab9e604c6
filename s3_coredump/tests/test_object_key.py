################################################################################
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
################################################################################
from testtools import TestCase

from s3_coredump import object_key
from s3_coredump.tests.test_data import KEY_EXAMPLES


class TestObjectKey(TestCase):

    def test_build_key(self):
        """Test for object_key.build_key

        Using the KEY_EXAMPLES from test_data, the key is checked with and
        without the escaping of the fields.
        """
        for fields, escape, expected_key in KEY_EXAMPLES:
            self.assertEqual(expected_key, object_key.build_key(*fields, escape=escape))

    def test_build_key_is_stable(self):
        fields = ("host1", "myapp", "4242", "1700000000")
        keys = set(object_key.build_key(*fields) for _ in range(5))
        self.assertEqual({"host1.myapp.4242.1700000000.core"}, keys)

    def test_escaped_keys_do_not_collide(self):
        first = object_key.build_key("host1", "my.app", "1", "2", escape=True)
        second = object_key.build_key("host1.my", "app", "1", "2", escape=True)
        self.assertNotEqual(first, second)

    def test_unescaped_keys_collide(self):
        first = object_key.build_key("host1", "my.app", "1", "2")
        second = object_key.build_key("host1.my", "app", "1", "2")
        self.assertEqual(first, second)

    def test_key_from_metadata(self):
        metadata = object_key.DumpMetadata("host1", "myapp", "4242", "1700000000")
        self.assertEqual("host1.myapp.4242.1700000000.core",
                         object_key.key_from_metadata(metadata))

    def test_dump_metadata_is_immutable(self):
        metadata = object_key.DumpMetadata("host1", "myapp", "4242", "1700000000")
        self.assertRaises(AttributeError, setattr, metadata, "pid", "1")

    def test_escape_field(self):
        self.assertEqual("a%25b%2Ec%2Fd", object_key.escape_field("a%b.c/d"))
        self.assertEqual("plain", object_key.escape_field("plain"))
