################################################################################
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
################################################################################

TEST_BUCKET = "test-bucket"
TEST_ENDPOINT = "https://s3.us-east-2.amazonaws.com"
EXPECTED_KEY = "host1.myapp.4242.1700000000.core"
EXPECTED_LOCATION = "%s/%s/%s" % (TEST_ENDPOINT, TEST_BUCKET, EXPECTED_KEY)

STATIC_ACCESS_KEY = "AKIASTATICEXAMPLE"
STATIC_SECRET_KEY = "static/secret/EXAMPLEKEY"

ENV_ACCESS_KEY = "AKIAENVIRONEXAMPLE"
ENV_SECRET_KEY = "environ/secret/EXAMPLEKEY"

CREDENTIALS_FILE_CONTENT = """
[default]
aws_access_key_id = AKIADEFAULTEXAMPLE
aws_secret_access_key = default/secret/EXAMPLEKEY

[coredump]
aws_access_key_id = AKIACOREDUMPEXAMPLE
aws_secret_access_key = coredump/secret/EXAMPLEKEY
aws_session_token = coredump-session-token

[incomplete]
aws_access_key_id = AKIAINCOMPLETEEXAMPLE
"""

METADATA_TOKEN = "imds-session-token"
METADATA_ROLE = "coredump-uploader"
METADATA_DOCUMENT = {
    "Code": "Success",
    "LastUpdated": "2026-10-17T10:00:00Z",
    "Type": "AWS-HMAC",
    "AccessKeyId": "ASIAMETADATAEXAMPLE",
    "SecretAccessKey": "metadata/secret/EXAMPLEKEY",
    "Token": "metadata-session-token",
    "Expiration": "2026-10-17T16:00:00Z",
}

AWS_ENVIRONMENT_VARIABLES = [
    "AWS_ACCESS_KEY_ID",
    "AWS_ACCESS_KEY",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SECRET_KEY",
    "AWS_SESSION_TOKEN",
]

# (fields, escape, expected key)
KEY_EXAMPLES = [
    (("host1", "myapp", "1234", "1700000000"), False,
     "host1.myapp.1234.1700000000.core"),
    (("controller-0", "sshd", "1", "1671181200"), False,
     "controller-0.sshd.1.1671181200.core"),
    (("host1", "python3.11", "42", "1700000000"), False,
     "host1.python3.11.42.1700000000.core"),
    (("host1", "python3.11", "42", "1700000000"), True,
     "host1.python3%2E11.42.1700000000.core"),
    (("host.example.com", "a/b", "7", "1"), True,
     "host%2Eexample%2Ecom.a%2Fb.7.1.core"),
    (("host1", "100%", "7", "1"), True,
     "host1.100%25.7.1.core"),
    (("host1", "myapp", "1234", "1700000000"), True,
     "host1.myapp.1234.1700000000.core"),
]
