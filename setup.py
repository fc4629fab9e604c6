#!/usr/bin/env python
#
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
import setuptools

setuptools.setup(
    name='s3_coredump',
    version='1.0.0',
    description='Kernel core_pattern handler uploading core dumps to S3',
    license='Apache-2.0',
    python_requires='>=3.7',
    install_requires=['boto3', 'botocore', 's3transfer', 'oslo.config', 'requests'],
    extras_require={
        'test': ['fixtures', 'mock', 'testtools', 'stestr', 'pytest'],
    },
    packages=['s3_coredump', 's3_coredump.common', 's3_coredump.tests'],
    include_package_data=True,
    entry_points={
        'console_scripts': [
            's3-coredump = s3_coredump.__main__:main',
        ],
        'oslo.config.opts': [
            's3_coredump = s3_coredump.config:list_opts',
        ],
    }
)
