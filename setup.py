#!/usr/bin/env python
# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

import re
import os.path
from io import open
from setuptools import setup, find_packages


PACKAGE_REF_NAME = "iotcore"

# Version extraction inspired from 'requests'
with open(os.path.join(PACKAGE_REF_NAME, "constants.py"), "r", encoding="utf-8") as fd:
    constants_raw = fd.read()
    VERSION = re.search(r'^VERSION\s*=\s*[\'"]([^\'"]*)[\'"]', constants_raw, re.MULTILINE).group(1)
    PACKAGE_NAME = re.search(r'^PACKAGE_NAME\s*=\s*[\'"]([^\'"]*)[\'"]', constants_raw, re.MULTILINE).group(1)
    CLI_NAME = re.search(r'^CLI_NAME\s*=\s*[\'"]([^\'"]*)[\'"]', constants_raw, re.MULTILINE).group(1)


if not VERSION:
    raise RuntimeError("Cannot find version information")

if not PACKAGE_NAME:
    raise RuntimeError("Cannot find package information")


DEPENDENCIES = [
    "knack>=0.11.0,<1.0",
    "rich>=13.6,<15.0",
    "google-cloud-iot>=2.8.0,<3.0",
    "google-api-core>=2.11.0,<3.0",
    "grpc-google-iam-v1>=0.12.4,<1.0",
    "protobuf",
]

TEST_DEPENDENCIES = [
    "pytest>=7.4",
    "pytest-mock>=3.11",
]

CLASSIFIERS = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Programming Language :: Python",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.8",
    "Programming Language :: Python :: 3.9",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
]

short_description = "Command line tool for Cloud IoT device registries and devices."

setup(
    name=PACKAGE_NAME,
    version=VERSION,
    python_requires=">=3.8",
    description=short_description,
    long_description="{} Each command performs one call against the device manager API.".format(
        short_description
    ),
    license="MIT",
    classifiers=CLASSIFIERS,
    packages=find_packages(exclude=["tests", "*.tests", "*.tests.*", "scripts"]),
    install_requires=DEPENDENCIES,
    extras_require={"test": TEST_DEPENDENCIES},
    entry_points={
        "console_scripts": [
            "{} = {}.__main__:main".format(CLI_NAME, PACKAGE_REF_NAME),
        ]
    },
    zip_safe=False,
)
