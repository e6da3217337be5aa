# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------
"""This module defines constants for use across the CLI package"""

import os

VERSION = "0.1.0"
CLI_NAME = "iotcore"
PACKAGE_NAME = "iot-core-cli"
PACKAGE_ROOT = os.path.dirname(os.path.abspath(__file__))
USER_AGENT = "IotCoreCli/{}".format(VERSION)

CONFIG_ENV_VAR_PREFIX = "IOTCORE"
CONFIG_DIR = os.environ.get(f"{CONFIG_ENV_VAR_PREFIX}_CONFIG_DIR") or os.path.expanduser(
    os.path.join("~", f".{CLI_NAME}")
)
CONFIG_DEFAULTS_SECTION = "defaults"
CONFIG_PROJECT_KEY = "project"
CONFIG_CORE_SECTION = "core"
CONFIG_ENDPOINT_KEY = "client_endpoint"

PROJECT_ENV_VAR = "GOOGLE_CLOUD_PROJECT"
CREDENTIALS_ENV_VAR = "GOOGLE_APPLICATION_CREDENTIALS"
