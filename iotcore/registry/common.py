# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

"""
shared: Define shared data types(enums), errors and constant strings.

"""

from enum import Enum

from knack.util import CLIError


class ListableEnum(Enum):
    @classmethod
    def list(cls):
        return [c.value for c in cls]


class CommandName(ListableEnum):
    """
    Names of the commands exposed by the CLI.
    """

    # Registry management
    create_registry = "create_registry"
    delete_registry = "delete_registry"
    get_iam_policy = "get_iam_policy"
    get_registry = "get_registry"
    list_registries = "list_registries"
    set_iam_policy = "set_iam_policy"

    # Device management
    create_es_device = "create_es_device"
    create_rsa_device = "create_rsa_device"
    create_unauth_device = "create_unauth_device"
    delete_device = "delete_device"
    get_device = "get_device"
    get_device_configs = "get_device_configs"
    get_device_states = "get_device_states"
    list_devices = "list_devices"
    patch_es_device = "patch_es_device"
    patch_rsa_device = "patch_rsa_device"
    send_configuration = "send_configuration"


class CredentialFormat(ListableEnum):
    """
    Public key material attached to a device.
    """

    es256_pem = "ES256_PEM"
    rsa_x509_pem = "RSA_X509_PEM"
    unauthenticated = "unauthenticated"

    @property
    def has_key(self) -> bool:
        return self is not CredentialFormat.unauthenticated


class ResourceCollection(ListableEnum):
    """
    Collection segments of a resource path.
    """

    registries = "registries"
    devices = "devices"


# Errors
class IotCoreError(CLIError):
    """
    Base error for the CLI. Surfaces as a single error line with a non-zero exit code.
    """


class FileOperationError(IotCoreError):
    pass


class RequiredArgumentMissingError(IotCoreError):
    pass


class InvalidArgumentValueError(IotCoreError):
    pass
