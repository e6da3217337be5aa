# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from typing import Optional

from knack.log import get_logger

from .common import CredentialFormat
from .providers.devices import Devices

logger = get_logger(__name__)


def create_es_device(
    location_id: Optional[str] = None,
    registry_id: Optional[str] = None,
    device_id: Optional[str] = None,
    public_key_path: Optional[str] = None,
    project_id: Optional[str] = None,
):
    Devices(project_id=project_id).create(
        location_id=location_id,
        registry_id=registry_id,
        device_id=device_id,
        credential_format=CredentialFormat.es256_pem,
        key_path=public_key_path,
    )


def create_rsa_device(
    location_id: Optional[str] = None,
    registry_id: Optional[str] = None,
    device_id: Optional[str] = None,
    public_key_path: Optional[str] = None,
    project_id: Optional[str] = None,
):
    Devices(project_id=project_id).create(
        location_id=location_id,
        registry_id=registry_id,
        device_id=device_id,
        credential_format=CredentialFormat.rsa_x509_pem,
        key_path=public_key_path,
    )


def create_unauth_device(
    location_id: Optional[str] = None,
    registry_id: Optional[str] = None,
    device_id: Optional[str] = None,
    project_id: Optional[str] = None,
):
    Devices(project_id=project_id).create(
        location_id=location_id,
        registry_id=registry_id,
        device_id=device_id,
        credential_format=CredentialFormat.unauthenticated,
    )


def delete_device(
    location_id: Optional[str] = None,
    registry_id: Optional[str] = None,
    device_id: Optional[str] = None,
    project_id: Optional[str] = None,
):
    Devices(project_id=project_id).delete(location_id=location_id, registry_id=registry_id, device_id=device_id)


def get_device(
    location_id: Optional[str] = None,
    registry_id: Optional[str] = None,
    device_id: Optional[str] = None,
    project_id: Optional[str] = None,
):
    Devices(project_id=project_id).show(location_id=location_id, registry_id=registry_id, device_id=device_id)


def list_devices(
    location_id: Optional[str] = None,
    registry_id: Optional[str] = None,
    project_id: Optional[str] = None,
):
    Devices(project_id=project_id).list(location_id=location_id, registry_id=registry_id)


def patch_es_device(
    location_id: Optional[str] = None,
    registry_id: Optional[str] = None,
    device_id: Optional[str] = None,
    public_key_path: Optional[str] = None,
    project_id: Optional[str] = None,
):
    Devices(project_id=project_id).update_credentials(
        location_id=location_id,
        registry_id=registry_id,
        device_id=device_id,
        credential_format=CredentialFormat.es256_pem,
        key_path=public_key_path,
    )


def patch_rsa_device(
    location_id: Optional[str] = None,
    registry_id: Optional[str] = None,
    device_id: Optional[str] = None,
    public_key_path: Optional[str] = None,
    project_id: Optional[str] = None,
):
    Devices(project_id=project_id).update_credentials(
        location_id=location_id,
        registry_id=registry_id,
        device_id=device_id,
        credential_format=CredentialFormat.rsa_x509_pem,
        key_path=public_key_path,
    )


# CONFIG AND STATE COMMANDS
def get_device_configs(
    location_id: Optional[str] = None,
    registry_id: Optional[str] = None,
    device_id: Optional[str] = None,
    project_id: Optional[str] = None,
):
    Devices(project_id=project_id).list_configs(
        location_id=location_id, registry_id=registry_id, device_id=device_id
    )


def get_device_states(
    location_id: Optional[str] = None,
    registry_id: Optional[str] = None,
    device_id: Optional[str] = None,
    project_id: Optional[str] = None,
):
    Devices(project_id=project_id).list_states(
        location_id=location_id, registry_id=registry_id, device_id=device_id
    )


def send_configuration(
    location_id: Optional[str] = None,
    registry_id: Optional[str] = None,
    device_id: Optional[str] = None,
    data: Optional[str] = None,
    project_id: Optional[str] = None,
):
    Devices(project_id=project_id).send_configuration(
        location_id=location_id,
        registry_id=registry_id,
        device_id=device_id,
        data=data,
    )
