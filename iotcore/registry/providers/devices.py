# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from typing import List, Optional, Union

from knack.log import get_logger

from ..common import CredentialFormat, ResourceCollection
from ..util.common import to_payload_bytes
from ..util.file_operations import read_public_key
from ..util.resource_paths import ensure_identifier
from .base import DeviceManagerBaseProvider, console
from .formatters import (
    format_config_updated,
    format_deleted_device,
    format_device,
    format_device_configs,
    format_device_list,
    format_device_states,
)

logger = get_logger(__name__)

CREDENTIALS_UPDATE_MASK = "credentials"


def build_device_credentials(credential_format: Union[CredentialFormat, str], key_path: Optional[str] = None) -> list:
    """
    Device credential list for the given format. Key material is the exact content of the file at key_path.
    """
    from google.cloud import iot_v1

    credential_format = CredentialFormat(credential_format)
    if not credential_format.has_key:
        return []

    key = read_public_key(key_path)
    public_key = iot_v1.PublicKeyCredential(
        format=iot_v1.PublicKeyFormat[credential_format.value],
        key=key,
    )
    return [iot_v1.DeviceCredential(public_key=public_key)]


class Devices(DeviceManagerBaseProvider):
    def create(
        self,
        location_id: str,
        registry_id: str,
        device_id: str,
        credential_format: Union[CredentialFormat, str] = CredentialFormat.unauthenticated,
        key_path: Optional[str] = None,
    ) -> List[str]:
        from google.cloud import iot_v1

        parent = self.registry_path(location_id, registry_id)
        ensure_identifier("device", device_id)
        credentials = build_device_credentials(credential_format=credential_format, key_path=key_path)
        device = iot_v1.Device(id=device_id, credentials=credentials)

        with console.status(f"Creating {device_id}..."):
            result = self.client.create_device(parent=parent, device=device)

        lines = format_device(result)
        self.emit(lines)
        return lines

    def update_credentials(
        self,
        location_id: str,
        registry_id: str,
        device_id: str,
        credential_format: Union[CredentialFormat, str],
        key_path: str,
    ) -> List[str]:
        from google.cloud import iot_v1
        from google.protobuf import field_mask_pb2

        name = self.device_path(location_id, registry_id, device_id)
        device = iot_v1.Device(
            name=name,
            credentials=build_device_credentials(credential_format=credential_format, key_path=key_path),
        )
        update_mask = field_mask_pb2.FieldMask(paths=[CREDENTIALS_UPDATE_MASK])

        with console.status(f"Updating {device_id}..."):
            result = self.client.update_device(device=device, update_mask=update_mask)

        lines = format_device(result, include_credentials=True)
        self.emit(lines)
        return lines

    def delete(self, location_id: str, registry_id: str, device_id: str) -> List[str]:
        name = self.device_path(location_id, registry_id, device_id)

        with console.status(f"Deleting {device_id}..."):
            self.client.delete_device(name=name)

        lines = format_deleted_device()
        self.emit(lines)
        return lines

    def show(self, location_id: str, registry_id: str, device_id: str) -> List[str]:
        name = self.device_path(location_id, registry_id, device_id)
        device = self.client.get_device(name=name)

        lines = format_device(device, include_credentials=True)
        self.emit(lines)
        return lines

    def list(self, location_id: str, registry_id: str) -> List[str]:
        parent = self.registry_path(location_id, registry_id)
        collection = self.collection_path(location_id, ResourceCollection.devices, registry_id=registry_id)
        logger.debug("Reading a single page of %s", collection)

        with console.status(f"Listing {collection}..."):
            response = self.client.list_devices(parent=parent)

        lines = format_device_list(response.devices)
        self.emit(lines)
        return lines

    def list_configs(self, location_id: str, registry_id: str, device_id: str) -> List[str]:
        name = self.device_path(location_id, registry_id, device_id)
        response = self.client.list_device_config_versions(name=name)

        lines = format_device_configs(response.device_configs)
        self.emit(lines)
        return lines

    def list_states(self, location_id: str, registry_id: str, device_id: str) -> List[str]:
        name = self.device_path(location_id, registry_id, device_id)
        response = self.client.list_device_states(name=name)

        lines = format_device_states(response.device_states)
        self.emit(lines)
        return lines

    def send_configuration(
        self, location_id: str, registry_id: str, device_id: str, data: Optional[Union[str, bytes]] = None
    ) -> List[str]:
        name = self.device_path(location_id, registry_id, device_id)

        with console.status(f"Updating configuration of {device_id}..."):
            self.client.modify_cloud_to_device_config(name=name, binary_data=to_payload_bytes(data))

        lines = format_config_updated()
        self.emit(lines)
        return lines
