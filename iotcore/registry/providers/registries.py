# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from typing import List, Optional

from knack.log import get_logger

from ..common import ResourceCollection
from ..util.resource_paths import ensure_identifier
from .base import DeviceManagerBaseProvider, console
from .formatters import (
    format_created_registry,
    format_deleted_registry,
    format_iam_policy,
    format_iam_policy_set,
    format_registry,
    format_registry_list,
)

logger = get_logger(__name__)


class Registries(DeviceManagerBaseProvider):
    def create(self, location_id: str, registry_id: str, pubsub_topic: Optional[str] = None) -> List[str]:
        from google.cloud import iot_v1

        parent = self.location_path(location_id)
        ensure_identifier("registry", registry_id)
        registry = iot_v1.DeviceRegistry(
            id=registry_id,
            event_notification_configs=[iot_v1.EventNotificationConfig(pubsub_topic_name=pubsub_topic)],
        )

        with console.status(f"Creating {registry_id}..."):
            result = self.client.create_device_registry(parent=parent, device_registry=registry)

        lines = format_created_registry(result)
        self.emit(lines)
        return lines

    def delete(self, location_id: str, registry_id: str) -> List[str]:
        name = self.registry_path(location_id, registry_id)

        with console.status(f"Deleting {registry_id}..."):
            self.client.delete_device_registry(name=name)

        lines = format_deleted_registry(registry_id)
        self.emit(lines)
        return lines

    def show(self, location_id: str, registry_id: str) -> List[str]:
        name = self.registry_path(location_id, registry_id)
        registry = self.client.get_device_registry(name=name)

        lines = format_registry(registry)
        self.emit(lines)
        return lines

    def list(self, location_id: str) -> List[str]:
        parent = self.location_path(location_id)
        collection = self.collection_path(location_id, ResourceCollection.registries)
        logger.debug("Reading a single page of %s", collection)

        with console.status(f"Listing {collection}..."):
            response = self.client.list_device_registries(parent=parent)

        lines = format_registry_list(response.device_registries)
        self.emit(lines)
        return lines

    def get_iam_policy(self, location_id: str, registry_id: str) -> List[str]:
        resource = self.registry_path(location_id, registry_id)
        policy = self.client.get_iam_policy(request={"resource": resource})

        lines = format_iam_policy(policy)
        self.emit(lines)
        return lines

    def set_iam_policy(self, location_id: str, registry_id: str, member: str, role: str) -> List[str]:
        resource = self.registry_path(location_id, registry_id)
        policy = build_single_binding_policy(member=member, role=role)

        with console.status(f"Setting IAM policy on {registry_id}..."):
            result = self.client.set_iam_policy(request={"resource": resource, "policy": policy})

        lines = format_iam_policy_set(result)
        self.emit(lines)
        return lines


def build_single_binding_policy(member: str, role: str):
    """
    Policy holding exactly one binding of role to a one element member list.
    """
    from google.iam.v1 import policy_pb2

    members = [member] if member else []
    return policy_pb2.Policy(bindings=[policy_pb2.Binding(role=role or "", members=members)])
