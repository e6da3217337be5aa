# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

"""
formatters: Turns device manager responses into report lines.

Every function returns the list of lines to print, no I/O happens here.
"""

from typing import Any, Iterable, List, Optional

from ..util.common import decode_payload
from . import user_strings as strings


def format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    # proto enums print by name
    name = getattr(value, "name", None)
    if isinstance(name, str) and hasattr(value, "value"):
        return name
    if hasattr(value, "rfc3339"):
        return value.rfc3339()
    if hasattr(value, "isoformat"):
        return value.isoformat()
    if isinstance(value, bytes):
        return decode_payload(value)
    return str(value)


def _first_member(binding) -> str:
    members = list(binding.members)
    return members[0] if members else ""


# Registries
def format_created_registry(registry) -> List[str]:
    return [strings.CREATED_REGISTRY_MSG.format(registry.name)]


def format_deleted_registry(registry_id: str) -> List[str]:
    return [strings.DELETED_REGISTRY_MSG.format(registry_id)]


def format_registry(registry) -> List[str]:
    lines = [
        strings.REGISTRY_HEADER.format(registry.id),
        strings.REGISTRY_HTTP_CONFIG.format(format_value(registry.http_config.http_enabled_state)),
        strings.REGISTRY_MQTT_CONFIG.format(format_value(registry.mqtt_config.mqtt_enabled_state)),
        strings.REGISTRY_NAME.format(registry.name),
    ]
    configs = list(registry.event_notification_configs or [])
    if configs:
        lines.extend(strings.REGISTRY_TOPIC.format(config.pubsub_topic_name) for config in configs)
    else:
        lines.append(strings.REGISTRY_NO_TOPICS)
    return lines


def format_registry_list(registries: Optional[Iterable]) -> List[str]:
    lines = [strings.REGISTRIES_HEADER]
    registries = list(registries or [])
    if not registries:
        lines.append(strings.REGISTRIES_NONE_FOUND)
        return lines
    lines.extend(strings.REGISTRIES_ITEM.format(registry.id) for registry in registries)
    return lines


# IAM
def format_iam_policy(policy) -> List[str]:
    bindings = list(policy.bindings or [])
    if not bindings:
        return [strings.IAM_NO_BINDINGS]
    return [strings.IAM_BINDING.format(binding.role, _first_member(binding)) for binding in bindings]


def format_iam_policy_set(policy) -> List[str]:
    bindings = list(policy.bindings or [])
    if not bindings:
        return [strings.IAM_NO_BINDINGS]
    lines = [strings.IAM_BINDING_SET_HEADER]
    lines.extend(strings.IAM_BINDING_SET_ITEM.format(binding.role, _first_member(binding)) for binding in bindings)
    return lines


# Devices
def format_device(device, include_credentials: bool = False) -> List[str]:
    lines = [
        strings.DEVICE_HEADER.format(device.id),
        strings.DEVICE_BLOCKED.format(format_value(device.blocked)),
        strings.DEVICE_LAST_EVENT_TIME.format(format_value(device.last_event_time)),
        strings.DEVICE_LAST_STATE_TIME.format(format_value(device.last_state_time)),
        strings.DEVICE_NAME.format(device.name),
    ]
    if not include_credentials:
        return lines

    lines.append(strings.DEVICE_CERT_FORMATS_HEADER)
    credentials = list(device.credentials or [])
    if credentials:
        lines.extend(
            strings.DEVICE_CERT_FORMAT.format(format_value(credential.public_key.format))
            for credential in credentials
        )
    else:
        lines.append(strings.DEVICE_NO_CERTS)
    return lines


def format_deleted_device() -> List[str]:
    return [strings.DELETED_DEVICE_MSG]


def format_device_list(devices: Optional[Iterable]) -> List[str]:
    lines = [strings.DEVICES_HEADER]
    devices = list(devices or [])
    if not devices:
        lines.append(strings.DEVICES_NONE_FOUND)
        return lines
    lines.extend(strings.DEVICES_ITEM.format(device.id) for device in devices)
    return lines


def format_device_configs(configs: Optional[Iterable]) -> List[str]:
    configs = list(configs or [])
    if not configs:
        return [strings.DEVICE_NO_CONFIGS]
    return [
        strings.DEVICE_CONFIG_VERSION.format(config.version, decode_payload(config.binary_data))
        for config in configs
    ]


def format_device_states(states: Optional[Iterable]) -> List[str]:
    states = list(states or [])
    if not states:
        return [strings.DEVICE_NO_STATES]
    return [
        strings.DEVICE_STATE.format(format_value(state.update_time), decode_payload(state.binary_data))
        for state in states
    ]


def format_config_updated() -> List[str]:
    return [strings.CONFIG_UPDATED_MSG]
