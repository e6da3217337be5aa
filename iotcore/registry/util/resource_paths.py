# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

"""
resource_paths: Builds resource names for the device manager hierarchy.

projects/{project}/locations/{location}[/registries/{registry}[/devices/{device}]]

Identifiers are interpolated as given. Charset validation is left to the service.
"""

from typing import Optional

from knack.log import get_logger

from ..common import InvalidArgumentValueError, RequiredArgumentMissingError, ResourceCollection

logger = get_logger(__name__)


def build_resource_path(
    project_id: str,
    location_id: str,
    registry_id: Optional[str] = None,
    device_id: Optional[str] = None,
) -> str:
    ensure_identifier("project", project_id)
    ensure_identifier("location", location_id)

    segments = [f"projects/{project_id}", f"locations/{location_id}"]
    if device_id and not registry_id:
        raise RequiredArgumentMissingError(f"A registry id is required to address device '{device_id}'.")
    if registry_id:
        segments.append(f"registries/{registry_id}")
    if device_id:
        segments.append(f"devices/{device_id}")

    path = "/".join(segments)
    logger.debug("Resource path: %s", path)
    return path


def build_collection_path(
    project_id: str,
    location_id: str,
    collection: str,
    registry_id: Optional[str] = None,
) -> str:
    if isinstance(collection, ResourceCollection):
        collection = collection.value
    if collection not in ResourceCollection.list():
        raise InvalidArgumentValueError(
            f"Invalid collection '{collection}'. Allowed values: {', '.join(ResourceCollection.list())}."
        )
    if collection == ResourceCollection.devices.value:
        ensure_identifier("registry", registry_id)
    else:
        registry_id = None

    parent = build_resource_path(project_id=project_id, location_id=location_id, registry_id=registry_id)
    return f"{parent}/{collection}"


def ensure_identifier(label: str, value: Optional[str]):
    if not value:
        hint = ""
        if label == "project":
            from ...constants import PROJECT_ENV_VAR

            hint = f" Set {PROJECT_ENV_VAR} or pass --project."
        raise RequiredArgumentMissingError(f"A {label} id is required.{hint}")
