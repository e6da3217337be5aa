# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from typing import Optional

from knack.log import get_logger

from .providers.registries import Registries

logger = get_logger(__name__)


def create_registry(
    location_id: Optional[str] = None,
    registry_id: Optional[str] = None,
    pubsub_topic: Optional[str] = None,
    project_id: Optional[str] = None,
):
    Registries(project_id=project_id).create(
        location_id=location_id,
        registry_id=registry_id,
        pubsub_topic=pubsub_topic,
    )


def delete_registry(
    location_id: Optional[str] = None,
    registry_id: Optional[str] = None,
    project_id: Optional[str] = None,
):
    Registries(project_id=project_id).delete(location_id=location_id, registry_id=registry_id)


def get_registry(
    location_id: Optional[str] = None,
    registry_id: Optional[str] = None,
    project_id: Optional[str] = None,
):
    Registries(project_id=project_id).show(location_id=location_id, registry_id=registry_id)


def list_registries(location_id: Optional[str] = None, project_id: Optional[str] = None):
    Registries(project_id=project_id).list(location_id=location_id)


# IAM COMMANDS
def get_iam_policy(
    location_id: Optional[str] = None,
    registry_id: Optional[str] = None,
    project_id: Optional[str] = None,
):
    Registries(project_id=project_id).get_iam_policy(location_id=location_id, registry_id=registry_id)


def set_iam_policy(
    location_id: Optional[str] = None,
    registry_id: Optional[str] = None,
    member: Optional[str] = None,
    role: Optional[str] = None,
    project_id: Optional[str] = None,
):
    Registries(project_id=project_id).set_iam_policy(
        location_id=location_id,
        registry_id=registry_id,
        member=member,
        role=role,
    )
