# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from typing import TYPE_CHECKING, Iterable, Optional

from knack.log import get_logger
from rich.console import Console

from ...constants import CONFIG_CORE_SECTION, CONFIG_ENDPOINT_KEY
from ..util.common import get_cli_config, resolve_project_id
from ..util.iot_client import get_device_manager_client
from ..util.resource_paths import build_collection_path, build_resource_path, ensure_identifier

if TYPE_CHECKING:
    from google.cloud.iot_v1 import DeviceManagerClient

logger = get_logger(__name__)
console = Console(stderr=True, highlight=False)


class DeviceManagerBaseProvider:
    """
    Shared plumbing for commands against the device manager: project scoping,
    resource paths, client and report output.
    """

    def __init__(self, project_id: str, client: Optional["DeviceManagerClient"] = None):
        self.project_id = project_id if project_id is not None else resolve_project_id()
        self._client = client

    @property
    def client(self) -> "DeviceManagerClient":
        # created on first use, after resource paths are built
        if self._client is None:
            endpoint = get_cli_config().get(CONFIG_CORE_SECTION, CONFIG_ENDPOINT_KEY, fallback=None)
            self._client = get_device_manager_client(api_endpoint=endpoint)
        return self._client

    def location_path(self, location_id: str) -> str:
        return build_resource_path(project_id=self.project_id, location_id=location_id)

    def registry_path(self, location_id: str, registry_id: str) -> str:
        path = build_resource_path(project_id=self.project_id, location_id=location_id, registry_id=registry_id)
        ensure_identifier("registry", registry_id)
        return path

    def device_path(self, location_id: str, registry_id: str, device_id: str) -> str:
        path = build_resource_path(
            project_id=self.project_id, location_id=location_id, registry_id=registry_id, device_id=device_id
        )
        ensure_identifier("registry", registry_id)
        ensure_identifier("device", device_id)
        return path

    def collection_path(self, location_id: str, collection: str, registry_id: Optional[str] = None) -> str:
        return build_collection_path(
            project_id=self.project_id, location_id=location_id, collection=collection, registry_id=registry_id
        )

    @staticmethod
    def emit(lines: Iterable[str]):
        for line in lines:
            print(line)
