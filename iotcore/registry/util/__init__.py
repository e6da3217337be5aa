# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from .common import (
    decode_payload,
    get_cli_config,
    resolve_project_id,
    to_payload_bytes,
)
from .file_operations import (
    read_file_content,
    read_public_key,
)
from .resource_paths import build_collection_path, build_resource_path, ensure_identifier

__all__ = [
    "build_collection_path",
    "build_resource_path",
    "decode_payload",
    "ensure_identifier",
    "get_cli_config",
    "read_file_content",
    "read_public_key",
    "resolve_project_id",
    "to_payload_bytes",
]
