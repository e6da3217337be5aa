# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

"""
common: Defines common utility functions and components.

"""

from typing import Optional, Union

from knack.log import get_logger

logger = get_logger(__name__)


def resolve_project_id(project_id: Optional[str] = None, config=None) -> str:
    """
    Resolves the project id in order: explicit value, environment variable, CLI config default.

    An unresolved project id yields the empty string.
    """
    from os import getenv

    from ...constants import CONFIG_DEFAULTS_SECTION, CONFIG_PROJECT_KEY, PROJECT_ENV_VAR

    if project_id:
        return project_id

    project_id = getenv(PROJECT_ENV_VAR)
    if project_id:
        logger.debug("Using project '%s' from %s.", project_id, PROJECT_ENV_VAR)
        return project_id

    if config is not None:
        project_id = config.get(CONFIG_DEFAULTS_SECTION, CONFIG_PROJECT_KEY, fallback=None)
        if project_id:
            logger.debug("Using project '%s' from the CLI config.", project_id)
            return project_id

    logger.warning("No project id configured. Set %s or pass --project.", PROJECT_ENV_VAR)
    return ""


def to_payload_bytes(data: Optional[Union[str, bytes]]) -> bytes:
    if data is None:
        return b""
    if isinstance(data, bytes):
        return data
    return data.encode("utf-8")


def decode_payload(data: Optional[bytes]) -> str:
    if not data:
        return ""
    if isinstance(data, str):
        return data
    return data.decode("utf-8", errors="replace")


def get_cli_config():
    """
    CLI config backed by the same config dir and env var prefix the CLI uses.
    """
    from knack.config import CLIConfig

    from ...constants import CONFIG_DIR, CONFIG_ENV_VAR_PREFIX

    return CLIConfig(config_dir=CONFIG_DIR, config_env_var_prefix=CONFIG_ENV_VAR_PREFIX)
