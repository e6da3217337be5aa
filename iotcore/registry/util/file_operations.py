# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

import os

from knack.log import get_logger

from ..common import FileOperationError

logger = get_logger(__name__)


def read_file_content(file_path: str) -> bytes:
    from pathlib import Path

    if not file_path:
        raise FileOperationError("A file path is required.")

    logger.debug("Processing %s", file_path)
    pure_path = Path(os.path.abspath(os.path.expanduser(file_path)))

    if not pure_path.exists():
        raise FileOperationError(f"{file_path} does not exist.")

    if not pure_path.is_file():
        raise FileOperationError(f"{file_path} is not a file.")

    return pure_path.read_bytes()


def read_public_key(key_path: str) -> str:
    """
    Reads PEM encoded public key material (ES256 or RSA X.509) for a device credential.
    """
    raw = read_file_content(key_path)
    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError:
        raise FileOperationError(f"Failed to decode key file {key_path}.")
    if "-----BEGIN" not in content:
        logger.warning("%s does not look like PEM encoded key material.", key_path)
    return content
