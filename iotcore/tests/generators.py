# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

import secrets
import string
from typing import List, Union

PEM_BEGIN = "-----BEGIN PUBLIC KEY-----"
PEM_END = "-----END PUBLIC KEY-----"


def generate_names(prefix: str = "", count: int = 1, max_length: int = 48) -> Union[str, List[str]]:
    """
    Generic name generator that returns a list of names. If only one
    name is generated, returns only the name as a string.
    """
    names = [(prefix + generate_random_string(force_lower=True))[:max_length] for _ in range(count)]
    return names[0] if count == 1 else names


def generate_random_string(size: int = 36, force_lower: bool = False):
    """
    Generates a crytopgraphically strong random string of the specified size.
    """
    valid_sequence = string.ascii_lowercase + string.digits
    if not force_lower:
        valid_sequence += string.ascii_uppercase
    return "".join(secrets.choice(valid_sequence) for _ in range(size))


def generate_pem_content(lines: int = 3) -> str:
    """
    PEM shaped content with random base64-like body lines. Not a valid key.
    """
    body = [generate_random_string(size=64) for _ in range(lines)]
    return "\n".join([PEM_BEGIN, *body, PEM_END]) + "\n"


def get_location_id() -> str:
    return "us-central1"
