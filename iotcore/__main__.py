# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

import sys
from typing import List, Optional

from knack.log import get_logger

logger = get_logger(__name__)

# global options that consume the following token
VALUE_OPTIONS = ["--project", "-p", "--output", "-o", "--query"]


def get_command_name(args: List[str]) -> Optional[str]:
    """
    First token that is neither a global option nor an option value.
    """
    skip_next = False
    for arg in args:
        if skip_next:
            skip_next = False
            continue
        if arg.startswith("-"):
            skip_next = arg in VALUE_OPTIONS
            continue
        return arg
    return None


def main(args: Optional[List[str]] = None) -> int:
    """
    Entry point. Unknown or missing commands print the usage text without touching the service.
    """
    from iotcore import get_default_cli
    from iotcore.registry.common import CommandName
    from iotcore.registry.providers.user_strings import USAGE_TEXT

    args = sys.argv[1:] if args is None else list(args)
    command = get_command_name(args)
    if command not in CommandName.list():
        logger.debug("Unrecognized command '%s'.", command)
        print(USAGE_TEXT)
        return 0

    try:
        return get_default_cli().invoke(args)
    except SystemExit as ex:
        # help and argument parse errors exit from within knack
        return ex.code or 0


if __name__ == "__main__":
    sys.exit(main())
