# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from knack import CLI, CLICommandsLoader
from knack.events import EVENT_INVOKER_POST_PARSE_ARGS

from iotcore.constants import CLI_NAME, CONFIG_DIR, CONFIG_ENV_VAR_PREFIX, VERSION


def project_resolution_handler(cli_ctx, **kwargs):
    from .registry.util.common import resolve_project_id

    args = kwargs.get("args")
    if args is not None and hasattr(args, "project_id"):
        args.project_id = resolve_project_id(project_id=args.project_id, config=cli_ctx.config)


class IotCoreCommandsLoader(CLICommandsLoader):
    def __init__(self, cli_ctx=None):
        super(IotCoreCommandsLoader, self).__init__(cli_ctx=cli_ctx)
        if cli_ctx:
            cli_ctx.register_event(EVENT_INVOKER_POST_PARSE_ARGS, project_resolution_handler)

    def load_command_table(self, args):
        from iotcore.registry._help import load_iotcore_help
        from iotcore.registry.command_map import load_iotcore_commands

        load_iotcore_help()
        load_iotcore_commands(self, args)

        return super(IotCoreCommandsLoader, self).load_command_table(args)

    def load_arguments(self, command):
        from iotcore.registry.params import load_iotcore_arguments

        load_iotcore_arguments(self, command)
        super(IotCoreCommandsLoader, self).load_arguments(command)


class IotCoreCLI(CLI):
    def get_cli_version(self):
        return VERSION


def get_default_cli() -> IotCoreCLI:
    return IotCoreCLI(
        cli_name=CLI_NAME,
        config_dir=CONFIG_DIR,
        config_env_var_prefix=CONFIG_ENV_VAR_PREFIX,
        commands_loader_cls=IotCoreCommandsLoader,
    )


__version__ = VERSION
