# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

"""
Load CLI commands
"""
from knack.commands import CommandGroup

registry_ops = "iotcore.registry.commands_registries#{}"
device_ops = "iotcore.registry.commands_devices#{}"


def load_iotcore_commands(self, _):
    """
    Load CLI commands
    """
    with CommandGroup(self, "", registry_ops) as cmd_group:
        cmd_group.command("create_registry", "create_registry")
        cmd_group.command("delete_registry", "delete_registry")
        cmd_group.command("get_registry", "get_registry")
        cmd_group.command("list_registries", "list_registries")
        cmd_group.command("get_iam_policy", "get_iam_policy")
        cmd_group.command("set_iam_policy", "set_iam_policy")

    with CommandGroup(self, "", device_ops) as cmd_group:
        cmd_group.command("create_es_device", "create_es_device")
        cmd_group.command("create_rsa_device", "create_rsa_device")
        cmd_group.command("create_unauth_device", "create_unauth_device")
        cmd_group.command("delete_device", "delete_device")
        cmd_group.command("get_device", "get_device")
        cmd_group.command("list_devices", "list_devices")
        cmd_group.command("patch_es_device", "patch_es_device")
        cmd_group.command("patch_rsa_device", "patch_rsa_device")
        cmd_group.command("get_device_configs", "get_device_configs")
        cmd_group.command("get_device_states", "get_device_states")
        cmd_group.command("send_configuration", "send_configuration")
