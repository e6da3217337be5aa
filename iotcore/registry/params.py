# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

"""
CLI parameter definitions.
"""

from knack.arguments import ArgumentsContext

from ..constants import PROJECT_ENV_VAR


def load_iotcore_arguments(self, _):
    """
    Load CLI Args for Knack parser
    """

    with ArgumentsContext(self, "") as context:
        context.argument(
            "project_id",
            options_list=["--project", "-p"],
            help=f"Google Cloud project id. When omitted {PROJECT_ENV_VAR} is used, then "
            "the `project` value of the [defaults] config section.",
        )
        # Positional arguments are optional at the parser level. Missing values are
        # reported by resource path construction.
        context.argument(
            "location_id",
            options_list=[],
            nargs="?",
            metavar="LOCATION",
            help="Cloud region of the registry, e.g. us-central1.",
        )
        context.argument(
            "registry_id",
            options_list=[],
            nargs="?",
            metavar="REGISTRY_ID",
            help="Device registry id.",
        )
        context.argument(
            "device_id",
            options_list=[],
            nargs="?",
            metavar="DEVICE_ID",
            help="Device id.",
        )
        context.argument(
            "public_key_path",
            options_list=[],
            nargs="?",
            metavar="PUBLIC_KEY_PATH",
            help="Path to the PEM encoded public key. The file content is sent as is.",
        )

    with ArgumentsContext(self, "create_registry") as context:
        context.argument(
            "pubsub_topic",
            options_list=[],
            nargs="?",
            metavar="PUBSUB_TOPIC",
            help="Pub/Sub topic receiving device telemetry, in the form projects/{project}/topics/{topic}.",
        )

    with ArgumentsContext(self, "set_iam_policy") as context:
        context.argument(
            "member",
            options_list=[],
            nargs="?",
            metavar="MEMBER",
            help="Principal to bind, e.g. user:someone@example.com.",
        )
        context.argument(
            "role",
            options_list=[],
            nargs="?",
            metavar="ROLE",
            help="Role granted to the member, e.g. roles/viewer.",
        )

    with ArgumentsContext(self, "send_configuration") as context:
        context.argument(
            "data",
            options_list=[],
            nargs="?",
            metavar="DATA",
            help="Configuration payload sent to the device, e.g. '{fan: on}'.",
        )
