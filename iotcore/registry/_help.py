# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------
"""
Help content for Cloud IoT device registry commands.
"""

from knack.help_files import helps

from ..constants import CLI_NAME


def load_iotcore_help():
    helps[
        "create_registry"
    ] = f"""
        type: command
        short-summary: Create a device registry.
        long-summary: |
            The registry publishes device telemetry to the provided Pub/Sub topic.
        examples:
        - name: Create a registry in us-central1 publishing to an existing topic.
          text: >
            {CLI_NAME} create_registry us-central1 myregistry projects/myproject/topics/mytopic
    """

    helps[
        "delete_registry"
    ] = f"""
        type: command
        short-summary: Delete a device registry.
        long-summary: The registry must not contain devices.
        examples:
        - name: Delete a registry.
          text: >
            {CLI_NAME} delete_registry us-central1 myregistry
    """

    helps[
        "get_registry"
    ] = f"""
        type: command
        short-summary: Get the provided device registry.
        examples:
        - name: Show the protocol configuration, name and topics of a registry.
          text: >
            {CLI_NAME} get_registry us-central1 myregistry
    """

    helps[
        "list_registries"
    ] = f"""
        type: command
        short-summary: List the device registries in the provided region.
        long-summary: Only the first page of results returned by the service is shown.
        examples:
        - name: List registries in us-central1 for the project in GOOGLE_CLOUD_PROJECT.
          text: >
            {CLI_NAME} list_registries us-central1
        - name: List registries of an explicit project.
          text: >
            {CLI_NAME} list_registries us-central1 --project myproject
    """

    helps[
        "get_iam_policy"
    ] = f"""
        type: command
        short-summary: Get the IAM policy for a registry.
        examples:
        - name: Show the role bindings of a registry.
          text: >
            {CLI_NAME} get_iam_policy us-central1 myregistry
    """

    helps[
        "set_iam_policy"
    ] = f"""
        type: command
        short-summary: Set the IAM policy for a registry to a single member / role.
        long-summary: |
            The existing policy is replaced by a policy holding exactly one binding.
        examples:
        - name: Grant viewer access on a registry to a single user.
          text: >
            {CLI_NAME} set_iam_policy us-central1 myregistry user:someone@example.com roles/viewer
    """

    helps[
        "create_es_device"
    ] = f"""
        type: command
        short-summary: Create a device with an ES256 credential.
        examples:
        - name: Create a device authenticating with an ES256 public key.
          text: >
            {CLI_NAME} create_es_device us-central1 myregistry mydevice ./ec_public.pem
    """

    helps[
        "create_rsa_device"
    ] = f"""
        type: command
        short-summary: Create a device with an RSA credential.
        examples:
        - name: Create a device authenticating with an RSA X.509 certificate.
          text: >
            {CLI_NAME} create_rsa_device us-central1 myregistry mydevice ./rsa_cert.pem
    """

    helps[
        "create_unauth_device"
    ] = f"""
        type: command
        short-summary: Create a device without credentials.
        examples:
        - name: Create a device with no credentials attached.
          text: >
            {CLI_NAME} create_unauth_device us-central1 myregistry mydevice
    """

    helps[
        "delete_device"
    ] = f"""
        type: command
        short-summary: Delete a device from a registry.
        examples:
        - name: Delete a device.
          text: >
            {CLI_NAME} delete_device us-central1 myregistry mydevice
    """

    helps[
        "get_device"
    ] = f"""
        type: command
        short-summary: Gets a device from a registry.
        examples:
        - name: Show a device and the formats of its credentials.
          text: >
            {CLI_NAME} get_device us-central1 myregistry mydevice
    """

    helps[
        "list_devices"
    ] = f"""
        type: command
        short-summary: List the devices in the provided registry.
        long-summary: Only the first page of results returned by the service is shown.
        examples:
        - name: List the devices of a registry.
          text: >
            {CLI_NAME} list_devices us-central1 myregistry
    """

    helps[
        "patch_es_device"
    ] = f"""
        type: command
        short-summary: Patch a device with an ES256 credential.
        long-summary: Only the device credentials are replaced.
        examples:
        - name: Replace the credentials of a device with an ES256 public key.
          text: >
            {CLI_NAME} patch_es_device us-central1 myregistry mydevice ./ec_public.pem
    """

    helps[
        "patch_rsa_device"
    ] = f"""
        type: command
        short-summary: Patch a device with an RSA credential.
        long-summary: Only the device credentials are replaced.
        examples:
        - name: Replace the credentials of a device with an RSA X.509 certificate.
          text: >
            {CLI_NAME} patch_rsa_device us-central1 myregistry mydevice ./rsa_cert.pem
    """

    helps[
        "get_device_configs"
    ] = f"""
        type: command
        short-summary: List device configurations.
        long-summary: Shows the configuration versions most recently sent to the device.
        examples:
        - name: List the configuration history of a device.
          text: >
            {CLI_NAME} get_device_configs us-central1 myregistry mydevice
    """

    helps[
        "get_device_states"
    ] = f"""
        type: command
        short-summary: List device state history.
        examples:
        - name: List the state messages reported by a device.
          text: >
            {CLI_NAME} get_device_states us-central1 myregistry mydevice
    """

    helps[
        "send_configuration"
    ] = f"""
        type: command
        short-summary: Set a device configuration.
        long-summary: The service assigns the new configuration version.
        examples:
        - name: Send a configuration payload to a device.
          text: >
            {CLI_NAME} send_configuration us-central1 myregistry mydevice '{{fan: on}}'
    """
