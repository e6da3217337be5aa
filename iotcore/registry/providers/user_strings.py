# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from ...constants import CLI_NAME, CREDENTIALS_ENV_VAR, PROJECT_ENV_VAR

# Registry Strings
CREATED_REGISTRY_MSG = "Created registry: {0}"
DELETED_REGISTRY_MSG = "Deleted registry: {0}"
REGISTRY_HEADER = "{0}:"
REGISTRY_HTTP_CONFIG = "\tHTTP Config: {0}"
REGISTRY_MQTT_CONFIG = "\tMQTT Config: {0}"
REGISTRY_NAME = "\tName: {0}"
REGISTRY_TOPIC = "\tTopic: {0}"
REGISTRY_NO_TOPICS = "\tTopic: no associated topics"
REGISTRIES_HEADER = "Registries:"
REGISTRIES_ITEM = "\t{0}"
REGISTRIES_NONE_FOUND = "\tNo device registries found in this region for your project."

# IAM Strings
IAM_BINDING = "Role: {0} Member: {1}"
IAM_BINDING_SET_HEADER = "Binding set:"
IAM_BINDING_SET_ITEM = "\tRole: {0} Member: {1}"
IAM_NO_BINDINGS = "No bindings"

# Device Strings
DEVICE_HEADER = "Device: {0}"
DEVICE_BLOCKED = "\tBlocked: {0}"
DEVICE_LAST_EVENT_TIME = "\tLast Event Time: {0}"
DEVICE_LAST_STATE_TIME = "\tLast State Time: {0}"
DEVICE_NAME = "\tName: {0}"
DEVICE_CERT_FORMATS_HEADER = "\tCertificate formats:"
DEVICE_CERT_FORMAT = "\t\t{0}"
DEVICE_NO_CERTS = "\t\tNo certificates for device"
DELETED_DEVICE_MSG = "Deleted device."
DEVICES_HEADER = "Devices:"
DEVICES_ITEM = "\t{0}"
DEVICES_NONE_FOUND = "\tNo devices found in this registry."
DEVICE_CONFIG_VERSION = "Version [{0}]: {1}"
DEVICE_NO_CONFIGS = "No configurations found for device."
DEVICE_STATE = "{0}: {1}"
DEVICE_NO_STATES = "No state messages"
CONFIG_UPDATED_MSG = "Configuration updated!"

USAGE_TEXT = f"""Usage: {CLI_NAME} [command] [arguments]

Registry Management Commands:
  create_registry <location> <registry_id> <pubsub_topic> Create a device registry.
  delete_registry <location> <registry_id> Delete a device registry.
  get_registry <location> <registry_id> Get the provided device registry.
  get_iam_policy <location> <registry_id> Get the IAM policy for a registry.
  list_registries <location> List the device registries in the provided region.
  set_iam_policy <location> <registry_id> <member> <role> Set the IAM policy for a registry to a single member / role.

Device Management Commands:
  create_es_device <location> <registry_id> <device_id> <public_key_path> Create a device with an ES256 credential
  create_rsa_device <location> <registry_id> <device_id> <public_key_path> Create a device with an RSA credential
  create_unauth_device <location> <registry_id> <device_id> Create a device without credentials
  delete_device <location> <registry_id> <device_id> Delete a device from a registry
  get_device <location> <registry_id> <device_id> Gets a device from a registry.
  get_device_configs <location> <registry_id> <device_id> List device configurations.
  get_device_states <location> <registry_id> <device_id> List device state history.
  list_devices <location> <registry_id> List the devices in the provided registry.
  patch_es_device <location> <registry_id> <device_id> <public_key_path> Patch a device with an ES256 credential
  patch_rsa_device <location> <registry_id> <device_id> <public_key_path> Patch a device with an RSA credential
  send_configuration <location> <registry_id> <device_id> <data> Set a device configuration.

Environment variables:
  {PROJECT_ENV_VAR} must be set to your Google Cloud project ID
  {CREDENTIALS_ENV_VAR} set to the path to your JSON credentials"""
