# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from typing import TYPE_CHECKING, Optional

from knack.log import get_logger

from ...constants import USER_AGENT

logger = get_logger(__name__)

if TYPE_CHECKING:
    from google.cloud.iot_v1 import DeviceManagerClient


def get_device_manager_client(api_endpoint: Optional[str] = None, **kwargs) -> "DeviceManagerClient":
    """
    Device manager client authenticated with application default credentials.

    Credentials are discovered by google-auth (GOOGLE_APPLICATION_CREDENTIALS, gcloud ADC or metadata server).
    """
    from google.api_core.client_options import ClientOptions
    from google.api_core.gapic_v1.client_info import ClientInfo
    from google.cloud.iot_v1 import DeviceManagerClient

    if "client_info" not in kwargs:
        kwargs["client_info"] = ClientInfo(user_agent=USER_AGENT)

    if api_endpoint:
        logger.debug("Using device manager endpoint %s", api_endpoint)
        kwargs["client_options"] = ClientOptions(api_endpoint=api_endpoint)

    return DeviceManagerClient(**kwargs)
