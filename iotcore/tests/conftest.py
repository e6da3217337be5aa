# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

import pytest

from .generators import generate_names, generate_pem_content

BASE_PROVIDER_PATH = "iotcore.registry.providers.base"


@pytest.fixture
def mocked_client(mocker):
    """
    Replaces the device manager client factory. Yields the client mock.
    """
    client = mocker.MagicMock(name="DeviceManagerClient")
    patched = mocker.patch(f"{BASE_PROVIDER_PATH}.get_device_manager_client", return_value=client)
    client.factory = patched
    yield client


@pytest.fixture
def isolated_config(mocker, tmp_path):
    """
    Points the CLI config dir at a temp dir so no user config leaks into tests.
    """
    config_dir = str(tmp_path / ".iotcore")
    mocker.patch("iotcore.constants.CONFIG_DIR", config_dir)
    mocker.patch("iotcore.CONFIG_DIR", config_dir)
    yield config_dir


@pytest.fixture
def project_id(monkeypatch, isolated_config):
    project = generate_names(prefix="proj-", max_length=30)
    monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", project)
    yield project


@pytest.fixture
def no_project(monkeypatch, isolated_config):
    monkeypatch.delenv("GOOGLE_CLOUD_PROJECT", raising=False)
    monkeypatch.delenv("IOTCORE_DEFAULTS_PROJECT", raising=False)


@pytest.fixture
def key_file(tmp_path):
    """
    Writes PEM shaped key material to a temp file. Yields (path, content).
    """
    content = generate_pem_content()
    path = tmp_path / "public_key.pem"
    path.write_bytes(content.encode("utf-8"))
    yield str(path), content
