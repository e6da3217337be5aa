# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

import pytest
from google.cloud import iot_v1
from google.iam.v1 import policy_pb2

from iotcore.registry.commands_registries import (
    create_registry,
    delete_registry,
    get_iam_policy,
    get_registry,
    list_registries,
    set_iam_policy,
)
from iotcore.registry.common import RequiredArgumentMissingError
from iotcore.registry.providers.registries import build_single_binding_policy

from ..generators import generate_names, get_location_id


def _location_path(project_id: str, location_id: str) -> str:
    return f"projects/{project_id}/locations/{location_id}"


def _registry_path(project_id: str, location_id: str, registry_id: str) -> str:
    return f"{_location_path(project_id, location_id)}/registries/{registry_id}"


def test_create_registry(mocked_client, project_id, capsys):
    location_id = get_location_id()
    registry_id = generate_names()
    topic = f"projects/{project_id}/topics/{generate_names()}"
    created_name = _registry_path(project_id, location_id, registry_id)
    mocked_client.create_device_registry.return_value = iot_v1.DeviceRegistry(id=registry_id, name=created_name)

    create_registry(location_id=location_id, registry_id=registry_id, pubsub_topic=topic)

    mocked_client.create_device_registry.assert_called_once()
    call_kwargs = mocked_client.create_device_registry.call_args.kwargs
    assert call_kwargs["parent"] == _location_path(project_id, location_id)
    registry = call_kwargs["device_registry"]
    assert registry.id == registry_id
    assert [c.pubsub_topic_name for c in registry.event_notification_configs] == [topic]

    assert capsys.readouterr().out == f"Created registry: {created_name}\n"


def test_delete_registry(mocked_client, project_id, capsys):
    location_id = get_location_id()
    registry_id = generate_names()

    delete_registry(location_id=location_id, registry_id=registry_id)

    mocked_client.delete_device_registry.assert_called_once_with(
        name=_registry_path(project_id, location_id, registry_id)
    )
    assert capsys.readouterr().out == f"Deleted registry: {registry_id}\n"


def test_get_registry(mocked_client, project_id, capsys):
    location_id = get_location_id()
    registry_id = generate_names()
    topic = f"projects/{project_id}/topics/telemetry"
    name = _registry_path(project_id, location_id, registry_id)
    mocked_client.get_device_registry.return_value = iot_v1.DeviceRegistry(
        id=registry_id,
        name=name,
        http_config=iot_v1.HttpConfig(http_enabled_state=iot_v1.HttpState.HTTP_DISABLED),
        mqtt_config=iot_v1.MqttConfig(mqtt_enabled_state=iot_v1.MqttState.MQTT_ENABLED),
        event_notification_configs=[iot_v1.EventNotificationConfig(pubsub_topic_name=topic)],
    )

    get_registry(location_id=location_id, registry_id=registry_id)

    mocked_client.get_device_registry.assert_called_once_with(name=name)
    assert capsys.readouterr().out.splitlines() == [
        f"{registry_id}:",
        "\tHTTP Config: HTTP_DISABLED",
        "\tMQTT Config: MQTT_ENABLED",
        f"\tName: {name}",
        f"\tTopic: {topic}",
    ]


@pytest.mark.parametrize("registry_count", [0, 1, 2])
def test_list_registries(mocked_client, project_id, capsys, registry_count):
    location_id = get_location_id()
    registry_ids = [generate_names() for _ in range(registry_count)]
    mocked_client.list_device_registries.return_value = iot_v1.ListDeviceRegistriesResponse(
        device_registries=[iot_v1.DeviceRegistry(id=r) for r in registry_ids]
    )

    list_registries(location_id=location_id)

    mocked_client.list_device_registries.assert_called_once_with(parent=_location_path(project_id, location_id))
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Registries:"
    if registry_count:
        assert lines[1:] == [f"\t{r}" for r in registry_ids]
    else:
        assert lines[1:] == ["\tNo device registries found in this region for your project."]


def test_list_registries_explicit_project(mocked_client, no_project):
    location_id = get_location_id()
    explicit_project = generate_names(prefix="other-", max_length=30)
    mocked_client.list_device_registries.return_value = iot_v1.ListDeviceRegistriesResponse()

    list_registries(location_id=location_id, project_id=explicit_project)

    mocked_client.list_device_registries.assert_called_once_with(
        parent=_location_path(explicit_project, location_id)
    )


def test_get_iam_policy(mocked_client, project_id, capsys):
    location_id = get_location_id()
    registry_id = generate_names()
    mocked_client.get_iam_policy.return_value = policy_pb2.Policy(
        bindings=[policy_pb2.Binding(role="roles/viewer", members=["user:a@example.com"])]
    )

    get_iam_policy(location_id=location_id, registry_id=registry_id)

    mocked_client.get_iam_policy.assert_called_once_with(
        request={"resource": _registry_path(project_id, location_id, registry_id)}
    )
    assert capsys.readouterr().out == "Role: roles/viewer Member: user:a@example.com\n"


def test_set_iam_policy(mocked_client, project_id, capsys):
    location_id = get_location_id()
    registry_id = generate_names()
    member = "user:a@example.com"
    role = "roles/viewer"
    mocked_client.set_iam_policy.side_effect = lambda request: request["policy"]

    set_iam_policy(location_id=location_id, registry_id=registry_id, member=member, role=role)

    mocked_client.set_iam_policy.assert_called_once()
    request = mocked_client.set_iam_policy.call_args.kwargs["request"]
    assert request["resource"] == _registry_path(project_id, location_id, registry_id)
    policy = request["policy"]
    assert len(policy.bindings) == 1
    assert policy.bindings[0].role == role
    assert list(policy.bindings[0].members) == [member]

    assert capsys.readouterr().out.splitlines() == [
        "Binding set:",
        f"\tRole: {role} Member: {member}",
    ]


@pytest.mark.parametrize("member, role", [(None, "roles/viewer"), ("user:a@example.com", None), (None, None)])
def test_build_single_binding_policy_missing_values(member, role):
    policy = build_single_binding_policy(member=member, role=role)
    assert len(policy.bindings) == 1
    assert policy.bindings[0].role == (role or "")
    assert list(policy.bindings[0].members) == ([member] if member else [])


@pytest.mark.parametrize(
    "command, kwargs",
    [
        (create_registry, {"registry_id": "r", "pubsub_topic": "projects/p/topics/t"}),
        (delete_registry, {"registry_id": "r"}),
        (get_registry, {"registry_id": "r"}),
        (list_registries, {}),
        (get_iam_policy, {"registry_id": "r"}),
        (set_iam_policy, {"registry_id": "r", "member": "user:a@example.com", "role": "roles/viewer"}),
    ],
)
def test_registry_commands_missing_location(mocked_client, project_id, command, kwargs):
    with pytest.raises(RequiredArgumentMissingError):
        command(location_id=None, **kwargs)

    mocked_client.factory.assert_not_called()


def test_registry_commands_missing_project(mocked_client, no_project):
    with pytest.raises(RequiredArgumentMissingError) as error:
        get_registry(location_id=get_location_id(), registry_id="r")

    assert "GOOGLE_CLOUD_PROJECT" in str(error.value)
    mocked_client.factory.assert_not_called()


def test_registry_remote_error_propagates(mocked_client, project_id):
    from google.api_core.exceptions import NotFound

    mocked_client.get_device_registry.side_effect = NotFound("registry not found")

    with pytest.raises(NotFound):
        get_registry(location_id=get_location_id(), registry_id=generate_names())


@pytest.mark.parametrize(
    "command, kwargs",
    [
        (create_registry, {"pubsub_topic": "projects/p/topics/t"}),
        (delete_registry, {}),
        (get_registry, {}),
        (get_iam_policy, {}),
        (set_iam_policy, {"member": "user:a@example.com", "role": "roles/viewer"}),
    ],
)
def test_registry_commands_missing_registry(mocked_client, project_id, command, kwargs):
    with pytest.raises(RequiredArgumentMissingError) as error:
        command(location_id=get_location_id(), registry_id=None, **kwargs)

    assert "registry" in str(error.value)
    mocked_client.factory.assert_not_called()


def test_list_registries_status(mocked_client, project_id, mocker):
    patched_console = mocker.patch("iotcore.registry.providers.registries.console")
    mocked_client.list_device_registries.return_value = iot_v1.ListDeviceRegistriesResponse()

    list_registries(location_id=get_location_id())

    patched_console.status.assert_called_once_with(
        f"Listing {_location_path(project_id, get_location_id())}/registries..."
    )
