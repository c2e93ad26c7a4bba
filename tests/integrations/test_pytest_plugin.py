from __future__ import annotations

import pytest

from configfactory import ContainerProtocol
from configfactory.integrations.pytest_plugin import ContainerCall, RecordingContainer


def test_fixture_provides_empty_recording_container(configfactory_container: RecordingContainer) -> None:
    assert isinstance(configfactory_container, RecordingContainer)
    assert isinstance(configfactory_container, ContainerProtocol)
    assert list(configfactory_container) == []
    assert configfactory_container.calls == []


def test_calls_are_recorded_in_order() -> None:
    container = RecordingContainer({"a": 1})

    assert container.has("a")
    assert not container.has("b")
    assert container.get("a") == 1

    assert container.calls == [
        ContainerCall("has", "a"),
        ContainerCall("has", "b"),
        ContainerCall("get", "a"),
    ]
    assert container.keys_for("has") == ["a", "b"]
    assert container.keys_for("get") == ["a"]


def test_get_of_unknown_key_raises_key_error() -> None:
    container = RecordingContainer()

    with pytest.raises(KeyError):
        container.get("missing")

    assert container.calls == [ContainerCall("get", "missing")]


def test_set_replaces_existing_entry() -> None:
    container = RecordingContainer({"a": 1})

    container.set("a", 2)
    container.set("b", 3)

    assert container.get("a") == 2
    assert sorted(container) == ["a", "b"]
    assert repr(container) == "RecordingContainer(['a', 'b'])"
