from __future__ import annotations

import logging
from typing import Any

import pytest

from configfactory import AbstractFactory, ContainerProtocol
from configfactory.integrations.pytest_plugin import ContainerCall, RecordingContainer


class _Connection:
    def __init__(self, variant: str) -> None:
        self.variant = variant


class _ConnectionFactory(AbstractFactory[_Connection]):
    built: list[str] = []

    def __call__(self, container: ContainerProtocol) -> _Connection:
        _ConnectionFactory.built.append(self.name)
        return _Connection(self.name)


class _FailingFactory(AbstractFactory[_Connection]):
    def __call__(self, container: ContainerProtocol) -> _Connection:
        msg = "cannot connect"
        raise RuntimeError(msg)


class _RepositoryFactory(AbstractFactory[Any]):
    target_key: Any = "connection"
    fallback: Any = _ConnectionFactory

    def __call__(self, container: ContainerProtocol) -> Any:
        return self._resolve_dependency(container, self.target_key, self.fallback)


class _TypedRepositoryFactory(_RepositoryFactory):
    target_key = _Connection


@pytest.fixture(autouse=True)
def _reset_built() -> None:
    _ConnectionFactory.built.clear()


def test_returns_registered_dependency_without_fallback(
    variant_name: str,
    container: RecordingContainer,
) -> None:
    registered = _Connection("registered")
    container.set(f"connection{variant_name}", registered)

    resolved = _RepositoryFactory(variant_name)(container)

    assert resolved is registered
    assert _ConnectionFactory.built == []
    assert container.calls == [
        ContainerCall("has", f"connection{variant_name}"),
        ContainerCall("get", f"connection{variant_name}"),
    ]


def test_builds_missing_dependency_with_same_variant_name(
    variant_name: str,
    container: RecordingContainer,
) -> None:
    resolved = _RepositoryFactory(variant_name)(container)

    assert isinstance(resolved, _Connection)
    assert resolved.variant == variant_name
    assert _ConnectionFactory.built == [variant_name]
    assert container.calls == [ContainerCall("has", f"connection{variant_name}")]


def test_built_dependency_is_not_registered(container: RecordingContainer) -> None:
    factory = _RepositoryFactory("primary")

    first = factory(container)
    second = factory(container)

    assert first is not second
    assert not container.has("connectionprimary")


def test_only_suffixed_key_is_queried(container: RecordingContainer) -> None:
    container.set("connection", _Connection("default"))

    resolved = _RepositoryFactory("primary")(container)

    assert resolved.variant == "primary"
    assert container.keys_for("has") == ["connectionprimary"]
    assert container.keys_for("get") == []


def test_class_target_key_uses_qualified_name(container: RecordingContainer) -> None:
    registered = _Connection("registered")
    container.set(f"{__name__}._Connection", registered)

    assert _TypedRepositoryFactory()(container) is registered
    assert isinstance(_TypedRepositoryFactory("replica")(container), _Connection)
    assert container.keys_for("has") == [f"{__name__}._Connection", f"{__name__}._Connectionreplica"]


def test_fallback_may_be_any_callable_taking_a_name(container: RecordingContainer) -> None:
    received: list[str] = []

    def _fallback(name: str) -> Any:
        received.append(name)
        return lambda _: f"built-{name}"

    class _Factory(AbstractFactory[Any]):
        def __call__(self, container: ContainerProtocol) -> Any:
            return self._resolve_dependency(container, "service", _fallback)

    assert _Factory("replica")(container) == "built-replica"
    assert received == ["replica"]


def test_fallback_errors_propagate(container: RecordingContainer) -> None:
    class _Factory(_RepositoryFactory):
        fallback = _FailingFactory

    with pytest.raises(RuntimeError, match="cannot connect"):
        _Factory()(container)


def test_container_get_errors_propagate() -> None:
    class _BrokenContainer:
        def has(self, key: str) -> bool:
            return True

        def get(self, key: str) -> Any:
            raise LookupError(key)

    with pytest.raises(LookupError, match="connection"):
        _RepositoryFactory()(_BrokenContainer())


def test_resolution_path_is_logged_at_debug_level(
    caplog: pytest.LogCaptureFixture,
    container: RecordingContainer,
) -> None:
    container.set("connectionprimary", _Connection("registered"))

    with caplog.at_level(logging.DEBUG, logger="configfactory._internal.factory"):
        _RepositoryFactory("primary")(container)
        _RepositoryFactory("replica")(container)

    messages = [record.getMessage() for record in caplog.records]
    assert messages[0] == "Dependency 'connectionprimary' served by the container"
    assert messages[1].startswith("Dependency 'connectionreplica' not registered, building it with")
    assert all(record.levelno == logging.DEBUG for record in caplog.records)
