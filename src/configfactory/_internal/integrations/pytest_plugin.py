from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, NamedTuple

import pytest


class ContainerCall(NamedTuple):
    """One recorded call made against a ``RecordingContainer``."""

    method: str
    key: str


class RecordingContainer:
    """Dict-backed container test double that records every lookup.

    Implements the ``has``/``get`` protocol consumed by factories. ``get`` on
    an unknown key raises ``KeyError``, like a real container would raise its
    own lookup error. Recorded calls let tests assert how many and which
    lookups a factory performed.
    """

    def __init__(self, services: Mapping[str, Any] | None = None) -> None:
        self._services: dict[str, Any] = dict(services or {})
        self.calls: list[ContainerCall] = []

    def set(self, key: str, service: Any) -> None:
        """Register ``service`` under ``key``, replacing any previous entry."""
        self._services[key] = service

    def has(self, key: str) -> bool:
        self.calls.append(ContainerCall("has", key))
        return key in self._services

    def get(self, key: str) -> Any:
        self.calls.append(ContainerCall("get", key))
        return self._services[key]

    def keys_for(self, method: str) -> list[str]:
        """Return the keys passed to ``method``, in call order."""
        return [call.key for call in self.calls if call.method == method]

    def __iter__(self) -> Iterator[str]:
        return iter(self._services)

    def __repr__(self) -> str:
        return f"RecordingContainer({sorted(self._services)!r})"


@pytest.fixture()
def configfactory_container() -> RecordingContainer:
    """Create an empty per-test ``RecordingContainer``.

    The fixture is function-scoped, so registrations and recorded calls are
    isolated between tests.

    Returns:
        A new ``RecordingContainer`` instance.

    """
    return RecordingContainer()


__all__ = ["ContainerCall", "RecordingContainer", "configfactory_container"]
