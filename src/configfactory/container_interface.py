from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ContainerProtocol(Protocol):
    """Protocol for the service container consumed by factories.

    Factories only ever ask whether a key is registered and fetch it. Caching,
    singleton semantics and lifecycle belong to the container.
    """

    def has(self, key: str) -> bool:
        """Return whether ``key`` is registered.

        Args:
            key: Container key to look up.

        """

    def get(self, key: str) -> Any:
        """Return the service registered under ``key``.

        Implementations raise their own lookup error for unknown keys.

        Args:
            key: Container key to look up.

        """


__all__ = ["ContainerProtocol"]
