from __future__ import annotations

import types
from typing import Any, TypeGuard


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def qualified_name(cls: type[Any]) -> str:
    """Return the dotted ``module.qualname`` of a class, used as a container key prefix."""
    return f"{cls.__module__}.{cls.__qualname__}"


__all__ = ["is_runtime_class", "qualified_name"]
