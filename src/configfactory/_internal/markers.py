from typing import Any, NamedTuple


class Reference(NamedTuple):
    """Mark a configuration value as an explicit container reference.

    The value resolver always fetches ``key`` from the container, without the
    membership check applied to plain strings. Unknown keys fail with whatever
    error the container raises.

    Examples:
        .. code-block:: python

            config = {"connection": Reference("db.connection.primary")}

    """

    key: str


class Raw(NamedTuple):
    """Mark a configuration value as a literal that must never be resolved.

    Use ``Raw`` for strings that may collide with a registered container key.
    The value resolver unwraps it and performs no container lookup, even for
    nested mappings.

    Examples:
        .. code-block:: python

            config = {"label": Raw("logger")}

    """

    value: Any


__all__ = ["Raw", "Reference"]
