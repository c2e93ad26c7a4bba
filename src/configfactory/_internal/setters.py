from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from configfactory._internal.type_checks import is_runtime_class
from configfactory.exceptions import ConfigFactoryInvalidSetterError

F = TypeVar("F", bound=Callable[..., Any])

SETTER_PREFIX = "set"


class SetterRegistry:
    """Explicit setters keyed by target type and configuration key.

    Setters are plain callables taking ``(obj, value)``. Lookups walk the
    target's MRO so a setter registered for a base class also applies to its
    subclasses; the most derived registration wins.

    Examples:
        .. code-block:: python

            setters = SetterRegistry()


            @setters.setter(HttpClient, "timeout")
            def _set_timeout(client: HttpClient, value: float) -> None:
                client.timeout = value

    """

    def __init__(self) -> None:
        self._setters: dict[type[Any], dict[str, Callable[[Any, Any], Any]]] = {}

    def register(
        self,
        target_type: type[Any],
        key: str,
        setter: Callable[[Any, Any], Any],
    ) -> None:
        """Register ``setter`` for ``key`` on ``target_type``.

        Re-registering the same pair overrides the previous setter.

        Args:
            target_type: Class whose instances the setter applies to.
            key: Configuration key handled by the setter.
            setter: Callable invoked as ``setter(obj, value)``.

        Raises:
            ConfigFactoryInvalidSetterError: If any argument is invalid.

        """
        if not is_runtime_class(target_type):
            msg = f"Setter target must be a class, got {target_type!r}."
            raise ConfigFactoryInvalidSetterError(msg)
        if not isinstance(key, str) or not key:
            msg = f"Setter key must be a non-empty string, got {key!r}."
            raise ConfigFactoryInvalidSetterError(msg)
        if not callable(setter):
            msg = f"Setter for {target_type.__qualname__}.{key} must be callable, got {setter!r}."
            raise ConfigFactoryInvalidSetterError(msg)
        self._setters.setdefault(target_type, {})[key] = setter

    def setter(self, target_type: type[Any], key: str) -> Callable[[F], F]:
        """Register the decorated callable as the setter for ``key`` on ``target_type``."""

        def decorator(func: F) -> F:
            self.register(target_type, key, func)
            return func

        return decorator

    def lookup(self, obj: object, key: str) -> Callable[[Any], Any] | None:
        """Return the registered setter for ``key`` bound to ``obj``, if any.

        Args:
            obj: Target object being configured.
            key: Configuration key.

        """
        for klass in type(obj).__mro__:
            setter = self._setters.get(klass, {}).get(key)
            if setter is not None:
                return functools.partial(setter, obj)
        return None

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, tuple) or len(item) != 2 or not is_runtime_class(item[0]):  # noqa: PLR2004
            return False
        target_type, key = item
        return key in self._setters.get(target_type, {})


def setter_names(key: object) -> tuple[str, str]:
    """Return the conventional setter method names for a configuration key.

    ``timeout`` maps to ``("set_timeout", "setTimeout")``; the snake-case form
    is tried first. Non-string keys are converted with ``str``.
    """
    key = str(key)
    return (
        f"{SETTER_PREFIX}_{key}",
        f"{SETTER_PREFIX}{key[:1].upper()}{key[1:]}",
    )


def find_setter(
    obj: object,
    key: str,
    registry: SetterRegistry | None = None,
) -> Callable[[Any], Any] | None:
    """Locate the mutator that applies ``key`` to ``obj``.

    Explicit registrations take precedence over conventionally named methods.

    Args:
        obj: Target object being configured.
        key: Configuration key.
        registry: Optional explicit setters.

    Returns:
        A callable taking the resolved value, or ``None`` when ``obj`` has no
        setter for ``key``.

    """
    if registry is not None:
        setter = registry.lookup(obj, key)
        if setter is not None:
            return setter

    for method_name in setter_names(key):
        method = getattr(obj, method_name, None)
        if callable(method):
            return method
    return None


__all__ = ["SETTER_PREFIX", "SetterRegistry", "find_setter", "setter_names"]
