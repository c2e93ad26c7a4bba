from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar, final

from configfactory._internal.integrations.pydantic import is_pydantic_model, model_to_mapping
from configfactory._internal.markers import Raw, Reference
from configfactory._internal.setters import SetterRegistry, find_setter, setter_names
from configfactory._internal.type_checks import is_runtime_class, qualified_name
from configfactory.exceptions import ConfigFactoryMissingSetterError

if TYPE_CHECKING:
    from typing_extensions import Self

    from configfactory.container_interface import ContainerProtocol

T = TypeVar("T")
FactoryT = TypeVar("FactoryT", bound="AbstractFactory[Any]")

logger = logging.getLogger(__name__)


class AbstractFactory(ABC, Generic[T]):
    """Build a service from container-held configuration, once per named variant.

    A factory instance carries an immutable variant ``name``. The empty name is
    the default variant; any other name selects a slice of configuration and
    suffixes the container keys of dependencies, so one factory class can
    produce several differently configured services.

    Subclasses implement ``__call__`` and use the protected helpers to read
    their configuration slice, resolve container references, obtain
    collaborating services and apply settings to the object they build.

    Class attributes:
        implicit_references: When true, plain strings naming a registered
            container key are replaced by the registered service. Disable it
            to resolve only explicit ``Reference`` markers.
        setters: Optional ``SetterRegistry`` consulted before conventional
            ``set_<key>``/``set<Key>`` methods.

    Examples:
        .. code-block:: python

            class HttpClientFactory(AbstractFactory[HttpClient]):
                def __call__(self, container: ContainerProtocol) -> HttpClient:
                    config = self._resolve_config(container.get("config")["http"])
                    return self._call_setters(container, HttpClient(), config)


            default_client = HttpClientFactory()(container)
            backoffice_client = HttpClientFactory.named("backoffice")(container)

    """

    implicit_references: ClassVar[bool] = True
    setters: ClassVar[SetterRegistry | None] = None

    @final
    def __init__(self, name: str = "") -> None:
        self._name = name

    @property
    def name(self) -> str:
        """Variant name; the empty string is the default variant."""
        return self._name

    @classmethod
    def named(cls, name: str) -> Self:
        """Return the variant of this factory called ``name``.

        ``Factory.named("replica")(container)`` is equivalent to
        ``Factory("replica")(container)``.
        """
        return cls(name)

    @abstractmethod
    def __call__(self, container: ContainerProtocol) -> T:
        """Build the service for this variant.

        Args:
            container: Container used to read configuration and dependencies.

        """

    def __repr__(self) -> str:
        return f"{type(self).__qualname__}(name={self._name!r})"

    def _resolve_dependency(
        self,
        container: ContainerProtocol,
        target_key: str | type[Any],
        fallback_factory: Callable[[str], Callable[[ContainerProtocol], Any]],
    ) -> Any:
        """Return the same-variant dependency from the container or build it.

        The lookup key is ``target_key`` suffixed with this factory's name.
        When the container holds it, the registered service is returned and
        ``fallback_factory`` is never touched. Otherwise ``fallback_factory``
        is constructed with this factory's name and invoked with the
        container. Its result is returned as is and not registered anywhere.

        Args:
            container: Container to query.
            target_key: Base container key, or a class whose dotted qualified
                name is used as the base key.
            fallback_factory: Factory class (or any callable taking a variant
                name) that builds the dependency when it is not registered.

        Returns:
            The registered or freshly built dependency.

        """
        base_key = qualified_name(target_key) if is_runtime_class(target_key) else target_key
        key = f"{base_key}{self._name}"

        if container.has(key):
            logger.debug("Dependency '%s' served by the container", key)
            return container.get(key)

        logger.debug(
            "Dependency '%s' not registered, building it with %r",
            key,
            fallback_factory,
        )
        factory = fallback_factory(self._name)
        return factory(container)

    def _resolve_config(self, config: Any) -> Any:
        """Return the configuration slice that belongs to this variant.

        The default variant receives ``config`` unchanged. A named variant
        receives ``config[name]``, or an empty mapping when the entry is absent
        or ``None``. Pydantic models are dumped to plain mappings first.
        """
        if is_pydantic_model(config):
            config = model_to_mapping(config)

        if self._name == "":
            return config

        variant_config = config.get(self._name)
        return {} if variant_config is None else variant_config

    def _resolve_value(self, container: ContainerProtocol, value: Any) -> Any:
        """Resolve container references inside a configuration value.

        Mappings are copied into a new ``dict`` with the same keys in the same
        order, and lists and tuples into a new container of the same kind,
        resolving every item recursively. ``Reference`` markers are fetched
        from the container and ``Raw`` markers are unwrapped untouched. A
        plain string naming a registered container key is replaced by the
        registered service (unless ``implicit_references`` is disabled);
        any other string is a literal. Everything else passes through.

        Note that a literal string colliding with a registered key is
        substituted silently; wrap such values in ``Raw``.

        Recursion follows the configuration depth and is not hardened
        against pathologically deep trees.

        Args:
            container: Container used to resolve references.
            value: Configuration value to resolve. It is never mutated.

        Returns:
            The resolved value.

        """
        if isinstance(value, Reference):
            return container.get(value.key)

        if isinstance(value, Raw):
            return value.value

        if isinstance(value, str):
            if self.implicit_references and container.has(value):
                logger.debug("Configuration value '%s' resolved from the container", value)
                return container.get(value)
            return value

        if isinstance(value, Mapping):
            return {
                sub_key: self._resolve_value(container, sub_value)
                for sub_key, sub_value in value.items()
            }

        if isinstance(value, list):
            return [self._resolve_value(container, item) for item in value]

        if type(value) is tuple:
            return tuple(self._resolve_value(container, item) for item in value)

        return value

    def _call_setters(self, container: ContainerProtocol, obj: T, config: Mapping[str, Any]) -> T:
        """Apply every configuration entry to ``obj`` through its setters.

        Entries are applied in mapping order. For each key the setter is
        located first, then the value is resolved with ``_resolve_value`` and
        passed to the setter. Setters come from ``setters`` when registered
        there, else from ``set_<key>`` or ``set<Key>`` methods on ``obj``.

        Args:
            container: Container used to resolve references in values.
            obj: Object to configure in place.
            config: Flat mapping of configuration keys to raw values.

        Returns:
            ``obj`` itself.

        Raises:
            ConfigFactoryMissingSetterError: If ``obj`` has no setter for a
                key. Nothing after the failing key is applied.

        """
        for key, value in config.items():
            setter = find_setter(obj, key, self.setters)
            if setter is None:
                tried = ", ".join(setter_names(key))
                msg = (
                    f"Configuration key '{key}' is not supported by "
                    f"{type(obj).__qualname__}: no registered setter and none of {tried}."
                )
                raise ConfigFactoryMissingSetterError(msg)

            setter(self._resolve_value(container, value))
            logger.debug("Applied configuration key '%s' to %s", key, type(obj).__qualname__)

        return obj


def variants(factory_type: type[FactoryT], *names: str) -> dict[str, FactoryT]:
    """Build one factory per variant name.

    Convenient when registering several variants of the same factory in a
    container, for example under ``f"{ServiceKey}{name}"`` keys.

    Args:
        factory_type: Concrete ``AbstractFactory`` subclass.
        *names: Variant names; the empty string selects the default variant.

    Returns:
        Mapping of variant name to factory instance, in the given order.

    """
    return {name: factory_type.named(name) for name in names}


__all__ = ["AbstractFactory", "variants"]
