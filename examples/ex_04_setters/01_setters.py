"""Setters: explicit registrations and unsupported configuration keys.

A ``SetterRegistry`` maps configuration keys to setter callables for classes
that do not follow the ``set_<key>`` convention. A key without any setter
aborts the whole configuration pass.
"""

from __future__ import annotations

from typing import Any

from configfactory import (
    AbstractFactory,
    ConfigFactoryMissingSetterError,
    ContainerProtocol,
    SetterRegistry,
)


class Services:
    def __init__(self, services: dict[str, Any]) -> None:
        self._services = services

    def has(self, key: str) -> bool:
        return key in self._services

    def get(self, key: str) -> Any:
        return self._services[key]


class Cache:
    def __init__(self) -> None:
        self.ttl = 0
        self.namespace = ""


cache_setters = SetterRegistry()


@cache_setters.setter(Cache, "ttl")
def _set_ttl(cache: Cache, ttl: int) -> None:
    cache.ttl = ttl


@cache_setters.setter(Cache, "namespace")
def _set_namespace(cache: Cache, namespace: str) -> None:
    cache.namespace = namespace


class CacheFactory(AbstractFactory[Cache]):
    setters = cache_setters

    def __call__(self, container: ContainerProtocol) -> Cache:
        config = self._resolve_config(container.get("config")["caches"])
        return self._call_setters(container, Cache(), config)


def main() -> None:
    container = Services(
        {
            "config": {
                "caches": {
                    "sessions": {"ttl": 3600, "namespace": "sess"},
                    "broken": {"ttl": 60, "compression": "gzip"},
                },
            },
        },
    )

    cache = CacheFactory.named("sessions")(container)
    print(f"sessions ttl={cache.ttl} namespace={cache.namespace}")  # => sessions ttl=3600 namespace=sess

    try:
        CacheFactory.named("broken")(container)
    except ConfigFactoryMissingSetterError:
        print("broken=unsupported key")  # => broken=unsupported key


if __name__ == "__main__":
    main()
