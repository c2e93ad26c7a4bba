"""Dependencies: reuse a registered service or build the same variant on demand.

``_resolve_dependency`` looks up ``key + name``. When the container holds it,
that instance is reused; otherwise the fallback factory is constructed with
the same variant name and invoked.
"""

from __future__ import annotations

from typing import Any

from configfactory import AbstractFactory, ContainerProtocol


class Services:
    def __init__(self, services: dict[str, Any]) -> None:
        self._services = services

    def has(self, key: str) -> bool:
        return key in self._services

    def get(self, key: str) -> Any:
        return self._services[key]


class Connection:
    def __init__(self, dsn: str) -> None:
        self.dsn = dsn


class UserRepository:
    def __init__(self, connection: Connection) -> None:
        self.connection = connection


class ConnectionFactory(AbstractFactory[Connection]):
    def __call__(self, container: ContainerProtocol) -> Connection:
        config = self._resolve_config(container.get("config")["connections"])
        return Connection(config["dsn"])


class UserRepositoryFactory(AbstractFactory[UserRepository]):
    def __call__(self, container: ContainerProtocol) -> UserRepository:
        connection = self._resolve_dependency(container, "connection.", ConnectionFactory)
        return UserRepository(connection)


def main() -> None:
    shared = Connection("postgres://shared")
    container = Services(
        {
            "config": {"connections": {"replica": {"dsn": "postgres://replica"}}},
            "connection.primary": shared,
        },
    )

    primary = UserRepositoryFactory.named("primary")(container)
    print(f"primary_reused={primary.connection is shared}")  # => primary_reused=True

    replica = UserRepositoryFactory.named("replica")(container)
    print(f"replica_dsn={replica.connection.dsn}")  # => replica_dsn=postgres://replica


if __name__ == "__main__":
    main()
