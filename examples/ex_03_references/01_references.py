"""References: configuration strings that point at container entries.

A plain string naming a registered key is replaced by the registered service.
``Reference`` always fetches from the container and ``Raw`` keeps a value
literal even when it collides with a registered key.
"""

from __future__ import annotations

from typing import Any

from configfactory import AbstractFactory, ContainerProtocol, Raw, Reference


class Services:
    def __init__(self, services: dict[str, Any]) -> None:
        self._services = services

    def has(self, key: str) -> bool:
        return key in self._services

    def get(self, key: str) -> Any:
        return self._services[key]


class Mailer:
    def __init__(self) -> None:
        self.transport: Any = None
        self.sender = ""
        self.tags: list[Any] = []

    def setTransport(self, transport: Any) -> None:  # noqa: N802
        self.transport = transport

    def setSender(self, sender: str) -> None:  # noqa: N802
        self.sender = sender

    def setTags(self, tags: list[Any]) -> None:  # noqa: N802
        self.tags = tags


class MailerFactory(AbstractFactory[Mailer]):
    def __call__(self, container: ContainerProtocol) -> Mailer:
        config = self._resolve_config(container.get("config")["mailer"])
        return self._call_setters(container, Mailer(), config)


def main() -> None:
    container = Services(
        {
            "config": {
                "mailer": {
                    "transport": "mailer.transport.smtp",
                    "sender": Raw("mailer.transport.smtp"),
                    "tags": ["newsletter", Reference("mailer.default_tag")],
                },
            },
            "mailer.transport.smtp": "<smtp transport>",
            "mailer.default_tag": "transactional",
        },
    )

    mailer = MailerFactory()(container)
    print(f"transport={mailer.transport}")  # => transport=<smtp transport>
    print(f"sender={mailer.sender}")  # => sender=mailer.transport.smtp
    print(f"tags={mailer.tags}")  # => tags=['newsletter', 'transactional']


if __name__ == "__main__":
    main()
