"""Pydantic settings as the raw configuration source.

Models are dumped to plain mappings before the variant slice is taken, so
factories work the same with settings objects and with dictionaries.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from pydantic_settings import BaseSettings

from configfactory import AbstractFactory, ContainerProtocol


class Services:
    def __init__(self, services: dict[str, Any]) -> None:
        self._services = services

    def has(self, key: str) -> bool:
        return key in self._services

    def get(self, key: str) -> Any:
        return self._services[key]


class QueueConfig(BaseModel):
    url: str
    prefetch: int = 10


class QueueSettings(BaseSettings):
    orders: QueueConfig = QueueConfig(url="amqp://orders")
    emails: QueueConfig = QueueConfig(url="amqp://emails", prefetch=1)


class Consumer:
    def __init__(self) -> None:
        self.url = ""
        self.prefetch = 0

    def set_url(self, url: str) -> None:
        self.url = url

    def set_prefetch(self, prefetch: int) -> None:
        self.prefetch = prefetch


class ConsumerFactory(AbstractFactory[Consumer]):
    def __call__(self, container: ContainerProtocol) -> Consumer:
        config = self._resolve_config(container.get("settings.queues"))
        return self._call_setters(container, Consumer(), config)


def main() -> None:
    container = Services({"settings.queues": QueueSettings()})

    emails = ConsumerFactory.named("emails")(container)
    print(f"emails url={emails.url} prefetch={emails.prefetch}")  # => emails url=amqp://emails prefetch=1


if __name__ == "__main__":
    main()
