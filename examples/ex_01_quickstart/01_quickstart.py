"""Quickstart: one factory class, several named variants.

The default variant reads a flat ``http`` configuration section. Named
variants read the entry carrying their name in ``http_clients``. Resolved
values are pushed onto the client through its ``set_<key>`` methods.
"""

from __future__ import annotations

from typing import Any

from configfactory import AbstractFactory, ContainerProtocol, variants


class Services:
    def __init__(self, services: dict[str, Any]) -> None:
        self._services = services

    def has(self, key: str) -> bool:
        return key in self._services

    def get(self, key: str) -> Any:
        return self._services[key]


class HttpClient:
    def __init__(self) -> None:
        self.base_url = ""
        self.timeout = 0.0

    def set_base_url(self, base_url: str) -> None:
        self.base_url = base_url

    def set_timeout(self, timeout: float) -> None:
        self.timeout = timeout


class HttpClientFactory(AbstractFactory[HttpClient]):
    def __call__(self, container: ContainerProtocol) -> HttpClient:
        section = "http" if self.name == "" else "http_clients"
        config = self._resolve_config(container.get("config")[section])
        return self._call_setters(container, HttpClient(), config)


def main() -> None:
    container = Services(
        {
            "config": {
                "http": {"base_url": "https://api.example.com", "timeout": 5.0},
                "http_clients": {
                    "backoffice": {"base_url": "https://backoffice.example.com", "timeout": 30.0},
                },
            },
        },
    )

    default_client = HttpClientFactory()(container)
    print(f"default={default_client.base_url} timeout={default_client.timeout}")  # => default=https://api.example.com timeout=5.0

    backoffice_client = HttpClientFactory.named("backoffice")(container)
    print(f"backoffice={backoffice_client.base_url}")  # => backoffice=https://backoffice.example.com

    unknown_client = HttpClientFactory.named("reporting")(container)
    print(f"reporting={unknown_client.base_url!r}")  # => reporting=''

    factories = variants(HttpClientFactory, "", "backoffice")
    print(f"variants={list(factories)}")  # => variants=['', 'backoffice']


if __name__ == "__main__":
    main()
