"""Shared pytest fixtures for configfactory tests."""

import pytest

from configfactory.integrations.pytest_plugin import RecordingContainer

pytest_plugins = ["configfactory.integrations.pytest_plugin"]

VARIANT_NAMES = ["", "primary", "name-6f1c2a"]


@pytest.fixture(params=VARIANT_NAMES, ids=["default", "primary", "generated"])
def variant_name(request: pytest.FixtureRequest) -> str:
    """Variant names exercised by every name-sensitive test."""
    return request.param


@pytest.fixture()
def container() -> RecordingContainer:
    """Empty recording container."""
    return RecordingContainer()
