"""Pytest configuration and shared fixtures for the eitherfx test suite."""

import os
from collections.abc import Generator

import pytest

from eitherfx.config import EitherSettings, reset_settings


# Pytest configuration
def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "property: mark test as a property-based test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


@pytest.fixture(scope="session", autouse=True)
def default_environment() -> Generator[None, None, None]:
    """Run the suite against default settings, unaffected by the host environment."""
    saved = {
        key: os.environ.pop(key) for key in list(os.environ) if key.startswith("EITHERFX_")
    }
    reset_settings()
    yield
    os.environ.update(saved)
    reset_settings()


@pytest.fixture
def fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings before and after a test that changes the environment."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def tracing_settings() -> EitherSettings:
    """Settings with scope tracing switched on."""
    return EitherSettings(trace_scopes=True)

