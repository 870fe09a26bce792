# ABOUTME: pytest configuration for field versioning tests
# ABOUTME: Configures timeouts, settings isolation and shared resolver fixtures

import pytest

from field_versions.components.resolver.registry import VersionRegistry
from field_versions.config.settings import get_settings
from field_versions.implementations.content.json_codec import JsonContentCodec
from field_versions.implementations.content.python_codec import PythonContentCodec


def pytest_configure(config):
    """Configure pytest for field versioning tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")
    config.addinivalue_line("markers", "benchmark: Benchmark tests with 60-second timeout")
    config.addinivalue_line("markers", "config: Configuration tests")


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        # Check for existing timeout marker - if it exists, respect it
        existing_timeout = item.get_closest_marker("timeout")
        if existing_timeout:
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif any(item.get_closest_marker(mark) for mark in ["integration", "benchmark"]):
            item.add_marker(pytest.mark.timeout(60))
        # Other tests will use the global default (60 seconds from pyproject.toml)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Resolvers read defaults from cached settings; reset around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def json_codec():
    """JSON content codec."""
    return JsonContentCodec()


@pytest.fixture
def python_codec():
    """Python-object content codec."""
    return PythonContentCodec()


@pytest.fixture
def registry():
    """Fresh, isolated version registry."""
    return VersionRegistry(name="test")
