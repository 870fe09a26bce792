# ABOUTME: Benchmark test configuration for version resolution
# ABOUTME: Marks every test under the benchmark directory

import pytest


def pytest_collection_modifyitems(config, items):
    """Add benchmark marker to all tests in benchmark directory."""
    for item in items:
        if "benchmark" in str(item.fspath):
            item.add_marker(pytest.mark.benchmark)

