"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the owl test suite.
"""

import shutil
import sys
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

# =============================================================================
# Plugin Registration
# =============================================================================

pytest_plugins = [
    "tests.fixtures.config",
    "tests.fixtures.logging",
    "tests.fixtures.network",
]


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers",
        "integration: Integration tests (subprocesses, signals, loopback sockets)",
    )
    config.addinivalue_line("markers", "e2e: End-to-end tests (full supervisor run)")
    config.addinivalue_line("markers", "posix: Tests that need POSIX signals")


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Provide a temporary directory that is cleaned up after the test.

    Yields:
        Path: Temporary directory path
    """
    temp_path = Path(tempfile.mkdtemp(prefix="owl-test-"))
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def python_cmd() -> list[str]:
    """Command prefix running the current interpreter."""
    return [sys.executable, "-c"]


# =============================================================================
# Test Collection Hooks
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """
    Add the 'unit' marker to unmarked tests and skip POSIX-only tests elsewhere.

    Args:
        config: Pytest config object
        items: List of collected test items
    """
    skip_posix = pytest.mark.skip(reason="requires POSIX signals")
    for item in items:
        if not any(
            mark.name in ["integration", "e2e"] for mark in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)
        if sys.platform == "win32" and any(
            mark.name == "posix" for mark in item.iter_markers()
        ):
            item.add_marker(skip_posix)
