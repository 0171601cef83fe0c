"""Pytest configuration and fixtures for live end-to-end testing."""

import os

import pytest

# Read at import time: the suite-wide autouse fixture clears OMDB_* variables
# before each test runs.
_LIVE_API_KEY = os.environ.get("OMDB_API_KEY")


def pytest_configure(config: pytest.Config) -> None:
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests requiring OMDBQUERY_E2E_TESTS=1"
    )
    config.addinivalue_line("markers", "api: Tests requiring a real OMDb API key")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip E2E tests unless explicitly enabled."""
    if not os.environ.get("OMDBQUERY_E2E_TESTS"):
        skip_e2e = pytest.mark.skip(reason="E2E tests require OMDBQUERY_E2E_TESTS=1")
        for item in items:
            if "e2e" in item.keywords:
                item.add_marker(skip_e2e)


@pytest.fixture
def live_api_key() -> str:
    """Return the real OMDb key or skip the test."""
    if not _LIVE_API_KEY:
        pytest.skip("Test requires OMDB_API_KEY")
    return _LIVE_API_KEY
