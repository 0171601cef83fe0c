"""Shared pytest fixtures for omdbquery tests.

- Clears OMDB_* environment variables so Settings never picks up a developer's
  real key or endpoint.
- Exposes ``load_fixture`` for the static OMDb payloads in
  tests/fixtures/stubs/omdb.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

OMDB_URL = "https://www.omdbapi.com/"
FIXTURE_DIR = Path(__file__).parent / "fixtures" / "stubs" / "omdb"


def load_fixture(fixture_name: str) -> dict[str, Any]:
    """Load an OMDb payload from tests/fixtures/stubs/omdb.

    Args:
        fixture_name: The name of the fixture file without extension.

    Raises:
        FileNotFoundError: If the fixture file doesn't exist.
    """
    fixture_path = FIXTURE_DIR / f"{fixture_name}.json"
    if not fixture_path.exists():
        raise FileNotFoundError(f"Fixture file not found: {fixture_path}")
    with open(fixture_path, encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


@pytest.fixture(autouse=True)
def clean_omdb_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove OMDb settings from the environment for every test."""
    for key in ("OMDB_API_KEY", "OMDB_BASE_URL", "OMDB_TIMEOUT", "OMDBQUERY_DEBUG"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def omdb_payload() -> Callable[[str], dict[str, Any]]:
    """Return the fixture loader so tests can pick a payload by name."""
    return load_fixture
