"""
Shared test fixtures and helpers for the certinfo test suite.

Provides sample cert info lines (as libcurl reports them for a
self-signed localhost certificate) and path resolution for the text
dumps under tests/fixtures.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"

LOCALHOST_DN = "C = US, ST = Denial, L = Springfield, O = Dis, CN = localhost"
LOCALHOST_SERIAL = "1ee8b17f1b64d8d6b3de870103d2a4f533535ab0"
LOCALHOST_START = datetime(2023, 1, 10, 8, 29, 52, tzinfo=UTC)
LOCALHOST_EXPIRE = datetime(2025, 10, 30, 8, 29, 52, tzinfo=UTC)


@pytest.fixture()
def fixtures_dir() -> Path:
    """Return the absolute path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture()
def localhost_lines() -> list[str]:
    """Cert info lines for the localhost test certificate, all five fields present."""
    return [
        f"Subject:{LOCALHOST_DN}",
        f"Issuer:{LOCALHOST_DN}",
        f"Serial Number:{LOCALHOST_SERIAL}",
        "Start date:Jan 10 08:29:52 2023 GMT",
        "Expire date:Oct 30 08:29:52 2025 GMT",
    ]


def fixture_path(filename: str) -> Path:
    """
    Resolve the absolute path to a test fixture file.

    Raises FileNotFoundError if the fixture does not exist.
    """
    path = FIXTURES_DIR / filename
    if not path.exists():
        raise FileNotFoundError(f"Test fixture not found: {path}")
    return path
