"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SCHEMAS_DIR = Path(__file__).parent.parent / "schemas"


@pytest.fixture
def cff_fixture() -> Callable[[str], Path]:
    """Return the path of a CFF fixture by stem, e.g. ``cff_fixture("short")``."""

    def _path(stem: str) -> Path:
        return FIXTURES_DIR / "cff" / f"{stem}.cff"

    return _path


@pytest.fixture
def csl_fixture() -> Callable[[str], Path]:
    """Return the path of a CSL-JSON fixture by stem."""

    def _path(stem: str) -> Path:
        return FIXTURES_DIR / "csl" / f"{stem}.json"

    return _path
