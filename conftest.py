"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from baht_text.handlers import ENGLISH, THAI  # noqa: E402


@pytest.fixture
def thai():
    return THAI


@pytest.fixture
def english():
    return ENGLISH
