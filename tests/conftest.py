"""Pytest configuration and fixtures for Sambat tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so sambat can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture()
def new_year_2077():
    """1 Baisakh 2077, which fell on Monday 13 April 2020."""
    from sambat import BikramSambat

    return BikramSambat("2077-01-01")
