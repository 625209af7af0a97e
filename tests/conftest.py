"""Pytest configuration and fixtures for utcscale tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so utcscale can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def leap_neighbourhood():
    """The last normal second, the leap second and the next minute of 1971."""
    from utcscale import Utc

    return (
        Utc(1971, 12, 31, 23, 59, 59),
        Utc(1971, 12, 31, 23, 59, 60),
        Utc(1972, 1, 1, 0, 0, 0),
    )
