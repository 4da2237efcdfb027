"""Pytest configuration and fixtures for Leapstamp tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so leapstamp can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def leap_second_2016():
    """The middle of the leap second that ended 2016, in UTC."""
    from leapstamp import Timestamp

    return Timestamp.from_string("2016-12-31T23:59:60.5Z")
