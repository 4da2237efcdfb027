"""Timestamp conversion utilities.

This module provides functions for converting Leapstamp values to and
from other representations:
    - JSON serialization and deserialization
    - Seconds since the 2000-01-01T00:00:00Z epoch

Examples:
    >>> from leapstamp import Timestamp
    >>> from leapstamp.convert import to_json, from_json

    >>> ts = Timestamp.from_string("2024-01-15T14:30:45.5+01:00")
    >>> from_json(to_json(ts)) == ts
    True

    >>> from leapstamp.convert import to_epoch_seconds, from_epoch_seconds
    >>> from_epoch_seconds(to_epoch_seconds(ts)).temporally_equal(ts)
    True
"""

from __future__ import annotations

from leapstamp.convert.epoch import (
    from_epoch_seconds,
    subtract,
    to_epoch_seconds,
)
from leapstamp.convert.json import from_json, to_json

__all__ = [
    # JSON
    "to_json",
    "from_json",
    # Epoch
    "to_epoch_seconds",
    "from_epoch_seconds",
    "subtract",
]
