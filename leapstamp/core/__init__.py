"""Core Leapstamp types.

This module provides the fundamental value types:
    - Date: Calendar date in the proleptic Gregorian calendar
    - TimeOfDay: Clock reading with exact decimal seconds
    - Instant: UTC-relative record of a point in time
    - Timestamp: Point in time with an attached local offset
"""

from __future__ import annotations

from leapstamp.core.date import Date
from leapstamp.core.instant import Instant
from leapstamp.core.time import TimeOfDay
from leapstamp.core.timestamp import EPOCH, Timestamp

__all__: list[str] = [
    "Date",
    "Instant",
    "TimeOfDay",
    "Timestamp",
    "EPOCH",
]
