"""Internal utilities for Leapstamp.

This module contains private implementation details:
    - The calendar engine (epoch days <-> year, month, day)
    - Exact decimal seconds arithmetic
    - Validation helpers
    - Constants and magic numbers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from leapstamp._internal.calendar import date_from_days, days_from_date
from leapstamp._internal.seconds import to_seconds
from leapstamp._internal.validation import (
    validate_day,
    validate_hour_minute,
    validate_month,
    validate_offset_fields,
    validate_year,
)

__all__: list[str] = [
    "date_from_days",
    "days_from_date",
    "to_seconds",
    "validate_day",
    "validate_hour_minute",
    "validate_month",
    "validate_offset_fields",
    "validate_year",
]
