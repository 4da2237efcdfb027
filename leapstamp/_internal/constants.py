"""Internal constants for Leapstamp.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

MINUTES_PER_HOUR: int = 60
MINUTES_PER_DAY: int = 24 * MINUTES_PER_HOUR

# A positive leap second stretches the day to 86_401 seconds
SECONDS_PER_LEAP_DAY: int = SECONDS_PER_DAY + 1

# Year limits of the supported calendar range
MIN_YEAR: int = 0
MAX_YEAR: int = 9999

# First year in which a positive leap second may be inserted
FIRST_LEAP_SECOND_YEAR: int = 1972

# Offsets are limited to +/- 23:59
MAX_OFFSET_MINUTES: int = MINUTES_PER_DAY - 1

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days in a full Gregorian cycle of 400 years
DAYS_PER_ERA: int = 146_097

# Days from 0000-03-01 (start of the March-based era 0) to the epoch
DAYS_FROM_ERA_START_TO_EPOCH: int = 730_425


__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MINUTES_PER_HOUR",
    "MINUTES_PER_DAY",
    "SECONDS_PER_LEAP_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "FIRST_LEAP_SECOND_YEAR",
    "MAX_OFFSET_MINUTES",
    "DAYS_IN_MONTH",
    "DAYS_PER_ERA",
    "DAYS_FROM_ERA_START_TO_EPOCH",
]
