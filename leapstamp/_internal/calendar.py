"""Calendar utilities for Leapstamp.

This module converts between a signed day count and proleptic Gregorian
(year, month, day) tuples.

Epoch day 0 = 2000-01-01 (a Saturday)

The conversions are closed form. Years are shifted to start on March 1 so
that the leap day is the last day of the shifted year; a 400-year era
then always has 146097 days and the day of the shifted year maps to a
month with the linear formula (153 * m + 2) // 5. No loops, no floats.

This module is not part of the public API.
"""

from __future__ import annotations

from leapstamp._internal.constants import (
    DAYS_FROM_ERA_START_TO_EPOCH,
    DAYS_IN_MONTH,
    DAYS_PER_ERA,
    MAX_YEAR,
    MIN_YEAR,
)
from leapstamp._internal.validation import validate_day, validate_month, validate_year
from leapstamp.errors import OutOfRangeError


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(0)  # 1 BC
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.
    """
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def _days_from_civil(year: int, month: int, day: int) -> int:
    # March-based year: January and February belong to the previous year
    y = year - 1 if month <= 2 else year
    era = y // 400
    year_of_era = y - era * 400
    shifted_month = (month + 9) % 12
    day_of_year = (153 * shifted_month + 2) // 5 + day - 1
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )
    return era * DAYS_PER_ERA + day_of_era - DAYS_FROM_ERA_START_TO_EPOCH


def _civil_from_days(days: int) -> tuple[int, int, int]:
    z = days + DAYS_FROM_ERA_START_TO_EPOCH
    era = z // DAYS_PER_ERA
    day_of_era = z - era * DAYS_PER_ERA
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36524
        - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400
    if month <= 2:
        year += 1
    return (year, month, day)


def days_from_date(year: int, month: int, day: int) -> int:
    """Convert year, month, day to days since the epoch (2000-01-01).

    Args:
        year: The year (0-9999; year 0 is 1 BC).
        month: The month (1-12).
        day: The day (1 to the length of the month).

    Returns:
        The signed epoch day number.

    Raises:
        InvalidDateError: If the date does not exist or the year is out
            of range.

    Examples:
        >>> days_from_date(2000, 1, 1)
        0
        >>> days_from_date(1999, 12, 31)
        -1
        >>> days_from_date(2000, 3, 1)
        60
    """
    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)
    return _days_from_civil(year, month, day)


MIN_EPOCH_DAYS: int = _days_from_civil(MIN_YEAR, 1, 1)
MAX_EPOCH_DAYS: int = _days_from_civil(MAX_YEAR, 12, 31)


def date_from_days(days: int) -> tuple[int, int, int]:
    """Convert days since the epoch to (year, month, day).

    Args:
        days: The signed epoch day number.

    Returns:
        Tuple of (year, month, day).

    Raises:
        OutOfRangeError: If the day lies outside 0000-01-01..9999-12-31.

    Examples:
        >>> date_from_days(0)
        (2000, 1, 1)
        >>> date_from_days(59)
        (2000, 2, 29)
    """
    if not isinstance(days, int) or isinstance(days, bool):
        raise TypeError(f"days must be an integer, got {type(days).__name__}")
    if days < MIN_EPOCH_DAYS or days > MAX_EPOCH_DAYS:
        raise OutOfRangeError(
            f"epoch day {days} is outside the supported range "
            f"[{MIN_EPOCH_DAYS}, {MAX_EPOCH_DAYS}]"
        )
    return _civil_from_days(days)


def day_of_week(days: int) -> int:
    """Convert an epoch day to day of week (Monday=0, Sunday=6)."""
    # Epoch day 0 (2000-01-01) was a Saturday (day 5 in Monday=0 system)
    return (days + 5) % 7


def is_last_day_of_month(year: int, month: int, day: int) -> bool:
    """Return True if the date is the final day of its month."""
    return day == days_in_month(year, month)


__all__ = [
    "MIN_EPOCH_DAYS",
    "MAX_EPOCH_DAYS",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_from_date",
    "date_from_days",
    "day_of_week",
    "is_last_day_of_month",
]
