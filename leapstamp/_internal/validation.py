"""Validation utilities for Leapstamp.

This module provides the range checks shared by the value types and the
conversion functions. Each check raises the specific ValidationError
subclass for the field it inspects.

This module is not part of the public API.
"""

from __future__ import annotations

from leapstamp._internal.constants import MAX_YEAR, MIN_YEAR
from leapstamp.errors import (
    InvalidDateError,
    InvalidOffsetError,
    InvalidTimeOfDayError,
)


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass but never a sensible calendar field
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Args:
        year: The year to validate.

    Raises:
        InvalidDateError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    _require_int("year", year)
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidDateError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def parse_year(text: str) -> int:
    """Convert the digits of a year field to a validated year.

    Args:
        text: Decimal digits with an optional sign, e.g. "2024" or "+0033".

    Returns:
        The year as an int.

    Raises:
        InvalidDateError: If the year is outside MIN_YEAR to MAX_YEAR.

    Examples:
        >>> parse_year("+0033")
        33
    """
    digits = text.lstrip("+-").lstrip("0")
    # int() never sees a field longer than MAX_YEAR
    if len(digits) > len(str(MAX_YEAR)):
        raise InvalidDateError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, "
            f"got a {len(digits)}-digit year"
        )
    year = int(text)
    validate_year(year)
    return year


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Args:
        month: The month to validate.

    Raises:
        InvalidDateError: If month is outside 1-12.
    """
    _require_int("month", month)
    if month < 1 or month > 12:
        raise InvalidDateError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        InvalidDateError: If day is invalid for the month.
    """
    from leapstamp._internal.calendar import days_in_month

    _require_int("day", day)
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidDateError(
            f"day must be between 1 and {max_day} for {year:04d}-{month:02d}, got {day}"
        )


def validate_hour_minute(hour: int, minute: int) -> None:
    """Validate the hour and minute of a time of day.

    Raises:
        InvalidTimeOfDayError: If hour is outside 0-23 or minute outside 0-59.
    """
    _require_int("hour", hour)
    _require_int("minute", minute)
    if not (0 <= hour <= 23):
        raise InvalidTimeOfDayError(f"hour must be between 0 and 23, got {hour}")
    if not (0 <= minute <= 59):
        raise InvalidTimeOfDayError(f"minute must be between 0 and 59, got {minute}")


def validate_offset_fields(sign: int, hour: int, minute: int) -> None:
    """Validate the fields of a zone offset.

    Raises:
        InvalidOffsetError: If sign is not +1/-1, hour is outside 0-23,
            minute is outside 0-59, or a zero offset carries a minus sign.
    """
    _require_int("sign", sign)
    _require_int("hour", hour)
    _require_int("minute", minute)
    if sign not in (1, -1):
        raise InvalidOffsetError(f"sign must be +1 or -1, got {sign}")
    if not (0 <= hour <= 23):
        raise InvalidOffsetError(f"offset hour must be between 0 and 23, got {hour}")
    if not (0 <= minute <= 59):
        raise InvalidOffsetError(
            f"offset minute must be between 0 and 59, got {minute}"
        )
    if sign == -1 and hour == 0 and minute == 0:
        raise InvalidOffsetError("a zero offset must have a positive sign")


__all__ = [
    "parse_year",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_hour_minute",
    "validate_offset_fields",
]
