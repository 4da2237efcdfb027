"""Positive leap-second policy.

A UTC day may run to 86401 seconds only if it is the last day of a month
in 1972 or later. Only positive leap seconds exist in this model.

Functions:
    is_leap_second_day: Whether an epoch day may contain a leap second.
    check_utc_time_of_day: Validate a UTC time of day against its day.
    clamp_utc_time_of_day_seconds: Remove a partial leap second.
    in_leap_second: Whether a Timestamp lies inside a leap second.
    without_leap_seconds: Clamp a Timestamp out of a leap second.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from leapstamp._internal import seconds as _seconds
from leapstamp._internal.calendar import date_from_days, is_last_day_of_month
from leapstamp._internal.constants import (
    FIRST_LEAP_SECOND_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_LEAP_DAY,
)
from leapstamp.errors import InvalidLeapSecondError, InvalidTimeOfDayError

if TYPE_CHECKING:
    from leapstamp.core.timestamp import Timestamp


def is_leap_second_day(epoch_days: int) -> bool:
    """Return True if the UTC day may end with a positive leap second.

    Raises:
        OutOfRangeError: If the day lies outside the supported range.

    Examples:
        >>> from leapstamp._internal.calendar import days_from_date
        >>> is_leap_second_day(days_from_date(2023, 12, 31))
        True
        >>> is_leap_second_day(days_from_date(1971, 12, 31))
        False
    """
    year, month, day = date_from_days(epoch_days)
    return year >= FIRST_LEAP_SECOND_YEAR and is_last_day_of_month(year, month, day)


def check_utc_time_of_day(epoch_days: int, seconds: Decimal) -> None:
    """Validate a UTC time of day for the given epoch day.

    Raises:
        InvalidTimeOfDayError: If seconds is outside [0, 86401).
        InvalidLeapSecondError: If seconds is 86400 or more on a day that
            cannot hold a leap second.
    """
    if seconds < 0 or seconds >= SECONDS_PER_LEAP_DAY:
        raise InvalidTimeOfDayError(
            f"UTC time of day must be in [0, {SECONDS_PER_LEAP_DAY}), got {seconds}"
        )
    if seconds >= SECONDS_PER_DAY and not is_leap_second_day(epoch_days):
        year, month, day = date_from_days(epoch_days)
        raise InvalidLeapSecondError(
            f"{year:04d}-{month:02d}-{day:02d} cannot contain a leap second"
        )


def clamp_utc_time_of_day_seconds(seconds: _seconds.SecondsLike) -> Decimal:
    """Remove a partial leap second from a UTC time of day.

    Values of 86400 or more become the greatest decimal below 86400 with
    the same number of fractional digits; other values pass through
    unchanged. The operation is exact and idempotent.

    Examples:
        >>> clamp_utc_time_of_day_seconds(Decimal("86400.5"))
        Decimal('86399.9')
        >>> clamp_utc_time_of_day_seconds(Decimal("86400.250"))
        Decimal('86399.999')
        >>> clamp_utc_time_of_day_seconds(86400)
        Decimal('86399')
        >>> clamp_utc_time_of_day_seconds(Decimal("3600.5"))
        Decimal('3600.5')
    """
    value = _seconds.to_seconds(seconds)
    if value < SECONDS_PER_DAY:
        return value
    return _seconds.subtract(Decimal(SECONDS_PER_DAY), _seconds.quantum(value))


def in_leap_second(ts: "Timestamp") -> bool:
    """Return True if the timestamp lies inside a positive leap second."""
    return ts.in_leap_second()


def without_leap_seconds(ts: "Timestamp") -> "Timestamp":
    """Return the timestamp with any partial leap second clamped away."""
    return ts.without_leap_seconds()


__all__ = [
    "is_leap_second_day",
    "check_utc_time_of_day",
    "clamp_utc_time_of_day_seconds",
    "in_leap_second",
    "without_leap_seconds",
]
