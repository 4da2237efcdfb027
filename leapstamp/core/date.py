"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates
in the proleptic Gregorian calendar between 0000-01-01 and 9999-12-31.
"""

from __future__ import annotations

import re

from leapstamp._internal.calendar import (
    date_from_days,
    day_of_week,
    days_from_date,
    days_in_month,
    is_leap_year,
)
from leapstamp._internal.validation import parse_year
from leapstamp.errors import ParseError

_ISO_DATE_PATTERN = re.compile(r"([+-]?\d+)-(\d{2})-(\d{2})", re.ASCII)


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date represents a specific calendar day with year, month, and day
    components. The Gregorian leap-year rule is extended backward to
    year 0, which equals 1 BC.

    Internal representation is the epoch day number (days since
    2000-01-01), the same count used by Instant.

    Attributes:
        year: The year (0-9999).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> d.year
        2024
        >>> d.epoch_days
        8780

        >>> Date(2024, 2, 29)  # Valid leap year date
        Date(2024, 2, 29)
    """

    __slots__ = ("_days",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Raises:
            InvalidDateError: If any component is out of range or the
                day does not exist in that month.

        Examples:
            >>> Date(1900, 2, 29)  # 1900 is not a leap year
            Traceback (most recent call last):
            ...
            InvalidDateError: day must be between 1 and 28 for 1900-02, got 29
        """
        self._days: int = days_from_date(year, month, day)

    @classmethod
    def from_epoch_days(cls, days: int) -> Date:
        """Create a Date from an epoch day number.

        Raises:
            OutOfRangeError: If the day lies outside the supported range.

        Examples:
            >>> Date.from_epoch_days(0)
            Date(2000, 1, 1)
            >>> Date.from_epoch_days(-1)
            Date(1999, 12, 31)
        """
        date_from_days(days)
        instance = object.__new__(cls)
        instance._days = days
        return instance

    @classmethod
    def from_iso_format(cls, s: str) -> Date:
        """Parse a date from ISO 8601 format (YYYY-MM-DD).

        Raises:
            ParseError: If the string is not YYYY-MM-DD.
            InvalidDateError: If the date components are invalid.

        Examples:
            >>> Date.from_iso_format("2024-01-15")
            Date(2024, 1, 15)
        """
        match = _ISO_DATE_PATTERN.fullmatch(s)
        if not match:
            raise ParseError(
                f"Invalid ISO 8601 date format: {s!r}. Expected YYYY-MM-DD"
            )
        return cls(
            parse_year(match.group(1)), int(match.group(2)), int(match.group(3))
        )

    @property
    def year(self) -> int:
        """Return the year component."""
        return date_from_days(self._days)[0]

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return date_from_days(self._days)[1]

    @property
    def day(self) -> int:
        """Return the day of the month."""
        return date_from_days(self._days)[2]

    @property
    def epoch_days(self) -> int:
        """Return the number of days since 2000-01-01."""
        return self._days

    @property
    def day_of_week(self) -> int:
        """Return the day of the week.

        Returns Monday as 0 through Sunday as 6.

        Examples:
            >>> Date(2000, 1, 1).day_of_week  # Saturday
            5
        """
        return day_of_week(self._days)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366).

        Examples:
            >>> Date(2024, 12, 31).day_of_year  # Leap year
            366
        """
        year, _, _ = date_from_days(self._days)
        return self._days - days_from_date(year, 1, 1) + 1

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self.year)

    @property
    def is_last_day_of_month(self) -> bool:
        """Return True if this is the final day of its month.

        Examples:
            >>> Date(2023, 6, 30).is_last_day_of_month
            True
            >>> Date(2024, 2, 28).is_last_day_of_month
            False
        """
        year, month, day = date_from_days(self._days)
        return day == days_in_month(year, month)

    def to_tuple(self) -> tuple[int, int, int]:
        """Return (year, month, day)."""
        return date_from_days(self._days)

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string (YYYY-MM-DD).

        Examples:
            >>> Date(33, 4, 3).to_iso_format()
            '0033-04-03'
        """
        year, month, day = date_from_days(self._days)
        return f"{year:04d}-{month:02d}-{day:02d}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days == other._days

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        return hash(self._days)

    def __repr__(self) -> str:
        """Return a detailed string representation like 'Date(2024, 1, 15)'."""
        year, month, day = date_from_days(self._days)
        return f"Date({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["Date"]
