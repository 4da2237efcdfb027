"""TimeOfDay class representing a clock reading within a day.

This module provides the TimeOfDay class with exact decimal seconds.
"""

from __future__ import annotations

import re
from decimal import Decimal

from leapstamp._internal import seconds as _seconds
from leapstamp._internal.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from leapstamp._internal.validation import validate_hour_minute
from leapstamp.errors import InvalidTimeOfDayError, ParseError

_ISO_TIME_PATTERN = re.compile(r"(\d{2}):(\d{2}):(\d{2}(?:\.\d+)?)", re.ASCII)


class TimeOfDay:
    """A time of day with exact decimal seconds.

    TimeOfDay represents the clock reading of a day, from midnight
    (00:00:00) up to the end of a positive leap second (23:59:60.999...).
    It does not include any date or offset information.

    The second field is a decimal.Decimal whose exponent is kept as
    given, so 5.10 and 5.1 render differently while comparing equal.

    A second in [60, 61) is accepted by the structure; whether a leap
    second is legal depends on the day and the offset, and is checked by
    the conversions that combine a TimeOfDay with a Date.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component, a Decimal in [0, 61).

    Examples:
        >>> t = TimeOfDay(14, 30, "45.125")
        >>> t.second
        Decimal('45.125')
        >>> t.total_seconds
        Decimal('52245.125')
    """

    __slots__ = ("_hour", "_minute", "_second")

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: _seconds.SecondsLike = 0,
    ) -> None:
        """Create a TimeOfDay from component parts.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second, as a Decimal, int or decimal string.

        Raises:
            InvalidTimeOfDayError: If any component is out of range.
            TypeError: If second is a float.
        """
        validate_hour_minute(hour, minute)
        value = _seconds.to_seconds(second, "second")
        if value < 0 or value >= SECONDS_PER_MINUTE + 1:
            raise InvalidTimeOfDayError(
                f"second must be in [0, 61), got {value}"
            )

        self._hour: int = hour
        self._minute: int = minute
        self._second: Decimal = value

    @classmethod
    def _from_seconds(cls, total: Decimal, *, leap: bool = False) -> TimeOfDay:
        """Create a TimeOfDay from seconds since midnight.

        This is an internal factory that bypasses validation. Values in
        [86400, 86401) map to 23:59:60.x.

        Args:
            total: Seconds since midnight [0, 86401).
            leap: Render total as the reading of a leap second: the
                clock shows the minute of total with second 60.x. Used
                when a leap second is seen from a shifted zone, where it
                does not fall at 23:59.
        """
        if total >= SECONDS_PER_DAY:
            total = _seconds.subtract(total, 1)
            leap = True
        whole = int(total)
        hour = whole // SECONDS_PER_HOUR
        minute = (whole % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE
        second = _seconds.subtract(
            total, hour * SECONDS_PER_HOUR + minute * SECONDS_PER_MINUTE
        )
        if leap:
            second = _seconds.add(second, 1)

        instance = object.__new__(cls)
        instance._hour = hour
        instance._minute = minute
        instance._second = second
        return instance

    @classmethod
    def from_iso_format(cls, s: str) -> TimeOfDay:
        """Parse a time of day from HH:MM:SS[.fraction].

        Raises:
            ParseError: If the string does not match the format.
            InvalidTimeOfDayError: If a component is out of range.

        Examples:
            >>> TimeOfDay.from_iso_format("23:59:60.5")
            TimeOfDay(23, 59, Decimal('60.5'))
        """
        match = _ISO_TIME_PATTERN.fullmatch(s)
        if not match:
            raise ParseError(
                f"Invalid time format: {s!r}. Expected HH:MM:SS[.fraction]"
            )
        return cls(int(match.group(1)), int(match.group(2)), Decimal(match.group(3)))

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._hour

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return self._minute

    @property
    def second(self) -> Decimal:
        """Return the second component, a Decimal in [0, 61)."""
        return self._second

    @property
    def total_seconds(self) -> Decimal:
        """Return the seconds elapsed since midnight.

        The result reaches [86400, 86401) only for 23:59:60.x; for other
        leap-second readings (such as 00:59:60 in a shifted zone) it is
        the count the clock would show without the extra second, plus
        the second itself.
        """
        return _seconds.add(
            self._second,
            self._hour * SECONDS_PER_HOUR + self._minute * SECONDS_PER_MINUTE,
        )

    @property
    def is_leap_second(self) -> bool:
        """Return True if the second field is in [60, 61)."""
        return self._second >= SECONDS_PER_MINUTE

    def to_iso_format(self) -> str:
        """Return the time as HH:MM:SS[.fraction].

        Examples:
            >>> TimeOfDay(9, 5, "3.10").to_iso_format()
            '09:05:03.10'
        """
        return (
            f"{self._hour:02d}:{self._minute:02d}:"
            f"{_seconds.format_seconds(self._second)}"
        )

    def _key(self) -> tuple[int, int, Decimal]:
        return (self._hour, self._minute, self._second)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        """Return a detailed string representation."""
        return f"TimeOfDay({self._hour}, {self._minute}, {self._second!r})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["TimeOfDay"]
