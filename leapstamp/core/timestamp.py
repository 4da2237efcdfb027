"""Timestamp class: a point in time with an attached local offset.

This module provides the Timestamp class and the EPOCH constant. A
Timestamp stores the same three fields as an Instant (epoch day, UTC time
of day in exact decimal seconds, local offset in minutes) and converts
between them, calendar fields in UTC or local time, epoch seconds and
RFC 3339 text.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import TYPE_CHECKING

from leapstamp._internal import seconds as _seconds
from leapstamp._internal.calendar import (
    MAX_EPOCH_DAYS,
    MIN_EPOCH_DAYS,
    date_from_days,
)
from leapstamp._internal.constants import (
    MAX_OFFSET_MINUTES,
    SECONDS_PER_DAY,
    SECONDS_PER_MINUTE,
)
from leapstamp.core.date import Date
from leapstamp.core.instant import Instant
from leapstamp.core.leapsecond import (
    check_utc_time_of_day,
    clamp_utc_time_of_day_seconds,
)
from leapstamp.core.time import TimeOfDay
from leapstamp.errors import (
    InvalidLeapSecondError,
    InvalidOffsetError,
    InvariantError,
    OutOfRangeError,
    ValidationError,
)
from leapstamp.units.offset import ZONE_OFFSET_ZERO, ZoneOffset

if TYPE_CHECKING:
    from leapstamp._internal.seconds import SecondsLike

logger = logging.getLogger(__name__)


def _offset_minutes(offset: ZoneOffset | None) -> int | None:
    if offset is None:
        return None
    if not isinstance(offset, ZoneOffset):
        raise TypeError(f"expected ZoneOffset or None, got {type(offset).__name__}")
    return offset.total_minutes


def _shift(days: int, seconds: Decimal, minutes: int) -> tuple[int, Decimal]:
    """Move a time of day in [0, 86400) by a signed minute count.

    The offset is less than a day, so the day changes by at most one.
    """
    shifted = _seconds.add(seconds, minutes * SECONDS_PER_MINUTE)
    if shifted < 0:
        return days - 1, _seconds.add(shifted, SECONDS_PER_DAY)
    if shifted >= SECONDS_PER_DAY:
        return days + 1, _seconds.subtract(shifted, SECONDS_PER_DAY)
    return days, shifted


class Timestamp:
    """A single point in time plus the local offset it was observed in.

    The point in time is held in UTC as an epoch day (days since
    2000-01-01) and a time of day in exact decimal seconds; during a
    positive leap second the time of day is in [86400, 86401). The local
    offset is metadata: it selects how local_date() and local_time_of_day()
    present the instant and does not change which instant it is. An
    offset of None means "UTC, offset unspecified", which is not the same
    state as an offset of zero.

    Two equivalences exist. temporally_equal() compares the instant only;
    fully_equal() also compares the offset. The == operator is full
    equivalence.

    Examples:
        >>> ts = Timestamp.from_string("2024-01-15T14:30:45.125+05:30")
        >>> ts.epoch_days, ts.utc_time_of_day_seconds, ts.local_offset_minutes
        (8780, Decimal('32445.125'), 330)
        >>> ts.utc_time_of_day()
        TimeOfDay(9, 0, Decimal('45.125'))
        >>> str(ts)
        '2024-01-15T14:30:45.125+05:30'
    """

    __slots__ = ("_days", "_seconds", "_offset")

    def __init__(
        self,
        date: Date,
        time: TimeOfDay,
        offset: ZoneOffset | None = ZONE_OFFSET_ZERO,
    ) -> None:
        """Create a Timestamp from local date, local time and offset.

        Same as from_local_date_time_offset().

        Raises:
            InvalidLeapSecondError: If time is a leap second that does not
                fall in the last second of a leap-second UTC day.
            OutOfRangeError: If the UTC instant falls outside the
                supported years.
        """
        if not isinstance(date, Date):
            raise TypeError(f"expected Date, got {type(date).__name__}")
        if not isinstance(time, TimeOfDay):
            raise TypeError(f"expected TimeOfDay, got {type(time).__name__}")
        minutes = _offset_minutes(offset)

        leap = time.is_leap_second
        local = time.total_seconds
        if leap:
            local = _seconds.subtract(local, 1)

        days, utc = _shift(date.epoch_days, local, -(minutes or 0))
        date_from_days(days)

        if leap:
            if utc < SECONDS_PER_DAY - 1:
                raise InvalidLeapSecondError(
                    f"leap second {time} on {date} is not in the last second "
                    f"of the UTC day"
                )
            utc = _seconds.add(utc, 1)
        check_utc_time_of_day(days, utc)

        self._days: int = days
        self._seconds: Decimal = utc
        self._offset: int | None = minutes

    @classmethod
    def _from_internal(
        cls,
        days: int,
        seconds: Decimal,
        offset: int | None,
    ) -> Timestamp:
        """Create a Timestamp from its internal fields, bypassing validation."""
        instance = object.__new__(cls)
        instance._days = days
        instance._seconds = seconds
        instance._offset = offset
        return instance

    @classmethod
    def _validated(
        cls,
        days: int,
        seconds: Decimal,
        offset: int | None,
    ) -> Timestamp:
        """Create a Timestamp from internal fields, with recoverable errors."""
        if offset is not None and abs(offset) > MAX_OFFSET_MINUTES:
            raise InvalidOffsetError(
                f"offset of {offset} minutes is outside "
                f"[-{MAX_OFFSET_MINUTES}, {MAX_OFFSET_MINUTES}]"
            )
        date_from_days(days)
        check_utc_time_of_day(days, seconds)
        instance = cls._from_internal(days, seconds, offset)
        date_from_days(instance._local_fields()[0])
        return instance

    # Construction

    @classmethod
    def from_local_date_time_offset(
        cls,
        date: Date,
        time: TimeOfDay,
        offset: ZoneOffset | None,
    ) -> Timestamp:
        """Create a Timestamp from fields already expressed in a zone.

        The date and time are local to a zone offset ahead of UTC; the
        UTC instant is found by subtracting the offset, carrying across
        the day boundary. A second in [60, 61) must land in the last
        second of a UTC day that may hold a leap second.

        Args:
            date: The local date.
            time: The local time of day.
            offset: The zone offset, or None for an unspecified offset
                (the fields are then read as UTC).

        Raises:
            InvalidLeapSecondError: If the leap second is misplaced.
            OutOfRangeError: If the UTC instant leaves the supported years.

        Examples:
            >>> ts = Timestamp.from_local_date_time_offset(
            ...     Date(2023, 12, 31), TimeOfDay(23, 59, "60.5"), ZONE_OFFSET_ZERO
            ... )
            >>> ts.in_leap_second()
            True
        """
        return cls(date, time, offset)

    @classmethod
    def from_instant(cls, instant: Instant) -> Timestamp:
        """Create a Timestamp from an Instant.

        This is the exact inverse of to_instant().

        Raises:
            InvariantError: If the Instant denotes no point in time: a time
                of day outside [0, 86401), a leap second on a day that
                cannot hold one (kind "InvalidLeapSecond"), a day or local
                day outside the supported range, or an offset of a day or
                more (kind "InvalidInstant").
        """
        if not isinstance(instant, Instant):
            raise TypeError(f"expected Instant, got {type(instant).__name__}")
        try:
            return cls._validated(
                instant.epoch_days,
                instant.utc_time_of_day_seconds,
                instant.local_offset_minutes,
            )
        except InvalidLeapSecondError as exc:
            logger.debug("rejected instant %r: %s", instant, exc)
            raise InvariantError("InvalidLeapSecond", str(exc)) from exc
        except (ValidationError, OutOfRangeError) as exc:
            logger.debug("rejected instant %r: %s", instant, exc)
            raise InvariantError("InvalidInstant", str(exc)) from exc

    @classmethod
    def from_epoch_seconds(cls, seconds: SecondsLike) -> Timestamp:
        """Create a Timestamp from seconds since 2000-01-01T00:00:00Z.

        Leap seconds are not counted, so the result never lies inside
        one. The local offset of the result is 0.

        Raises:
            InvariantError: If the seconds fall outside the supported
                years (kind "OutOfRange").

        Examples:
            >>> Timestamp.from_epoch_seconds(Decimal("86400.5"))
            Timestamp('2000-01-02T00:00:00.5Z')
        """
        value = _seconds.to_seconds(seconds)
        # bounds first, so floor() never builds a huge int
        lower = MIN_EPOCH_DAYS * SECONDS_PER_DAY
        upper = (MAX_EPOCH_DAYS + 1) * SECONDS_PER_DAY
        if value < lower or value >= upper:
            logger.debug("rejected epoch seconds %s", value)
            raise InvariantError(
                "OutOfRange",
                f"epoch seconds must be in [{lower}, {upper}), got {value}",
            )
        days = math.floor(value) // SECONDS_PER_DAY
        time_of_day = _seconds.subtract(value, days * SECONDS_PER_DAY)
        return cls._from_internal(days, time_of_day, 0)

    @classmethod
    def from_string(cls, text: str) -> Timestamp:
        """Parse an RFC 3339 timestamp; see leapstamp.format.parse_rfc3339."""
        from leapstamp.format.rfc3339 import parse_rfc3339

        return parse_rfc3339(text)

    @classmethod
    def from_no_leap_seconds_string(cls, text: str) -> Timestamp:
        """Parse an RFC 3339 timestamp that may not contain a leap second."""
        from leapstamp.format.rfc3339 import parse_rfc3339_no_leap_seconds

        return parse_rfc3339_no_leap_seconds(text)

    # Projections

    def to_instant(self) -> Instant:
        """Return the Instant holding this timestamp's fields."""
        return Instant(self._days, self._seconds, self._offset)

    @property
    def epoch_days(self) -> int:
        """Return the UTC day as days since 2000-01-01."""
        return self._days

    @property
    def utc_time_of_day_seconds(self) -> Decimal:
        """Return the seconds since UTC midnight, in [0, 86401)."""
        return self._seconds

    @property
    def local_offset_minutes(self) -> int | None:
        """Return the local offset in minutes, or None if unspecified."""
        return self._offset

    # UTC and local calendar fields

    def _local_fields(self) -> tuple[int, Decimal, bool]:
        """Return (local epoch day, local seconds, leap) for this timestamp.

        During a leap second the local seconds are the clock reading
        without the inserted second and leap is True.
        """
        seconds = self._seconds
        leap = seconds >= SECONDS_PER_DAY
        if leap:
            seconds = _seconds.subtract(seconds, 1)
        days, local = _shift(self._days, seconds, self._offset or 0)
        return days, local, leap

    def utc_date(self) -> Date:
        """Return the calendar date in UTC."""
        return Date.from_epoch_days(self._days)

    def utc_time_of_day(self) -> TimeOfDay:
        """Return the time of day in UTC; 23:59:60.x during a leap second."""
        return TimeOfDay._from_seconds(self._seconds)

    def local_date(self) -> Date:
        """Return the calendar date in the attached offset.

        Examples:
            >>> Timestamp.from_string("2000-01-01T00:30:00+01:00").utc_date()
            Date(1999, 12, 31)
            >>> Timestamp.from_string("2000-01-01T00:30:00+01:00").local_date()
            Date(2000, 1, 1)
        """
        days, _, _ = self._local_fields()
        return Date.from_epoch_days(days)

    def local_time_of_day(self) -> TimeOfDay:
        """Return the time of day in the attached offset.

        A leap second keeps its second 60 in local time, at whatever
        minute the offset moves it to.

        Examples:
            >>> ts = Timestamp.from_string("2016-12-31T23:59:60.5Z")
            >>> ts.with_local_offset(ZoneOffset(1, 1, 0)).local_time_of_day()
            TimeOfDay(0, 59, Decimal('60.5'))
        """
        _, local, leap = self._local_fields()
        return TimeOfDay._from_seconds(local, leap=leap)

    def local_offset(self) -> ZoneOffset:
        """Return the attached offset as a ZoneOffset.

        An unspecified offset is presented as ZONE_OFFSET_ZERO; use
        local_offset_minutes to tell the two states apart.
        """
        if self._offset is None:
            return ZONE_OFFSET_ZERO
        return ZoneOffset.from_minutes(self._offset)

    def with_local_offset(self, offset: ZoneOffset | None) -> Timestamp:
        """Return the same instant with a different attached offset.

        Only the offset metadata changes; epoch_days and
        utc_time_of_day_seconds are kept.

        Raises:
            OutOfRangeError: If the local date in the new offset falls
                outside the supported years.
        """
        minutes = _offset_minutes(offset)
        result = Timestamp._from_internal(self._days, self._seconds, minutes)
        date_from_days(result._local_fields()[0])
        return result

    # Leap seconds

    def in_leap_second(self) -> bool:
        """Return True if this instant lies inside a positive leap second."""
        return self._seconds >= SECONDS_PER_DAY

    def without_leap_seconds(self) -> Timestamp:
        """Return this timestamp with any partial leap second clamped away.

        The offset is preserved.

        Examples:
            >>> Timestamp.from_string("2016-12-31T23:59:60.25Z").without_leap_seconds()
            Timestamp('2016-12-31T23:59:59.99Z')
        """
        clamped = clamp_utc_time_of_day_seconds(self._seconds)
        return Timestamp._from_internal(self._days, clamped, self._offset)

    # Epoch seconds

    def to_epoch_seconds(self) -> Decimal:
        """Return the seconds since 2000-01-01T00:00:00Z, leap seconds ignored.

        A partial leap second is clamped away before counting.

        Examples:
            >>> Timestamp.from_string("2000-01-02T00:00:01.5+01:00").to_epoch_seconds()
            Decimal('82801.5')
        """
        return _seconds.add(
            Decimal(self._days * SECONDS_PER_DAY),
            clamp_utc_time_of_day_seconds(self._seconds),
        )

    # Text

    def to_string(self) -> str:
        """Return the RFC 3339 text of the local fields and offset."""
        from leapstamp.format.rfc3339 import format_rfc3339

        return format_rfc3339(self)

    # Equivalences

    def temporally_equal(self, other: Timestamp) -> bool:
        """Return True if other denotes the same instant, whatever its offset."""
        if not isinstance(other, Timestamp):
            raise TypeError(f"expected Timestamp, got {type(other).__name__}")
        return self._days == other._days and self._seconds == other._seconds

    def fully_equal(self, other: Timestamp) -> bool:
        """Return True if other has the same instant and the same offset state."""
        return self.temporally_equal(other) and self._offset == other._offset

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.fully_equal(other)

    def __hash__(self) -> int:
        return hash((self._days, self._seconds, self._offset))

    def __repr__(self) -> str:
        return f"Timestamp({self.to_string()!r})"

    def __str__(self) -> str:
        return self.to_string()


EPOCH: Timestamp = Timestamp._from_internal(0, Decimal(0), 0)


__all__ = ["Timestamp", "EPOCH"]
