"""Zone offset representation.

This module provides the ZoneOffset class for representing the signed
hour/minute displacement of local time from UTC, without any time-zone
database support.
"""

from __future__ import annotations

import re

from leapstamp._internal.constants import MAX_OFFSET_MINUTES, MINUTES_PER_HOUR
from leapstamp._internal.validation import validate_offset_fields
from leapstamp.errors import InvalidOffsetError, ParseError

_OFFSET_PATTERN = re.compile(r"([+-])(\d{2}):(\d{2})", re.ASCII)


class ZoneOffset:
    """A UTC offset as sign, hours and minutes.

    Positive offsets are east of UTC (local time ahead of UTC). A zero
    offset always has a positive sign; there is no "-00:00" ZoneOffset.

    Attributes:
        sign: +1 or -1.
        hour: Hour component of the offset (0-23).
        minute: Minute component of the offset (0-59).

    Examples:
        >>> tz = ZoneOffset(1, 5, 30)
        >>> tz.total_minutes
        330

        >>> ZoneOffset.from_string("-08:00").total_minutes
        -480

        >>> str(ZoneOffset.from_minutes(-90))
        '-01:30'
    """

    __slots__ = ("_sign", "_hour", "_minute")

    def __init__(self, sign: int, hour: int, minute: int = 0) -> None:
        """Create a ZoneOffset from its fields.

        Raises:
            InvalidOffsetError: If a field is out of range or a zero
                offset carries a negative sign.
        """
        validate_offset_fields(sign, hour, minute)
        self._sign: int = sign
        self._hour: int = hour
        self._minute: int = minute

    @classmethod
    def from_minutes(cls, minutes: int) -> ZoneOffset:
        """Create a ZoneOffset from a signed minute count.

        Args:
            minutes: Offset in minutes, strictly between -1440 and 1440.

        Raises:
            InvalidOffsetError: If minutes is out of range.

        Examples:
            >>> ZoneOffset.from_minutes(0)
            ZoneOffset(+00:00)
        """
        if not isinstance(minutes, int) or isinstance(minutes, bool):
            raise TypeError(
                f"minutes must be an integer, got {type(minutes).__name__}"
            )
        if abs(minutes) > MAX_OFFSET_MINUTES:
            raise InvalidOffsetError(
                f"offset of {minutes} minutes is outside "
                f"[-{MAX_OFFSET_MINUTES}, {MAX_OFFSET_MINUTES}]"
            )
        sign = -1 if minutes < 0 else 1
        hour, minute = divmod(abs(minutes), MINUTES_PER_HOUR)
        return cls(sign, hour, minute)

    @classmethod
    def from_string(cls, s: str) -> ZoneOffset:
        """Parse "+HH:MM", "-HH:MM" or "Z".

        "-00:00" is rejected: it denotes an unspecified offset, which is
        not a ZoneOffset.

        Raises:
            ParseError: If the string is not an offset.
            InvalidOffsetError: If the fields are out of range.
        """
        if not isinstance(s, str):
            raise TypeError(f"Expected string, got {type(s).__name__}")

        if s in ("Z", "z"):
            return ZONE_OFFSET_ZERO

        match = _OFFSET_PATTERN.fullmatch(s)
        if not match:
            raise ParseError(f"Cannot parse zone offset: {s!r}")
        sign_str, hour_str, minute_str = match.groups()
        return cls(1 if sign_str == "+" else -1, int(hour_str), int(minute_str))

    @property
    def sign(self) -> int:
        """Return +1 or -1."""
        return self._sign

    @property
    def hour(self) -> int:
        """Return the hour component of the offset."""
        return self._hour

    @property
    def minute(self) -> int:
        """Return the minute component of the offset."""
        return self._minute

    @property
    def total_minutes(self) -> int:
        """Return the signed offset in minutes."""
        return self._sign * (self._hour * MINUTES_PER_HOUR + self._minute)

    @property
    def is_zero(self) -> bool:
        """Return True for +00:00."""
        return self._hour == 0 and self._minute == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self.total_minutes == other.total_minutes

    def __hash__(self) -> int:
        return hash(self.total_minutes)

    def __repr__(self) -> str:
        return f"ZoneOffset({self})"

    def __str__(self) -> str:
        """Return the offset as "+HH:MM" or "-HH:MM"."""
        sign = "+" if self._sign > 0 else "-"
        return f"{sign}{self._hour:02d}:{self._minute:02d}"


ZONE_OFFSET_ZERO: ZoneOffset = ZoneOffset(1, 0, 0)


__all__ = ["ZoneOffset", "ZONE_OFFSET_ZERO"]
