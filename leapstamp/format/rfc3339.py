"""RFC 3339 formatting and parsing.

RFC 3339 is a profile of ISO 8601 for timestamps in internet protocols.
This module reads and writes the profile with two extensions:

1. The year field may have any number of digits and an optional sign, so
   years such as 33 or +2024 are accepted; values must still lie in
   0-9999.
2. Fractional seconds may have any number of digits and are kept exactly.

The text always describes the *local* fields: the date and time as seen in
the stated offset. "Z" and "+00:00" are a zero offset; "-00:00" is an
unspecified offset (RFC 3339 section 4.3).

Functions:
    parse_rfc3339: Parse text into a Timestamp, leap seconds allowed.
    parse_rfc3339_no_leap_seconds: Parse text that may not hold a leap second.
    format_rfc3339: Format a Timestamp from its local fields.

Examples:
    >>> from leapstamp.format import parse_rfc3339, format_rfc3339

    >>> ts = parse_rfc3339("2016-12-31T23:59:60.5Z")
    >>> ts.in_leap_second()
    True

    >>> format_rfc3339(parse_rfc3339("2024-01-15T14:30:45.10-08:00"))
    '2024-01-15T14:30:45.10-08:00'
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import TYPE_CHECKING

from leapstamp._internal.constants import SECONDS_PER_MINUTE
from leapstamp._internal.validation import parse_year
from leapstamp.errors import InvalidLeapSecondError, ParseError

if TYPE_CHECKING:
    from leapstamp.core.timestamp import Timestamp

logger = logging.getLogger(__name__)

# [+-]Y...-MM-DDTHH:MM:SS[.fraction](Z|+HH:MM|-HH:MM)
_RFC3339_PATTERN = re.compile(
    r"^([+-]?\d+)-(\d{2})-(\d{2})"  # Date: variable-width year
    r"[Tt]"  # T separator (case insensitive)
    r"(\d{2}):(\d{2}):(\d{2}(?:\.\d+)?)"  # Time: HH:MM:SS[.fraction]
    r"([Zz]|[+-]\d{2}:\d{2})$",  # Required offset
    re.ASCII,
)

_UNSPECIFIED_OFFSET = "-00:00"


def _parse(s: str, *, allow_leap_second: bool) -> "Timestamp":
    from leapstamp.core.date import Date
    from leapstamp.core.time import TimeOfDay
    from leapstamp.core.timestamp import Timestamp
    from leapstamp.units.offset import ZoneOffset

    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")

    match = _RFC3339_PATTERN.fullmatch(s)
    if not match:
        logger.debug("malformed timestamp text %r", s)
        raise ParseError(
            f"Invalid RFC 3339 format: {s!r}. "
            "Expected YYYY-MM-DDTHH:MM:SS[.fraction]Z or "
            "YYYY-MM-DDTHH:MM:SS[.fraction]+/-HH:MM"
        )

    year, month, day, hour, minute, second, offset_str = match.groups()

    date = Date(parse_year(year), int(month), int(day))
    time = TimeOfDay(int(hour), int(minute), Decimal(second))

    if not allow_leap_second and time.second >= SECONDS_PER_MINUTE:
        raise InvalidLeapSecondError(f"leap seconds are not permitted: {s!r}")

    if offset_str == _UNSPECIFIED_OFFSET:
        offset = None
    else:
        offset = ZoneOffset.from_string(offset_str)

    return Timestamp.from_local_date_time_offset(date, time, offset)


def parse_rfc3339(s: str) -> "Timestamp":
    """Parse an RFC 3339 timestamp string.

    Args:
        s: Text of the form YYYY-MM-DDTHH:MM:SS[.fraction](Z|+HH:MM|-HH:MM).

    Returns:
        A Timestamp whose local fields are those written in s.

    Raises:
        ParseError: If s does not match the grammar.
        InvalidDateError: If the date does not exist or the year is
            outside 0-9999.
        InvalidTimeOfDayError: If the hour, minute or second is out of range.
        InvalidLeapSecondError: If second 60 is not the last second of a
            UTC day that may hold a leap second.
        InvalidOffsetError: If the offset fields are out of range.
        OutOfRangeError: If the UTC instant leaves the supported years.

    Examples:
        >>> parse_rfc3339("2024-01-15T14:30:45Z").utc_time_of_day()
        TimeOfDay(14, 30, Decimal('45'))

        >>> parse_rfc3339("2024-01-15 14:30:45Z")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ParseError: Invalid RFC 3339 format...
    """
    return _parse(s, allow_leap_second=True)


def parse_rfc3339_no_leap_seconds(s: str) -> "Timestamp":
    """Parse an RFC 3339 timestamp whose seconds field must be below 60.

    Same grammar and errors as parse_rfc3339(); a second of 60 or more
    raises InvalidLeapSecondError even on a leap-second day.
    """
    return _parse(s, allow_leap_second=False)


def format_rfc3339(value: "Timestamp") -> str:
    """Format a Timestamp as an RFC 3339 string.

    The local date, local time and offset are written, not the UTC
    fields. Seconds keep their exact fractional digits. A zero offset is
    written "Z" and an unspecified offset "-00:00".

    Raises:
        TypeError: If value is not a Timestamp.

    Examples:
        >>> from leapstamp import EPOCH
        >>> format_rfc3339(EPOCH)
        '2000-01-01T00:00:00Z'
    """
    from leapstamp.core.timestamp import Timestamp

    if not isinstance(value, Timestamp):
        raise TypeError(f"expected Timestamp, got {type(value).__name__}")

    minutes = value.local_offset_minutes
    if minutes is None:
        offset = _UNSPECIFIED_OFFSET
    elif minutes == 0:
        offset = "Z"
    else:
        offset = str(value.local_offset())

    return (
        f"{value.local_date().to_iso_format()}T"
        f"{value.local_time_of_day().to_iso_format()}{offset}"
    )


__all__ = [
    "parse_rfc3339",
    "parse_rfc3339_no_leap_seconds",
    "format_rfc3339",
]
