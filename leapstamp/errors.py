"""Leapstamp exception hierarchy.

Recoverable errors inherit from LeapstampError. They are raised for
untrusted input: bad calendar fields, malformed text, values that fall
outside the supported range.

InvariantError is the fatal counterpart. It is raised when a caller hands
the library a value that has no corresponding timestamp at all (an
impossible Instant, an epoch-seconds value beyond year 9999). It is not a
LeapstampError, so handlers written for untrusted input do not catch it.
"""

from __future__ import annotations

from typing import ClassVar


class LeapstampError(Exception):
    """Base exception for all recoverable Leapstamp errors."""

    kind: ClassVar[str] = "LeapstampError"


class ValidationError(LeapstampError):
    """Invalid input values.

    Raised when a calendar, clock or offset field is out of range.
    """

    kind: ClassVar[str] = "ValidationError"


class InvalidDateError(ValidationError):
    """Calendar field out of range or nonexistent day.

    Examples:
        - Month value outside 1-12
        - February 29 in a common year (1900-02-29)
        - Year outside 0-9999
    """

    kind: ClassVar[str] = "InvalidDate"


class InvalidTimeOfDayError(ValidationError):
    """Hour, minute or second out of range for the day."""

    kind: ClassVar[str] = "InvalidTimeOfDay"


class InvalidLeapSecondError(InvalidTimeOfDayError):
    """A second 60 where no positive leap second may occur.

    Leap seconds are only permitted in the last second of the last day
    of a month, from 1972 onward.
    """

    kind: ClassVar[str] = "InvalidLeapSecond"


class InvalidOffsetError(ValidationError):
    """Zone offset fields out of range.

    Examples:
        - Offset hour outside 0-23
        - A negative sign on a zero offset
    """

    kind: ClassVar[str] = "InvalidOffset"


class OutOfRangeError(LeapstampError):
    """Epoch day or instant outside the supported year span.

    Raised when a conversion produces a point in time before
    0000-01-01T00:00:00 or after 9999-12-31T23:59:60.
    """

    kind: ClassVar[str] = "OutOfRange"


class ParseError(LeapstampError):
    """Textual input does not match the timestamp grammar.

    Examples:
        - Missing 'T' separator
        - Two-digit month written as one digit
        - Missing offset designator
    """

    kind: ClassVar[str] = "MalformedTimestamp"


class InvariantError(RuntimeError):
    """A value with no corresponding timestamp.

    This is the unrecoverable error of the library: it signals a
    programmer error rather than bad external input. The offending
    recoverable error, if any, is chained as ``__cause__``.

    Attributes:
        kind: One of "InvalidInstant", "InvalidLeapSecond", "OutOfRange".
    """

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind: str = kind


__all__ = [
    "LeapstampError",
    "ValidationError",
    "InvalidDateError",
    "InvalidTimeOfDayError",
    "InvalidLeapSecondError",
    "InvalidOffsetError",
    "OutOfRangeError",
    "ParseError",
    "InvariantError",
]
