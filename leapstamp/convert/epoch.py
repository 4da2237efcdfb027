"""Epoch-seconds conversion for timestamps.

This module converts between Timestamp and a count of seconds since the
epoch 2000-01-01T00:00:00Z. Leap seconds are not counted: every UTC day
contributes exactly 86400 seconds, and a partial leap second is clamped
away before counting.

Functions:
    to_epoch_seconds: Convert a Timestamp to seconds since the epoch.
    from_epoch_seconds: Create a Timestamp from seconds since the epoch.
    subtract: Exact difference in epoch seconds between two timestamps.

Examples:
    >>> from leapstamp import Timestamp
    >>> from leapstamp.convert import to_epoch_seconds, from_epoch_seconds

    >>> to_epoch_seconds(Timestamp.from_string("2000-01-02T00:00:00Z"))
    Decimal('86400')

    >>> from_epoch_seconds(-1)
    Timestamp('1999-12-31T23:59:59Z')
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from leapstamp._internal import seconds as _seconds

if TYPE_CHECKING:
    from leapstamp._internal.seconds import SecondsLike
    from leapstamp.core.timestamp import Timestamp


def _require_timestamp(value: object) -> None:
    from leapstamp.core.timestamp import Timestamp

    if not isinstance(value, Timestamp):
        raise TypeError(f"expected Timestamp, got {type(value).__name__}")


def to_epoch_seconds(ts: "Timestamp") -> Decimal:
    """Convert a Timestamp to seconds since 2000-01-01T00:00:00Z.

    The result is epoch_days * 86400 plus the clamped UTC time of day, so
    every instant inside a leap second maps below the following midnight.

    Args:
        ts: The Timestamp to convert.

    Returns:
        The exact number of seconds as a Decimal.

    Raises:
        TypeError: If ts is not a Timestamp.

    Examples:
        >>> from leapstamp import Timestamp
        >>> to_epoch_seconds(Timestamp.from_string("2016-12-31T23:59:60.5Z"))
        Decimal('536543999.9')
    """
    _require_timestamp(ts)
    return ts.to_epoch_seconds()


def from_epoch_seconds(seconds: "SecondsLike") -> "Timestamp":
    """Create a Timestamp from seconds since 2000-01-01T00:00:00Z.

    Args:
        seconds: A Decimal, int or decimal string; may be negative.

    Returns:
        A Timestamp with a local offset of 0. It never lies inside a
        leap second.

    Raises:
        InvariantError: If the value falls outside the supported years
            (kind "OutOfRange").

    Examples:
        >>> from_epoch_seconds(0)
        Timestamp('2000-01-01T00:00:00Z')
    """
    from leapstamp.core.timestamp import Timestamp

    return Timestamp.from_epoch_seconds(seconds)


def subtract(ts1: "Timestamp", ts2: "Timestamp") -> Decimal:
    """Return the exact epoch-seconds difference ts1 - ts2.

    Leap seconds are not counted, so the difference across a leap second
    is the same as across any other midnight. Offsets do not matter.

    Raises:
        TypeError: If either argument is not a Timestamp.

    Examples:
        >>> from leapstamp import Timestamp
        >>> a = Timestamp.from_string("2024-01-15T12:00:00.5+01:00")
        >>> b = Timestamp.from_string("2024-01-15T11:00:00Z")
        >>> subtract(a, b)
        Decimal('0.5')
    """
    _require_timestamp(ts1)
    _require_timestamp(ts2)
    return _seconds.subtract(ts1.to_epoch_seconds(), ts2.to_epoch_seconds())


__all__ = [
    "to_epoch_seconds",
    "from_epoch_seconds",
    "subtract",
]
