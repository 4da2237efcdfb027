"""Comparison operations for timestamps.

This module provides explicit comparison functions for Timestamp. Two
notions of equality exist and neither is the other's special case in
every use, so both are spelled out by name.

Comparison Rules:
    - temporally_equal: same UTC instant (epoch day and UTC time of day),
      regardless of the attached offset. Decimal seconds compare
      numerically, so 5.1 and 5.10 are the same instant.
    - fully_equal: same instant and the same offset state; an
      unspecified offset (None) differs from an offset of zero.
    - compare: temporal order of the UTC instants; offsets are ignored.

Supported Operations:
    - temporally_equal: Test for the same instant
    - fully_equal: Test for the same instant and offset
    - compare: Return -1, 0, or 1 in temporal order
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from leapstamp.core.timestamp import Timestamp


def _check_timestamps(left: object, right: object) -> None:
    from leapstamp.core.timestamp import Timestamp

    for value in (left, right):
        if not isinstance(value, Timestamp):
            raise TypeError(f"expected Timestamp, got {type(value).__name__}")


def temporally_equal(left: "Timestamp", right: "Timestamp") -> bool:
    """Test whether two timestamps denote the same instant.

    Args:
        left: First timestamp.
        right: Second timestamp.

    Returns:
        True if epoch_days and utc_time_of_day_seconds are equal.

    Raises:
        TypeError: If either argument is not a Timestamp.

    Examples:
        >>> from leapstamp import Timestamp
        >>> a = Timestamp.from_string("2024-01-15T12:00:00+01:00")
        >>> b = Timestamp.from_string("2024-01-15T11:00:00.00Z")
        >>> temporally_equal(a, b)
        True
    """
    _check_timestamps(left, right)
    return left.temporally_equal(right)


def fully_equal(left: "Timestamp", right: "Timestamp") -> bool:
    """Test whether two timestamps have the same instant and offset.

    Raises:
        TypeError: If either argument is not a Timestamp.

    Examples:
        >>> from leapstamp import Timestamp
        >>> a = Timestamp.from_string("2024-01-15T11:00:00Z")
        >>> b = Timestamp.from_string("2024-01-15T11:00:00-00:00")
        >>> fully_equal(a, b)
        False
    """
    _check_timestamps(left, right)
    return left.fully_equal(right)


def compare(left: "Timestamp", right: "Timestamp") -> int:
    """Compare two timestamps in temporal order.

    Returns:
        -1 if left is earlier than right, 0 if they denote the same
        instant, 1 if left is later. An instant inside a leap second
        orders after 23:59:59.x of the same UTC day and before the
        following midnight.

    Raises:
        TypeError: If either argument is not a Timestamp.

    Examples:
        >>> from leapstamp import Timestamp
        >>> leap = Timestamp.from_string("2016-12-31T23:59:60Z")
        >>> midnight = Timestamp.from_string("2017-01-01T00:00:00Z")
        >>> compare(leap, midnight)
        -1
    """
    _check_timestamps(left, right)
    left_key = (left.epoch_days, left.utc_time_of_day_seconds)
    right_key = (right.epoch_days, right.utc_time_of_day_seconds)
    if left_key < right_key:
        return -1
    if left_key > right_key:
        return 1
    return 0


__all__ = [
    "temporally_equal",
    "fully_equal",
    "compare",
]
