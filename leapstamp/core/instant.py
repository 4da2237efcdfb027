"""Instant, the UTC-relative decomposition of a Timestamp."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from leapstamp._internal.seconds import to_seconds


@dataclass(frozen=True, slots=True)
class Instant:
    """A point in time as epoch day, UTC time of day and local offset.

    Instant is a plain record. It is not validated on construction;
    Timestamp.from_instant decides whether a record denotes a real
    point in time.

    Attributes:
        epoch_days: Days since 2000-01-01.
        utc_time_of_day_seconds: Seconds since UTC midnight, in
            [0, 86401); 86400 or more only during a leap second.
        local_offset_minutes: Offset of local time from UTC in minutes,
            or None when the offset is unspecified (distinct from 0).

    Examples:
        >>> Instant(0, 0, 0)
        Instant(epoch_days=0, utc_time_of_day_seconds=Decimal('0'), local_offset_minutes=0)
        >>> Instant(0, 0, 0) == Instant(0, 0, None)
        False
    """

    epoch_days: int
    utc_time_of_day_seconds: Decimal
    local_offset_minutes: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.epoch_days, int) or isinstance(self.epoch_days, bool):
            raise TypeError(
                f"epoch_days must be an integer, got {type(self.epoch_days).__name__}"
            )
        offset = self.local_offset_minutes
        if offset is not None and (not isinstance(offset, int) or isinstance(offset, bool)):
            raise TypeError(
                f"local_offset_minutes must be an integer or None, "
                f"got {type(offset).__name__}"
            )
        object.__setattr__(
            self,
            "utc_time_of_day_seconds",
            to_seconds(self.utc_time_of_day_seconds, "utc_time_of_day_seconds"),
        )


__all__ = ["Instant"]
