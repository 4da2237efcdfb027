"""Leapstamp: leap-second aware timestamps with exact decimal seconds.

Leapstamp models a point in time as a UTC epoch day (days since
2000-01-01), a UTC time of day in exact decimal seconds and an optional
fixed local offset. Dates follow the proleptic Gregorian calendar over
years 0-9999; positive leap seconds are accepted on the last day of any
month from 1972 on.

Core Types:
    Timestamp: Point in time with an attached local offset
    Instant: UTC-relative record of a Timestamp's fields
    Date: Calendar date (year, month, day)
    TimeOfDay: Clock reading (hour, minute, decimal second)

Units:
    ZoneOffset: Fixed UTC offset as sign, hours and minutes

Functions:
    parse_rfc3339, format_rfc3339: RFC 3339 text
    to_epoch_seconds, from_epoch_seconds, subtract: Epoch seconds
    temporally_equal, fully_equal, compare: Equivalences and order
    to_json, from_json: Tagged JSON dictionaries

Exceptions:
    LeapstampError: Base of recoverable errors
    InvariantError: Fatal error for values with no timestamp

Example:
    >>> from leapstamp import Timestamp
    >>> ts = Timestamp.from_string("2016-12-31T23:59:60.5Z")
    >>> ts.in_leap_second()
    True
    >>> ts.to_epoch_seconds()
    Decimal('536543999.9')
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from leapstamp.core.date import Date
from leapstamp.core.instant import Instant
from leapstamp.core.time import TimeOfDay
from leapstamp.core.timestamp import EPOCH, Timestamp

# Units
from leapstamp.units.offset import ZONE_OFFSET_ZERO, ZoneOffset

# Calendar engine
from leapstamp._internal.calendar import (
    MAX_EPOCH_DAYS,
    MIN_EPOCH_DAYS,
    date_from_days,
    days_from_date,
)

# Leap seconds
from leapstamp.core.leapsecond import (
    clamp_utc_time_of_day_seconds,
    in_leap_second,
    is_leap_second_day,
    without_leap_seconds,
)

# Exceptions
from leapstamp.errors import (
    InvalidDateError,
    InvalidLeapSecondError,
    InvalidOffsetError,
    InvalidTimeOfDayError,
    InvariantError,
    LeapstampError,
    OutOfRangeError,
    ParseError,
    ValidationError,
)

# Functions
from leapstamp.arithmetic import compare, fully_equal, temporally_equal
from leapstamp.convert import (
    from_epoch_seconds,
    from_json,
    subtract,
    to_epoch_seconds,
    to_json,
)
from leapstamp.format import (
    format_rfc3339,
    parse_rfc3339,
    parse_rfc3339_no_leap_seconds,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Timestamp",
    "Instant",
    "Date",
    "TimeOfDay",
    "EPOCH",
    # Units
    "ZoneOffset",
    "ZONE_OFFSET_ZERO",
    # Calendar engine
    "days_from_date",
    "date_from_days",
    "MIN_EPOCH_DAYS",
    "MAX_EPOCH_DAYS",
    # Leap seconds
    "is_leap_second_day",
    "clamp_utc_time_of_day_seconds",
    "in_leap_second",
    "without_leap_seconds",
    # Exceptions
    "LeapstampError",
    "ValidationError",
    "InvalidDateError",
    "InvalidTimeOfDayError",
    "InvalidLeapSecondError",
    "InvalidOffsetError",
    "OutOfRangeError",
    "ParseError",
    "InvariantError",
    # Functions
    "temporally_equal",
    "fully_equal",
    "compare",
    "to_epoch_seconds",
    "from_epoch_seconds",
    "subtract",
    "parse_rfc3339",
    "parse_rfc3339_no_leap_seconds",
    "format_rfc3339",
    "to_json",
    "from_json",
]
