"""JSON serialization and deserialization for Leapstamp values.

This module provides functions for converting Leapstamp values to and
from JSON-serializable dictionaries.

Functions:
    to_json: Convert a value to a JSON-serializable dict.
    from_json: Create a value from a JSON dict.

The JSON format uses text encodings with type tags for polymorphic
deserialization. Seconds are always written as decimal strings so no
precision is lost to binary floats:

    {"_type": "Timestamp", "value": "2016-12-31T23:59:60.5Z"}
    {"_type": "Date", "value": "2024-01-15"}
    {"_type": "TimeOfDay", "value": "14:30:45.125"}
    {"_type": "ZoneOffset", "value": "-08:00"}
    {"_type": "Instant", "epoch_days": 0, "utc_time_of_day_seconds": "0",
     "local_offset_minutes": null}

Examples:
    >>> from leapstamp import Timestamp
    >>> from leapstamp.convert import to_json, from_json

    >>> ts = Timestamp.from_string("2024-01-15T14:30:45-00:00")
    >>> data = to_json(ts)
    >>> data['_type']
    'Timestamp'

    >>> from_json(data) == ts
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from leapstamp.errors import ParseError, ValidationError

if TYPE_CHECKING:
    from leapstamp.core.date import Date
    from leapstamp.core.instant import Instant
    from leapstamp.core.time import TimeOfDay
    from leapstamp.core.timestamp import Timestamp
    from leapstamp.units.offset import ZoneOffset

# Type alias for serializable values
SerializableType = Union["Timestamp", "Date", "TimeOfDay", "ZoneOffset", "Instant"]


def to_json(value: SerializableType) -> dict[str, Any]:
    """Convert a Leapstamp value to a JSON-serializable dictionary.

    The returned dictionary includes a `_type` field for polymorphic
    deserialization. Text-encodable types carry a `value` field; an
    Instant carries its three fields, with the seconds as a string.

    Args:
        value: A Timestamp, Date, TimeOfDay, ZoneOffset or Instant.

    Returns:
        A JSON-serializable dictionary with type information.

    Raises:
        TypeError: If value is not a supported type.

    Examples:
        >>> from leapstamp import Date, Instant, TimeOfDay, ZoneOffset
        >>> to_json(Date(2024, 1, 15))
        {'_type': 'Date', 'value': '2024-01-15'}

        >>> to_json(TimeOfDay(23, 59, "60.5"))
        {'_type': 'TimeOfDay', 'value': '23:59:60.5'}

        >>> to_json(ZoneOffset(-1, 8, 0))
        {'_type': 'ZoneOffset', 'value': '-08:00'}

        >>> to_json(Instant(1, "3600.50", None))["utc_time_of_day_seconds"]
        '3600.50'
    """
    # Import here to avoid circular imports
    from leapstamp.core.date import Date
    from leapstamp.core.instant import Instant
    from leapstamp.core.time import TimeOfDay
    from leapstamp.core.timestamp import Timestamp
    from leapstamp.units.offset import ZoneOffset

    if isinstance(value, Timestamp):
        return {"_type": "Timestamp", "value": value.to_string()}
    elif isinstance(value, Date):
        return {"_type": "Date", "value": value.to_iso_format()}
    elif isinstance(value, TimeOfDay):
        return {"_type": "TimeOfDay", "value": value.to_iso_format()}
    elif isinstance(value, ZoneOffset):
        return {"_type": "ZoneOffset", "value": str(value)}
    elif isinstance(value, Instant):
        return {
            "_type": "Instant",
            "epoch_days": value.epoch_days,
            "utc_time_of_day_seconds": str(value.utc_time_of_day_seconds),
            "local_offset_minutes": value.local_offset_minutes,
        }
    else:
        raise TypeError(
            "expected Timestamp, Date, TimeOfDay, ZoneOffset, or Instant, "
            f"got {type(value).__name__}"
        )


def _require_value(data: dict[str, Any], type_name: str) -> str:
    value = data.get("value")
    if not value:
        raise ParseError(f"missing 'value' field for {type_name}")
    if not isinstance(value, str):
        raise ParseError(
            f"'value' field for {type_name} must be a string, "
            f"got {type(value).__name__}"
        )
    return value


def _instant_from_json(data: dict[str, Any]) -> "Instant":
    from leapstamp.core.instant import Instant

    for field in ("epoch_days", "utc_time_of_day_seconds"):
        if field not in data:
            raise ParseError(f"missing {field!r} field for Instant")
    seconds = data["utc_time_of_day_seconds"]
    if not isinstance(seconds, str):
        raise ParseError(
            "'utc_time_of_day_seconds' for Instant must be a decimal string, "
            f"got {type(seconds).__name__}"
        )
    try:
        return Instant(
            data["epoch_days"],
            seconds,
            data.get("local_offset_minutes"),
        )
    except (TypeError, ValidationError) as exc:
        raise ParseError(f"invalid Instant fields: {exc}") from exc


def from_json(data: dict[str, Any]) -> SerializableType:
    """Create a Leapstamp value from a JSON dictionary.

    The dictionary must include a `_type` field specifying the type to
    create. Values are validated exactly as the matching parser does.

    Args:
        data: A dictionary produced by to_json().

    Returns:
        A Timestamp, Date, TimeOfDay, ZoneOffset or Instant based on the
        `_type` field.

    Raises:
        ParseError: If the data is missing required fields or has an
            invalid format.
        TypeError: If `_type` is not a recognized type.

    Examples:
        >>> from_json({'_type': 'Date', 'value': '2024-01-15'})
        Date(2024, 1, 15)

        >>> from_json({'_type': 'ZoneOffset', 'value': '+05:30'})
        ZoneOffset(+05:30)

        >>> from_json({'_type': 'Timestamp', 'value': '2016-12-31T23:59:60Z'}).in_leap_second()
        True
    """
    # Import here to avoid circular imports
    from leapstamp.core.date import Date
    from leapstamp.core.time import TimeOfDay
    from leapstamp.core.timestamp import Timestamp
    from leapstamp.units.offset import ZoneOffset

    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if not type_name:
        raise ParseError("missing '_type' field in JSON data")

    if type_name == "Timestamp":
        return Timestamp.from_string(_require_value(data, type_name))
    elif type_name == "Date":
        return Date.from_iso_format(_require_value(data, type_name))
    elif type_name == "TimeOfDay":
        return TimeOfDay.from_iso_format(_require_value(data, type_name))
    elif type_name == "ZoneOffset":
        return ZoneOffset.from_string(_require_value(data, type_name))
    elif type_name == "Instant":
        return _instant_from_json(data)
    else:
        raise TypeError(f"unknown type: {type_name!r}")


__all__ = [
    "to_json",
    "from_json",
]
