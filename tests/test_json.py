"""Tests for JSON serialization and deserialization."""

from __future__ import annotations

import json
from decimal import Decimal

import pytest

from leapstamp import Date, Instant, TimeOfDay, Timestamp, ZoneOffset
from leapstamp.convert import from_json, to_json
from leapstamp.errors import InvalidLeapSecondError, ParseError


class TestToJson:
    """Tests for to_json()."""

    def test_timestamp(self) -> None:
        """Timestamps are written as RFC 3339 text."""
        ts = Timestamp.from_string("2016-12-31T23:59:60.5Z")
        assert to_json(ts) == {"_type": "Timestamp", "value": "2016-12-31T23:59:60.5Z"}

    def test_date(self) -> None:
        """Dates are written as YYYY-MM-DD."""
        assert to_json(Date(33, 4, 3)) == {"_type": "Date", "value": "0033-04-03"}

    def test_time_of_day(self) -> None:
        """Times keep their exact fraction."""
        assert to_json(TimeOfDay(9, 5, "3.10")) == {
            "_type": "TimeOfDay",
            "value": "09:05:03.10",
        }

    def test_zone_offset(self) -> None:
        """Offsets are written as +HH:MM."""
        assert to_json(ZoneOffset(-1, 8, 0)) == {"_type": "ZoneOffset", "value": "-08:00"}

    def test_instant(self) -> None:
        """Instants carry their fields with seconds as a string."""
        assert to_json(Instant(1, Decimal("3600.50"), None)) == {
            "_type": "Instant",
            "epoch_days": 1,
            "utc_time_of_day_seconds": "3600.50",
            "local_offset_minutes": None,
        }

    def test_serializable(self) -> None:
        """Results pass through json.dumps."""
        ts = Timestamp.from_string("2024-01-15T14:30:45.125+05:30")
        text = json.dumps([to_json(ts), to_json(ts.to_instant())])
        assert '"_type": "Timestamp"' in text
        assert '"_type": "Instant"' in text

    def test_unsupported_type(self) -> None:
        """Other values raise TypeError."""
        with pytest.raises(TypeError, match="got str"):
            to_json("2024-01-15")  # type: ignore[arg-type]


class TestFromJson:
    """Tests for from_json()."""

    @pytest.mark.parametrize(
        "value",
        [
            Timestamp.from_string("2017-01-01T00:59:60.5+01:00"),
            Timestamp.from_string("2024-01-15T14:30:45-00:00"),
            Date(2000, 2, 29),
            TimeOfDay(23, 59, "60.125"),
            ZoneOffset(1, 5, 30),
            Instant(6209, Decimal("86400.5"), 60),
            Instant(0, Decimal(0)),
        ],
    )
    def test_round_trip(self, value) -> None:
        """from_json reverses to_json, through a JSON string."""
        restored = from_json(json.loads(json.dumps(to_json(value))))
        assert type(restored) is type(value)
        assert restored == value

    def test_timestamp_validated(self) -> None:
        """Timestamp values are checked like any parsed text."""
        with pytest.raises(InvalidLeapSecondError):
            from_json({"_type": "Timestamp", "value": "2023-06-29T23:59:60Z"})

    def test_not_a_dict(self) -> None:
        """The payload must be a dict."""
        with pytest.raises(ParseError, match="expected dict"):
            from_json(["Date", "2024-01-15"])  # type: ignore[arg-type]

    def test_missing_type(self) -> None:
        """_type is required."""
        with pytest.raises(ParseError, match="missing '_type'"):
            from_json({"value": "2024-01-15"})

    def test_missing_value(self) -> None:
        """value is required for text-encoded types."""
        with pytest.raises(ParseError, match="missing 'value' field for Date"):
            from_json({"_type": "Date"})

    def test_non_string_value(self) -> None:
        """value must be text."""
        with pytest.raises(ParseError, match="must be a string"):
            from_json({"_type": "ZoneOffset", "value": 330})

    def test_unknown_type(self) -> None:
        """An unknown _type raises TypeError."""
        with pytest.raises(TypeError, match="unknown type: 'DateTime'"):
            from_json({"_type": "DateTime", "value": "2024-01-15T00:00:00Z"})

    def test_instant_missing_field(self) -> None:
        """Instant needs epoch_days and utc_time_of_day_seconds."""
        with pytest.raises(ParseError, match="missing 'epoch_days'"):
            from_json({"_type": "Instant", "utc_time_of_day_seconds": "0"})

    def test_instant_float_seconds(self) -> None:
        """Seconds must be a decimal string, not a JSON number."""
        with pytest.raises(ParseError, match="decimal string"):
            from_json(
                {"_type": "Instant", "epoch_days": 0, "utc_time_of_day_seconds": 0.5}
            )

    def test_instant_bad_days(self) -> None:
        """Non-integer days are a malformed payload."""
        with pytest.raises(ParseError, match="invalid Instant fields"):
            from_json(
                {"_type": "Instant", "epoch_days": "0", "utc_time_of_day_seconds": "0"}
            )

    @pytest.mark.parametrize("seconds", ["NaN", "Infinity", "-Infinity", "abc"])
    def test_instant_non_finite_seconds(self, seconds: str) -> None:
        """Seconds that are not a finite decimal are a malformed payload."""
        with pytest.raises(ParseError):
            from_json(
                {"_type": "Instant", "epoch_days": 0, "utc_time_of_day_seconds": seconds}
            )

    def test_instant_not_validated(self) -> None:
        """Instant is a plain record; impossible values still load."""
        instant = from_json(
            {"_type": "Instant", "epoch_days": 0, "utc_time_of_day_seconds": "86400"}
        )
        assert instant == Instant(0, Decimal(86400), None)
