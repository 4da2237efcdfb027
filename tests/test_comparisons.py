"""Tests for timestamp equivalences and ordering."""

from __future__ import annotations

import pytest

from leapstamp import EPOCH, Timestamp
from leapstamp.arithmetic import compare, fully_equal, temporally_equal


class TestTemporallyEqual:
    """Tests for temporally_equal()."""

    def test_same_instant_different_offsets(self) -> None:
        """The offset is ignored."""
        a = Timestamp.from_string("2024-01-15T12:00:00+01:00")
        b = Timestamp.from_string("2024-01-15T11:00:00.00Z")
        assert temporally_equal(a, b)
        assert not fully_equal(a, b)

    def test_different_instants(self) -> None:
        """A nanosecond apart is not equal."""
        a = Timestamp.from_string("2024-01-15T12:00:00Z")
        b = Timestamp.from_string("2024-01-15T12:00:00.000000001Z")
        assert not temporally_equal(a, b)

    def test_leap_second_differs_from_midnight(self) -> None:
        """23:59:60 and the next 00:00:00 are different instants."""
        a = Timestamp.from_string("2016-12-31T23:59:60Z")
        b = Timestamp.from_string("2017-01-01T00:00:00Z")
        assert not temporally_equal(a, b)

    def test_type_checked(self) -> None:
        """Both arguments must be Timestamps."""
        with pytest.raises(TypeError, match="expected Timestamp"):
            temporally_equal(EPOCH, 0)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            EPOCH.temporally_equal(None)  # type: ignore[arg-type]


class TestFullyEqual:
    """Tests for fully_equal()."""

    def test_unspecified_is_not_zero(self) -> None:
        """-00:00 and Z differ in offset state."""
        a = Timestamp.from_string("2024-01-15T11:00:00Z")
        b = Timestamp.from_string("2024-01-15T11:00:00-00:00")
        assert temporally_equal(a, b)
        assert not fully_equal(a, b)

    def test_same_fields(self) -> None:
        """Identical fields are fully equal."""
        a = Timestamp.from_string("2024-01-15T11:00:00+05:30")
        b = Timestamp.from_instant(a.to_instant())
        assert fully_equal(a, b)
        assert a == b

    def test_type_checked(self) -> None:
        """Both arguments must be Timestamps."""
        with pytest.raises(TypeError):
            fully_equal("x", EPOCH)  # type: ignore[arg-type]


class TestCompare:
    """Tests for compare()."""

    def test_order(self) -> None:
        """-1, 0, 1 in temporal order."""
        early = Timestamp.from_string("2024-01-15T11:00:00Z")
        late = Timestamp.from_string("2024-01-15T11:00:01Z")
        assert compare(early, late) == -1
        assert compare(late, early) == 1
        assert compare(early, early) == 0

    def test_offsets_ignored(self) -> None:
        """Offsets do not affect the order."""
        a = Timestamp.from_string("2024-01-15T12:00:00+01:00")
        b = Timestamp.from_string("2024-01-15T11:00:00-00:00")
        assert compare(a, b) == 0

    def test_local_clock_is_not_the_order(self) -> None:
        """A later local reading can be an earlier instant."""
        a = Timestamp.from_string("2024-01-15T12:00:00+05:00")
        b = Timestamp.from_string("2024-01-15T08:00:00Z")
        assert compare(a, b) == -1

    def test_leap_second_between_days(self) -> None:
        """A leap second falls between 23:59:59 and midnight."""
        before = Timestamp.from_string("2016-12-31T23:59:59.9Z")
        leap = Timestamp.from_string("2016-12-31T23:59:60Z")
        midnight = Timestamp.from_string("2017-01-01T00:00:00Z")
        assert compare(before, leap) == -1
        assert compare(leap, midnight) == -1

    def test_sorting_with_compare(self) -> None:
        """compare works as a sort key via functools.cmp_to_key."""
        from functools import cmp_to_key

        texts = [
            "2017-01-01T00:00:00Z",
            "2016-12-31T23:59:60Z",
            "2017-01-01T00:30:00+01:00",
        ]
        ordered = sorted((Timestamp.from_string(t) for t in texts), key=cmp_to_key(compare))
        assert [ts.to_string() for ts in ordered] == [
            "2017-01-01T00:30:00+01:00",
            "2016-12-31T23:59:60Z",
            "2017-01-01T00:00:00Z",
        ]

    def test_type_checked(self) -> None:
        """Both arguments must be Timestamps."""
        with pytest.raises(TypeError):
            compare(EPOCH, "2000-01-01T00:00:00Z")  # type: ignore[arg-type]
