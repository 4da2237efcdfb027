"""Tests for the calendar engine."""

from __future__ import annotations

import pytest

from leapstamp._internal.calendar import (
    MAX_EPOCH_DAYS,
    MIN_EPOCH_DAYS,
    date_from_days,
    day_of_week,
    days_from_date,
    days_in_month,
    days_in_year,
    is_leap_year,
    is_last_day_of_month,
)
from leapstamp.errors import InvalidDateError, OutOfRangeError


class TestLeapYear:
    """Tests for the Gregorian leap-year rule."""

    @pytest.mark.parametrize(
        "year,expected",
        [
            (2000, True),
            (1900, False),
            (2024, True),
            (2023, False),
            (0, True),
            (100, False),
            (400, True),
        ],
    )
    def test_is_leap_year(self, year: int, expected: bool) -> None:
        """Divisible by 4, except centuries not divisible by 400."""
        assert is_leap_year(year) is expected

    def test_days_in_month_february(self) -> None:
        """February has 29 days only in leap years."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(1900, 2) == 28

    def test_days_in_year(self) -> None:
        """Leap years have 366 days."""
        assert days_in_year(2000) == 366
        assert days_in_year(1900) == 365

    def test_is_last_day_of_month(self) -> None:
        """Only the final day of a month qualifies."""
        assert is_last_day_of_month(2023, 6, 30)
        assert is_last_day_of_month(2024, 2, 29)
        assert not is_last_day_of_month(2024, 2, 28)


class TestDaysFromDate:
    """Tests for days_from_date()."""

    def test_epoch(self) -> None:
        """2000-01-01 is day 0."""
        assert days_from_date(2000, 1, 1) == 0

    def test_day_before_epoch(self) -> None:
        """1999-12-31 is day -1."""
        assert days_from_date(1999, 12, 31) == -1

    def test_after_leap_day(self) -> None:
        """2000 is a leap year, so March 1 is day 60."""
        assert days_from_date(2000, 3, 1) == 60

    def test_unix_epoch(self) -> None:
        """1970-01-01 is 10957 days before 2000-01-01."""
        assert days_from_date(1970, 1, 1) == -10957

    def test_range_limits(self) -> None:
        """The first and last supported dates match the range constants."""
        assert days_from_date(0, 1, 1) == MIN_EPOCH_DAYS == -730485
        assert days_from_date(9999, 12, 31) == MAX_EPOCH_DAYS == 2921939

    def test_nonexistent_leap_day(self) -> None:
        """1900-02-29 does not exist."""
        with pytest.raises(InvalidDateError, match="day must be between 1 and 28"):
            days_from_date(1900, 2, 29)

    def test_month_13(self) -> None:
        """Month 13 is rejected."""
        with pytest.raises(InvalidDateError, match="month must be between 1 and 12"):
            days_from_date(2024, 13, 1)

    @pytest.mark.parametrize("year", [-1, 10000])
    def test_year_out_of_range(self, year: int) -> None:
        """Years outside 0-9999 are rejected."""
        with pytest.raises(InvalidDateError, match="year must be between 0 and 9999"):
            days_from_date(year, 1, 1)

    def test_non_integer_field(self) -> None:
        """Non-integer fields raise TypeError."""
        with pytest.raises(TypeError, match="year must be an integer"):
            days_from_date(2024.0, 1, 1)  # type: ignore[arg-type]


class TestDateFromDays:
    """Tests for date_from_days()."""

    def test_epoch(self) -> None:
        """Day 0 is 2000-01-01."""
        assert date_from_days(0) == (2000, 1, 1)

    def test_leap_day(self) -> None:
        """Day 59 is 2000-02-29."""
        assert date_from_days(59) == (2000, 2, 29)

    def test_range_limits(self) -> None:
        """The range constants map to the first and last supported dates."""
        assert date_from_days(MIN_EPOCH_DAYS) == (0, 1, 1)
        assert date_from_days(MAX_EPOCH_DAYS) == (9999, 12, 31)

    @pytest.mark.parametrize("days", [MIN_EPOCH_DAYS - 1, MAX_EPOCH_DAYS + 1])
    def test_out_of_range(self, days: int) -> None:
        """Days beyond the supported years raise OutOfRangeError."""
        with pytest.raises(OutOfRangeError, match="outside the supported range"):
            date_from_days(days)

    def test_bool_rejected(self) -> None:
        """bool is not accepted as a day count."""
        with pytest.raises(TypeError):
            date_from_days(True)  # type: ignore[arg-type]


class TestRoundTrip:
    """days_from_date and date_from_days are inverses."""

    def test_every_day_is_consecutive_across_leap_years(self) -> None:
        """Walking day by day through 1896-1904 visits every date once."""
        start = days_from_date(1896, 1, 1)
        end = days_from_date(1904, 12, 31)
        expected_days = sum(days_in_year(y) for y in range(1896, 1905))
        assert end - start + 1 == expected_days

        previous = None
        for days in range(start, end + 1):
            year, month, day = date_from_days(days)
            assert days_from_date(year, month, day) == days
            if previous is not None:
                assert (year, month, day) > previous
            previous = (year, month, day)

    def test_sampled_full_range(self) -> None:
        """A stride through the whole range round-trips."""
        for days in range(MIN_EPOCH_DAYS, MAX_EPOCH_DAYS + 1, 9973):
            assert days_from_date(*date_from_days(days)) == days

    def test_year_zero_is_leap(self) -> None:
        """Year 0 has a February 29."""
        days = days_from_date(0, 2, 29)
        assert date_from_days(days) == (0, 2, 29)
        assert date_from_days(days + 1) == (0, 3, 1)


class TestDayOfWeek:
    """Tests for day_of_week()."""

    def test_epoch_is_saturday(self) -> None:
        """2000-01-01 was a Saturday."""
        assert day_of_week(0) == 5

    def test_before_epoch(self) -> None:
        """1999-12-27 was a Monday."""
        assert day_of_week(days_from_date(1999, 12, 27)) == 0
