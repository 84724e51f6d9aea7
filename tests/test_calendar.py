"""Tests for the civil calendar functions.

This module tests the conversion between epoch milliseconds and civil
fields, leap-year rules, month lengths, month shifting with day clamping,
and weekday computation.
"""

import datetime

import pytest

from tempotime._internal.calendar import (
    CivilFields,
    add_months,
    civil_from_days,
    compose,
    days_from_civil,
    days_in_month,
    decompose,
    is_leap_year,
    weekday_of,
)
from tempotime._internal.constants import MS_PER_DAY


class TestLeapYears:
    """Tests for is_leap_year and days_in_month."""

    @pytest.mark.parametrize(
        "year,expected",
        [(2024, True), (2025, False), (2000, True), (1900, False), (2100, False), (2400, True)],
    )
    def test_gregorian_rule(self, year, expected):
        """Divisible by 4, except centuries not divisible by 400."""
        assert is_leap_year(year) is expected

    def test_february_length(self):
        """February has 29 days only in leap years."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2025, 2) == 28
        assert days_in_month(1900, 2) == 28

    def test_other_month_lengths(self):
        """Thirty days hath September, April, June and November."""
        assert [days_in_month(2025, m) for m in range(1, 13)] == [
            31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31,
        ]

    def test_invalid_month_rejected(self):
        """A month outside 1-12 is a caller error."""
        with pytest.raises(ValueError):
            days_in_month(2025, 13)


class TestDayCount:
    """Tests for days_from_civil and civil_from_days."""

    def test_epoch(self):
        """Day 0 is 1970-01-01."""
        assert days_from_civil(1970, 1, 1) == 0
        assert civil_from_days(0) == (1970, 1, 1)

    def test_agrees_with_stdlib_dates(self):
        """The day count matches datetime.date across four centuries."""
        epoch = datetime.date(1970, 1, 1)
        for days in range(-150_000, 150_000, 997):
            expected = epoch + datetime.timedelta(days=days)
            assert civil_from_days(days) == (expected.year, expected.month, expected.day)
            assert days_from_civil(expected.year, expected.month, expected.day) == days

    def test_year_zero_and_before(self):
        """The proleptic calendar extends before year 1."""
        days = days_from_civil(0, 2, 29)
        assert civil_from_days(days) == (0, 2, 29)
        assert civil_from_days(days_from_civil(-1, 12, 31) + 1) == (0, 1, 1)


class TestDecomposeCompose:
    """Tests for decompose and compose."""

    def test_epoch_fields(self):
        """Timestamp 0 is midnight on 1970-01-01."""
        assert decompose(0) == CivilFields(1970, 1, 1, 0, 0, 0, 0)

    def test_negative_timestamps_floor(self):
        """Instants before the epoch land on the earlier day."""
        assert decompose(-1) == CivilFields(1969, 12, 31, 23, 59, 59, 999)
        assert decompose(-MS_PER_DAY - 1) == CivilFields(1969, 12, 30, 23, 59, 59, 999)

    def test_known_instant(self):
        """2025-10-31T12:00:00.250Z decomposes field by field."""
        assert decompose(1_761_912_000_250) == CivilFields(2025, 10, 31, 12, 0, 0, 250)

    @pytest.mark.parametrize(
        "ts",
        [0, -1, 1, 86_399_999, -86_400_000, 951_782_400_000, 1_761_912_000_250, -62_135_596_800_001],
    )
    def test_round_trip(self, ts):
        """compose(decompose(t)) == t, including before the epoch."""
        assert compose(decompose(ts)) == ts

    def test_fields_round_trip(self):
        """decompose(compose(f)) == f for a valid leap-day instant."""
        fields = CivilFields(2024, 2, 29, 23, 59, 59, 999)
        assert decompose(compose(fields)) == fields


class TestAddMonths:
    """Tests for month shifting with day clamping."""

    def test_clamps_to_short_february(self):
        """Jan 31 + 1 month is Feb 28 in a common year."""
        assert add_months(2025, 1, 31, 1) == (2025, 2, 28)

    def test_clamps_to_leap_february(self):
        """Jan 31 + 1 month is Feb 29 in a leap year."""
        assert add_months(2024, 1, 31, 1) == (2024, 2, 29)

    def test_clamps_to_thirty_day_month(self):
        """Mar 31 + 1 month is Apr 30."""
        assert add_months(2025, 3, 31, 1) == (2025, 4, 30)

    def test_negative_shift_crosses_year(self):
        """Shifting backwards carries into the previous year."""
        assert add_months(2025, 1, 15, -1) == (2024, 12, 15)
        assert add_months(2025, 3, 31, -13) == (2024, 2, 29)

    def test_leap_day_plus_year(self):
        """Feb 29 + 12 months clamps to Feb 28."""
        assert add_months(2024, 2, 29, 12) == (2025, 2, 28)

    def test_zero_shift(self):
        """A zero shift leaves a valid date untouched."""
        assert add_months(2025, 10, 31, 0) == (2025, 10, 31)


class TestWeekday:
    """Tests for weekday_of."""

    def test_known_weekdays(self):
        """Monday is 0 and Sunday is 6."""
        assert weekday_of(2025, 10, 27) == 0
        assert weekday_of(2025, 11, 2) == 6
        assert weekday_of(2000, 1, 1) == 5

    def test_before_epoch(self):
        """1969-12-31 was a Wednesday."""
        assert weekday_of(1969, 12, 31) == 2
