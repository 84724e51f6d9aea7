"""Tests for the DateTime class.

This module tests construction, calendar arithmetic with day clamping,
unit rounding, differences, formatting, and display zones.
"""

import io
import time

import pytest

from tempotime import (
    DATE_SHORT,
    DATETIME_FULL,
    DateTime,
    Duration,
    ParseError,
    Timezone,
    TimezoneError,
    ValidationError,
    dt,
)


def iso(s: str) -> DateTime:
    return DateTime.from_iso(s)


# =============================================================================
# Construction Tests
# =============================================================================


class TestDateTimeConstruction:
    """Tests for DateTime constructors."""

    def test_from_millis(self):
        """The raw epoch value round-trips."""
        d = DateTime.from_millis(1_761_912_000_000)
        assert d.to_millis() == 1_761_912_000_000
        assert d.zone is None

    def test_constructor_requires_int(self):
        """Milliseconds must be an integer."""
        with pytest.raises(TypeError):
            DateTime(1.5)

    def test_of(self):
        """DateTime.of builds a UTC instant from civil fields."""
        d = DateTime.of(2024, 2, 29, 23, 59, 59, 999)
        assert (d.year, d.month, d.day) == (2024, 2, 29)
        assert (d.hour, d.minute, d.second, d.millisecond) == (23, 59, 59, 999)

    @pytest.mark.parametrize(
        "fields",
        [(2025, 2, 29), (2025, 13, 1), (2025, 1, 1, 24), (2025, 1, 1, 0, 60), (2025, 1, 1, 0, 0, 0, 1000)],
    )
    def test_of_validates(self, fields):
        """Out-of-range fields raise ValidationError."""
        with pytest.raises(ValidationError):
            DateTime.of(*fields)

    def test_now(self):
        """now() reads the current wall clock."""
        before = time.time_ns() // 1_000_000
        current = DateTime.now()
        after = time.time_ns() // 1_000_000
        assert before <= current.to_millis() <= after
        assert current.zone is None

    def test_dt_shorthand(self):
        """dt() is DateTime.now()."""
        before = time.time_ns() // 1_000_000
        assert dt().to_millis() >= before

    def test_local(self):
        """local() attaches the host's fixed offset."""
        current = DateTime.local()
        assert current.zone is not None
        assert current.zone.is_fixed

    def test_from_iso_keeps_zone_on_request(self):
        """keep_zone attaches the parsed offset."""
        d = DateTime.from_iso("2025-10-31T08:00:00-04:00", keep_zone=True)
        assert d == iso("2025-10-31T12:00:00Z")
        assert d.hour == 8
        assert d.to_iso() == "2025-10-31T08:00:00-04:00"

    @pytest.mark.parametrize("years", [-2026, 7975])
    def test_iso_round_trip_outside_four_digit_years(self, years):
        """to_iso output outside 0000..9999 is read back by from_iso."""
        d = DateTime.of(2025).plus(years=years)
        assert DateTime.from_iso(d.to_iso()) == d

    def test_from_iso_error(self):
        """Malformed ISO strings raise ParseError."""
        with pytest.raises(ParseError):
            DateTime.from_iso("not a date")

    def test_from_format(self):
        """from_format parses a pattern into a UTC instant."""
        d = DateTime.from_format("Oct 31st, 2025 3:05 pm", "MMM do, yyyy h:mm a")
        assert d == iso("2025-10-31T15:05:00Z")

    def test_format_round_trip(self):
        """from_format(to_format(p), p) restores the instant."""
        d = iso("2025-10-31T15:05:09.007Z")
        pattern = "EEEE, MMMM do yyyy HH:mm:ss.SSS"
        assert DateTime.from_format(d.to_format(pattern), pattern) == d


# =============================================================================
# Arithmetic Tests
# =============================================================================


class TestPlusMinus:
    """Tests for calendar arithmetic."""

    def test_clamp_common_year(self):
        """Jan 31 + 1 month is Feb 28 in 2025."""
        assert iso("2025-01-31").plus(months=1).to_iso() == "2025-02-28T00:00:00Z"

    def test_clamp_leap_year(self):
        """Jan 31 + 1 month is Feb 29 in 2024."""
        assert iso("2024-01-31").plus(months=1).to_iso() == "2024-02-29T00:00:00Z"

    def test_leap_day_boundary(self):
        """Feb 28 + 1 day is Feb 29 in a leap year."""
        assert iso("2024-02-28").plus(days=1).to_iso() == "2024-02-29T00:00:00Z"

    def test_years_clamp(self):
        """Feb 29 + 1 year is Feb 28."""
        assert iso("2024-02-29T10:00:00Z").plus(years=1).to_iso() == "2025-02-28T10:00:00Z"

    def test_months_before_small_units(self):
        """The month step is applied before days."""
        assert iso("2025-01-31").plus(Duration(months=1, days=1)).to_iso() == "2025-03-01T00:00:00Z"

    def test_small_units_exact(self):
        """Hours cross day and year boundaries exactly."""
        assert iso("2025-12-31T23:00:00Z").plus(hours=2).to_iso() == "2026-01-01T01:00:00Z"

    def test_time_of_day_kept(self):
        """Month shifts keep the time of day."""
        assert iso("2025-03-31T18:30:15.250Z").plus(months=1).to_iso() == "2025-04-30T18:30:15.250Z"

    def test_minus(self):
        """minus is plus of the negated duration."""
        d = iso("2024-03-31")
        assert d.minus(months=1).to_iso() == "2024-02-29T00:00:00Z"
        assert d.minus(Duration(days=1, hours=1)) == d.plus(Duration(days=-1, hours=-1))

    def test_mapping_argument(self):
        """A mapping of unit names works like keywords."""
        assert iso("2025-10-01").plus({"days": 2}) == iso("2025-10-03")

    def test_unknown_keyword_ignored(self):
        """Unknown unit names are skipped."""
        d = iso("2025-10-01")
        assert d.plus(fortnights=1, days=1) == iso("2025-10-02")

    def test_unknown_keyword_strict(self, strict_mode):
        """Strict mode rejects unknown unit names."""
        with pytest.raises(ValidationError):
            iso("2025-10-01").plus(fortnights=1)

    def test_operators(self):
        """+ and - accept Durations; DateTime - DateTime is a Duration."""
        d = iso("2025-01-31")
        assert d + Duration(months=1) == iso("2025-02-28")
        assert d - Duration(days=31) == iso("2024-12-31")
        assert iso("2025-01-02") - d == Duration(milliseconds=-29 * 86_400_000)

    def test_immutable(self):
        """Operations return new values."""
        d = iso("2025-01-31")
        d.plus(months=1)
        assert d.to_iso() == "2025-01-31T00:00:00Z"


class TestStartEndOf:
    """Tests for start_of and end_of."""

    def test_start_of_day(self):
        """start_of('day') zeroes the time fields."""
        d = iso("2025-10-29T14:05:09.007Z").start_of("day")
        assert d.to_iso() == "2025-10-29T00:00:00Z"

    def test_end_of_day(self):
        """end_of('day') is 23:59:59.999."""
        d = iso("2025-10-29T14:05:09.007Z").end_of("day")
        assert (d.hour, d.minute, d.second, d.millisecond) == (23, 59, 59, 999)

    @pytest.mark.parametrize(
        "unit,expected",
        [
            ("year", "2025-01-01T00:00:00Z"),
            ("month", "2025-10-01T00:00:00Z"),
            ("hour", "2025-10-29T14:00:00Z"),
            ("minute", "2025-10-29T14:05:00Z"),
            ("second", "2025-10-29T14:05:09Z"),
        ],
    )
    def test_start_of_units(self, unit, expected):
        """Every field below the unit is reset."""
        assert iso("2025-10-29T14:05:09.007Z").start_of(unit).to_iso() == expected

    @pytest.mark.parametrize(
        "unit,expected",
        [
            ("year", "2025-12-31T23:59:59.999Z"),
            ("month", "2025-10-31T23:59:59.999Z"),
            ("hour", "2025-10-29T14:59:59.999Z"),
            ("minute", "2025-10-29T14:05:59.999Z"),
            ("second", "2025-10-29T14:05:09.999Z"),
        ],
    )
    def test_end_of_units(self, unit, expected):
        """Every field below the unit is maximized."""
        assert iso("2025-10-29T14:05:09.007Z").end_of(unit).to_iso() == expected

    def test_end_of_month_leap_aware(self):
        """end_of('month') uses the actual last day."""
        assert iso("2024-02-15").end_of("month").day == 29
        assert iso("2025-02-15").end_of("month").day == 28

    def test_plural_unit_names(self):
        """Plural unit names are accepted."""
        assert iso("2025-10-29T14:05:09Z").start_of("days") == iso("2025-10-29")

    @pytest.mark.parametrize("unit", ["fortnight", "week", "millisecond"])
    def test_no_op_units(self, unit):
        """Unknown units, weeks and milliseconds leave the instant unchanged."""
        d = iso("2025-10-29T14:05:09.007Z")
        assert d.start_of(unit) == d
        assert d.end_of(unit) == d

    def test_unknown_unit_strict(self, strict_mode):
        """Strict mode rejects unknown units."""
        with pytest.raises(ValidationError):
            iso("2025-10-29").start_of("fortnight")


class TestDiff:
    """Tests for diff."""

    def test_sign_and_magnitude(self):
        """Positive when self is later, negative when earlier."""
        a = iso("2025-10-31")
        b = iso("2025-10-29T12:00:00Z")
        assert a.diff(b, "days") == 1.5
        assert b.diff(a, "days") == -1.5
        assert a.diff(b, "hours") == 36.0

    def test_default_unit_is_milliseconds(self):
        """Without a unit the result is in milliseconds."""
        assert iso("2025-10-31T00:00:01Z").diff(iso("2025-10-31")) == 1000.0

    def test_fixed_month_ratio(self):
        """Months are 30 days."""
        assert iso("2025-01-31").diff(iso("2025-01-01"), "months") == 1.0

    def test_unknown_unit(self):
        """Unknown units give 0.0."""
        assert iso("2025-10-31").diff(iso("2025-10-01"), "fortnights") == 0.0


class TestComparison:
    """Tests for equality, ordering and hashing."""

    def test_zone_ignored(self):
        """The display zone does not affect equality or hashing."""
        d = iso("2025-10-31T12:00:00Z")
        tokyo = d.set_zone("Asia/Tokyo")
        assert tokyo == d
        assert hash(tokyo) == hash(d)

    def test_ordering(self):
        """Ordering follows the millisecond value."""
        a, b, c = iso("2025-01-01"), iso("2025-06-01"), iso("2026-01-01")
        assert a < b <= b < c
        assert c > a >= a
        assert sorted([c, a, b]) == [a, b, c]

    def test_other_types(self):
        """Comparing with unrelated types is not equal."""
        assert iso("2025-01-01") != "2025-01-01T00:00:00Z"


# =============================================================================
# Formatting Tests
# =============================================================================


class TestFormatting:
    """Tests for to_iso, to_format and friends."""

    def test_to_iso_milliseconds(self):
        """Milliseconds appear only when non-zero."""
        assert iso("2025-10-31T12:00:00.000Z").to_iso() == "2025-10-31T12:00:00Z"
        assert iso("2025-10-31T12:00:00.120Z").to_iso() == "2025-10-31T12:00:00.120Z"

    def test_to_format(self):
        """to_format renders the wall-clock fields."""
        d = iso("2025-10-29T14:05:00Z")
        assert d.to_format("EEEE, MMMM do yyyy 'at' h:mm a") == "Wednesday, October 29th 2025 at 2:05 pm"

    def test_weekday(self):
        """weekday is Monday=0."""
        assert iso("2025-10-29").weekday == 2

    def test_format_into(self):
        """format_into writes the same text to a writer."""
        d = iso("2025-10-29T14:05:00Z")
        buffer = io.StringIO()
        d.format_into(buffer, "yyyy-MM-dd HH:mm")
        assert buffer.getvalue() == d.to_format("yyyy-MM-dd HH:mm") == "2025-10-29 14:05"

    def test_locale_presets(self):
        """Presets render by constant or by name."""
        d = iso("2025-10-29T15:30:00Z")
        assert d.to_locale_string(DATE_SHORT) == "10/29/2025"
        assert d.to_locale_string("DATE_MED") == "Oct 29, 2025"
        assert d.to_locale_string("DATE_FULL") == "October 29, 2025"
        assert d.to_locale_string("TIME_SIMPLE") == "3:30 pm"
        assert d.to_locale_string("TIME_WITH_SECONDS") == "3:30:00 pm"
        assert d.to_locale_string("DATETIME_SHORT") == "10/29/2025, 3:30 pm"
        assert d.to_locale_string(DATETIME_FULL) == "October 29, 2025, 3:30 pm"

    def test_non_preset_is_a_pattern(self):
        """Any other string is used as a pattern."""
        assert iso("2025-10-29").to_locale_string("yyyy") == "2025"

    def test_str_and_repr(self):
        """str is ISO 8601 and repr shows the zone."""
        d = iso("2025-10-31T12:00:00Z")
        assert str(d) == "2025-10-31T12:00:00Z"
        assert repr(d) == "DateTime('2025-10-31T12:00:00Z')"
        assert repr(d.set_zone("+09:00")) == "DateTime('2025-10-31T21:00:00+09:00', zone='+09:00')"


# =============================================================================
# Display Zone Tests
# =============================================================================


class TestDisplayZones:
    """Tests for set_zone and zoned calendar math."""

    def test_static_new_york(self, static_zones):
        """The static table renders New York at UTC-5."""
        d = iso("2025-10-30T12:00:00Z").set_zone("America/New_York")
        assert d.to_format("HH") == "07"

    def test_static_tokyo(self, static_zones):
        """The static table renders Tokyo at UTC+9."""
        assert iso("2025-10-30T00:00:00Z").set_zone("Asia/Tokyo").to_format("HH") == "09"

    def test_iana_new_york_dst(self):
        """IANA rules apply daylight saving time."""
        assert iso("2025-10-30T12:00:00Z").set_zone("America/New_York").to_format("HH") == "08"
        assert iso("2025-12-30T12:00:00Z").set_zone("America/New_York").to_format("HH") == "07"

    def test_zone_keeps_instant(self):
        """Attaching a zone never changes the instant."""
        d = iso("2025-10-30T12:00:00Z")
        assert d.set_zone("Asia/Kolkata").to_millis() == d.to_millis()

    def test_to_iso_with_zone(self):
        """to_iso writes local fields with the offset."""
        d = iso("2025-10-30T12:00:00Z").set_zone("+05:30")
        assert d.to_iso() == "2025-10-30T17:30:00+05:30"

    def test_set_zone_object(self):
        """A Timezone can be attached directly."""
        zone = Timezone.from_hours(-3)
        assert iso("2025-10-30T12:00:00Z").set_zone(zone).zone is zone

    def test_unresolvable_zone_is_no_op(self):
        """An unknown zone name returns the instant unchanged."""
        d = iso("2025-10-30T12:00:00Z")
        result = d.set_zone("Mars/Olympus_Mons")
        assert result is d
        assert result.zone is None

    def test_zone_directory_name_is_no_op(self):
        """A tz database directory such as "America" is not a zone."""
        d = iso("2025-10-30T12:00:00Z")
        assert d.set_zone("America") is d

    def test_unresolvable_zone_strict(self, strict_mode):
        """Strict mode raises for unknown zone names."""
        with pytest.raises(TimezoneError):
            iso("2025-10-30T12:00:00Z").set_zone("Mars/Olympus_Mons")

    def test_to_utc(self):
        """to_utc drops the zone."""
        d = iso("2025-10-30T12:00:00Z").set_zone("Asia/Tokyo").to_utc()
        assert d.zone is None
        assert d.hour == 12

    def test_months_on_wall_clock(self):
        """Month shifts keep the local time across a DST change."""
        d = iso("2025-03-08T12:00:00Z").set_zone("America/New_York")
        assert d.hour == 7
        shifted = d.plus(months=1)
        assert shifted.hour == 7
        assert shifted.to_iso() == "2025-04-08T07:00:00-04:00"

    def test_small_units_exact_across_dst(self):
        """Days are exact 24-hour steps even across a DST change."""
        d = iso("2025-03-08T12:00:00Z").set_zone("America/New_York")
        assert d.plus(days=1).hour == 8

    def test_start_of_day_in_zone(self):
        """Rounding uses the local calendar day."""
        d = iso("2025-10-30T20:00:00Z").set_zone("Asia/Tokyo")
        start = d.start_of("day")
        assert start.to_iso() == "2025-10-31T00:00:00+09:00"
        assert start.to_utc().to_iso() == "2025-10-30T15:00:00Z"
        assert start.zone == d.zone

    def test_fields_in_zone(self):
        """Field properties read the local calendar."""
        d = iso("2025-10-30T20:00:00Z").set_zone("Asia/Tokyo")
        assert (d.month, d.day, d.hour, d.weekday) == (10, 31, 5, 4)
