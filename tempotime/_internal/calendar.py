"""Calendar utilities for Tempotime.

This module provides the pure functions that map between a linear
millisecond timestamp and civil fields in the proleptic Gregorian
calendar, along with leap year, month length, and weekday logic.

Day numbers count days since the Unix epoch (1970-01-01 = day 0). The
day-count conversion works on a calendar shifted to start in March, so
that the leap day falls at the end of the shifted year and every
400-year era has the same layout.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import NamedTuple

from tempotime._internal.constants import (
    DAYS_0000_03_01_TO_EPOCH,
    DAYS_IN_MONTH,
    DAYS_PER_ERA,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
)


class CivilFields(NamedTuple):
    """The human calendar representation of an instant.

    Attributes:
        year: The year (proleptic Gregorian, can be 0 or negative).
        month: The month (1-12).
        day: The day of the month (1-31).
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        millisecond: The millisecond (0-999).
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2025)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_from_civil(year: int, month: int, day: int) -> int:
    """Convert year, month, day to days since 1970-01-01.

    Args:
        year: The year (can be 0 or negative).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The day number; negative for dates before the epoch.

    Examples:
        >>> days_from_civil(1970, 1, 1)
        0
        >>> days_from_civil(2000, 3, 1)
        11017
        >>> days_from_civil(1969, 12, 31)
        -1
    """
    # Years start in March, so January and February belong to the prior year
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    shifted_month = month - 3 if month > 2 else month + 9
    doy = (153 * shifted_month + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * DAYS_PER_ERA + doe - DAYS_0000_03_01_TO_EPOCH


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to year, month, day.

    Python's floor division keeps the era computation correct for
    negative day numbers, so no special casing is needed before the
    epoch or before year 0.

    Args:
        days: The day number (day 0 = 1970-01-01).

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> civil_from_days(0)
        (1970, 1, 1)
        >>> civil_from_days(-1)
        (1969, 12, 31)
        >>> civil_from_days(19782)
        (2024, 2, 29)
    """
    z = days + DAYS_0000_03_01_TO_EPOCH
    era = z // DAYS_PER_ERA
    doe = z - era * DAYS_PER_ERA  # [0, 146096]
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365  # [0, 399]
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)  # [0, 365]
    mp = (5 * doy + 2) // 153  # [0, 11], March-based
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return (year, month, day)


def decompose(ts_ms: int) -> CivilFields:
    """Split a millisecond timestamp into civil fields.

    The timestamp is split with floor division so that instants before
    the epoch land on the correct (earlier) day with a non-negative
    millisecond-of-day.

    Args:
        ts_ms: Milliseconds since 1970-01-01T00:00:00Z.

    Returns:
        The civil fields for that timestamp.

    Examples:
        >>> decompose(0)
        CivilFields(year=1970, month=1, day=1, hour=0, minute=0, second=0, millisecond=0)
        >>> decompose(-1)
        CivilFields(year=1969, month=12, day=31, hour=23, minute=59, second=59, millisecond=999)
    """
    days, ms_of_day = divmod(ts_ms, MS_PER_DAY)
    year, month, day = civil_from_days(days)
    hour, rem = divmod(ms_of_day, MS_PER_HOUR)
    minute, rem = divmod(rem, MS_PER_MINUTE)
    second, millisecond = divmod(rem, MS_PER_SECOND)
    return CivilFields(year, month, day, hour, minute, second, millisecond)


def compose(fields: CivilFields) -> int:
    """Combine civil fields into a millisecond timestamp.

    This is the inverse of decompose(): compose(decompose(t)) == t for
    every integer t, and decompose(compose(f)) == f for every valid f.

    Args:
        fields: The civil fields to combine.

    Returns:
        Milliseconds since 1970-01-01T00:00:00Z.
    """
    days = days_from_civil(fields.year, fields.month, fields.day)
    return (
        days * MS_PER_DAY
        + fields.hour * MS_PER_HOUR
        + fields.minute * MS_PER_MINUTE
        + fields.second * MS_PER_SECOND
        + fields.millisecond
    )


def add_months(year: int, month: int, day: int, n: int) -> tuple[int, int, int]:
    """Shift a date by a number of months, clamping the day.

    The zero-based month index is shifted by n and carried into the
    year. If the original day does not exist in the target month, the
    day is clamped to the last day of that month rather than rolling
    over into the following month.

    Args:
        year: The starting year.
        month: The starting month (1-12).
        day: The starting day of the month.
        n: Months to add (negative to subtract).

    Returns:
        Tuple of (year, month, day) after the shift.

    Examples:
        >>> add_months(2025, 1, 31, 1)
        (2025, 2, 28)
        >>> add_months(2024, 1, 31, 1)
        (2024, 2, 29)
        >>> add_months(2024, 3, 31, -1)
        (2024, 2, 29)
        >>> add_months(2024, 11, 15, 3)
        (2025, 2, 15)
    """
    new_year, month_index = divmod(year * 12 + (month - 1) + n, 12)
    new_month = month_index + 1
    new_day = min(day, days_in_month(new_year, new_month))
    return (new_year, new_month, new_day)


def weekday_of(year: int, month: int, day: int) -> int:
    """Return the ISO weekday index of a date (Monday=0, Sunday=6).

    Args:
        year: The year.
        month: The month (1-12).
        day: The day of the month.

    Returns:
        Day of week (0=Monday, 6=Sunday).

    Examples:
        >>> weekday_of(1970, 1, 1)  # Thursday
        3
        >>> weekday_of(2025, 10, 30)  # Thursday
        3
    """
    # 1970-01-01 was a Thursday (3 in the Monday=0 system)
    return (days_from_civil(year, month, day) + 3) % 7


__all__ = [
    "CivilFields",
    "is_leap_year",
    "days_in_month",
    "days_from_civil",
    "civil_from_days",
    "decompose",
    "compose",
    "add_months",
    "weekday_of",
]
