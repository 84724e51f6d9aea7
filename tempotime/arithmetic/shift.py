"""Calendar arithmetic over epoch-millisecond instants.

This module adds Durations to instants and rounds instants to unit
boundaries. Years and months are applied to the civil fields with
day-of-month clamping; every smaller unit is an exact millisecond delta.

Clamping behavior:
    When a year/month shift lands on a day the target month does not
    have, the day is clamped to the last valid day of that month.

When a display zone is given, the calendar steps (years/months and
unit rounding) run on the zone's wall-clock fields and the result is
converted back to UTC with the offset in effect at that local time.

Examples:
    2025-01-31 + Duration(months=1) -> 2025-02-28
    2024-01-31 + Duration(months=1) -> 2024-02-29  # leap year
    2024-02-29 + Duration(years=1)  -> 2025-02-28
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tempotime._internal.calendar import add_months, compose, days_in_month, decompose
from tempotime._internal.constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    MS_PER_WEEK,
)
from tempotime.units.timeunit import TimeUnit, lookup_unit

if TYPE_CHECKING:
    from tempotime._internal.calendar import CivilFields
    from tempotime.core.duration import Duration
    from tempotime.units.timezone import Timezone

logger = logging.getLogger(__name__)


def _to_wall(ts_ms: int, zone: Timezone | None) -> int:
    return ts_ms if zone is None else zone.to_local(ts_ms)


def _from_wall(local_ms: int, zone: Timezone | None) -> int:
    return local_ms if zone is None else zone.from_local(local_ms)


def shift(ts_ms: int, duration: Duration, zone: Timezone | None = None) -> int:
    """Add a Duration to an instant.

    The components are applied in order:
    1. Years and months together, as one month offset with clamping
    2. Weeks, days, hours, minutes, seconds and milliseconds, as one
       millisecond delta

    Args:
        ts_ms: The instant in epoch milliseconds.
        duration: The duration to add. Negative fields subtract.
        zone: Optional display zone whose wall clock the month step uses.

    Returns:
        The shifted instant in epoch milliseconds.

    Examples:
        >>> from tempotime.core.duration import Duration
        >>> from tempotime._internal.calendar import CivilFields
        >>> jan31 = compose(CivilFields(2025, 1, 31))
        >>> decompose(shift(jan31, Duration(months=1)))[:3]
        (2025, 2, 28)
    """
    total_months = duration.years * 12 + duration.months
    if total_months:
        fields = decompose(_to_wall(ts_ms, zone))
        year, month, day = add_months(fields.year, fields.month, fields.day, total_months)
        ts_ms = _from_wall(compose(fields._replace(year=year, month=month, day=day)), zone)

    return ts_ms + (
        duration.weeks * MS_PER_WEEK
        + duration.days * MS_PER_DAY
        + duration.hours * MS_PER_HOUR
        + duration.minutes * MS_PER_MINUTE
        + duration.seconds * MS_PER_SECOND
        + duration.milliseconds
    )


def _floor(fields: CivilFields, unit: TimeUnit) -> CivilFields:
    if unit is TimeUnit.YEAR:
        return fields._replace(month=1, day=1, hour=0, minute=0, second=0, millisecond=0)
    if unit is TimeUnit.MONTH:
        return fields._replace(day=1, hour=0, minute=0, second=0, millisecond=0)
    if unit is TimeUnit.DAY:
        return fields._replace(hour=0, minute=0, second=0, millisecond=0)
    if unit is TimeUnit.HOUR:
        return fields._replace(minute=0, second=0, millisecond=0)
    if unit is TimeUnit.MINUTE:
        return fields._replace(second=0, millisecond=0)
    return fields._replace(millisecond=0)


def _ceil(fields: CivilFields, unit: TimeUnit) -> CivilFields:
    if unit is TimeUnit.YEAR:
        return fields._replace(month=12, day=31, hour=23, minute=59, second=59, millisecond=999)
    if unit is TimeUnit.MONTH:
        last = days_in_month(fields.year, fields.month)
        return fields._replace(day=last, hour=23, minute=59, second=59, millisecond=999)
    if unit is TimeUnit.DAY:
        return fields._replace(hour=23, minute=59, second=59, millisecond=999)
    if unit is TimeUnit.HOUR:
        return fields._replace(minute=59, second=59, millisecond=999)
    if unit is TimeUnit.MINUTE:
        return fields._replace(second=59, millisecond=999)
    return fields._replace(millisecond=999)


def _round(ts_ms: int, unit: str | TimeUnit, zone: Timezone | None, operation: str, ceil: bool) -> int:
    resolved = lookup_unit(unit, operation=operation)
    if resolved is None or resolved is TimeUnit.MILLISECOND:
        return ts_ms
    if resolved is TimeUnit.WEEK:
        logger.debug("%s does not round to weeks; returning the instant unchanged", operation)
        return ts_ms
    fields = decompose(_to_wall(ts_ms, zone))
    rounded = _ceil(fields, resolved) if ceil else _floor(fields, resolved)
    return _from_wall(compose(rounded), zone)


def start_of(ts_ms: int, unit: str | TimeUnit, zone: Timezone | None = None) -> int:
    """Round an instant down to the start of a calendar unit.

    All fields below the unit are zeroed (month and day reset to 1).
    Week and millisecond rounding, and unknown unit names, leave the
    instant unchanged.

    Args:
        ts_ms: The instant in epoch milliseconds.
        unit: "year", "month", "day", "hour", "minute" or "second"
            (singular or plural), or a TimeUnit.
        zone: Optional display zone whose wall clock is rounded.

    Returns:
        The rounded instant in epoch milliseconds.

    Raises:
        ValidationError: If the unit name is unknown and strict mode is on.

    Examples:
        >>> from tempotime._internal.calendar import CivilFields
        >>> ts = compose(CivilFields(2025, 10, 29, 14, 5, 9, 7))
        >>> decompose(start_of(ts, "month"))
        CivilFields(year=2025, month=10, day=1, hour=0, minute=0, second=0, millisecond=0)
    """
    return _round(ts_ms, unit, zone, "start_of", ceil=False)


def end_of(ts_ms: int, unit: str | TimeUnit, zone: Timezone | None = None) -> int:
    """Round an instant up to the last millisecond of a calendar unit.

    All fields below the unit are maximized; for "month" the day becomes
    the actual last day of that month (leap-aware).

    Args:
        ts_ms: The instant in epoch milliseconds.
        unit: "year", "month", "day", "hour", "minute" or "second"
            (singular or plural), or a TimeUnit.
        zone: Optional display zone whose wall clock is rounded.

    Returns:
        The rounded instant in epoch milliseconds.

    Raises:
        ValidationError: If the unit name is unknown and strict mode is on.

    Examples:
        >>> from tempotime._internal.calendar import CivilFields
        >>> ts = compose(CivilFields(2024, 2, 15, 8))
        >>> decompose(end_of(ts, "month"))
        CivilFields(year=2024, month=2, day=29, hour=23, minute=59, second=59, millisecond=999)
    """
    return _round(ts_ms, unit, zone, "end_of", ceil=True)


__all__ = ["end_of", "shift", "start_of"]
