"""TimeUnit enumeration for the calendar unit vocabulary.

This module provides the TimeUnit enum representing the eight units a
Duration counts in, from milliseconds up to years, together with the
unit-name lookup shared by Duration, DateTime and Interval.
"""

from __future__ import annotations

import logging
from enum import Enum

from tempotime._internal.constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_MONTH_APPROX,
    MS_PER_SECOND,
    MS_PER_WEEK,
    MS_PER_YEAR_APPROX,
)
from tempotime.config.settings import get_settings
from tempotime.errors import ValidationError

logger = logging.getLogger(__name__)


class TimeUnit(Enum):
    """Calendar units for temporal operations.

    Each member's value is its singular name; the plural name is the
    singular plus "s". Both spellings are accepted by parse(), matched
    exactly (case-sensitive).

    Note:
        MONTH and YEAR have no fixed length. to_millis() returns the
        fixed approximations (30 days, 365 days) used for scalar
        conversion; calendar arithmetic on DateTime does not use them.

    Examples:
        >>> TimeUnit.parse("days")
        <TimeUnit.DAY: 'day'>

        >>> TimeUnit.HOUR.to_millis()
        3600000

        >>> TimeUnit.parse("fortnight") is None
        True
    """

    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def plural(self) -> str:
        """Return the plural unit name (e.g. "days")."""
        return self.value + "s"

    def to_millis(self) -> int:
        """Convert one unit of this TimeUnit to milliseconds.

        Returns:
            The number of milliseconds in one unit, using 30-day months
            and 365-day years.

        Examples:
            >>> TimeUnit.WEEK.to_millis()
            604800000

            >>> TimeUnit.MONTH.to_millis() == 30 * TimeUnit.DAY.to_millis()
            True
        """
        return _MILLIS[self]

    @classmethod
    def parse(cls, name: str) -> TimeUnit | None:
        """Look up a unit by singular or plural name.

        Args:
            name: A unit name such as "day" or "days".

        Returns:
            The matching TimeUnit, or None if the name is not recognized.
        """
        return _BY_NAME.get(name)


_MILLIS: dict[TimeUnit, int] = {
    TimeUnit.MILLISECOND: 1,
    TimeUnit.SECOND: MS_PER_SECOND,
    TimeUnit.MINUTE: MS_PER_MINUTE,
    TimeUnit.HOUR: MS_PER_HOUR,
    TimeUnit.DAY: MS_PER_DAY,
    TimeUnit.WEEK: MS_PER_WEEK,
    TimeUnit.MONTH: MS_PER_MONTH_APPROX,
    TimeUnit.YEAR: MS_PER_YEAR_APPROX,
}

_BY_NAME: dict[str, TimeUnit] = {}
for _unit in TimeUnit:
    _BY_NAME[_unit.value] = _unit
    _BY_NAME[_unit.plural] = _unit
del _unit


def lookup_unit(name: str | TimeUnit, *, operation: str) -> TimeUnit | None:
    """Resolve a unit name, applying the unknown-name policy.

    Unknown names are ignored (None is returned and a DEBUG record is
    logged) unless strict mode is enabled in settings, in which case
    ValidationError is raised.

    Args:
        name: A unit name or an existing TimeUnit.
        operation: The caller's operation, used in the log/error message.

    Returns:
        The TimeUnit, or None for an ignored unknown name.

    Raises:
        ValidationError: If the name is unknown and strict mode is on.
    """
    if isinstance(name, TimeUnit):
        return name
    unit = TimeUnit.parse(name)
    if unit is None:
        if get_settings().strict:
            raise ValidationError(f"unknown unit {name!r} for {operation}")
        logger.debug("ignoring unknown unit %r for %s", name, operation)
    return unit


__all__ = ["TimeUnit", "lookup_unit"]
