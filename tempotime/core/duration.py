"""Duration class representing a symbolic bag of calendar-unit counts.

This module provides the Duration class. A Duration is not tied to any
instant: "1 month" only becomes a concrete span when it is added to a
DateTime, where it is applied on the calendar with day clamping.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Union

from tempotime.units.timeunit import TimeUnit, lookup_unit

UnitName = Union[str, TimeUnit]

# Field order, largest unit first
_UNITS: tuple[TimeUnit, ...] = (
    TimeUnit.YEAR,
    TimeUnit.MONTH,
    TimeUnit.WEEK,
    TimeUnit.DAY,
    TimeUnit.HOUR,
    TimeUnit.MINUTE,
    TimeUnit.SECOND,
    TimeUnit.MILLISECOND,
)


class Duration:
    """A symbolic duration with eight independent unit counts.

    The counts are stored as-is and never folded into each other:
    Duration(days=14) stays 14 days rather than becoming 2 weeks, and
    Duration(months=12) is not equal to Duration(years=1). Counts may be
    negative.

    Converting to a single scalar (as_scalar, as_milliseconds) uses fixed
    approximate ratios: 1 week = 7 days, 1 day = 24 hours, 1 month = 30
    days, 1 year = 365 days. Adding a Duration to a DateTime instead
    applies years and months on the calendar.

    Attributes:
        years: Number of years.
        months: Number of months.
        weeks: Number of weeks.
        days: Number of days.
        hours: Number of hours.
        minutes: Number of minutes.
        seconds: Number of seconds.
        milliseconds: Number of milliseconds.

    Examples:
        >>> d = Duration(days=3, hours=2)
        >>> d.to_units_map()
        {'days': 3, 'hours': 2}

        >>> Duration(hours=2).as_scalar("minutes")
        120

        >>> -Duration(months=1)
        Duration(months=-1)
    """

    __slots__ = (
        "_years",
        "_months",
        "_weeks",
        "_days",
        "_hours",
        "_minutes",
        "_seconds",
        "_milliseconds",
    )

    def __init__(
        self,
        years: int = 0,
        months: int = 0,
        weeks: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
    ) -> None:
        """Create a Duration from unit counts.

        All parameters can be positive, negative, or zero.

        Raises:
            TypeError: If any count is not an integer.
        """
        values = (years, months, weeks, days, hours, minutes, seconds, milliseconds)
        for unit, value in zip(_UNITS, values):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{unit.plural} must be an integer, got {type(value).__name__}")
        self._years = years
        self._months = months
        self._weeks = weeks
        self._days = days
        self._hours = hours
        self._minutes = minutes
        self._seconds = seconds
        self._milliseconds = milliseconds

    @classmethod
    def from_units(
        cls,
        units: Mapping[UnitName, int] | Iterable[tuple[UnitName, int]],
    ) -> Duration:
        """Create a Duration from unit names and counts.

        Unit names may be singular or plural ("day" or "days") and are
        matched exactly. Unknown names are ignored unless strict mode is
        on. When a unit appears twice, the last count wins.

        Args:
            units: A mapping of unit name to count, or a sequence of
                (unit name, count) pairs.

        Returns:
            A new Duration.

        Raises:
            ValidationError: If a unit name is unknown and strict mode is on.

        Examples:
            >>> Duration.from_units([("days", 3), ("hour", 2)])
            Duration(days=3, hours=2)

            >>> Duration.from_units({"fortnights": 1, "weeks": 2})
            Duration(weeks=2)
        """
        pairs = units.items() if isinstance(units, Mapping) else units
        counts: dict[str, int] = {}
        for name, value in pairs:
            unit = lookup_unit(name, operation="Duration.from_units")
            if unit is not None:
                counts[unit.plural] = value
        return cls(**counts)

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def weeks(self) -> int:
        return self._weeks

    @property
    def days(self) -> int:
        return self._days

    @property
    def hours(self) -> int:
        return self._hours

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def milliseconds(self) -> int:
        return self._milliseconds

    def _values(self) -> tuple[int, ...]:
        return (
            self._years,
            self._months,
            self._weeks,
            self._days,
            self._hours,
            self._minutes,
            self._seconds,
            self._milliseconds,
        )

    @property
    def is_zero(self) -> bool:
        """Return True if every count is zero.

        Examples:
            >>> Duration().is_zero
            True
            >>> Duration(days=1, hours=-24).is_zero
            False
        """
        return not any(self._values())

    def to_units_map(self) -> dict[str, int]:
        """Return the non-zero counts keyed by plural unit name.

        Keys appear largest unit first.

        Examples:
            >>> Duration(weeks=1, minutes=30).to_units_map()
            {'weeks': 1, 'minutes': 30}
        """
        return {unit.plural: value for unit, value in zip(_UNITS, self._values()) if value}

    def as_milliseconds(self) -> int:
        """Return the total length in milliseconds using fixed ratios.

        Examples:
            >>> Duration(days=1, seconds=1).as_milliseconds()
            86401000
            >>> Duration(months=1).as_milliseconds() == Duration(days=30).as_milliseconds()
            True
        """
        return sum(value * unit.to_millis() for unit, value in zip(_UNITS, self._values()))

    def as_scalar(self, unit: UnitName) -> int:
        """Convert the whole duration to a count of one unit.

        The conversion uses the fixed ratios (30-day months, 365-day
        years) and truncates toward zero.

        Args:
            unit: Target unit name (singular or plural) or TimeUnit.

        Returns:
            The whole number of target units, or 0 for an unknown unit
            name when strict mode is off.

        Raises:
            ValidationError: If the unit name is unknown and strict mode is on.

        Examples:
            >>> Duration(hours=2).as_scalar("seconds")
            7200
            >>> Duration(days=45).as_scalar("months")
            1
            >>> Duration(hours=-36).as_scalar("days")
            -1
        """
        resolved = lookup_unit(unit, operation="Duration.as_scalar")
        if resolved is None:
            return 0
        total = self.as_milliseconds()
        whole = abs(total) // resolved.to_millis()
        return whole if total >= 0 else -whole

    def negated(self) -> Duration:
        """Return the additive inverse (every count negated)."""
        return Duration(*(-value for value in self._values()))

    def __neg__(self) -> Duration:
        return self.negated()

    def __pos__(self) -> Duration:
        return self

    def __add__(self, other: object) -> Duration:
        """Add two Durations count by count.

        Examples:
            >>> Duration(years=1, days=3) + Duration(days=4)
            Duration(years=1, days=7)
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(*(a + b for a, b in zip(self._values(), other._values())))

    def __radd__(self, other: object) -> Duration:
        """Support sum() by handling 0 + Duration."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(*(a - b for a, b in zip(self._values(), other._values())))

    def __eq__(self, other: object) -> bool:
        """Compare count by count, without normalization.

        Examples:
            >>> Duration(days=14) == Duration(weeks=2)
            False
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return self._values() == other._values()

    def __hash__(self) -> int:
        return hash(self._values())

    def __bool__(self) -> bool:
        """Return True if any count is non-zero."""
        return not self.is_zero

    def __repr__(self) -> str:
        """Return a representation listing the non-zero counts."""
        parts = [f"{name}={value}" for name, value in self.to_units_map().items()]
        return f"Duration({', '.join(parts)})"


__all__ = ["Duration"]
