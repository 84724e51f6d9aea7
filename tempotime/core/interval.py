"""Interval class representing the span between two instants.

This module provides the Interval class: a closed span [start, end]
between two DateTimes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tempotime.core.duration import Duration
from tempotime.units.timeunit import lookup_unit

if TYPE_CHECKING:
    from tempotime.core.datetime import DateTime
    from tempotime.core.duration import UnitName


class Interval:
    """A closed span between two instants, [start, end].

    Both endpoints are contained in the interval. The endpoints are not
    reordered: an interval whose start is after its end is "reversed"
    and contains nothing, since no instant is both >= start and <= end.

    Attributes:
        start: The first endpoint.
        end: The second endpoint.

    Examples:
        >>> from tempotime.core.datetime import DateTime
        >>> october = Interval(
        ...     DateTime.from_iso("2025-10-01T00:00:00Z"),
        ...     DateTime.from_iso("2025-10-31T23:59:59Z"),
        ... )
        >>> DateTime.from_iso("2025-10-15T12:00:00Z") in october
        True
        >>> october.length("days")
        Duration(days=30)
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: DateTime, end: DateTime) -> None:
        """Create an interval from two DateTimes.

        Args:
            start: The start of the interval (inclusive).
            end: The end of the interval (inclusive).
        """
        self._start = start
        self._end = end

    @property
    def start(self) -> DateTime:
        return self._start

    @property
    def end(self) -> DateTime:
        return self._end

    @property
    def is_reversed(self) -> bool:
        """Return True if start is after end."""
        return self._start > self._end

    def contains(self, instant: DateTime) -> bool:
        """Return True if start <= instant <= end.

        Always False for a reversed interval.
        """
        return self._start <= instant <= self._end

    def __contains__(self, instant: DateTime) -> bool:
        return self.contains(instant)

    def length(self, unit: UnitName) -> Duration:
        """Return the absolute length as a single-unit Duration.

        The length is converted with the fixed ratios used by
        DateTime.diff and truncated to a whole number of units in exact
        integer arithmetic. The result is non-negative even for a reversed
        interval.

        Args:
            unit: The unit of the result ("days", "hours", ...).

        Returns:
            A Duration with only that unit set. An unknown unit name
            gives an empty Duration unless strict mode is on.

        Examples:
            >>> from tempotime.core.datetime import DateTime
            >>> i = Interval(DateTime.from_iso("2025-10-02"), DateTime.from_iso("2025-10-01"))
            >>> i.length("hours")
            Duration(hours=24)
        """
        resolved = lookup_unit(unit, operation="Interval.length")
        if resolved is None:
            return Duration()
        span = abs(self._end.to_millis() - self._start.to_millis())
        return Duration.from_units([(resolved, span // resolved.to_millis())])

    def __eq__(self, other: object) -> bool:
        """Two intervals are equal if both endpoints are the same instants."""
        if not isinstance(other, Interval):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        return f"Interval({self._start!r}, {self._end!r})"

    def __str__(self) -> str:
        """Return the interval as "start/end" in ISO 8601."""
        return f"{self._start}/{self._end}"


__all__ = ["Interval"]
