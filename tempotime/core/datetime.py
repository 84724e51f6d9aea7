"""DateTime class: an immutable instant with an optional display zone.

This module provides the DateTime class for representing instants in time
with millisecond precision. The instant is always stored as milliseconds
since the Unix epoch in UTC; an attached display zone only changes which
wall-clock fields are shown, rendered and used for calendar arithmetic.
"""

from __future__ import annotations

import time as _time
from typing import IO, TYPE_CHECKING, Mapping, Protocol, overload

from tempotime._internal.calendar import CivilFields, compose, decompose, weekday_of
from tempotime._internal.validation import validate_fields
from tempotime.arithmetic.shift import end_of, shift, start_of
from tempotime.core.duration import Duration
from tempotime.format.iso8601 import format_iso8601, parse_iso8601
from tempotime.format.pattern import format_fields, iter_format, parse_fields
from tempotime.format.presets import resolve_preset
from tempotime.units.timeunit import TimeUnit, lookup_unit
from tempotime.units.timezone import Timezone

if TYPE_CHECKING:
    from tempotime.core.duration import UnitName


class SupportsWrite(Protocol):
    def write(self, s: str, /) -> object: ...


class DateTime:
    """An immutable point in time with an optional display zone.

    Equality, ordering and hashing depend only on the millisecond value;
    two DateTimes for the same instant in different zones are equal.
    Every operation returns a new DateTime.

    Attributes:
        year: The year in the display zone.
        month: The month (1-12) in the display zone.
        day: The day of the month in the display zone.
        hour: The hour (0-23) in the display zone.
        minute: The minute (0-59).
        second: The second (0-59).
        millisecond: The millisecond (0-999).
        weekday: The ISO weekday index, Monday=0.
        zone: The display zone, or None for plain UTC.

    Examples:
        >>> d = DateTime.from_iso("2025-01-31T10:00:00Z")
        >>> d.plus(months=1).to_iso()
        '2025-02-28T10:00:00Z'

        >>> d.set_zone("Asia/Tokyo").hour
        19

        >>> d.to_format("MMMM do, yyyy")
        'January 31st, 2025'
    """

    __slots__ = ("_ms", "_zone")

    def __init__(self, millis: int = 0, zone: Timezone | None = None) -> None:
        """Create a DateTime from epoch milliseconds.

        Args:
            millis: Milliseconds since 1970-01-01T00:00:00Z.
            zone: Optional display zone.

        Raises:
            TypeError: If millis is not an integer.
        """
        if not isinstance(millis, int) or isinstance(millis, bool):
            raise TypeError(f"millis must be an integer, got {type(millis).__name__}")
        self._ms = millis
        self._zone = zone

    @classmethod
    def _from_internal(cls, millis: int, zone: Timezone | None) -> DateTime:
        """Create a DateTime without validation."""
        instance = object.__new__(cls)
        instance._ms = millis
        instance._zone = zone
        return instance

    # Constructors

    @classmethod
    def now(cls) -> DateTime:
        """Return the current instant (no display zone).

        Examples:
            >>> DateTime.now().zone is None
            True
        """
        return cls._from_internal(_time.time_ns() // 1_000_000, None)

    @classmethod
    def local(cls) -> DateTime:
        """Return the current instant with the host's local offset attached."""
        return cls._from_internal(_time.time_ns() // 1_000_000, Timezone.local())

    @classmethod
    def of(
        cls,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> DateTime:
        """Create a UTC DateTime from civil fields.

        Raises:
            ValidationError: If any field is out of range.

        Examples:
            >>> DateTime.of(2024, 2, 29, 12).to_iso()
            '2024-02-29T12:00:00Z'
        """
        fields = CivilFields(year, month, day, hour, minute, second, millisecond)
        validate_fields(fields)
        return cls._from_internal(compose(fields), None)

    @classmethod
    def from_millis(cls, millis: int) -> DateTime:
        """Create a UTC DateTime from epoch milliseconds."""
        return cls(millis)

    @classmethod
    def from_iso(cls, s: str, *, keep_zone: bool = False) -> DateTime:
        """Parse an ISO 8601 string.

        The value is normalized to UTC. With keep_zone=True, a numeric
        offset in the string is attached as the display zone.

        Args:
            s: An ISO 8601 date or date-time string.
            keep_zone: Attach the parsed offset as the display zone.

        Raises:
            ParseError: If the string is malformed.

        Examples:
            >>> DateTime.from_iso("2025-10-31T08:00:00-04:00").to_iso()
            '2025-10-31T12:00:00Z'

            >>> DateTime.from_iso("2025-10-31T08:00:00-04:00", keep_zone=True).to_iso()
            '2025-10-31T08:00:00-04:00'
        """
        millis, zone = parse_iso8601(s)
        return cls._from_internal(millis, zone if keep_zone else None)

    @classmethod
    def from_format(cls, s: str, pattern: str) -> DateTime:
        """Parse a string with a token pattern.

        Fields the pattern does not mention default to the epoch values.
        The parsed fields are taken as UTC.

        Raises:
            ParseError: If the string does not match the pattern.

        Examples:
            >>> DateTime.from_format("October 31st, 2025", "MMMM do, yyyy").to_iso()
            '2025-10-31T00:00:00Z'
        """
        return cls._from_internal(compose(parse_fields(s, pattern)), None)

    # Properties

    def _fields(self) -> CivilFields:
        if self._zone is None:
            return decompose(self._ms)
        return decompose(self._zone.to_local(self._ms))

    @property
    def year(self) -> int:
        return self._fields().year

    @property
    def month(self) -> int:
        return self._fields().month

    @property
    def day(self) -> int:
        return self._fields().day

    @property
    def hour(self) -> int:
        return self._fields().hour

    @property
    def minute(self) -> int:
        return self._fields().minute

    @property
    def second(self) -> int:
        return self._fields().second

    @property
    def millisecond(self) -> int:
        return self._fields().millisecond

    @property
    def weekday(self) -> int:
        """Return the ISO weekday index, Monday=0 through Sunday=6."""
        fields = self._fields()
        return weekday_of(fields.year, fields.month, fields.day)

    @property
    def zone(self) -> Timezone | None:
        """Return the display zone, or None."""
        return self._zone

    def to_millis(self) -> int:
        """Return milliseconds since the Unix epoch."""
        return self._ms

    # Zones

    def set_zone(self, zone: str | Timezone) -> DateTime:
        """Attach a display zone.

        The instant is unchanged; only the wall-clock fields differ.

        Args:
            zone: A Timezone, an IANA name ("America/New_York"), a name
                from the static zone table, "UTC"/"Z", or a "+HH:MM"
                offset.

        Returns:
            A DateTime with the zone attached, or self unchanged if the
            name cannot be resolved (strict mode off).

        Raises:
            TimezoneError: If the name cannot be resolved and strict mode
                is on.

        Examples:
            >>> d = DateTime.from_iso("2025-10-30T12:00:00Z")
            >>> d.set_zone("+05:30").to_format("HH:mm")
            '17:30'
            >>> d.set_zone("Mars/Olympus_Mons") is d
            True
        """
        if isinstance(zone, Timezone):
            return DateTime._from_internal(self._ms, zone)
        resolved = Timezone.resolve(zone)
        if resolved is None:
            return self
        return DateTime._from_internal(self._ms, resolved)

    def to_utc(self) -> DateTime:
        """Return the same instant with no display zone."""
        if self._zone is None:
            return self
        return DateTime._from_internal(self._ms, None)

    # Arithmetic

    def plus(self, duration: Duration | Mapping[UnitName, int] | None = None, **units: int) -> DateTime:
        """Add a Duration.

        Years and months are applied on the calendar, clamping the day to
        the target month's length. All smaller units are added as exact
        milliseconds.

        Args:
            duration: A Duration, or a mapping of unit name to count.
            **units: Unit counts by name, e.g. months=1 or days=3.
                Unknown names are ignored unless strict mode is on.

        Returns:
            A new DateTime with the same display zone.

        Examples:
            >>> DateTime.from_iso("2024-01-31").plus(months=1).to_iso()
            '2024-02-29T00:00:00Z'

            >>> DateTime.from_iso("2024-02-28").plus(Duration(days=1)).to_iso()
            '2024-02-29T00:00:00Z'
        """
        return DateTime._from_internal(shift(self._ms, _coerce(duration, units), self._zone), self._zone)

    def minus(self, duration: Duration | Mapping[UnitName, int] | None = None, **units: int) -> DateTime:
        """Subtract a Duration (add its negation).

        Examples:
            >>> DateTime.from_iso("2024-03-31").minus(months=1).to_iso()
            '2024-02-29T00:00:00Z'
        """
        return self.plus(_coerce(duration, units).negated())

    def start_of(self, unit: UnitName) -> DateTime:
        """Round down to the start of a calendar unit in the display zone.

        Unknown unit names return the instant unchanged unless strict
        mode is on.

        Examples:
            >>> DateTime.from_iso("2025-10-29T14:05:09.007Z").start_of("day").to_iso()
            '2025-10-29T00:00:00Z'
        """
        return DateTime._from_internal(start_of(self._ms, unit, self._zone), self._zone)

    def end_of(self, unit: UnitName) -> DateTime:
        """Round up to the last millisecond of a calendar unit.

        Examples:
            >>> DateTime.from_iso("2025-02-15").end_of("month").to_iso()
            '2025-02-28T23:59:59.999Z'
        """
        return DateTime._from_internal(end_of(self._ms, unit, self._zone), self._zone)

    def diff(self, other: DateTime, unit: UnitName = TimeUnit.MILLISECOND) -> float:
        """Return self minus other, in the given unit, as a float.

        Months and years use the fixed 30-day and 365-day ratios.

        Args:
            other: The DateTime to subtract.
            unit: The unit of the result.

        Returns:
            The signed difference; positive when self is later. An
            unknown unit name gives 0.0 unless strict mode is on.

        Examples:
            >>> a = DateTime.from_iso("2025-10-31")
            >>> b = DateTime.from_iso("2025-10-29T12:00:00Z")
            >>> a.diff(b, "days")
            1.5
            >>> b.diff(a, "hours")
            -36.0
        """
        resolved = lookup_unit(unit, operation="DateTime.diff")
        if resolved is None:
            return 0.0
        return (self._ms - other._ms) / resolved.to_millis()

    # Formatting

    def to_iso(self) -> str:
        """Return the ISO 8601 form.

        "Z" is used without a display zone; otherwise the local fields
        are written with the zone's numeric offset. Milliseconds appear
        only when non-zero.
        """
        return format_iso8601(self._ms, self._zone)

    def to_format(self, pattern: str) -> str:
        """Render the wall-clock fields with a token pattern.

        Examples:
            >>> DateTime.from_iso("2025-10-29T14:05:00Z").to_format("EEEE, h:mm a")
            'Wednesday, 2:05 pm'
        """
        return format_fields(self._fields(), pattern)

    def format_into(self, writer: SupportsWrite | IO[str], pattern: str) -> None:
        """Render with a token pattern, writing chunks to writer.

        Args:
            writer: Any object with a write(str) method.
            pattern: The format pattern.
        """
        for chunk in iter_format(self._fields(), pattern):
            writer.write(chunk)

    def to_locale_string(self, preset: str) -> str:
        """Render a locale preset, given by constant or by name.

        Examples:
            >>> d = DateTime.from_iso("2025-10-29T15:30:00Z")
            >>> d.to_locale_string("DATE_SHORT")
            '10/29/2025'
            >>> d.to_locale_string("DATETIME_MED")
            'Oct 29, 2025, 3:30 pm'
        """
        return self.to_format(resolve_preset(preset))

    # Operators

    def __add__(self, other: object) -> DateTime:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    @overload
    def __sub__(self, other: Duration) -> DateTime: ...

    @overload
    def __sub__(self, other: DateTime) -> Duration: ...

    def __sub__(self, other: object) -> DateTime | Duration:
        """Subtract a Duration, or another DateTime.

        DateTime - DateTime returns the exact difference as a Duration of
        milliseconds.
        """
        if isinstance(other, Duration):
            return self.minus(other)
        if isinstance(other, DateTime):
            return Duration(milliseconds=self._ms - other._ms)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        """Two DateTimes are equal if they are the same instant."""
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ms == other._ms

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ms < other._ms

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ms <= other._ms

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ms > other._ms

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ms >= other._ms

    def __hash__(self) -> int:
        return hash(self._ms)

    def __repr__(self) -> str:
        if self._zone is None:
            return f"DateTime({self.to_iso()!r})"
        return f"DateTime({self.to_iso()!r}, zone={str(self._zone)!r})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso()


def _coerce(duration: Duration | Mapping[UnitName, int] | None, units: Mapping[str, int]) -> Duration:
    """Build the Duration a plus/minus call describes."""
    if duration is None:
        result = Duration()
    elif isinstance(duration, Duration):
        result = duration
    else:
        result = Duration.from_units(duration)
    if units:
        result = result + Duration.from_units(units)
    return result


def dt() -> DateTime:
    """Return the current instant (shorthand for DateTime.now())."""
    return DateTime.now()


__all__ = ["DateTime", "dt"]
