"""Display zones: fixed UTC offsets and IANA zone rules.

This module provides the Timezone class used as the display zone of a
DateTime. A zone never changes the instant it is attached to; it only
decides which wall-clock fields that instant shows.

Two kinds of zone exist:
    - Fixed: a constant offset from UTC (e.g. "+05:30", or an entry of
      the built-in static name table, which ignores DST).
    - Rules: an IANA zone resolved through the zoneinfo database, whose
      offset depends on the instant (DST-correct).
"""

from __future__ import annotations

import datetime as _datetime
import logging
import re
from typing import ClassVar
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tempotime._internal.calendar import decompose
from tempotime._internal.constants import MAX_UTC_OFFSET_SECONDS, MS_PER_SECOND
from tempotime.config.settings import get_settings
from tempotime.errors import TimezoneError

logger = logging.getLogger(__name__)

# Common zones mapped to their standard offsets in seconds (no DST)
STATIC_ZONES: dict[str, int] = {
    "UTC": 0,
    "America/New_York": -5 * 3600,
    "America/Los_Angeles": -8 * 3600,
    "Europe/London": 0,
    "Europe/Paris": 1 * 3600,
    "Asia/Tokyo": 9 * 3600,
    "Asia/Shanghai": 8 * 3600,
    "Australia/Sydney": 10 * 3600,
    "Asia/Kolkata": 5 * 3600 + 30 * 60,
    "America/Sao_Paulo": -3 * 3600,
}

_STATIC_BY_FOLDED_NAME: dict[str, tuple[str, int]] = {
    name.casefold(): (name, offset) for name, offset in STATIC_ZONES.items()
}

_UNIX_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)

# zoneinfo lookups go through stdlib datetime, which only covers years 1-9999
_MIN_LOOKUP_SECONDS = -62_135_596_800 + 86_400  # 0001-01-02T00:00:00Z
_MAX_LOOKUP_SECONDS = 253_402_300_799 - 86_400  # 9999-12-30T23:59:59Z


def format_offset(offset_seconds: int, *, separator: str = ":") -> str:
    """Format an offset in seconds as "+HH:MM".

    Examples:
        >>> format_offset(19800)
        '+05:30'
        >>> format_offset(-18000, separator="")
        '-0500'
    """
    sign = "+" if offset_seconds >= 0 else "-"
    total_minutes = abs(offset_seconds) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


class Timezone:
    """A display zone: a fixed UTC offset or a set of IANA rules.

    The offset is expressed in seconds from UTC, with positive values
    being east of UTC (ahead in time) and negative values being west of
    UTC (behind in time).

    Attributes:
        name: The zone name ("UTC", "Asia/Tokyo", ...) or None for an
            anonymous fixed offset.
        is_fixed: True unless the zone follows IANA rules.

    Examples:
        >>> Timezone.utc().is_utc
        True

        >>> Timezone.from_hours(5, 30).utc_offset(0)
        19800

        >>> Timezone.from_string("-05:00").utc_offset(0)
        -18000
    """

    __slots__ = ("_offset_seconds", "_name", "_rules")

    # UTC singleton instance (lazily initialized)
    _utc_instance: ClassVar[Timezone | None] = None

    def __init__(self, offset_seconds: int, name: str | None = None) -> None:
        """Create a fixed-offset Timezone.

        Args:
            offset_seconds: UTC offset in seconds. Positive values are
                east of UTC, negative values are west.
            name: Optional name for the timezone (e.g., "EST").

        Raises:
            TimezoneError: If offset_seconds is outside valid range.
        """
        if not isinstance(offset_seconds, int):
            raise TimezoneError(
                f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
            )

        if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
            raise TimezoneError(
                f"offset_seconds {offset_seconds} is outside valid range "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )

        self._offset_seconds: int | None = offset_seconds
        self._name: str | None = name
        self._rules: ZoneInfo | None = None

    @classmethod
    def utc(cls) -> Timezone:
        """Return the UTC timezone singleton."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(0, "UTC")
        return cls._utc_instance

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> Timezone:
        """Create a Timezone from hours and minutes offset.

        Args:
            hours: Hour component of offset (-14 to +14). Sign determines
                direction (positive = east of UTC).
            minutes: Minute component of offset (0 to 59). The sign is
                taken from hours.

        Returns:
            A new fixed-offset Timezone.

        Raises:
            TimezoneError: If hours or minutes are out of valid range.
        """
        if minutes < 0 or minutes > 59:
            raise TimezoneError(f"minutes must be 0-59, got {minutes}")

        if hours >= 0:
            offset_seconds = hours * 3600 + minutes * 60
        else:
            offset_seconds = hours * 3600 - minutes * 60

        return cls(offset_seconds)

    @classmethod
    def from_string(cls, s: str) -> Timezone:
        """Parse an offset string into a fixed-offset Timezone.

        Supported formats:
            - "Z" or "z": UTC
            - "UTC": UTC
            - "+HH:MM" or "-HH:MM": Hours and minutes with colon
            - "+HHMM" or "-HHMM": Hours and minutes without colon
            - "+HH" or "-HH": Hours only

        Args:
            s: String representation of the offset.

        Returns:
            A new Timezone instance.

        Raises:
            TimezoneError: If the string cannot be parsed.

        Examples:
            >>> Timezone.from_string("+05:30").utc_offset(0)
            19800

            >>> Timezone.from_string("-0500").utc_offset(0)
            -18000
        """
        s = s.strip()

        if s.upper() in ("Z", "UTC"):
            return cls.utc()

        match = re.match(r"^([+-])(\d{2})(?::?(\d{2}))?$", s)
        if not match:
            raise TimezoneError(f"cannot parse timezone offset: {s!r}")

        sign_str, hours_str, minutes_str = match.groups()
        hours = int(hours_str)
        minutes = int(minutes_str) if minutes_str else 0

        if hours > 14 or (hours == 14 and minutes > 0):
            raise TimezoneError(f"offset hours out of range: {s!r}")
        if minutes > 59:
            raise TimezoneError(f"offset minutes out of range: {s!r}")

        sign = 1 if sign_str == "+" else -1
        return cls(sign * (hours * 3600 + minutes * 60))

    @classmethod
    def from_iana(cls, name: str) -> Timezone:
        """Create a rules-based Timezone from an IANA zone name.

        Args:
            name: An IANA key such as "America/New_York".

        Returns:
            A Timezone following that zone's DST rules.

        Raises:
            TimezoneError: If the zoneinfo database has no such zone.
        """
        try:
            rules = ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise TimezoneError(f"unknown IANA zone: {name!r}") from exc

        instance = object.__new__(cls)
        instance._offset_seconds = None
        instance._name = name
        instance._rules = rules
        return instance

    @classmethod
    def from_static(cls, name: str) -> Timezone:
        """Create a fixed-offset Timezone from the built-in name table.

        Names match case-insensitively; the canonical spelling is kept.

        Raises:
            TimezoneError: If the name is not in the table.
        """
        entry = _STATIC_BY_FOLDED_NAME.get(name.casefold())
        if entry is None:
            raise TimezoneError(f"zone {name!r} is not in the static zone table")
        canonical, offset = entry
        return cls(offset, canonical)

    @classmethod
    def local(cls) -> Timezone:
        """Return the host's current local offset as a fixed Timezone."""
        now = _datetime.datetime.now().astimezone()
        offset = now.utcoffset()
        seconds = int(offset.total_seconds()) if offset is not None else 0
        return cls(seconds, now.tzname())

    @classmethod
    def resolve(cls, name: str) -> Timezone | None:
        """Resolve a zone identifier, applying the unresolvable-name policy.

        Offsets ("+05:30"), "UTC" and "Z" are always understood. Other
        names go to the IANA database and/or the static table depending
        on the ``zone_provider`` setting.

        Args:
            name: Zone name or offset string.

        Returns:
            The Timezone, or None if the name cannot be resolved and
            strict mode is off.

        Raises:
            TimezoneError: If the name cannot be resolved and strict mode
                is on.
        """
        settings = get_settings()
        key = name.strip()

        if key.upper() in ("Z", "UTC"):
            return cls.utc()

        if key[:1] in ("+", "-"):
            try:
                return cls.from_string(key)
            except TimezoneError:
                if settings.strict:
                    raise
                logger.debug("ignoring malformed zone offset %r", name)
                return None

        if settings.zone_provider in ("auto", "iana"):
            try:
                return cls.from_iana(key)
            except TimezoneError:
                logger.debug("zoneinfo has no zone %r", key)

        if settings.zone_provider in ("auto", "static"):
            try:
                return cls.from_static(key)
            except TimezoneError:
                pass

        if settings.strict:
            raise TimezoneError(f"cannot resolve zone {name!r}")
        logger.debug("ignoring unresolvable zone %r", name)
        return None

    @property
    def name(self) -> str | None:
        """Return the zone name, if any."""
        return self._name

    @property
    def is_fixed(self) -> bool:
        """Return True if this zone has a constant offset."""
        return self._rules is None

    @property
    def is_utc(self) -> bool:
        """Return True if this is a fixed zone with a zero offset."""
        return self._rules is None and self._offset_seconds == 0

    def utc_offset(self, ts_ms: int) -> int:
        """Return the offset in seconds in effect at a UTC instant.

        Args:
            ts_ms: Milliseconds since the epoch (UTC).

        Returns:
            Seconds east of UTC.
        """
        if self._rules is None:
            return self._offset_seconds
        seconds = min(max(ts_ms // MS_PER_SECOND, _MIN_LOOKUP_SECONDS), _MAX_LOOKUP_SECONDS)
        moment = (_UNIX_EPOCH + _datetime.timedelta(seconds=seconds)).astimezone(self._rules)
        return int(moment.utcoffset().total_seconds())

    def local_offset(self, local_ms: int) -> int:
        """Return the offset in seconds in effect at a wall-clock time.

        The wall-clock time is given as the milliseconds its civil fields
        would have in UTC. Ambiguous times (DST fall-back) use the
        earlier offset; nonexistent times (DST gap) use the offset from
        before the transition.

        Args:
            local_ms: Wall-clock fields composed as if they were UTC.

        Returns:
            Seconds east of UTC.
        """
        if self._rules is None:
            return self._offset_seconds
        fields = decompose(local_ms)
        if not 1 <= fields.year <= 9999:
            return self.utc_offset(local_ms)
        wall = _datetime.datetime(
            fields.year,
            fields.month,
            fields.day,
            fields.hour,
            fields.minute,
            fields.second,
            tzinfo=self._rules,
        )
        return int(wall.utcoffset().total_seconds())

    def to_local(self, ts_ms: int) -> int:
        """Shift a UTC instant to its wall-clock milliseconds in this zone."""
        return ts_ms + self.utc_offset(ts_ms) * MS_PER_SECOND

    def from_local(self, local_ms: int) -> int:
        """Shift wall-clock milliseconds in this zone back to a UTC instant."""
        return local_ms - self.local_offset(local_ms) * MS_PER_SECOND

    def __eq__(self, other: object) -> bool:
        """Fixed zones are equal by offset; rule zones by IANA key."""
        if not isinstance(other, Timezone):
            return NotImplemented
        if self._rules is not None or other._rules is not None:
            return self._rules is not None and other._rules is not None and self._name == other._name
        return self._offset_seconds == other._offset_seconds

    def __hash__(self) -> int:
        if self._rules is not None:
            return hash(self._name)
        return hash(self._offset_seconds)

    def __repr__(self) -> str:
        if self._rules is not None:
            return f"Timezone.from_iana({self._name!r})"
        if self._name:
            return f"Timezone(offset_seconds={self._offset_seconds}, name={self._name!r})"
        return f"Timezone(offset_seconds={self._offset_seconds})"

    def __str__(self) -> str:
        """Return the zone name, or "+HH:MM" for an anonymous offset."""
        if self._name:
            return self._name
        if self._offset_seconds == 0:
            return "UTC"
        return format_offset(self._offset_seconds)


__all__ = ["STATIC_ZONES", "Timezone", "format_offset"]
