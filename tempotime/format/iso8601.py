"""ISO 8601 formatting and parsing.

This module converts epoch-millisecond instants to and from ISO 8601
strings.

Functions:
    parse_iso8601: Parse an ISO 8601 string into an instant and offset.
    format_iso8601: Format an instant as an ISO 8601 string.

Accepted input:
    - YYYY-MM-DD (midnight UTC); the year may carry a sign and more
      than four digits, as format_iso8601 writes it outside 0000..9999
    - YYYY-MM-DDTHH:MM
    - YYYY-MM-DDTHH:MM:SS
    - YYYY-MM-DDTHH:MM:SS.f (1-9 fraction digits, truncated to milliseconds)
    - "T", "t" or a space between date and time
    - An optional Z/z, +HH:MM, +HHMM or +HH suffix (no suffix means UTC)

Examples:
    >>> parse_iso8601("2025-10-31T12:00:00Z")
    (1761912000000, None)

    >>> format_iso8601(1761912000000)
    '2025-10-31T12:00:00Z'
"""

from __future__ import annotations

import re

from tempotime._internal.calendar import CivilFields, compose, days_in_month, decompose
from tempotime._internal.constants import MS_PER_SECOND
from tempotime.errors import ParseError, TimezoneError
from tempotime.units.timezone import Timezone, format_offset

_OFFSET_RE = re.compile(r"([Zz]|[+-]\d{2}(?::?\d{2})?)$")
_FRACTION_RE = re.compile(r"[0-9]{1,9}")
_YEAR_RE = re.compile(r"([+-]?)([0-9]{4,})")


def _number(s: str, start: int, width: int, component: str, source: str | None = None) -> int:
    """Read a fixed-width decimal component of s."""
    chunk = s[start:start + width]
    if len(chunk) != width or not chunk.isdigit() or not chunk.isascii():
        raise ParseError(
            f"invalid {component} in ISO 8601 string {source or s!r}: expected {width} digits"
        )
    return int(chunk)


def _expect(s: str, index: int, allowed: str, component: str, source: str | None = None) -> None:
    if index >= len(s) or s[index] not in allowed:
        raise ParseError(f"missing {component} in ISO 8601 string {source or s!r}")


def _check_range(s: str, component: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise ParseError(
            f"invalid {component} in ISO 8601 string {s!r}: {value} is outside {low}..{high}"
        )


def parse_iso8601(s: str) -> tuple[int, Timezone | None]:
    """Parse an ISO 8601 string.

    Args:
        s: The string to parse.

    Returns:
        A pair of the UTC instant in epoch milliseconds and the parsed
        offset as a fixed Timezone, or None when the string carries no
        offset or a "Z" suffix.

    Raises:
        ParseError: If the string is malformed. The message names the
            offending component (year, month, day, separator, hour,
            minute, second, fraction or offset).

    Examples:
        >>> parse_iso8601("2025-10-31")
        (1761868800000, None)

        >>> ts, zone = parse_iso8601("2025-10-31T08:00:00-04:00")
        >>> ts, str(zone)
        (1761912000000, '-04:00')
    """
    text = s.strip()
    if not text:
        raise ParseError("empty ISO 8601 string")

    year_match = _YEAR_RE.match(text)
    if year_match is None:
        raise ParseError(f"invalid year in ISO 8601 string {s!r}: expected at least 4 digits")
    sign, digits = year_match.groups()
    year = -int(digits) if sign == "-" else int(digits)
    base = year_match.end()
    _expect(text, base, "-", "date separator '-'")
    month = _number(text, base + 1, 2, "month")
    _expect(text, base + 3, "-", "date separator '-'")
    day = _number(text, base + 4, 2, "day")
    _check_range(text, "month", month, 1, 12)
    _check_range(text, "day", day, 1, days_in_month(year, month))

    if len(text) == base + 6:
        return compose(CivilFields(year, month, day)), None

    _expect(text, base + 6, "Tt ", "date/time separator")
    rest = text[base + 7:]

    zone: Timezone | None = None
    offset_seconds = 0
    match = _OFFSET_RE.search(rest)
    if match:
        suffix = match.group(1)
        rest = rest[: match.start()]
        if suffix not in ("Z", "z"):
            try:
                zone = Timezone.from_string(suffix)
            except TimezoneError as exc:
                raise ParseError(f"invalid offset in ISO 8601 string {s!r}: {exc}") from exc
            offset_seconds = zone.utc_offset(0)

    hour = _number(rest, 0, 2, "hour", s)
    _expect(rest, 2, ":", "time separator ':'", s)
    minute = _number(rest, 3, 2, "minute", s)
    second = 0
    millisecond = 0
    position = 5
    if position < len(rest) and rest[position] == ":":
        second = _number(rest, 6, 2, "second", s)
        position = 8
        if position < len(rest) and rest[position] in ".,":
            fraction = _FRACTION_RE.match(rest, position + 1)
            if fraction is None:
                raise ParseError(f"invalid fraction in ISO 8601 string {s!r}: expected 1-9 digits")
            millisecond = int((fraction.group() + "00")[:3])
            position = fraction.end()
    if position != len(rest):
        if rest[position] in "+-":
            raise ParseError(f"invalid offset in ISO 8601 string {s!r}")
        raise ParseError(f"unexpected text {rest[position:]!r} in ISO 8601 string {s!r}")

    _check_range(text, "hour", hour, 0, 23)
    _check_range(text, "minute", minute, 0, 59)
    _check_range(text, "second", second, 0, 59)

    local_ms = compose(CivilFields(year, month, day, hour, minute, second, millisecond))
    return local_ms - offset_seconds * MS_PER_SECOND, zone


def format_iso8601(ts_ms: int, zone: Timezone | None = None) -> str:
    """Format an instant as an ISO 8601 string.

    Milliseconds are included only when non-zero. Without a zone the
    value is rendered in UTC with a "Z" suffix; with a zone the local
    fields are rendered with that instant's offset. Negative years
    are written with a leading "-" and years after 9999 with all their
    digits; parse_iso8601 reads both forms back.

    Examples:
        >>> format_iso8601(1761912000123)
        '2025-10-31T12:00:00.123Z'

        >>> format_iso8601(1761912000000, Timezone.from_hours(9))
        '2025-10-31T21:00:00+09:00'
    """
    if zone is None:
        fields = decompose(ts_ms)
        suffix = "Z"
    else:
        offset = zone.utc_offset(ts_ms)
        fields = decompose(ts_ms + offset * MS_PER_SECOND)
        suffix = format_offset(offset)

    year = f"{fields.year:04d}" if fields.year >= 0 else f"-{-fields.year:04d}"
    out = (
        f"{year}-{fields.month:02d}-{fields.day:02d}"
        f"T{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d}"
    )
    if fields.millisecond:
        out += f".{fields.millisecond:03d}"
    return out + suffix


__all__ = ["format_iso8601", "parse_iso8601"]
