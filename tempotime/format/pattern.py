"""Token-pattern formatting and parsing.

This module renders civil fields into human-readable strings and parses
such strings back into civil fields, using the grammar in
:mod:`tempotime.format.tokens`.

Supported Tokens:
    yyyy / yy  - 4-digit year / 2-digit year
    MMMM / MMM - Full / short month name (parsed case-insensitively)
    MM / M     - 2-digit / unpadded month
    dd / d     - 2-digit / unpadded day
    do         - Day with ordinal suffix (1st, 22nd, 31st)
    EEEE / EEE - Full / short weekday name
    HH / H     - 24-hour hour, padded / unpadded
    hh / h     - 12-hour hour, padded / unpadded
    mm / m     - Minute (always rendered with 2 digits)
    ss / s     - Second (always rendered with 2 digits)
    SSS        - Millisecond (always rendered with 3 digits)
    a          - am/pm marker
    '...'      - Literal text ('' is an escaped apostrophe)

Functions:
    format_fields: Render civil fields with a pattern.
    iter_format: Render civil fields as a stream of string chunks.
    parse_fields: Parse a string with a pattern into civil fields.

Examples:
    >>> from tempotime._internal.calendar import CivilFields
    >>> fields = CivilFields(2025, 10, 31, 15, 5, 0, 0)
    >>> format_fields(fields, "MMMM do, yyyy 'at' h:mm a")
    'October 31st, 2025 at 3:05 pm'

    >>> parse_fields("October 31st, 2025 at 3:05 pm", "MMMM do, yyyy 'at' h:mm a")
    CivilFields(year=2025, month=10, day=31, hour=15, minute=5, second=0, millisecond=0)
"""

from __future__ import annotations

from typing import Iterator, Sequence

from tempotime._internal.calendar import CivilFields, weekday_of
from tempotime._internal.constants import EPOCH_YEAR
from tempotime._internal.validation import validate_fields
from tempotime.config.settings import get_settings
from tempotime.errors import ParseError, ValidationError
from tempotime.format.tokens import (
    MONTH_ABBREVIATIONS,
    MONTH_NAMES,
    WEEKDAY_ABBREVIATIONS,
    WEEKDAY_NAMES,
    Token,
    ordinal,
    tokenize,
)


def format_fields(fields: CivilFields, pattern: str) -> str:
    """Render civil fields using a token pattern.

    Args:
        fields: The civil fields to render (already in the display zone).
        pattern: The format pattern.

    Returns:
        The rendered string.

    Examples:
        >>> from tempotime._internal.calendar import CivilFields
        >>> format_fields(CivilFields(2025, 10, 29, 14, 5, 9, 7), "yyyy-MM-dd HH:mm:ss.SSS")
        '2025-10-29 14:05:09.007'

        >>> format_fields(CivilFields(2025, 10, 29, 0, 30), "EEE hh:mm a")
        'Wed 12:30 am'
    """
    return "".join(iter_format(fields, pattern))


def iter_format(fields: CivilFields, pattern: str) -> Iterator[str]:
    """Render civil fields as a sequence of string chunks.

    An unterminated quoted literal is rendered verbatim rather than
    treated as an error.

    Args:
        fields: The civil fields to render.
        pattern: The format pattern.

    Yields:
        One chunk per token.
    """
    for token in tokenize(pattern, strict=False):
        if token.kind == "literal":
            yield token.text
        else:
            yield _render_field(fields, token.text)


def _render_field(fields: CivilFields, run: str) -> str:
    """Render a single field token run."""
    letter = run[0]
    count = len(run)

    if run == "do":
        return ordinal(fields.day)

    if letter == "y":
        year = fields.year
        if count >= 4:
            return f"{year:04d}" if year >= 0 else f"{year:05d}"
        return f"{year % 100:02d}"

    if letter == "M":
        if count >= 4:
            return MONTH_NAMES[fields.month - 1]
        if count == 3:
            return MONTH_ABBREVIATIONS[fields.month - 1]
        return f"{fields.month:02d}" if count == 2 else str(fields.month)

    if letter == "d":
        return f"{fields.day:02d}" if count >= 2 else str(fields.day)

    if letter == "E":
        weekday = weekday_of(fields.year, fields.month, fields.day)
        if count >= 4:
            return WEEKDAY_NAMES[weekday]
        return WEEKDAY_ABBREVIATIONS[weekday]

    if letter == "H":
        return f"{fields.hour:02d}" if count >= 2 else str(fields.hour)

    if letter == "h":
        hour12 = fields.hour % 12 or 12
        return f"{hour12:02d}" if count >= 2 else str(hour12)

    if letter == "m":
        return f"{fields.minute:02d}"

    if letter == "s":
        return f"{fields.second:02d}"

    if letter == "S":
        return f"{fields.millisecond:03d}"

    # letter == "a"
    return "am" if fields.hour < 12 else "pm"


class _Scanner:
    """Cursor over the input string being parsed."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def fail(self, message: str) -> ParseError:
        return ParseError(f"{message} at position {self.pos} in {self.text!r}")

    def digits(self, token: str, minimum: int, maximum: int | None) -> str:
        """Consume between minimum and maximum ASCII digits (greedy)."""
        end = self.pos
        limit = len(self.text) if maximum is None else min(len(self.text), self.pos + maximum)
        while end < limit and self.text[end] in "0123456789":
            end += 1
        if end - self.pos < minimum:
            if minimum == maximum:
                raise self.fail(f"expected {minimum} digits for {token!r}")
            raise self.fail(f"expected at least {minimum} digit(s) for {token!r}")
        found = self.text[self.pos:end]
        self.pos = end
        return found

    def number(self, token: str, count: int) -> int:
        """Consume a numeric field: exactly 2 digits for a doubled run, else 1-2."""
        if count >= 2:
            return int(self.digits(token, 2, 2))
        return int(self.digits(token, 1, 2))

    def name(self, token: str, names: Sequence[str], what: str) -> int:
        """Consume one of names (case-insensitive) and return its index."""
        for index, candidate in enumerate(names):
            chunk = self.text[self.pos:self.pos + len(candidate)]
            if chunk.lower() == candidate.lower():
                self.pos += len(candidate)
                return index
        raise self.fail(f"{what} not found for {token!r}")

    def literal(self, text: str) -> None:
        if not self.text.startswith(text, self.pos):
            raise self.fail(f"literal {text!r} not found")
        self.pos += len(text)

    def skip_letters(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isascii() and self.text[self.pos].isalpha():
            self.pos += 1


class _ParseState:
    """Fields captured so far, starting from the epoch defaults."""

    __slots__ = (
        "year",
        "month",
        "day",
        "hour",
        "minute",
        "second",
        "millisecond",
        "hour_is_12h",
        "meridiem",
    )

    def __init__(self) -> None:
        self.year = EPOCH_YEAR
        self.month = 1
        self.day = 1
        self.hour = 0
        self.minute = 0
        self.second = 0
        self.millisecond = 0
        self.hour_is_12h = False
        self.meridiem: str | None = None

    def resolve_hour(self, text: str) -> None:
        """Apply an am/pm marker to a 12-hour value."""
        if self.meridiem is None:
            return
        if self.hour_is_12h and not 1 <= self.hour <= 12:
            raise ParseError(
                f"12-hour value must be between 1 and 12, got {self.hour} in {text!r}"
            )
        if self.meridiem == "pm" and self.hour < 12:
            self.hour += 12
        elif self.meridiem == "am" and self.hour == 12:
            self.hour = 0

    def fields(self) -> CivilFields:
        return CivilFields(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond,
        )


def parse_fields(
    text: str,
    pattern: str,
    *,
    two_digit_year_base: int | None = None,
) -> CivilFields:
    """Parse a string into civil fields using a token pattern.

    The input and pattern are scanned in lockstep. Fields the pattern
    does not mention default to the epoch (1970-01-01 00:00:00.000).
    A 12-hour value followed by an ``a`` marker is converted to 24-hour
    form. Weekday names are consumed but not cross-checked against the
    date.

    Args:
        text: The input string.
        pattern: The format pattern.
        two_digit_year_base: Century added to a ``yy`` year. Defaults to
            the ``two_digit_year_base`` setting (2000).

    Returns:
        The parsed civil fields.

    Raises:
        ParseError: If the input does not match the pattern, the pattern
            has an unterminated literal, or the captured fields do not
            form a valid date and time.

    Examples:
        >>> parse_fields("Oct 05 2025 07:09:03", "MMM dd yyyy HH:mm:ss")
        CivilFields(year=2025, month=10, day=5, hour=7, minute=9, second=3, millisecond=0)

        >>> parse_fields("05 o'clock", "hh 'o''clock'").hour
        5
    """
    tokens = tokenize(pattern, strict=True)
    if two_digit_year_base is None:
        two_digit_year_base = get_settings().two_digit_year_base

    state = _ParseState()
    scanner = _Scanner(text)
    for token in tokens:
        if token.kind == "literal":
            scanner.literal(token.text)
        else:
            _parse_field(scanner, token, two_digit_year_base, state)

    if scanner.pos < len(text):
        raise scanner.fail(f"unexpected trailing text {text[scanner.pos:]!r}")

    state.resolve_hour(text)
    fields = state.fields()
    try:
        validate_fields(fields)
    except ValidationError as exc:
        raise ParseError(f"invalid date/time in {text!r}: {exc}") from exc
    return fields


def _parse_field(
    scanner: _Scanner,
    token: Token,
    two_digit_year_base: int,
    state: _ParseState,
) -> None:
    """Consume one field token into the parse state."""
    run = token.text
    letter = run[0]
    count = len(run)

    if run == "do":
        state.day = int(scanner.digits(run, 1, None))
        scanner.skip_letters()
    elif letter == "y":
        if count >= 4:
            state.year = int(scanner.digits(run, 4, 4))
        else:
            state.year = two_digit_year_base + int(scanner.digits(run, 2, 2))
    elif letter == "M":
        if count >= 4:
            state.month = scanner.name(run, MONTH_NAMES, "month name") + 1
        elif count == 3:
            state.month = scanner.name(run, MONTH_ABBREVIATIONS, "short month name") + 1
        elif count == 2:
            state.month = int(scanner.digits(run, 1, 2))
        else:
            state.month = scanner.number(run, count)
    elif letter == "d":
        state.day = scanner.number(run, count)
    elif letter == "E":
        names = WEEKDAY_NAMES if count >= 4 else WEEKDAY_ABBREVIATIONS
        scanner.name(run, names, "weekday name")
    elif letter == "H":
        state.hour = scanner.number(run, count)
        state.hour_is_12h = False
    elif letter == "h":
        state.hour = scanner.number(run, count)
        state.hour_is_12h = True
    elif letter == "m":
        state.minute = scanner.number(run, count)
    elif letter == "s":
        state.second = scanner.number(run, count)
    elif letter == "S":
        found = scanner.digits(run, 1, None)
        # Scale to milliseconds: "5" -> 500, "12" -> 120, "1234" -> 123
        state.millisecond = int((found + "00")[:3])
    else:
        marker = scanner.text[scanner.pos:scanner.pos + 2].lower()
        if marker not in ("am", "pm"):
            raise scanner.fail("expected 'am' or 'pm'")
        scanner.pos += 2
        state.meridiem = marker


__all__ = ["format_fields", "iter_format", "parse_fields"]
