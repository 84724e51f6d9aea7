"""Token grammar shared by the pattern renderer and parser.

A pattern is a sequence of field runs, plain literal characters, and
quoted literals. Field runs are repeated letters from ``yMdEHhmsSa``
(plus the two-letter ``do`` ordinal token); the run length selects the
variant, e.g. ``MMMM`` is a full month name and ``M`` an unpadded month
number. Text inside single quotes is literal, with ``''`` standing for
one apostrophe both inside and outside quotes.

Examples:
    >>> tokenize("MMM do, yyyy 'at' h:mm a")  # doctest: +NORMALIZE_WHITESPACE
    [Token(kind='field', text='MMM'), Token(kind='literal', text=' '),
     Token(kind='field', text='do'), Token(kind='literal', text=', '),
     Token(kind='field', text='yyyy'), Token(kind='literal', text=' at '),
     Token(kind='field', text='h'), Token(kind='literal', text=':'),
     Token(kind='field', text='mm'), Token(kind='literal', text=' '),
     Token(kind='field', text='a')]
"""

from __future__ import annotations

from typing import NamedTuple

from tempotime.errors import ParseError

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
MONTH_ABBREVIATIONS: tuple[str, ...] = tuple(name[:3] for name in MONTH_NAMES)

# Monday first, matching weekday_of()
WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
WEEKDAY_ABBREVIATIONS: tuple[str, ...] = tuple(name[:3] for name in WEEKDAY_NAMES)

FIELD_LETTERS = frozenset("yMdEHhmsSa")

QUOTE = "'"


class Token(NamedTuple):
    """One element of a tokenized pattern.

    Attributes:
        kind: "field" for a token run, "literal" for text to emit/match.
        text: The run itself ("yyyy", "do", "a") or the literal text.
    """

    kind: str
    text: str


def ordinal(day: int) -> str:
    """Return the day number with its English ordinal suffix.

    Examples:
        >>> [ordinal(d) for d in (1, 2, 3, 4, 11, 21, 22, 23, 31)]
        ['1st', '2nd', '3rd', '4th', '11th', '21st', '22nd', '23rd', '31st']
    """
    if day in (1, 21, 31):
        suffix = "st"
    elif day in (2, 22):
        suffix = "nd"
    elif day in (3, 23):
        suffix = "rd"
    else:
        suffix = "th"
    return f"{day}{suffix}"


def tokenize(pattern: str, *, strict: bool = True) -> list[Token]:
    """Split a pattern into field and literal tokens.

    Adjacent plain characters are merged into one literal token. The
    ``a`` marker is never merged into a run; each letter is one token.

    Args:
        pattern: The format pattern.
        strict: If True, an unterminated quoted literal raises
            ParseError. If False, the rest of the pattern is taken as
            literal text.

    Returns:
        The list of tokens, in pattern order.

    Raises:
        ParseError: If strict and a quoted literal is never closed.
    """
    tokens: list[Token] = []
    literal: list[str] = []
    n = len(pattern)
    i = 0

    def flush() -> None:
        if literal:
            tokens.append(Token("literal", "".join(literal)))
            literal.clear()

    while i < n:
        ch = pattern[i]

        if ch == QUOTE:
            if i + 1 < n and pattern[i + 1] == QUOTE:
                literal.append(QUOTE)
                i += 2
                continue
            j = i + 1
            while True:
                if j >= n:
                    if strict:
                        raise ParseError(
                            f"unterminated literal in format string {pattern!r} "
                            f"starting at position {i}"
                        )
                    break
                c = pattern[j]
                if c == QUOTE:
                    if j + 1 < n and pattern[j + 1] == QUOTE:
                        literal.append(QUOTE)
                        j += 2
                        continue
                    j += 1
                    break
                literal.append(c)
                j += 1
            i = j

        elif ch == "d" and pattern.startswith("do", i):
            flush()
            tokens.append(Token("field", "do"))
            i += 2

        elif ch == "a":
            flush()
            tokens.append(Token("field", "a"))
            i += 1

        elif ch in FIELD_LETTERS:
            flush()
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            tokens.append(Token("field", pattern[i:j]))
            i = j

        else:
            literal.append(ch)
            i += 1

    flush()
    return tokens


__all__ = [
    "FIELD_LETTERS",
    "MONTH_ABBREVIATIONS",
    "MONTH_NAMES",
    "Token",
    "WEEKDAY_ABBREVIATIONS",
    "WEEKDAY_NAMES",
    "ordinal",
    "tokenize",
]
