"""Tempotime exception hierarchy.

All Tempotime-specific exceptions inherit from TempotimeError.
"""

from __future__ import annotations


class TempotimeError(Exception):
    """Base exception for all Tempotime errors."""

    pass


class ValidationError(TempotimeError):
    """Invalid input values.

    Raised when a civil field is out of range, or when strict mode is
    enabled and a unit name is not recognized.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Unit name "fortnights" with strict mode on
    """

    pass


class ParseError(TempotimeError):
    """Failed to parse string representation.

    Raised when an ISO 8601 string or a token pattern input cannot be
    turned into an instant. The message names the offending component
    or token.

    Examples:
        - Invalid ISO 8601 format
        - Literal text in a pattern not found in the input
        - Unterminated quoted literal in a pattern
        - Too few digits for a numeric token
    """

    pass


class TimezoneError(TempotimeError):
    """Invalid or unknown timezone.

    Raised when an offset string is malformed, an offset is out of range,
    or (in strict mode) a zone name cannot be resolved.

    Examples:
        - Invalid UTC offset format
        - Offset outside valid range (-14h to +14h)
    """

    pass


__all__ = [
    "TempotimeError",
    "ValidationError",
    "ParseError",
    "TimezoneError",
]
