"""Formatting and parsing.

This module provides functions for converting instants to and from
string representations:
    - Token patterns ("MMMM do, yyyy") for rendering and parsing
    - ISO 8601 formatting and parsing
    - Locale preset patterns

Functions:
    format_fields: Render civil fields with a token pattern.
    iter_format: Render civil fields as a stream of chunks.
    parse_fields: Parse a string with a token pattern.
    parse_iso8601: Parse an ISO 8601 string.
    format_iso8601: Format an instant as an ISO 8601 string.
    resolve_preset: Map a preset name to its pattern.

Examples:
    >>> from tempotime._internal.calendar import CivilFields
    >>> format_fields(CivilFields(2025, 10, 29), DATE_MED)
    'Oct 29, 2025'
"""

from __future__ import annotations

from tempotime.format.iso8601 import format_iso8601, parse_iso8601
from tempotime.format.pattern import format_fields, iter_format, parse_fields
from tempotime.format.presets import (
    DATE_FULL,
    DATE_MED,
    DATE_SHORT,
    DATETIME_FULL,
    DATETIME_MED,
    DATETIME_SHORT,
    PRESETS,
    TIME_SIMPLE,
    TIME_WITH_SECONDS,
    resolve_preset,
)
from tempotime.format.tokens import Token, ordinal, tokenize

__all__: list[str] = [
    # Token patterns
    "Token",
    "tokenize",
    "ordinal",
    "format_fields",
    "iter_format",
    "parse_fields",
    # ISO 8601
    "parse_iso8601",
    "format_iso8601",
    # Presets
    "PRESETS",
    "resolve_preset",
    "DATE_SHORT",
    "DATE_MED",
    "DATE_FULL",
    "TIME_SIMPLE",
    "TIME_WITH_SECONDS",
    "DATETIME_SHORT",
    "DATETIME_MED",
    "DATETIME_FULL",
]
