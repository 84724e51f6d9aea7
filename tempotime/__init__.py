"""Tempotime: immutable instants, calendar durations and format tokens.

Tempotime stores instants as UTC milliseconds, applies calendar-aware
arithmetic (months and years clamp the day of month), and renders and
parses human-readable strings with a small token language.

Core Types:
    DateTime: Immutable instant with an optional display zone
    Duration: Symbolic bag of unit counts (years through milliseconds)
    Interval: Closed span [start, end] between two instants

Units:
    TimeUnit: The unit vocabulary (MILLISECOND through YEAR)
    Timezone: Fixed offsets, the static zone table, and IANA zones

Presets:
    DATE_SHORT, DATE_MED, DATE_FULL, TIME_SIMPLE, TIME_WITH_SECONDS,
    DATETIME_SHORT, DATETIME_MED, DATETIME_FULL

Exceptions:
    TempotimeError: Base exception
    ValidationError: Invalid input values
    ParseError: Failed to parse string
    TimezoneError: Invalid or unresolvable zone

Example:
    >>> from tempotime import DateTime, Duration
    >>> d = DateTime.from_iso("2025-01-31T09:00:00Z")
    >>> (d + Duration(months=1)).to_format("MMM do")
    'Feb 28th'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from tempotime.core.datetime import DateTime, dt
from tempotime.core.duration import Duration
from tempotime.core.interval import Interval

# Units
from tempotime.units.timeunit import TimeUnit
from tempotime.units.timezone import Timezone

# Exceptions
from tempotime.errors import (
    ParseError,
    TempotimeError,
    TimezoneError,
    ValidationError,
)

# Presets
from tempotime.format.presets import (
    DATE_FULL,
    DATE_MED,
    DATE_SHORT,
    DATETIME_FULL,
    DATETIME_MED,
    DATETIME_SHORT,
    TIME_SIMPLE,
    TIME_WITH_SECONDS,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "DateTime",
    "Duration",
    "Interval",
    "dt",
    # Units
    "TimeUnit",
    "Timezone",
    # Exceptions
    "TempotimeError",
    "ValidationError",
    "ParseError",
    "TimezoneError",
    # Presets
    "DATE_SHORT",
    "DATE_MED",
    "DATE_FULL",
    "TIME_SIMPLE",
    "TIME_WITH_SECONDS",
    "DATETIME_SHORT",
    "DATETIME_MED",
    "DATETIME_FULL",
]
