"""Locale preset patterns.

Named format patterns for common English date and time renderings. A
preset is an ordinary pattern string; resolve_preset() maps a preset
name to its pattern and passes any other string through unchanged.

Examples:
    >>> resolve_preset("DATE_SHORT")
    'M/d/yyyy'

    >>> resolve_preset("yyyy-MM-dd")
    'yyyy-MM-dd'
"""

from __future__ import annotations

DATE_SHORT = "M/d/yyyy"
DATE_MED = "MMM d, yyyy"
DATE_FULL = "MMMM d, yyyy"
TIME_SIMPLE = "h:mm a"
TIME_WITH_SECONDS = "h:mm:ss a"
DATETIME_SHORT = "M/d/yyyy, h:mm a"
DATETIME_MED = "MMM d, yyyy, h:mm a"
DATETIME_FULL = "MMMM d, yyyy, h:mm a"

PRESETS: dict[str, str] = {
    "DATE_SHORT": DATE_SHORT,
    "DATE_MED": DATE_MED,
    "DATE_FULL": DATE_FULL,
    "TIME_SIMPLE": TIME_SIMPLE,
    "TIME_WITH_SECONDS": TIME_WITH_SECONDS,
    "DATETIME_SHORT": DATETIME_SHORT,
    "DATETIME_MED": DATETIME_MED,
    "DATETIME_FULL": DATETIME_FULL,
}


def resolve_preset(preset: str) -> str:
    """Return the pattern for a preset name, or preset itself if unnamed."""
    return PRESETS.get(preset, preset)


__all__ = [
    "DATETIME_FULL",
    "DATETIME_MED",
    "DATETIME_SHORT",
    "DATE_FULL",
    "DATE_MED",
    "DATE_SHORT",
    "PRESETS",
    "TIME_SIMPLE",
    "TIME_WITH_SECONDS",
    "resolve_preset",
]
