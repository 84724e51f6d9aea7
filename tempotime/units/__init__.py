"""Temporal units and display zones.

This module provides:
    - TimeUnit: The calendar unit vocabulary (MILLISECOND through YEAR)
    - Timezone: Display zones (fixed offsets, static table, IANA rules)
"""

from __future__ import annotations

from tempotime.units.timeunit import TimeUnit, lookup_unit
from tempotime.units.timezone import STATIC_ZONES, Timezone, format_offset

__all__: list[str] = [
    "STATIC_ZONES",
    "TimeUnit",
    "Timezone",
    "format_offset",
    "lookup_unit",
]
