"""Core temporal types.

This module provides the value types:
    - Duration: Symbolic bag of calendar-unit counts
    - DateTime: Immutable instant with an optional display zone
    - Interval: Closed span [start, end] between two instants
"""

from __future__ import annotations

from tempotime.core.datetime import DateTime, dt
from tempotime.core.duration import Duration
from tempotime.core.interval import Interval

__all__: list[str] = [
    "DateTime",
    "Duration",
    "Interval",
    "dt",
]
