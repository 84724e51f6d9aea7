"""Internal utilities for Tempotime.

This module contains private implementation details:
    - Civil calendar conversions
    - Civil field validation
    - Constants and unit ratios

Note: This module is not part of the public API.
"""

from __future__ import annotations

from tempotime._internal.calendar import CivilFields, compose, decompose
from tempotime._internal.validation import (
    validate_day,
    validate_fields,
    validate_month,
)

__all__: list[str] = [
    "CivilFields",
    "compose",
    "decompose",
    "validate_day",
    "validate_fields",
    "validate_month",
]
