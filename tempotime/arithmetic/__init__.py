"""Calendar arithmetic.

This module provides the operations DateTime delegates to:
    - shift: Add a Duration (months clamped, small units exact)
    - start_of / end_of: Round to a calendar unit boundary
"""

from __future__ import annotations

from tempotime.arithmetic.shift import end_of, shift, start_of

__all__: list[str] = [
    "end_of",
    "shift",
    "start_of",
]
