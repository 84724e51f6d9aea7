"""Internal constants for Tempotime.

These constants define the unit ratios and calendar tables used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Exact time unit conversions
MS_PER_SECOND: int = 1_000
MS_PER_MINUTE: int = 60 * MS_PER_SECOND
MS_PER_HOUR: int = 60 * MS_PER_MINUTE
MS_PER_DAY: int = 24 * MS_PER_HOUR  # 86_400_000
MS_PER_WEEK: int = 7 * MS_PER_DAY

# Fixed approximations for calendar units (scalar conversion only)
MS_PER_MONTH_APPROX: int = 30 * MS_PER_DAY
MS_PER_YEAR_APPROX: int = 365 * MS_PER_DAY

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE

# Days between 0000-03-01 and 1970-01-01 in the proleptic Gregorian calendar
DAYS_0000_03_01_TO_EPOCH: int = 719_468

# Days in one 400-year Gregorian cycle
DAYS_PER_ERA: int = 146_097

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Epoch defaults for fields a pattern does not capture
EPOCH_YEAR: int = 1970

# Timezone offset limits (in seconds)
MAX_UTC_OFFSET_SECONDS: int = 14 * SECONDS_PER_HOUR


__all__ = [
    "MS_PER_SECOND",
    "MS_PER_MINUTE",
    "MS_PER_HOUR",
    "MS_PER_DAY",
    "MS_PER_WEEK",
    "MS_PER_MONTH_APPROX",
    "MS_PER_YEAR_APPROX",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "DAYS_0000_03_01_TO_EPOCH",
    "DAYS_PER_ERA",
    "DAYS_IN_MONTH",
    "EPOCH_YEAR",
    "MAX_UTC_OFFSET_SECONDS",
]
