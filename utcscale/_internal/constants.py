"""Internal constants for utcscale.

These constants define the epoch, unit sizes and calendar tables used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_SECOND: int = 1_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Reference epoch: 1900-01-01T00:00:00 UTC
EPOCH_YEAR: int = 1900

# Unit sizes used to estimate calendar fields from elapsed seconds
USUAL_DAYS_PER_YEAR: int = 365
AVERAGE_DAYS_PER_MONTH: float = 30.4365

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

# MJD (Modified Julian Day) reference points
# MJD 0 = 1858-11-17 00:00 UTC
MJD_EPOCH_1900: int = 15020  # 1900-01-01 00:00 UTC
MJD_JD_OFFSET: float = 2400000.5


__all__ = [
    "NANOS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "EPOCH_YEAR",
    "USUAL_DAYS_PER_YEAR",
    "AVERAGE_DAYS_PER_MONTH",
    "DAYS_IN_MONTH",
    "MJD_EPOCH_1900",
    "MJD_JD_OFFSET",
]
