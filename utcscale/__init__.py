"""utcscale: UTC calendar values and a leap-second-aware epoch timescale.

utcscale converts between UTC calendar fields and Instants, a count of
elapsed seconds and nanoseconds since 1900-01-01T00:00:00, taking every
historical leap second into account.

Core Types:
    Utc: Validated calendar value (year .. nanos), second 60 allowed on leap seconds
    Instant: Elapsed time since the epoch, as a magnitude plus an Era
    Duration: Span of elapsed time

Units:
    Era: PAST/PRESENT direction of an Instant
    Offset: Offset of a time zone from UTC

Exceptions:
    UtcscaleError: Base exception
    CarryError: Out-of-bounds calendar fields
    ValidationError: Invalid Instant, Duration or Offset components
    ParseError: Failed to parse a timestamp
    InvariantViolation: Internal consistency failure

Example:
    >>> from utcscale import Duration, Utc
    >>> xmas = Utc(2017, 12, 25, 1, 2, 14)
    >>> later = Utc.from_instant(xmas.as_instant() + Duration.from_hours(1))
    >>> str(later)
    '2017-12-25T02:02:14+00:00'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from utcscale.core.duration import Duration
from utcscale.core.instant import Instant
from utcscale.core.utc import Utc

# Units
from utcscale.units.era import Era
from utcscale.units.offset import Offset

# Exceptions
from utcscale.errors import (
    CarryError,
    InvariantViolation,
    ParseError,
    UtcscaleError,
    ValidationError,
)

# Format functions
from utcscale.format import format_utc, parse_utc

# Other time systems
from utcscale.convert import ModifiedJulian

__all__: list[str] = [
    "__version__",
    # Core types
    "Duration",
    "Instant",
    "Utc",
    # Units
    "Era",
    "Offset",
    # Exceptions
    "UtcscaleError",
    "CarryError",
    "ValidationError",
    "ParseError",
    "InvariantViolation",
    # Format functions
    "format_utc",
    "parse_utc",
    # Other time systems
    "ModifiedJulian",
]
