"""utcscale exception hierarchy.

All utcscale-specific exceptions inherit from UtcscaleError.
"""

from __future__ import annotations


class UtcscaleError(Exception):
    """Base exception for all utcscale errors."""

    pass


class CarryError(UtcscaleError):
    """Calendar fields that would need carrying into the next unit.

    Raised when a Utc is built from fields that are out of bounds.
    Values are never normalized, so these are rejected outright.

    Examples:
        - Month value outside 1-12
        - February 29 in a common year
        - Minute 60 instead of the next hour
        - Second 60 on a day without a leap second
    """

    pass


class ValidationError(UtcscaleError):
    """Invalid components for an Instant, Duration or Offset.

    Examples:
        - Negative second count on an Instant
        - Nanoseconds outside 0-999_999_999
    """

    pass


class ParseError(UtcscaleError):
    """Failed to parse a UTC timestamp string."""

    pass


class InvariantViolation(UtcscaleError):
    """Internal consistency failure.

    Raised when an Instant decomposes into calendar fields that the
    validator rejects. This never happens for user input and signals a
    bug in the decomposition or the leap-second table, so callers should
    not catch it alongside CarryError.
    """

    pass


__all__ = [
    "UtcscaleError",
    "CarryError",
    "ValidationError",
    "ParseError",
    "InvariantViolation",
]
