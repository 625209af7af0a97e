"""Validation of UTC calendar fields.

Out-of-range fields are rejected with CarryError and never normalized:
minute 60 is not turned into the next hour, and second 60 is only legal
where the leap-second table says a second was inserted.

This module is not part of the public API.
"""

from __future__ import annotations

from utcscale._internal.calendar import days_in_month
from utcscale._internal.constants import DAYS_IN_MONTH, NANOS_PER_SECOND
from utcscale.errors import CarryError
from utcscale.leap_seconds import has_leap_second

_FIELDS = ("year", "month", "day", "hour", "minute", "second", "nanos")


def _check_range(name: str, value: int, low: int, high: int, context: str = "") -> None:
    if value < low or value > high:
        raise CarryError(f"{name} must be between {low} and {high}{context}, got {value}")


def max_second(year: int, month: int, day: int, hour: int, minute: int) -> int:
    """Return the largest second allowed in the given minute.

    This is 60 on the last minute of June 30 or December 31 when the
    leap-second table lists that month, and 59 everywhere else.

    Examples:
        >>> max_second(1971, 12, 31, 23, 59)
        60
        >>> max_second(1980, 12, 31, 23, 59)
        59
    """
    if (
        month in (6, 12)
        and day == DAYS_IN_MONTH[month]
        and hour == 23
        and minute == 59
        and has_leap_second(year, month)
    ):
        return 60
    return 59


def validate_utc_fields(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    nanos: int,
) -> None:
    """Validate a full set of UTC calendar fields.

    Raises:
        TypeError: If any field is not an integer.
        CarryError: If any field is outside its bounds.
    """
    values = (year, month, day, hour, minute, second, nanos)
    for name, value in zip(_FIELDS, values):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an integer, got {type(value).__name__}")

    _check_range("month", month, 1, 12)
    _check_range("day", day, 1, days_in_month(year, month), f" for {year:04d}-{month:02d}")
    _check_range("hour", hour, 0, 23)
    _check_range("minute", minute, 0, 59)
    _check_range(
        "second",
        second,
        0,
        max_second(year, month, day, hour, minute),
        f" at {year:04d}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}",
    )
    _check_range("nanos", nanos, 0, NANOS_PER_SECOND - 1)


__all__ = [
    "max_second",
    "validate_utc_fields",
]
