"""Calendar utilities for utcscale.

This module provides the proleptic Gregorian rules used by the validator
and both converters: leap years, month lengths and the number of days
elapsed between the 1900 epoch and the start of a year.

This module is not part of the public API.
"""

from __future__ import annotations

from utcscale._internal.constants import (
    DAYS_IN_MONTH,
    EPOCH_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    USUAL_DAYS_PER_YEAR,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2020)
        True
        >>> is_leap_year(2021)
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month.

    The leap day only counts once February is over.
    """
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def _leap_years_before(year: int) -> int:
    # Leap years in [1, year); floor division keeps this right for year <= 0
    y = year - 1
    return y // 4 - y // 100 + y // 400


def leap_days_between(start_year: int, end_year: int) -> int:
    """Count leap years in the half-open range [start_year, end_year)."""
    return _leap_years_before(end_year) - _leap_years_before(start_year)


def days_from_epoch(year: int) -> int:
    """Return the signed number of days from 1900-01-01 to January 1 of year.

    The count is the plain 365-day years between the two plus one day
    for each leap year crossed. Years before the epoch give a negative
    count.

    Examples:
        >>> days_from_epoch(1900)
        0
        >>> days_from_epoch(1972)
        26297
        >>> days_from_epoch(1899)
        -365
    """
    if year >= EPOCH_YEAR:
        return (year - EPOCH_YEAR) * USUAL_DAYS_PER_YEAR + leap_days_between(EPOCH_YEAR, year)
    return -(
        (EPOCH_YEAR - year) * USUAL_DAYS_PER_YEAR + leap_days_between(year, EPOCH_YEAR)
    )


def days_from_epoch_to_date(year: int, month: int, day: int) -> int:
    """Return the signed number of days from 1900-01-01 to the given date."""
    return days_from_epoch(year) + days_before_month(year, month) + day - 1


def nominal_seconds(
    year: int, month: int, day: int, hour: int, minute: int, second: int
) -> int:
    """Return signed seconds from the epoch as if no leap second existed.

    Every day is 86400 seconds long here, so 23:59:60 lands on the same
    value as the following 00:00:00.
    """
    return (
        days_from_epoch_to_date(year, month, day) * SECONDS_PER_DAY
        + hour * SECONDS_PER_HOUR
        + minute * SECONDS_PER_MINUTE
        + second
    )


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "leap_days_between",
    "days_from_epoch",
    "days_from_epoch_to_date",
    "nominal_seconds",
]
