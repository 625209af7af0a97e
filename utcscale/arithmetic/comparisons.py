"""The two orderings of UTC values.

A Utc can be ordered by its calendar fields or by the elapsed time of
its Instant. Both are total orders, and they are kept apart on purpose:
around a leap second the *labels* and the *elapsed time* tell different
stories.

    >>> from utcscale import Utc
    >>> before = Utc(1971, 12, 31, 23, 59, 59)
    >>> leap = Utc(1971, 12, 31, 23, 59, 60)
    >>> after = Utc(1972, 1, 1)
    >>> nominal_difference(leap, after)
    0
    >>> elapsed_difference(leap, after).seconds
    1

Comparison Rules:
    - compare_calendar: field by field (year, month, ..., nanos)
    - compare_elapsed: by Instant, i.e. by elapsed time since 1900
    - nominal_difference: label arithmetic with 86400-second days
    - elapsed_difference: real elapsed time, leap seconds included
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from utcscale.core.duration import Duration
    from utcscale.core.instant import Instant
    from utcscale.core.utc import Utc

TimePoint = Union["Utc", "Instant"]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def calendar_key(value: Utc) -> tuple[int, int, int, int, int, int, int]:
    """Return a sort key that orders Utc values by their calendar fields."""
    return (
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.nanos,
    )


def elapsed_key(value: TimePoint) -> Instant:
    """Return a sort key that orders values by elapsed time."""
    from utcscale.core.utc import Utc

    if isinstance(value, Utc):
        return value.as_instant()
    return value


def compare_calendar(left: Utc, right: Utc) -> int:
    """Compare two Utc values field by field.

    Returns:
        -1, 0 or 1 as left sorts before, with, or after right.
    """
    left_key = calendar_key(left)
    right_key = calendar_key(right)
    return (left_key > right_key) - (left_key < right_key)


def compare_elapsed(left: TimePoint, right: TimePoint) -> int:
    """Compare two Utc or Instant values by elapsed time.

    Returns:
        -1, 0 or 1 as left happens before, with, or after right.
    """
    return _sign(elapsed_key(left).total_nanoseconds - elapsed_key(right).total_nanoseconds)


def orderings_agree(left: Utc, right: Utc) -> bool:
    """Return True if calendar and elapsed order rank the pair the same way."""
    return compare_calendar(left, right) == compare_elapsed(left, right)


def nominal_difference(left: Utc, right: Utc) -> int:
    """Return right minus left in label seconds, ignoring leap seconds.

    A leap second and the following 00:00:00 are 0 label seconds apart.
    """
    return right.nominal_seconds() - left.nominal_seconds()


def elapsed_difference(left: TimePoint, right: TimePoint) -> Duration:
    """Return the elapsed time from left to right."""
    return elapsed_key(right) - elapsed_key(left)


__all__ = [
    "calendar_key",
    "elapsed_key",
    "compare_calendar",
    "compare_elapsed",
    "orderings_agree",
    "nominal_difference",
    "elapsed_difference",
]
