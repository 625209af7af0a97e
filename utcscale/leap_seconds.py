"""Historical leap-second table.

Leap seconds cannot be predicted: the IERS announces them about six
months ahead. An updated list can be found at
https://www.ietf.org/timezones/data/leap-seconds.list and every new
entry is a single append to one of the two tuples below, plus a bump of
LEAP_SECOND_TABLE_VERSION.

Years are listed the way the source data lists them: the year in which
the first day *after* the inserted second falls. JULY_YEARS therefore
means "23:59:60 on June 30 of that year", and JANUARY_YEARS means
"23:59:60 on December 31 of the year before".
"""

from __future__ import annotations

import bisect
import logging

from utcscale._internal.calendar import days_from_epoch_to_date
from utcscale._internal.constants import SECONDS_PER_DAY

logger = logging.getLogger(__name__)

LEAP_SECOND_TABLE_VERSION: str = "2017-01-01"

JANUARY_YEARS: tuple[int, ...] = (
    1972,
    1973,
    1974,
    1975,
    1976,
    1977,
    1978,
    1979,
    1980,
    1988,
    1990,
    1991,
    1996,
    1999,
    2006,
    2009,
    2017,
)

JULY_YEARS: tuple[int, ...] = (
    1972,
    1981,
    1982,
    1983,
    1985,
    1992,
    1993,
    1994,
    1997,
    2012,
    2015,
)

_JANUARY_SET = frozenset(JANUARY_YEARS)
_JULY_SET = frozenset(JULY_YEARS)


def has_leap_second(year: int, month: int) -> bool:
    """Return True if a second was inserted at the end of this month.

    Only June and December can carry a leap second.

    Examples:
        >>> has_leap_second(1971, 12)
        True
        >>> has_leap_second(1972, 6)
        True
        >>> has_leap_second(1980, 12)
        False
    """
    if month == 6:
        return year in _JULY_SET
    if month == 12:
        return (year + 1) in _JANUARY_SET
    return False


def _build_dates() -> tuple[tuple[int, int, int], ...]:
    dates = [(year, 6, 30) for year in JULY_YEARS]
    dates.extend((year - 1, 12, 31) for year in JANUARY_YEARS)
    return tuple(sorted(dates))


_DATES = _build_dates()

# Elapsed seconds from the epoch to each 23:59:60, counting the leap
# seconds inserted before it.
_INSTANTS = tuple(
    (days_from_epoch_to_date(*date) + 1) * SECONDS_PER_DAY + index
    for index, date in enumerate(_DATES)
)

# Nominal seconds (86400-second days) of the midnight that ends each leap
# second day.
_BOUNDARIES = tuple(
    (days_from_epoch_to_date(*date) + 1) * SECONDS_PER_DAY for date in _DATES
)

logger.debug(
    "loaded %d leap seconds (table version %s)", len(_DATES), LEAP_SECOND_TABLE_VERSION
)


def leap_second_dates() -> tuple[tuple[int, int, int], ...]:
    """Return the (year, month, day) of every leap second, oldest first."""
    return _DATES


def leap_second_instants() -> tuple[int, ...]:
    """Return the elapsed seconds since 1900 of every 23:59:60, oldest first."""
    return _INSTANTS


def leap_seconds_before(year: int, month: int, day: int) -> int:
    """Count the leap seconds inserted on days strictly before the given date.

    A leap second belongs to the day it is inserted on, so
    ``leap_seconds_before(1971, 12, 31)`` is 0 and
    ``leap_seconds_before(1972, 1, 1)`` is 1.
    """
    return bisect.bisect_left(_DATES, (year, month, day))


def leap_seconds_before_nominal(nominal_seconds: int) -> int:
    """Count the leap seconds inserted before a calendar label.

    The label is given as nominal seconds since the epoch, every day
    86400 seconds long. A leap second counts once its day has ended, so
    the midnight that follows 1971-12-31T23:59:60 already sees it.
    """
    return bisect.bisect_right(_BOUNDARIES, nominal_seconds)


def locate_leap_seconds(elapsed_seconds: int) -> tuple[int, tuple[int, int, int] | None]:
    """Find where an elapsed second count sits relative to the leap seconds.

    Args:
        elapsed_seconds: Signed whole seconds since the epoch, leap
            seconds included.

    Returns:
        Tuple of (number of leap seconds strictly before this second,
        date of the leap second if this second *is* one, else None).
    """
    index = bisect.bisect_left(_INSTANTS, elapsed_seconds)
    if index < len(_INSTANTS) and _INSTANTS[index] == elapsed_seconds:
        return index, _DATES[index]
    return index, None


__all__ = [
    "LEAP_SECOND_TABLE_VERSION",
    "JANUARY_YEARS",
    "JULY_YEARS",
    "has_leap_second",
    "leap_second_dates",
    "leap_second_instants",
    "leap_seconds_before",
    "leap_seconds_before_nominal",
    "locate_leap_seconds",
]
