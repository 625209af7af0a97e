"""Modified Julian Day time system.

MJD counts days (with a fractional part) since 1858-11-17T00:00:00 on
the UTC calendar. Every MJD day is 86400 seconds long, so leap seconds
have no place in it: converting from an Instant removes the leap seconds
inserted before it, and a 23:59:60 is pinned to the midnight that ends
its day. Converting back adds them again.

Examples:
    >>> from utcscale import Utc
    >>> ModifiedJulian.from_instant(Utc(1900, 1, 1).as_instant()).days
    15020.0
    >>> ModifiedJulian(40587.0).as_instant() == Utc(1970, 1, 1).as_instant()
    True
    >>> mjd = ModifiedJulian.from_instant(Utc(2017, 12, 25, 1, 2, 14).as_instant())
    >>> round(mjd.days, 9)
    58112.043217593
"""

from __future__ import annotations

import logging

from utcscale._internal.constants import (
    MJD_EPOCH_1900,
    MJD_JD_OFFSET,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from utcscale.core.instant import Instant
from utcscale.leap_seconds import leap_seconds_before_nominal, locate_leap_seconds

logger = logging.getLogger(__name__)

_NANOS_PER_DAY = SECONDS_PER_DAY * NANOS_PER_SECOND


class ModifiedJulian:
    """A point in time as a Modified Julian Day number.

    Attributes:
        days: Days since 1858-11-17T00:00:00 UTC, with fraction.
    """

    __slots__ = ("_days",)

    def __init__(self, days: float) -> None:
        self._days = float(days)

    @classmethod
    def from_instant(cls, instant: Instant) -> ModifiedJulian:
        """Convert an Instant to a Modified Julian Day.

        A leap second maps to the end of its day, which is the same MJD
        as the following 00:00:00.
        """
        elapsed, nanos = divmod(instant.total_nanoseconds, NANOS_PER_SECOND)
        leaps_before, leap_date = locate_leap_seconds(elapsed)
        nominal = elapsed - leaps_before
        if leap_date is not None:
            logger.debug("leap second of %s clamped to the end of its day", leap_date)
            nanos = 0
        return cls(MJD_EPOCH_1900 + (nominal * NANOS_PER_SECOND + nanos) / _NANOS_PER_DAY)

    def as_instant(self) -> Instant:
        """Convert back to an Instant, rounded to the nearest nanosecond."""
        offset_nanos = round((self._days - MJD_EPOCH_1900) * _NANOS_PER_DAY)
        nominal, nanos = divmod(offset_nanos, NANOS_PER_SECOND)
        elapsed = nominal + leap_seconds_before_nominal(nominal)
        return Instant.from_nanoseconds(elapsed * NANOS_PER_SECOND + nanos)

    @property
    def days(self) -> float:
        return self._days

    def julian_days(self) -> float:
        """Return the (non-modified) Julian Day number."""
        return self._days + MJD_JD_OFFSET

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModifiedJulian):
            return NotImplemented
        return self._days == other._days

    def __hash__(self) -> int:
        return hash(("ModifiedJulian", self._days))

    def __repr__(self) -> str:
        return f"ModifiedJulian({self._days!r})"


__all__ = ["ModifiedJulian"]
