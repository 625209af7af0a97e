"""Utc class: a validated calendar value in Coordinated Universal Time.

Utc is the interface between the uniform timescale (Instant) and the
calendar. All time zones are defined with respect to UTC, and Utc knows
about every past leap second, as reported by the IETF and NIST at
https://www.ietf.org/timezones/data/leap-seconds.list .

NOTE: leap seconds cannot be predicted. The table in
utcscale.leap_seconds has to be updated whenever a new one is announced.
"""

from __future__ import annotations

import logging

from utcscale._internal.calendar import days_before_month, days_from_epoch, nominal_seconds
from utcscale._internal.constants import (
    AVERAGE_DAYS_PER_MONTH,
    EPOCH_YEAR,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    USUAL_DAYS_PER_YEAR,
)
from utcscale._internal.quorem import quorem
from utcscale._internal.validation import validate_utc_fields
from utcscale.core.instant import Instant
from utcscale.errors import CarryError, InvariantViolation
from utcscale.leap_seconds import leap_seconds_before, locate_leap_seconds
from utcscale.units.offset import Offset

logger = logging.getLogger(__name__)


def _year_start(year: int) -> int:
    return days_from_epoch(year) * SECONDS_PER_DAY


def _decompose(elapsed: int) -> tuple[int, int, int, int, int, int]:
    """Split leap-free elapsed seconds into calendar fields.

    Year and month are first estimated with 365-day years and
    30.4365-day months, then settled against the exact year and month
    starts. The result is not validated here.
    """
    year_offset, _ = quorem(abs(elapsed), USUAL_DAYS_PER_YEAR * SECONDS_PER_DAY)
    year = EPOCH_YEAR + year_offset if elapsed >= 0 else EPOCH_YEAR - year_offset
    while _year_start(year) > elapsed:
        year -= 1
    while _year_start(year + 1) <= elapsed:
        year += 1
    year_remainder = elapsed - _year_start(year)

    month_index, _ = quorem(year_remainder, AVERAGE_DAYS_PER_MONTH * SECONDS_PER_DAY)
    month = min(month_index + 1, 12)
    while month > 1 and days_before_month(year, month) * SECONDS_PER_DAY > year_remainder:
        month -= 1
    while month < 12 and days_before_month(year, month + 1) * SECONDS_PER_DAY <= year_remainder:
        month += 1
    month_remainder = year_remainder - days_before_month(year, month) * SECONDS_PER_DAY

    day_index, day_remainder = quorem(month_remainder, SECONDS_PER_DAY)
    hours, hour_remainder = quorem(day_remainder, SECONDS_PER_HOUR)
    minutes, seconds = quorem(hour_remainder, SECONDS_PER_MINUTE)
    return year, month, day_index + 1, hours, minutes, int(seconds)


class Utc:
    """A calendar date and time in UTC, with leap-second support.

    Utc values are always validated on construction and are never
    normalized: minute 60 is an error, not the next hour. Second 60 is
    accepted only on the last minute of a June or December that the
    leap-second table lists.

    Two orderings exist and they answer different questions:
        - Utc values compare field by field (calendar order).
        - Instants compare by elapsed time.
    The leap second is extra elapsed time, so 23:59:59, 23:59:60 and the
    next 00:00:00 are one second apart on both scales. Comparing a
    calendar difference with an elapsed difference across a leap second
    still disagrees by that second.

    Attributes:
        year: The year (proleptic Gregorian, pre-1582 rules are not modeled).
        month: The month (1-12).
        day: The day of the month.
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59, or 60 on a leap second).
        nanos: Nanoseconds within the second.

    Examples:
        >>> epoch = Utc(1900, 1, 1)
        >>> epoch.as_instant()
        Instant(seconds=0, nanos=0, era=Era.PRESENT)

        >>> Utc(1971, 12, 31, 23, 59, 59).as_instant().seconds
        2272060799
        >>> Utc(1971, 12, 31, 23, 59, 60).as_instant().seconds
        2272060800

        >>> str(Utc(2017, 12, 25, 1, 2, 14))
        '2017-12-25T01:02:14+00:00'
    """

    __slots__ = ("_year", "_month", "_day", "_hour", "_minute", "_second", "_nanos")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanos: int = 0,
    ) -> None:
        """Create a validated Utc.

        Raises:
            CarryError: If any field is out of bounds, including a second
                60 where no leap second was inserted.
            TypeError: If any field is not an integer.

        Examples:
            >>> Utc(2020, 2, 29)
            Utc(2020, 2, 29, 0, 0, 0, nanos=0)

            >>> Utc(2021, 2, 29)
            Traceback (most recent call last):
            ...
            utcscale.errors.CarryError: day must be between 1 and 28 for 2021-02, got 29
        """
        validate_utc_fields(year, month, day, hour, minute, second, nanos)
        self._year = year
        self._month = month
        self._day = day
        self._hour = hour
        self._minute = minute
        self._second = second
        self._nanos = nanos

    @classmethod
    def utc_offset(cls) -> Offset:
        """Return the offset between UTC and UTC, which is always zero."""
        return Offset.zero()

    @classmethod
    def from_instant(cls, instant: Instant) -> Utc:
        """Convert an Instant to a Utc.

        The instant is first checked against the leap-second table. If it
        falls on an inserted second the result is that day's 23:59:60;
        otherwise the leap seconds inserted before it are removed and the
        remaining elapsed time is decomposed into calendar fields.

        Raises:
            InvariantViolation: If the decomposed fields do not validate.
                This means the decomposition or the table is wrong, not
                that the instant is.

        Examples:
            >>> Utc.from_instant(Instant.from_nanoseconds(2272060800 * 10**9))
            Utc(1971, 12, 31, 23, 59, 60, nanos=0)
            >>> Utc.from_instant(Instant.from_nanoseconds(-(10**9)))
            Utc(1899, 12, 31, 23, 59, 59, nanos=0)
        """
        elapsed, nanos = divmod(instant.total_nanoseconds, NANOS_PER_SECOND)
        leaps_before, leap_date = locate_leap_seconds(elapsed)
        if leap_date is not None:
            logger.debug("instant %r is the leap second of %s", instant, leap_date)
            fields = (*leap_date, 23, 59, 60)
        else:
            fields = _decompose(elapsed - leaps_before)

        try:
            return cls(*fields, nanos)
        except CarryError as exc:
            logger.critical(
                "instant %r decomposed into invalid fields %r", instant, fields
            )
            raise InvariantViolation(
                f"date computed from {instant!r} is invalid: {exc}"
            ) from exc

    @classmethod
    def from_iso_format(cls, s: str) -> Utc:
        """Parse a string like 2016-12-31T23:59:60+00:00.

        Raises:
            ParseError: If the string is malformed or has a non-zero offset.
            CarryError: If the fields are out of bounds.
        """
        from utcscale.format.iso8601 import parse_utc

        return parse_utc(s)

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def nanos(self) -> int:
        return self._nanos

    @property
    def is_leap_second(self) -> bool:
        """Return True if this is an inserted 60th second."""
        return self._second == 60

    def as_instant(self) -> Instant:
        """Convert this Utc to an Instant.

        The elapsed time is the whole days from the epoch to this date,
        plus the time of day, plus one second for every leap second
        inserted on an earlier day. 23:59:60 is therefore one second
        after 23:59:59 and one second before the following 00:00:00.
        """
        elapsed = self.nominal_seconds() + leap_seconds_before(
            self._year, self._month, self._day
        )
        return Instant.from_nanoseconds(elapsed * NANOS_PER_SECOND + self._nanos)

    def nominal_seconds(self) -> int:
        """Return signed seconds since the epoch counting 86400-second days.

        This is the calendar label read as a number. It ignores every leap
        second, so 23:59:60 and the following 00:00:00 share a value.
        """
        return nominal_seconds(
            self._year, self._month, self._day, self._hour, self._minute, self._second
        )

    def _fields(self) -> tuple[int, int, int, int, int, int, int]:
        return (
            self._year,
            self._month,
            self._day,
            self._hour,
            self._minute,
            self._second,
            self._nanos,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Utc):
            return NotImplemented
        return self._fields() == other._fields()

    def __lt__(self, other: object) -> bool:
        """Compare in calendar order, field by field."""
        if not isinstance(other, Utc):
            return NotImplemented
        return self._fields() < other._fields()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Utc):
            return NotImplemented
        return self._fields() <= other._fields()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Utc):
            return NotImplemented
        return self._fields() > other._fields()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Utc):
            return NotImplemented
        return self._fields() >= other._fields()

    def __hash__(self) -> int:
        return hash(("Utc",) + self._fields())

    def __repr__(self) -> str:
        return (
            f"Utc({self._year}, {self._month}, {self._day}, "
            f"{self._hour}, {self._minute}, {self._second}, nanos={self._nanos})"
        )

    def __str__(self) -> str:
        from utcscale.format.iso8601 import format_utc

        return format_utc(self)


__all__ = ["Utc"]
