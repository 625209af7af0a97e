"""Instant class: elapsed time since the 1900 epoch.

An Instant is a uniform-timescale value. It counts every elapsed
second, inserted leap seconds included, and carries no calendar
information of its own. It is the interchange value between time
systems: Utc, ModifiedJulian and anything else implementing the
TimeSystem protocol convert to and from Instants.

Instants before the epoch are stored as a positive magnitude tagged
with Era.PAST rather than as a negative number.
"""

from __future__ import annotations

from typing import overload

from utcscale._internal.constants import NANOS_PER_SECOND
from utcscale.core.duration import Duration
from utcscale.errors import ValidationError
from utcscale.units.era import Era


class Instant:
    """A point on the uniform timescale, relative to 1900-01-01T00:00:00.

    Attributes:
        seconds: Whole seconds of the magnitude (>= 0).
        nanos: Nanoseconds of the magnitude, in [0, 1e9).
        era: Whether the magnitude runs forward or backward from the epoch.

    Ordering is by elapsed time. Near a leap second this ordering is not
    the same thing as the calendar ordering of the matching Utc values,
    see utcscale.arithmetic.comparisons.

    Examples:
        >>> Instant(0, 0, Era.PRESENT)
        Instant(seconds=0, nanos=0, era=Era.PRESENT)
        >>> Instant(60, 0, Era.PRESENT) + Duration(3600, 0)
        Instant(seconds=3660, nanos=0, era=Era.PRESENT)
        >>> Instant(1, 0, Era.PAST) < Instant(0, 0, Era.PRESENT)
        True
    """

    __slots__ = ("_seconds", "_nanos", "_era")

    def __init__(self, seconds: int, nanos: int, era: Era) -> None:
        """Create an Instant from a magnitude and an era.

        A zero magnitude is always stored as Era.PRESENT.

        Raises:
            ValidationError: If seconds is negative or nanos is out of range.
        """
        if any(isinstance(v, bool) or not isinstance(v, int) for v in (seconds, nanos)):
            raise TypeError("Instant components must be integers")
        if not isinstance(era, Era):
            raise TypeError(f"era must be an Era, got {type(era).__name__}")
        if seconds < 0:
            raise ValidationError(f"seconds must be non-negative, got {seconds}")
        if nanos < 0 or nanos >= NANOS_PER_SECOND:
            raise ValidationError(
                f"nanos must be between 0 and {NANOS_PER_SECOND - 1}, got {nanos}"
            )
        if seconds == 0 and nanos == 0:
            era = Era.PRESENT
        self._seconds = seconds
        self._nanos = nanos
        self._era = era

    @classmethod
    def epoch(cls) -> Instant:
        """Return the Instant of 1900-01-01T00:00:00."""
        return cls(0, 0, Era.PRESENT)

    @classmethod
    def from_nanoseconds(cls, total_nanoseconds: int) -> Instant:
        """Create an Instant from signed nanoseconds since the epoch.

        Examples:
            >>> Instant.from_nanoseconds(-500_000_000)
            Instant(seconds=0, nanos=500000000, era=Era.PAST)
        """
        era = Era.for_signed(total_nanoseconds)
        seconds, nanos = divmod(abs(total_nanoseconds), NANOS_PER_SECOND)
        return cls(seconds, nanos, era)

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def nanos(self) -> int:
        return self._nanos

    @property
    def era(self) -> Era:
        return self._era

    @property
    def total_nanoseconds(self) -> int:
        """Return the signed elapsed nanoseconds since the epoch."""
        return self._era.sign * (self._seconds * NANOS_PER_SECOND + self._nanos)

    def __add__(self, other: object) -> Instant:
        if not isinstance(other, Duration):
            return NotImplemented
        return Instant.from_nanoseconds(self.total_nanoseconds + other.total_nanoseconds)

    def __radd__(self, other: object) -> Instant:
        return self.__add__(other)

    @overload
    def __sub__(self, other: Duration) -> Instant: ...

    @overload
    def __sub__(self, other: Instant) -> Duration: ...

    def __sub__(self, other: object) -> Instant | Duration:
        """Subtract a Duration (giving an Instant) or an Instant (giving a Duration)."""
        if isinstance(other, Duration):
            return Instant.from_nanoseconds(self.total_nanoseconds - other.total_nanoseconds)
        if isinstance(other, Instant):
            return Duration(0, self.total_nanoseconds - other.total_nanoseconds)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.total_nanoseconds == other.total_nanoseconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.total_nanoseconds < other.total_nanoseconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.total_nanoseconds <= other.total_nanoseconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.total_nanoseconds > other.total_nanoseconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.total_nanoseconds >= other.total_nanoseconds

    def __hash__(self) -> int:
        return hash(("Instant", self.total_nanoseconds))

    def __repr__(self) -> str:
        return f"Instant(seconds={self._seconds}, nanos={self._nanos}, era={self._era})"


__all__ = ["Instant"]
