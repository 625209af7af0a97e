"""Duration class representing a span of elapsed time.

Durations are what Instants are shifted by. They count uniform seconds,
so a leap second is just one more second of duration.
"""

from __future__ import annotations

from utcscale._internal.constants import (
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)


class Duration:
    """A signed span of time with nanosecond precision.

    The value is normalized so that `nanoseconds` is always in
    [0, 1_000_000_000) and `seconds` carries the sign.

    Examples:
        >>> Duration(3600, 0).seconds
        3600
        >>> Duration(nanoseconds=1_500_000_000)
        Duration(seconds=1, nanoseconds=500000000)
        >>> -Duration(0, 1)
        Duration(seconds=-1, nanoseconds=999999999)
    """

    __slots__ = ("_seconds", "_nanos")

    def __init__(self, seconds: int = 0, nanoseconds: int = 0) -> None:
        if any(isinstance(v, bool) or not isinstance(v, int) for v in (seconds, nanoseconds)):
            raise TypeError("Duration components must be integers")
        self._seconds, self._nanos = divmod(
            seconds * NANOS_PER_SECOND + nanoseconds, NANOS_PER_SECOND
        )

    @classmethod
    def zero(cls) -> Duration:
        return cls()

    @classmethod
    def from_days(cls, days: int) -> Duration:
        """Create a Duration of whole 86400-second days."""
        return cls(days * SECONDS_PER_DAY)

    @classmethod
    def from_hours(cls, hours: int) -> Duration:
        return cls(hours * SECONDS_PER_HOUR)

    @classmethod
    def from_minutes(cls, minutes: int) -> Duration:
        return cls(minutes * SECONDS_PER_MINUTE)

    @classmethod
    def from_seconds(cls, seconds: int) -> Duration:
        return cls(seconds)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Duration:
        return cls(0, nanoseconds)

    @property
    def seconds(self) -> int:
        """Return the whole seconds, floored (negative for negative spans)."""
        return self._seconds

    @property
    def nanoseconds(self) -> int:
        """Return the nanoseconds within the second, always in [0, 1e9)."""
        return self._nanos

    @property
    def total_nanoseconds(self) -> int:
        """Return the total duration in nanoseconds (exact)."""
        return self._seconds * NANOS_PER_SECOND + self._nanos

    @property
    def total_seconds(self) -> float:
        """Return the total duration as seconds (approximate)."""
        return self._seconds + self._nanos / NANOS_PER_SECOND

    @property
    def is_negative(self) -> bool:
        return self._seconds < 0

    @property
    def is_zero(self) -> bool:
        return self._seconds == 0 and self._nanos == 0

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(0, self.total_nanoseconds + other.total_nanoseconds)

    def __radd__(self, other: object) -> Duration:
        """Support sum() by handling 0 + Duration."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(0, self.total_nanoseconds - other.total_nanoseconds)

    def __mul__(self, other: object) -> Duration:
        if not isinstance(other, int):
            return NotImplemented
        return Duration(0, self.total_nanoseconds * other)

    def __rmul__(self, other: object) -> Duration:
        return self.__mul__(other)

    def __neg__(self) -> Duration:
        return Duration(0, -self.total_nanoseconds)

    def __abs__(self) -> Duration:
        if self.is_negative:
            return -self
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanoseconds == other.total_nanoseconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanoseconds < other.total_nanoseconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanoseconds <= other.total_nanoseconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanoseconds > other.total_nanoseconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.total_nanoseconds >= other.total_nanoseconds

    def __hash__(self) -> int:
        return hash(self.total_nanoseconds)

    def __bool__(self) -> bool:
        return not self.is_zero

    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds}, nanoseconds={self._nanos})"

    def __str__(self) -> str:
        """Return a string like "3600s" or "-0.5s"."""
        total = self.total_nanoseconds
        sign = "-" if total < 0 else ""
        whole, frac = divmod(abs(total), NANOS_PER_SECOND)
        if frac:
            return f"{sign}{whole}.{frac:09d}".rstrip("0") + "s"
        return f"{sign}{whole}s"


__all__ = ["Duration"]
