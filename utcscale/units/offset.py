"""Offset between a time zone and UTC.

Utc itself always has the zero offset. Offsets exist so that other time
systems can describe how far they sit from UTC with the same
magnitude-plus-era shape that Instant uses.
"""

from __future__ import annotations

from typing import ClassVar

from utcscale._internal.constants import NANOS_PER_SECOND, SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from utcscale.errors import ValidationError
from utcscale.units.era import Era


class Offset:
    """A UTC offset stored as a magnitude and a direction.

    Examples:
        >>> Offset.zero().is_zero
        True
        >>> str(Offset(19800, 0, Era.PRESENT))
        '+05:30'
        >>> str(Offset(3600, 0, Era.PAST))
        '-01:00'
    """

    __slots__ = ("_seconds", "_nanos", "_era")

    _zero_instance: ClassVar[Offset | None] = None

    def __init__(self, seconds: int, nanos: int, era: Era) -> None:
        if seconds < 0:
            raise ValidationError(f"offset seconds must be non-negative, got {seconds}")
        if nanos < 0 or nanos >= NANOS_PER_SECOND:
            raise ValidationError(
                f"offset nanos must be between 0 and {NANOS_PER_SECOND - 1}, got {nanos}"
            )
        if seconds == 0 and nanos == 0:
            era = Era.PRESENT
        self._seconds = seconds
        self._nanos = nanos
        self._era = era

    @classmethod
    def zero(cls) -> Offset:
        """Return the zero offset (UTC). All calls return the same instance."""
        if cls._zero_instance is None:
            cls._zero_instance = cls(0, 0, Era.PRESENT)
        return cls._zero_instance

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
    def is_zero(self) -> bool:
        return self._seconds == 0 and self._nanos == 0

    @property
    def total_nanoseconds(self) -> int:
        """Return the signed offset in nanoseconds."""
        return self._era.sign * (self._seconds * NANOS_PER_SECOND + self._nanos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Offset):
            return NotImplemented
        return self.total_nanoseconds == other.total_nanoseconds

    def __hash__(self) -> int:
        return hash(("Offset", self.total_nanoseconds))

    def __repr__(self) -> str:
        return f"Offset({self._seconds}, {self._nanos}, {self._era})"

    def __str__(self) -> str:
        """Return the offset as +HH:MM, dropping any sub-minute part."""
        sign = "-" if self._era.is_past else "+"
        hours, rest = divmod(self._seconds, SECONDS_PER_HOUR)
        minutes = rest // SECONDS_PER_MINUTE
        return f"{sign}{hours:02d}:{minutes:02d}"


__all__ = ["Offset"]
