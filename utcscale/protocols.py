"""Protocols shared by time systems and time zones.

Instant is the common interchange value: a time system only has to know
how to convert itself to and from an Instant to interoperate with every
other one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from utcscale.core.instant import Instant
    from utcscale.units.offset import Offset


@runtime_checkable
class TimeSystem(Protocol):
    """A representation of time that converts through Instant."""

    @classmethod
    def from_instant(cls, instant: Instant) -> TimeSystem:
        """Build a value of this time system from an Instant."""
        ...

    def as_instant(self) -> Instant:
        """Return the Instant of this value."""
        ...


@runtime_checkable
class TimeZone(Protocol):
    """A calendar defined by its offset from UTC."""

    @classmethod
    def utc_offset(cls) -> Offset:
        """Return the offset between this time zone and UTC."""
        ...


__all__ = ["TimeSystem", "TimeZone"]
