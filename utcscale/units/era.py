"""Era enumeration for the direction of an elapsed time.

Instants store a magnitude of elapsed time and an Era telling whether
that magnitude runs forward from the 1900 epoch or backward from it.
"""

from __future__ import annotations

from enum import Enum


class Era(Enum):
    """Direction of an Instant relative to 1900-01-01T00:00:00.

    Examples:
        >>> Era.PRESENT.is_past
        False
        >>> Era.PAST.sign
        -1
    """

    PAST = "PAST"  # Strictly before the epoch
    PRESENT = "PRESENT"  # At or after the epoch

    @property
    def is_past(self) -> bool:
        """Return True if this era is before the epoch."""
        return self == Era.PAST

    @property
    def sign(self) -> int:
        """Return -1 for PAST and 1 for PRESENT."""
        return -1 if self == Era.PAST else 1

    @classmethod
    def for_signed(cls, value: int) -> Era:
        """Return the era of a signed elapsed value (zero is PRESENT)."""
        return cls.PAST if value < 0 else cls.PRESENT


__all__ = ["Era"]
