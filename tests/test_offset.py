"""Tests for Offset and the time-zone protocol."""

from __future__ import annotations

import pytest

from utcscale import Era, Offset, Utc, ValidationError
from utcscale.protocols import TimeZone


class TestOffset:
    """Tests for Offset."""

    def test_utc_offset_is_zero(self) -> None:
        offset = Utc.utc_offset()
        assert offset.is_zero
        assert offset == Offset(0, 0, Era.PRESENT)
        assert str(offset) == "+00:00"

    def test_zero_is_singleton(self) -> None:
        assert Offset.zero() is Offset.zero()
        assert Utc.utc_offset() is Offset.zero()

    def test_string_forms(self) -> None:
        assert str(Offset(19800, 0, Era.PRESENT)) == "+05:30"
        assert str(Offset(3600, 0, Era.PAST)) == "-01:00"

    def test_signed_total(self) -> None:
        assert Offset(1, 0, Era.PAST).total_nanoseconds == -1_000_000_000

    def test_zero_past_is_present(self) -> None:
        assert Offset(0, 0, Era.PAST).era is Era.PRESENT

    def test_rejects_negative_magnitude(self) -> None:
        with pytest.raises(ValidationError):
            Offset(-1, 0, Era.PRESENT)

    def test_rejects_bad_nanos(self) -> None:
        with pytest.raises(ValidationError):
            Offset(0, -1, Era.PRESENT)


class TestTimeZoneProtocol:
    """Utc satisfies the TimeZone protocol."""

    def test_utc_is_time_zone(self) -> None:
        assert isinstance(Utc(2000, 1, 1), TimeZone)
