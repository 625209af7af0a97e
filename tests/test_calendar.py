"""Tests for internal calendar arithmetic relative to the 1900 epoch."""

from __future__ import annotations

import pytest

from utcscale._internal.calendar import (
    days_before_month,
    days_from_epoch,
    days_from_epoch_to_date,
    days_in_month,
    is_leap_year,
    leap_days_between,
    nominal_seconds,
)


class TestLeapYears:
    """Tests for the Gregorian leap-year rule."""

    @pytest.mark.parametrize("year", [1904, 1972, 2000, 2020, 2400])
    def test_leap_years(self, year: int) -> None:
        assert is_leap_year(year) is True

    @pytest.mark.parametrize("year", [1900, 1971, 2021, 2100, 2200])
    def test_common_years(self, year: int) -> None:
        assert is_leap_year(year) is False

    def test_february_length(self) -> None:
        assert days_in_month(2020, 2) == 29
        assert days_in_month(2021, 2) == 28
        assert days_in_month(1900, 2) == 28

    def test_days_in_month_rejects_bad_month(self) -> None:
        with pytest.raises(ValueError, match="month must be 1-12"):
            days_in_month(2020, 13)


class TestEpochDays:
    """Tests for day counts from 1900-01-01."""

    def test_epoch_is_zero(self) -> None:
        assert days_from_epoch(1900) == 0
        assert days_from_epoch_to_date(1900, 1, 1) == 0

    def test_1972(self) -> None:
        """72 plain years plus the 17 leap days 1904..1968."""
        assert days_from_epoch(1972) == 72 * 365 + 17

    def test_2000(self) -> None:
        assert days_from_epoch(2000) == 36524

    def test_unix_epoch(self) -> None:
        assert days_from_epoch_to_date(1970, 1, 1) == 25567

    def test_before_epoch(self) -> None:
        assert days_from_epoch(1899) == -365
        assert days_from_epoch(1800) == -36524
        assert days_from_epoch_to_date(1899, 12, 31) == -1

    def test_leap_days_between(self) -> None:
        assert leap_days_between(1900, 1904) == 0
        assert leap_days_between(1900, 1905) == 1
        assert leap_days_between(1800, 1900) == 24

    def test_leap_day_counts_after_february(self) -> None:
        """Feb 29 and Mar 1 are distinct consecutive days."""
        feb_29 = days_from_epoch_to_date(2020, 2, 29)
        mar_1 = days_from_epoch_to_date(2020, 3, 1)
        assert mar_1 - feb_29 == 1
        assert days_before_month(2020, 3) == 60
        assert days_before_month(2021, 3) == 59

    def test_nominal_seconds_merge_leap_second(self) -> None:
        """Without leap seconds, 23:59:60 reads as the next 00:00:00."""
        assert nominal_seconds(1971, 12, 31, 23, 59, 60) == nominal_seconds(
            1972, 1, 1, 0, 0, 0
        )
