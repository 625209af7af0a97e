"""Tests for the leap-second table."""

from __future__ import annotations

import pytest

from utcscale import Utc, leap_seconds
from utcscale.leap_seconds import (
    JANUARY_YEARS,
    JULY_YEARS,
    has_leap_second,
    leap_second_dates,
    leap_second_instants,
    leap_seconds_before,
    leap_seconds_before_nominal,
    locate_leap_seconds,
)


class TestTable:
    """Tests for the table contents."""

    def test_lists_are_ascending(self) -> None:
        assert list(JANUARY_YEARS) == sorted(JANUARY_YEARS)
        assert list(JULY_YEARS) == sorted(JULY_YEARS)

    def test_table_size(self) -> None:
        assert len(leap_second_dates()) == len(JANUARY_YEARS) + len(JULY_YEARS) == 28

    def test_dates_are_ascending_month_ends(self) -> None:
        dates = leap_second_dates()
        assert list(dates) == sorted(dates)
        for _, month, day in dates:
            assert (month, day) in ((6, 30), (12, 31))

    def test_first_and_last(self) -> None:
        dates = leap_second_dates()
        assert dates[0] == (1971, 12, 31)
        assert dates[-1] == (2016, 12, 31)

    def test_version_names_last_entry(self) -> None:
        assert leap_seconds.LEAP_SECOND_TABLE_VERSION == "2017-01-01"


class TestHasLeapSecond:
    """Tests for has_leap_second."""

    @pytest.mark.parametrize(
        ("year", "month"),
        [(1971, 12), (1972, 6), (1972, 12), (1987, 12), (2015, 6), (2016, 12)],
    )
    def test_listed_months(self, year: int, month: int) -> None:
        assert has_leap_second(year, month) is True

    @pytest.mark.parametrize(
        ("year", "month"),
        [(1980, 12), (1980, 6), (2017, 6), (2016, 6), (1972, 1), (1972, 7)],
    )
    def test_unlisted_months(self, year: int, month: int) -> None:
        assert has_leap_second(year, month) is False

    def test_december_uses_following_year(self) -> None:
        """JANUARY_YEARS lists the year after the inserted second."""
        assert 1973 in JANUARY_YEARS
        assert has_leap_second(1972, 12) is True
        assert has_leap_second(1973, 12) is True
        assert 1981 not in JANUARY_YEARS
        assert has_leap_second(1980, 12) is False


class TestCounting:
    """Tests for leap_seconds_before and locate_leap_seconds."""

    def test_leap_day_itself_not_counted(self) -> None:
        assert leap_seconds_before(1971, 12, 31) == 0
        assert leap_seconds_before(1972, 1, 1) == 1

    def test_counts_everything_by_2017(self) -> None:
        assert leap_seconds_before(2017, 1, 1) == 28
        assert leap_seconds_before(2030, 1, 1) == 28

    def test_nothing_before_1971(self) -> None:
        assert leap_seconds_before(1900, 1, 1) == 0
        assert leap_seconds_before(1800, 6, 30) == 0

    def test_first_instant(self) -> None:
        """The first 23:59:60 sits right after 72 years of 86400-second days."""
        assert leap_second_instants()[0] == 26297 * 86400

    def test_instants_are_strictly_increasing(self) -> None:
        instants = leap_second_instants()
        assert all(a < b for a, b in zip(instants, instants[1:]))

    def test_locate_on_leap_second(self) -> None:
        first = leap_second_instants()[0]
        assert locate_leap_seconds(first) == (0, (1971, 12, 31))

    def test_locate_around_leap_second(self) -> None:
        first = leap_second_instants()[0]
        assert locate_leap_seconds(first - 1) == (0, None)
        assert locate_leap_seconds(first + 1) == (1, None)

    def test_locate_before_epoch(self) -> None:
        assert locate_leap_seconds(-10) == (0, None)

    def test_nominal_count_changes_at_midnight(self) -> None:
        """The count for a label goes up at the midnight ending the leap day."""
        midnight = 26297 * 86400
        assert leap_seconds_before_nominal(midnight - 1) == 0
        assert leap_seconds_before_nominal(midnight) == 1

    @pytest.mark.parametrize("date", [(1972, 1, 1), (1990, 5, 17), (2017, 12, 25)])
    def test_nominal_count_matches_date_count(self, date) -> None:
        nominal = Utc(*date, 13, 0, 0).nominal_seconds()
        assert leap_seconds_before_nominal(nominal) == leap_seconds_before(*date)
