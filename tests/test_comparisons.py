"""Tests for the calendar and elapsed-time orderings."""

from __future__ import annotations

import random

from hypothesis import given

from utcscale import Duration, Era, Instant, Utc
from utcscale.arithmetic import (
    calendar_key,
    compare_calendar,
    compare_elapsed,
    elapsed_difference,
    elapsed_key,
    nominal_difference,
    orderings_agree,
)

from strategies import utc_values


class TestCalendarOrdering:
    """Tests for field-by-field ordering."""

    def test_compare_calendar(self, leap_neighbourhood) -> None:
        before, leap, after = leap_neighbourhood
        assert compare_calendar(before, leap) == -1
        assert compare_calendar(leap, after) == -1
        assert compare_calendar(after, before) == 1
        assert compare_calendar(leap, Utc(1971, 12, 31, 23, 59, 60)) == 0

    def test_nanos_break_ties(self) -> None:
        assert compare_calendar(Utc(2000, 1, 1), Utc(2000, 1, 1, 0, 0, 0, 1)) == -1

    def test_sort_by_calendar_key(self, leap_neighbourhood) -> None:
        values = list(leap_neighbourhood)
        shuffled = values[:]
        random.Random(7).shuffle(shuffled)
        assert sorted(shuffled, key=calendar_key) == values
        assert sorted(shuffled) == values


class TestElapsedOrdering:
    """Tests for elapsed-time ordering."""

    def test_compare_elapsed(self, leap_neighbourhood) -> None:
        before, leap, after = leap_neighbourhood
        assert compare_elapsed(before, leap) == -1
        assert compare_elapsed(leap, after) == -1
        assert compare_elapsed(after, before) == 1

    def test_mixes_utc_and_instant(self, leap_neighbourhood) -> None:
        _, leap, _ = leap_neighbourhood
        assert compare_elapsed(leap, leap.as_instant()) == 0
        assert compare_elapsed(Instant(1, 0, Era.PAST), Utc(1900, 1, 1)) == -1

    def test_elapsed_key(self, leap_neighbourhood) -> None:
        _, leap, _ = leap_neighbourhood
        assert elapsed_key(leap) == leap.as_instant()
        assert elapsed_key(leap.as_instant()) == leap.as_instant()

    def test_sort_by_elapsed_key(self, leap_neighbourhood) -> None:
        values = list(leap_neighbourhood)
        assert sorted(reversed(values), key=elapsed_key) == values


class TestDifferences:
    """Label arithmetic and elapsed time disagree across a leap second."""

    def test_nominal_merges_leap_second_with_next_minute(self, leap_neighbourhood) -> None:
        before, leap, after = leap_neighbourhood
        assert nominal_difference(before, leap) == 1
        assert nominal_difference(leap, after) == 0
        assert nominal_difference(before, after) == 1

    def test_elapsed_counts_leap_second(self, leap_neighbourhood) -> None:
        before, leap, after = leap_neighbourhood
        assert elapsed_difference(before, leap) == Duration(1, 0)
        assert elapsed_difference(leap, after) == Duration(1, 0)
        assert elapsed_difference(before, after) == Duration(2, 0)

    def test_no_leap_second_no_disagreement(self) -> None:
        a = Utc(2018, 3, 1)
        b = Utc(2018, 3, 2)
        assert nominal_difference(a, b) == elapsed_difference(a, b).seconds == 86400

    def test_orderings_agree_around_leap_second(self, leap_neighbourhood) -> None:
        before, leap, after = leap_neighbourhood
        assert orderings_agree(before, leap)
        assert orderings_agree(leap, after)

    @given(utc_values(), utc_values())
    def test_orderings_agree_everywhere(self, left: Utc, right: Utc) -> None:
        assert orderings_agree(left, right)
