"""Hypothesis strategies shared by the test modules."""

from __future__ import annotations

from hypothesis import strategies as st

from utcscale import Utc
from utcscale._internal.calendar import days_in_month


@st.composite
def utc_values(draw, min_year: int = 1583, max_year: int = 2400) -> Utc:
    """Draw valid, non-leap-second Utc values."""
    year = draw(st.integers(min_value=min_year, max_value=max_year))
    month = draw(st.integers(min_value=1, max_value=12))
    day = draw(st.integers(min_value=1, max_value=days_in_month(year, month)))
    return Utc(
        year,
        month,
        day,
        draw(st.integers(min_value=0, max_value=23)),
        draw(st.integers(min_value=0, max_value=59)),
        draw(st.integers(min_value=0, max_value=59)),
        draw(st.integers(min_value=0, max_value=999_999_999)),
    )
