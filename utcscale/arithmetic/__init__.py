"""Explicit comparison operations for UTC values.

The natural ordering of Utc is calendar order and the natural ordering
of Instant is elapsed order. This module names both so callers can say
which one they mean.
"""

from __future__ import annotations

from utcscale.arithmetic.comparisons import (
    calendar_key,
    compare_calendar,
    compare_elapsed,
    elapsed_difference,
    elapsed_key,
    nominal_difference,
    orderings_agree,
)

__all__: list[str] = [
    "calendar_key",
    "compare_calendar",
    "compare_elapsed",
    "elapsed_difference",
    "elapsed_key",
    "nominal_difference",
    "orderings_agree",
]
