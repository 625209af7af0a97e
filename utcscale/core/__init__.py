"""Core temporal types.

This module provides the fundamental temporal types:
    - Duration: Span of elapsed time with nanosecond precision
    - Instant: Point on the uniform timescale since 1900-01-01
    - Utc: Validated UTC calendar value with leap-second support
"""

from __future__ import annotations

from utcscale.core.duration import Duration
from utcscale.core.instant import Instant
from utcscale.core.utc import Utc

__all__: list[str] = [
    "Duration",
    "Instant",
    "Utc",
]
