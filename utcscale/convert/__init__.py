"""Conversions between Instant and other time systems.

This module provides:
    - ModifiedJulian: Modified Julian Day numbers
"""

from __future__ import annotations

from utcscale.convert.julian import ModifiedJulian

__all__: list[str] = ["ModifiedJulian"]
