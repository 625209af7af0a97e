"""Temporal units and enumerations.

This module provides:
    - Era: direction of an elapsed time relative to the 1900 epoch
    - Offset: offset of a time zone from UTC
"""

from __future__ import annotations

from utcscale.units.era import Era
from utcscale.units.offset import Offset

__all__: list[str] = [
    "Era",
    "Offset",
]
