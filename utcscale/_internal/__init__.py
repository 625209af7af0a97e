"""Internal utilities for utcscale.

This module contains private implementation details:
    - Calendar arithmetic relative to the 1900 epoch
    - Floored division with remainder
    - Validation of UTC calendar fields

Note: This module is not part of the public API.
"""

from __future__ import annotations

from utcscale._internal.calendar import days_from_epoch, is_leap_year
from utcscale._internal.quorem import quorem
from utcscale._internal.validation import max_second, validate_utc_fields

__all__: list[str] = [
    "days_from_epoch",
    "is_leap_year",
    "max_second",
    "quorem",
    "validate_utc_fields",
]
