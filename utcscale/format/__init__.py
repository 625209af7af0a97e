"""Formatting and parsing of Utc values.

This module provides:
    - format_utc: Render a Utc as YYYY-MM-DDTHH:MM:SS+00:00
    - parse_utc: Parse an ISO 8601 UTC timestamp
"""

from __future__ import annotations

from utcscale.format.iso8601 import format_utc, parse_utc

__all__: list[str] = [
    "format_utc",
    "parse_utc",
]
