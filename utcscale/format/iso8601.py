"""ISO 8601 formatting and parsing of Utc values.

Functions:
    format_utc: Render a Utc as YYYY-MM-DDTHH:MM:SS+00:00.
    parse_utc: Parse an ISO 8601 UTC timestamp into a Utc.

Rendering is fixed width. The year is zero-padded to at least four
digits, with a leading minus for negative years (-0005). Every other
field is padded to two digits and the offset is always the literal
+00:00. Nanoseconds are not rendered.

Parsing accepts the rendered form plus a few common variants:
    - YYYY-MM-DDTHH:MM:SS
    - YYYY-MM-DDTHH:MM:SS.f (fractional seconds, 1-9 digits)
    - YYYY-MM-DDTHH:MM:SSZ
    - YYYY-MM-DDTHH:MM:SS+00:00 / -00:00

A 60th second parses wherever the leap-second table allows it.

Examples:
    >>> from utcscale import Utc
    >>> format_utc(Utc(2017, 12, 25, 1, 2, 14))
    '2017-12-25T01:02:14+00:00'

    >>> parse_utc("2016-12-31T23:59:60Z")
    Utc(2016, 12, 31, 23, 59, 60, nanos=0)
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from utcscale.errors import ParseError

if TYPE_CHECKING:
    from utcscale.core.utc import Utc

_UTC_PATTERN = re.compile(
    r"^(?P<year>-?\d{4,})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"[Tt ](?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d{1,9}))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})?$"
)

_ZERO_OFFSETS = frozenset({"Z", "z", "+00:00", "-00:00"})


def format_utc(value: Utc) -> str:
    """Format a Utc as YYYY-MM-DDTHH:MM:SS+00:00.

    Args:
        value: The Utc to format.

    Returns:
        The fixed-width timestamp.
    """
    if value.year >= 0:
        year = f"{value.year:04d}"
    else:
        # Negative year with leading minus, magnitude padded to four digits
        year = f"{value.year:05d}"
    return (
        f"{year}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}+00:00"
    )


def parse_utc(s: str) -> Utc:
    """Parse an ISO 8601 UTC timestamp.

    Args:
        s: The string to parse.

    Returns:
        The validated Utc.

    Raises:
        ParseError: If the string is not a UTC timestamp, or its offset is
            not zero.
        CarryError: If the fields parse but are out of bounds.
    """
    from utcscale.core.utc import Utc

    s = s.strip()
    if not s:
        raise ParseError("empty string")

    match = _UTC_PATTERN.match(s)
    if match is None:
        raise ParseError(f"invalid UTC timestamp: {s!r}")

    offset = match.group("offset")
    if offset is not None and offset not in _ZERO_OFFSETS:
        raise ParseError(f"only the zero UTC offset is supported, got {offset!r}")

    fraction = match.group("fraction")
    nanos = int(fraction.ljust(9, "0")) if fraction else 0

    return Utc(
        int(match.group("year")),
        int(match.group("month")),
        int(match.group("day")),
        int(match.group("hour")),
        int(match.group("minute")),
        int(match.group("second")),
        nanos,
    )


__all__ = ["format_utc", "parse_utc"]
