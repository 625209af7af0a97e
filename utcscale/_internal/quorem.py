"""Floored division with remainder.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import Union

Number = Union[int, float]


def quorem(numerator: Number, denominator: Number) -> tuple[int, Number]:
    """Return the floored quotient and the remainder of a division.

    Only non-negative numerators and positive denominators are accepted.
    Nothing in the conversion path should ever call this with anything
    else, so bad operands are a programming error rather than a value
    to clamp.

    Args:
        numerator: The dividend (>= 0).
        denominator: The divisor (> 0).

    Returns:
        Tuple of (quotient, remainder). The remainder keeps the type of
        the operands.

    Raises:
        ValueError: If either operand is negative.
        ZeroDivisionError: If denominator is zero.

    Examples:
        >>> quorem(25, 6)
        (4, 1)
        >>> quorem(3540, 3600)
        (0, 3540)
        >>> quorem(3540, 60)
        (59, 0)
    """
    if numerator < 0 or denominator < 0:
        raise ValueError(
            f"quorem only supports non-negative operands, got {numerator} / {denominator}"
        )
    if denominator == 0:
        raise ZeroDivisionError("cannot divide by zero")
    quotient, remainder = divmod(numerator, denominator)
    return int(quotient), remainder


__all__ = ["quorem"]
