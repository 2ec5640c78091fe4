"""Greatest common divisor by the Euclidean algorithm.

Exact integer arithmetic; no epsilon and no evaluation modes involved.

References:
- https://en.wikipedia.org/wiki/Euclidean_algorithm#Procedure
"""

from __future__ import annotations

import operator
from typing import SupportsIndex

from precision_math.exceptions import NegativeInputError, OperandOrderError


def gcd(first: SupportsIndex, second: SupportsIndex) -> int:
    """
    Greatest common divisor of two positive integers, largest first.

    Args:
        first: Strictly positive integer, not smaller than ``second``.
        second: Strictly positive integer.

    Returns:
        The greatest common divisor.

    Raises:
        TypeError: If an operand is not an integer.
        NegativeInputError: If an operand is zero or negative.
        OperandOrderError: If ``first < second``.

    Example:
        >>> gcd(1071, 462)
        21
    """
    a = operator.index(first)
    b = operator.index(second)

    if a <= 0 or b <= 0:
        raise NegativeInputError(
            f"operands must be strictly positive, got ({a}, {b})", a, b
        )
    if a < b:
        raise OperandOrderError(a, b)

    remainder = a % b
    while remainder != 0:
        a, b = b, remainder
        remainder = a % b
    return b


__all__ = ["gcd"]
