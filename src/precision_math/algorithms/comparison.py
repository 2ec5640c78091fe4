"""Epsilon-tolerant comparisons, sign and absolute value.

Every predicate returns ``False`` when either operand is NaN or infinite, so
callers can use them to short-circuit on invalid inputs without a separate
NaN check. Tolerant equality is not transitive.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from precision_math.data.constants import MathConstants

_IEEE = {"over": "ignore", "invalid": "ignore", "divide": "ignore"}


def is_finite(value: np.floating) -> bool:
    """True unless value is NaN or +/-inf."""
    return bool(np.isfinite(value))


def equals(a: np.floating, b: np.floating, constants: MathConstants) -> bool:
    """``abs(a - b) <= epsilon``; False for any non-finite operand."""
    if not (is_finite(a) and is_finite(b)):
        return False
    with np.errstate(**_IEEE):
        return bool(np.abs(a - b) <= constants.epsilon)


def greater_than(a: np.floating, b: np.floating, constants: MathConstants) -> bool:
    """``a - b > epsilon``; False for any non-finite operand."""
    if not (is_finite(a) and is_finite(b)):
        return False
    with np.errstate(**_IEEE):
        return bool(a - b > constants.epsilon)


def less_than(a: np.floating, b: np.floating, constants: MathConstants) -> bool:
    """``b - a > epsilon``; False for any non-finite operand."""
    if not (is_finite(a) and is_finite(b)):
        return False
    with np.errstate(**_IEEE):
        return bool(b - a > constants.epsilon)


def sign(value: np.floating, constants: MathConstants) -> int:
    """
    Tolerant sign of a value.

    Returns:
        0 when value is within epsilon of zero, -1 when it is epsilon-below
        zero, 1 otherwise (NaN and infinities included, since no comparison
        holds for them).
    """
    zero = constants.scalar(0)
    if equals(value, zero, constants):
        return 0
    if less_than(value, zero, constants):
        return -1
    return 1


def absolute(value: np.floating, constants: MathConstants) -> np.floating:
    """
    ``-value`` when value is epsilon-below zero, else value unchanged.

    Non-finite values take the IEEE absolute value: NaN stays NaN, -inf is inf.
    """
    if not is_finite(value):
        return np.abs(value)
    if less_than(value, constants.scalar(0), constants):
        return -value
    return value


__all__ = [
    "absolute",
    "equals",
    "greater_than",
    "is_finite",
    "less_than",
    "sign",
]
