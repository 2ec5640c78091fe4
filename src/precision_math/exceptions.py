"""Errors raised by the numeric kernel.

Only invalid inputs are errors. NaN and infinities are not: they propagate
through the arithmetic the way IEEE 754 defines.
"""

from __future__ import annotations

from typing import Any


class PrecisionMathError(ValueError):
    """Base class for every error raised by the kernel."""


class NegativeInputError(PrecisionMathError):
    """An operand is negative (or non-positive) where the operation forbids it."""

    def __init__(self, message: str, *values: Any) -> None:
        self.values = values
        super().__init__(message)


class OperandOrderError(NegativeInputError):
    """GCD operands given smaller-first.

    Operands are never swapped silently; the caller has to order them.
    """

    def __init__(self, first: int, second: int) -> None:
        super().__init__(
            f"first operand must not be smaller than the second, got ({first}, {second})",
            first,
            second,
        )


class ZeroDivisorError(PrecisionMathError, ZeroDivisionError):
    """Modulo by a divisor that is tolerant-equal to zero."""

    def __init__(self, divisor: Any) -> None:
        self.divisor = divisor
        super().__init__(f"divisor can not be zero, got {divisor}")


__all__ = [
    "NegativeInputError",
    "OperandOrderError",
    "PrecisionMathError",
    "ZeroDivisorError",
]
