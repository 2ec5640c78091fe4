"""Sine, cosine and tangent.

The constant-evaluation path computes sine from first principles with the
Maclaurin expansion

    sin(x) = Σ (-1)^n · x^(2n+1) / (2n+1)!

after reducing x into [0, 2π). Summation stops after adding the first term
that is tolerant-equal to zero (converged), or before a term that is no
longer finite (x^k or k! overflowed). The early exit is required: factorials
overflow long before the 1000-term hard cap is reached.

Cosine is sine shifted by π/2. Tangent special-cases multiples of π (exactly
0) and odd multiples of π/2 (NaN) before dividing, since the ratio of two
series near a pole is a large but finite, noisy number.

References:
- Maclaurin expansion of sin(x), https://en.wikipedia.org/wiki/Taylor_series
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from precision_math.algorithms.comparison import equals, is_finite
from precision_math.algorithms.evaluation import EvaluationMode, resolve_mode
from precision_math.algorithms.modulo import mod
from precision_math.algorithms.powers import factorial, power

if TYPE_CHECKING:
    from precision_math.data.constants import MathConstants

logger = logging.getLogger(__name__)

MAX_SERIES_TERMS: int = 1000
"""Hard cap on Maclaurin terms."""

_IEEE = {"over": "ignore", "invalid": "ignore", "divide": "ignore"}


def maclaurin_sine(x: np.floating, constants: MathConstants) -> np.floating:
    """
    Sum the Maclaurin series of sine for an already reduced argument.

    Uses constant-evaluation ``power`` and ``factorial`` for every term.
    """
    zero = constants.scalar(0)
    minus_one = constants.scalar(-1)
    constant = EvaluationMode.CONSTANT
    result = zero
    reason = "term cap"
    n = 0

    with np.errstate(**_IEEE):
        for n in range(MAX_SERIES_TERMS):
            k = 2 * n + 1
            term = (
                power(minus_one, n, constants, mode=constant)
                * power(x, k, constants, mode=constant)
                / factorial(k, constants, mode=constant)
            )

            if not is_finite(term):
                reason = "non-finite term"
                break

            # the converged term is included in the sum
            result = result + term
            if equals(term, zero, constants):
                reason = "converged"
                break

    logger.debug("maclaurin_sine(%r): %s after %d terms", x, reason, n)
    return result


def sin(
    value: np.floating,
    constants: MathConstants,
    *,
    mode: EvaluationMode | str | None = None,
) -> np.floating:
    """Sine of an angle in radians; NaN for NaN/inf input."""
    if resolve_mode(mode) is EvaluationMode.RUNTIME:
        with np.errstate(**_IEEE):
            return np.sin(value)

    if not is_finite(value):
        return constants.scalar(np.nan)

    reduced = mod(value, constants.two_pi, constants, mode=EvaluationMode.CONSTANT)
    return maclaurin_sine(reduced, constants)


def cos(
    value: np.floating,
    constants: MathConstants,
    *,
    mode: EvaluationMode | str | None = None,
) -> np.floating:
    """Cosine of an angle in radians, ``sin(value + π/2)`` when self-contained."""
    if resolve_mode(mode) is EvaluationMode.RUNTIME:
        with np.errstate(**_IEEE):
            return np.cos(value)

    if not is_finite(value):
        return constants.scalar(np.nan)

    return sin(value + constants.half_pi, constants, mode=EvaluationMode.CONSTANT)


def tan(
    value: np.floating,
    constants: MathConstants,
    *,
    mode: EvaluationMode | str | None = None,
) -> np.floating:
    """
    Tangent of an angle in radians.

    Returns:
        - NaN for NaN/inf input
        - exactly 0 for tolerant multiples of π
        - NaN for other tolerant multiples of π/2 (the poles)
        - ``np.tan`` at runtime, ``sin / cos`` when self-contained
    """
    if not is_finite(value):
        return constants.scalar(np.nan)

    resolved = resolve_mode(mode)
    zero = constants.scalar(0)

    if equals(mod(value, constants.pi, constants, mode=resolved), zero, constants):
        return zero

    if not equals(value, zero, constants) and equals(
        mod(value, constants.half_pi, constants, mode=resolved), zero, constants
    ):
        return constants.scalar(np.nan)

    with np.errstate(**_IEEE):
        if resolved is EvaluationMode.RUNTIME:
            return np.tan(value)
        return sin(value, constants, mode=resolved) / cos(value, constants, mode=resolved)


def degrees_to_radians(degrees: np.floating, constants: MathConstants) -> np.floating:
    """Convert degrees to radians in the working width."""
    with np.errstate(**_IEEE):
        return degrees * constants.radians_per_degree


def radians_to_degrees(radians: np.floating, constants: MathConstants) -> np.floating:
    """Convert radians to degrees in the working width."""
    with np.errstate(**_IEEE):
        return radians * constants.degrees_per_radian


__all__ = [
    "MAX_SERIES_TERMS",
    "cos",
    "degrees_to_radians",
    "maclaurin_sine",
    "radians_to_degrees",
    "sin",
    "tan",
]
