"""Integer powers and factorials.

Both are building blocks of the Maclaurin series in ``trigonometry``. The
constant-evaluation paths are plain loops bounded by the integer argument;
both stop once the running product overflows to ``inf`` (or, for powers,
underflows to 0), the way IEEE arithmetic pins it.
"""

from __future__ import annotations

import math
import operator
from typing import TYPE_CHECKING, SupportsIndex

import numpy as np

from precision_math.algorithms.comparison import equals, is_finite
from precision_math.algorithms.evaluation import EvaluationMode, resolve_mode
from precision_math.exceptions import NegativeInputError

if TYPE_CHECKING:
    from precision_math.data.constants import MathConstants

_IEEE = {"over": "ignore", "invalid": "ignore", "divide": "ignore"}


def power(
    base: np.floating,
    exponent: SupportsIndex,
    constants: MathConstants,
    *,
    mode: EvaluationMode | str | None = None,
) -> np.floating:
    """
    Raise base to an integer exponent.

    Constant evaluation:
        - NaN for a NaN or infinite base (even when exponent is 0)
        - 1 when exponent is 0 or base is tolerant-equal to 1
        - +/-1 by exponent parity when base is tolerant-equal to -1
        - repeated multiplication, stopping once the product underflows to 0
          or overflows to inf
        - reciprocal of the positive power for negative exponents

    Raises:
        TypeError: If exponent is not an integer.
    """
    exponent = operator.index(exponent)
    one = constants.scalar(1)

    with np.errstate(**_IEEE):
        if resolve_mode(mode) is EvaluationMode.RUNTIME:
            return np.power(base, constants.scalar(exponent))

        if not is_finite(base):
            return constants.scalar(np.nan)

        if exponent == 0 or equals(base, one, constants):
            return one

        negative = exponent % 2 == 1 and base < 0
        if equals(base, -one, constants):
            return -one if negative else one

        result = one
        for _ in range(abs(exponent)):
            result = result * base
            if result == 0 or not is_finite(result):
                # pinned at 0 or inf, only the sign is left to settle
                result = -np.abs(result) if negative else np.abs(result)
                break

        if exponent < 0:
            return one / result
        return result


def factorial(
    n: SupportsIndex,
    constants: MathConstants,
    *,
    mode: EvaluationMode | str | None = None,
) -> np.floating:
    """
    n! in the working width.

    The runtime path evaluates ``gamma(n + 1)``; the constant path multiplies
    ``1 * 2 * ... * n``. Both give ``inf`` once the width overflows.

    Raises:
        TypeError: If n is not an integer.
        NegativeInputError: If n < 0.
    """
    n = operator.index(n)
    if n < 0:
        raise NegativeInputError(f"factorial is undefined for negative n, got {n}", n)

    if n == 0:
        return constants.scalar(1)

    with np.errstate(**_IEEE):
        if resolve_mode(mode) is EvaluationMode.RUNTIME:
            try:
                return constants.scalar(math.gamma(n + 1))
            except OverflowError:
                return constants.inf

        result = constants.scalar(1)
        for k in range(2, n + 1):
            result = result * constants.scalar(k)
            if not is_finite(result):
                break
        return result


__all__ = ["factorial", "power"]
