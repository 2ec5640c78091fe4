"""Floored modulo with epsilon-aware boundary correction.

The result takes the sign of the divisor (floored division), e.g.
``mod(5.3, 2) ~= 1.3``, ``mod(-5.3, 2) ~= 0.7``, ``mod(7.5, -2) ~= -0.5``.

A remainder that lands within epsilon of the divisor's magnitude is the
representation noise of an exact multiple and snaps to zero.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from precision_math.algorithms.comparison import absolute, equals, is_finite, sign
from precision_math.algorithms.evaluation import EvaluationMode, resolve_mode
from precision_math.exceptions import ZeroDivisorError

if TYPE_CHECKING:
    from precision_math.data.constants import MathConstants

_IEEE = {"over": "ignore", "invalid": "ignore", "divide": "ignore"}


def tolerant_floor(quotient: np.floating, constants: MathConstants) -> int:
    """
    Floor of a quotient, treating values within epsilon of the next integer
    as that integer.

    Expects a finite quotient.
    """
    floored = math.floor(quotient)
    if equals(quotient, constants.scalar(floored + 1), constants):
        return floored + 1
    return floored


def mod(
    value: np.floating,
    divisor: np.floating,
    constants: MathConstants,
    *,
    mode: EvaluationMode | str | None = None,
) -> np.floating:
    """
    Floored remainder of value / divisor.

    Args:
        value: Dividend.
        divisor: Divisor, must not be tolerant-equal to zero.
        constants: Width constants.
        mode: Evaluation mode override.

    Returns:
        Remainder with the sign of the divisor; NaN for non-finite input.

    Raises:
        ZeroDivisorError: If divisor is tolerant-equal to zero.
    """
    zero = constants.scalar(0)
    if equals(divisor, zero, constants):
        raise ZeroDivisorError(divisor)

    with np.errstate(**_IEEE):
        if resolve_mode(mode) is EvaluationMode.RUNTIME:
            remainder = np.remainder(value, divisor)
            if equals(absolute(remainder, constants), absolute(divisor, constants), constants):
                return zero
            return remainder

        if not (is_finite(value) and is_finite(divisor)):
            return constants.scalar(np.nan)

        if equals(value, zero, constants):
            return zero

        quotient = value / divisor
        if not is_finite(quotient):
            return constants.scalar(np.nan)

        multiplier = constants.scalar(tolerant_floor(quotient, constants))
        nudge = constants.machine_epsilon * constants.scalar(sign(value, constants))
        return value - multiplier * divisor + nudge


__all__ = ["mod", "tolerant_floor"]
