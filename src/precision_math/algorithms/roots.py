"""Square root with Newton-Raphson fixed-point iteration.

The constant-evaluation path repeats ``next = 0.5 * (curr + value / curr)``
from ``curr = value`` until the iterate stops changing. Convergence is the
stopping condition, not an iteration count.

References:
- Newton-Raphson method, https://en.wikipedia.org/wiki/Newton%27s_method
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from precision_math.algorithms.evaluation import EvaluationMode, resolve_mode
from precision_math.exceptions import NegativeInputError

if TYPE_CHECKING:
    from precision_math.data.constants import MathConstants

logger = logging.getLogger(__name__)


def newton_sqrt(value: np.floating) -> np.floating:
    """
    Square root by Newton-Raphson, iterated to a fixed point.

    Expects a finite, strictly positive value in the working width.

    Floats can settle into a two-cycle between neighbours instead of a single
    fixed point; returning to the iterate from two steps back also ends the
    loop, and the smaller of the pair is returned.
    """
    half = value.dtype.type(0.5)
    prev = None
    curr = value
    iterations = 0

    while True:
        nxt = half * (curr + value / curr)
        iterations += 1
        if nxt == curr:
            break
        if nxt == prev:
            curr = min(curr, nxt)
            break
        prev, curr = curr, nxt

    logger.debug("newton_sqrt(%r) converged after %d iterations", value, iterations)
    return curr


def sqrt(
    value: np.floating,
    constants: MathConstants,
    *,
    mode: EvaluationMode | str | None = None,
) -> np.floating:
    """
    Square root of a value in the working width.

    Args:
        value: Radicand (already converted to the working width).
        constants: Width constants.
        mode: Evaluation mode override.

    Returns:
        Square root; NaN propagates and ``sqrt(inf) == inf``.

    Raises:
        NegativeInputError: If value < 0 (exact check, no tolerance).
    """
    if value < 0:
        raise NegativeInputError(f"value can not be negative, got {value}", value)

    if resolve_mode(mode) is EvaluationMode.RUNTIME:
        return np.sqrt(value)

    if value == 0 or not np.isfinite(value):
        return value
    return newton_sqrt(value)


__all__ = ["newton_sqrt", "sqrt"]
