"""Numeric kernel bound to one floating-point width.

A ``PrecisionKernel`` is the single implementation of every primitive,
parameterised by a precision format. Inputs are converted to the width's
numpy scalar type on entry, so all arithmetic (and all round-off) happens in
that width, and the width's own epsilon drives every tolerant comparison.

Example:
    >>> from precision_math import fp32, fp64
    >>> fp64.mod(5.3, 2)
    np.float64(1.2999999999999998)
    >>> fp32.equals(1.0, 1.00001)
    True
    >>> fp64.equals(1.0, 1.00001)
    False
"""

from __future__ import annotations

import logging
from typing import Any, SupportsIndex

import numpy as np

from precision_math.algorithms import (
    comparison,
    modulo,
    number_theory,
    powers,
    roots,
    trigonometry,
)
from precision_math.algorithms.evaluation import (
    EvaluationMode,
    parse_mode,
    resolve_mode,
)
from precision_math.data.constants import MathConstants, get_constants
from precision_math.data.precision_types import PrecisionFormat, parse_format

logger = logging.getLogger(__name__)

Mode = EvaluationMode | str | None


class PrecisionKernel:
    """Dual-mode numeric primitives for one precision format.

    Args:
        precision: Precision format (enum or string like 'fp32').
        mode: Pin every call to this evaluation mode. When None, each call
            uses the mode of the current context (see ``evaluation_mode``).
    """

    __slots__ = ("_constants", "_format", "_mode")

    def __init__(
        self,
        precision: PrecisionFormat | str,
        *,
        mode: EvaluationMode | str | None = None,
    ) -> None:
        self._format = parse_format(precision)
        self._constants = get_constants(self._format)
        self._mode = None if mode is None else parse_mode(mode)
        logger.debug(
            "Created %s kernel (epsilon=%s, mode=%s)",
            self._format.value,
            self._constants.epsilon,
            "context" if self._mode is None else self._mode.value,
        )

    def __repr__(self) -> str:
        mode = "" if self._mode is None else f", mode={self._mode.value!r}"
        return f"{self.__class__.__name__}({self._format.value!r}{mode})"

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def format(self) -> PrecisionFormat:
        return self._format

    @property
    def constants(self) -> MathConstants:
        return self._constants

    @property
    def dtype(self) -> Any:
        return self._constants.dtype

    @property
    def mode(self) -> EvaluationMode | None:
        """Pinned evaluation mode, or None when following the context."""
        return self._mode

    def with_mode(self, mode: EvaluationMode | str) -> PrecisionKernel:
        """Return a kernel of the same width pinned to ``mode``."""
        return PrecisionKernel(self._format, mode=mode)

    def resolve(self, mode: Mode = None) -> EvaluationMode:
        """Mode a call would use: explicit argument, then pin, then context."""
        if mode is not None:
            return parse_mode(mode)
        return resolve_mode(self._mode)

    def scalar(self, value: Any) -> np.floating:
        """Convert a value to this kernel's width; out-of-range values become +/-inf."""
        with np.errstate(over="ignore"):
            try:
                return self._constants.scalar(value)
            except OverflowError:
                # ints beyond float range
                return self._constants.inf if value > 0 else -self._constants.inf

    # ------------------------------------------------------------------
    # Constants
    # ------------------------------------------------------------------

    @property
    def epsilon(self) -> np.floating:
        return self._constants.epsilon

    @property
    def machine_epsilon(self) -> np.floating:
        return self._constants.machine_epsilon

    @property
    def pi(self) -> np.floating:
        return self._constants.pi

    @property
    def half_pi(self) -> np.floating:
        return self._constants.half_pi

    @property
    def quarter_pi(self) -> np.floating:
        return self._constants.quarter_pi

    @property
    def two_pi(self) -> np.floating:
        return self._constants.two_pi

    @property
    def degrees_per_radian(self) -> np.floating:
        return self._constants.degrees_per_radian

    @property
    def radians_per_degree(self) -> np.floating:
        return self._constants.radians_per_degree

    @property
    def inf(self) -> np.floating:
        return self._constants.inf

    # ------------------------------------------------------------------
    # Comparison, sign, abs
    # ------------------------------------------------------------------

    def equals(self, a: Any, b: Any) -> bool:
        """``abs(a - b) <= epsilon``; False if either operand is NaN/inf."""
        return comparison.equals(self.scalar(a), self.scalar(b), self._constants)

    def greater_than(self, a: Any, b: Any) -> bool:
        """``a - b > epsilon``; False if either operand is NaN/inf."""
        return comparison.greater_than(self.scalar(a), self.scalar(b), self._constants)

    def less_than(self, a: Any, b: Any) -> bool:
        """``b - a > epsilon``; False if either operand is NaN/inf."""
        return comparison.less_than(self.scalar(a), self.scalar(b), self._constants)

    def sign(self, value: Any) -> int:
        return comparison.sign(self.scalar(value), self._constants)

    def abs(self, value: Any) -> np.floating:
        return comparison.absolute(self.scalar(value), self._constants)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def sqrt(self, value: Any, *, mode: Mode = None) -> np.floating:
        return roots.sqrt(self.scalar(value), self._constants, mode=self.resolve(mode))

    def pow(self, base: Any, exponent: SupportsIndex, *, mode: Mode = None) -> np.floating:
        return powers.power(
            self.scalar(base), exponent, self._constants, mode=self.resolve(mode)
        )

    def factorial(self, n: SupportsIndex, *, mode: Mode = None) -> np.floating:
        return powers.factorial(n, self._constants, mode=self.resolve(mode))

    def mod(self, value: Any, divisor: Any, *, mode: Mode = None) -> np.floating:
        return modulo.mod(
            self.scalar(value),
            self.scalar(divisor),
            self._constants,
            mode=self.resolve(mode),
        )

    def gcd(self, first: SupportsIndex, second: SupportsIndex) -> int:
        return number_theory.gcd(first, second)

    # ------------------------------------------------------------------
    # Trigonometry
    # ------------------------------------------------------------------

    def sin(self, value: Any, *, mode: Mode = None) -> np.floating:
        return trigonometry.sin(self.scalar(value), self._constants, mode=self.resolve(mode))

    def cos(self, value: Any, *, mode: Mode = None) -> np.floating:
        return trigonometry.cos(self.scalar(value), self._constants, mode=self.resolve(mode))

    def tan(self, value: Any, *, mode: Mode = None) -> np.floating:
        return trigonometry.tan(self.scalar(value), self._constants, mode=self.resolve(mode))

    def degrees_to_radians(self, degrees: Any) -> np.floating:
        return trigonometry.degrees_to_radians(self.scalar(degrees), self._constants)

    def radians_to_degrees(self, radians: Any) -> np.floating:
        return trigonometry.radians_to_degrees(self.scalar(radians), self._constants)


fp64 = PrecisionKernel(PrecisionFormat.FP64)
"""Double-width kernel following the context evaluation mode."""

fp32 = PrecisionKernel(PrecisionFormat.FP32)
"""Single-width kernel following the context evaluation mode."""

_KERNELS: dict[PrecisionFormat, PrecisionKernel] = {
    PrecisionFormat.FP64: fp64,
    PrecisionFormat.FP32: fp32,
}


def get_kernel(precision: PrecisionFormat | str) -> PrecisionKernel:
    """Shared kernel instance for a precision format."""
    return _KERNELS[parse_format(precision)]


__all__ = [
    "PrecisionKernel",
    "fp32",
    "fp64",
    "get_kernel",
]
