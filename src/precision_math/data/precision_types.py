"""
Precision Format Definitions - Single Source of Truth

This module defines the floating-point widths the kernel can be instantiated
for, with their IEEE 754 layout, machine epsilon and the comparison epsilon
used by every tolerant predicate.

The comparison epsilon is coupled to the width: an epsilon chosen for fp64
is far tighter than fp32 round-off near 1.0, and an fp32 epsilon hides real
differences in fp64. Each width therefore carries its own value.

References:
    - IEEE 754-2019 Standard for Floating-Point Arithmetic
    - Higham: "Accuracy and Stability of Numerical Algorithms" (2nd ed.)
"""

import math
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, cast

import numpy as np
from numpy.typing import DTypeLike


class PrecisionFormat(Enum):
    """Supported floating-point precision formats."""

    FP64 = "fp64"
    FP32 = "fp32"


@dataclass(frozen=True, slots=True)
class PrecisionSpec:
    """Specification for a floating-point precision format."""

    format: PrecisionFormat
    bits: int
    mantissa_bits: int
    exponent_bits: int
    machine_epsilon: float
    comparison_epsilon: float  # Tolerance of equals/greater_than/less_than
    significant_digits: int  # Decimal digits carried by constant literals

    @property
    def bytes(self) -> int:
        """Number of bytes for this format."""
        return self.bits // 8


# =============================================================================
# PRECISION SPECIFICATIONS
# =============================================================================
# Machine epsilon: 2^(-mantissa_bits)
# Comparison epsilon: a few orders of magnitude above the round-off that the
# series algorithms accumulate in that width.

_PRECISION_SPECS: dict[PrecisionFormat, PrecisionSpec] = {
    PrecisionFormat.FP64: PrecisionSpec(
        format=PrecisionFormat.FP64,
        bits=64,
        mantissa_bits=52,
        exponent_bits=11,
        machine_epsilon=2.0**-52,
        comparison_epsilon=1e-9,
        significant_digits=17,
    ),
    PrecisionFormat.FP32: PrecisionSpec(
        format=PrecisionFormat.FP32,
        bits=32,
        mantissa_bits=23,
        exponent_bits=8,
        machine_epsilon=2.0**-23,
        comparison_epsilon=1e-4,
        significant_digits=8,
    ),
}

_EPSILON_ENV_VARS: dict[PrecisionFormat, str] = {
    PrecisionFormat.FP64: "PRECISION_MATH_FP64_EPSILON",
    PrecisionFormat.FP32: "PRECISION_MATH_FP32_EPSILON",
}


# =============================================================================
# PUBLIC API
# =============================================================================


def get_spec(fmt: PrecisionFormat | str) -> PrecisionSpec:
    """
    Get the full specification for a precision format.

    Args:
        fmt: Precision format (enum or string like 'fp32', 'FP64', 'fp-32')

    Returns:
        PrecisionSpec with all format properties

    Raises:
        ValueError: If format is unknown

    Example:
        >>> spec = get_spec("fp32")
        >>> spec.comparison_epsilon
        0.0001
    """
    return _PRECISION_SPECS[parse_format(fmt)]


def get_dtype(fmt: PrecisionFormat | str) -> DTypeLike:
    """
    Get the numpy scalar type for a precision format.

    Example:
        >>> get_dtype("fp32")
        <class 'numpy.float32'>
    """
    dtype_map: dict[PrecisionFormat, Any] = {
        PrecisionFormat.FP64: np.float64,
        PrecisionFormat.FP32: np.float32,
    }
    return cast("DTypeLike", dtype_map[parse_format(fmt)])


def get_eps(fmt: PrecisionFormat | str) -> float:
    """
    Get machine epsilon for a precision format.

    Machine epsilon is the smallest positive number ε such that 1.0 + ε ≠ 1.0
    in the given floating-point representation.

    Example:
        >>> get_eps("fp64")
        2.220446049250313e-16
    """
    return get_spec(fmt).machine_epsilon


def get_epsilon(fmt: PrecisionFormat | str) -> float:
    """
    Get the comparison epsilon for a precision format.

    The table value can be overridden per width with the
    ``PRECISION_MATH_FP64_EPSILON`` / ``PRECISION_MATH_FP32_EPSILON``
    environment variables.

    Args:
        fmt: Precision format

    Returns:
        Tolerance used by the epsilon-aware comparisons

    Raises:
        ValueError: If the override is not a positive finite float, or is
            smaller than the width's machine epsilon
    """
    spec = get_spec(fmt)
    env_var = _EPSILON_ENV_VARS[spec.format]
    raw = os.environ.get(env_var)
    if raw is None or not raw.strip():
        return spec.comparison_epsilon

    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be a float, got {raw!r}") from exc

    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{env_var} must be positive and finite, got {value}")
    if value < spec.machine_epsilon:
        raise ValueError(
            f"{env_var}={value} is below the {spec.format.value} machine "
            f"epsilon {spec.machine_epsilon:.3e}"
        )
    return value


def get_precision_hierarchy() -> list[PrecisionFormat]:
    """
    Get precision formats in order from lowest to highest precision.

    Returns:
        List of PrecisionFormat from FP32 to FP64
    """
    return [PrecisionFormat.FP32, PrecisionFormat.FP64]


def list_available_formats() -> list[PrecisionFormat]:
    """List all precision formats the kernel can be instantiated for."""
    return list(PrecisionFormat)


def parse_format(fmt: PrecisionFormat | str) -> PrecisionFormat:
    """Parse a string (or pass through an enum) into a PrecisionFormat."""
    if isinstance(fmt, PrecisionFormat):
        return fmt

    normalized = fmt.lower().replace("-", "").replace("_", "").replace(" ", "")

    for candidate in PrecisionFormat:
        if candidate.value == normalized:
            return candidate

    valid = [f.value for f in PrecisionFormat]
    raise ValueError(f"Unknown precision format: '{fmt}'. Valid: {valid}")
