"""Numerical algorithms module.

This module contains implementations of:
- Epsilon-tolerant comparisons, sign and absolute value
- Square root (Newton-Raphson fixed point)
- Integer power and factorial
- Floored modulo
- Sine, cosine, tangent (Maclaurin series)
- Euclidean greatest common divisor
- The per-width kernel facade and cross-mode consistency checks
"""

from precision_math.algorithms.consistency import (
    DEFAULT_CORPUS,
    ConsistencyResult,
    check_consistency,
    compare_modes,
)
from precision_math.algorithms.evaluation import (
    EvaluationMode,
    evaluation_mode,
    get_evaluation_mode,
    resolve_mode,
)
from precision_math.algorithms.kernel import (
    PrecisionKernel,
    fp32,
    fp64,
    get_kernel,
)

__all__ = [
    # Cross-mode consistency
    "DEFAULT_CORPUS",
    "ConsistencyResult",
    "check_consistency",
    "compare_modes",
    # Evaluation mode
    "EvaluationMode",
    "evaluation_mode",
    "get_evaluation_mode",
    "resolve_mode",
    # Kernel
    "PrecisionKernel",
    "fp32",
    "fp64",
    "get_kernel",
]
