"""Precision Math: dual-mode, epsilon-tolerant floating-point primitives."""

__version__ = "0.1.0"

from precision_math.algorithms import (
    ConsistencyResult,
    EvaluationMode,
    PrecisionKernel,
    check_consistency,
    evaluation_mode,
    fp32,
    fp64,
    get_evaluation_mode,
    get_kernel,
)
from precision_math.data.precision_types import (
    PrecisionFormat,
    get_eps,
    get_epsilon,
    get_precision_hierarchy,
)
from precision_math.exceptions import (
    NegativeInputError,
    OperandOrderError,
    PrecisionMathError,
    ZeroDivisorError,
)

__all__ = [
    "__version__",
    "ConsistencyResult",
    "EvaluationMode",
    "NegativeInputError",
    "OperandOrderError",
    "PrecisionFormat",
    "PrecisionKernel",
    "PrecisionMathError",
    "ZeroDivisorError",
    "check_consistency",
    "evaluation_mode",
    "fp32",
    "fp64",
    "get_eps",
    "get_epsilon",
    "get_evaluation_mode",
    "get_kernel",
    "get_precision_hierarchy",
]
