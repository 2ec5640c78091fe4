"""Cross-mode consistency checks.

Runs a corpus of finite, non-boundary inputs through a kernel in both
evaluation modes and reports whether the self-contained algorithms agree
with the platform within the width's epsilon.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from precision_math.algorithms.evaluation import EvaluationMode

if TYPE_CHECKING:
    from precision_math.algorithms.kernel import PrecisionKernel

logger = logging.getLogger(__name__)

_RELATIVE_OPERATIONS = frozenset({"tan"})

DEFAULT_CORPUS: dict[str, list[tuple[Any, ...]]] = {
    "sqrt": [(0.0,), (0.25,), (1.0,), (2.0,), (10.0,), (52.0,), (100.0,), (1234.5,)],
    "pow": [
        (2.0, 3),
        (0.5, 4),
        (-1.5, 3),
        (3.0, -2),
        (1.1, 5),
        (-2.0, -3),
        (7.0, 0),
        (-1.0, 7),
    ],
    "factorial": [(0,), (1,), (2,), (5,), (7,), (10,)],
    "mod": [
        (5.3, 2.0),
        (-5.3, 2.0),
        (7.5, -2.0),
        (10.0, 3.0),
        (1.0, 0.3),
        (0.0, 4.0),
        (9.75, 2.5),
    ],
    "sin": [(0.0,), (0.5,), (1.0,), (2.0,), (3.0,), (4.5,), (6.0,), (-0.7,), (-4.0,), (10.0,)],
    "cos": [(0.0,), (0.5,), (1.0,), (2.0,), (3.0,), (4.5,), (6.0,), (-0.7,), (-4.0,), (10.0,)],
    "tan": [(0.0,), (0.3,), (1.0,), (2.0,), (-0.7,), (4.0,), (2.5,)],
}


@dataclass(frozen=True, slots=True)
class ConsistencyResult:
    """Outcome of evaluating one case in both modes."""

    operation: str
    arguments: tuple[Any, ...]
    runtime_value: float
    constant_value: float
    difference: float
    """``|runtime - constant|`` (NaN when either side is NaN)."""

    tolerance: float
    agrees: bool


def tolerance_for(
    kernel: PrecisionKernel, operation: str, reference: float = 0.0
) -> float:
    """
    Allowed cross-mode difference for an operation on a kernel.

    One epsilon, except for ``tan``: near a pole it divides two values that
    are each within epsilon, so its error grows with ``reference**2``.
    """
    epsilon = float(kernel.epsilon)
    if operation in _RELATIVE_OPERATIONS and np.isfinite(reference):
        return epsilon * max(1.0, reference * reference)
    return epsilon


def compare_modes(
    kernel: PrecisionKernel,
    operation: str,
    arguments: tuple[Any, ...],
) -> ConsistencyResult:
    """
    Evaluate ``operation(*arguments)`` in both modes on a kernel.

    Raises:
        ValueError: If the kernel has no such operation.
        PrecisionMathError: If the arguments are invalid for the operation.
    """
    method = getattr(kernel, operation, None)
    if operation not in DEFAULT_CORPUS or method is None:
        valid = sorted(DEFAULT_CORPUS)
        raise ValueError(f"Unknown operation: '{operation}'. Valid: {valid}")

    runtime_value = float(method(*arguments, mode=EvaluationMode.RUNTIME))
    constant_value = float(method(*arguments, mode=EvaluationMode.CONSTANT))
    tolerance = tolerance_for(kernel, operation, runtime_value)

    if np.isnan(runtime_value) or np.isnan(constant_value):
        difference = float("nan")
        agrees = bool(np.isnan(runtime_value) and np.isnan(constant_value))
    else:
        difference = abs(runtime_value - constant_value)
        agrees = difference <= tolerance

    return ConsistencyResult(
        operation=operation,
        arguments=tuple(arguments),
        runtime_value=runtime_value,
        constant_value=constant_value,
        difference=difference,
        tolerance=tolerance,
        agrees=agrees,
    )


def check_consistency(
    kernel: PrecisionKernel,
    corpus: dict[str, list[tuple[Any, ...]]] | None = None,
) -> list[ConsistencyResult]:
    """Run a corpus (default ``DEFAULT_CORPUS``) through both modes."""
    if corpus is None:
        corpus = DEFAULT_CORPUS

    results = [
        compare_modes(kernel, operation, arguments)
        for operation, cases in corpus.items()
        for arguments in cases
    ]

    failures = sum(1 for r in results if not r.agrees)
    logger.debug(
        "%s consistency: %d cases, %d disagreements",
        kernel.format.value,
        len(results),
        failures,
    )
    return results


__all__ = [
    "DEFAULT_CORPUS",
    "ConsistencyResult",
    "check_consistency",
    "compare_modes",
    "tolerance_for",
]
