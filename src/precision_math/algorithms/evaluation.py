"""Evaluation mode selection.

Every floating operation has two interchangeable strategies:

- ``RUNTIME`` delegates to the platform (numpy ufuncs, ``math.gamma``).
- ``CONSTANT`` uses only self-contained iterative and series algorithms, so
  results can be reproduced bit-for-bit without a platform math library.

The active mode lives in a context variable, so threads and asyncio tasks
each see their own mode. An explicit ``mode=`` argument always wins over the
context.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from enum import Enum

logger = logging.getLogger(__name__)

MODE_ENV_VAR = "PRECISION_MATH_EVALUATION_MODE"


class EvaluationMode(Enum):
    """Algorithm strategy used by the kernel operations."""

    RUNTIME = "runtime"
    CONSTANT = "constant"


_CURRENT_MODE: ContextVar[EvaluationMode | None] = ContextVar(
    "precision_math_evaluation_mode", default=None
)


def parse_mode(mode: EvaluationMode | str) -> EvaluationMode:
    """Parse a mode name (case-insensitive) into an EvaluationMode."""
    if isinstance(mode, EvaluationMode):
        return mode

    normalized = mode.strip().lower()
    for candidate in EvaluationMode:
        if candidate.value == normalized:
            return candidate

    valid = [m.value for m in EvaluationMode]
    raise ValueError(f"Unknown evaluation mode: '{mode}'. Valid: {valid}")


def default_mode() -> EvaluationMode:
    """Mode used when no context has been entered.

    Read from ``PRECISION_MATH_EVALUATION_MODE``; ``runtime`` when unset.
    """
    raw = os.environ.get(MODE_ENV_VAR, "")
    if not raw.strip():
        return EvaluationMode.RUNTIME
    return parse_mode(raw)


def get_evaluation_mode() -> EvaluationMode:
    """Return the mode active in the current context."""
    mode = _CURRENT_MODE.get()
    return default_mode() if mode is None else mode


def resolve_mode(mode: EvaluationMode | str | None = None) -> EvaluationMode:
    """Resolve an optional explicit mode against the current context."""
    if mode is None:
        return get_evaluation_mode()
    return parse_mode(mode)


@contextmanager
def evaluation_mode(mode: EvaluationMode | str) -> Iterator[EvaluationMode]:
    """Run a block with the given evaluation mode.

    Example:
        >>> from precision_math import fp64
        >>> with evaluation_mode("constant"):
        ...     fp64.sqrt(4.0)
        np.float64(2.0)
    """
    resolved = parse_mode(mode)
    token = _CURRENT_MODE.set(resolved)
    logger.debug("Entering %s evaluation", resolved.value)
    try:
        yield resolved
    finally:
        _CURRENT_MODE.reset(token)
        logger.debug("Leaving %s evaluation", resolved.value)


__all__ = [
    "MODE_ENV_VAR",
    "EvaluationMode",
    "default_mode",
    "evaluation_mode",
    "get_evaluation_mode",
    "parse_mode",
    "resolve_mode",
]
