"""Named mathematical constants, one table per precision format.

The literals are written with the precision each width can hold (about 17
significant digits for fp64, 8 for fp32) and stored as the width's numpy
scalar type, so that every value handed to the algorithms is already in the
instantiation's width.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from precision_math.data.precision_types import (
    PrecisionFormat,
    get_dtype,
    get_epsilon,
    get_spec,
    parse_format,
)


@dataclass(frozen=True, slots=True)
class MathConstants:
    """Constants and tolerances for one floating-point width."""

    format: PrecisionFormat
    dtype: Any
    """Numpy scalar type (``np.float64`` or ``np.float32``)."""

    epsilon: np.floating
    """Comparison tolerance."""

    machine_epsilon: np.floating
    """Spacing of floats around 1.0."""

    pi: np.floating
    half_pi: np.floating
    quarter_pi: np.floating
    two_pi: np.floating

    degrees_per_radian: np.floating
    """180 / pi."""

    radians_per_degree: np.floating
    """pi / 180."""

    inf: np.floating

    def scalar(self, value: Any) -> np.floating:
        """Convert a value to this width's scalar type."""
        return self.dtype(value)


_LITERALS: dict[PrecisionFormat, dict[str, str]] = {
    PrecisionFormat.FP64: {
        "pi": "3.1415926535897932",
        "half_pi": "1.5707963267948966",
        "quarter_pi": "0.78539816339744831",
        "two_pi": "6.2831853071795865",
        "degrees_per_radian": "57.295779513082321",
        "radians_per_degree": "0.017453292519943295",
    },
    PrecisionFormat.FP32: {
        "pi": "3.1415927",
        "half_pi": "1.5707964",
        "quarter_pi": "0.78539816",
        "two_pi": "6.2831853",
        "degrees_per_radian": "57.295780",
        "radians_per_degree": "0.017453292",
    },
}


def get_constants(fmt: PrecisionFormat | str) -> MathConstants:
    """
    Build the constants table for a precision format.

    The comparison epsilon is read through ``get_epsilon`` so environment
    overrides apply to tables built after they are set.

    Example:
        >>> get_constants("fp32").pi
        np.float32(3.1415927)
    """
    fmt = parse_format(fmt)
    dtype = get_dtype(fmt)
    literals = _LITERALS[fmt]

    return MathConstants(
        format=fmt,
        dtype=dtype,
        epsilon=dtype(get_epsilon(fmt)),
        machine_epsilon=dtype(get_spec(fmt).machine_epsilon),
        inf=dtype(np.inf),
        **{name: dtype(literal) for name, literal in literals.items()},
    )
