"""Data module for precision formats and per-width constant tables."""

from precision_math.data.constants import MathConstants, get_constants
from precision_math.data.precision_types import (
    PrecisionFormat,
    PrecisionSpec,
    get_dtype,
    get_eps,
    get_epsilon,
    get_precision_hierarchy,
    get_spec,
    list_available_formats,
    parse_format,
)

__all__ = [
    "MathConstants",
    "PrecisionFormat",
    "PrecisionSpec",
    "get_constants",
    "get_dtype",
    "get_eps",
    "get_epsilon",
    "get_precision_hierarchy",
    "get_spec",
    "list_available_formats",
    "parse_format",
]
