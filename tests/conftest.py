"""Shared fixtures."""

import pytest

from precision_math import EvaluationMode, PrecisionKernel, fp32, fp64

_ENV_VARS = (
    "PRECISION_MATH_EVALUATION_MODE",
    "PRECISION_MATH_FP64_EPSILON",
    "PRECISION_MATH_FP32_EPSILON",
)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test against the built-in configuration."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(params=[fp64, fp32], ids=["fp64", "fp32"])
def kernel(request: pytest.FixtureRequest) -> PrecisionKernel:
    """Both shared width kernels."""
    return request.param


@pytest.fixture(params=list(EvaluationMode), ids=lambda m: m.value)
def mode(request: pytest.FixtureRequest) -> EvaluationMode:
    """Both evaluation modes."""
    return request.param
