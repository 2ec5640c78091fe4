"""Tests for sine, cosine, tangent and angle conversion."""

import math

import numpy as np
import pytest

from precision_math import EvaluationMode, PrecisionKernel, fp32
from precision_math.algorithms.trigonometry import MAX_SERIES_TERMS, maclaurin_sine
from precision_math.data.constants import get_constants

CONSTANT = EvaluationMode.CONSTANT
NON_FINITE = [float("nan"), float("inf"), float("-inf")]


def trig_tolerance(kernel: PrecisionKernel) -> float:
    """Both modes stay within one epsilon."""
    return float(kernel.epsilon)


def dense_sample(kernel: PrecisionKernel) -> np.ndarray:
    """Angles covering [0, 2π)."""
    return np.linspace(0.0, float(kernel.two_pi), 97, endpoint=False)


class TestSin:
    """Tests for sin."""

    @pytest.mark.parametrize("value", [0.0, 0.5, 1.0, 2.0, 3.0, 4.5, 6.0, -0.7, -4.0, 10.0, 25.0])
    def test_matches_math(
        self, kernel: PrecisionKernel, mode: EvaluationMode, value: float
    ) -> None:
        """sin agrees with the reference value."""
        result = kernel.sin(value, mode=mode)
        assert abs(float(result) - math.sin(value)) <= trig_tolerance(kernel)

    @pytest.mark.parametrize("value", NON_FINITE)
    def test_non_finite_is_nan(
        self, kernel: PrecisionKernel, mode: EvaluationMode, value: float
    ) -> None:
        """NaN and infinities give NaN."""
        assert np.isnan(kernel.sin(value, mode=mode))

    def test_zero(self, kernel: PrecisionKernel, mode: EvaluationMode) -> None:
        """sin(0) is 0."""
        assert kernel.sin(0.0, mode=mode) == 0

    def test_result_in_width(self, kernel: PrecisionKernel, mode: EvaluationMode) -> None:
        """Result is a scalar of the kernel's width."""
        assert type(kernel.sin(1.0, mode=mode)) is kernel.dtype


class TestCos:
    """Tests for cos."""

    @pytest.mark.parametrize("value", [0.0, 0.5, 1.0, 2.0, 3.0, 4.5, 6.0, -0.7, -4.0, 10.0])
    def test_matches_math(
        self, kernel: PrecisionKernel, mode: EvaluationMode, value: float
    ) -> None:
        """cos agrees with the reference value."""
        result = kernel.cos(value, mode=mode)
        assert abs(float(result) - math.cos(value)) <= trig_tolerance(kernel)

    @pytest.mark.parametrize("value", NON_FINITE)
    def test_non_finite_is_nan(
        self, kernel: PrecisionKernel, mode: EvaluationMode, value: float
    ) -> None:
        """NaN and infinities give NaN."""
        assert np.isnan(kernel.cos(value, mode=mode))

    def test_is_shifted_sine(self, kernel: PrecisionKernel) -> None:
        """Self-contained cosine is sine shifted by π/2."""
        for value in (0.3, 1.7, 5.2):
            shifted = kernel.scalar(value) + kernel.half_pi
            assert kernel.cos(value, mode=CONSTANT) == kernel.sin(shifted, mode=CONSTANT)


class TestPythagoreanIdentity:
    """sin² + cos² = 1 over a dense sample."""

    def test_identity(self, kernel: PrecisionKernel, mode: EvaluationMode) -> None:
        """Holds within the mode's tolerance everywhere in [0, 2π)."""
        tolerance = trig_tolerance(kernel)
        for value in dense_sample(kernel):
            s = float(kernel.sin(value, mode=mode))
            c = float(kernel.cos(value, mode=mode))
            assert abs(s * s + c * c - 1.0) <= tolerance, value

    def test_identity_fine_grid(self, kernel: PrecisionKernel) -> None:
        """Self-contained sin and cos keep the identity within one epsilon on a fine grid."""
        tolerance = trig_tolerance(kernel)
        for value in np.linspace(0.0, float(kernel.two_pi), 997, endpoint=False):
            s = float(kernel.sin(value, mode=CONSTANT))
            c = float(kernel.cos(value, mode=CONSTANT))
            assert abs(s * s + c * c - 1.0) <= tolerance, value


class TestTan:
    """Tests for tan."""

    def test_ratio_of_sine_and_cosine(
        self, kernel: PrecisionKernel, mode: EvaluationMode
    ) -> None:
        """tan = sin / cos away from the poles, NaN exactly at them."""
        for value in dense_sample(kernel):
            result = kernel.tan(value, mode=mode)
            if kernel.equals(kernel.mod(value, kernel.half_pi, mode=mode), 0) and not (
                kernel.equals(kernel.mod(value, kernel.pi, mode=mode), 0)
            ):
                assert np.isnan(result), value
                continue

            expected = float(kernel.sin(value, mode=mode)) / float(kernel.cos(value, mode=mode))
            tolerance = trig_tolerance(kernel) * max(1.0, expected * expected)
            assert abs(float(result) - expected) <= tolerance, value

    @pytest.mark.parametrize("multiple", [0, 1, 2, -1, 3, 10])
    def test_multiples_of_pi_are_zero(
        self, kernel: PrecisionKernel, mode: EvaluationMode, multiple: int
    ) -> None:
        """Tolerant multiples of π give exactly 0."""
        value = kernel.scalar(multiple) * kernel.pi
        assert kernel.tan(value, mode=mode) == 0

    @pytest.mark.parametrize("odd", [1, 3, -1, -3, 5])
    def test_poles_are_nan(self, kernel: PrecisionKernel, mode: EvaluationMode, odd: int) -> None:
        """Odd multiples of π/2 are singular."""
        value = kernel.scalar(odd) * kernel.half_pi
        assert np.isnan(kernel.tan(value, mode=mode))

    def test_near_pole_is_nan(self, kernel: PrecisionKernel, mode: EvaluationMode) -> None:
        """Within epsilon of a pole counts as the pole."""
        value = float(kernel.half_pi) + float(kernel.epsilon) / 4
        assert np.isnan(kernel.tan(value, mode=mode))

    @pytest.mark.parametrize("value", NON_FINITE)
    def test_non_finite_is_nan(
        self, kernel: PrecisionKernel, mode: EvaluationMode, value: float
    ) -> None:
        """NaN and infinities give NaN."""
        assert np.isnan(kernel.tan(value, mode=mode))

    def test_quarter_pi(self, kernel: PrecisionKernel, mode: EvaluationMode) -> None:
        """tan(π/4) = 1."""
        result = kernel.tan(kernel.quarter_pi, mode=mode)
        assert abs(float(result) - 1.0) <= trig_tolerance(kernel)


class TestMaclaurinSine:
    """Tests for the series summation itself."""

    def test_converges_for_reduced_arguments(self) -> None:
        """Terms reach zero well before the cap for arguments in [0, 2π)."""
        constants = get_constants("fp64")
        result = maclaurin_sine(np.float64(6.2), constants)
        assert abs(float(result) - math.sin(6.2)) <= 1e-8

    @pytest.mark.parametrize("fmt", ["fp64", "fp32"])
    def test_converged_term_is_summed(self, fmt: str) -> None:
        """The first tolerant-zero term still contributes, keeping the sum within epsilon."""
        constants = get_constants(fmt)
        for value in np.linspace(0.0, 6.25, 26):
            x = constants.scalar(value)
            result = maclaurin_sine(x, constants)
            assert abs(float(result) - math.sin(float(x))) <= float(constants.epsilon) / 2, value

    def test_large_argument_stops_on_overflow(self) -> None:
        """An unreduced large argument stops at the first non-finite term."""
        constants = get_constants("fp32")
        result = maclaurin_sine(np.float32(500.0), constants)
        assert np.isfinite(result)

    def test_cap(self) -> None:
        """The hard cap bounds the work."""
        assert MAX_SERIES_TERMS == 1000


class TestAngleConversion:
    """Tests for degrees_to_radians and radians_to_degrees."""

    @pytest.mark.parametrize(
        "degrees,radians",
        [(90.0, 1.5707963), (0.0, 0.0), (-90.0, -1.5707963), (450.0, 7.8539816), (180.0, math.pi)],
    )
    def test_degrees_to_radians(
        self, kernel: PrecisionKernel, degrees: float, radians: float
    ) -> None:
        """Known conversions."""
        assert abs(float(kernel.degrees_to_radians(degrees)) - radians) <= 1e-5

    @pytest.mark.parametrize(
        "radians,degrees",
        [(1.570, 89.954), (0.0, 0.0), (-1.570, -89.954), (7.854, 450.0)],
    )
    def test_radians_to_degrees(
        self, kernel: PrecisionKernel, radians: float, degrees: float
    ) -> None:
        """Reference conversions, to one decimal."""
        assert float(kernel.radians_to_degrees(radians)) == pytest.approx(degrees, abs=0.1)

    @pytest.mark.parametrize("value", [0.0, 0.5, -1.25, 3.0, 6.0, -6.2])
    def test_round_trip(self, kernel: PrecisionKernel, value: float) -> None:
        """degrees_to_radians(radians_to_degrees(v)) ~= v."""
        assert kernel.equals(kernel.degrees_to_radians(kernel.radians_to_degrees(value)), value)

    def test_fp32_stays_fp32(self) -> None:
        """Conversions happen in the kernel's width."""
        assert type(fp32.degrees_to_radians(90)) is np.float32
