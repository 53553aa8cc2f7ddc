"""Tests for the series, continued fraction and polynomial kernels."""

import math

import mpmath
import pytest

from gamma_beta.core.errors import ConvergenceError
from gamma_beta.core.series import (
    sum_series,
    kahan_sum_series,
    evaluate,
    value,
    value_with_leading_term,
    evaluate_polynomial,
    evaluate_rational,
)

ULP_ONE = 2.0 ** -52


class LogApXSeries:
    """log(a+x) - log(a) = 2 [z + z^3/3 + z^5/5 + ...], z = x / (2a + x)."""

    def __init__(self, a, x):
        z = x / (2 * a + x)
        self.next = z
        self.z2 = z * z
        self.n = 1

    def next_term(self):
        r = self.next / self.n
        self.next *= self.z2
        self.n += 2
        return 2 * r


class Log1pmxSeries:
    """log(1+x) - x = -x^2/2 + x^3/3 - x^4/4 + ..."""

    def __init__(self, x):
        self.x = x
        self.next = x
        self.n = 1

    def next_term(self):
        self.next *= -self.x
        self.n += 1
        return self.next / self.n


class ConstantFraction:
    """Continued fraction with constant coefficients (a, b)."""

    def __init__(self, a, b):
        self.a = a
        self.b = b

    def next_coefficients(self):
        return self.a, self.b


# -----------------------------------------------------------------------------
# Summation
# -----------------------------------------------------------------------------

class TestSumSeries:
    """Test plain and Kahan summation kernels."""

    @pytest.mark.parametrize("kernel", [sum_series, kahan_sum_series])
    @pytest.mark.parametrize("x", [0.5, 0.2])
    @pytest.mark.parametrize("eps", [1e-6, 1e-10, ULP_ONE])
    def test_log1p(self, kernel, x, eps):
        expected = math.log1p(x)
        actual = kernel(LogApXSeries(1, x), eps, 1000)
        assert actual == pytest.approx(expected, rel=eps, abs=0)

    @pytest.mark.parametrize("kernel", [sum_series, kahan_sum_series])
    @pytest.mark.parametrize("x", [0.5, 0.2])
    def test_initial_value(self, kernel, x):
        a = 2.5
        expected = math.log(a + x)
        actual = kernel(LogApXSeries(a, x), 1e-10, 1000, math.log(a))
        assert actual == pytest.approx(expected, rel=1e-10, abs=0)

    @pytest.mark.parametrize("kernel", [sum_series, kahan_sum_series])
    def test_too_few_terms_raises(self, kernel):
        """Three terms do not reach machine precision for x = 0.01."""
        x = 0.01
        assert kernel(LogApXSeries(1, x), ULP_ONE, 50) == pytest.approx(math.log1p(x), rel=ULP_ONE)
        with pytest.raises(ConvergenceError) as info:
            kernel(LogApXSeries(1, x), ULP_ONE, 3)
        assert info.value.max_iterations == 3

    @pytest.mark.parametrize("kernel", [sum_series, kahan_sum_series])
    @pytest.mark.parametrize("eps", [0.0, math.nan, -0.123])
    def test_invalid_epsilon_uses_floor(self, kernel, eps):
        x = 0.01
        expected = math.log1p(x)
        actual = kernel(LogApXSeries(1, x), eps, 50)
        assert abs(actual - expected) <= math.ulp(expected)

    def test_convergence_error_is_arithmetic_error(self):
        with pytest.raises(ArithmeticError):
            sum_series(LogApXSeries(1, 0.5), ULP_ONE, 2)

    @pytest.mark.parametrize("x", [-0.5, -0.84130859375])
    def test_kahan_is_closer_under_cancellation(self, x):
        """Alternating terms: compensated sum is at least as accurate."""
        with mpmath.workdps(50):
            expected = float(mpmath.log1p(x) - x)
        s1 = sum_series(Log1pmxSeries(x), ULP_ONE, 10_000_000)
        s2 = kahan_sum_series(Log1pmxSeries(x), ULP_ONE, 10_000_000)
        e1 = abs(s1 - expected)
        e2 = abs(s2 - expected)
        assert e2 <= e1
        assert e2 <= 16 * math.ulp(expected)


# -----------------------------------------------------------------------------
# Continued fractions
# -----------------------------------------------------------------------------

class TestContinuedFraction:
    """Test the modified Lentz evaluator."""

    GOLDEN_RATIO = (1 + math.sqrt(5)) / 2

    def test_golden_ratio(self):
        """1 + 1/(1 + 1/(1 + ...)) = phi."""
        result = value(ConstantFraction(1.0, 1.0), ULP_ONE, 100)
        assert result == pytest.approx(self.GOLDEN_RATIO, rel=1e-15)

    def test_evaluate_with_explicit_b0(self):
        result = evaluate(1.0, ConstantFraction(1.0, 1.0), ULP_ONE, 100)
        assert result == pytest.approx(self.GOLDEN_RATIO, rel=1e-15)

    def test_sqrt_two_with_leading_term(self):
        """sqrt(2) = 1 + 1/(2 + 1/(2 + ...))."""
        result = value_with_leading_term(1.0, ConstantFraction(1.0, 2.0), ULP_ONE, 100)
        assert result == pytest.approx(math.sqrt(2), rel=1e-15)

    @pytest.mark.parametrize("eps", [0.0, -1.0, 0.75, math.nan])
    def test_epsilon_outside_range_uses_default(self, eps):
        result = value(ConstantFraction(1.0, 1.0), eps, 100)
        assert result == pytest.approx(self.GOLDEN_RATIO, rel=1e-15)

    def test_loose_epsilon_stops_early(self):
        result = value(ConstantFraction(1.0, 1.0), 1e-3, 100)
        assert result == pytest.approx(self.GOLDEN_RATIO, rel=1e-2)

    def test_iteration_limit(self):
        with pytest.raises(ConvergenceError) as info:
            value(ConstantFraction(1.0, 1.0), ULP_ONE, 2)
        assert info.value.max_iterations == 2

    def test_divergence(self):
        """An infinite coefficient cannot converge."""
        with pytest.raises(ConvergenceError):
            evaluate(1.0, ConstantFraction(1.0, math.inf), ULP_ONE, 100)


# -----------------------------------------------------------------------------
# Polynomials
# -----------------------------------------------------------------------------

class TestPolynomial:
    """Test Horner evaluation."""

    @pytest.mark.parametrize("x", [0.0, -1.0, 2.0, -3.0, 4.0])
    def test_cubic(self, x):
        c = [7.0, -5.0, 2.0, 4.0]
        assert evaluate_polynomial(c, x) == 4 * x ** 3 + 2 * x ** 2 - 5 * x + 7

    @pytest.mark.parametrize("x", [0.0, -1.0, 2.0])
    def test_constant(self, x):
        assert evaluate_polynomial([-0.12345], x) == -0.12345

    def test_empty_raises(self):
        with pytest.raises(IndexError):
            evaluate_polynomial([], 1.0)

    @pytest.mark.parametrize("x", [0.25, -0.5, 3.0, -40.0, 1e200])
    def test_rational(self, x):
        """(1 + 2x + 3x^2) / (4 + 5x + 6x^2) without overflow for large x."""
        num = [1.0, 2.0, 3.0]
        den = [4.0, 5.0, 6.0]
        with mpmath.workdps(30):
            mx = mpmath.mpf(x)
            expected = float((1 + 2 * mx + 3 * mx ** 2) / (4 + 5 * mx + 6 * mx ** 2))
        assert evaluate_rational(num, den, x) == pytest.approx(expected, rel=1e-14)
