"""Tests for the incomplete gamma functions."""

import math

import mpmath
import numpy as np
import pytest

from gamma_beta.core.errors import ConvergenceError
from gamma_beta.core.models.policy import Policy
from gamma_beta.core.gamma.complete import gamma
from gamma_beta.core.gamma.incomplete import (
    incomplete_gamma_lower,
    incomplete_gamma_upper,
    large_x_asymptotic,
    regularized_gamma_p,
    regularized_gamma_q,
    regularized_gamma_p_derivative,
)

mpmath.mp.dps = 40

SHAPES = [0.25, 0.5, 1.0, 2.5, 7.0, 25.0, 110.0, 600.0]
FACTORS = [0.1, 0.5, 0.9, 1.0, 1.1, 2.0, 5.0]


def _mp_p(a, x):
    return float(mpmath.gammainc(a, 0, x, regularized=True))


def _mp_q(a, x):
    return float(mpmath.gammainc(a, x, mpmath.inf, regularized=True))


# -----------------------------------------------------------------------------
# Regularized P and Q
# -----------------------------------------------------------------------------

class TestRegularizedGamma:
    """Test P(a, x) and Q(a, x)."""

    @pytest.mark.parametrize(
        "expected_p, expected_q, a, x",
        [
            (0.0, 1.0, 1.0, 0.0),
            (0.63212055882855767840, 0.36787944117144232160, 1.0, 1.0),
            (0.080301397071394196011, 0.91969860292860580399, 3.0, 1.0),
            (0.877050191685244, 0.1229498083147559, 0.52, 1.23),
            (0.01101451006216559, 0.988985489937834, 46.34, 32.18),
            (1.0, 1.0922956375456871032e-43, 10.0, 130.0),
            (7.6002090267819442301e-95, 1.0, 130.0, 10.0),
        ],
    )
    def test_known_values(self, expected_p, expected_q, a, x):
        p = regularized_gamma_p(a, x)
        q = regularized_gamma_q(a, x)
        assert p == pytest.approx(expected_p, rel=1e-13, abs=1e-15)
        assert q == pytest.approx(expected_q, rel=1e-13, abs=1e-15)
        assert p + q == pytest.approx(1.0, abs=1e-15)

    def test_tiny_values_are_relative_accurate(self):
        assert regularized_gamma_q(10.0, 130.0) == pytest.approx(1.0922956375456871032e-43, rel=1e-13, abs=0)
        assert regularized_gamma_p(130.0, 10.0) == pytest.approx(7.6002090267819442301e-95, rel=1e-13, abs=0)

    @pytest.mark.parametrize("a", [1e-18, 5e-324])
    def test_a_close_to_zero(self, a):
        """The result is clipped to [0, 1]."""
        assert regularized_gamma_p(a, 0.5) == pytest.approx(1.0, abs=1e-15)
        assert regularized_gamma_q(a, 0.5) == pytest.approx(0.0, abs=1e-15)

    @pytest.mark.parametrize("a", SHAPES)
    @pytest.mark.parametrize("factor", FACTORS)
    def test_against_mpmath(self, a, factor):
        x = a * factor
        assert regularized_gamma_p(a, x) == pytest.approx(_mp_p(a, x), rel=1e-11)
        assert regularized_gamma_q(a, x) == pytest.approx(_mp_q(a, x), rel=1e-11)

    @pytest.mark.parametrize("a", SHAPES)
    @pytest.mark.parametrize("factor", FACTORS)
    def test_p_plus_q_is_one(self, a, factor):
        x = a * factor
        assert regularized_gamma_p(a, x) + regularized_gamma_q(a, x) == pytest.approx(1.0, abs=1e-14)

    @pytest.mark.parametrize("a, x", [(5.0, 2.5), (5.5, 2.5), (0.5, 1e-9), (3.0, 1e-12), (20.0, 2000.0),
                                      (1e4, 1.01e4), (1e6, 999_000.0), (0.5, 1500.0)])
    def test_regimes_against_mpmath(self, a, x):
        """Finite sums, small x, Temme and the large x expansion."""
        assert regularized_gamma_p(a, x) == pytest.approx(_mp_p(a, x), rel=1e-11)
        assert regularized_gamma_q(a, x) == pytest.approx(_mp_q(a, x), rel=1e-11)

    @pytest.mark.parametrize("a", np.geomspace(1e-3, 1e4, 12))
    def test_boundaries(self, a):
        a = float(a)
        assert regularized_gamma_p(a, 0.0) == 0.0
        assert regularized_gamma_q(a, 0.0) == 1.0
        assert regularized_gamma_p(a, math.inf) == 1.0
        assert regularized_gamma_q(a, math.inf) == 0.0

    @pytest.mark.parametrize("a, x", [(-1.0, 1.0), (0.0, 1.0), (1.0, -1.0), (math.nan, 1.0),
                                      (1.0, math.nan), (math.inf, 1.0), (-math.inf, 1.0)])
    def test_domain_returns_nan(self, a, x):
        assert math.isnan(regularized_gamma_p(a, x))
        assert math.isnan(regularized_gamma_q(a, x))
        assert math.isnan(incomplete_gamma_lower(a, x))
        assert math.isnan(incomplete_gamma_upper(a, x))


# -----------------------------------------------------------------------------
# Policy
# -----------------------------------------------------------------------------

class TestPolicy:
    """Test the iteration limit and tolerance of the evaluators."""

    def test_lower_series_iteration_limit(self):
        a, x = 13.0, 10.0
        assert regularized_gamma_p(a, x) == pytest.approx(0.20844352360512566106, abs=1e-15)
        with pytest.raises(ConvergenceError):
            regularized_gamma_p(a, x, Policy(epsilon=1e-15, max_iterations=3))

    def test_continued_fraction_iteration_limit(self):
        a, x = 10.3, 13.0
        assert regularized_gamma_q(a, x) == pytest.approx(_mp_q(a, x), rel=1e-13)
        with pytest.raises(ConvergenceError):
            regularized_gamma_q(a, x, Policy(epsilon=1e-15, max_iterations=3))

    def test_single_iteration_raises(self):
        with pytest.raises(ConvergenceError):
            regularized_gamma_p(1.0, 1.0, Policy(max_iterations=1))

    def test_finite_sum_needs_no_iterations(self):
        """Integer a uses a closed form that ignores the iteration limit."""
        q = regularized_gamma_q(10.0, 13.0, Policy(max_iterations=1))
        assert q == pytest.approx(0.16581187661729210469, abs=1e-15)

    def test_loose_tolerance(self):
        loose = regularized_gamma_p(13.0, 10.0, Policy(epsilon=1e-6))
        assert loose == pytest.approx(0.20844352360512566106, rel=1e-5)

    def test_tighter_tolerance_does_not_worsen(self):
        expected = 0.20844352360512566106
        default = regularized_gamma_p(13.0, 10.0)
        tight = regularized_gamma_p(13.0, 10.0, Policy.high_precision())
        assert abs(tight - expected) <= abs(default - expected) + 2 * math.ulp(expected)

    def test_large_x_series_stalls_for_equal_huge_arguments(self):
        """With a = x = 1e20 every term rounds to 1 and the sum never settles."""
        with pytest.raises(ConvergenceError):
            large_x_asymptotic(1e20, 1e20, Policy(max_iterations=1000))


# -----------------------------------------------------------------------------
# Unnormalised integrals
# -----------------------------------------------------------------------------

class TestIncompleteGamma:
    """Test the lower and upper incomplete gamma integrals."""

    @pytest.mark.parametrize("a, x", [(0.01, 1.0), (0.5, 0.25), (1.0, 1.0), (2.5, 4.0), (6.0, 3.0),
                                      (30.5, 40.0), (100.0, 90.0), (171.0, 171.0)])
    def test_against_mpmath(self, a, x):
        assert incomplete_gamma_lower(a, x) == pytest.approx(float(mpmath.gammainc(a, 0, x)), rel=1e-11)
        assert incomplete_gamma_upper(a, x) == pytest.approx(float(mpmath.gammainc(a, x)), rel=1e-11)

    def test_large_a_upper_in_logs(self):
        a, x = 200.0, 1000.0
        assert incomplete_gamma_upper(a, x) == pytest.approx(float(mpmath.gammainc(a, x)), rel=1e-11)

    def test_large_a_lower_overflows(self):
        assert incomplete_gamma_lower(200.0, 100.0) == math.inf

    def test_zero_limit(self):
        assert incomplete_gamma_lower(2.5, 0.0) == 0.0
        assert incomplete_gamma_upper(2.5, 0.0) == pytest.approx(float(mpmath.gamma(2.5)), rel=1e-14)

    @pytest.mark.parametrize("a", [0.5, 3.0, 12.5, 170.5, 200.0, 1e5])
    def test_infinite_limit(self, a):
        """upper(a, inf) = 0 and lower(a, inf) = Gamma(a), including a >= 170."""
        assert incomplete_gamma_upper(a, math.inf) == 0.0
        assert incomplete_gamma_lower(a, math.inf) == gamma(a)

    def test_exponential_identity(self):
        """upper(1, x) = exp(-x)."""
        for x in [0.1, 1.0, 5.0, 40.0]:
            assert incomplete_gamma_upper(1.0, x) == pytest.approx(math.exp(-x), rel=1e-14)


# -----------------------------------------------------------------------------
# Derivative
# -----------------------------------------------------------------------------

class TestDerivative:
    """Test dP/dx."""

    @pytest.mark.parametrize("a, expected", [(2.0, 0.0), (1.0, 1.0), (0.5, math.inf)])
    def test_at_zero(self, a, expected):
        assert regularized_gamma_p_derivative(a, 0.0) == expected

    @pytest.mark.parametrize("a, x", [(0.5, 0.3), (1.0, 2.0), (3.5, 2.0), (50.0, 45.0), (500.0, 480.0)])
    def test_against_mpmath(self, a, x):
        expected = float(mpmath.power(x, a - 1) * mpmath.exp(-x) / mpmath.gamma(a))
        assert regularized_gamma_p_derivative(a, x) == pytest.approx(expected, rel=1e-12)

    def test_prefix_near_underflow(self):
        """exp(-x) is subnormal; the prefix is assembled in pieces."""
        a, x = 5.0, 720.0
        expected = float(mpmath.power(x, a - 1) * mpmath.exp(-x) / mpmath.gamma(a))
        assert regularized_gamma_p_derivative(a, x) == pytest.approx(expected, rel=1e-12, abs=0)

    @pytest.mark.parametrize("a", [0.5, 1.0, 2.0, 300.0])
    def test_at_infinity(self, a):
        assert regularized_gamma_p_derivative(a, math.inf) == 0.0

    def test_policy_is_accepted(self):
        expected = regularized_gamma_p_derivative(3.5, 2.0)
        assert regularized_gamma_p_derivative(3.5, 2.0, Policy(max_iterations=1)) == expected
        assert regularized_gamma_p_derivative(3.5, 2.0, policy=None) == expected

    @pytest.mark.parametrize("a, x", [(0.0, 1.0), (1.0, -1.0), (math.nan, 1.0), (math.inf, 1.0)])
    def test_domain(self, a, x):
        assert math.isnan(regularized_gamma_p_derivative(a, x))
