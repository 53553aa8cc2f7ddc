"""Tests for digamma and trigamma."""

import math

import mpmath
import pytest

from gamma_beta.core.gamma.constants import EULER
from gamma_beta.core.gamma.digamma import digamma, trigamma

mpmath.mp.dps = 40

# Positive root of digamma
DIGAMMA_ROOT = 1.4616321449683623


class TestDigamma:
    """Test psi(x)."""

    @pytest.mark.parametrize("x", [1e-10, 0.1, 0.5, 1.0, 2.5, 3.0, 11.9, 12.0, 100.0, 1e6, 1e15,
                                   -0.5, -1.3, -7.25, -100.5])
    def test_against_mpmath(self, x):
        expected = float(mpmath.digamma(x))
        assert digamma(x) == pytest.approx(expected, rel=1e-12, abs=0)

    def test_known_values(self):
        assert digamma(1.0) == pytest.approx(-EULER, abs=2e-15)
        assert digamma(0.5) == pytest.approx(-EULER - 2 * math.log(2.0), rel=1e-14)

    def test_near_root_is_absolute_accurate(self):
        assert abs(digamma(DIGAMMA_ROOT)) < 5e-15

    @pytest.mark.parametrize("x", [0.3, 1.7, 8.0, 40.5])
    def test_recurrence(self, x):
        """psi(x + 1) = psi(x) + 1/x."""
        assert digamma(x + 1) - digamma(x) == pytest.approx(1 / x, rel=1e-12)

    @pytest.mark.parametrize("x", [0.0, -0.0, -1.0, -2.0, -1e6, math.nan, -math.inf])
    def test_poles_and_nan(self, x):
        assert math.isnan(digamma(x))

    def test_infinity(self):
        assert digamma(math.inf) == math.inf


class TestTrigamma:
    """Test psi'(x)."""

    @pytest.mark.parametrize("x", [1e-8, 0.25, 1.0, 2.0, 11.5, 12.0, 50.0, 1e8,
                                   -0.5, -2.7, -30.25])
    def test_against_mpmath(self, x):
        expected = float(mpmath.psi(1, x))
        assert trigamma(x) == pytest.approx(expected, rel=1e-12, abs=0)

    def test_known_values(self):
        assert trigamma(1.0) == pytest.approx(math.pi ** 2 / 6, rel=1e-14)
        assert trigamma(0.5) == pytest.approx(math.pi ** 2 / 2, rel=1e-14)

    def test_tiny_argument(self):
        """psi'(x) ~ 1/x^2; the square overflows without an exception."""
        assert trigamma(1e-100) == pytest.approx(1e200, rel=1e-14)
        assert trigamma(1e-200) == math.inf

    @pytest.mark.parametrize("x", [0.0, -1.0, -4.0])
    def test_poles(self, x):
        assert trigamma(x) == math.inf

    def test_limits(self):
        assert trigamma(math.inf) == 0.0
        assert math.isnan(trigamma(-math.inf))
        assert math.isnan(trigamma(math.nan))
