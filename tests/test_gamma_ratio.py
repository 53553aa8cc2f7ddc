"""Tests for gamma function ratios."""

import math

import mpmath
import pytest

from gamma_beta.core.gamma.complete import gamma
from gamma_beta.core.gamma.ratio import gamma_ratio, gamma_delta_ratio

mpmath.mp.dps = 40


def _mp_ratio(a, b):
    return float(mpmath.gamma(a) / mpmath.gamma(b))


class TestGammaRatio:
    """Test Gamma(a) / Gamma(b)."""

    @pytest.mark.parametrize("a, b", [(0.5, 1.5), (3.0, 7.0), (10.25, 2.5), (150.0, 160.5)])
    def test_direct_quotient(self, a, b):
        assert gamma_ratio(a, b) == pytest.approx(_mp_ratio(a, b), rel=1e-13)

    @pytest.mark.parametrize("a, b", [(200.0, 199.5), (500.0, 490.0), (1000.5, 1001.0), (1e5, 1e5 + 0.5),
                                      (0.5, 171.5), (171.5, 0.75)])
    def test_large_arguments(self, a, b):
        """Sidesteps and the Lanczos delta ratio keep the quotient finite."""
        assert gamma_ratio(a, b) == pytest.approx(_mp_ratio(a, b), rel=1e-11)

    def test_subnormal_numerator(self):
        a = 1e-308
        assert gamma_ratio(a, 2.0) == pytest.approx(1 / a, rel=1e-12)

    @pytest.mark.parametrize("a, b", [(0.0, 1.0), (1.0, 0.0), (-1.0, 2.0), (math.inf, 1.0), (1.0, math.nan)])
    def test_domain(self, a, b):
        assert math.isnan(gamma_ratio(a, b))


class TestGammaDeltaRatio:
    """Test Gamma(z) / Gamma(z + delta)."""

    def test_zero_delta(self):
        assert gamma_delta_ratio(7.5, 0.0) == 1.0

    @pytest.mark.parametrize("z, delta", [(5.0, 3.0), (20.0, -4.0), (2.5, 7.0), (30.5, -12.0)])
    def test_integer_delta(self, z, delta):
        assert gamma_delta_ratio(z, delta) == pytest.approx(_mp_ratio(z, z + delta), rel=1e-14)

    @pytest.mark.parametrize("z, delta", [(0.5, 0.5), (10.0, 0.25), (200.0, 0.5), (1e10, 0.5), (50.0, 45.5),
                                          (1e-20, 2.5), (1e-20, 171.5)])
    def test_against_mpmath(self, z, delta):
        assert gamma_delta_ratio(z, delta) == pytest.approx(_mp_ratio(z, z + delta), rel=1e-11)

    def test_non_positive_argument(self):
        """Falls back to the signed quotient of the complete functions."""
        assert gamma_delta_ratio(-0.5, 2.0) == pytest.approx(gamma(-0.5) / gamma(1.5), rel=1e-14)

    def test_nan(self):
        assert math.isnan(gamma_delta_ratio(math.nan, 1.0))
        assert math.isnan(gamma_delta_ratio(1.0, math.nan))
