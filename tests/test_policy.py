"""Tests for the convergence Policy and method tags."""

import math

import pytest

from gamma_beta.core.models.policy import Policy, MACHINE_EPSILON, resolve
from gamma_beta.core.models.methods import GammaMethod, BetaMethod


class TestPolicy:
    """Test Policy defaults, validation and serialization."""

    def test_defaults(self):
        """Default policy targets 2^-53 with a million iterations."""
        p = Policy()
        assert p.epsilon == 2.0 ** -53
        assert p.max_iterations == 1_000_000

    @pytest.mark.parametrize("eps", [0.0, -0.123, math.nan])
    def test_unusable_epsilon_is_clamped(self, eps):
        """Non-positive or NaN epsilon falls back to machine epsilon."""
        assert Policy(epsilon=eps).epsilon == MACHINE_EPSILON

    @pytest.mark.parametrize("n", [0, -1])
    def test_max_iterations_must_be_positive(self, n):
        """Fewer than one iteration is rejected."""
        with pytest.raises(ValueError):
            Policy(max_iterations=n)

    def test_frozen(self):
        """Policies are immutable."""
        p = Policy()
        with pytest.raises(AttributeError):
            p.epsilon = 1e-3

    def test_with_copies(self):
        """with_* return modified copies and leave the original untouched."""
        p = Policy()
        q = p.with_epsilon(1e-10).with_max_iterations(50)
        assert q.epsilon == 1e-10
        assert q.max_iterations == 50
        assert p.max_iterations == 1_000_000

    def test_dict_roundtrip(self):
        """to_dict / from_dict preserve the settings."""
        p = Policy(epsilon=1e-12, max_iterations=321)
        assert Policy.from_dict(p.to_dict()) == p

    def test_from_dict_missing_keys(self):
        """Missing keys use the defaults."""
        assert Policy.from_dict({}) == Policy()

    def test_resolve(self):
        """None resolves to the shared default."""
        assert resolve(None) is Policy.default()
        custom = Policy(max_iterations=10)
        assert resolve(custom) is custom

    def test_high_precision(self):
        """High precision policy uses the Kahan floor."""
        assert Policy.high_precision().epsilon == 2.0 ** -62


class TestMethodTags:
    """Test method enum parsing."""

    def test_gamma_method_from_string(self):
        assert GammaMethod.from_string("Temme") == GammaMethod.TEMME
        assert GammaMethod.from_string(" continued_fraction ") == GammaMethod.CONTINUED_FRACTION

    def test_beta_method_from_string(self):
        assert BetaMethod.from_string("BINOMIAL_SUM") == BetaMethod.BINOMIAL_SUM

    def test_unknown_method(self):
        with pytest.raises(ValueError):
            BetaMethod.from_string("simpson")
