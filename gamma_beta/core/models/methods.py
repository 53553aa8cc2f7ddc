"""gamma_beta.core.models.methods

Evaluation method tags for the incomplete gamma and incomplete beta
dispatchers.

The dispatchers classify their arguments into one of these tags with a pure
function and then look the tag up in a handler table, so each regime can be
exercised on its own.
"""

from __future__ import annotations

from enum import Enum


class GammaMethod(Enum):
    """Incomplete gamma evaluation method."""
    FINITE_SUM = "finite_sum"
    FINITE_HALF_SUM = "finite_half_sum"
    LOWER_SERIES = "lower_series"
    SMALL_A_UPPER = "small_a_upper"
    CONTINUED_FRACTION = "continued_fraction"
    TEMME = "temme"
    SMALL_X = "small_x"
    ASYMPTOTIC_LARGE_X = "asymptotic_large_x"

    @classmethod
    def from_string(cls, s: str) -> "GammaMethod":
        """Create GammaMethod from string (case-insensitive)."""
        s_lower = s.lower().strip()
        for method in cls:
            if method.value == s_lower:
                return method
        raise ValueError(f"Unknown gamma method: {s}")


class BetaMethod(Enum):
    """Incomplete beta evaluation method."""
    SERIES = "series"
    SMALL_B_LARGE_A = "small_b_large_a"
    A_STEP_SERIES = "a_step_series"
    B_STEP_SERIES = "b_step_series"
    DOUBLE_STEP_SERIES = "double_step_series"
    BINOMIAL_SUM = "binomial_sum"
    CONTINUED_FRACTION = "continued_fraction"

    @classmethod
    def from_string(cls, s: str) -> "BetaMethod":
        """Create BetaMethod from string (case-insensitive)."""
        s_lower = s.lower().strip()
        for method in cls:
            if method.value == s_lower:
                return method
        raise ValueError(f"Unknown beta method: {s}")
