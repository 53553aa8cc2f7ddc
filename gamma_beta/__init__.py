"""
gamma_beta - gamma and beta special functions

Evaluates the gamma function family (Gamma, log Gamma, incomplete gamma P/Q,
gamma ratios) and the beta function family (B, incomplete beta I_x and
derivatives) to near machine precision across the double-precision range,
with digamma, trigamma and the scaled and inverse error functions alongside.

Conventions:
- Domain errors return NaN; nothing raises for an out-of-domain argument
- Overflow returns +inf, underflow returns 0
- Iterative methods raise ConvergenceError when the Policy iteration limit
  is exhausted
- Every function takes an optional Policy; None selects the default
"""

__version__ = "1.0.0"
__author__ = "gamma_beta developers"

from .core.errors import ConvergenceError
from .core.models import Policy, GammaMethod, BetaMethod
from .core.gamma import (
    LogGamma,
    gamma,
    log_gamma,
    gamma1pm1,
    log_gamma1p,
    inv_gamma1pm1,
    digamma,
    trigamma,
    erfcx,
    erf_inv,
    erfc_inv,
    incomplete_gamma_lower,
    incomplete_gamma_upper,
    regularized_gamma_p,
    regularized_gamma_q,
    regularized_gamma_p_derivative,
    gamma_ratio,
    gamma_delta_ratio,
)
from .core.beta import (
    beta,
    log_beta,
    incomplete_beta,
    incomplete_beta_complement,
    regularized_incomplete_beta,
    regularized_incomplete_beta_complement,
    incomplete_beta_derivative,
    binomial_coefficient,
    factorial,
)

__all__ = [
    # Version
    "__version__",

    # Errors and configuration
    "ConvergenceError",
    "Policy",
    "GammaMethod",
    "BetaMethod",

    # Gamma
    "LogGamma",
    "gamma",
    "log_gamma",
    "gamma1pm1",
    "log_gamma1p",
    "inv_gamma1pm1",
    "digamma",
    "trigamma",
    "erfcx",
    "erf_inv",
    "erfc_inv",
    "incomplete_gamma_lower",
    "incomplete_gamma_upper",
    "regularized_gamma_p",
    "regularized_gamma_q",
    "regularized_gamma_p_derivative",
    "gamma_ratio",
    "gamma_delta_ratio",

    # Beta
    "beta",
    "log_beta",
    "incomplete_beta",
    "incomplete_beta_complement",
    "regularized_incomplete_beta",
    "regularized_incomplete_beta_complement",
    "incomplete_beta_derivative",
    "binomial_coefficient",
    "factorial",
]
