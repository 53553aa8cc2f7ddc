"""
Core module for the gamma/beta special function engine.

This module contains pure Python implementations with no third-party
dependencies. Every function is pure: it reads only its scalar arguments and
an immutable Policy.
"""

from .errors import ConvergenceError

from .models import Policy, MACHINE_EPSILON, GammaMethod, BetaMethod

from .gamma import (
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

from .beta import (
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
    # Errors
    "ConvergenceError",

    # Models
    "Policy",
    "MACHINE_EPSILON",
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
