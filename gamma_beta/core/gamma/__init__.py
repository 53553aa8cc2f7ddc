"""Gamma function family: complete, incomplete and ratios."""

from .complete import LogGamma, gamma, log_gamma, gamma1pm1, log_gamma1p, inv_gamma1pm1
from .digamma import digamma, trigamma
from .erf import erfcx, erf_inv, erfc_inv
from .incomplete import (
    incomplete_gamma_lower,
    incomplete_gamma_upper,
    regularized_gamma_p,
    regularized_gamma_q,
    regularized_gamma_p_derivative,
    select_gamma_method,
)
from .ratio import gamma_ratio, gamma_delta_ratio

__all__ = [
    # Complete
    "LogGamma",
    "gamma",
    "log_gamma",
    "gamma1pm1",
    "log_gamma1p",
    "inv_gamma1pm1",

    # Derivatives of log gamma
    "digamma",
    "trigamma",

    # Error functions
    "erfcx",
    "erf_inv",
    "erfc_inv",

    # Incomplete
    "incomplete_gamma_lower",
    "incomplete_gamma_upper",
    "regularized_gamma_p",
    "regularized_gamma_q",
    "regularized_gamma_p_derivative",
    "select_gamma_method",

    # Ratios
    "gamma_ratio",
    "gamma_delta_ratio",
]
