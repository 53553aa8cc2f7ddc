"""Beta function family and binomial coefficients."""

from .complete import beta, log_beta
from .incomplete import (
    BetaSelection,
    incomplete_beta,
    incomplete_beta_complement,
    regularized_incomplete_beta,
    regularized_incomplete_beta_complement,
    incomplete_beta_derivative,
    select_beta_method,
)
from .binomial import binomial_coefficient, factorial

__all__ = [
    # Complete
    "beta",
    "log_beta",

    # Incomplete
    "BetaSelection",
    "incomplete_beta",
    "incomplete_beta_complement",
    "regularized_incomplete_beta",
    "regularized_incomplete_beta_complement",
    "incomplete_beta_derivative",
    "select_beta_method",

    # Combinatorics
    "binomial_coefficient",
    "factorial",
]
