"""Series, continued fraction and polynomial kernels."""

from .summation import TermGenerator, sum_series, kahan_sum_series
from .continued_fraction import CoefficientGenerator, evaluate, value, value_with_leading_term
from .polynomial import evaluate_polynomial, evaluate_rational

__all__ = [
    "TermGenerator",
    "sum_series",
    "kahan_sum_series",
    "CoefficientGenerator",
    "evaluate",
    "value",
    "value_with_leading_term",
    "evaluate_polynomial",
    "evaluate_rational",
]
