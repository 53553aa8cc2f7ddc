"""gamma_beta.core.series.polynomial

Polynomial and rational evaluation with Horner's rule.
"""

from __future__ import annotations

from typing import Sequence


def evaluate_polynomial(coefficients: Sequence[float], x: float) -> float:
    """Evaluate ``c[0] + c[1]*x + ... + c[n]*x^n``.

    Args:
        coefficients: coefficients in order of increasing degree (not empty)
        x: argument

    Returns:
        polynomial value

    Raises:
        IndexError: if ``coefficients`` is empty
    """
    n = len(coefficients)
    total = coefficients[n - 1]
    for i in range(n - 2, -1, -1):
        total = total * x + coefficients[i]
    return total


def evaluate_rational(numerator: Sequence[float], denominator: Sequence[float], x: float) -> float:
    """Evaluate ``N(x) / D(x)`` for polynomials of equal degree.

    For ``|x| > 1`` both polynomials are evaluated in ``1/x`` with reversed
    coefficients so that large arguments cannot overflow the intermediate
    sums.
    """
    if abs(x) <= 1.0:
        return evaluate_polynomial(numerator, x) / evaluate_polynomial(denominator, x)
    z = 1.0 / x
    return evaluate_polynomial(numerator[::-1], z) / evaluate_polynomial(denominator[::-1], z)
