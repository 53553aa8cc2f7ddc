"""gamma_beta.core.gamma.digamma

Digamma and trigamma functions, the first two logarithmic derivatives of
Gamma.

Positive arguments are shifted up with the recurrences

    psi(x) = psi(x + 1) - 1/x
    psi'(x) = psi'(x + 1) + 1/x^2

until x >= 12, where the asymptotic expansions in Bernoulli numbers are
accurate to a few ulp. Negative arguments use the reflection formulas

    psi(x) = psi(1 - x) - pi / tan(pi x)
    psi'(x) = pi^2 / sin^2(pi x) - psi'(1 - x)

Digamma is accurate to a few ulp in absolute terms near its positive root
x = 1.4616...; elsewhere the error is relative.

References:
- Abramowitz and Stegun, 6.3.18 and 6.4.12.
"""

from __future__ import annotations

import math

from ..series.polynomial import evaluate_polynomial

# Below this the recurrences are applied
_ASYMPTOTIC_MIN = 12.0

# psi(x) = ln x - 1/(2x) - sum B_2k / (2k x^2k), as a polynomial in 1/x^2
_DIGAMMA_SERIES = (
    0.0,
    1.0 / 12,
    -1.0 / 120,
    1.0 / 252,
    -1.0 / 240,
    1.0 / 132,
    -691.0 / 32760,
    1.0 / 12,
)

# psi'(x) = 1/x + 1/(2x^2) + sum B_2k / x^(2k+1), as (1/x) * polynomial in 1/x^2
_TRIGAMMA_SERIES = (
    1.0,
    1.0 / 6,
    -1.0 / 30,
    1.0 / 42,
    -1.0 / 30,
    5.0 / 66,
    -691.0 / 2730,
    7.0 / 6,
)


def _reduce(x: float) -> float:
    # x minus the nearest integer, exact for doubles
    return x - math.floor(x + 0.5)


def digamma(x: float) -> float:
    """Digamma function psi(x) = Gamma'(x) / Gamma(x).

    Args:
        x: argument

    Returns:
        psi(x); NaN for poles (0, -1, -2, ...), NaN and -inf
    """
    if math.isnan(x) or x == -math.inf:
        return math.nan
    if x == math.inf:
        return math.inf

    if x <= 0:
        if x == math.floor(x):
            return math.nan
        return digamma(1 - x) - math.pi / math.tan(math.pi * _reduce(x))

    result = 0.0
    while x < _ASYMPTOTIC_MIN:
        result -= 1 / x
        x += 1
    z = 1 / (x * x)
    result += math.log(x) - 0.5 / x - evaluate_polynomial(_DIGAMMA_SERIES, z)
    return result


def trigamma(x: float) -> float:
    """Trigamma function psi'(x), the derivative of digamma.

    Args:
        x: argument

    Returns:
        psi'(x); +inf at the poles (0, -1, -2, ...); NaN for NaN and -inf
    """
    if math.isnan(x) or x == -math.inf:
        return math.nan
    if x == math.inf:
        return 0.0

    if x <= 0:
        if x == math.floor(x):
            return math.inf
        t = math.pi / math.sin(math.pi * _reduce(x))
        return t * t - trigamma(1 - x)

    result = 0.0
    while x < _ASYMPTOTIC_MIN:
        result += 1 / x / x
        x += 1
    z = 1 / (x * x)
    result += (evaluate_polynomial(_TRIGAMMA_SERIES, z) / x) + 0.5 * z
    return result
