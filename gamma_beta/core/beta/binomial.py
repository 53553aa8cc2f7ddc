"""gamma_beta.core.beta.binomial

Binomial coefficients and factorials in double precision.

binomial_coefficient(n, k) is exact for small n from the factorial table and
uses the beta function for large n:

    C(n, k) = 1 / (k * B(k, n - k + 1))

The beta route is inexact, so the result is rounded to the nearest integer.
Where C(n, k) is just below the largest double the beta route can overflow
and +inf is returned; this is a known limitation of the method.
"""

from __future__ import annotations

import math
import numbers

from ..gamma.constants import FACTORIALS, MAX_FACTORIAL, MAX_VALUE
from ..gamma.elementary import ieee_div
from .complete import beta


def _is_integer(v) -> bool:
    if isinstance(v, bool):
        return False
    if isinstance(v, numbers.Integral):
        return True
    return isinstance(v, float) and v.is_integer()


def _round_to_integer(result: float) -> float:
    if math.isinf(result):
        return result
    return float(math.ceil(result - 0.5))


def binomial_coefficient(n, k) -> float:
    """Number of ways to choose k items from n.

    Args:
        n: size of the set (integer >= 0)
        k: size of the subsets (integer in [0, n])

    Returns:
        C(n, k) as a float; +inf if it exceeds the double range; NaN for
        negative, non-integer or out of range arguments
    """
    if not (_is_integer(n) and _is_integer(k)):
        return math.nan
    n = int(n)
    k = int(k)
    if n < 0 or k < 0 or k > n:
        return math.nan

    m = min(k, n - k)
    if m == 0:
        return 1.0
    if n > MAX_VALUE:
        # C(n, k) >= n for 0 < k < n
        return math.inf
    if m == 1:
        return float(n)
    if m == 2:
        return 0.5 * n * (n - 1)

    if n <= MAX_FACTORIAL:
        result = FACTORIALS[n]
        result /= FACTORIALS[m]
        result /= FACTORIALS[n - m]
    else:
        result = ieee_div(1.0, m * beta(m, n - m + 1))
    return _round_to_integer(result)


def binomial_coefficient_by_summation(n: int, k: int) -> float:
    """C(n, k) for valid n, k computed as a running product.

    More accurate than the beta route for small min(k, n - k) and large n;
    overflow can only occur on the final multiplication. No argument checks.
    """
    m = min(k, n - k)
    if m == 0:
        return 1.0
    if m == 1:
        return float(n)
    if m == 2:
        return 0.5 * n * (n - 1)
    if m == 3:
        # Divide by 3 last to avoid an inexact 1/6
        return 0.5 * n * (n - 1) * (n - 2) / 3

    if n <= MAX_FACTORIAL:
        result = FACTORIALS[n]
        result /= FACTORIALS[m]
        result /= FACTORIALS[n - m]
    else:
        result = 1.0
        for i in range(1, m):
            result *= n - m + i
            result /= i
        if result * n > MAX_VALUE:
            result /= m
            result *= n
        else:
            result *= n
            result /= m
    return _round_to_integer(result)


def factorial(n) -> float:
    """n! for integer n >= 0; +inf above 170, NaN for invalid n."""
    if not _is_integer(n) or n < 0:
        return math.nan
    if n > MAX_FACTORIAL:
        return math.inf
    return FACTORIALS[int(n)]
