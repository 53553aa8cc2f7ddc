"""gamma_beta.core.gamma.erf

Scaled complementary error function and the inverse error functions.

erf and erfc themselves come from the math module; they are
P(1/2, x^2) and Q(1/2, x^2) and the half-integer incomplete gamma already
relies on math.erfc.

Implemented:
- erfcx(x) = exp(x^2) erfc(x): direct product for |x| < 2, Laplace continued
  fraction above, reflection for negative x
- erf_inv(p), erfc_inv(q): normal quantile start refined by Newton steps.
  Each is used where its argument is at most 1/2 so that no digits are lost
  forming 1 - p. erfc_inv works on log(erfc), so q down to the smallest
  subnormal is inverted without underflow

References:
- Abramowitz and Stegun, 7.1.14 (continued fraction for erfc).
- Boost.Math erf.hpp and erf_inv.hpp.
"""

from __future__ import annotations

import math
from statistics import NormalDist
from typing import Optional, Tuple

from ..models.policy import Policy, resolve
from ..series import continued_fraction
from .elementary import ieee_exp

_NORMAL = NormalDist()

# 1 / sqrt(pi)
ONE_DIV_ROOT_PI = 0.5641895835477562869480795
ROOT_PI = 1.772453850905516027298167
SQRT_TWO = 1.414213562373095048801689

# Below this erfcx is exp(x^2) * erfc(x)
_FRACTION_MIN = 2.0

_NEWTON_STEPS = 3


class _ErfcFraction:
    """Coefficients (n/2, x) of x + (1/2)/(x + 1/(x + (3/2)/(x + ...)))."""

    def __init__(self, x: float):
        self.x = x
        self.n = 0

    def next_coefficients(self) -> Tuple[float, float]:
        self.n += 1
        return 0.5 * self.n, self.x


def erfcx(x: float, policy: Optional[Policy] = None) -> float:
    """Scaled complementary error function exp(x^2) erfc(x).

    Args:
        x: argument
        policy: convergence policy for the continued fraction

    Returns:
        exp(x^2) erfc(x); +inf once exp(x^2) overflows for negative x

    Raises:
        ConvergenceError: if the continued fraction does not converge
    """
    if math.isnan(x):
        return math.nan
    if x < 0:
        if x == -math.inf:
            return math.inf
        return 2 * ieee_exp(x * x) - erfcx(-x, policy)
    if x < _FRACTION_MIN:
        return ieee_exp(x * x) * math.erfc(x)
    if x == math.inf:
        return 0.0

    policy = resolve(policy)
    f = continued_fraction.evaluate(x, _ErfcFraction(x), policy.epsilon, policy.max_iterations)
    return ONE_DIV_ROOT_PI / f


def erfc_inv(q: float) -> float:
    """Inverse of the complementary error function.

    Args:
        q: value in [0, 2]

    Returns:
        x with erfc(x) = q; +inf at 0, -inf at 2, NaN outside [0, 2]
    """
    if math.isnan(q) or q < 0 or q > 2:
        return math.nan
    if q == 0:
        return math.inf
    if q == 2:
        return -math.inf
    if q > 1:
        # Exact for q in (1, 2)
        return -erfc_inv(2 - q)
    if q >= 0.5:
        # log(erfc) is too flat near x = 0; 1 - q is exact here
        return erf_inv(1 - q)

    p = 0.5 * q
    if p == 0:
        p = q
    x = -_NORMAL.inv_cdf(p) / SQRT_TWO
    log_q = math.log(q)
    for _ in range(_NEWTON_STEPS):
        # Newton on log(erfc(x)) = log(erfcx(x)) - x^2
        s = erfcx(x)
        x += (math.log(s) - x * x - log_q) * ROOT_PI * s / 2
    return x


def erf_inv(p: float) -> float:
    """Inverse of the error function.

    Args:
        p: value in [-1, 1]

    Returns:
        x with erf(x) = p; +-inf at +-1, NaN outside [-1, 1]
    """
    if math.isnan(p) or abs(p) > 1:
        return math.nan
    if p == 0:
        return p
    if abs(p) > 0.5:
        # 1 - |p| is exact here
        return math.copysign(erfc_inv(1 - abs(p)), p)

    x = _NORMAL.inv_cdf(0.5 + 0.5 * p) / SQRT_TWO
    for _ in range(_NEWTON_STEPS):
        x -= (math.erf(x) - p) * ROOT_PI / 2 * math.exp(x * x)
    return x
