"""gamma_beta.core.beta.complete

Complete beta function B(a, b) = Gamma(a) Gamma(b) / Gamma(a + b) and its
logarithm.

B(a, b) is evaluated from the Lanczos sums of a, b and a + b combined with
power terms, so that Gamma(a) and Gamma(b) are never formed. log_beta uses
the DiDonato and Morris asymptotic correction when both arguments are large.

References:
- Boost.Math beta.hpp (beta_imp).
- DiDonato and Morris, "Algorithm 708: Significant digit computation of the
  incomplete beta function ratios", ACM TOMS 18 (1992) (BETALN, ALGDIV,
  BCORR).
"""

from __future__ import annotations

import math

from ..gamma.complete import log_gamma
from ..gamma.constants import EPSILON
from ..gamma.elementary import ieee_exp, ieee_pow
from ..gamma.lanczos import GMH, lanczos_sum_exp_g_scaled


def beta(a: float, b: float) -> float:
    """Beta function B(a, b).

    Args:
        a: first argument (> 0)
        b: second argument (> 0)

    Returns:
        B(a, b); NaN unless both arguments are positive
    """
    if not (a > 0 and b > 0):
        return math.nan

    c = a + b

    if c == a and b < EPSILON:
        return 1 / b
    if c == b and a < EPSILON:
        return 1 / a
    if b == 1:
        return 1 / a
    if a == 1:
        return 1 / b
    if c < EPSILON:
        return (c / a) / b

    # Order so that a >= b
    if a < b:
        a, b = b, a

    agh = a + GMH
    bgh = b + GMH
    cgh = c + GMH
    result = lanczos_sum_exp_g_scaled(a) * (lanczos_sum_exp_g_scaled(b) / lanczos_sum_exp_g_scaled(c))
    ambh = a - 0.5 - b
    if abs(b * ambh) < cgh * 100 and a > 100:
        # Base of the power is close to 1: use (1 + x)^y
        result *= ieee_exp(ambh * math.log1p(-b / cgh))
    else:
        result *= ieee_pow(agh / cgh, ambh)

    if cgh > 1e10:
        result *= ieee_pow((agh / cgh) * (bgh / cgh), b)
    else:
        result *= ieee_pow((agh * bgh) / (cgh * cgh), b)
    result *= math.sqrt(math.e / bgh)
    return result


# ----------------------------
# Log beta
# ----------------------------

_HALF_LOG_TWO_PI = 0.9189385332046727

# Coefficients of the asymptotic correction
# delta(x) = lgamma(x) - (x - 0.5) log(x) + x - 0.5 log(2 pi), in powers of (10/x)^2
_DELTA = (
    .833333333333333333333333333333E-01,
    -.277777777777777777777777752282E-04,
    .793650793650793650791732130419E-07,
    -.595238095238095232389839236182E-09,
    .841750841750832853294451671990E-11,
    -.191752691751854612334149171243E-12,
    .641025640510325475730918472625E-14,
    -.295506514125338232839867823991E-15,
    .179643716359402238723287696452E-16,
    -.139228964661627791231203060395E-17,
    .133802855014020915603275339093E-18,
    -.154246009867966094273710216533E-19,
    .197701992980957427278370133333E-20,
    -.234065664793997056856992426667E-21,
    .171348014966398575409015466667E-22,
)


def _delta_minus_delta_sum(a: float, b: float) -> float:
    # delta(b) - delta(a + b) for 0 <= a <= b and b >= 10
    h = a / b
    p = h / (1 + h)
    q = 1 / (1 + h)
    q2 = q * q

    s = [1.0]
    for _ in range(1, len(_DELTA)):
        s.append(1 + (q + q2 * s[-1]))

    sqrt_t = 10 / b
    t = sqrt_t * sqrt_t
    w = _DELTA[-1] * s[-1]
    for i in range(len(_DELTA) - 2, -1, -1):
        w = t * w + _DELTA[i] * s[i]
    return w * p / b


def _sum_delta_minus_delta_sum(p: float, q: float) -> float:
    # delta(p) + delta(q) - delta(p + q) for p, q >= 10
    a = min(p, q)
    b = max(p, q)
    sqrt_t = 10 / a
    t = sqrt_t * sqrt_t
    z = _DELTA[-1]
    for i in range(len(_DELTA) - 2, -1, -1):
        z = t * z + _DELTA[i]
    return z / a + _delta_minus_delta_sum(a, b)


def _log_gamma_minus_log_gamma_sum(a: float, b: float) -> float:
    # lgamma(b) - lgamma(a + b) for b >= 10
    if a <= b:
        d = b + (a - 0.5)
        w = _delta_minus_delta_sum(a, b)
    else:
        d = a + (b - 0.5)
        w = _delta_minus_delta_sum(b, a)

    u = d * math.log1p(a / b)
    v = a * (math.log(b) - 1)
    if u <= v:
        return (w - u) - v
    return (w - v) - u


def log_beta(a: float, b: float) -> float:
    """Natural logarithm of the beta function.

    Args:
        a: first argument (> 0)
        b: second argument (> 0)

    Returns:
        log B(a, b); NaN unless both arguments are positive
    """
    if math.isnan(a) or math.isnan(b) or a <= 0 or b <= 0:
        return math.nan

    p = min(a, b)
    q = max(a, b)
    if p >= 10:
        w = _sum_delta_minus_delta_sum(p, q)
        h = p / q
        c = h / (1 + h)
        u = -(p - 0.5) * math.log(c)
        v = q * math.log1p(h)
        # Subtract the smaller term first
        if u <= v:
            return (((-0.5 * math.log(q) + _HALF_LOG_TWO_PI) + w) - u) - v
        return (((-0.5 * math.log(q) + _HALF_LOG_TWO_PI) + w) - v) - u

    if q >= 10:
        return log_gamma(p).value + _log_gamma_minus_log_gamma_sum(p, q)

    result = beta(p, q)
    if 0 < result < math.inf:
        return math.log(result)
    return log_gamma(p).value + (log_gamma(q).value - log_gamma(p + q).value)
