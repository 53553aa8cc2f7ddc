"""gamma_beta.core.beta.incomplete

Incomplete beta functions.

    B_x(a, b) = integral_0^x t^(a-1) (1-t)^(b-1) dt
    I_x(a, b) = B_x(a, b) / B(a, b)

and their complements B(a, b) - B_x(a, b) and 1 - I_x(a, b).

As for the incomplete gamma, the arguments are classified into one of
several evaluation methods (:func:`select_beta_method`) and dispatched
through a handler table. Classification may swap to the complementary
parameterisation (a <-> b, x <-> 1 - x) so that the active series stays
short; the invert flag records that the complement has to be taken.

Domain: x in [0, 1]. The regularised forms accept a, b >= 0 (not both
zero); the unnormalised forms need a, b > 0. Anything else returns NaN.

References:
- DiDonato and Morris, "Algorithm 708: Significant digit computation of the
  incomplete beta function ratios", ACM TOMS 18 (1992).
- Boost.Math ibeta (beta.hpp).
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, NamedTuple, Optional, Tuple

from ..gamma.constants import FACTORIALS, LOG_MAX_VALUE, LOG_MIN_VALUE, MIN_NORMAL
from ..gamma.elementary import ieee_exp, ieee_log, ieee_pow, powm1
from ..gamma.incomplete import full_igamma_prefix, regularised_gamma_prefix, regularized_gamma_q
from ..gamma.lanczos import GMH, lanczos_sum_exp_g_scaled
from ..gamma.ratio import gamma_delta_ratio
from ..models.methods import BetaMethod
from ..models.policy import Policy, resolve
from ..series import continued_fraction
from ..series.summation import sum_series
from .binomial import binomial_coefficient_by_summation
from .complete import beta

logger = logging.getLogger(__name__)

_TWO_POW_53 = 2.0 ** 53
_TWO_POW_M53 = 2.0 ** -53

# Number of terms of the BGRAT expansion
_PN_SIZE = 30

# Terms added by the finite a-step before switching to BGRAT
_A_STEP = 20

# Largest a for the binomial sum; bounds the number of terms
_MAX_BINOMIAL_A = 2 ** 31 - 102


# ----------------------------
# Power terms
# ----------------------------

def ibeta_power_terms(a: float, b: float, x: float, y: float, normalised: bool,
                      prefix: float = 1.0) -> float:
    """Compute x^a y^b / B(a, b) (normalised) or x^a y^b (unnormalised).

    Almost all of the error in the incomplete beta comes from here when a
    and b are large. The power terms are combined with the Lanczos
    approximation of the beta function; when a base is close to one the
    power is computed as exp(a * log1p(base - 1)).

    Args:
        a: first argument
        b: second argument
        x: argument in (0, 1)
        y: 1 - x
        normalised: divide by B(a, b)
        prefix: multiplier applied before the power terms (normalised only)
    """
    if not normalised:
        return ieee_pow(x, a) * ieee_pow(y, b)

    c = a + b
    agh = a + GMH
    bgh = b + GMH
    cgh = c + GMH
    result = lanczos_sum_exp_g_scaled(c) / (lanczos_sum_exp_g_scaled(a) * lanczos_sum_exp_g_scaled(b))
    result *= prefix
    # Leftover terms from the Lanczos approximation
    result *= math.sqrt(bgh / math.e)
    result *= math.sqrt(agh / cgh)

    # Bases of the powers minus one
    l1 = (x * b - y * agh) / agh
    l2 = (y * a - x * bgh) / bgh
    if min(abs(l1), abs(l2)) < 0.2:
        if l1 * l2 > 0 or min(a, b) < 1:
            # Both powers move the same way, or one exponent is too small to
            # offset the other: evaluate separately
            if abs(l1) < 0.1:
                result *= ieee_exp(a * math.log1p(l1))
            else:
                result *= ieee_pow((x * cgh) / agh, a)
            if abs(l2) < 0.1:
                result *= ieee_exp(b * math.log1p(l2))
            else:
                result *= ieee_pow((y * cgh) / bgh, b)
        elif max(abs(l1), abs(l2)) < 0.5:
            # Opposite directions with both bases near one. Move one power
            # inside the other:
            #   (1 + l1)^a (1 + l2)^b = (1 + l1 + l3 + l1 l3)^a
            #   where l3 = (1 + l2)^(b/a) - 1
            small_a = a < b
            ratio = b / a
            if (small_a and ratio * l2 < 0.1) or (not small_a and l1 / ratio > 0.1):
                l3 = math.expm1(ratio * math.log1p(l2))
                l3 = l1 + l3 + l3 * l1
                result *= ieee_exp(a * math.log1p(l3))
            else:
                l3 = math.expm1(math.log1p(l1) / ratio)
                l3 = l2 + l3 + l3 * l2
                result *= ieee_exp(b * math.log1p(l3))
        elif abs(l1) < abs(l2):
            # First base near one only
            l = a * math.log1p(l1) + b * ieee_log((y * cgh) / bgh)
            if l <= LOG_MIN_VALUE or l >= LOG_MAX_VALUE:
                result = ieee_exp(l + ieee_log(result))
            else:
                result *= math.exp(l)
        else:
            # Second base near one only
            l = b * math.log1p(l2) + a * ieee_log((x * cgh) / agh)
            if l <= LOG_MIN_VALUE or l >= LOG_MAX_VALUE:
                result = ieee_exp(l + ieee_log(result))
            else:
                result *= math.exp(l)
        return result

    b1 = (x * cgh) / agh
    b2 = (y * cgh) / bgh
    l1 = a * ieee_log(b1)
    l2 = b * ieee_log(b2)
    if (l1 >= LOG_MAX_VALUE or l1 <= LOG_MIN_VALUE
            or l2 >= LOG_MAX_VALUE or l2 <= LOG_MIN_VALUE):
        # Under/overflow: sidestep if possible
        if a < b:
            p1 = ieee_pow(b2, b / a)
            l3 = a * (ieee_log(b1) + ieee_log(p1))
            if LOG_MIN_VALUE < l3 < LOG_MAX_VALUE:
                result *= ieee_pow(p1 * b1, a)
            else:
                result = ieee_exp(l2 + l1 + ieee_log(result))
        else:
            p1 = ieee_pow(b1, a / b)
            l3 = (ieee_log(p1) + ieee_log(b2)) * b
            if LOG_MIN_VALUE < l3 < LOG_MAX_VALUE:
                result *= ieee_pow(p1 * b2, b)
            else:
                result = ieee_exp(l2 + l1 + ieee_log(result))
    else:
        result *= ieee_pow(b1, a) * ieee_pow(b2, b)
    return result


# ----------------------------
# Term and coefficient generators
# ----------------------------

class _IbetaSeries:
    """Terms of sum_n (1-b)_n x^n / (n! (a+n)) scaled by the leading power."""

    def __init__(self, a: float, b: float, x: float, result: float):
        self.a = a
        self.x = x
        self.poch = -b
        self.result = result
        self.n = 0

    def next_term(self) -> float:
        r = self.result / (self.a + self.n)
        self.n += 1
        self.result *= (self.n + self.poch) * self.x / self.n
        return r


class _IbetaFraction2:
    """Coefficients of the DiDonato and Morris continued fraction (BFRAC)."""

    def __init__(self, a: float, b: float, x: float, y: float):
        self.a = a
        self.b = b
        self.x = x
        self.y = y
        self.m = 0

    def next_coefficients(self) -> Tuple[float, float]:
        a, b, x, y, m = self.a, self.b, self.x, self.y, self.m
        a_n = (a + m - 1) * (a + b + m - 1) * m * (b - m) * x * x
        denom = a + 2 * m - 1
        a_n /= denom * denom

        b_n = float(m)
        b_n += (m * (b - m) * x) / (a + 2 * m - 1)
        b_n += ((a + m) * (a * y - b * x + 1 + m * (2 - x))) / (a + 2 * m + 1)

        self.m += 1
        return a_n, b_n


class _IbetaClassicFraction:
    """Coefficients of the classic continued fraction for B_x(a, b)."""

    def __init__(self, a: float, b: float, x: float):
        self.a = a
        self.b = b
        self.x = x
        self.n = 0

    def next_coefficients(self) -> Tuple[float, float]:
        a, b, x = self.a, self.b, self.x
        m = self.n
        k = m // 2
        if m % 2 == 0:
            a_n = (k * (b - k) * x) / ((a + m - 1) * (a + m))
        else:
            a_n = -((a + k) * (a + b + k) * x) / ((a + m - 1) * (a + m))
        self.n += 1
        return a_n, 1.0


# ----------------------------
# Series and fractions
# ----------------------------

def ibeta_series(a: float, b: float, x: float, s0: float, normalised: bool, policy: Policy) -> float:
    """Hypergeometric series for the incomplete beta, summed from ``s0``."""
    if normalised:
        c = a + b
        agh = a + GMH
        bgh = b + GMH
        cgh = c + GMH
        result = lanczos_sum_exp_g_scaled(c) / (lanczos_sum_exp_g_scaled(a) * lanczos_sum_exp_g_scaled(b))

        l1 = math.log(cgh / bgh) * (b - 0.5)
        l2 = math.log(x * cgh / agh) * a
        if LOG_MIN_VALUE < l1 < LOG_MAX_VALUE and LOG_MIN_VALUE < l2 < LOG_MAX_VALUE:
            if a * b < bgh * 10:
                result *= math.exp((b - 0.5) * math.log1p(a / bgh))
            else:
                result *= math.pow(cgh / bgh, b - 0.5)
            result *= math.pow(x * cgh / agh, a)
            result *= math.sqrt(agh / math.e)
        else:
            # Logs cancel here, but the powers would not be representable
            result = ieee_exp(ieee_log(result) + l1 + l2 + (math.log(agh) - 1) / 2)
    else:
        result = ieee_pow(x, a)

    rescale = 1.0
    if result < MIN_NORMAL:
        # The series cannot cope with subnormals; it only depends on the
        # magnitude of result so scale it (and s0) up and back down after
        if s0 + result / a == s0:
            return s0
        s0 *= _TWO_POW_53
        result *= _TWO_POW_53
        rescale = _TWO_POW_M53

    gen = _IbetaSeries(a, b, x, result)
    return sum_series(gen, policy.epsilon, policy.max_iterations, s0) * rescale


def rising_factorial_ratio(a: float, b: float, k: int) -> float:
    """(a)(a+1)...(a+k-1) / ((b)(b+1)...(b+k-1)) for small k."""
    result = 1.0
    for i in range(k):
        result *= (a + i) / (b + i)
    return result


def binomial_term(n: int, k: int, x: float, y: float) -> float:
    """C(n, k) x^k y^(n-k), zero when the coefficient overflows."""
    binom = binomial_coefficient_by_summation(n, k)
    if not math.isfinite(binom):
        # The power terms are zero for such n and k
        return 0.0
    # Multiply the larger power first so a subnormal term is used last
    return binom * math.pow(y, n - k) * math.pow(x, k)


def binomial_ccdf(n: int, k: int, x: float, y: float) -> float:
    """Binomial tail sum_{i=k+1}^{n} C(n, i) x^i y^(n-i)."""
    result = math.pow(x, n)

    if result > MIN_NORMAL:
        term = result
        for i in range(n - 1, k, -1):
            term *= ((i + 1) * y) / ((n - i) * x)
            result += term
        return result

    # The first term underflows: start at the mode and work outwards
    start = int(n * x)
    if start <= k + 1:
        start = k + 2
    result = binomial_term(n, start, x, y)
    if result == 0:
        for i in range(start - 1, k, -1):
            result += binomial_term(n, i, x, y)
        return result

    term = result
    start_term = result
    for i in range(start - 1, k, -1):
        term *= ((i + 1) * y) / ((n - i) * x)
        result += term
    term = start_term
    for i in range(start + 1, n + 1):
        term *= (n - i + 1) * x / (i * y)
        result += term
    return result


def ibeta_a_step(a: float, b: float, x: float, y: float, k: int, normalised: bool) -> float:
    """Difference I_x(a, b) - I_x(a + k, b) (or the unnormalised form)."""
    prefix = ibeta_power_terms(a, b, x, y, normalised)
    prefix /= a
    if prefix == 0:
        return prefix
    total = 1.0
    term = 1.0
    for i in range(k - 1):
        term *= (a + b + i) * x / (a + i + 1)
        total += term
    return prefix * total


def beta_small_b_large_a_series(a: float, b: float, x: float, y: float, s0: float, mult: float,
                                policy: Policy, normalised: bool) -> float:
    """Asymptotic expansion for large a and small b (BGRAT), summed from ``s0``.

    Args:
        a: first argument (large)
        b: second argument (small)
        x: argument in (0, 1)
        y: 1 - x
        s0: initial value of the sum
        mult: multiplier for the prefix
        policy: convergence policy
        normalised: compute the regularised form

    Returns:
        s0 plus the expansion
    """
    bm1 = b - 1
    t = a + bm1 / 2
    if y < 0.35:
        lx = math.log1p(-y)
    else:
        lx = math.log(x)
    u = -t * lx
    h = regularised_gamma_prefix(b, u)
    if h <= MIN_NORMAL:
        if s0 == 0:
            # The result is expected to be subnormal
            logger.debug("ibeta a=%r b=%r x=%r: subnormal prefix, using classic fraction", a, b, x)
            return ibeta_fraction(a, b, x, y, policy, normalised)
        return s0

    if normalised:
        prefix = h / gamma_delta_ratio(a, b)
        prefix /= ieee_pow(t, b)
    else:
        prefix = full_igamma_prefix(b, u) / ieee_pow(t, b)
    prefix *= mult

    p = [0.0] * _PN_SIZE
    p[0] = 1.0
    j = regularized_gamma_q(b, u, policy) / h
    total = s0 + prefix * j

    # 2n + 1
    tnp1 = 1
    lx2 = lx / 2
    lx2 *= lx2
    lxp = 1.0
    t4 = 4 * t * t
    b2n = b

    for n in range(1, _PN_SIZE):
        tnp1 += 2
        p[n] = 0.0
        tmp1 = 3
        for m in range(1, n):
            mbn = m * b - n
            p[n] += mbn * p[n - m] / FACTORIALS[tmp1]
            tmp1 += 2
        p[n] /= n
        p[n] += bm1 / FACTORIALS[tnp1]

        j = (b2n * (b2n + 1) * j + (u + b2n + 1) * lxp) / t4
        lxp *= lx2
        b2n += 2

        previous = total
        total += prefix * p[n] * j
        if total == previous:
            break
    return total


def ibeta_fraction2(a: float, b: float, x: float, y: float, policy: Policy, normalised: bool) -> float:
    """Incomplete beta from the DiDonato and Morris continued fraction (a, b > 1)."""
    result = ibeta_power_terms(a, b, x, y, normalised)
    if result == 0:
        return result
    fract = continued_fraction.value(_IbetaFraction2(a, b, x, y), policy.epsilon, policy.max_iterations)
    return result / fract


def ibeta_fraction(a: float, b: float, x: float, y: float, policy: Policy, normalised: bool) -> float:
    """Incomplete beta from the classic continued fraction.

    Valid for all arguments; only used where the other methods meet
    subnormal intermediate terms and the result itself is expected to be
    subnormal.
    """
    result = ibeta_power_terms(a, b, x, y, normalised)
    if result == 0:
        return result
    fract = continued_fraction.value(_IbetaClassicFraction(a, b, x), policy.epsilon, policy.max_iterations)
    return (result / a) / fract


# ----------------------------
# Method selection
# ----------------------------

class BetaSelection(NamedTuple):
    """Chosen method and whether the arguments must be swapped first."""
    method: BetaMethod
    swapped: bool


def select_beta_method(a: float, b: float, x: float, y: float, normalised: bool) -> BetaSelection:
    """Classify (a, b, x) into an evaluation method.

    Called after the closed forms (x = 0 or 1, a = b = 0.5, a = 1 or b = 1)
    have been handled. When ``swapped`` is True the method applies to
    (b, a, y, x) and the complement of its result is wanted.

    Args:
        a: first argument (> 0)
        b: second argument (> 0)
        x: argument in (0, 1)
        y: 1 - x
        normalised: True for the regularised functions

    Returns:
        BetaSelection(method, swapped)
    """
    swapped = False

    if min(a, b) <= 1:
        if x > 0.5:
            a, b, x, y = b, a, y, x
            swapped = True
        if max(a, b) <= 1:
            # Both a, b <= 1
            if a >= min(0.2, b) or math.pow(x, a) <= 0.9:
                return BetaSelection(BetaMethod.SERIES, swapped)
            a, b, x, y = b, a, y, x
            swapped = not swapped
            if y >= 0.3:
                return BetaSelection(BetaMethod.SERIES, swapped)
            return BetaSelection(BetaMethod.A_STEP_SERIES, swapped)

        # One of a, b <= 1 only
        if b <= 1 or (x < 0.1 and math.pow(b * x, a) <= 0.7):
            return BetaSelection(BetaMethod.SERIES, swapped)
        a, b, x, y = b, a, y, x
        swapped = not swapped
        if y >= 0.3:
            return BetaSelection(BetaMethod.SERIES, swapped)
        if a >= 15:
            return BetaSelection(BetaMethod.SMALL_B_LARGE_A, swapped)
        return BetaSelection(BetaMethod.A_STEP_SERIES, swapped)

    # Both a, b > 1: swap when x is above the mean a / (a + b)
    if a < b:
        lam = a - (a + b) * x
    else:
        lam = (a + b) * y - b
    if lam < 0:
        a, b, x, y = b, a, y, x
        swapped = True

    if b >= 40:
        return BetaSelection(BetaMethod.CONTINUED_FRACTION, swapped)
    # y != 1 excludes non-zero x below epsilon
    if a == math.floor(a) and b == math.floor(b) and a < _MAX_BINOMIAL_A and y != 1:
        return BetaSelection(BetaMethod.BINOMIAL_SUM, swapped)
    if b * x <= 0.7:
        return BetaSelection(BetaMethod.SERIES, swapped)
    if a > 15:
        return BetaSelection(BetaMethod.B_STEP_SERIES, swapped)
    if normalised:
        return BetaSelection(BetaMethod.DOUBLE_STEP_SERIES, swapped)
    return BetaSelection(BetaMethod.CONTINUED_FRACTION, swapped)


# ----------------------------
# Method handlers
# ----------------------------
# Each handler returns (result, invert). A handler that already produced the
# complement returns invert=False.

def _total(a: float, b: float, normalised: bool) -> float:
    return 1.0 if normalised else beta(a, b)


def _series(a, b, x, y, normalised, invert, policy):
    if invert:
        # Seed with -total so the sum is the complement
        fract = -_total(a, b, normalised)
        return -ibeta_series(a, b, x, fract, normalised, policy), False
    return ibeta_series(a, b, x, 0.0, normalised, policy), invert


def _small_b_large_a(a, b, x, y, normalised, invert, policy):
    if invert:
        fract = -_total(a, b, normalised)
        return -beta_small_b_large_a_series(a, b, x, y, fract, 1.0, policy, normalised), False
    return beta_small_b_large_a_series(a, b, x, y, 0.0, 1.0, policy, normalised), invert


def _a_step_series(a, b, x, y, normalised, invert, policy):
    # Step a up by a finite sum, then use the large a expansion
    prefix = 1.0 if normalised else rising_factorial_ratio(a + b, a, _A_STEP)
    fract = ibeta_a_step(a, b, x, y, _A_STEP, normalised)
    if invert:
        fract -= _total(a, b, normalised)
        return -beta_small_b_large_a_series(a + _A_STEP, b, x, y, fract, prefix, policy, normalised), False
    return beta_small_b_large_a_series(a + _A_STEP, b, x, y, fract, prefix, policy, normalised), invert


def _b_step_series(a, b, x, y, normalised, invert, policy):
    # Step b down into (0, 1], then use the large a expansion
    n = int(b)
    if n == b:
        n -= 1
    bbar = b - n
    prefix = 1.0 if normalised else rising_factorial_ratio(a + bbar, bbar, n)
    fract = ibeta_a_step(bbar, a, y, x, n, normalised)
    fract = beta_small_b_large_a_series(a, bbar, x, y, fract, 1.0, policy, normalised)
    return fract / prefix, invert


def _double_step_series(a, b, x, y, normalised, invert, policy):
    # Normalised only: step b down and a up, then use the large a expansion
    n = math.floor(b)
    bbar = b - n
    if bbar <= 0:
        n -= 1
        bbar += 1
    fract = ibeta_a_step(bbar, a, y, x, n, normalised)
    fract += ibeta_a_step(a, bbar, x, y, _A_STEP, normalised)
    if invert:
        fract -= 1
    fract = beta_small_b_large_a_series(a + _A_STEP, bbar, x, y, fract, 1.0, policy, normalised)
    if invert:
        return -fract, False
    return fract, invert


def _binomial_sum(a, b, x, y, normalised, invert, policy):
    k = int(a - 1)
    n = int(b + k)
    fract = binomial_ccdf(n, k, x, y)
    if not normalised:
        fract *= beta(a, b)
    return fract, invert


def _continued_fraction(a, b, x, y, normalised, invert, policy):
    return ibeta_fraction2(a, b, x, y, policy, normalised), invert


_Handler = Callable[[float, float, float, float, bool, bool, Policy], Tuple[float, bool]]

_HANDLERS: Dict[BetaMethod, _Handler] = {
    BetaMethod.SERIES: _series,
    BetaMethod.SMALL_B_LARGE_A: _small_b_large_a,
    BetaMethod.A_STEP_SERIES: _a_step_series,
    BetaMethod.B_STEP_SERIES: _b_step_series,
    BetaMethod.DOUBLE_STEP_SERIES: _double_step_series,
    BetaMethod.BINOMIAL_SUM: _binomial_sum,
    BetaMethod.CONTINUED_FRACTION: _continued_fraction,
}


# ----------------------------
# Dispatcher
# ----------------------------

def beta_incomplete_imp(a: float, b: float, x: float, normalised: bool, invert: bool,
                        policy: Optional[Policy] = None) -> float:
    """Evaluate one of the four incomplete beta functions.

    Args:
        a: first argument
        b: second argument
        x: argument in [0, 1]
        normalised: True for I_x, False for B_x
        invert: True for the complement
        policy: convergence policy (default policy when None)

    Returns:
        the requested value, or NaN outside the domain

    Raises:
        ConvergenceError: if an iterative method does not converge
    """
    if not (0 <= x <= 1) or math.isinf(a) or math.isinf(b):
        return math.nan

    if normalised:
        if not (a >= 0 and b >= 0):
            return math.nan
        if a == 0:
            if b == 0:
                return math.nan
            return 0.0 if invert else 1.0
        if b == 0:
            return 1.0 if invert else 0.0
    elif not (a > 0 and b > 0):
        return math.nan

    policy = resolve(policy)

    if x == 0:
        return _total(a, b, normalised) if invert else 0.0
    if x == 1:
        return 0.0 if invert else _total(a, b, normalised)

    if a == 0.5 and b == 0.5:
        # Arcsine distribution
        z = 1 - x if invert else x
        asin = math.asin(math.sqrt(z))
        return asin / (math.pi / 2) if normalised else 2 * asin

    y = 1 - x
    if a == 1:
        a, b, x, y = b, a, y, x
        invert = not invert
    if b == 1:
        # I_x(a, 1) = x^a
        if a == 1:
            return y if invert else x
        if y < 0.5:
            if invert:
                p = -math.expm1(a * math.log1p(-y))
            else:
                p = math.exp(a * math.log1p(-y))
        else:
            p = -powm1(x, a) if invert else ieee_pow(x, a)
        if not normalised:
            p /= a
        return p

    method, swapped = select_beta_method(a, b, x, y, normalised)
    if swapped:
        a, b, x, y = b, a, y, x
        invert = not invert
    fract, invert = _HANDLERS[method](a, b, x, y, normalised, invert, policy)

    if invert:
        return _total(a, b, normalised) - fract
    return fract


# ----------------------------
# Public API
# ----------------------------

def incomplete_beta(a: float, b: float, x: float, policy: Optional[Policy] = None) -> float:
    """Unnormalised incomplete beta B_x(a, b)."""
    return beta_incomplete_imp(a, b, x, False, False, policy)


def incomplete_beta_complement(a: float, b: float, x: float, policy: Optional[Policy] = None) -> float:
    """Complement of the unnormalised incomplete beta, B(a, b) - B_x(a, b)."""
    return beta_incomplete_imp(a, b, x, False, True, policy)


def regularized_incomplete_beta(a: float, b: float, x: float, policy: Optional[Policy] = None) -> float:
    """Regularized incomplete beta I_x(a, b).

    Args:
        a: first argument (>= 0)
        b: second argument (>= 0, not both zero)
        x: argument in [0, 1]
        policy: convergence policy (default policy when None)

    Returns:
        I_x(a, b) in [0, 1]; NaN outside the domain

    Raises:
        ConvergenceError: if an iterative method does not converge
    """
    return beta_incomplete_imp(a, b, x, True, False, policy)


def regularized_incomplete_beta_complement(a: float, b: float, x: float,
                                           policy: Optional[Policy] = None) -> float:
    """Complement of the regularized incomplete beta, 1 - I_x(a, b)."""
    return beta_incomplete_imp(a, b, x, True, True, policy)


def incomplete_beta_derivative(a: float, b: float, x: float) -> float:
    """Derivative of I_x(a, b) with respect to x.

        d/dx I_x(a, b) = x^(a-1) (1-x)^(b-1) / B(a, b)

    Args:
        a: first argument (> 0)
        b: second argument (> 0)
        x: argument in [0, 1]

    Returns:
        the derivative; +inf at an integrable singularity at x = 0 or 1;
        NaN outside the domain
    """
    if not (a > 0 and b > 0) or not (0 <= x <= 1) or math.isinf(a) or math.isinf(b):
        return math.nan

    if x == 0:
        if a > 1:
            return 0.0
        # a == 1: 1 / B(1, b) == b
        return b if a == 1 else math.inf
    if x == 1:
        if b > 1:
            return 0.0
        return a if b == 1 else math.inf

    if b == 1:
        # I_x = x^a
        return a * ieee_pow(x, a - 1)
    if a == 1:
        # I_x = 1 - (1-x)^b
        if x >= 0.5:
            return b * ieee_pow(1 - x, b - 1)
        return b * ieee_exp(math.log1p(-x) * (b - 1))

    y = (1 - x) * x
    return ibeta_power_terms(a, b, x, 1 - x, True, 1 / y)
