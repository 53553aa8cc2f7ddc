"""gamma_beta.core.gamma.incomplete

Incomplete gamma functions.

    lower(a, x) = integral_0^x t^(a-1) e^-t dt
    upper(a, x) = integral_x^inf t^(a-1) e^-t dt
    P(a, x) = lower(a, x) / Gamma(a)
    Q(a, x) = upper(a, x) / Gamma(a) = 1 - P(a, x)

Evaluation picks one of several methods from the arguments
(:func:`select_gamma_method`) and dispatches through a handler table. Each
method computes either P or Q natively. An invert flag tracks whether the
native quantity has to be complemented at the end. Where the complement of a
series is wanted the series is seeded so that its sum is already the
complement, so there is no 1 - P cancellation.

All methods multiply a "prefix" x^a e^-x / Gamma(a) by a series, continued
fraction or asymptotic factor. When the prefix underflows to exactly zero
the factor is not evaluated.

Domain: a > 0 and x >= 0. Any other input, or NaN, returns NaN.

References:
- DiDonato and Morris, "Computation of the incomplete gamma function
  ratios and their inverse", ACM TOMS 12 (1986).
- Temme, "A set of algorithms for the incomplete gamma functions" (1994).
- Boost.Math igamma (gamma.hpp).
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Optional, Tuple

from ..models.methods import GammaMethod
from ..models.policy import Policy, resolve
from ..series import continued_fraction
from ..series.polynomial import evaluate_polynomial
from ..series.summation import kahan_sum_series
from .complete import gamma, gamma1pm1, log_gamma
from .constants import (
    LOG_MAX_VALUE,
    LOG_MIN_VALUE,
    LOG_ROOT_TWO_PI,
    MAX_FACTORIAL,
    MAX_GAMMA_Z,
    MAX_VALUE,
    ROOT_EPSILON,
)
from .elementary import ieee_exp, ieee_log, ieee_pow, log1pmx, powm1
from .lanczos import GMH, lanczos_sum_exp_g_scaled

logger = logging.getLogger(__name__)


# ----------------------------
# Term generators
# ----------------------------

class _LowerGammaSeries:
    """Terms of 1 + z/(a+1) + z^2/((a+1)(a+2)) + ..."""

    def __init__(self, a: float, z: float):
        self.a = a
        self.z = z
        self.term = 1.0
        self.n = 0

    def next_term(self) -> float:
        r = self.term
        self.n += 1
        self.term *= self.z / (self.a + self.n)
        return r


class _SmallAUpperSeries:
    """Terms of sum_{n>=1} (-x)^n / ((a+n) n!)."""

    def __init__(self, a: float, x: float):
        self.a = a
        self.z = -x
        self.term = -x
        self.n = 1

    def next_term(self) -> float:
        r = self.term / (self.a + self.n)
        self.n += 1
        self.term = self.term * self.z / self.n
        return r


class _LargeXSeries:
    """Terms of the asymptotic expansion 1 + (a-1)/x + (a-1)(a-2)/x^2 + ..."""

    def __init__(self, a: float, x: float):
        self.a = a
        self.x = x
        self.term = 1.0
        self.n = 0

    def next_term(self) -> float:
        r = self.term
        self.n += 1
        self.term *= (self.a - self.n) / self.x
        return r


class _UpperGammaFraction:
    """Coefficients (k(a-k), z-a+1+2k) of the Legendre continued fraction."""

    def __init__(self, a: float, zma1: float):
        self.a = a
        self.zma1 = zma1
        self.k = 0

    def next_coefficients(self) -> Tuple[float, float]:
        self.k += 1
        k = self.k
        return k * (self.a - k), self.zma1 + 2.0 * k


# ----------------------------
# Prefix terms
# ----------------------------

def full_igamma_prefix(a: float, z: float) -> float:
    """Compute z^a e^-z avoiding spurious overflow or underflow."""
    if z > MAX_VALUE:
        return 0.0
    alz = a * ieee_log(z)

    if z >= 1:
        if alz < LOG_MAX_VALUE and -z > LOG_MIN_VALUE:
            return ieee_pow(z, a) * math.exp(-z)
        if a >= 1:
            return ieee_pow(z / ieee_exp(z / a), a)
        return ieee_exp(alz - z)

    if alz > LOG_MIN_VALUE:
        return ieee_pow(z, a) * math.exp(-z)
    # a * log(z) <= -708 implies z / a is small, so exp(z / a) is safe
    return ieee_pow(z / math.exp(z / a), a)


def regularised_gamma_prefix(a: float, z: float) -> float:
    """Compute z^a e^-z / Gamma(a).

    For large a the power and exponential are combined with the Lanczos
    approximation of Gamma(a); when a ~ z a log1pmx form avoids a power of a
    base close to one.
    """
    if z >= MAX_VALUE:
        return 0.0

    if a <= 1:
        if -z <= LOG_MIN_VALUE:
            # exp(-z) underflows
            return ieee_exp(a * math.log(z) - z - log_gamma(a).value)
        # gamma(a) < 1/a here, no overflow
        return ieee_pow(z, a) * math.exp(-z) / gamma(a)

    if a <= MAX_GAMMA_Z:
        alz1 = a * ieee_log(z)
        if z >= 1:
            if alz1 < LOG_MAX_VALUE and -z > LOG_MIN_VALUE:
                return ieee_pow(z, a) * math.exp(-z) / gamma(a)
        elif alz1 > LOG_MIN_VALUE:
            return ieee_pow(z, a) * math.exp(-z) / gamma(a)

    agh = a + GMH
    factor = math.sqrt(agh / math.e) / lanczos_sum_exp_g_scaled(a)

    if a > 128:
        d = ((z - a) - GMH) / agh
        if abs(d * d * a) <= 100:
            # Large a ~ z: a power of a base near one
            prefix = a * log1pmx(d) + z * -GMH / agh
            return ieee_exp(prefix) * factor

    alz = a * ieee_log(z / agh)
    amz = a - z
    lo = min(alz, amz)
    hi = max(alz, amz)
    if lo <= LOG_MIN_VALUE or hi >= LOG_MAX_VALUE:
        amza = amz / a
        if lo / 2 > LOG_MIN_VALUE and hi / 2 < LOG_MAX_VALUE:
            # Square root of the result, then square it
            sq = ieee_pow(z / agh, a / 2) * math.exp(amz / 2)
            prefix = sq * sq
        elif lo / 4 > LOG_MIN_VALUE and hi / 4 < LOG_MAX_VALUE and z > a:
            # Fourth root, squared twice
            sq = ieee_pow(z / agh, a / 4) * math.exp(amz / 4)
            prefix = sq * sq
            prefix *= prefix
        elif LOG_MIN_VALUE < amza < LOG_MAX_VALUE:
            prefix = ieee_pow((z * math.exp(amza)) / agh, a)
        else:
            prefix = ieee_exp(alz + amz)
    else:
        prefix = ieee_pow(z / agh, a) * math.exp(amz)
    return prefix * factor


# ----------------------------
# Series and fractions
# ----------------------------

def upper_gamma_fraction(a: float, z: float, policy: Policy) -> float:
    """Legendre continued fraction for upper(a, z) / (z^a e^-z).

    Evaluates 1 / (b0 + a1/(b1 + a2/(b2 + ...))) with b0 = z - a + 1,
    a_k = k(a - k) and b_k = z - a + 1 + 2k.
    """
    zma1 = z - a + 1
    gen = _UpperGammaFraction(a, zma1)
    return 1.0 / continued_fraction.value_with_leading_term(
        zma1, gen, policy.epsilon, policy.max_iterations)


def lower_gamma_series(a: float, z: float, init_value: float, policy: Policy) -> float:
    """Series for a * lower(a, z) / (z^a e^-z), summed from ``init_value``."""
    return kahan_sum_series(_LowerGammaSeries(a, z), policy.epsilon, policy.max_iterations, init_value)


def finite_gamma_q(a: float, x: float) -> float:
    """Q(a, x) for integer a: e^-x sum_{n<a} x^n / n!."""
    total = math.exp(-x)
    term = total
    for n in range(1, int(a)):
        term /= n
        term *= x
        total += term
    return total


def finite_half_gamma_q(a: float, x: float) -> float:
    """Q(a, x) for half-integer a from erfc and a finite sum."""
    e = math.erfc(math.sqrt(x))
    if a > 1:
        term = math.exp(-x) / math.sqrt(math.pi * x)
        term *= x
        term /= 0.5
        total = term
        for n in range(2, math.floor(a) + 1):
            term /= n - 0.5
            term *= x
            total += term
        e += total
    return e


def small_a_upper_part(a: float, x: float, policy: Policy, invert: bool) -> Tuple[float, float]:
    """upper(a, x) for small a (or lower(a, x) when ``invert``) via Gamma(1+a)-1.

    Returns:
        (result, Gamma(a))
    """
    result = gamma1pm1(a)
    gamma_a = (result + 1) / a

    p = powm1(x, a)
    result -= p
    result /= a
    p += 1
    init_value = gamma_a if invert else 0.0

    result = -p * kahan_sum_series(_SmallAUpperSeries(a, x), policy.epsilon, policy.max_iterations,
                                   (init_value - result) / p)
    if invert:
        result = -result
    return result, gamma_a


# Temme coefficient polynomials C0..C8 in z, lowest degree first
_TEMME_C = (
    (-0.33333333333333333, 0.083333333333333333, -0.014814814814814815,
     0.0011574074074074074, 0.0003527336860670194, -0.00017875514403292181,
     0.39192631785224378e-4, -0.21854485106799922e-5, -0.185406221071516e-5,
     0.8296711340953086e-6, -0.17665952736826079e-6, 0.67078535434014986e-8,
     0.10261809784240308e-7, -0.43820360184533532e-8, 0.91476995822367902e-9),
    (-0.0018518518518518519, -0.0034722222222222222, 0.0026455026455026455,
     -0.00099022633744855967, 0.00020576131687242798, -0.40187757201646091e-6,
     -0.18098550334489978e-4, 0.76491609160811101e-5, -0.16120900894563446e-5,
     0.46471278028074343e-8, 0.1378633446915721e-6, -0.5752545603517705e-7,
     0.11951628599778147e-7),
    (0.0041335978835978836, -0.0026813271604938272, 0.00077160493827160494,
     0.20093878600823045e-5, -0.00010736653226365161, 0.52923448829120125e-4,
     -0.12760635188618728e-4, 0.34235787340961381e-7, 0.13721957309062933e-5,
     -0.6298992138380055e-6, 0.14280614206064242e-6),
    (0.00064943415637860082, 0.00022947209362139918, -0.00046918949439525571,
     0.00026772063206283885, -0.75618016718839764e-4, -0.23965051138672967e-6,
     0.11082654115347302e-4, -0.56749528269915966e-5, 0.14230900732435884e-5),
    (-0.0008618882909167117, 0.00078403922172006663, -0.00029907248030319018,
     -0.14638452578843418e-5, 0.66414982154651222e-4, -0.39683650471794347e-4,
     0.11375726970678419e-4),
    (-0.00033679855336635815, -0.69728137583658578e-4, 0.00027727532449593921,
     -0.00019932570516188848, 0.67977804779372078e-4, 0.1419062920643967e-6,
     -0.13594048189768693e-4, 0.80184702563342015e-5, -0.22914811765080952e-5),
    (0.00053130793646399222, -0.00059216643735369388, 0.00027087820967180448,
     0.79023532326603279e-6, -0.81539693675619688e-4, 0.56116827531062497e-4,
     -0.18329116582843376e-4),
    (0.00034436760689237767, 0.51717909082605922e-4, -0.00033493161081142236,
     0.0002812695154763237, -0.00010976582244684731),
    (-0.00065262391859530942, 0.00083949872067208728, -0.00043829709854172101),
)
_TEMME_C9 = -0.00059676129019274625


def temme_large(a: float, x: float) -> float:
    """Temme's uniform asymptotic expansion for large a with x ~ a.

    Returns Q(a, x) when x < a and P(a, x) otherwise. Accurate to 53 bits
    for a > 20 and |x - a| / a < 0.4.
    """
    sigma = (x - a) / a
    phi = -log1pmx(sigma)
    y = a * phi
    z = math.sqrt(2 * phi)
    if x < a:
        z = -z

    workspace = [evaluate_polynomial(c, z) for c in _TEMME_C]
    workspace.append(_TEMME_C9)

    result = evaluate_polynomial(workspace, 1 / a)
    result *= math.exp(-y) / math.sqrt(2 * math.pi * a)
    if x < a:
        result = -result
    result += math.erfc(math.sqrt(y)) / 2
    return result


def large_x_asymptotic(a: float, x: float, policy: Policy) -> float:
    """Asymptotic series for upper(a, x) / (x^(a-1) e^-x) as x -> inf.

    When a and x are both huge and close the terms do not shrink and the
    iteration limit is reached.
    """
    return kahan_sum_series(_LargeXSeries(a, x), policy.epsilon, policy.max_iterations)


# ----------------------------
# Method selection
# ----------------------------

def select_gamma_method(a: float, x: float, normalised: bool) -> GammaMethod:
    """Choose the evaluation method for the incomplete gamma at (a, x).

    Assumes a > 0 and x >= 0. Not used for unnormalised values with a >= 170,
    which are computed in log space.

    Args:
        a: shape parameter
        x: integration limit
        normalised: True for P/Q, False for the lower/upper integrals

    Returns:
        the method tag
    """
    # exp(-x) must not underflow for the finite sums
    is_small_a = a < 30 and a <= x + 1 and -x > LOG_MIN_VALUE
    if is_small_a:
        fa = math.floor(a)
        is_int = fa == a
        is_half_int = not is_int and abs(fa - a) == 0.5
    else:
        is_int = is_half_int = False

    # a = 1 is left to the iterative methods
    if is_int and a >= 2 and x > 0.6:
        return GammaMethod.FINITE_SUM
    if is_half_int and x > 0.2:
        return GammaMethod.FINITE_HALF_SUM
    if x < ROOT_EPSILON and a > 1:
        return GammaMethod.SMALL_X
    if x > 1000 and a < x * 0.75:
        return GammaMethod.ASYMPTOTIC_LARGE_X
    if x < 0.5:
        # Changeover at Q ~ 0.33
        if -0.4 / ieee_log(x) < a:
            return GammaMethod.LOWER_SERIES
        return GammaMethod.SMALL_A_UPPER
    if x < 1.1:
        # Changeover at P ~ 0.75
        if x * 0.75 < a:
            return GammaMethod.LOWER_SERIES
        return GammaMethod.SMALL_A_UPPER

    if normalised and a > 20:
        # Near P ~ Q ~ 0.5 the series and fraction converge slowly
        sigma = abs((x - a) / a)
        if a > 200:
            if 20 / a > sigma * sigma:
                return GammaMethod.TEMME
        elif sigma < 0.4:
            return GammaMethod.TEMME

    # Changeover at P ~ Q ~ 0.5
    if x - (1 / (3 * x)) < a:
        return GammaMethod.LOWER_SERIES
    return GammaMethod.CONTINUED_FRACTION


# ----------------------------
# Method handlers
# ----------------------------
# Each handler returns (result, invert) where result is P (or lower) when
# invert is False on return, and Q (or upper) otherwise.

def _prefix(a: float, x: float, normalised: bool) -> float:
    return regularised_gamma_prefix(a, x) if normalised else full_igamma_prefix(a, x)


def _finite_sum(a, x, normalised, invert, policy):
    result = finite_gamma_q(a, x)
    if not normalised:
        result *= gamma(a)
    return result, invert


def _finite_half_sum(a, x, normalised, invert, policy):
    result = finite_half_gamma_q(a, x)
    if not normalised:
        result *= gamma(a)
    return result, invert


def _lower_series(a, x, normalised, invert, policy):
    result = _prefix(a, x, normalised)
    if result == 0:
        return result, invert

    # Seed the series with the value it will be subtracted from so that
    # the complement comes out directly (fewer terms, no cancellation)
    init_value = 0.0
    optimised_invert = False
    if invert:
        init_value = 1.0 if normalised else gamma(a)
        if normalised or result >= 1 or MAX_VALUE * result > init_value:
            init_value /= result
            if normalised or a < 1 or MAX_VALUE / a > init_value:
                init_value *= -a
                optimised_invert = True
            else:
                init_value = 0.0
        else:
            init_value = 0.0

    result *= lower_gamma_series(a, x, init_value, policy) / a
    if optimised_invert:
        invert = False
        result = -result
    return result, invert


def _small_a_upper(a, x, normalised, invert, policy):
    result, gamma_a = small_a_upper_part(a, x, policy, not invert)
    if normalised:
        if gamma_a == math.inf:
            # Gamma(a) overflows for tiny a
            result = ieee_exp(ieee_log(result) - log_gamma(a).value)
        else:
            result /= gamma_a
    return result, False


def _continued_fraction(a, x, normalised, invert, policy):
    result = _prefix(a, x, normalised)
    if result != 0:
        result *= upper_gamma_fraction(a, x, policy)
    return result, invert


def _temme(a, x, normalised, invert, policy):
    result = temme_large(a, x)
    if x >= a:
        invert = not invert
    return result, invert


def _small_x(a, x, normalised, invert, policy):
    if normalised:
        # gamma(a + 1) overflow gives 0
        result = math.pow(x, a) / gamma(a + 1)
    else:
        result = math.pow(x, a) / a
    result *= 1 - a * x / (a + 1)
    return result, invert


def _asymptotic_large_x(a, x, normalised, invert, policy):
    result = _prefix(a, x, normalised) / x
    if result != 0:
        result *= large_x_asymptotic(a, x, policy)
    return result, invert


_Handler = Callable[[float, float, bool, bool, Policy], Tuple[float, bool]]

_HANDLERS: Dict[GammaMethod, _Handler] = {
    GammaMethod.FINITE_SUM: _finite_sum,
    GammaMethod.FINITE_HALF_SUM: _finite_half_sum,
    GammaMethod.LOWER_SERIES: _lower_series,
    GammaMethod.SMALL_A_UPPER: _small_a_upper,
    GammaMethod.CONTINUED_FRACTION: _continued_fraction,
    GammaMethod.TEMME: _temme,
    GammaMethod.SMALL_X: _small_x,
    GammaMethod.ASYMPTOTIC_LARGE_X: _asymptotic_large_x,
}

# Methods whose native result is Q (or upper)
_COMPUTES_Q = frozenset({
    GammaMethod.FINITE_SUM,
    GammaMethod.FINITE_HALF_SUM,
    GammaMethod.CONTINUED_FRACTION,
    GammaMethod.ASYMPTOTIC_LARGE_X,
})


# ----------------------------
# Dispatcher
# ----------------------------

def _large_a_unnormalised(a: float, x: float, invert: bool, policy: Policy) -> float:
    # The integrals overflow or underflow for large a; work with logs
    if invert and a * 4 < x:
        result = a * math.log(x) - x
        result += math.log(upper_gamma_fraction(a, x, policy))
    elif not invert and a > 4 * x:
        result = a * ieee_log(x) - x
        result += ieee_log(lower_gamma_series(a, x, 0.0, policy) / a)
    else:
        result = incomplete_gamma_imp(a, x, True, invert, policy)
        if result == 0:
            if invert:
                # Stirling series for log Gamma(a)
                result = 1 + 1 / (12 * a) + 1 / (288 * a * a)
                result = math.log(result) - a + (a - 0.5) * math.log(a) + LOG_ROOT_TWO_PI
            else:
                result = a * ieee_log(x) - x
                result += ieee_log(lower_gamma_series(a, x, 0.0, policy) / a)
        else:
            result = math.log(result) + log_gamma(a).value
    if result > LOG_MAX_VALUE:
        logger.debug("incomplete gamma a=%r x=%r overflows (log value %r)", a, x, result)
    return ieee_exp(result)


def incomplete_gamma_imp(a: float, x: float, normalised: bool, invert: bool,
                         policy: Optional[Policy] = None) -> float:
    """Evaluate one of the four incomplete gamma functions.

    Args:
        a: shape parameter (> 0)
        x: integration limit (>= 0)
        normalised: True for P/Q, False for lower/upper
        invert: True for Q/upper, False for P/lower
        policy: convergence policy (default policy when None)

    Returns:
        the requested value, or NaN outside the domain

    Raises:
        ConvergenceError: if an iterative method does not converge
    """
    if math.isnan(a) or math.isnan(x) or a <= 0 or x < 0 or math.isinf(a):
        return math.nan
    policy = resolve(policy)

    if math.isinf(x):
        if invert:
            return 0.0
        return 1.0 if normalised else gamma(a)

    if a >= MAX_FACTORIAL and not normalised:
        return _large_a_unnormalised(a, x, invert, policy)

    method = select_gamma_method(a, x, normalised)
    if method in _COMPUTES_Q:
        invert = not invert
    result, invert = _HANDLERS[method](a, x, normalised, invert, policy)

    if normalised and result > 1:
        result = 1.0
    if invert:
        result = (1.0 if normalised else gamma(a)) - result
    return result


# ----------------------------
# Public API
# ----------------------------

def incomplete_gamma_lower(a: float, x: float, policy: Optional[Policy] = None) -> float:
    """Lower incomplete gamma integral_0^x t^(a-1) e^-t dt."""
    return incomplete_gamma_imp(a, x, False, False, policy)


def incomplete_gamma_upper(a: float, x: float, policy: Optional[Policy] = None) -> float:
    """Upper incomplete gamma integral_x^inf t^(a-1) e^-t dt."""
    return incomplete_gamma_imp(a, x, False, True, policy)


def regularized_gamma_p(a: float, x: float, policy: Optional[Policy] = None) -> float:
    """Regularized lower incomplete gamma P(a, x).

    Args:
        a: shape parameter (> 0)
        x: integration limit (>= 0)
        policy: convergence policy (default policy when None)

    Returns:
        P(a, x) in [0, 1]; NaN outside the domain

    Raises:
        ConvergenceError: if an iterative method does not converge
    """
    return incomplete_gamma_imp(a, x, True, False, policy)


def regularized_gamma_q(a: float, x: float, policy: Optional[Policy] = None) -> float:
    """Regularized upper incomplete gamma Q(a, x) = 1 - P(a, x).

    Args:
        a: shape parameter (> 0)
        x: integration limit (>= 0)
        policy: convergence policy (default policy when None)

    Returns:
        Q(a, x) in [0, 1]; NaN outside the domain

    Raises:
        ConvergenceError: if an iterative method does not converge
    """
    return incomplete_gamma_imp(a, x, True, True, policy)


def regularized_gamma_p_derivative(a: float, x: float,
                                   policy: Optional[Policy] = None) -> float:
    """Derivative of P(a, x) with respect to x: x^(a-1) e^-x / Gamma(a).

    No iteration is involved; policy is accepted for a signature matching
    the other entry points and is ignored.
    """
    if math.isnan(a) or math.isnan(x) or a <= 0 or x < 0 or math.isinf(a):
        return math.nan
    if math.isinf(x):
        return 0.0
    if x == 0:
        if a > 1:
            return 0.0
        return 1.0 if a == 1 else math.inf

    f1 = regularised_gamma_prefix(a, x)
    if f1 == 0:
        # Underflow in the prefix; use logs
        lx = math.log(x)
        return ieee_exp(a * lx - x - log_gamma(a).value - lx)
    # May overflow to inf for x < 1
    return f1 / x
