"""gamma_beta.core.gamma.ratio

Ratios of gamma functions computed without forming either gamma value.

    gamma_ratio(a, b)          = Gamma(a) / Gamma(b)
    gamma_delta_ratio(z, d)    = Gamma(z) / Gamma(z + d)

Both Gamma(a) and Gamma(b) may overflow while the ratio is representable.
For large arguments the Lanczos sums are divided directly and the power
terms are simplified analytically.
"""

from __future__ import annotations

import math

from .complete import gamma, log_gamma
from .constants import EPSILON, FACTORIALS, MAX_FACTORIAL, MAX_GAMMA_Z, MIN_NORMAL
from .elementary import ieee_div, ieee_exp, ieee_pow
from .lanczos import GMH, lanczos_sum

_TWO_POW_53 = 2.0 ** 53


def _is_integer(v: float) -> bool:
    return math.isfinite(v) and v == math.floor(v)


def gamma_delta_ratio(z: float, delta: float) -> float:
    """Compute Gamma(z) / Gamma(z + delta).

    Args:
        z: argument
        delta: increment

    Returns:
        the ratio; NaN if either argument is NaN
    """
    z_delta = z + delta
    if math.isnan(z_delta):
        return math.nan
    if z <= 0 or z_delta <= 0:
        # Signed quotient of the complete functions
        return ieee_div(gamma(z), gamma(z_delta))

    if _is_integer(delta):
        if delta == 0:
            return 1.0
        if _is_integer(z) and z <= MAX_GAMMA_Z and z_delta <= MAX_GAMMA_Z:
            return FACTORIALS[int(z) - 1] / FACTORIALS[int(z_delta) - 1]
        if abs(delta) < 20:
            # Finite product
            if delta < 0:
                z -= 1
                result = z
                for _ in range(int(-delta) - 1):
                    z -= 1
                    result *= z
                return result
            result = 1 / z
            for _ in range(int(delta) - 1):
                z += 1
                result /= z
            return result

    return _delta_ratio_lanczos(z, delta)


def _delta_ratio_lanczos(z: float, delta: float) -> float:
    if z < EPSILON:
        # G(z) / G(z + d) = 1 / (z G(d)); split G(d) when it overflows
        if MAX_GAMMA_Z < delta:
            ratio = _delta_ratio_lanczos(delta, MAX_GAMMA_Z - delta)
            ratio *= z
            ratio *= FACTORIALS[MAX_FACTORIAL]
            return ieee_div(1.0, ratio)
        return ieee_div(1.0, z * gamma(z + delta))

    zgh = z + GMH
    if z + delta == z:
        # lanczos_sum(z) / lanczos_sum(z + delta) == 1
        result = math.exp(-delta)
    else:
        if abs(delta) < 10:
            result = ieee_exp((0.5 - z) * math.log1p(delta / zgh))
        else:
            result = ieee_pow(zgh / (zgh + delta), z - 0.5)
        # Divide the sums separately to avoid spurious overflow
        result *= lanczos_sum(z) / lanczos_sum(z + delta)
    result *= ieee_pow(math.e / (zgh + delta), delta)
    return result


def gamma_ratio(a: float, b: float) -> float:
    """Compute Gamma(a) / Gamma(b).

    Args:
        a: numerator argument (> 0, finite)
        b: denominator argument (> 0, finite)

    Returns:
        the ratio; NaN outside the domain
    """
    if not (a > 0 and math.isfinite(a) and b > 0 and math.isfinite(b)):
        return math.nan
    if a <= MIN_NORMAL:
        # Subnormal a: scale up, Gamma(a) ~ 1/a
        return _TWO_POW_53 * gamma_ratio(a * _TWO_POW_53, b)

    if a <= MAX_GAMMA_Z and b <= MAX_GAMMA_Z:
        return gamma(a) / gamma(b)

    prefix = 1.0
    if a < 1:
        if b < 2 * MAX_GAMMA_Z:
            # Sidestep on a too, or the result underflows before the prefix is applied
            prefix /= a
            a += 1
            while b >= MAX_GAMMA_Z:
                b -= 1
                prefix /= b
            return prefix * gamma(a) / gamma(b)
        return ieee_exp(log_gamma(a).value - log_gamma(b).value)
    if b < 1:
        if a < 2 * MAX_GAMMA_Z:
            prefix *= b
            b += 1
            while a >= MAX_GAMMA_Z:
                a -= 1
                prefix *= a
            return prefix * gamma(a) / gamma(b)
        return ieee_exp(log_gamma(a).value - log_gamma(b).value)

    return gamma_delta_ratio(a, b - a)
