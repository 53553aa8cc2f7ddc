"""gamma_beta.core.gamma.complete

Complete gamma function and its logarithm.

Implemented:
- gamma(z): exact factorials for integers, reflection for negative z,
  1/z - Euler for tiny z, Lanczos approximation otherwise
- log_gamma(z): (log|Gamma(z)|, sign) with rational approximations on [1, 3]
- gamma1pm1(z): Gamma(1 + z) - 1 without cancellation
- log_gamma1p(z), inv_gamma1pm1(z): log Gamma(1 + z) and 1 / Gamma(1 + z) - 1
  for small z, built on the same rational approximations

Poles (0, -1, -2, ...) and NaN return NaN. Gamma overflows to +inf only for
z > 171.61...; intermediate powers are split so that results close to the
overflow limit are still finite.

References:
- Boost.Math gamma.hpp (Lanczos, lgamma_small_imp and tgammap1m1_imp).
- Godfrey, "A note on the computation of the convergent Lanczos complex
  Gamma approximation" (2001).
"""

from __future__ import annotations

import math
from typing import NamedTuple

from .constants import (
    EPSILON,
    EULER,
    FACTORIALS,
    LOG_MAX_VALUE,
    LOG_PI,
    MAX_GAMMA_Z,
    ROOT_EPSILON,
)
from .elementary import ieee_expm1, ieee_pow, sinpx
from .lanczos import GMH, lanczos_sum, lanczos_sum_exp_g_scaled


class LogGamma(NamedTuple):
    """Result of :func:`log_gamma`.

    Attributes:
        value: log|Gamma(z)|
        sign: sign of Gamma(z) (+1 or -1); 0 for poles and NaN
    """
    value: float
    sign: int


def _is_integer(z: float) -> bool:
    # Non-finite values are not integers
    return math.isfinite(z) and z == math.floor(z)


# ----------------------------
# Gamma
# ----------------------------

def gamma(z: float) -> float:
    """Gamma function.

    Args:
        z: argument

    Returns:
        Gamma(z); NaN for poles and NaN; +inf for z > 171.61...
    """
    if math.isnan(z):
        return math.nan
    if z == math.inf:
        return math.inf
    if z == -math.inf:
        return math.nan

    if _is_integer(z):
        if z <= 0:
            return math.nan
        if z <= MAX_GAMMA_Z:
            return FACTORIALS[int(z) - 1]
        return math.inf

    if z < 0:
        # Gamma(z) = -pi / (z sin(pi z) Gamma(-z))
        return -math.pi / (sinpx(z) * gamma(-z))

    if z < ROOT_EPSILON:
        return 1.0 / z - EULER

    if z > MAX_GAMMA_Z + 1:
        return math.inf

    result = lanczos_sum(z)
    zgh = z + GMH
    lzgh = math.log(zgh)
    if z * lzgh > LOG_MAX_VALUE:
        # Split the power so the partial product stays finite
        hp = ieee_pow(zgh, z / 2 - 0.25)
        result *= hp / math.exp(zgh)
        result *= hp
    else:
        result *= ieee_pow(zgh, z - 0.5) / math.exp(zgh)
    return result


# ----------------------------
# Log gamma
# ----------------------------

def log_gamma(z: float) -> LogGamma:
    """Logarithm of the absolute value of the gamma function, with its sign.

    Args:
        z: argument

    Returns:
        LogGamma(value, sign); ``(nan, 0)`` for poles and NaN
    """
    if math.isnan(z):
        return LogGamma(math.nan, 0)
    if math.isinf(z):
        return LogGamma(math.inf, 1) if z > 0 else LogGamma(math.nan, 0)

    sign = 1
    if z <= -ROOT_EPSILON:
        if _is_integer(z):
            return LogGamma(math.nan, 0)
        t = sinpx(z)
        z = -z
        if t < 0:
            t = -t
        else:
            sign = -1
        # Terms of opposite sign and large magnitude
        result = math.fsum((-log_gamma(z).value, -math.log(t), LOG_PI))
    elif z < ROOT_EPSILON:
        if z == 0:
            return LogGamma(math.nan, 0)
        if 4 * abs(z) < EPSILON:
            result = -math.log(abs(z))
        else:
            result = math.log(abs(1.0 / z - EULER))
        if z < 0:
            sign = -1
    elif z < 15:
        result = log_gamma_small(z, z - 1, z - 2)
    elif z < 100:
        result = math.log(gamma(z))
    else:
        zgh = z + GMH
        result = (math.log(zgh) - 1) * (z - 0.5)
        # The Lanczos term only matters while it is visible against result
        if result * EPSILON < 20:
            result += math.log(lanczos_sum_exp_g_scaled(z))
    return LogGamma(result, sign)


def log_gamma_small(z: float, zm1: float, zm2: float) -> float:
    """log(Gamma(z)) for 0 < z < 15 from rational approximations on [1, 3].

    ``zm1`` and ``zm2`` are z - 1 and z - 2, passed separately so callers can
    supply them without rounding.
    """
    if zm1 == 0 or zm2 == 0:
        return 0.0

    terms = []
    if z > 2:
        if z >= 3:
            # Reduce to [2, 3)
            while z >= 3:
                z -= 1
                terms.append(math.log(z))
            zm2 = z - 2

        # lgamma(z) = (z-2)(z+1)(Y + R(z-2))
        p = -0.324588649825948492091e-4
        p = -0.541009869215204396339e-3 + p * zm2
        p = -0.259453563205438108893e-3 + p * zm2
        p = 0.172491608709613993966e-1 + p * zm2
        p = 0.494103151567532234274e-1 + p * zm2
        p = 0.25126649619989678683e-1 + p * zm2
        p = -0.180355685678449379109e-1 + p * zm2
        q = -0.223352763208617092964e-6
        q = 0.224936291922115757597e-3 + q * zm2
        q = 0.82130967464889339326e-2 + q * zm2
        q = 0.988504251128010129477e-1 + q * zm2
        q = 0.541391432071720958364e0 + q * zm2
        q = 0.148019669424231326694e1 + q * zm2
        q = 0.196202987197795200688e1 + q * zm2
        q = 0.1e1 + q * zm2

        y = 0.158963680267333984375
        r = zm2 * (z + 1)
        terms.append(r * y)
        terms.append(r * (p / q))
        return math.fsum(terms)

    if z < 1:
        # Shift to [1, 2]
        terms.append(-math.log(z))
        zm2 = zm1
        zm1 = z
        z += 1

    if z <= 1.5:
        # lgamma(z) = (z-1)(z-2)(Y + R(z-1))
        p = -0.100346687696279557415e-2
        p = -0.240149820648571559892e-1 + p * zm1
        p = -0.158413586390692192217e0 + p * zm1
        p = -0.406567124211938417342e0 + p * zm1
        p = -0.414983358359495381969e0 + p * zm1
        p = -0.969117530159521214579e-1 + p * zm1
        p = 0.490622454069039543534e-1 + p * zm1
        q = 0.195768102601107189171e-2
        q = 0.577039722690451849648e-1 + q * zm1
        q = 0.507137738614363510846e0 + q * zm1
        q = 0.191415588274426679201e1 + q * zm1
        q = 0.348739585360723852576e1 + q * zm1
        q = 0.302349829846463038743e1 + q * zm1
        q = 0.1e1 + q * zm1

        y = 0.52815341949462890625
        prefix = zm1 * zm2
        terms.append(prefix * y)
        terms.append(prefix * (p / q))
    else:
        # lgamma(z) = (2-z)(1-z)(Y + R(2-z))
        mzm2 = -zm2
        p = 0.431171342679297331241e-3
        p = -0.850535976868336437746e-2 + p * mzm2
        p = 0.542809694055053558157e-1 + p * mzm2
        p = -0.142440390738631274135e0 + p * mzm2
        p = 0.144216267757192309184e0 + p * mzm2
        p = -0.292329721830270012337e-1 + p * mzm2
        q = -0.827193521891290553639e-6
        q = -0.100666795539143372762e-2 + q * mzm2
        q = 0.25582797155975869989e-1 + q * mzm2
        q = -0.220095151814995745555e0 + q * mzm2
        q = 0.846973248876495016101e0 + q * mzm2
        q = -0.150169356054485044494e1 + q * mzm2
        q = 0.1e1 + q * mzm2

        y = 0.452017307281494140625
        r = zm2 * zm1
        terms.append(r * y)
        terms.append(r * (p / q))
    return math.fsum(terms)


# ----------------------------
# Gamma(1 + z) - 1
# ----------------------------

def gamma1pm1(z: float) -> float:
    """Compute Gamma(1 + z) - 1 accurately for small z.

    Args:
        z: argument (> -1 for a finite result)

    Returns:
        Gamma(1 + z) - 1
    """
    if z < 0:
        if z < -0.5:
            return gamma(1 + z) - 1
        return ieee_expm1(-math.log1p(z) + log_gamma_small(z + 2, z + 1, z))
    if z < 2:
        return ieee_expm1(log_gamma_small(z + 1, z, z - 1))
    return gamma(1 + z) - 1


def log_gamma1p(z: float) -> float:
    """Compute log(Gamma(1 + z)) accurately for small z.

    Args:
        z: argument (> -1 for a real logarithm)

    Returns:
        log|Gamma(1 + z)|; NaN for poles and NaN
    """
    if math.isnan(z):
        return math.nan
    if -0.5 <= z < 0:
        return -math.log1p(z) + log_gamma_small(z + 2, z + 1, z)
    if 0 <= z < 2:
        return log_gamma_small(z + 1, z, z - 1)
    return log_gamma(1 + z).value


def inv_gamma1pm1(z: float) -> float:
    """Compute 1 / Gamma(1 + z) - 1 accurately for small z.

    Args:
        z: argument

    Returns:
        1 / Gamma(1 + z) - 1; -1 where Gamma(1 + z) has a pole or overflows
    """
    if math.isnan(z):
        return math.nan
    if -0.5 <= z < 2:
        g = gamma1pm1(z)
        return -g / (1 + g)
    if _is_integer(1 + z) and 1 + z <= 0:
        return -1.0
    return 1.0 / gamma(1 + z) - 1
