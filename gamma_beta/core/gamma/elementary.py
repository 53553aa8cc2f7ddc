"""gamma_beta.core.gamma.elementary

Elementary helpers used throughout the gamma and beta evaluators.

The ``math`` module raises on overflow and on logarithms of zero, where IEEE
arithmetic returns an infinity. The evaluators deliberately run into those
limits (a prefix underflowing to zero, a power overflowing to infinity) and
rely on the IEEE results, so they call the wrappers below instead.

Also provides the accurate compound functions:
- log1pmx(x) = log(1 + x) - x
- powm1(x, y) = x^y - 1
- sinpx(z) = z * sin(pi * z)
"""

from __future__ import annotations

import math


# ----------------------------
# IEEE wrappers
# ----------------------------

def ieee_exp(x: float) -> float:
    """exp(x), returning +inf on overflow."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def ieee_expm1(x: float) -> float:
    """expm1(x), returning +inf on overflow."""
    try:
        return math.expm1(x)
    except OverflowError:
        return math.inf


def ieee_log(x: float) -> float:
    """Natural log with log(0) = -inf and log(x < 0) = nan."""
    if x > 0.0:
        return math.log(x)
    if x == 0.0:
        return -math.inf
    return math.nan


def ieee_log1p(x: float) -> float:
    """log1p with log1p(-1) = -inf and log1p(x < -1) = nan."""
    if x > -1.0:
        return math.log1p(x)
    if x == -1.0:
        return -math.inf
    return math.nan


def ieee_div(x: float, y: float) -> float:
    """x / y with signed infinity (or nan for 0/0) on division by zero."""
    try:
        return x / y
    except ZeroDivisionError:
        if x == 0.0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)


def ieee_pow(x: float, y: float) -> float:
    """x^y with IEEE overflow and pole behaviour.

    Returns +inf on overflow (with the sign of the result for a negative
    base and odd integer exponent), +inf for ``0^y`` with ``y < 0`` and nan
    for a negative base with non-integer exponent.
    """
    try:
        return math.pow(x, y)
    except OverflowError:
        if x < 0.0 and y == math.floor(y) and math.fmod(y, 2.0) != 0.0:
            return -math.inf
        return math.inf
    except ValueError:
        if x == 0.0:
            return math.inf
        return math.nan


# ----------------------------
# Compound functions
# ----------------------------

_LOG1PMX_LOW = -0.79149064
_LOG1PMX_HIGH = 1.0
_TWO_POW_M6 = 2.0 ** -6
_TWO_POW_M12 = 2.0 ** -12
_TWO_POW_M20 = 2.0 ** -20
_TWO_POW_M53 = 2.0 ** -53


def log1pmx(x: float) -> float:
    """Compute ``log(1 + x) - x`` accurately near zero.

    Uses a direct Taylor series for ``|x| < 2^-6`` and the series in
    ``z = x / (2 + x)``

        log(1 + x) - x = z * (2 z^2 [1/3 + z^2/5 + z^4/7 + ...] - x)

    on ``[-0.79149064, 1]``. Outside that range there is no cancellation and
    ``log1p(x) - x`` is used.

    Args:
        x: argument (>= -1)

    Returns:
        log(1 + x) - x; -inf at x = -1 and nan below
    """
    if x <= -1.0:
        return -math.inf if x == -1.0 else math.nan
    if x < _LOG1PMX_LOW or x > _LOG1PMX_HIGH:
        return math.log1p(x) - x

    a = abs(x)
    if a < _TWO_POW_M6:
        return _log1pmx_small(x, a)

    z = x / (2.0 + x)
    zz = z * z
    total = 1.0 / 3.0
    numerator = 1.0
    denominator = 3
    while True:
        numerator *= zz
        denominator += 2
        next_total = total + numerator / denominator
        if next_total == total:
            break
        total = next_total
    return z * (2.0 * zz * total - x)


def _log1pmx_small(x: float, a: float) -> float:
    # Fixed-length Taylor series, summed smallest term first
    x2 = x * x
    if a < _TWO_POW_M53:
        # 0 - ... avoids -0.0 at x = 0
        return 0.0 - x2 / 2.0

    x4 = x2 * x2
    if a < _TWO_POW_M20:
        return (x * x4 / 5.0
                - x4 / 4.0
                + x * x2 / 3.0
                - x2 / 2.0)

    if a < _TWO_POW_M12:
        return (x * x2 * x4 / 7.0
                - x2 * x4 / 6.0
                + x * x4 / 5.0
                - x4 / 4.0
                + x * x2 / 3.0
                - x2 / 2.0)

    x8 = x4 * x4
    return (x * x2 * x8 / 11.0
            - x2 * x8 / 10.0
            + x * x8 / 9.0
            - x8 / 8.0
            + x * x2 * x4 / 7.0
            - x2 * x4 / 6.0
            + x * x4 / 5.0
            - x4 / 4.0
            + x * x2 / 3.0
            - x2 / 2.0)


def powm1(x: float, y: float) -> float:
    """Compute ``x^y - 1`` accurately when ``x^y`` is close to 1.

    Args:
        x: base
        y: exponent (an even integer if x is negative)

    Returns:
        x^y - 1
    """
    if x > 0.0:
        # Small y*log(x): use expm1
        if abs(y * (x - 1.0)) < 0.5 or abs(y) < 0.2:
            l = y * math.log(x)
            if l < 0.5:
                return math.expm1(l)
    elif x < 0.0 and math.isfinite(y) and math.fmod(y, 2.0) == 0.0:
        # Even integer power of a negative base
        return powm1(-x, y)
    return ieee_pow(x, y) - 1.0


def sinpx(z: float) -> float:
    """Compute ``z * sin(pi * z)`` for negative z with exact argument reduction.

    Args:
        z: negative argument

    Returns:
        z * sin(pi * z)
    """
    sign = 1.0
    x = -z
    fl = math.floor(x)
    if math.fmod(fl, 2.0) != 0.0:
        fl += 1.0
        dist = fl - x
        sign = -sign
    else:
        dist = x - fl
    if dist > 0.5:
        dist = 1.0 - dist
    return sign * x * math.sin(dist * math.pi)
