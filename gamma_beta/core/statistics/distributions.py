"""gamma_beta.core.statistics.distributions

Distribution helpers built on the incomplete gamma and beta functions.

Implemented:
- Standard normal PPF via stdlib ``statistics.NormalDist``
- Gamma and chi-square CDF / survival function via P(a, x) and Q(a, x)
- Chi-square PPF via Wilson-Hilferty + safeguarded Newton
- Beta, Student-t and F CDFs via I_x(a, b)

Chi-square:
  If X ~ ChiSquare(df), then X = 2 * Gamma(a=df/2, scale=1).
  CDF is regularized lower incomplete gamma P(a, x/2).

Student-t and F:
  Both reduce to the incomplete beta. The argument is chosen so that the
  incomplete beta is evaluated away from 1, where the complement would
  cancel.

Invalid parameters give NaN; only the quantile raises.
"""

from __future__ import annotations

import math
from statistics import NormalDist

from ..beta.incomplete import regularized_incomplete_beta, regularized_incomplete_beta_complement
from ..gamma.incomplete import regularized_gamma_p, regularized_gamma_p_derivative, regularized_gamma_q


# ----------------------------
# Normal
# ----------------------------

_NORMAL = NormalDist()


def normal_ppf(p: float) -> float:
    """Standard normal quantile (inverse CDF).

    Args:
        p: probability in (0, 1)

    Returns:
        z such that P(Z <= z) = p
    """
    if not (0.0 < p < 1.0):
        raise ValueError("p must be in (0,1)")
    return float(_NORMAL.inv_cdf(p))


# ----------------------------
# Gamma
# ----------------------------

def gamma_cdf(x: float, shape: float, scale: float = 1.0) -> float:
    """CDF of the gamma distribution.

    Args:
        x: value
        shape: shape parameter k (>0)
        scale: scale parameter theta (>0)

    Returns:
        P(X <= x)
    """
    if not (shape > 0.0 and scale > 0.0) or math.isnan(x):
        return math.nan
    if x <= 0.0:
        return 0.0
    if math.isinf(x):
        return 1.0
    return regularized_gamma_p(shape, x / scale)


def gamma_sf(x: float, shape: float, scale: float = 1.0) -> float:
    """Survival function P(X > x) of the gamma distribution."""
    if not (shape > 0.0 and scale > 0.0) or math.isnan(x):
        return math.nan
    if x <= 0.0:
        return 1.0
    if math.isinf(x):
        return 0.0
    return regularized_gamma_q(shape, x / scale)


# ----------------------------
# Chi-square
# ----------------------------

def chi2_cdf(x: float, df: float) -> float:
    """CDF of chi-square distribution.

    Args:
        x: value
        df: degrees of freedom (>0)

    Returns:
        P(X <= x)
    """
    return gamma_cdf(x, 0.5 * df, 2.0)


def chi2_sf(x: float, df: float) -> float:
    """Survival function P(X > x) of chi-square distribution."""
    return gamma_sf(x, 0.5 * df, 2.0)


def _chi2_pdf(x: float, df: float) -> float:
    """PDF of chi-square distribution."""
    if x <= 0.0:
        return 0.0
    # d/dx P(k, x/2) = 0.5 * P'(k, x/2)
    return 0.5 * regularized_gamma_p_derivative(0.5 * df, 0.5 * x)


def chi2_ppf(p: float, df: float) -> float:
    """Quantile (inverse CDF) of chi-square distribution.

    Uses Wilson-Hilferty for an initial guess then a safeguarded Newton method
    that maintains a bracket.

    Args:
        p: probability in (0,1)
        df: degrees of freedom (>0)

    Returns:
        x such that chi2_cdf(x, df) = p

    Raises:
        ValueError: if df is not positive or p is outside (0,1)
    """
    if not df > 0:
        raise ValueError("df must be positive")
    if not (0.0 < p < 1.0):
        raise ValueError("p must be in (0,1)")

    # Initial guess via Wilson-Hilferty
    k = float(df)
    z = normal_ppf(p)
    t = 1.0 - 2.0 / (9.0 * k) + z * math.sqrt(2.0 / (9.0 * k))
    x = k * max(t, 1e-12) ** 3

    # Bracket
    lo = 0.0
    hi = max(x, 1e-12)
    # Expand hi until CDF(hi) >= p
    for _ in range(200):
        if chi2_cdf(hi, df) >= p:
            break
        hi *= 2.0
    else:
        return float(hi)

    # Ensure x within bracket
    x = min(max(x, lo + 1e-15), hi - 1e-15)

    tol = 1e-12
    for _ in range(100):
        cdf = chi2_cdf(x, df)
        if cdf < p:
            lo = x
        else:
            hi = x

        pdf = _chi2_pdf(x, df)
        if 0.0 < pdf < math.inf:
            x_new = x - (cdf - p) / pdf
        else:
            x_new = math.nan

        # Safeguard: keep inside bracket
        if (not math.isfinite(x_new)) or x_new <= lo or x_new >= hi:
            x_new = 0.5 * (lo + hi)

        if abs(x_new - x) <= tol * max(1.0, x):
            return float(x_new)
        x = x_new

    return float(x)


# ----------------------------
# Beta family
# ----------------------------

def beta_cdf(x: float, a: float, b: float) -> float:
    """CDF of the beta distribution, I_x(a, b), for a, b > 0."""
    if not (a > 0.0 and b > 0.0) or math.isnan(x):
        return math.nan
    if x <= 0.0:
        return 0.0
    if x >= 1.0:
        return 1.0
    return regularized_incomplete_beta(a, b, x)


def student_t_cdf(t: float, df: float) -> float:
    """CDF of Student's t distribution.

    Args:
        t: value
        df: degrees of freedom (>0)

    Returns:
        P(T <= t)
    """
    if not df > 0.0 or math.isinf(df) or math.isnan(t):
        return math.nan
    if t == 0.0:
        return 0.5
    t2 = t * t
    if df > 2 * t2:
        z = t2 / (df + t2)
        tail = 0.5 * regularized_incomplete_beta_complement(0.5, 0.5 * df, z)
    else:
        z = df / (df + t2)
        tail = 0.5 * regularized_incomplete_beta(0.5 * df, 0.5, z)
    return 1.0 - tail if t > 0 else tail


def f_cdf(x: float, d1: float, d2: float) -> float:
    """CDF of the F distribution with d1 and d2 degrees of freedom."""
    if not (d1 > 0.0 and d2 > 0.0) or math.isinf(d1) or math.isinf(d2) or math.isnan(x):
        return math.nan
    if x <= 0.0:
        return 0.0
    if math.isinf(x):
        return 1.0
    v1x = d1 * x
    if v1x > d2:
        return regularized_incomplete_beta_complement(0.5 * d2, 0.5 * d1, d2 / (d2 + v1x))
    return regularized_incomplete_beta(0.5 * d1, 0.5 * d2, v1x / (d2 + v1x))
