"""gamma_beta.core.series.continued_fraction

Generalized continued fractions evaluated with the modified Lentz method.

The fraction is

    b0 + a1 / (b1 + a2 / (b2 + a3 / (b3 + ...)))

and a coefficient generator supplies the pairs ``(a_n, b_n)`` through
``next_coefficients()``. The generator is consumed once.

Two entry points:
  - ``value(gen)``: the first pair provides b0; its ``a`` is ignored.
  - ``value_with_leading_term(b0, gen)``: b0 is given and the generator
    starts at ``(a1, b1)``. The result is ``b0 + a1 / evaluate(b1, ...)`` so
    the convergence test is applied to the tail only; this matters when b0
    dominates or cancels the tail.

References:
- Lentz (1976), Thompson and Barnett (1986) modified Lentz algorithm.
- Press et al., Numerical Recipes, 3rd ed., section 5.2.
"""

from __future__ import annotations

import logging
import math
from typing import Protocol, Tuple

from ..errors import ConvergenceError

logger = logging.getLogger(__name__)


# Replacement for a vanishing divisor
SMALL = 1e-50

# Usable tolerance range; outside it the default tolerance is used
MIN_EPSILON = 2.0 ** -53
MAX_EPSILON = 0.5

_DEFAULT_LOW = 1.0 - 2.0 ** -53
_DEFAULT_EPS = 2.0 ** -52


class CoefficientGenerator(Protocol):
    """Supplier of continued fraction coefficient pairs ``(a, b)``."""

    def next_coefficients(self) -> Tuple[float, float]:
        ...


def _fix(v: float) -> float:
    if abs(v) < SMALL:
        return math.copysign(SMALL, v)
    return v


def evaluate(b0: float, gen: CoefficientGenerator, epsilon: float, max_iterations: int) -> float:
    """Evaluate ``b0 + a1/(b1 + a2/(b2 + ...))`` with the modified Lentz method.

    Convergence requires the ratio of successive convergents to satisfy
    ``|delta - 1| <= eps`` and ``delta >= 1 - epsilon``.

    Args:
        b0: leading term
        gen: generator of ``(a_n, b_n)`` for n >= 1
        epsilon: relative tolerance in (2^-53, 0.5]; other values use 2^-53
        max_iterations: maximum number of coefficient pairs to consume

    Returns:
        the fraction value

    Raises:
        ConvergenceError: if the convergents diverge, or the iteration limit
            is reached without convergence
    """
    if MIN_EPSILON < epsilon <= MAX_EPSILON:
        low = 1.0 - epsilon
        eps = 1.0 / low - 1.0
    else:
        low = _DEFAULT_LOW
        eps = _DEFAULT_EPS

    f = _fix(b0)
    c = f
    d = 0.0

    for _ in range(max_iterations):
        a, b = gen.next_coefficients()

        d = 1.0 / _fix(b + a * d)
        c = _fix(b + a / c)
        delta = c * d
        f *= delta

        if not math.isfinite(f):
            logger.debug("continued fraction %s diverged: a=%r b=%r", type(gen).__name__, a, b)
            raise ConvergenceError(f"Continued fraction diverged to {f} for b0={b0}")
        # delta == 0 means an infinite a or b; the result can never recover
        if delta == 0.0:
            raise ConvergenceError(f"Continued fraction convergents diverged to zero for b0={b0}")

        if abs(delta - 1.0) <= eps and delta >= low:
            return f

    logger.debug("continued fraction %s: no convergence after %d iterations (value=%r)",
                 type(gen).__name__, max_iterations, f)
    raise ConvergenceError(f"Maximum iterations ({max_iterations}) exceeded", max_iterations)


def value(gen: CoefficientGenerator, epsilon: float, max_iterations: int) -> float:
    """Evaluate a fraction whose first coefficient pair provides ``b0``."""
    _, b0 = gen.next_coefficients()
    return evaluate(b0, gen, epsilon, max_iterations)


def value_with_leading_term(b0: float, gen: CoefficientGenerator, epsilon: float, max_iterations: int) -> float:
    """Evaluate ``b0 + a1 / (b1 + ...)`` testing convergence on the tail only."""
    a1, b1 = gen.next_coefficients()
    return b0 + a1 / evaluate(b1, gen, epsilon, max_iterations)
