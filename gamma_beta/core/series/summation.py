"""gamma_beta.core.series.summation

Summation of infinite series supplied by term generators.

A term generator is any object with a ``next_term()`` method returning the
next term of the series. Each series in the engine is a small class holding
only its recurrence state (previous term, index counter) and is consumed
once by one of the kernels below.

Both kernels stop when the latest term is no larger than ``eps * |sum|``.
Running out of terms before that raises ConvergenceError.
"""

from __future__ import annotations

import logging
from typing import Protocol

from ..errors import ConvergenceError

logger = logging.getLogger(__name__)


# Tolerance floors for the two kernels
_MIN_EPSILON = 2.0 ** -52
_MIN_KAHAN_EPSILON = 2.0 ** -62


class TermGenerator(Protocol):
    """Supplier of successive series terms."""

    def next_term(self) -> float:
        ...


def _floor_epsilon(epsilon: float, floor: float) -> float:
    # NaN compares false, so it lands on the floor too
    return epsilon if epsilon > floor else floor


def sum_series(gen: TermGenerator, epsilon: float, max_terms: int, init_value: float = 0.0) -> float:
    """Sum a series until the next term is negligible.

    Args:
        gen: term generator
        epsilon: relative tolerance (floored at 2^-52)
        max_terms: maximum number of terms to add
        init_value: starting value of the sum

    Returns:
        the sum

    Raises:
        ConvergenceError: if ``max_terms`` terms are added without convergence
    """
    eps = _floor_epsilon(epsilon, _MIN_EPSILON)

    result = init_value
    counter = max_terms
    while True:
        term = gen.next_term()
        result += term
        counter -= 1
        if abs(eps * result) >= abs(term):
            return result
        if counter <= 0:
            logger.debug("series %s: no convergence after %d terms (sum=%r, term=%r)",
                         type(gen).__name__, max_terms, result, term)
            raise ConvergenceError.iterations_exceeded(max_terms)


def kahan_sum_series(gen: TermGenerator, epsilon: float, max_terms: int, init_value: float = 0.0) -> float:
    """Sum a series with Kahan compensated summation.

    Tracks the rounding error of each addition in a carry term. This is
    closer to the true sum than :func:`sum_series` when the terms alternate
    in sign and cancel.

    Args:
        gen: term generator
        epsilon: relative tolerance (floored at 2^-62)
        max_terms: maximum number of terms to add
        init_value: starting value of the sum

    Returns:
        the sum

    Raises:
        ConvergenceError: if ``max_terms`` terms are added without convergence
    """
    eps = _floor_epsilon(epsilon, _MIN_KAHAN_EPSILON)

    result = init_value
    carry = 0.0
    counter = max_terms
    while True:
        term = gen.next_term()
        y = term - carry
        t = result + y
        carry = (t - result) - y
        result = t
        counter -= 1
        if abs(eps * result) >= abs(term):
            return result
        if counter <= 0:
            logger.debug("kahan series %s: no convergence after %d terms (sum=%r, term=%r)",
                         type(gen).__name__, max_terms, result, term)
            raise ConvergenceError.iterations_exceeded(max_terms)

