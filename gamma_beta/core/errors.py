"""gamma_beta.core.errors

Exceptions raised by the evaluation engine.

Domain violations (NaN input, non-positive shape parameters, x outside its
interval) are never raised: the public functions return ``nan`` for those.
The only hard failure is an iterative kernel running out of iterations.
"""

from __future__ import annotations

from typing import Optional


class ConvergenceError(ArithmeticError):
    """An iterative evaluation did not meet its tolerance.

    Raised when a series or continued fraction exhausts the iteration
    limit of its :class:`~gamma_beta.core.models.policy.Policy`, or when a
    continued fraction diverges.

    Attributes:
        max_iterations: the iteration limit that was in force (None for
            divergence, which is detected before the limit is reached)
    """

    def __init__(self, message: str, max_iterations: Optional[int] = None):
        super().__init__(message)
        self.max_iterations = max_iterations

    @classmethod
    def iterations_exceeded(cls, max_iterations: int) -> "ConvergenceError":
        return cls(f"Failed to converge within {max_iterations} iterations", max_iterations)
