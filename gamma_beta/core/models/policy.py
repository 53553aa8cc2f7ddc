"""
Convergence policy for the iterative evaluators.

This module defines the tolerance and iteration limit shared by every series
and continued fraction in the engine.
"""

import math
from dataclasses import dataclass
from typing import Dict, Any, Optional


# Smallest relative tolerance accepted by the engine (one ulp of 1.0)
MACHINE_EPSILON = 2.0 ** -52


@dataclass(frozen=True)
class Policy:
    """
    Convergence settings for iterative evaluation.

    Attributes:
        epsilon: Relative error target (default: 2^-53). A non-positive or NaN
            value is replaced by machine epsilon (2^-52).
        max_iterations: Maximum number of terms or fraction steps before
            :class:`~gamma_beta.core.errors.ConvergenceError` is raised
            (default: 1,000,000)

    Instances are immutable and may be shared between threads.
    """

    epsilon: float = 2.0 ** -53
    max_iterations: int = 1_000_000

    def __post_init__(self):
        """Validate policy after initialization."""
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")

        # Clamp instead of rejecting: an unusable epsilon means "as tight as possible"
        if math.isnan(self.epsilon) or self.epsilon <= 0:
            object.__setattr__(self, "epsilon", MACHINE_EPSILON)

    def with_epsilon(self, epsilon: float) -> "Policy":
        """Copy of this policy with a different tolerance."""
        return Policy(epsilon=epsilon, max_iterations=self.max_iterations)

    def with_max_iterations(self, max_iterations: int) -> "Policy":
        """Copy of this policy with a different iteration limit."""
        return Policy(epsilon=self.epsilon, max_iterations=max_iterations)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize policy to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "epsilon": self.epsilon,
            "max_iterations": self.max_iterations,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Policy":
        """
        Create policy from dictionary.

        Args:
            data: Dictionary with policy values; missing keys use defaults

        Returns:
            Policy instance
        """
        return cls(
            epsilon=data.get("epsilon", 2.0 ** -53),
            max_iterations=data.get("max_iterations", 1_000_000),
        )

    @classmethod
    def default(cls) -> "Policy":
        """Create default policy."""
        return _DEFAULT

    @classmethod
    def high_precision(cls) -> "Policy":
        """
        Create policy for compensated summation at its tightest tolerance.

        The plain kernels floor the tolerance at 2^-52; the Kahan kernel
        accepts down to 2^-62.
        """
        return cls(epsilon=2.0 ** -62, max_iterations=10_000_000)

    def __repr__(self) -> str:
        return f"Policy(epsilon={self.epsilon!r}, max_iterations={self.max_iterations})"


_DEFAULT = Policy()


def resolve(policy: Optional[Policy]) -> Policy:
    """Return ``policy`` or the shared default when it is None."""
    return _DEFAULT if policy is None else policy
