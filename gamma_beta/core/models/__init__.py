"""
Configuration and method tags for the evaluation engine.
"""

from .policy import Policy, MACHINE_EPSILON
from .methods import GammaMethod, BetaMethod

__all__ = [
    "Policy",
    "MACHINE_EPSILON",
    "GammaMethod",
    "BetaMethod",
]
