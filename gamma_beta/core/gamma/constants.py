"""gamma_beta.core.gamma.constants

Numeric limits and tables shared by the gamma and beta evaluators.
"""

from __future__ import annotations

import math
import sys

# ----------------------------
# Floating point limits
# ----------------------------

EPSILON = 2.0 ** -52
# sqrt(EPSILON)
ROOT_EPSILON = 1.4901161193847656e-8
MAX_VALUE = sys.float_info.max
MIN_NORMAL = sys.float_info.min

# Safe bounds for exp(); ln(MAX_VALUE) ~ 709.78, ln(MIN_NORMAL) ~ -708.40
LOG_MAX_VALUE = 709.0
LOG_MIN_VALUE = -708.0

# ----------------------------
# Mathematical constants
# ----------------------------

EULER = 0.5772156649015328606065120900824024310
LOG_PI = 1.144729885849400174143427
# ln(sqrt(2 pi))
LOG_ROOT_TWO_PI = 0.9189385332046727417803297

# ----------------------------
# Factorials
# ----------------------------

# Largest n with n! finite in double precision
MAX_FACTORIAL = 170
# Largest integer argument for which gamma(z) is finite
MAX_GAMMA_Z = 171

# n! for n = 0..170, correctly rounded
FACTORIALS = tuple(float(math.factorial(n)) for n in range(MAX_FACTORIAL + 1))
