"""Statistics utilities built on the special function engine.

This package contains small distribution helpers that consume the incomplete
gamma and incomplete beta functions:
- Gamma and chi-square CDF / survival / quantile
- Beta, Student-t and F CDFs

No SciPy dependency is required.
"""

from .distributions import (
    normal_ppf,
    gamma_cdf,
    gamma_sf,
    chi2_cdf,
    chi2_sf,
    chi2_ppf,
    beta_cdf,
    student_t_cdf,
    f_cdf,
)

__all__ = [
    "normal_ppf",
    "gamma_cdf",
    "gamma_sf",
    "chi2_cdf",
    "chi2_sf",
    "chi2_ppf",
    "beta_cdf",
    "student_t_cdf",
    "f_cdf",
]
