"""
Numerical core for Student's t-tests.

This subpackage provides the special functions, the t-distribution and the
descriptive statistics the test engine is built on. All functions operate on
floats and sequences; no reporting or plotting logic is included.

Modules:
    special:
        Lanczos log-gamma, beta function and the regularized incomplete
        beta function evaluated with a continued fraction.

    distribution:
        Student t density, CDF (via the incomplete beta) and quantile
        (bracketed bisection on the CDF).

    descriptive:
        Mean, Bessel-corrected standard deviation and paired differences.

Design Principle:
    This subpackage has no dependencies on reporting/ or plotting/ modules.
    Every function is pure and can be tested independently.
"""

from .descriptive import mean, paired_differences, standard_deviation
from .distribution import t_cdf, t_pdf, t_quantile
from .special import beta, log_beta, log_gamma, regularized_incomplete_beta

__all__ = [
    "beta",
    "log_beta",
    "log_gamma",
    "regularized_incomplete_beta",
    "t_cdf",
    "t_pdf",
    "t_quantile",
    "mean",
    "paired_differences",
    "standard_deviation",
]
