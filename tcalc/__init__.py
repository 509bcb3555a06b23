"""
A Python package for Student's t-tests.

Implements the t-distribution from first principles (Lanczos log-gamma and a
continued-fraction incomplete beta) and the one-sample, two-sample (pooled
variance) and paired t-tests built on it.

Modules:
    - stats: special functions, t-distribution, descriptive statistics.
    - engine: runs a test from raw samples or summary statistics.
    - models: configuration and result types.
    - data_processing: parses typed or CSV samples.
    - reporting / output: result tables, text reports and file export.
    - plotting: t-distribution figure with rejection regions.
"""

__version__ = "1.0.0"

from .engine import run_t_test, run_t_test_from_summary
from .errors import DomainError, TTestError, ValidationError
from .models import (
    Hypotheses,
    SummaryStatistics,
    TailType,
    TestConfiguration,
    TestType,
    TTestResult,
)
from .stats import (
    beta,
    log_beta,
    log_gamma,
    mean,
    regularized_incomplete_beta,
    standard_deviation,
    t_cdf,
    t_pdf,
    t_quantile,
)

__all__ = [
    # Engine
    "run_t_test",
    "run_t_test_from_summary",
    # Types
    "Hypotheses",
    "SummaryStatistics",
    "TailType",
    "TestConfiguration",
    "TestType",
    "TTestResult",
    # Errors
    "TTestError",
    "ValidationError",
    "DomainError",
    # Numerical core
    "beta",
    "log_beta",
    "log_gamma",
    "regularized_incomplete_beta",
    "t_cdf",
    "t_pdf",
    "t_quantile",
    "mean",
    "standard_deviation",
]
