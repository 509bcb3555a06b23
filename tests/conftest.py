"""Shared pytest setup: repository-relative imports, headless plotting, and
the worked one-sample example used by the report and plot tests."""

import os
import sys

import matplotlib
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

matplotlib.use("Agg")

from tcalc.engine import run_t_test  # noqa: E402
from tcalc.models import TestConfiguration  # noqa: E402

ONE_SAMPLE_VALUES = [23, 25, 27, 29, 31]


@pytest.fixture
def one_sample():
    """Two-tailed one-sample test of ``ONE_SAMPLE_VALUES`` against mu0 = 25."""
    config = TestConfiguration("one-sample", "two-tailed", 0.05, hypothesized_mean=25)
    return run_t_test(ONE_SAMPLE_VALUES, config), config
