"""Format t-test results as tables and plain-text reports.

This module sits between the engine and any output medium. It consumes only
the fields of a :class:`~tcalc.models.TTestResult` plus the
:class:`~tcalc.models.TestConfiguration` that produced it.
"""

from __future__ import annotations

import math
import warnings
from typing import List, Tuple

import pandas as pd

from .models import TestConfiguration, TestType, TTestResult
from .schema import COLUMNS

DEFAULT_DECIMALS = 4


def format_statistic(value: float, decimals: int = DEFAULT_DECIMALS) -> str:
    """Format a number for display, flagging IEEE special values.

    Args:
        value (float): Number to format.
        decimals (int): Fixed decimal places for finite values.

    Returns:
        str: ``"inf"``, ``"-inf"`` or ``"nan"`` for special values, else the
        fixed-point representation.

    Note:
        A ``RuntimeWarning`` is emitted for non-finite values. They arise from
        a zero standard error (identical observations) and should not be
        presented as ordinary numbers.
    """
    v = float(value)
    if math.isfinite(v):
        return f"{v:.{decimals}f}"
    warnings.warn(
        f"Non-finite value ({v}) in t-test result; the sample may have zero variance.",
        RuntimeWarning,
        stacklevel=2,
    )
    if math.isnan(v):
        return "nan"
    return "inf" if v > 0 else "-inf"


def _format_df(df: float) -> str:
    return f"{df:g}"


def _descriptive_labels(test_type: TestType) -> Tuple[str, str, str]:
    if test_type is TestType.PAIRED:
        return "Mean difference", "SD of differences", "Number of pairs"
    if test_type is TestType.TWO_SAMPLE:
        return "Difference of means", "Pooled standard deviation", "Combined sample size"
    return COLUMNS.sample_mean, COLUMNS.sample_sd, COLUMNS.sample_size


def decision_label(result: TTestResult) -> str:
    return "Reject H₀" if result.reject else "Fail to Reject H₀"


def p_value_comparison(result: TTestResult, config: TestConfiguration) -> str:
    """Return e.g. ``"p-value (0.2302) ≥ α (0.05)"``."""
    p_text = format_statistic(result.p_value)
    sign = "<" if result.reject else "≥"
    return f"p-value ({p_text}) {sign} α ({config.significance_level:g})"


def result_rows(result: TTestResult, config: TestConfiguration) -> List[Tuple[str, str]]:
    """Return ``(label, formatted value)`` pairs in report order."""
    mean_label, sd_label, size_label = _descriptive_labels(config.test_type)
    critical = ", ".join(format_statistic(c) for c in result.critical_values)
    return [
        (COLUMNS.test_type, config.test_type.value),
        (COLUMNS.tail_type, config.tail_type.value),
        (COLUMNS.alpha, f"{config.significance_level:g}"),
        (COLUMNS.null, result.hypotheses.null),
        (COLUMNS.alternative, result.hypotheses.alternative),
        (COLUMNS.t_statistic, format_statistic(result.t_statistic)),
        (COLUMNS.df, _format_df(result.degrees_of_freedom)),
        (COLUMNS.p_value, format_statistic(result.p_value)),
        (COLUMNS.critical_values, critical),
        (mean_label, format_statistic(result.sample_mean)),
        (sd_label, format_statistic(result.sample_standard_deviation)),
        (size_label, str(result.sample_size)),
        (COLUMNS.decision, decision_label(result)),
        (COLUMNS.conclusion, result.conclusion),
        (COLUMNS.interpretation, result.interpretation),
    ]


def result_table(result: TTestResult, config: TestConfiguration) -> pd.DataFrame:
    """Build a long-form two-column table of the result.

    Returns:
        pandas.DataFrame: Columns ``Quantity`` and ``Value``, one row per
        reported quantity.
    """
    rows = result_rows(result, config)
    return pd.DataFrame(rows, columns=[COLUMNS.quantity, COLUMNS.value])


def format_report(result: TTestResult, config: TestConfiguration) -> str:
    """Render a multi-line plain-text report."""
    rows = result_rows(result, config)
    width = max(len(label) for label, _ in rows)
    lines = ["T-Test Results", "=" * 14]
    for label, value in rows:
        if label in (COLUMNS.conclusion, COLUMNS.interpretation):
            continue
        lines.append(f"{label:<{width}} : {value}")
    lines.append("")
    lines.append(p_value_comparison(result, config))
    lines.append(result.conclusion)
    lines.append(result.interpretation)
    return "\n".join(lines)
