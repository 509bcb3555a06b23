"""Write t-test results to CSV and plain-text files.

This module is the boundary between in-memory results and files on disk.
"""

from __future__ import annotations

import os

from .models import TestConfiguration, TTestResult
from .reporting import format_report, result_table

RESULT_CSV_NAME = "t_test_result.csv"
REPORT_TXT_NAME = "t_test_report.txt"


def save_result_to_csv(
    result: TTestResult, config: TestConfiguration, output_dir: str = "output"
) -> str:
    """Save the long-form result table as CSV.

    Args:
        result (TTestResult): Engine output.
        config (TestConfiguration): Configuration that produced ``result``.
        output_dir (str): Directory to write into; created if missing.

    Returns:
        str: Path to ``t_test_result.csv``.
    """
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, RESULT_CSV_NAME)
    result_table(result, config).to_csv(path, index=False, encoding="utf-8")
    print(f"Saved t-test result table to {path}")
    return path


def save_report_text(
    result: TTestResult, config: TestConfiguration, output_dir: str = "output"
) -> str:
    """Save the plain-text report and return its path."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, REPORT_TXT_NAME)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(format_report(result, config))
        fh.write("\n")
    print(f"Saved t-test report to {path}")
    return path
