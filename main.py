#!/usr/bin/env python3
"""
Main script for running a Student t-test from the command line.
"""

# Pipeline overview:
# 1) Parse the test configuration and the samples (typed values, CSV columns
#    or summary statistics).
# 2) Compute the t-statistic, degrees of freedom, p-value and critical values.
# 3) Print the report, export CSV/text tables and render the distribution
#    figure with the rejection region(s) shaded.
#
# Example:
#   python main.py --test-type one-sample --mu0 25 --sample "23, 25, 27, 29, 31"

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from tcalc.cli import main

if __name__ == "__main__":
    sys.exit(main())
