"""
Plotting utilities for t-test results.

All plotting functions accept precomputed results and do not perform any
hypothesis-test calculations; densities come from ``tcalc.stats``.

Modules:
    distribution_plots:
        The t density for the result's degrees of freedom with shaded
        rejection region(s), critical-value guides and the observed
        statistic.

    style:
        rcParams, axis cleanup and multi-format save helpers.

Styling:
    Serif (STIX) fonts, 300 DPI output, and suppressed top/right spines.
"""

from .distribution_plots import plot_t_distribution
from .style import set_global_style

__all__ = ["plot_t_distribution", "set_global_style"]
