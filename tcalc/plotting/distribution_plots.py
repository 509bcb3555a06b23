"""Render the t-distribution behind a test result.

The figure shows the density for the result's degrees of freedom, the shaded
rejection region(s), the critical value(s) and the observed statistic. It
consumes ``t_pdf`` from the numerical core rather than re-deriving it.
"""

from __future__ import annotations

import math
import os
import warnings

import matplotlib.pyplot as plt
import numpy as np

from tcalc.models import TailType, TestConfiguration, TTestResult
from tcalc.stats.distribution import t_pdf

from .style import (
    COLORS,
    MATH_LABELS,
    STYLE,
    clean_axis,
    save_figure_bundle,
    set_axis_labels,
    set_global_style,
)

FIGURE_NAME = "t_distribution.png"
MIN_HALF_WIDTH = 4.0


def plot_range(result: TTestResult) -> float:
    """Return the half-width of the symmetric x-range to plot.

    Covers at least ``[-4, 4]`` and extends one unit past the observed
    statistic and every critical value. A non-finite statistic is ignored.
    """
    candidates = [MIN_HALF_WIDTH]
    candidates.extend(abs(c) + 1.0 for c in result.critical_values if math.isfinite(c))
    if math.isfinite(result.t_statistic):
        candidates.append(abs(result.t_statistic) + 1.0)
    return max(candidates)


def rejection_mask(grid: np.ndarray, result: TTestResult, tail_type: TailType) -> np.ndarray:
    """Boolean mask of grid points that fall in the rejection region."""
    critical = result.critical_values
    if tail_type is TailType.TWO_TAILED:
        return (grid <= critical[0]) | (grid >= critical[1])
    if tail_type is TailType.RIGHT_TAILED:
        return grid >= critical[0]
    return grid <= critical[0]


def plot_t_distribution(
    result: TTestResult,
    config: TestConfiguration,
    output_dir: str | None = None,
    ax: plt.Axes | None = None,
    n_points: int = 401,
):
    """Plot the t density with rejection region(s) and the observed statistic.

    Args:
        result (TTestResult): Engine output supplying df, critical values and
            the statistic.
        config (TestConfiguration): Supplies the tail type and alpha.
        output_dir (str, optional): When given, save a PNG/PDF/SVG bundle
            there and close the figure.
        ax (matplotlib.axes.Axes, optional): Draw into an existing axis.
        n_points (int): Number of grid points for the density curve.

    Returns:
        str | matplotlib.figure.Figure: PNG path when ``output_dir`` is given,
        otherwise the figure.

    Note:
        A non-finite statistic (zero variance) cannot be placed on the axis;
        its marker is omitted with a ``RuntimeWarning``.
    """
    set_global_style()
    df = result.degrees_of_freedom
    half_width = plot_range(result)
    grid = np.linspace(-half_width, half_width, int(n_points))
    density = t_pdf(grid, df)

    own_figure = ax is None
    if own_figure:
        fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    else:
        fig = ax.figure

    ax.fill_between(
        grid,
        0.0,
        density,
        where=rejection_mask(grid, result, config.tail_type),
        color=COLORS["rejection"],
        alpha=STYLE.ALPHA_REGION,
        linewidth=0.0,
        label=f"Rejection region (α = {config.significance_level:g})",
    )
    ax.plot(
        grid,
        density,
        color=COLORS["density"],
        linewidth=STYLE.LINEWIDTH_THICK,
        label=f"t-distribution (df = {df:g})",
    )

    if config.tail_type is TailType.TWO_TAILED:
        crit_label = f"{MATH_LABELS['critical']} = ±{abs(result.critical_values[1]):.3f}"
    else:
        crit_label = f"{MATH_LABELS['critical']} = {result.critical_values[0]:.3f}"
    for i, crit in enumerate(result.critical_values):
        ax.axvline(
            crit,
            color=COLORS["critical"],
            linewidth=STYLE.LINEWIDTH,
            linestyle="--",
            label=crit_label if i == 0 else None,
        )

    t_obs = result.t_statistic
    if math.isfinite(t_obs):
        ax.axvline(t_obs, color=COLORS["statistic"], linewidth=STYLE.LINEWIDTH_THICK)
        ax.plot(
            [t_obs],
            [t_pdf(t_obs, df)],
            "o",
            color=COLORS["statistic"],
            markeredgecolor="white",
            label=f"{MATH_LABELS['statistic']} = {t_obs:.3f}",
        )
    else:
        warnings.warn(
            f"t-statistic is not finite ({t_obs}); observed-statistic marker omitted.",
            RuntimeWarning,
            stacklevel=2,
        )

    ax.set_xlim(-half_width, half_width)
    ax.set_ylim(bottom=0.0)
    set_axis_labels(ax, x=MATH_LABELS["t"], y=MATH_LABELS["density"])
    clean_axis(ax)
    ax.legend(loc="upper right")
    ax.set_title(f"Student t-distribution, {config.tail_type.value} test")

    if output_dir is None:
        return fig

    os.makedirs(output_dir, exist_ok=True)
    png_path = save_figure_bundle(fig, os.path.join(output_dir, FIGURE_NAME))
    if own_figure:
        plt.close(fig)
    return png_path
