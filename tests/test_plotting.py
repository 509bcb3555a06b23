import os

import matplotlib.pyplot as plt
import numpy as np
import pytest
from matplotlib.figure import Figure

from tcalc.engine import run_t_test
from tcalc.models import TailType, TestConfiguration
from tcalc.plotting import plot_t_distribution
from tcalc.plotting.distribution_plots import FIGURE_NAME, plot_range, rejection_mask


def test_plot_writes_figure_bundle(tmp_path, one_sample):
    result, config = one_sample
    png_path = plot_t_distribution(result, config, output_dir=str(tmp_path))

    assert png_path == os.path.join(str(tmp_path), FIGURE_NAME)
    for ext in (".png", ".pdf", ".svg"):
        assert os.path.exists(os.path.splitext(png_path)[0] + ext)


def test_plot_returns_figure_without_output_dir(one_sample):
    result, config = one_sample
    fig = plot_t_distribution(result, config)
    try:
        assert isinstance(fig, Figure)
        ax = fig.axes[0]
        labels = ax.get_legend_handles_labels()[1]
        assert any("df = 4" in label for label in labels)
        assert any("Rejection region" in label for label in labels)
    finally:
        plt.close(fig)


def test_plot_range_covers_statistic_and_critical_values(one_sample):
    result, _ = one_sample
    half_width = plot_range(result)
    assert half_width >= 4.0
    assert half_width >= abs(result.critical_values[1]) + 1.0


@pytest.mark.parametrize("tail", ["left-tailed", "right-tailed", "two-tailed"])
def test_rejection_mask_matches_tail(tail):
    config = TestConfiguration("one-sample", tail, 0.05, hypothesized_mean=25)
    result = run_t_test([23, 25, 27, 29, 31], config)
    grid = np.linspace(-5, 5, 101)
    mask = rejection_mask(grid, result, config.tail_type)
    assert mask.any()
    assert not mask[50]
    if config.tail_type is TailType.LEFT_TAILED:
        assert mask[0] and not mask[-1]
    elif config.tail_type is TailType.RIGHT_TAILED:
        assert mask[-1] and not mask[0]
    else:
        assert mask[0] and mask[-1]


def test_plot_warns_for_infinite_statistic(tmp_path):
    config = TestConfiguration("one-sample", hypothesized_mean=4.0)
    result = run_t_test([5.0, 5.0, 5.0], config)
    with pytest.warns(RuntimeWarning, match="not finite"):
        png_path = plot_t_distribution(result, config, output_dir=str(tmp_path))
    assert os.path.exists(png_path)
