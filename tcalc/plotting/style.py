"""Centralized plotting style, labels and save helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

OUTPUT_FORMATS: tuple[str, ...] = ("png", "pdf", "svg")
FIGURE_DPI = 300
_STYLE_STATE = {"initialized": False}


@dataclass(frozen=True)
class StyleConfig:
    BASE_FONTSIZE: float = 12.0
    TITLE_FONTSIZE: float = 14.0
    LABEL_FONTSIZE: float = 12.0
    TICK_FONTSIZE: float = 11.0
    LEGEND_FONTSIZE: float = 10.0
    LINEWIDTH: float = 2.0
    LINEWIDTH_THIN: float = 1.2
    LINEWIDTH_THICK: float = 2.5
    MARKERSIZE: float = 6.0
    ALPHA_REGION: float = 0.35
    GRID_ALPHA: float = 0.20
    FIGSIZE_SINGLE: tuple[float, float] = (7.0, 4.2)


STYLE = StyleConfig()

COLORS = {
    "density": "#1f4e8c",
    "rejection": "#d1495b",
    "critical": "#d1495b",
    "statistic": "#222222",
}

MATH_LABELS = {
    "t": r"$t$",
    "density": r"$f(t)$",
    "critical": r"$t_{\mathrm{crit}}$",
    "statistic": r"$t_{\mathrm{obs}}$",
}


def apply_global_style(font_scale: float = 1.0) -> None:
    """Apply the project rcParams, scaled by ``font_scale``."""
    scale = float(font_scale)
    plt.rcParams.update(
        {
            "font.family": "STIXGeneral",
            "font.size": STYLE.BASE_FONTSIZE * scale,
            "axes.titlesize": STYLE.TITLE_FONTSIZE * scale,
            "axes.labelsize": STYLE.LABEL_FONTSIZE * scale,
            "xtick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "ytick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "legend.fontsize": STYLE.LEGEND_FONTSIZE * scale,
            "mathtext.fontset": "stix",
            "mathtext.default": "regular",
            "axes.titlepad": 8,
            "axes.labelpad": 6,
            "axes.linewidth": STYLE.LINEWIDTH_THIN,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "legend.frameon": False,
            "lines.linewidth": STYLE.LINEWIDTH,
            "lines.markersize": STYLE.MARKERSIZE,
            "figure.dpi": 120,
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
            "savefig.pad_inches": 0.12,
        }
    )


def set_global_style() -> None:
    """Apply global plotting style once per process."""
    if not _STYLE_STATE["initialized"]:
        apply_global_style(font_scale=1.0)
        _STYLE_STATE["initialized"] = True


def clean_axis(ax: Axes, *, grid_axis: str = "y", nbins_x: int = 8) -> None:
    """Apply consistent ticks, grid and spines to one axis."""
    ax.tick_params(axis="both", which="major", labelsize=STYLE.TICK_FONTSIZE, width=1.0)
    ax.xaxis.set_major_locator(MaxNLocator(nbins=nbins_x))
    for side in ("left", "bottom"):
        ax.spines[side].set_linewidth(STYLE.LINEWIDTH_THIN)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.grid(False)
    if grid_axis in {"x", "y", "both"}:
        ax.grid(
            True, axis=grid_axis, alpha=STYLE.GRID_ALPHA, linestyle=":", linewidth=0.7
        )


def set_axis_labels(ax: Axes, x: str | None = None, y: str | None = None) -> None:
    if x is not None:
        ax.set_xlabel(x, fontsize=STYLE.LABEL_FONTSIZE, labelpad=6)
    if y is not None:
        ax.set_ylabel(y, fontsize=STYLE.LABEL_FONTSIZE, labelpad=6)


def save_figure(
    fig: Figure,
    savepath_base: str | Path,
    formats: Sequence[str] = OUTPUT_FORMATS,
    dpi: int = FIGURE_DPI,
) -> Path:
    """Save a figure to multiple formats using one extensionless base path."""
    base = Path(savepath_base)
    base.parent.mkdir(parents=True, exist_ok=True)
    for ext in formats:
        fig.savefig(
            str(base.with_suffix(f".{ext}")),
            dpi=dpi if ext == "png" else None,
            bbox_inches="tight",
            pad_inches=0.12,
        )
    return base.with_suffix(".png")


def save_figure_bundle(fig: Figure, png_path: str) -> str:
    """Save synchronized PNG, PDF and SVG files for a figure."""
    base = Path(os.path.splitext(png_path)[0])
    return str(save_figure(fig, base))
