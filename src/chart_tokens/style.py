"""Translate computed chart tokens into matplotlib rcParams."""

from __future__ import annotations

import matplotlib as mpl
import matplotlib.pyplot as plt
from matplotlib.ticker import FixedLocator

from .color import generate_dark_mode_palette
from .formatting import get_responsive_font_size
from .layout import get_responsive_chart_height
from .theme import CATEGORICAL_POOL, CHART, DARK_BACKGROUND, FONT_SIZES, FONTS, LAYOUT, NEUTRAL, WHITE
from .ticks import Orientation, calculate_optimal_tick_count, generate_nice_ticks

LIGHT_SURFACE = {
    "bg": WHITE,
    "text": NEUTRAL[900],
    "muted": NEUTRAL[500],
    "grid": CHART["grid"],
    "border": CHART["axis"],
    "legend_bg": CHART["tooltip_bg"],
}

DARK_SURFACE = {
    "bg": DARK_BACKGROUND,
    "text": NEUTRAL[50],
    "muted": NEUTRAL[400],
    "grid": NEUTRAL[700],
    "border": NEUTRAL[600],
    "legend_bg": NEUTRAL[900],
}


def build_style(container_width: float = 800, *, dark: bool = False, series: int = 7) -> dict:
    """rcParams for a chart rendered into ``container_width`` pixels.

    Figure size comes from the responsive height table, font sizes scale
    with the container, and the color cycle is the first ``series``
    categorical colors, at least one and at most twelve (dark-mode variants
    when ``dark``).
    """
    surface = DARK_SURFACE if dark else LIGHT_SURFACE
    palette = list(CATEGORICAL_POOL[:max(series, 1)])
    if dark:
        palette = generate_dark_mode_palette(palette)

    dpi = LAYOUT["dpi"]
    width = max(container_width, 1)
    height = get_responsive_chart_height(width)

    def font(size: str) -> int:
        return get_responsive_font_size(width, FONT_SIZES[size], LAYOUT["reference_width"])

    return {
        # Figure
        "figure.figsize": (width / dpi, height / dpi),
        "figure.dpi": dpi,
        "figure.facecolor": surface["bg"],
        "figure.edgecolor": "none",
        "savefig.dpi": dpi,
        "savefig.facecolor": surface["bg"],
        "savefig.edgecolor": "none",

        # Axes
        "axes.facecolor": surface["bg"],
        "axes.edgecolor": surface["border"],
        "axes.linewidth": LAYOUT["spine_width"],
        "axes.titlesize": font("base"),
        "axes.titleweight": "semibold",
        "axes.titlecolor": surface["text"],
        "axes.labelsize": font("sm"),
        "axes.labelcolor": surface["text"],
        "axes.prop_cycle": mpl.cycler(color=palette),
        "axes.spines.top": False,
        "axes.spines.right": False,
        "axes.grid": True,
        "axes.grid.axis": "y",
        "axes.axisbelow": True,

        # Grid
        "grid.color": surface["grid"],
        "grid.alpha": LAYOUT["grid_alpha"],
        "grid.linewidth": 0.5,

        # Ticks
        "xtick.labelsize": font("xs"),
        "ytick.labelsize": font("xs"),
        "xtick.color": surface["muted"],
        "ytick.color": surface["muted"],
        "xtick.labelcolor": surface["text"],
        "ytick.labelcolor": surface["text"],

        # Lines
        "lines.linewidth": LAYOUT["line_width"],

        # Legend
        "legend.frameon": True,
        "legend.facecolor": surface["legend_bg"],
        "legend.edgecolor": surface["border"],
        "legend.framealpha": LAYOUT["legend_alpha"],
        "legend.fontsize": font("xs"),
        "legend.labelcolor": surface["text"],

        # Font
        "font.family": "sans-serif",
        "font.sans-serif": list(FONTS["sans"]),
        "font.monospace": list(FONTS["mono"]),
        "font.size": font("xs"),
    }


def apply(container_width: float = 800, *, dark: bool = False, series: int = 7) -> None:
    """Apply the chart token style to matplotlib globally."""
    plt.rcParams.update(build_style(container_width, dark=dark, series=series))


def tick_locator(
    vmin: float,
    vmax: float,
    axis_length_px: float,
    orientation: Orientation = "vertical",
) -> FixedLocator:
    """Locator placing nice round ticks, as many as fit along the axis."""
    count = calculate_optimal_tick_count(axis_length_px, orientation)
    return FixedLocator(generate_nice_ticks(vmin, vmax, count))
