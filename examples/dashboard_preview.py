"""Example: a bar chart styled from computed tokens, light and dark."""

import numpy as np
import matplotlib.pyplot as plt

import chart_tokens as ct
from chart_tokens import style

CONTAINER_WIDTH = 960

regions = ["North America", "Europe", "Asia Pacific", "Latin America", "Middle East"]
revenue = np.array([1_250_000, 980_000, 1_730_000, 410_000, 265_000])

for dark in (False, True):
    style.apply(CONTAINER_WIDTH, dark=dark, series=len(regions))
    fig, ax = plt.subplots()

    colors = ct.generate_categorical_palette(len(regions))
    if dark:
        colors = ct.generate_dark_mode_palette(colors)
    ax.bar(range(len(regions)), revenue, color=colors)

    height_px = ct.get_responsive_chart_height(CONTAINER_WIDTH)
    margins = ct.calculate_chart_margins(CONTAINER_WIDTH, height_px)
    plot = ct.calculate_inner_dimensions(CONTAINER_WIDTH, height_px, margins)

    ax.yaxis.set_major_locator(style.tick_locator(0, revenue.max(), plot.height, "vertical"))
    ax.yaxis.set_major_formatter(lambda value, _pos: ct.format_smart_number(value))

    labels = [ct.truncate_text(region, 12) for region in regions]
    ax.set_xticks(range(len(regions)))
    ax.set_xticklabels(
        labels,
        rotation=ct.get_recommended_tick_rotation(labels, plot.width, len(labels)),
    )
    ax.set_title("Revenue by Region")

    fig.savefig(f"revenue-by-region{'-dark' if dark else ''}.svg")
    plt.close(fig)
