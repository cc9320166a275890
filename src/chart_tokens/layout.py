"""Responsive chart geometry on the 8px grid.

Sizes arrive mid-resize from the UI, so zero, negative and odd values are
clamped rather than rejected.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

from ._numeric import clamp, round_half_up
from .errors import UnknownVariant
from .theme import BREAKPOINTS, CHART_HEIGHTS, FEATURE_MIN_WIDTHS, GRID_GAPS, SPACING

Breakpoint = Literal["sm", "md", "lg", "xl", "2xl"]
Feature = Literal["legend", "tooltip", "annotations", "title"]

BASE_UNIT = 8
REM_PX = 16

# Container size at which margins are unscaled
MARGIN_REFERENCE_PX = 400

DASHBOARD_GAP = 24
MAX_CHARTS_PER_ROW = 4


@dataclass(frozen=True)
class ChartMargins:
    top: int
    right: int
    bottom: int
    left: int


@dataclass(frozen=True)
class Dimensions:
    width: int
    height: int


@dataclass(frozen=True)
class GridLayout:
    columns: int
    rows: int
    chart_width: int
    chart_height: int
    gap: int


def _snap_to_grid(value: float) -> int:
    return round_half_up(value / BASE_UNIT) * BASE_UNIT


def calculate_chart_margins(
    width: float,
    height: float,
    *,
    has_x_axis: bool = True,
    has_y_axis: bool = True,
) -> ChartMargins:
    """Margins that leave room for axis labels, scaled with the container.

    Base margins are 20px top/right, 40px bottom with an x axis (16px
    without) and 48px left with a y axis (16px without). They scale by
    ``min(width, height) / 400`` clamped to 0.75-1.5, then snap to 8px.
    """
    scale = clamp(min(width, height) / MARGIN_REFERENCE_PX, 0.75, 1.5)

    def margin(units: float) -> int:
        return _snap_to_grid(BASE_UNIT * units * scale)

    return ChartMargins(
        top=margin(2.5),
        right=margin(2.5),
        bottom=margin(5 if has_x_axis else 2),
        left=margin(6 if has_y_axis else 2),
    )


def calculate_chart_dimensions(
    container_width: float,
    container_height: float,
    aspect_ratio: float,
) -> Dimensions:
    """Largest size with ``aspect_ratio`` (width / height) that fits the container."""
    width = max(0, math.floor(container_width))
    height = max(0, math.floor(container_height))
    if width == 0 or height == 0:
        return Dimensions(0, 0)
    if not aspect_ratio > 0:
        return Dimensions(width, height)

    if width / height > aspect_ratio:
        # Wider than the target: height is the constraint
        return Dimensions(min(width, round_half_up(height * aspect_ratio)), height)
    return Dimensions(width, min(height, round_half_up(width / aspect_ratio)))


def get_current_breakpoint(width: float) -> Breakpoint:
    """Highest breakpoint whose minimum ``width`` meets; ``sm`` below ``md``."""
    for name in ("2xl", "xl", "lg", "md"):
        if width >= BREAKPOINTS[name]:
            return name
    return "sm"


def meets_breakpoint(width: float, breakpoint: Breakpoint) -> bool:
    try:
        return width >= BREAKPOINTS[breakpoint]
    except KeyError:
        raise UnknownVariant("breakpoint", breakpoint, BREAKPOINTS) from None


def get_responsive_chart_height(width: float, breakpoint: Breakpoint | None = None) -> int:
    """Recommended chart height for a container, or for an explicit breakpoint."""
    bp = breakpoint or get_current_breakpoint(width)
    try:
        return CHART_HEIGHTS[bp]
    except KeyError:
        raise UnknownVariant("breakpoint", bp, CHART_HEIGHTS) from None


def calculate_chart_grid(chart_count: int, container_width: float) -> GridLayout:
    """Pack ``chart_count`` charts into a dashboard grid.

    Columns: 1 on ``sm``, up to 2 on ``md``, up to 3 from ``lg`` up.
    Chart height follows the breakpoint of the resulting chart width.
    """
    breakpoint = get_current_breakpoint(container_width)
    chart_count = max(0, chart_count)

    if breakpoint == "sm":
        columns = 1
    elif breakpoint == "md":
        columns = min(chart_count, 2)
    else:
        columns = min(chart_count, 3)
    columns = max(1, columns)

    rows = math.ceil(chart_count / columns)
    gap = GRID_GAPS[breakpoint]
    chart_width = max(0, math.floor((container_width - gap * (columns - 1)) / columns))

    return GridLayout(
        columns=columns,
        rows=rows,
        chart_width=chart_width,
        chart_height=get_responsive_chart_height(chart_width),
        gap=gap,
    )


def calculate_inner_dimensions(
    total_width: float,
    total_height: float,
    margins: ChartMargins,
) -> Dimensions:
    """Plot area left after margins; never negative."""
    return Dimensions(
        width=max(0, total_width - margins.left - margins.right),
        height=max(0, total_height - margins.top - margins.bottom),
    )


def supports_feature(width: float, feature: Feature) -> bool:
    """Whether a container is wide enough to show a legend, tooltip, etc."""
    try:
        return width >= FEATURE_MIN_WIDTHS[feature]
    except KeyError:
        raise UnknownVariant("feature", feature, FEATURE_MIN_WIDTHS) from None


def get_optimal_charts_per_row(container_width: float, preferred_chart_width: float = 400) -> int:
    if get_current_breakpoint(container_width) == "sm":
        return 1
    fits = math.floor((container_width + DASHBOARD_GAP) / (preferred_chart_width + DASHBOARD_GAP))
    return int(clamp(fits, 1, MAX_CHARTS_PER_ROW))


def get_spacing_px(token: int) -> float:
    """Pixel value of a spacing token, at 16px per rem."""
    try:
        value = SPACING[token]
    except KeyError:
        raise UnknownVariant("spacing token", token, SPACING) from None
    if value == "0":
        return 0.0
    return float(value.removesuffix("rem")) * REM_PX
