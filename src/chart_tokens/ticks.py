"""Axis ticks: how many to draw, where to put them, how to angle the labels."""

from __future__ import annotations

import logging
import math
from typing import Literal, Sequence

import numpy as np

from ._numeric import clamp
from .errors import UnknownVariant

logger = logging.getLogger(__name__)

Orientation = Literal["horizontal", "vertical"]

# Minimum pixels between ticks; horizontal labels need more room
MIN_TICK_SPACING = {
    "horizontal": 80,
    "vertical": 40,
}

MIN_TICKS = 3
MAX_TICKS = 10

# Rough width of one label character in px
CHAR_WIDTH_PX = 7

# Narrower ranges underflow the decimal rounding
MIN_SPAN = 1e-300


def calculate_optimal_tick_count(axis_length_px: float, orientation: Orientation) -> int:
    """Ticks that fit on an axis at the minimum spacing, clamped to 3-10."""
    try:
        spacing = MIN_TICK_SPACING[orientation]
    except KeyError:
        raise UnknownVariant("orientation", orientation, MIN_TICK_SPACING) from None
    if not math.isfinite(axis_length_px) or axis_length_px <= 0:
        return MIN_TICKS
    return int(clamp(math.floor(axis_length_px / spacing), MIN_TICKS, MAX_TICKS))


def nice_step(rough_step: float) -> float:
    """Snap a positive step to 1, 2, 5 or 10 times a power of ten."""
    magnitude = 10 ** math.floor(math.log10(rough_step))
    normalized = rough_step / magnitude
    if normalized < 1.5:
        return magnitude
    if normalized < 3:
        return 2 * magnitude
    if normalized < 7:
        return 5 * magnitude
    return 10 * magnitude


def generate_nice_ticks(vmin: float, vmax: float, count: int = 5) -> list[float]:
    """Round-number ticks covering [vmin, vmax], about ``count`` of them.

    Reversed bounds are swapped. The first tick is <= the minimum, the last
    is >= the maximum, and every gap is one nice step. Ticks are rounded to
    at least 10 decimals (more for smaller steps) so 0.1 steps read as 0.3,
    not 0.30000000000000004. Ranges too wide for a float, or narrower than
    :data:`MIN_SPAN`, give no ticks.
    """
    if vmin == vmax:
        return [vmin]
    if not (math.isfinite(vmin) and math.isfinite(vmax)):
        logger.debug("Non-finite tick bounds (%s, %s), returning no ticks", vmin, vmax)
        return []

    lo, hi = min(vmin, vmax), max(vmin, vmax)
    if count < 2:
        logger.debug("Tick count %s raised to 2", count)
        count = 2

    span = hi - lo
    if span < MIN_SPAN:
        logger.debug("Tick range (%s, %s) too narrow, returning no ticks", lo, hi)
        return []
    step = nice_step(span / (count - 1)) if math.isfinite(span) else math.inf
    if not math.isfinite(step):
        logger.debug("Tick range (%s, %s) overflows, returning no ticks", lo, hi)
        return []

    first = math.floor(lo / step)
    last = math.ceil(hi / step)
    decimals = max(10, 1 - math.floor(math.log10(step)))
    ticks = np.round(np.arange(first, last + 1) * step, decimals)
    if not np.isfinite(ticks).all():
        logger.debug("Ticks for (%s, %s) overflow, returning no ticks", lo, hi)
        return []
    return ticks.tolist()


def get_recommended_tick_rotation(
    labels: Sequence[str],
    available_width_px: float,
    tick_count: int,
) -> int:
    """Label rotation in degrees: 0 if labels fit flat, 45 if close, else 90."""
    if tick_count <= 0 or not labels:
        return 0

    avg_chars = sum(len(label) for label in labels) / len(labels)
    label_width = avg_chars * CHAR_WIDTH_PX
    space_per_tick = available_width_px / tick_count

    if label_width <= space_per_tick * 0.8:
        return 0
    if label_width <= space_per_tick * 1.5:
        return 45
    return 90
