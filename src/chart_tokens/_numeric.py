"""Rounding and clamping shared by the engines."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward +inf (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))
