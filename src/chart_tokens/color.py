"""Color science: contrast, WCAG checks, palettes and color-blind simulation.

Colors are ``#RRGGBB`` strings. Input is case-insensitive; every color this
module returns is uppercase. Functions that take a color validate it and
raise :class:`~chart_tokens.errors.InvalidColorFormat` when it is malformed.
"""

from __future__ import annotations

import enum
import logging
import math
import re
from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, Literal, Sequence, Union

import numpy as np

from ._numeric import clamp, round_half_up
from .errors import InvalidColorFormat, InvalidPaletteSize, InvalidStepCount, UnknownVariant
from .theme import BLACK, CATEGORICAL_POOL, DARK_BACKGROUND, DEFAULT_PALETTE, NAMED_PALETTES, NEUTRAL_GRAY, WHITE

logger = logging.getLogger(__name__)

ColorBlindness = Literal["protanopia", "deuteranopia", "tritanopia"]

_HEX_RE = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")

WCAG_AA_NORMAL = 4.5
WCAG_AA_LARGE = 3.0

# Euclidean RGB distance under which two simulated colors count as confusable
DISTINGUISHABLE_DISTANCE = 30.0

CONTRAST_STEP = 0.05
MAX_ADJUST_ITERATIONS = 20

# Brettel et al. (1997) / Viénot et al. (1999) approximations on normalized RGB
COLOR_BLINDNESS_MATRICES = {
    "protanopia": np.array([
        [0.567, 0.433, 0.0],
        [0.558, 0.442, 0.0],
        [0.0, 0.242, 0.758],
    ]),
    "deuteranopia": np.array([
        [0.625, 0.375, 0.0],
        [0.700, 0.300, 0.0],
        [0.0, 0.300, 0.700],
    ]),
    "tritanopia": np.array([
        [0.950, 0.050, 0.0],
        [0.0, 0.433, 0.567],
        [0.0, 0.475, 0.525],
    ]),
}

for _matrix in COLOR_BLINDNESS_MATRICES.values():
    _matrix.setflags(write=False)

COLOR_BLINDNESS_TYPES: tuple[ColorBlindness, ...] = tuple(COLOR_BLINDNESS_MATRICES)


# ---- Conversion ----

def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """Parse ``#RRGGBB`` into 0-255 channels."""
    match = _HEX_RE.fullmatch(color) if isinstance(color, str) else None
    if match is None:
        raise InvalidColorFormat(color)
    r, g, b = (int(part, 16) for part in match.groups())
    return r, g, b


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Encode channels as uppercase ``#RRGGBB``, rounding and clamping each."""
    channels = (int(clamp(round_half_up(c), 0, 255)) for c in (r, g, b))
    return "#" + "".join(f"{c:02X}" for c in channels)


def normalize_hex(color: str) -> str:
    """Validate a color and return its canonical uppercase form."""
    return rgb_to_hex(*hex_to_rgb(color))


def interpolate_color(start: str, end: str, factor: float) -> str:
    """Linear blend per channel; ``factor`` 0 gives ``start``, 1 gives ``end``."""
    a = np.array(hex_to_rgb(start), dtype=float)
    b = np.array(hex_to_rgb(end), dtype=float)
    return rgb_to_hex(*(a + factor * (b - a)))


# ---- Contrast ----

def _linearize(channel: float) -> float:
    if channel <= 0.03928:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str) -> float:
    """WCAG 2.1 relative luminance, 0 (black) to 1 (white)."""
    r, g, b = (_linearize(c / 255) for c in hex_to_rgb(color))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(a: str, b: str) -> float:
    """WCAG contrast ratio between two colors, from 1 to 21. Order does not matter."""
    la = relative_luminance(a)
    lb = relative_luminance(b)
    return (max(la, lb) + 0.05) / (min(la, lb) + 0.05)


def meets_wcag_aa(foreground: str, background: str, large_text: bool = False) -> bool:
    """AA requires 4.5:1 for normal text and 3:1 for large text and graphics."""
    threshold = WCAG_AA_LARGE if large_text else WCAG_AA_NORMAL
    return contrast_ratio(foreground, background) >= threshold


# ---- Palettes ----

def adjust_brightness(color: str, factor: float) -> str:
    """Lighten (``factor`` > 0) or darken (``factor`` < 0) a color.

    Lightening moves each channel toward 255 by ``factor`` of the remaining
    headroom; darkening moves it toward 0 by ``|factor|`` of its value.
    ``factor`` is clamped to [-1, 1].
    """
    factor = clamp(factor, -1.0, 1.0)
    rgb = np.array(hex_to_rgb(color), dtype=float)
    if factor > 0:
        rgb = rgb + (255 - rgb) * factor
    else:
        rgb = rgb + rgb * factor
    return rgb_to_hex(*rgb)


def generate_sequential_scale(base: str, steps: int = 10) -> list[str]:
    """Light-to-dark scale: white -> ``base`` -> ``base`` darkened by 40%."""
    if steps < 1:
        raise InvalidStepCount(steps)
    base = normalize_hex(base)
    if steps == 1:
        return [base]

    dark = adjust_brightness(base, -0.4)
    colors = []
    for i in range(steps):
        factor = i / (steps - 1)
        if factor < 0.5:
            colors.append(interpolate_color(WHITE, base, factor * 2))
        else:
            colors.append(interpolate_color(base, dark, (factor - 0.5) * 2))
    return colors


def generate_diverging_scale(negative: str, positive: str, steps: int = 9) -> list[str]:
    """Negative -> neutral gray -> positive. ``steps`` must be odd."""
    if steps < 1:
        raise InvalidStepCount(steps)
    if steps % 2 == 0:
        raise InvalidStepCount(steps, "diverging scales need an odd count for the neutral center")
    negative = normalize_hex(negative)
    positive = normalize_hex(positive)

    mid = steps // 2
    colors = []
    for i in range(steps):
        if i < mid:
            colors.append(interpolate_color(negative, NEUTRAL_GRAY, i / mid))
        elif i == mid:
            colors.append(NEUTRAL_GRAY)
        else:
            colors.append(interpolate_color(NEUTRAL_GRAY, positive, (i - mid) / mid))
    return colors


def generate_categorical_palette(count: int) -> list[str]:
    """First ``count`` colors (2-12) of the fixed categorical pool."""
    if not 2 <= count <= len(CATEGORICAL_POOL):
        raise InvalidPaletteSize(count)
    return list(CATEGORICAL_POOL[:count])


PaletteRef = Union[str, Sequence[str]]


def _palette_colors(palette: PaletteRef) -> list[str]:
    """Resolve a named palette id or an explicit color list."""
    if isinstance(palette, str):
        try:
            return list(NAMED_PALETTES[palette]["colors"])
        except KeyError:
            raise UnknownVariant("palette", palette, NAMED_PALETTES) from None
    colors = [normalize_hex(c) for c in palette]
    if not colors:
        raise InvalidPaletteSize(0, "at least 1")
    return colors


def get_color_from_palette(palette: PaletteRef, index: int) -> str:
    """Color at ``index``, wrapping around the end of the palette."""
    colors = _palette_colors(palette)
    return colors[index % len(colors)]


def generate_colors_from_palette(palette: PaletteRef = DEFAULT_PALETTE, count: int = 8) -> list[str]:
    colors = _palette_colors(palette)
    return [colors[i % len(colors)] for i in range(max(count, 0))]


def generate_gradient_colors(palette: PaletteRef, values: Iterable[float]) -> list[str]:
    """Map each value onto the palette, lowest value to the first color.

    When every value is equal they all get the middle color.
    """
    colors = _palette_colors(palette)
    values = list(values)
    if not values:
        return []
    lo, hi = min(values), max(values)
    if hi == lo:
        return [colors[len(colors) // 2]] * len(values)
    last = len(colors) - 1
    return [colors[math.floor((v - lo) / (hi - lo) * last)] for v in values]


# ---- Color blindness ----

def simulate_color_blindness(color: str, kind: ColorBlindness) -> str:
    """Approximate how ``color`` looks to someone with the given deficiency."""
    try:
        matrix = COLOR_BLINDNESS_MATRICES[kind]
    except KeyError:
        raise UnknownVariant("color blindness type", kind, COLOR_BLINDNESS_TYPES) from None
    rgb = np.array(hex_to_rgb(color), dtype=float) / 255
    return rgb_to_hex(*(matrix @ rgb * 255))


def color_distance(a: str, b: str) -> float:
    """Euclidean distance in RGB space."""
    delta = np.array(hex_to_rgb(a), dtype=float) - np.array(hex_to_rgb(b), dtype=float)
    return float(np.linalg.norm(delta))


@dataclass(frozen=True)
class ColorBlindReport:
    protanopia: bool
    deuteranopia: bool
    tritanopia: bool
    issues: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return self.protanopia and self.deuteranopia and self.tritanopia


def check_color_blind_accessibility(colors: Iterable[str]) -> ColorBlindReport:
    """Check that a palette stays distinguishable under each color blindness type.

    For each type every color is simulated and every pair compared; the first
    pair closer than :data:`DISTINGUISHABLE_DISTANCE` fails that type and is
    reported (1-indexed) in ``issues``.
    """
    colors = list(colors)
    issues = []
    results = {}

    for kind in COLOR_BLINDNESS_TYPES:
        simulated = [simulate_color_blindness(c, kind) for c in colors]
        results[kind] = True
        for (i, a), (j, b) in combinations(enumerate(simulated, start=1), 2):
            if color_distance(a, b) < DISTINGUISHABLE_DISTANCE:
                issues.append(f"Colors {i} and {j} may be indistinguishable for {kind} users")
                results[kind] = False
                break

    return ColorBlindReport(issues=tuple(issues), **results)


# ---- Contrast correction ----

class AdjustPhase(enum.Enum):
    """Brightness step applied per iteration in each correction phase."""

    DARKENING = -CONTRAST_STEP
    LIGHTENING = CONTRAST_STEP


def auto_adjust_contrast(foreground: str, background: str, target: float = WCAG_AA_NORMAL) -> str:
    """Nudge ``foreground`` until it reaches ``target`` contrast on ``background``.

    Returns ``foreground`` untouched when it already passes. Otherwise darkens
    it in 5% steps, then lightens the original in 5% steps, up to
    :data:`MAX_ADJUST_ITERATIONS` each. If neither phase reaches the target
    the result is black on light backgrounds and white on dark ones.
    """
    if contrast_ratio(foreground, background) >= target:
        return foreground

    for phase in AdjustPhase:
        candidate = foreground
        for _ in range(MAX_ADJUST_ITERATIONS):
            candidate = adjust_brightness(candidate, phase.value)
            if contrast_ratio(candidate, background) >= target:
                return candidate

    mean_channel = sum(hex_to_rgb(background)) / 3
    fallback = BLACK if mean_channel > 128 else WHITE
    logger.debug(
        "Could not reach %.2f:1 contrast for %s on %s, falling back to %s",
        target, foreground, background, fallback,
    )
    return fallback


def generate_dark_mode_variant(color: str) -> str:
    """Lighten a color by 30% and make it pass AA on the dark surface."""
    return auto_adjust_contrast(adjust_brightness(color, 0.3), DARK_BACKGROUND, WCAG_AA_NORMAL)


def generate_dark_mode_palette(colors: Iterable[str]) -> list[str]:
    return [generate_dark_mode_variant(c) for c in colors]
