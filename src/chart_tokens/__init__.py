"""chart-tokens: presentation values for charts (colors, ticks, layout, formats)."""

from .color import (
    ColorBlindReport,
    adjust_brightness,
    auto_adjust_contrast,
    check_color_blind_accessibility,
    contrast_ratio,
    generate_categorical_palette,
    generate_colors_from_palette,
    generate_dark_mode_palette,
    generate_dark_mode_variant,
    generate_diverging_scale,
    generate_gradient_colors,
    generate_sequential_scale,
    get_color_from_palette,
    hex_to_rgb,
    meets_wcag_aa,
    rgb_to_hex,
    simulate_color_blindness,
)
from .errors import InvalidColorFormat, InvalidPaletteSize, InvalidStepCount, TokenError, UnknownVariant
from .formatting import (
    SmartNumberOptions,
    format_compact_number,
    format_currency,
    format_date,
    format_monospace_number,
    format_number,
    format_number_abbreviated,
    format_percentage,
    format_smart_number,
    get_responsive_font_size,
    truncate_text,
)
from .layout import (
    ChartMargins,
    Dimensions,
    GridLayout,
    calculate_chart_dimensions,
    calculate_chart_grid,
    calculate_chart_margins,
    calculate_inner_dimensions,
    get_current_breakpoint,
    get_optimal_charts_per_row,
    get_responsive_chart_height,
    get_spacing_px,
    meets_breakpoint,
    supports_feature,
)
from .theme import ASPECT_RATIOS, BREAKPOINTS, CATEGORICAL_POOL, NAMED_PALETTES, NEUTRAL, SEMANTIC
from .ticks import calculate_optimal_tick_count, generate_nice_ticks, get_recommended_tick_rotation

__all__ = [
    # color
    "ColorBlindReport",
    "adjust_brightness",
    "auto_adjust_contrast",
    "check_color_blind_accessibility",
    "contrast_ratio",
    "generate_categorical_palette",
    "generate_colors_from_palette",
    "generate_dark_mode_palette",
    "generate_dark_mode_variant",
    "generate_diverging_scale",
    "generate_gradient_colors",
    "generate_sequential_scale",
    "get_color_from_palette",
    "hex_to_rgb",
    "meets_wcag_aa",
    "rgb_to_hex",
    "simulate_color_blindness",
    # ticks
    "calculate_optimal_tick_count",
    "generate_nice_ticks",
    "get_recommended_tick_rotation",
    # layout
    "ChartMargins",
    "Dimensions",
    "GridLayout",
    "calculate_chart_dimensions",
    "calculate_chart_grid",
    "calculate_chart_margins",
    "calculate_inner_dimensions",
    "get_current_breakpoint",
    "get_optimal_charts_per_row",
    "get_responsive_chart_height",
    "get_spacing_px",
    "meets_breakpoint",
    "supports_feature",
    # formatting
    "SmartNumberOptions",
    "format_compact_number",
    "format_currency",
    "format_date",
    "format_monospace_number",
    "format_number",
    "format_number_abbreviated",
    "format_percentage",
    "format_smart_number",
    "get_responsive_font_size",
    "truncate_text",
    # tables
    "ASPECT_RATIOS",
    "BREAKPOINTS",
    "CATEGORICAL_POOL",
    "NAMED_PALETTES",
    "NEUTRAL",
    "SEMANTIC",
    # errors
    "TokenError",
    "InvalidColorFormat",
    "InvalidPaletteSize",
    "InvalidStepCount",
    "UnknownVariant",
]
