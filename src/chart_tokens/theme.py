"""Pure data: colors, breakpoints, spacing and font tokens for charts.

No library imports: this module defines the visual identity as plain
Python mappings and tuples so any consumer (matplotlib, D3, Plotly) can read
them. Mappings are read-only views; copy them before editing.
"""

from types import MappingProxyType

# Neutral gray scale, shared by text, backgrounds and borders
NEUTRAL = MappingProxyType({
    50: "#F9FAFB",
    100: "#F3F4F6",
    200: "#E5E7EB",
    300: "#D1D5DB",
    400: "#9CA3AF",
    500: "#6B7280",
    600: "#4B5563",
    700: "#374151",
    800: "#1F2937",
    900: "#111827",
})

SEMANTIC = MappingProxyType({
    "success": "#059669",
    "success_light": "#D1FAE5",
    "success_dark": "#047857",
    "warning": "#D97706",
    "warning_light": "#FEF3C7",
    "warning_dark": "#B45309",
    "error": "#EF4444",
    "error_light": "#FEE2E2",
    "error_dark": "#DC2626",
    "info": "#3B82F6",
    "info_light": "#DBEAFE",
    "info_dark": "#2563EB",
})

# Chart chrome
CHART = MappingProxyType({
    "grid": NEUTRAL[200],
    "axis": NEUTRAL[300],
    "tooltip_bg": "#FFFFFF",
    "tooltip_border": NEUTRAL[200],
    "tooltip_text": NEUTRAL[900],
})

WHITE = "#FFFFFF"
BLACK = "#000000"

# Center of every diverging scale
NEUTRAL_GRAY = NEUTRAL[200]

# Surface that dark-mode colors must stay legible on
DARK_BACKGROUND = NEUTRAL[800]

# Categorical pool. Order is part of the contract: index i is always the
# same hue. Vetted for pairwise distinctness and 3:1 graphics contrast.
CATEGORICAL_POOL = (
    "#3B82F6",  # blue
    "#059669",  # green
    "#D97706",  # orange
    "#8B5CF6",  # purple
    "#DB2777",  # pink
    "#0F766E",  # teal
    "#EA580C",  # deep orange
    "#7C3AED",  # violet
    "#0891B2",  # cyan
    "#C026D3",  # fuchsia
    "#CA8A04",  # yellow
    "#DC2626",  # red
)

# Named light-to-dark ramps, keyed by id. Used for cycling series colors
# and for value gradients (heat maps, choropleths).
NAMED_PALETTES = MappingProxyType({
    "default": {
        "name": "Default",
        "colors": ("#DBEAFE", "#BFDBFE", "#93C5FD", "#60A5FA",
                   "#3B82F6", "#2563EB", "#1D4ED8", "#1E40AF"),
    },
    "ocean": {
        "name": "Ocean",
        "colors": ("#E0F2FE", "#BAE6FD", "#7DD3FC", "#38BDF8",
                   "#0EA5E9", "#0284C7", "#0369A1", "#075985"),
    },
    "sunset": {
        "name": "Sunset",
        "colors": ("#FED7AA", "#FDBA74", "#FB923C", "#F97316",
                   "#EA580C", "#C2410C", "#9A3412", "#7C2D12"),
    },
    "forest": {
        "name": "Forest",
        "colors": ("#D1FAE5", "#A7F3D0", "#6EE7B7", "#34D399",
                   "#10B981", "#059669", "#047857", "#065F46"),
    },
    "berry": {
        "name": "Berry",
        "colors": ("#FCE7F3", "#FBCFE8", "#F9A8D4", "#F472B6",
                   "#EC4899", "#DB2777", "#BE185D", "#9F1239"),
    },
    "purple": {
        "name": "Purple Haze",
        "colors": ("#EDE9FE", "#DDD6FE", "#C4B5FD", "#A78BFA",
                   "#8B5CF6", "#7C3AED", "#6D28D9", "#5B21B6"),
    },
    "earth": {
        "name": "Earth Tones",
        "colors": ("#FEF3C7", "#FDE68A", "#FCD34D", "#FBBF24",
                   "#F59E0B", "#D97706", "#B45309", "#92400E"),
    },
    "cool": {
        "name": "Cool Grays",
        "colors": ("#F1F5F9", "#E2E8F0", "#CBD5E1", "#94A3B8",
                   "#64748B", "#475569", "#334155", "#1E293B"),
    },
})

DEFAULT_PALETTE = "default"

# Minimum container width per breakpoint, ascending
BREAKPOINTS = MappingProxyType({
    "sm": 640,
    "md": 768,
    "lg": 1024,
    "xl": 1280,
    "2xl": 1536,
})

CHART_HEIGHTS = MappingProxyType({
    "sm": 250,
    "md": 300,
    "lg": 350,
    "xl": 400,
    "2xl": 450,
})

GRID_GAPS = MappingProxyType({
    "sm": 16,
    "md": 24,
    "lg": 32,
    "xl": 32,
    "2xl": 32,
})

# Narrowest container that still has room for each chart feature
FEATURE_MIN_WIDTHS = MappingProxyType({
    "legend": 400,
    "tooltip": 200,
    "annotations": 500,
    "title": 300,
})

# 8px spacing system, expressed in rem like the CSS it mirrors
SPACING = MappingProxyType({
    0: "0",
    1: "0.25rem",
    2: "0.5rem",
    3: "0.75rem",
    4: "1rem",
    5: "1.25rem",
    6: "1.5rem",
    8: "2rem",
    10: "2.5rem",
    12: "3rem",
    16: "4rem",
    20: "5rem",
})

ASPECT_RATIOS = MappingProxyType({
    "16:9": 16 / 9,
    "4:3": 4 / 3,
    "3:2": 3 / 2,
    "1:1": 1.0,
    "2:1": 2.0,
    "golden": 1.618,
})

# System fonts, as family names matplotlib recognizes
FONTS = MappingProxyType({
    "sans": (
        "Segoe UI", "Roboto", "Helvetica Neue",
        "Arial", "sans-serif",
    ),
    "mono": (
        "JetBrains Mono", "Fira Code", "Consolas",
        "Monaco", "monospace",
    ),
})

# Font sizes in px at the 800px reference width
FONT_SIZES = MappingProxyType({
    "xs": 12,    # axis ticks
    "sm": 14,    # axis labels, tooltips
    "base": 16,  # chart titles, legend
    "lg": 18,
    "xl": 20,
})

# Chart layout constants
LAYOUT = MappingProxyType({
    "dpi": 80,
    "reference_width": 800,
    "line_width": 2.0,
    "spine_width": 0.8,
    "grid_alpha": 0.6,
    "legend_alpha": 0.9,
})
