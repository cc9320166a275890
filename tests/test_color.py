"""Tests for the color science engine."""

import pytest

from chart_tokens.color import (
    COLOR_BLINDNESS_TYPES,
    adjust_brightness,
    auto_adjust_contrast,
    check_color_blind_accessibility,
    color_distance,
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
    interpolate_color,
    meets_wcag_aa,
    normalize_hex,
    relative_luminance,
    rgb_to_hex,
    simulate_color_blindness,
)
from chart_tokens.errors import (
    InvalidColorFormat,
    InvalidPaletteSize,
    InvalidStepCount,
    TokenError,
    UnknownVariant,
)
from chart_tokens.theme import CATEGORICAL_POOL, DARK_BACKGROUND, NAMED_PALETTES, NEUTRAL_GRAY


class TestConversion:
    def test_hex_to_rgb(self):
        assert hex_to_rgb("#3B82F6") == (59, 130, 246)

    def test_hex_to_rgb_is_case_insensitive(self):
        assert hex_to_rgb("#ffcc00") == hex_to_rgb("#FFCC00") == (255, 204, 0)

    @pytest.mark.parametrize("color", ["#3B82F6", "#000000", "#FFFFFF", "#0F766E"])
    def test_round_trip(self, color):
        assert rgb_to_hex(*hex_to_rgb(color)) == color

    def test_round_trip_canonicalizes_case(self):
        assert rgb_to_hex(*hex_to_rgb("#abcdef")) == "#ABCDEF"
        assert normalize_hex("#abcdef") == "#ABCDEF"

    @pytest.mark.parametrize(
        "bad",
        ["3B82F6", "##3B82F6", "#3B82F", "#3B82F60", "#GGGGGG", "#FFF", "", "#3B82F6\n", None, 0x3B82F6],
    )
    def test_malformed_hex_raises(self, bad):
        with pytest.raises(InvalidColorFormat):
            hex_to_rgb(bad)

    def test_errors_share_a_base(self):
        with pytest.raises(TokenError):
            hex_to_rgb("blue")
        with pytest.raises(ValueError):
            hex_to_rgb("blue")

    def test_rgb_to_hex_clamps_and_rounds(self):
        assert rgb_to_hex(300, -5, 127.5) == "#FF0080"

    def test_interpolate_endpoints(self):
        assert interpolate_color("#000000", "#FFFFFF", 0) == "#000000"
        assert interpolate_color("#000000", "#FFFFFF", 1) == "#FFFFFF"
        assert interpolate_color("#000000", "#FFFFFF", 0.5) == "#808080"


class TestContrast:
    def test_black_on_white_is_21(self):
        assert contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21, abs=0.01)

    def test_same_color_is_exactly_one(self):
        assert contrast_ratio("#3B82F6", "#3B82F6") == 1
        assert contrast_ratio("#3b82f6", "#3B82F6") == 1

    @pytest.mark.parametrize("a,b", [("#3B82F6", "#FFFFFF"), ("#111827", "#E5E7EB"), ("#DB2777", "#0F766E")])
    def test_symmetric(self, a, b):
        assert contrast_ratio(a, b) == contrast_ratio(b, a)

    def test_range(self):
        for color in CATEGORICAL_POOL:
            assert 1 <= contrast_ratio(color, "#FFFFFF") <= 21

    def test_luminance_bounds(self):
        assert relative_luminance("#000000") == 0
        assert relative_luminance("#FFFFFF") == pytest.approx(1)

    def test_wcag_aa_normal_text(self):
        assert meets_wcag_aa("#000000", "#FFFFFF")
        assert not meets_wcag_aa("#CCCCCC", "#FFFFFF")

    def test_wcag_aa_large_text_is_more_lenient(self):
        # #3B82F6 on white is ~3.7:1
        assert not meets_wcag_aa("#3B82F6", "#FFFFFF")
        assert meets_wcag_aa("#3B82F6", "#FFFFFF", large_text=True)


class TestSequentialScale:
    def test_length_and_endpoints(self):
        scale = generate_sequential_scale("#3B82F6", 10)
        assert len(scale) == 10
        assert scale[0] == "#FFFFFF"
        assert scale[-1] == adjust_brightness("#3B82F6", -0.4)

    def test_luminance_decreases(self):
        scale = generate_sequential_scale("#3B82F6", 10)
        luminances = [relative_luminance(c) for c in scale]
        assert all(a > b for a, b in zip(luminances, luminances[1:]))

    def test_single_step_is_base(self):
        assert generate_sequential_scale("#3b82f6", 1) == ["#3B82F6"]

    def test_zero_steps_raises(self):
        with pytest.raises(InvalidStepCount):
            generate_sequential_scale("#3B82F6", 0)


class TestDivergingScale:
    def test_center_is_neutral(self):
        scale = generate_diverging_scale("#DC2626", "#16A34A", 9)
        assert len(scale) == 9
        assert scale[4] == NEUTRAL_GRAY == "#E5E7EB"

    def test_ends_are_input_colors(self):
        scale = generate_diverging_scale("#DC2626", "#16A34A", 9)
        assert scale[0] == "#DC2626"
        assert scale[-1] == "#16A34A"

    def test_even_steps_raise(self):
        with pytest.raises(InvalidStepCount):
            generate_diverging_scale("#DC2626", "#16A34A", 10)

    def test_single_step_is_neutral(self):
        assert generate_diverging_scale("#DC2626", "#16A34A", 1) == [NEUTRAL_GRAY]

    @pytest.mark.parametrize("steps", [1, 9])
    def test_invalid_colors_raise_for_any_step_count(self, steps):
        with pytest.raises(InvalidColorFormat):
            generate_diverging_scale("red", "green", steps)


class TestCategoricalPalette:
    @pytest.mark.parametrize("count", range(2, 13))
    def test_length_and_unique(self, count):
        palette = generate_categorical_palette(count)
        assert len(palette) == count
        assert len(set(palette)) == count

    def test_order_is_stable(self):
        assert generate_categorical_palette(5) == generate_categorical_palette(12)[:5]

    @pytest.mark.parametrize("count", [0, 1, 13])
    def test_out_of_range_raises(self, count):
        with pytest.raises(InvalidPaletteSize) as excinfo:
            generate_categorical_palette(count)
        assert excinfo.value.count == count

    def test_returns_a_copy(self):
        palette = generate_categorical_palette(3)
        palette[0] = "#000000"
        assert generate_categorical_palette(3)[0] == "#3B82F6"


class TestNamedPalettes:
    def test_every_palette_has_eight_colors(self):
        for palette in NAMED_PALETTES.values():
            assert len(palette["colors"]) == 8
            assert all(normalize_hex(c) == c for c in palette["colors"])

    def test_index_wraps_around(self):
        assert get_color_from_palette("default", 0) == "#DBEAFE"
        assert get_color_from_palette("default", 8) == get_color_from_palette("default", 0)
        assert get_color_from_palette("ocean", 11) == NAMED_PALETTES["ocean"]["colors"][3]

    def test_explicit_color_list(self):
        assert get_color_from_palette(["#ff0000", "#00ff00"], 3) == "#00FF00"

    def test_generate_cycles_past_the_end(self):
        colors = generate_colors_from_palette("sunset", 10)
        assert len(colors) == 10
        assert colors[:8] == list(NAMED_PALETTES["sunset"]["colors"])
        assert colors[8:] == colors[:2]

    def test_generate_defaults_to_default_palette(self):
        assert generate_colors_from_palette() == list(NAMED_PALETTES["default"]["colors"])
        assert generate_colors_from_palette("default", 0) == []

    def test_gradient_runs_light_to_dark(self):
        colors = generate_gradient_colors("default", [10, 55, 100])
        assert colors[0] == "#DBEAFE"
        assert colors[-1] == "#1E40AF"
        luminances = [relative_luminance(c) for c in colors]
        assert luminances == sorted(luminances, reverse=True)

    def test_gradient_with_equal_values_uses_middle_color(self):
        assert generate_gradient_colors("default", [7, 7, 7]) == ["#60A5FA"] * 3

    def test_gradient_of_nothing(self):
        assert generate_gradient_colors("forest", []) == []

    def test_unknown_palette_raises(self):
        with pytest.raises(UnknownVariant) as excinfo:
            get_color_from_palette("neon", 0)
        assert excinfo.value.value == "neon"

    def test_empty_color_list_raises(self):
        with pytest.raises(InvalidPaletteSize):
            generate_colors_from_palette([], 3)


class TestAdjustBrightness:
    def test_lighten_moves_toward_white(self):
        assert adjust_brightness("#000000", 0.5) == "#808080"
        assert adjust_brightness("#3B82F6", 1) == "#FFFFFF"

    def test_darken_moves_toward_black(self):
        assert adjust_brightness("#FFFFFF", -0.5) == "#808080"
        assert adjust_brightness("#3B82F6", -1) == "#000000"

    def test_zero_is_identity(self):
        assert adjust_brightness("#3b82f6", 0) == "#3B82F6"

    def test_factor_is_clamped(self):
        assert adjust_brightness("#3B82F6", 5) == "#FFFFFF"
        assert adjust_brightness("#3B82F6", -5) == "#000000"


class TestColorBlindness:
    @pytest.mark.parametrize("kind", COLOR_BLINDNESS_TYPES)
    def test_gray_is_unchanged(self, kind):
        assert simulate_color_blindness("#808080", kind) == "#808080"

    @pytest.mark.parametrize("kind", COLOR_BLINDNESS_TYPES)
    def test_chromatic_color_changes(self, kind):
        assert simulate_color_blindness("#DC2626", kind) != "#DC2626"

    def test_protanopia_red(self):
        # 0.567 * 255, 0.558 * 255, 0
        assert simulate_color_blindness("#FF0000", "protanopia") == "#918E00"

    def test_unknown_kind_raises(self):
        with pytest.raises(UnknownVariant):
            simulate_color_blindness("#FF0000", "achromatopsia")

    def test_color_distance(self):
        assert color_distance("#000000", "#000000") == 0
        assert color_distance("#000000", "#FFFFFF") == pytest.approx(441.67, abs=0.01)

    def test_distinct_palette_passes(self):
        report = check_color_blind_accessibility(["#000000", "#FFFFFF"])
        assert report.protanopia and report.deuteranopia and report.tritanopia
        assert report.passed
        assert report.issues == ()

    def test_duplicate_colors_fail_every_type(self):
        report = check_color_blind_accessibility(["#3B82F6", "#DC2626", "#3B82F6"])
        assert not report.protanopia
        assert not report.deuteranopia
        assert not report.tritanopia
        assert not report.passed
        assert len(report.issues) == 3
        assert report.issues[0] == "Colors 1 and 3 may be indistinguishable for protanopia users"

    def test_red_green_confusion_is_reported(self):
        # 62 apart in RGB, about 6 apart once simulated
        report = check_color_blind_accessibility(["#966464", "#B43279"])
        assert not report.deuteranopia
        assert any("deuteranopia" in issue for issue in report.issues)

    def test_empty_and_single_palettes_pass(self):
        assert check_color_blind_accessibility([]).passed
        assert check_color_blind_accessibility(["#3B82F6"]).passed


class TestAutoAdjustContrast:
    def test_compliant_color_is_returned_unchanged(self):
        assert auto_adjust_contrast("#000000", "#FFFFFF", 4.5) == "#000000"
        assert auto_adjust_contrast("#111827", "#ffffff") == "#111827"

    def test_light_gray_is_darkened_on_white(self):
        adjusted = auto_adjust_contrast("#CCCCCC", "#FFFFFF", 4.5)
        assert contrast_ratio(adjusted, "#FFFFFF") >= 4.5
        assert relative_luminance(adjusted) < relative_luminance("#CCCCCC")

    def test_dark_color_is_lightened_on_black(self):
        adjusted = auto_adjust_contrast("#333333", "#000000", 4.5)
        assert contrast_ratio(adjusted, "#000000") >= 4.5
        assert relative_luminance(adjusted) > relative_luminance("#333333")

    def test_unreachable_target_falls_back(self):
        # 21:1 is only reachable by pure black on pure white
        assert auto_adjust_contrast("#808080", "#FFFFFF", 22) == "#000000"
        assert auto_adjust_contrast("#808080", "#000000", 22) == "#FFFFFF"

    def test_dark_mode_variant_meets_aa(self):
        for color in CATEGORICAL_POOL:
            variant = generate_dark_mode_variant(color)
            assert meets_wcag_aa(variant, DARK_BACKGROUND)

    def test_dark_mode_palette_preserves_length(self):
        palette = generate_categorical_palette(7)
        dark = generate_dark_mode_palette(palette)
        assert len(dark) == 7
        assert dark == [generate_dark_mode_variant(c) for c in palette]
