"""Tests for the axis tick engine."""

import math

import pytest

from chart_tokens.errors import UnknownVariant
from chart_tokens.ticks import (
    calculate_optimal_tick_count,
    generate_nice_ticks,
    get_recommended_tick_rotation,
    nice_step,
)


class TestOptimalTickCount:
    @pytest.mark.parametrize(
        "length,orientation,expected",
        [
            (800, "horizontal", 10),
            (400, "horizontal", 5),
            (400, "vertical", 10),
            (200, "vertical", 5),
            (100, "horizontal", 3),
            (5000, "horizontal", 10),
        ],
    )
    def test_counts(self, length, orientation, expected):
        assert calculate_optimal_tick_count(length, orientation) == expected

    @pytest.mark.parametrize("length", [0, -50, float("nan"), float("-inf")])
    def test_degenerate_lengths_give_minimum(self, length):
        assert calculate_optimal_tick_count(length, "horizontal") == 3

    def test_unknown_orientation_raises(self):
        with pytest.raises(UnknownVariant):
            calculate_optimal_tick_count(400, "diagonal")


class TestNiceStep:
    @pytest.mark.parametrize(
        "rough,expected",
        [(1.2, 1), (2.5, 2), (4, 5), (8, 10), (25, 20), (0.25, 0.2), (140, 100), (0.6, 0.5)],
    )
    def test_snaps(self, rough, expected):
        assert nice_step(rough) == pytest.approx(expected)


class TestNiceTicks:
    def test_zero_to_hundred(self):
        assert generate_nice_ticks(0, 100, 5) == [0, 20, 40, 60, 80, 100]

    def test_fractional_range_has_no_float_noise(self):
        assert generate_nice_ticks(0, 1, 5) == [0, 0.2, 0.4, 0.6, 0.8, 1.0]

    def test_unaligned_bounds_are_widened(self):
        ticks = generate_nice_ticks(3, 97, 5)
        assert ticks[0] == 0
        assert ticks[-1] == 100

    def test_equal_bounds(self):
        assert generate_nice_ticks(42, 42, 5) == [42]

    def test_reversed_bounds(self):
        assert generate_nice_ticks(100, 0, 5) == generate_nice_ticks(0, 100, 5)

    def test_negative_range(self):
        assert generate_nice_ticks(-50, 50, 5) == [-60, -40, -20, 0, 20, 40, 60]

    @pytest.mark.parametrize(
        "vmin,vmax,count",
        [(0, 100, 5), (-3.7, 12.2, 6), (0.001, 0.0093, 4), (1200, 98000, 8), (-1e6, -2e5, 3), (0, 1, 2)],
    )
    def test_properties(self, vmin, vmax, count):
        ticks = generate_nice_ticks(vmin, vmax, count)
        assert ticks[0] <= vmin
        assert ticks[-1] >= vmax
        gaps = [b - a for a, b in zip(ticks, ticks[1:])]
        assert all(gap > 0 for gap in gaps)
        assert gaps == pytest.approx([gaps[0]] * len(gaps))

    def test_count_below_two_is_clamped(self):
        assert generate_nice_ticks(0, 100, 1) == generate_nice_ticks(0, 100, 2)

    def test_non_finite_bounds(self):
        assert generate_nice_ticks(0, math.inf, 5) == []
        assert generate_nice_ticks(math.nan, 1, 5) == []

    def test_tiny_range_keeps_distinct_ticks(self):
        ticks = generate_nice_ticks(0, 1e-11, 5)
        assert len(ticks) >= 2
        assert ticks[0] <= 0
        assert ticks[-1] >= 1e-11
        assert all(b > a for a, b in zip(ticks, ticks[1:]))

    @pytest.mark.parametrize("vmin,vmax", [(-1e308, 1e308), (0, 1.7e308), (0, 1e-320)])
    def test_unrepresentable_range_gives_no_ticks(self, vmin, vmax):
        assert generate_nice_ticks(vmin, vmax, 5) == []


class TestTickRotation:
    def test_no_ticks(self):
        assert get_recommended_tick_rotation(["a"], 400, 0) == 0

    def test_no_labels(self):
        assert get_recommended_tick_rotation([], 400, 4) == 0

    def test_short_labels_stay_flat(self):
        assert get_recommended_tick_rotation(["Jan", "Feb"], 400, 2) == 0

    def test_medium_labels_are_angled(self):
        # 14 chars * 7px = 98px against 100px per tick
        labels = ["Category Alpha"] * 4
        assert get_recommended_tick_rotation(labels, 400, 4) == 45

    def test_long_labels_are_vertical(self):
        labels = ["A very long label here"] * 3
        assert get_recommended_tick_rotation(labels, 300, 3) == 90
