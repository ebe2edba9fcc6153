"""Tests for DonutGeometryBuilder and ring segment paths."""

import math

import pytest

from flouss.domain.analytics import (
    CategoryAggregator,
    CategoryAmount,
    CategoryInput,
    DonutGeometryBuilder,
    DonutLayout,
)
from flouss.domain.analytics.services import describe_ring_segment, polar_to_cartesian


def _categories(*amounts):
    return CategoryAggregator().aggregate(
        [CategoryInput(f"c{i}", a) for i, a in enumerate(amounts)]
    )


@pytest.fixture
def builder(layout) -> DonutGeometryBuilder:
    return DonutGeometryBuilder(layout)


class TestSegments:
    def test_one_segment_per_category_in_order(self, builder):
        categories = _categories(450, 300, 200)

        segments = builder.build(categories, selected_index=0)

        assert [s.index for s in segments] == [0, 1, 2]
        assert [s.color for s in segments] == [c.color for c in categories]

    def test_empty_list_produces_no_segments(self, builder):
        assert builder.build([], selected_index=0) == []

    def test_only_selected_segment_is_flagged(self, builder):
        segments = builder.build(_categories(450, 300, 200), selected_index=1)

        assert [s.is_selected for s in segments] == [False, True, False]

    def test_out_of_range_selection_selects_nothing(self, builder):
        segments = builder.build(_categories(450, 300), selected_index=5)

        assert not any(s.is_selected for s in segments)

    def test_zero_amount_has_zero_sweep(self, builder):
        segments = builder.build(_categories(100, 0, 50), selected_index=0)

        assert segments[1].sweep == 0.0

    def test_negative_amount_clamped(self, builder):
        categories = [
            CategoryAmount("a", 100.0, 100.0, "#000", "x"),
            CategoryAmount("b", -40.0, 0.0, "#111", "y"),
        ]

        segments = builder.build(categories, selected_index=0)

        assert segments[1].sweep == 0.0
        assert segments[0].sweep == pytest.approx(357.0)

    def test_tiny_share_smaller_than_gap_is_clamped(self, builder):
        # 0.5% of 360° is 1.8°, less than the 3° gap
        segments = builder.build(_categories(199, 1), selected_index=0)

        assert segments[1].sweep == 0.0


class TestAngles:
    def test_starts_at_top_with_centered_gap(self, builder):
        segments = builder.build(_categories(1, 1), selected_index=0)

        assert segments[0].start_angle == pytest.approx(-88.5)
        assert segments[0].end_angle == pytest.approx(88.5)
        assert segments[1].start_angle == pytest.approx(91.5)
        assert segments[1].end_angle == pytest.approx(268.5)

    def test_sweep_is_budget_minus_gap(self, builder):
        segments = builder.build(_categories(450, 300, 200), selected_index=0)

        expected = [450 / 950 * 360 - 3, 300 / 950 * 360 - 3, 200 / 950 * 360 - 3]
        assert [s.sweep for s in segments] == pytest.approx(expected)
        assert sum(s.sweep for s in segments) + 3 * 3 == pytest.approx(360.0)

    def test_custom_gap(self):
        layout = DonutLayout.for_size(240, gap_degrees=0)
        segments = DonutGeometryBuilder(layout).build(_categories(1, 3), 0)

        assert segments[0].start_angle == pytest.approx(-90.0)
        assert segments[0].sweep == pytest.approx(90.0)


class TestSelectionEmphasis:
    def test_selected_segment_is_pulled_out_along_mid_angle(self, builder):
        # First half spans -88.5..88.5, midpoint 0° (positive x-axis)
        segments = builder.build(_categories(1, 1), selected_index=0)

        assert segments[0].offset_x == pytest.approx(6.0)
        assert segments[0].offset_y == pytest.approx(0.0, abs=1e-9)
        assert segments[0].scale == 1.05
        assert segments[0].opacity == 1.0

    def test_offset_direction_for_second_segment(self, builder):
        # Second half spans 91.5..268.5, midpoint 180°
        segments = builder.build(_categories(1, 1), selected_index=1)

        assert segments[1].offset_x == pytest.approx(-6.0)
        assert math.hypot(segments[1].offset_x, segments[1].offset_y) == pytest.approx(6.0)

    def test_unselected_segments_have_no_offset(self, builder):
        segments = builder.build(_categories(450, 300, 200), selected_index=0)

        for segment in segments[1:]:
            assert (segment.offset_x, segment.offset_y) == (0.0, 0.0)
            assert segment.scale == 1.0
            assert segment.opacity == 0.85
            assert segment.transform == "translate(0, 0) scale(1)"

    def test_selected_transform(self, builder):
        segments = builder.build(_categories(1, 1), selected_index=0)

        assert segments[0].transform == "translate(6, 0) scale(1.05)"


class TestPaths:
    def test_polar_to_cartesian(self):
        x, y = polar_to_cartesian(100, 100, 50, 90)

        assert x == pytest.approx(100)
        assert y == pytest.approx(150)

    def test_describe_ring_segment_quarter(self):
        path = describe_ring_segment(100, 100, 50, 25, 0, 90)

        assert path == (
            "M 150 100 A 50 50 0 0 1 100 150 "
            "L 100 125 A 25 25 0 0 0 125 100 Z"
        )

    def test_large_arc_flag_for_segments_over_180_degrees(self, builder):
        segments = builder.build(_categories(3, 1), selected_index=0)

        assert " 0 1 1 " in segments[0].path_descriptor
        assert " 0 0 1 " in segments[1].path_descriptor

    def test_full_circle_is_drawn_as_two_half_arcs(self):
        path = describe_ring_segment(100, 100, 50, 25, -90, 270)

        assert path == (
            "M 100 50 A 50 50 0 0 1 100 150 A 50 50 0 0 1 100 50 "
            "L 100 75 A 25 25 0 0 0 100 125 A 25 25 0 0 0 100 75 Z"
        )

    def test_single_category_without_gap_is_a_full_ring(self):
        layout = DonutLayout.for_size(240, gap_degrees=0)

        segments = DonutGeometryBuilder(layout).build(_categories(42), selected_index=0)

        assert segments[0].sweep == pytest.approx(360.0)
        assert segments[0].path_descriptor.count(" A ") == 4
        # every arc must end somewhere other than where it starts
        tokens = segments[0].path_descriptor.split()
        points = [(tokens[1], tokens[2])]
        for i, token in enumerate(tokens):
            if token == "A":
                end = (tokens[i + 6], tokens[i + 7])
                assert end != points[-1]
                points.append(end)
            elif token == "L":
                points.append((tokens[i + 1], tokens[i + 2]))

    def test_path_uses_layout_radii(self, builder, layout):
        segments = builder.build(_categories(1), selected_index=0)
        path = segments[0].path_descriptor

        assert path.startswith("M ")
        assert path.endswith(" Z")
        assert f"A {layout.outer_radius:g} {layout.outer_radius:g}" in path

    def test_output_is_deterministic(self, builder):
        categories = _categories(450, 300, 200)

        assert builder.build(categories, 1) == builder.build(categories, 1)
