"""Donut chart geometry.

Segments are laid out clockwise from the top of the circle. Each category
gets an angular budget proportional to its amount; the drawn arc is the
budget minus a fixed gap, centered inside the budget, so adjacent wedges are
separated by exactly one gap.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from flouss.domain.analytics.value_objects import (
    CategoryAmount,
    DonutLayout,
    RingSegment,
    format_number,
)

logger = logging.getLogger(__name__)

SELECTED_OPACITY = 1.0
UNSELECTED_OPACITY = 0.85

FULL_CIRCLE = 360.0
ANGLE_EPSILON = 1e-9


def polar_to_cartesian(
    cx: float,
    cy: float,
    radius: float,
    angle_degrees: float,
) -> tuple[float, float]:
    angle = math.radians(angle_degrees)
    return cx + radius * math.cos(angle), cy + radius * math.sin(angle)


def describe_ring_segment(
    cx: float,
    cy: float,
    outer_radius: float,
    inner_radius: float,
    start_angle: float,
    end_angle: float,
) -> str:
    """SVG path of an annulus wedge between two angles.

    Outer arc clockwise from start to end, line to the inner radius, inner arc
    counter-clockwise back to start, close. A sweep of 360° or more yields the
    full annulus, since an SVG arc with identical endpoints is not drawn.
    """
    if end_angle - start_angle >= FULL_CIRCLE - ANGLE_EPSILON:
        return _describe_full_ring(cx, cy, outer_radius, inner_radius, start_angle)

    large_arc = "0" if end_angle - start_angle <= 180 else "1"
    x1, y1 = polar_to_cartesian(cx, cy, outer_radius, start_angle)
    x2, y2 = polar_to_cartesian(cx, cy, outer_radius, end_angle)
    x3, y3 = polar_to_cartesian(cx, cy, inner_radius, end_angle)
    x4, y4 = polar_to_cartesian(cx, cy, inner_radius, start_angle)
    r_out = format_number(outer_radius)
    r_in = format_number(inner_radius)
    f = format_number
    return (
        f"M {f(x1)} {f(y1)} "
        f"A {r_out} {r_out} 0 {large_arc} 1 {f(x2)} {f(y2)} "
        f"L {f(x3)} {f(y3)} "
        f"A {r_in} {r_in} 0 {large_arc} 0 {f(x4)} {f(y4)} Z"
    )


def _describe_full_ring(
    cx: float,
    cy: float,
    outer_radius: float,
    inner_radius: float,
    start_angle: float,
) -> str:
    # two half arcs per circle; inner circle runs counter-clockwise
    x1, y1 = polar_to_cartesian(cx, cy, outer_radius, start_angle)
    x2, y2 = polar_to_cartesian(cx, cy, outer_radius, start_angle + 180)
    x3, y3 = polar_to_cartesian(cx, cy, inner_radius, start_angle)
    x4, y4 = polar_to_cartesian(cx, cy, inner_radius, start_angle + 180)
    r_out = format_number(outer_radius)
    r_in = format_number(inner_radius)
    f = format_number
    return (
        f"M {f(x1)} {f(y1)} "
        f"A {r_out} {r_out} 0 0 1 {f(x2)} {f(y2)} "
        f"A {r_out} {r_out} 0 0 1 {f(x1)} {f(y1)} "
        f"L {f(x3)} {f(y3)} "
        f"A {r_in} {r_in} 0 0 0 {f(x4)} {f(y4)} "
        f"A {r_in} {r_in} 0 0 0 {f(x3)} {f(y3)} Z"
    )


class DonutGeometryBuilder:
    """Convert ordered category amounts into ring segments."""

    def __init__(self, layout: DonutLayout):
        self._layout = layout

    @property
    def layout(self) -> DonutLayout:
        return self._layout

    def build(
        self,
        categories: Sequence[CategoryAmount],
        selected_index: int,
    ) -> list[RingSegment]:
        """Return one segment per category, in input order.

        `selected_index` is not validated: an out-of-range index simply
        selects nothing.
        """
        layout = self._layout
        amounts = [max(0.0, c.amount) for c in categories]
        total = sum(amounts) or 1.0
        gap = layout.gap_degrees

        segments: list[RingSegment] = []
        cursor = layout.start_angle
        for i, (category, amount) in enumerate(zip(categories, amounts)):
            full_sweep = amount / total * 360
            sweep = max(0.0, full_sweep - gap)
            start = cursor + gap / 2
            end = start + sweep
            cursor += full_sweep

            is_selected = i == selected_index
            offset_x = offset_y = 0.0
            if is_selected:
                mid = math.radians((start + end) / 2)
                offset_x = math.cos(mid) * layout.selection_offset
                offset_y = math.sin(mid) * layout.selection_offset

            segments.append(
                RingSegment(
                    index=i,
                    path_descriptor=describe_ring_segment(
                        layout.center_x,
                        layout.center_y,
                        layout.outer_radius,
                        layout.inner_radius,
                        start,
                        end,
                    ),
                    color=category.color,
                    is_selected=is_selected,
                    start_angle=start,
                    end_angle=end,
                    sweep=sweep,
                    offset_x=offset_x,
                    offset_y=offset_y,
                    scale=layout.selected_scale if is_selected else 1.0,
                    opacity=SELECTED_OPACITY if is_selected else UNSELECTED_OPACITY,
                )
            )

        logger.debug(
            "Built %d donut segments (selected=%d)",
            len(segments),
            selected_index,
        )
        return segments
