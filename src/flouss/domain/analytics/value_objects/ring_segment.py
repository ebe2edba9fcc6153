"""Drawable ring segment of a donut chart."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RingSegment:
    """Annulus wedge for one category, in SVG coordinates.

    Angles are in degrees, 0° on the positive x-axis, increasing clockwise.
    `start_angle`/`end_angle` describe the drawn arc (gap already removed).
    """

    index: int
    path_descriptor: str
    color: str
    is_selected: bool
    start_angle: float
    end_angle: float
    sweep: float
    offset_x: float = 0.0
    offset_y: float = 0.0
    scale: float = 1.0
    opacity: float = 1.0

    @property
    def transform(self) -> str:
        """SVG transform attribute applying the selection offset and scale."""
        return (
            f"translate({format_number(self.offset_x)}, "
            f"{format_number(self.offset_y)}) scale({format_number(self.scale)})"
        )


def format_number(value: float) -> str:
    """Compact coordinate formatting for path strings (max 4 decimals)."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
