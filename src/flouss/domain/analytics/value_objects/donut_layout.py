"""Donut chart layout value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from flouss.domain.shared.exceptions import ErrorCode, ValidationError

if TYPE_CHECKING:
    from flouss_config import Settings

MIN_CHART_SIZE = 240.0
CHART_PADDING = 8.0  # room for the selected segment to move outward

DEFAULT_INNER_RADIUS_RATIO = 0.58
DEFAULT_GAP_DEGREES = 3.0
DEFAULT_SELECTION_OFFSET = 6.0
DEFAULT_SELECTED_SCALE = 1.05
TOP_OF_CIRCLE = -90.0


@dataclass(frozen=True)
class DonutLayout:
    """Geometry parameters of a donut chart drawn in a square canvas."""

    size: float
    outer_radius: float
    inner_radius: float
    gap_degrees: float = DEFAULT_GAP_DEGREES
    selection_offset: float = DEFAULT_SELECTION_OFFSET
    selected_scale: float = DEFAULT_SELECTED_SCALE
    start_angle: float = TOP_OF_CIRCLE

    def __post_init__(self):
        if self.size <= 0:
            msg = f"size must be positive, got: {self.size}"
            raise ValidationError(msg, code=ErrorCode.INVALID_LAYOUT)

        if not 0 <= self.inner_radius < self.outer_radius:
            msg = (
                "inner_radius must be in [0, outer_radius), "
                f"got: inner={self.inner_radius}, outer={self.outer_radius}"
            )
            raise ValidationError(msg, code=ErrorCode.INVALID_LAYOUT)

        if not 0 <= self.gap_degrees < 360:
            msg = f"gap_degrees must be in [0, 360), got: {self.gap_degrees}"
            raise ValidationError(msg, code=ErrorCode.INVALID_LAYOUT)

        if self.selection_offset < 0 or self.selected_scale <= 0:
            msg = (
                "selection_offset must be >= 0 and selected_scale > 0, "
                f"got: {self.selection_offset}, {self.selected_scale}"
            )
            raise ValidationError(msg, code=ErrorCode.INVALID_LAYOUT)

    @property
    def center_x(self) -> float:
        return self.size / 2

    @property
    def center_y(self) -> float:
        return self.size / 2

    @classmethod
    def for_size(
        cls,
        size: float,
        inner_radius_ratio: float = DEFAULT_INNER_RADIUS_RATIO,
        gap_degrees: float = DEFAULT_GAP_DEGREES,
        selection_offset: float = DEFAULT_SELECTION_OFFSET,
        selected_scale: float = DEFAULT_SELECTED_SCALE,
    ) -> DonutLayout:
        """Derive radii from the canvas size (never smaller than 240)."""
        size = max(MIN_CHART_SIZE, size)
        outer_radius = size / 2 - CHART_PADDING
        return cls(
            size=size,
            outer_radius=outer_radius,
            inner_radius=outer_radius * inner_radius_ratio,
            gap_degrees=gap_degrees,
            selection_offset=selection_offset,
            selected_scale=selected_scale,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> DonutLayout:
        return cls.for_size(
            settings.donut_size,
            inner_radius_ratio=settings.donut_inner_radius_ratio,
            gap_degrees=settings.donut_gap_degrees,
            selection_offset=settings.donut_selection_offset,
            selected_scale=settings.donut_selected_scale,
        )
