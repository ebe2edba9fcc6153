"""Selected-category state of a breakdown chart."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from flouss.domain.analytics.value_objects import CategoryAmount


class SelectionMode(str, Enum):
    DEFAULT = "default"  # largest category, chosen automatically
    USER_SELECTED = "user_selected"


def index_of_largest(categories: Sequence[CategoryAmount]) -> int:
    """Index of the largest amount; first wins on ties, 0 for an empty list."""
    best = 0
    for i, category in enumerate(categories):
        if category.amount > categories[best].amount:
            best = i
    return best


class SelectionController:
    """Track which segment / list row is highlighted.

    A data change (new rows or an expenses/income toggle) always resets the
    selection to the largest category. A tap selects the tapped row until the
    next data change. Bounds are the caller's concern; after an empty data
    change the index is 0 with nothing behind it.
    """

    def __init__(self) -> None:
        self._selected_index = 0
        self._mode = SelectionMode.DEFAULT

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def mode(self) -> SelectionMode:
        return self._mode

    def data_changed(self, categories: Sequence[CategoryAmount]) -> int:
        self._selected_index = index_of_largest(categories)
        self._mode = SelectionMode.DEFAULT
        return self._selected_index

    def user_tap(self, index: int) -> int:
        self._selected_index = index
        self._mode = SelectionMode.USER_SELECTED
        return self._selected_index
