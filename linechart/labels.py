from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from linechart.series import DataItem


LABEL_HEIGHT = 16.0
LABEL_TOP_GAP = 4.0


@dataclass(frozen=True)
class CategoryLabel:
    index: int
    text: str
    rect: tuple[float, float, float, float]


@dataclass(frozen=True)
class LabelPlan:
    """Category-axis labels chosen for display, in data-area coordinates."""

    indices: frozenset[int]
    labels: tuple[CategoryLabel, ...]
    max_labels: int
    stride: int
    crowded: bool
    label_width: float


EMPTY_LABEL_PLAN = LabelPlan(indices=frozenset(), labels=(), max_labels=0, stride=1, crowded=False, label_width=0.0)


def max_label_count(available_width: float, min_label_width: float) -> int:
    if min_label_width <= 0:
        raise ValueError("min_label_width must be > 0")
    return max(1, int(math.floor(available_width / min_label_width)))


def visible_label_indices(item_count: int, max_labels: int, show_last_label: bool) -> tuple[frozenset[int], int]:
    """Return the shown indices and the stride used to decimate them."""
    if item_count <= 0:
        return frozenset(), 1
    last = item_count - 1
    if item_count <= max_labels:
        stride = 1
        shown = set(range(item_count))
    else:
        stride = int(math.ceil(item_count / max_labels))
        shown = {i for i in range(item_count) if i % stride == 0}
        if show_last_label:
            shown.add(last)
    if not show_last_label and last != 0:
        shown.discard(last)
    return frozenset(shown), stride


def plan_labels(
    items: Sequence[DataItem],
    available_width: float,
    min_label_width: float,
    show_last_label: bool,
    *,
    line_gap: float | None = None,
    area_height: float = 0.0,
) -> LabelPlan:
    count = len(items)
    if count == 0:
        return EMPTY_LABEL_PLAN
    max_labels = max_label_count(available_width, min_label_width)
    indices, stride = visible_label_indices(count, max_labels, show_last_label)
    crowded = count > max_labels
    gap = 0.0 if line_gap is None else line_gap
    # A lone item has no gap to fill, so it falls back to the minimum width too.
    width = min_label_width if crowded or gap <= 0 else gap
    y = area_height + LABEL_TOP_GAP
    labels = tuple(
        CategoryLabel(index=i, text=items[i].label, rect=(gap * i - width / 2, y, width, LABEL_HEIGHT))
        for i in sorted(indices)
    )
    return LabelPlan(
        indices=indices,
        labels=labels,
        max_labels=max_labels,
        stride=stride,
        crowded=crowded,
        label_width=width,
    )
