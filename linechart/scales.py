from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from linechart.config import ScaleMode
from linechart.errors import ChartDataError
from linechart.series import DataItem


# Min/max mode puts the top of the axis 10% above the data range.
TOP_HEADROOM = 1.10
DEGENERATE_PAD_RATIO = 0.10
ROUNDED_TOP_STEP = 100


@dataclass(frozen=True)
class Domain:
    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min


@dataclass(frozen=True)
class Point:
    x: float
    y: float


def rounded_top_value(max_value: int) -> int:
    """Round `max_value` to a multiple of 100 that sits strictly above it."""
    rounded = (max_value // 100) * 100
    if max_value % 100 >= 50:
        rounded += 100
    return rounded + 200 if rounded < max_value else rounded + 100


def resolve_domain(items: Sequence[DataItem], mode: ScaleMode = "auto") -> Domain:
    if not items:
        raise ChartDataError("empty series")
    lo = min(item.value for item in items)
    hi = max(item.value for item in items)

    if mode == "rounded_top" or (mode == "auto" and lo >= 0):
        # The axis floors at zero, so the top stays at least one step above it.
        return Domain(min=0.0, max=float(max(rounded_top_value(hi), ROUNDED_TOP_STEP)))

    span = float(hi - lo) * TOP_HEADROOM
    if span <= 0:
        delta = max(1.0, abs(lo) * DEGENERATE_PAD_RATIO)
        return Domain(min=lo - delta, max=lo + delta)
    return Domain(min=float(lo), max=lo + span)


def line_gap(count: int, width: float) -> float:
    if count < 2:
        raise ChartDataError("at least two items are required for a line gap")
    return width / (count - 1)


def map_points(items: Sequence[DataItem], domain: Domain, width: float, height: float) -> tuple[Point, ...]:
    if domain.span <= 0:
        raise ChartDataError(f"degenerate domain: {domain}")
    gap = line_gap(len(items), width)
    values = np.asarray([item.value for item in items], dtype=np.float64)
    xs = np.arange(values.size, dtype=np.float64) * gap
    ys = height * (1.0 - (values - domain.min) / domain.span)
    return tuple(Point(x=float(x), y=float(y)) for x, y in zip(xs.tolist(), ys.tolist(), strict=True))
