from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from linechart.scales import Domain, Point
from linechart.series import DataItem


FEW_ITEM_FRACTIONS = (0.0, 1.0)
QUARTER_FRACTIONS = (0.0, 0.25, 0.5, 0.75, 1.0)
QUARTER_MIN_ITEMS = 4

AXIS_LINE_WIDTH = 0.5
GRID_DASH_PATTERN = (4.0, 4.0)
GRID_OPACITY = 0.5

# Tick text sits left of the axis, right-aligned, centered on its line.
TICK_TEXT_X = -55.0
TICK_TEXT_WIDTH = 50.0
TICK_TEXT_HEIGHT = 16.0


@dataclass(frozen=True)
class LineStroke:
    width: float = AXIS_LINE_WIDTH
    opacity: float = 1.0
    dash: tuple[float, ...] = ()

    @property
    def visible(self) -> bool:
        return self.width > 0 and self.opacity > 0


@dataclass(frozen=True)
class LineGeometry:
    start: Point
    end: Point
    stroke: LineStroke


@dataclass(frozen=True)
class GridLine:
    fraction: float
    value: int
    line: LineGeometry
    text: str
    text_rect: tuple[float, float, float, float]

    @property
    def y(self) -> float:
        return self.line.start.y


@dataclass(frozen=True)
class GridPlan:
    vertical_line: LineGeometry | None
    lines: tuple[GridLine, ...]


def grid_fractions(item_count: int) -> tuple[float, ...]:
    if item_count <= 0:
        return ()
    if item_count < QUARTER_MIN_ITEMS:
        return FEW_ITEM_FRACTIONS
    return QUARTER_FRACTIONS


def tick_value(fraction: float, domain: Domain) -> int:
    """Value printed next to the grid line at `fraction` (0 = top)."""
    return _round_half_up((1.0 - fraction) * domain.span) + _round_half_up(domain.min)


def grid_stroke(fraction: float, show_grid_lines: bool) -> LineStroke:
    if fraction == 1.0:
        return LineStroke()
    if show_grid_lines:
        return LineStroke(opacity=GRID_OPACITY, dash=GRID_DASH_PATTERN)
    return LineStroke(width=0.0)


def plan_grid(
    items: Sequence[DataItem],
    domain: Domain | None,
    width: float,
    height: float,
    *,
    show_grid_lines: bool = True,
) -> GridPlan:
    fractions = grid_fractions(len(items))
    if not fractions or domain is None:
        return GridPlan(vertical_line=None, lines=())

    vertical = LineGeometry(start=Point(0.0, 0.0), end=Point(0.0, height), stroke=LineStroke())
    lines: list[GridLine] = []
    for fraction in fractions:
        y = fraction * height
        value = tick_value(fraction, domain)
        lines.append(
            GridLine(
                fraction=fraction,
                value=value,
                line=LineGeometry(start=Point(0.0, y), end=Point(width, y), stroke=grid_stroke(fraction, show_grid_lines)),
                text=str(value),
                text_rect=(TICK_TEXT_X, y - TICK_TEXT_HEIGHT / 2, TICK_TEXT_WIDTH, TICK_TEXT_HEIGHT),
            )
        )
    return GridPlan(vertical_line=vertical, lines=tuple(lines))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
