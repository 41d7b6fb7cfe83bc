from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping

from linechart.grid import AXIS_LINE_WIDTH, LineGeometry, LineStroke
from linechart.scales import Point
from linechart.series import DataItem


PointerPhase = Literal["down", "move", "up"]

_PHASES = ("down", "move", "up")

HIGHLIGHT_LABEL_HEIGHT = 16.0
HIGHLIGHT_LABEL_OFFSET = 8.0


@dataclass(frozen=True)
class PointerEvent:
    """Pointer sample in data-area-local coordinates."""

    phase: PointerPhase
    x: float
    y: float
    inside_chart: bool = True

    @property
    def location(self) -> Point:
        return Point(self.x, self.y)


def parse_pointer_event(event_type: str, payload: object) -> PointerEvent | None:
    """Parse a host `pointer` event mapping into a typed `PointerEvent`.

    Expected payload keys: `phase`, `x`, `y` and optionally `inside_chart`.
    Unknown event types, phases or non-numeric coordinates yield None.
    """

    if event_type != "pointer" or not isinstance(payload, Mapping):
        return None
    phase = payload.get("phase")
    if phase not in _PHASES:
        return None
    try:
        x = float(payload.get("x"))  # type: ignore[arg-type]
        y = float(payload.get("y"))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    inside = payload.get("inside_chart", True)
    return PointerEvent(phase=phase, x=x, y=y, inside_chart=bool(inside))


@dataclass(frozen=True)
class Highlight:
    """Marker shown at the data point nearest to the pointer."""

    index: int
    item: DataItem
    point: Point
    text: str
    label_rect: tuple[float, float, float, float]
    line: LineGeometry | None = None


def highlight_label_rect(
    point: Point,
    *,
    label_width: float,
    left_inset: float,
    top_inset: float,
    bottom_inset: float,
) -> tuple[float, float, float, float]:
    """Label rect in viewport coordinates, centered above the point."""
    x = point.x - label_width / 2 + left_inset
    y = point.y - bottom_inset + top_inset + HIGHLIGHT_LABEL_OFFSET
    return (x, y, label_width, HIGHLIGHT_LABEL_HEIGHT)


def highlight_line(point: Point, area_height: float) -> LineGeometry:
    return LineGeometry(start=Point(point.x, 0.0), end=Point(point.x, area_height), stroke=LineStroke(width=AXIS_LINE_WIDTH))
