from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TypeAlias

from linechart.curves import control_points_from
from linechart.errors import ChartDataError
from linechart.scales import Point


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point


@dataclass(frozen=True)
class CurveTo:
    point: Point
    control_point1: Point
    control_point2: Point


@dataclass(frozen=True)
class ClosePath:
    pass


PathOp: TypeAlias = MoveTo | LineTo | CurveTo | ClosePath


@dataclass(frozen=True)
class PathSpec:
    """Backend-agnostic path: the host maps each op onto its own drawing API."""

    ops: tuple[PathOp, ...]

    @property
    def closed(self) -> bool:
        return bool(self.ops) and isinstance(self.ops[-1], ClosePath)

    def to_svg_path_data(self, precision: int = 3) -> str:
        parts: list[str] = []
        for op in self.ops:
            if isinstance(op, MoveTo):
                parts.append(f"M {_fmt(op.point, precision)}")
            elif isinstance(op, LineTo):
                parts.append(f"L {_fmt(op.point, precision)}")
            elif isinstance(op, CurveTo):
                parts.append(
                    "C "
                    f"{_fmt(op.control_point1, precision)} "
                    f"{_fmt(op.control_point2, precision)} "
                    f"{_fmt(op.point, precision)}"
                )
            else:
                parts.append("Z")
        return " ".join(parts)


def build_series_path(points: Sequence[Point], curved: bool) -> PathSpec:
    if len(points) < 2:
        raise ChartDataError("at least two points are required for a path")
    ops: list[PathOp] = [MoveTo(points[0])]
    if curved:
        segments = control_points_from(points)
        for point, segment in zip(points[1:], segments, strict=True):
            ops.append(CurveTo(point=point, control_point1=segment.control_point1, control_point2=segment.control_point2))
    else:
        ops.extend(LineTo(point) for point in points[1:])
    return PathSpec(ops=tuple(ops))


def build_mask_path(points: Sequence[Point], series_path: PathSpec, area_height: float) -> PathSpec:
    """Close the region between `series_path` and the bottom of the data area."""
    if not points:
        raise ChartDataError("mask path needs at least one point")
    first = points[0]
    last = points[-1]
    bottom_start = Point(x=first.x, y=area_height)
    ops: list[PathOp] = [MoveTo(bottom_start), LineTo(first)]
    # Series ops minus its leading move.
    ops.extend(op for op in series_path.ops if not isinstance(op, (MoveTo, ClosePath)))
    ops.append(LineTo(Point(x=last.x, y=area_height)))
    ops.append(LineTo(bottom_start))
    ops.append(ClosePath())
    return PathSpec(ops=tuple(ops))


def _fmt(point: Point, precision: int) -> str:
    return f"{_trim(point.x, precision)},{_trim(point.y, precision)}"


def _trim(value: float, precision: int) -> str:
    out = f"{value:.{precision}f}"
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out
