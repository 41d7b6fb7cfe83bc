from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from linechart.errors import ChartDataError
from linechart.scales import Point


# Fraction of each chord used to seed the temporary control points.
CONTROL_POINT_DELTA = 0.3


@dataclass(frozen=True)
class CurveSegment:
    control_point1: Point
    control_point2: Point


def control_points_from(points: Sequence[Point], delta: float = CONTROL_POINT_DELTA) -> tuple[CurveSegment, ...]:
    """Compute one cubic segment per consecutive point pair.

    Temporary control points sit `delta` of the way along each chord. At every
    interior point the neighbouring temporary control points are reflected
    through the point and averaged with their counterparts, which puts both
    control points of a joint on one line through it (continuous tangent).
    """

    if len(points) < 2:
        raise ChartDataError("at least two points are required for a curve")

    pts = np.asarray([(p.x, p.y) for p in points], dtype=np.float64)
    chords = pts[1:] - pts[:-1]
    cp1 = pts[:-1] + delta * chords
    cp2 = pts[1:] - delta * chords

    for i in range(1, pts.shape[0] - 1):
        m = cp2[i - 1].copy()
        n = cp1[i].copy()
        a = pts[i]
        cp1[i] = ((2.0 * a - m) + n) / 2.0
        cp2[i - 1] = ((2.0 * a - n) + m) / 2.0

    return tuple(
        CurveSegment(
            control_point1=Point(x=float(c1[0]), y=float(c1[1])),
            control_point2=Point(x=float(c2[0]), y=float(c2[1])),
        )
        for c1, c2 in zip(cp1, cp2, strict=True)
    )
