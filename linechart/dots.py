from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from linechart.scales import Point


@dataclass(frozen=True)
class DotRect:
    index: int
    x: float
    y: float
    size: float
    corner_radius: float
    inner_radius: float

    @property
    def center(self) -> Point:
        return Point(self.x + self.size / 2, self.y + self.size / 2)


def plan_dots(
    points: Sequence[Point],
    outer_radius: float,
    inner_radius: float,
    insets: tuple[float, float],
) -> tuple[DotRect, ...]:
    """Place one square marker per point in the parent (viewport) space.

    `insets` is `(left, top)`: the data area's offset inside the viewport.
    """

    left, top = insets
    return tuple(
        DotRect(
            index=i,
            x=(p.x - outer_radius / 2) + left,
            y=(p.y - inner_radius) + top,
            size=outer_radius,
            corner_radius=outer_radius / 2,
            inner_radius=inner_radius,
        )
        for i, p in enumerate(points)
    )
