from __future__ import annotations

from dataclasses import dataclass

from linechart.config import ChartConfig
from linechart.errors import ChartDataError


@dataclass(frozen=True)
class ViewportGeometry:
    """Chart viewport and the insets that carve the data area out of it."""

    width: float
    height: float
    left_inset: float
    top_inset: float
    bottom_inset: float
    right_inset: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("viewport width/height must be >= 0")

    @classmethod
    def from_config(cls, width: float, height: float, config: ChartConfig) -> "ViewportGeometry":
        return cls(
            width=float(width),
            height=float(height),
            left_inset=config.left_inset,
            top_inset=config.top_inset,
            bottom_inset=config.bottom_inset,
            right_inset=config.right_inset,
        )

    @property
    def data_width(self) -> float:
        return self.width - self.left_inset - self.right_inset

    @property
    def data_height(self) -> float:
        return self.height - self.top_inset - self.bottom_inset

    def data_area(self) -> tuple[float, float, float, float]:
        """Return the data area as `(x, y, width, height)` in viewport coordinates."""
        width = self.data_width
        height = self.data_height
        if width <= 0 or height <= 0:
            raise ChartDataError("viewport too small for a data area")
        return (self.left_inset, self.top_inset, width, height)
