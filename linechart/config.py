from __future__ import annotations

from dataclasses import asdict, dataclass
import math
from typing import Any, Literal, Mapping


ScaleMode = Literal["auto", "rounded_top", "min_max"]

_SCALE_MODES = ("auto", "rounded_top", "min_max")


@dataclass(frozen=True)
class ChartConfig:
    """Layout and behavior options for one line chart."""

    curved_line: bool = False
    show_grid_lines: bool = True
    show_last_label: bool = True
    minimum_label_width: float = 30.0
    top_inset: float = 20.0
    bottom_inset: float = 30.0
    left_inset: float = 30.0
    last_label_right_inset: float = 16.0
    show_dots: bool = False
    dot_outer_radius: float = 6.0
    dot_inner_radius: float | None = None
    show_gradient: bool = False
    highlight_on_touch: bool = True
    draws_highlight_line: bool = True
    hide_highlight_line_on_touch_end: bool = False
    remove_highlight_on_touch_out_of_chart: bool = True
    scale_mode: ScaleMode = "auto"

    @property
    def right_inset(self) -> float:
        # Room for the trailing label, which is centered on the last point.
        return self.last_label_right_inset if self.show_last_label else 0.0

    @property
    def resolved_dot_inner_radius(self) -> float:
        if self.dot_inner_radius is None:
            return self.dot_outer_radius / 2
        return self.dot_inner_radius


DEFAULT_CONFIG = ChartConfig()

_BOOL_OPTIONS = (
    "curved_line",
    "show_grid_lines",
    "show_last_label",
    "show_dots",
    "show_gradient",
    "highlight_on_touch",
    "draws_highlight_line",
    "hide_highlight_line_on_touch_end",
    "remove_highlight_on_touch_out_of_chart",
)

_INSET_OPTIONS = ("top_inset", "bottom_inset", "left_inset", "last_label_right_inset")


def validate_chart_config(
    overrides: Mapping[str, Any] | None = None,
    *,
    base: ChartConfig = DEFAULT_CONFIG,
) -> ChartConfig:
    """Validate and merge option overrides on top of `base`."""

    raw: dict[str, Any] = asdict(base)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown chart option: {key}")
            raw[key] = value

    for key in _BOOL_OPTIONS:
        if not isinstance(raw[key], bool):
            raise ValueError(f"Option `{key}` must be a bool")

    for key in _INSET_OPTIONS:
        if not _is_number(raw[key]) or float(raw[key]) < 0:
            raise ValueError(f"Option `{key}` must be a number >= 0")

    if not _is_number(raw["minimum_label_width"]) or float(raw["minimum_label_width"]) <= 0:
        raise ValueError("Option `minimum_label_width` must be a positive number")

    if not _is_number(raw["dot_outer_radius"]) or float(raw["dot_outer_radius"]) <= 0:
        raise ValueError("Option `dot_outer_radius` must be a positive number")

    inner = raw["dot_inner_radius"]
    if inner is not None:
        if not _is_number(inner) or float(inner) < 0:
            raise ValueError("Option `dot_inner_radius` must be None or a number >= 0")
        if float(inner) > float(raw["dot_outer_radius"]):
            raise ValueError("Option `dot_inner_radius` must not exceed `dot_outer_radius`")
        inner = float(inner)

    if raw["scale_mode"] not in _SCALE_MODES:
        raise ValueError(f"Option `scale_mode` must be one of {', '.join(_SCALE_MODES)}")

    return ChartConfig(
        curved_line=raw["curved_line"],
        show_grid_lines=raw["show_grid_lines"],
        show_last_label=raw["show_last_label"],
        minimum_label_width=float(raw["minimum_label_width"]),
        top_inset=float(raw["top_inset"]),
        bottom_inset=float(raw["bottom_inset"]),
        left_inset=float(raw["left_inset"]),
        last_label_right_inset=float(raw["last_label_right_inset"]),
        show_dots=raw["show_dots"],
        dot_outer_radius=float(raw["dot_outer_radius"]),
        dot_inner_radius=inner,
        show_gradient=raw["show_gradient"],
        highlight_on_touch=raw["highlight_on_touch"],
        draws_highlight_line=raw["draws_highlight_line"],
        hide_highlight_line_on_touch_end=raw["hide_highlight_line_on_touch_end"],
        remove_highlight_on_touch_out_of_chart=raw["remove_highlight_on_touch_out_of_chart"],
        scale_mode=raw["scale_mode"],
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)
