from __future__ import annotations

from dataclasses import replace
import logging
import math
from typing import Any, Mapping

from linechart.adapters import normalize_items
from linechart.artifacts import EMPTY_RENDER_PLAN, RenderArtifact, RenderPlan, collect_artifacts, highlight_artifacts
from linechart.config import DEFAULT_CONFIG, ChartConfig, validate_chart_config
from linechart.dots import DotRect, plan_dots
from linechart.errors import ChartDataError
from linechart.grid import plan_grid
from linechart.hit_test import nearest_index
from linechart.interaction import Highlight, PointerEvent, highlight_label_rect, highlight_line
from linechart.labels import plan_labels
from linechart.layout import ViewportGeometry
from linechart.paths import PathSpec, build_mask_path, build_series_path
from linechart.scales import Point, line_gap, map_points, resolve_domain
from linechart.series import DataItem


LOGGER = logging.getLogger(__name__)


class LineChartEngine:
    """Single-series line chart geometry engine.

    Inputs are set explicitly and nothing is derived until `recompute()` runs.
    Each pass discards every previously derived artifact (and any highlight)
    before rebuilding, so pointer queries never see a half-updated point set.
    """

    def __init__(
        self,
        items: Any = None,
        *,
        width: float | None = None,
        height: float | None = None,
        config: ChartConfig | None = None,
    ) -> None:
        self._items: tuple[DataItem, ...] = normalize_items(items)
        self._size: tuple[float, float] | None = None
        self._config: ChartConfig = validate_chart_config(base=config) if config is not None else DEFAULT_CONFIG
        self._plan: RenderPlan = EMPTY_RENDER_PLAN
        self._points: tuple[Point, ...] = ()
        self._point_items: tuple[DataItem, ...] = ()
        self._viewport: ViewportGeometry | None = None
        self._highlight: Highlight | None = None
        if width is not None and height is not None:
            self.set_viewport_size(width, height)

    @property
    def items(self) -> tuple[DataItem, ...]:
        return self._items

    @property
    def config(self) -> ChartConfig:
        return self._config

    @property
    def render_plan(self) -> RenderPlan:
        return self._plan

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    @property
    def highlight(self) -> Highlight | None:
        return self._highlight

    def overlay_artifacts(self) -> tuple[RenderArtifact, ...]:
        return highlight_artifacts(self._highlight)

    def set_series(self, items: Any) -> None:
        self._items = normalize_items(items)

    def set_viewport_size(self, width: float, height: float) -> None:
        if not (math.isfinite(width) and math.isfinite(height)):
            raise ValueError("viewport width/height must be finite")
        if width < 0 or height < 0:
            raise ValueError("viewport width/height must be >= 0")
        self._size = (float(width), float(height))

    def set_config(self, options: ChartConfig | Mapping[str, Any] | None = None, **overrides: Any) -> ChartConfig:
        if isinstance(options, ChartConfig):
            self._config = validate_chart_config(overrides, base=options)
        else:
            merged = dict(options or {})
            merged.update(overrides)
            self._config = validate_chart_config(merged, base=self._config)
        return self._config

    def recompute(self) -> RenderPlan:
        self._clear()
        if self._size is None:
            LOGGER.debug("chart layout skipped: viewport size not set")
            return self._plan

        config = self._config
        items = self._items
        viewport = ViewportGeometry.from_config(self._size[0], self._size[1], config)
        try:
            _, _, area_w, area_h = viewport.data_area()
            domain = resolve_domain(items, config.scale_mode)
        except ChartDataError as exc:
            LOGGER.debug("chart layout skipped: %s", exc)
            return self._plan

        grid = plan_grid(items, domain, area_w, area_h, show_grid_lines=config.show_grid_lines)

        points: tuple[Point, ...] = ()
        gap: float | None = None
        series_path: PathSpec | None = None
        mask_path: PathSpec | None = None
        dots: tuple[DotRect, ...] = ()
        try:
            points = map_points(items, domain, area_w, area_h)
            gap = line_gap(len(items), area_w)
            series_path = build_series_path(points, curved=config.curved_line)
            if config.show_gradient:
                mask_path = build_mask_path(points, series_path, area_h)
            if config.show_dots:
                dots = plan_dots(
                    points,
                    config.dot_outer_radius,
                    config.resolved_dot_inner_radius,
                    (viewport.left_inset, viewport.top_inset),
                )
        except ChartDataError as exc:
            LOGGER.debug("series geometry skipped: %s", exc)

        labels = plan_labels(
            items,
            area_w,
            config.minimum_label_width,
            config.show_last_label,
            line_gap=gap,
            area_height=area_h,
        )

        self._plan = RenderPlan(
            domain=domain,
            points=points,
            viewport=viewport,
            series_path=series_path,
            mask_path=mask_path,
            grid=grid,
            labels=labels,
            dots=dots,
            artifacts=collect_artifacts(
                series_path=series_path,
                mask_path=mask_path,
                grid=grid,
                labels=labels,
                dots=dots,
            ),
        )
        self._points = points
        self._point_items = items if points else ()
        self._viewport = viewport
        LOGGER.debug(
            "chart recomputed: items=%d points=%d artifacts=%d domain=%s",
            len(items),
            len(points),
            len(self._plan.artifacts),
            domain,
        )
        return self._plan

    def handle_pointer(self, event: PointerEvent) -> Highlight | None:
        config = self._config
        if config.highlight_on_touch:
            self._update_highlight(event)
        if event.phase == "up" and config.hide_highlight_line_on_touch_end and self._highlight is not None:
            self._highlight = replace(self._highlight, line=None)
        return self._highlight

    def clear_highlight(self) -> None:
        self._highlight = None

    def _update_highlight(self, event: PointerEvent) -> None:
        if not event.inside_chart:
            if self._config.remove_highlight_on_touch_out_of_chart:
                self._highlight = None
            return
        idx = nearest_index(event.location, self._points)
        if idx is None or self._viewport is None:
            return
        self._highlight = self._build_highlight(idx, self._viewport)

    def _build_highlight(self, idx: int, viewport: ViewportGeometry) -> Highlight:
        config = self._config
        point = self._points[idx]
        item = self._point_items[idx]
        line = highlight_line(point, viewport.data_height) if config.draws_highlight_line else None
        return Highlight(
            index=idx,
            item=item,
            point=point,
            text=str(item.value),
            label_rect=highlight_label_rect(
                point,
                label_width=config.minimum_label_width,
                left_inset=viewport.left_inset,
                top_inset=viewport.top_inset,
                bottom_inset=viewport.bottom_inset,
            ),
            line=line,
        )

    def _clear(self) -> None:
        self._plan = EMPTY_RENDER_PLAN
        self._points = ()
        self._point_items = ()
        self._viewport = None
        self._highlight = None
