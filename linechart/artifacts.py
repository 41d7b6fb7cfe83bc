from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, TypeAlias

from linechart.dots import DotRect
from linechart.grid import GridLine, GridPlan, LineGeometry
from linechart.interaction import Highlight
from linechart.labels import EMPTY_LABEL_PLAN, CategoryLabel, LabelPlan
from linechart.layout import ViewportGeometry
from linechart.paths import PathSpec
from linechart.scales import Domain, Point


ArtifactKind = Literal["label", "dot", "line", "grid"]
CoordinateSpace = Literal["viewport", "data_area"]

ArtifactGeometry: TypeAlias = PathSpec | LineGeometry | GridLine | CategoryLabel | DotRect | Highlight


@dataclass(frozen=True)
class RenderArtifact:
    """One drawable produced by a layout pass, tagged with its kind.

    `role` distinguishes artifacts of the same kind (e.g. `series` and `mask`
    lines); `space` names the coordinate frame `geometry` is expressed in.
    """

    kind: ArtifactKind
    role: str
    space: CoordinateSpace
    geometry: ArtifactGeometry


@dataclass(frozen=True)
class RenderPlan:
    domain: Domain | None = None
    points: tuple[Point, ...] = ()
    viewport: ViewportGeometry | None = None
    series_path: PathSpec | None = None
    mask_path: PathSpec | None = None
    grid: GridPlan = field(default_factory=lambda: GridPlan(vertical_line=None, lines=()))
    labels: LabelPlan = EMPTY_LABEL_PLAN
    dots: tuple[DotRect, ...] = ()
    artifacts: tuple[RenderArtifact, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.artifacts

    def artifacts_of(self, *kinds: ArtifactKind) -> tuple[RenderArtifact, ...]:
        wanted = set(kinds)
        return tuple(a for a in self.artifacts if a.kind in wanted)


EMPTY_RENDER_PLAN = RenderPlan()


def collect_artifacts(
    *,
    series_path: PathSpec | None,
    mask_path: PathSpec | None,
    grid: GridPlan,
    labels: LabelPlan,
    dots: tuple[DotRect, ...],
) -> tuple[RenderArtifact, ...]:
    out: list[RenderArtifact] = []
    if grid.vertical_line is not None:
        out.append(RenderArtifact(kind="grid", role="axis", space="data_area", geometry=grid.vertical_line))
    for line in grid.lines:
        out.append(RenderArtifact(kind="grid", role="grid_line", space="data_area", geometry=line))
    if series_path is not None:
        out.append(RenderArtifact(kind="line", role="series", space="data_area", geometry=series_path))
    if mask_path is not None:
        out.append(RenderArtifact(kind="line", role="mask", space="data_area", geometry=mask_path))
    for dot in dots:
        out.append(RenderArtifact(kind="dot", role="dot", space="viewport", geometry=dot))
    for label in labels.labels:
        out.append(RenderArtifact(kind="label", role="category_label", space="data_area", geometry=label))
    return tuple(out)


def highlight_artifacts(highlight: Highlight | None) -> tuple[RenderArtifact, ...]:
    if highlight is None:
        return ()
    out = [RenderArtifact(kind="label", role="highlight_label", space="viewport", geometry=highlight)]
    if highlight.line is not None:
        out.append(RenderArtifact(kind="line", role="highlight_line", space="data_area", geometry=highlight.line))
    return tuple(out)
