from linechart.artifacts import RenderArtifact, RenderPlan
from linechart.config import ChartConfig, validate_chart_config
from linechart.engine import LineChartEngine
from linechart.errors import ChartDataError
from linechart.interaction import Highlight, PointerEvent, parse_pointer_event
from linechart.scales import Domain, Point
from linechart.series import DataItem

__all__ = [
    "ChartConfig",
    "ChartDataError",
    "DataItem",
    "Domain",
    "Highlight",
    "LineChartEngine",
    "Point",
    "PointerEvent",
    "RenderArtifact",
    "RenderPlan",
    "parse_pointer_event",
    "validate_chart_config",
]
