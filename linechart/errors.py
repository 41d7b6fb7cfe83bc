from __future__ import annotations


class ChartDataError(ValueError):
    """Raised when a series or viewport cannot produce chart geometry."""
