from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class DataItem:
    """One category-axis entry. Ordering and equality compare `value` only."""

    value: int
    label: str = field(default="", compare=False)
