from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from linechart.errors import ChartDataError
from linechart.series import DataItem


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]


_VALUE_LIMITS = np.iinfo(np.int64)


def normalize_items(data: Any) -> tuple[DataItem, ...]:
    """Coerce host input into an ordered tuple of `DataItem`.

    Accepts `DataItem`s, `(value, label)` pairs, `{"value": ..., "label": ...}`
    mappings, or a pandas DataFrame with `value`/`label` columns. An empty
    input is valid and yields an empty tuple.
    """

    if data is None:
        return ()
    if pd is not None and isinstance(data, pd.DataFrame):
        return _from_dataframe(data)
    if isinstance(data, (str, bytes, bytearray)) or not isinstance(data, Sequence):
        raise ChartDataError(f"unsupported series input type: {type(data)!r}")
    return tuple(_coerce_item(raw, index=i) for i, raw in enumerate(data))


def _from_dataframe(frame: Any) -> tuple[DataItem, ...]:
    if "value" not in frame.columns:
        raise ChartDataError("column not found: value")
    values = frame["value"].to_numpy()
    if "label" in frame.columns:
        labels = [str(v) for v in frame["label"].tolist()]
    else:
        labels = [str(v) for v in frame.index.tolist()]
    return tuple(
        DataItem(value=_coerce_value(raw, index=i), label=labels[i]) for i, raw in enumerate(values.tolist())
    )


def _coerce_item(raw: Any, *, index: int) -> DataItem:
    if isinstance(raw, DataItem):
        _coerce_value(raw.value, index=index)
        return raw
    if isinstance(raw, Mapping):
        if "value" not in raw:
            raise ChartDataError(f"series item at index {index} has no `value`")
        return DataItem(value=_coerce_value(raw["value"], index=index), label=str(raw.get("label", "")))
    if isinstance(raw, (tuple, list)) and len(raw) == 2:
        value, label = raw
        return DataItem(value=_coerce_value(value, index=index), label=str(label))
    raise ChartDataError(f"unsupported series item at index {index}: {raw!r}")


def _coerce_value(raw: Any, *, index: int) -> int:
    if isinstance(raw, bool) or raw is None:
        raise ChartDataError(f"value at index {index} must be an integer: {raw!r}")
    if isinstance(raw, (int, np.integer)):
        return _check_range(int(raw), index=index)
    if isinstance(raw, (float, np.floating, Decimal)):
        as_float = float(raw)
        if not np.isfinite(as_float) or not as_float.is_integer():
            raise ChartDataError(f"value at index {index} must be an integer: {raw!r}")
        return _check_range(int(as_float), index=index)
    raise ChartDataError(f"value at index {index} must be an integer: {raw!r}")


def _check_range(value: int, *, index: int) -> int:
    if not _VALUE_LIMITS.min <= value <= _VALUE_LIMITS.max:
        raise ChartDataError(f"value at index {index} is outside the int64 range: {value}")
    return value
