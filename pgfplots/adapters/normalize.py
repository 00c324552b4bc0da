from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from pgfplots.coordinate import Coordinate2D
from pgfplots.errors import PlotDataError
from pgfplots.plot import Plot2D


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def coordinates_from_xy(
    y: Any = None,
    *,
    x: Any = None,
    error_x: Any = None,
    error_y: Any = None,
    data: Any = None,
) -> list[Coordinate2D]:
    """Build coordinates from array-likes (sequences, numpy, pandas, torch).

    ``x`` defaults to ``0..n-1``. Column names may be given for every argument
    when ``data`` is a DataFrame. Points whose ``x`` or ``y`` is not finite are
    dropped; non-finite error values are treated as unset.
    """
    y_values = _resolve_input(y, key="y", data=data)
    if y_values is None:
        raise PlotDataError("y input is required")

    y_arr = _coerce_1d_numeric(y_values, label="y")
    if y_arr.size == 0:
        raise PlotDataError("empty series")

    if x is None:
        x_arr = np.arange(y_arr.size, dtype=np.float64)
    else:
        x_arr = _coerce_1d_numeric(_resolve_input(x, key="x", data=data), label="x")
    ex_arr = _optional_errors(error_x, label="error_x", data=data, size=y_arr.size)
    ey_arr = _optional_errors(error_y, label="error_y", data=data, size=y_arr.size)

    if x_arr.shape != y_arr.shape:
        raise PlotDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")

    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    if not np.any(mask):
        raise PlotDataError("series contains no finite points")

    coordinates: list[Coordinate2D] = []
    for i in np.flatnonzero(mask).tolist():
        coordinates.append(
            Coordinate2D(
                x=float(x_arr[i]),
                y=float(y_arr[i]),
                error_x=_error_at(ex_arr, i),
                error_y=_error_at(ey_arr, i),
            )
        )
    return coordinates


def plot_from_xy(
    y: Any = None,
    *,
    x: Any = None,
    error_x: Any = None,
    error_y: Any = None,
    data: Any = None,
) -> Plot2D:
    return Plot2D(coordinates=coordinates_from_xy(y, x=x, error_x=error_x, error_y=error_y, data=data))


def _optional_errors(value: Any, *, label: str, data: Any, size: int) -> np.ndarray | None:
    if value is None:
        return None
    arr = _coerce_1d_numeric(_resolve_input(value, key=label, data=data), label=label)
    if arr.size != size:
        raise PlotDataError(f"{label} and y length mismatch: {arr.size} != {size}")
    return arr


def _error_at(arr: np.ndarray | None, index: int) -> float | None:
    if arr is None:
        return None
    value = float(arr[index])
    if not np.isfinite(value):
        return None
    return value


def _resolve_input(value: Any, key: str, data: Any) -> Any:
    if data is not None:
        if pd is None:
            raise PlotDataError("pandas is required when using `data=`")
        if not isinstance(data, pd.DataFrame):
            raise PlotDataError("`data` must be a pandas DataFrame")
        if isinstance(value, str):
            if value not in data.columns:
                raise PlotDataError(f"column not found: {value}")
            return data[value]
        if value is None and key == "y":
            numeric_cols = [c for c in data.columns if _is_numeric_dtype(data[c])]
            if len(numeric_cols) != 1:
                raise PlotDataError("when y is omitted, data must have exactly one numeric column")
            return data[numeric_cols[0]]
        return value

    if pd is not None and isinstance(value, pd.DataFrame):
        numeric_cols = [c for c in value.columns if _is_numeric_dtype(value[c])]
        if len(numeric_cols) != 1:
            raise PlotDataError("1-D DataFrame input must contain exactly one numeric column")
        return value[numeric_cols[0]]

    return value


def _is_numeric_dtype(series: Any) -> bool:
    if pd is None:
        return False
    try:
        return bool(pd.api.types.is_numeric_dtype(series))
    except (TypeError, ValueError):
        return False


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(value, dtype=object), label=label)

    raise PlotDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.ndim != 1:
        raise PlotDataError(f"{label} must be 1-D")
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
