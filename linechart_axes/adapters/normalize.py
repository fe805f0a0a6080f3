from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

import math

import numpy as np

from linechart_axes.errors import SeriesDataError


try:
    import pandas as pd
except ImportError:
    pd = None  # type: ignore[assignment]

try:
    import torch
except ImportError:
    torch = None  # type: ignore[assignment]


@dataclass(frozen=True)
class SeriesLimits:
    min: float
    max: float
    num_points: int


EMPTY_RANGE = (0.0, 0.0)


def series_limits(values: Any) -> SeriesLimits:
    """Returns the value range and point count of one series.

    Non-finite points count towards num_points but not towards the range. A
    series without finite points has the range (0, 0).
    """
    if torch is not None and isinstance(values, torch.Tensor):
        return _tensor_limits(values)

    if pd is not None and isinstance(values, pd.Series):
        if pd.api.types.is_numeric_dtype(values):
            return _array_limits(values.to_numpy(dtype=np.float64, na_value=np.nan))
        return _scan_limits(values.tolist())

    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise SeriesDataError(f"series must be 1-D, got shape {values.shape}")
        if values.dtype.kind in "iufb":
            return _array_limits(values.astype(np.float64, copy=False))
        return _scan_limits(values.tolist())

    if isinstance(values, Sequence) and not isinstance(values, (str, bytes, bytearray)):
        return _scan_limits(values)

    raise SeriesDataError(f"unsupported series input type: {type(values)!r}")


def _tensor_limits(tensor: Any) -> SeriesLimits:
    if tensor.ndim != 1:
        raise SeriesDataError(f"series must be 1-D, got shape {tuple(tensor.shape)}")
    tensor = tensor.detach().to(torch.float64)
    finite = tensor[torch.isfinite(tensor)]
    count = int(tensor.numel())
    if finite.numel() == 0:
        return SeriesLimits(*EMPTY_RANGE, num_points=count)
    return SeriesLimits(float(finite.min().item()), float(finite.max().item()), num_points=count)


def _array_limits(arr: np.ndarray) -> SeriesLimits:
    finite = arr[np.isfinite(arr)]
    if finite.size == 0:
        return SeriesLimits(*EMPTY_RANGE, num_points=int(arr.size))
    return SeriesLimits(float(finite.min()), float(finite.max()), num_points=int(arr.size))


def _scan_limits(items: Iterable[Any]) -> SeriesLimits:
    """Reduces loose Python values in one pass, None marks a missing point."""
    lo, hi = math.inf, -math.inf
    count = 0
    for index, item in enumerate(items):
        count += 1
        v = _point_value(item, index)
        if math.isfinite(v):
            lo = min(lo, v)
            hi = max(hi, v)
    if lo > hi:
        return SeriesLimits(*EMPTY_RANGE, num_points=count)
    return SeriesLimits(lo, hi, num_points=count)


def _point_value(item: Any, index: int) -> float:
    if item is None or (pd is not None and item is pd.NA):
        return math.nan
    if isinstance(item, (str, bytes, bytearray)):
        raise SeriesDataError(f"series contains non-numeric value at index {index}: {item!r}")
    if isinstance(item, (Sequence, np.ndarray)):
        raise SeriesDataError(f"series must be 1-D, index {index} holds {type(item).__name__}")
    try:
        return float(item)
    except (TypeError, ValueError) as exc:
        raise SeriesDataError(f"series contains non-numeric value at index {index}: {item!r}") from exc
