from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class AxesError(ValueError):
    """Base class for errors reported by the axes layout.

    These describe inputs the caller can fix (an inverted range, a canvas that
    is too small) rather than internal failures.
    """

    code: str = "axes_error"

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidRangeError(AxesError):
    """Raised when the maximum of a value range is below its minimum."""

    code = "invalid_range"


class InvalidPointCountError(AxesError):
    """Raised when the X axis is asked to lay out a negative number of points."""

    code = "invalid_point_count"


class CanvasTooSmallError(AxesError):
    code = "canvas_too_small"

    def __init__(self, message: str, *, required: int, available: int) -> None:
        super().__init__(message, details={"required": required, "available": available})
        self.required = required
        self.available = available


class SeriesDataError(AxesError):
    code = "series_data"


class InvalidCellsError(CanvasTooSmallError):
    """Raised when a scale is built over fewer than one cell."""

    code = "invalid_cells"
