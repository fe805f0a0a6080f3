from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from linechart_axes.errors import InvalidCellsError, InvalidPointCountError, InvalidRangeError
from linechart_axes.value import Value, ValueFormatter, new_value, round_half_away


# Braille characters pack 2x4 dots into one cell, scales work on these dots.
ROW_MULT = 4
COL_MULT = 2


class YScaleMode(Enum):
    # The axis always includes zero, values are drawn relative to it.
    ANCHORED = "anchored"
    # The axis spans exactly the data range.
    ADAPTIVE = "adaptive"


@dataclass(frozen=True)
class YScale:
    """Scale of the Y axis.

    Pixels are braille dots, graph_height cells tall. Pixel and cell Y
    coordinates grow down, so the minimum sits on the last row.
    """

    min: Value
    max: Value
    step: Value
    graph_height: int
    braille_height: int
    mode: YScaleMode

    def pixel_to_value(self, y: int) -> float:
        pos = _y_to_position(y, self.braille_height)
        if pos == 0:
            return self.min.rounded
        if pos == self.braille_height - 1:
            return self.max.rounded
        return self.min.value + pos * self.step.rounded

    def value_to_pixel(self, v: float) -> int:
        if self.step.rounded == 0:
            return self.braille_height - 1
        pos = round_half_away((v - self.min.value) / self.step.rounded)
        pos = max(0, min(self.braille_height - 1, pos))
        return _position_to_y(pos, self.braille_height)

    def value_to_cell(self, v: float) -> int:
        return self.value_to_pixel(v) // ROW_MULT

    def cell_to_value(self, y: int) -> float:
        pos = _y_to_position(y, self.graph_height)
        return self.pixel_to_value(_position_to_y(pos * ROW_MULT, self.braille_height))

    def cell_label(self, y: int) -> Value:
        """Returns the value of the label placed next to row y."""
        return new_value(self.cell_to_value(y), self.min.non_zero_decimals, self.min.formatter)

    def map_values(self, values: Any) -> np.ndarray:
        """Maps a series to pixel Y coordinates, clipped to the graph."""
        arr = np.asarray(values, dtype=np.float64)
        if self.step.rounded == 0:
            return np.full(arr.shape, self.braille_height - 1, dtype=np.int32)
        pos = _round_half_away_array((arr - self.min.value) / self.step.rounded)
        np.clip(pos, 0, self.braille_height - 1, out=pos)
        return (self.braille_height - 1 - pos).astype(np.int32)

    def __str__(self) -> str:
        return f"YScale{{min:{self.min}, max:{self.max}, step:{self.step}, height:{self.graph_height}, mode:{self.mode.value}}}"


def new_y_scale(
    min_value: float,
    max_value: float,
    graph_height: int,
    non_zero_decimals: int,
    mode: YScaleMode = YScaleMode.ANCHORED,
    value_formatter: ValueFormatter | None = None,
) -> YScale:
    if max_value < min_value:
        raise InvalidRangeError(f"max({max_value}) cannot be less than min({min_value})")
    if graph_height < 1:
        raise InvalidCellsError(
            f"graph_height cannot be less than 1, got {graph_height}",
            required=1,
            available=graph_height,
        )
    if not isinstance(mode, YScaleMode):
        raise ValueError(f"unsupported mode: {mode!r}")

    braille_height = graph_height * ROW_MULT
    usable_pixels = braille_height - 1  # one pixel is the zero value

    if mode is YScaleMode.ANCHORED:
        min_value = min(min_value, 0.0)
        max_value = max(max_value, 0.0)
    elif min_value == max_value:
        # A flat adaptive range has no span, fall back to the zero anchor.
        if min_value > 0:
            min_value = 0.0
        else:
            max_value = 0.0

    diff = max_value - min_value
    step = new_value(diff / usable_pixels, non_zero_decimals)
    return YScale(
        min=new_value(min_value, non_zero_decimals, value_formatter),
        max=new_value(max_value, non_zero_decimals, value_formatter),
        step=step,
        graph_height=graph_height,
        braille_height=braille_height,
        mode=mode,
    )


@dataclass(frozen=True)
class XScale:
    """Scale of the X axis, mapping point indexes onto braille dot columns."""

    min: Value
    max: Value
    step: Value
    graph_width: int
    braille_width: int

    def pixel_to_value(self, x: int) -> float:
        if x < 0 or x >= self.braille_width:
            raise ValueError(f"invalid x coordinate {x}, must be in range 0 <= x < {self.braille_width}")
        if x == 0:
            return self.min.rounded
        if x == self.braille_width - 1:
            return self.max.rounded
        return x * self.step.rounded

    def value_to_pixel(self, v: float) -> int:
        if self.step.rounded == 0:
            return 0
        px = round_half_away(v / self.step.rounded)
        return max(0, min(self.braille_width - 1, px))

    def value_to_cell(self, v: float) -> int:
        return self.value_to_pixel(v) // COL_MULT

    def cell_to_value(self, x: int) -> float:
        if x < 0 or x >= self.graph_width:
            raise ValueError(f"invalid cell {x}, must be in range 0 <= x < {self.graph_width}")
        return self.pixel_to_value(x * COL_MULT)

    def cell_label(self, x: int) -> Value:
        """Returns the point index under column x as a label value."""
        return new_value(round_half_away(self.cell_to_value(x)), self.min.non_zero_decimals)

    def map_values(self, indexes: Any) -> np.ndarray:
        """Maps point indexes to pixel X coordinates, clipped to the graph."""
        arr = np.asarray(indexes, dtype=np.float64)
        if self.step.rounded == 0:
            return np.zeros(arr.shape, dtype=np.int32)
        px = _round_half_away_array(arr / self.step.rounded)
        np.clip(px, 0, self.braille_width - 1, out=px)
        return px.astype(np.int32)

    def __str__(self) -> str:
        return f"XScale{{min:{self.min}, max:{self.max}, step:{self.step}, width:{self.graph_width}}}"


def new_x_scale(num_points: int, graph_width: int, non_zero_decimals: int) -> XScale:
    if num_points < 0:
        raise InvalidPointCountError(f"num_points cannot be negative, got {num_points}")
    if graph_width < 1:
        raise InvalidCellsError(
            f"graph_width must be at least 1, got {graph_width}",
            required=1,
            available=graph_width,
        )

    braille_width = graph_width * COL_MULT
    usable_pixels = braille_width - 1

    min_value = 0.0
    # The last index, never a point that doesn't exist. 0 and 1 points both
    # give the flat domain [0, 0].
    max_value = float(max(num_points - 1, 0))
    step = new_value((max_value - min_value) / usable_pixels, non_zero_decimals)
    return XScale(
        min=new_value(min_value, non_zero_decimals),
        max=new_value(max_value, non_zero_decimals),
        step=step,
        graph_width=graph_width,
        braille_width=braille_width,
    )


def _position_to_y(pos: int, height: int) -> int:
    # Positions grow up, coordinates grow down.
    top = height - 1
    if pos < 0 or pos > top:
        raise ValueError(f"position {pos} out of bounds 0 <= pos <= {top}")
    return top - pos


def _y_to_position(y: int, height: int) -> int:
    top = height - 1
    if y < 0 or y > top:
        raise ValueError(f"y coordinate {y} out of bounds 0 <= y <= {top}")
    return top - y


def _round_half_away_array(arr: np.ndarray) -> np.ndarray:
    return np.copysign(np.floor(np.abs(arr) + 0.5), arr)
