from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

import logging

from linechart_axes.errors import CanvasTooSmallError, InvalidPointCountError, InvalidRangeError
from linechart_axes.geometry import Point, Rect, align_right
from linechart_axes.scales import XScale, YScale, YScaleMode, new_x_scale, new_y_scale
from linechart_axes.value import NON_ZERO_DECIMALS, Value, ValueFormatter, new_text_value, new_value


LOGGER = logging.getLogger(__name__)

# Cells taken by the axis line itself.
AXIS_WIDTH = 1

# Rows between two Y labels, counted from the bottom row.
Y_LABEL_SPACING = 4

# Minimum columns between the starts of two consecutive X labels.
X_LABEL_MIN_SPACING = 3


class LabelOrientation(Enum):
    # Label characters run along one row.
    HORIZONTAL = "horizontal"
    # Label characters run down one column, one character per row.
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Label:
    value: Value
    pos: Point


@dataclass(frozen=True)
class YProperties:
    """Inputs of the Y axis layout.

    req_x_height is the height the X axis reserved below the graph, as
    reported by required_height().
    """

    min: float
    max: float
    req_x_height: int
    scale_mode: YScaleMode = YScaleMode.ANCHORED
    value_formatter: ValueFormatter | None = None

    def __post_init__(self) -> None:
        if self.req_x_height < 0:
            raise ValueError("req_x_height must be >= 0")
        if not isinstance(self.scale_mode, YScaleMode):
            raise ValueError(f"unsupported scale_mode: {self.scale_mode!r}")


@dataclass(frozen=True)
class YDetails:
    """Geometry of the Y axis.

    The line runs from start (top row) down to end, the row where it meets the
    X axis, in column width - 1. Labels occupy the columns left of it.
    """

    width: int
    start: Point
    end: Point
    scale: YScale
    labels: tuple[Label, ...]


@dataclass(frozen=True)
class XDetails:
    start: Point
    end: Point
    scale: XScale
    labels: tuple[Label, ...]


def required_width(
    min_value: float,
    max_value: float,
    value_formatter: ValueFormatter | None = None,
) -> int:
    """Returns the width the Y axis and its labels need at the minimum.

    Labels are measured as value_formatter renders them when one is given.
    """
    values = [new_value(v, NON_ZERO_DECIMALS, value_formatter) for v in (min_value, max_value)]
    return _longest(values) + AXIS_WIDTH


def required_height(
    num_points: int,
    custom_labels: Mapping[int, str] | None = None,
    orientation: LabelOrientation = LabelOrientation.HORIZONTAL,
) -> int:
    """Returns the height the X axis and its labels need at the minimum."""
    if orientation is LabelOrientation.HORIZONTAL:
        # One row for the axis, one for the labels.
        return AXIS_WIDTH + 1

    # No generated index label is longer than the point count itself.
    values = [new_value(num_points, NON_ZERO_DECIMALS)]
    values.extend(new_text_value(text) for text in (custom_labels or {}).values())
    return _longest(values) + AXIS_WIDTH


def new_y_details(canvas: Rect, props: YProperties) -> YDetails:
    """Lays out the Y axis on the canvas.

    Raises InvalidRangeError when props.max < props.min and
    CanvasTooSmallError when the canvas cannot hold the axis and at least one
    column and row of the graph.
    """
    if props.max < props.min:
        raise InvalidRangeError(
            f"max({props.max}) cannot be less than min({props.min})",
            details={"min": props.min, "max": props.max},
        )

    max_width = canvas.width - 1  # the graph needs at least one column
    req = required_width(props.min, props.max, props.value_formatter)
    if max_width < req:
        LOGGER.debug("Y axis rejected canvas %s, needs width %d", canvas, req + 1)
        raise CanvasTooSmallError(
            f"the available width {max_width} is smaller than the required width {req}",
            required=req,
            available=max_width,
        )

    graph_height = canvas.height - props.req_x_height
    if graph_height < 1:
        LOGGER.debug("Y axis rejected canvas %s, needs height %d", canvas, props.req_x_height + 1)
        raise CanvasTooSmallError(
            f"the canvas height {canvas.height} leaves no rows above the X axis reservation of {props.req_x_height}",
            required=props.req_x_height + 1,
            available=canvas.height,
        )

    scale = new_y_scale(
        props.min,
        props.max,
        graph_height,
        NON_ZERO_DECIMALS,
        props.scale_mode,
        props.value_formatter,
    )

    # Lay the labels out on all the width available first, then shrink the
    # axis to the longest label when it needs less, never below req.
    max_label_width = max_width - AXIS_WIDTH
    labels = _y_labels(scale, max_label_width)
    longest = _longest(label.value for label in labels)
    if longest < max_label_width:
        label_width = max(longest, req - AXIS_WIDTH)
        width = label_width + AXIS_WIDTH
        labels = _y_labels(scale, label_width)
    else:
        width = max_width

    details = YDetails(
        width=width,
        start=Point(width - 1, 0),
        end=Point(width - 1, graph_height),
        scale=scale,
        labels=tuple(labels),
    )
    LOGGER.debug("Y axis on %s: width=%d %s labels=%d", canvas, width, scale, len(labels))
    return details


def new_x_details(
    num_points: int,
    y_start: Point,
    canvas: Rect,
    custom_labels: Mapping[int, str] | None = None,
    orientation: LabelOrientation = LabelOrientation.HORIZONTAL,
) -> XDetails:
    """Lays out the X axis on the canvas, starting in the column of the Y axis.

    custom_labels maps point indexes to text that replaces the generated
    index label.
    """
    if num_points < 0:
        raise InvalidPointCountError(
            f"num_points cannot be negative, got {num_points}",
            details={"num_points": num_points},
        )

    graph_width = canvas.width - y_start.x - 1
    if graph_width < 1:
        LOGGER.debug("X axis rejected canvas %s, starts at column %d", canvas, y_start.x)
        raise CanvasTooSmallError(
            f"the canvas width {canvas.width} leaves no columns right of the Y axis at {y_start.x}",
            required=y_start.x + 2,
            available=canvas.width,
        )

    max_height = canvas.height - 1  # the graph needs at least one row
    req = required_height(num_points, custom_labels, orientation)
    if max_height < req:
        LOGGER.debug("X axis rejected canvas %s, needs height %d", canvas, req + 1)
        raise CanvasTooSmallError(
            f"the available height {max_height} is smaller than the required height {req}",
            required=req,
            available=max_height,
        )

    scale = new_x_scale(num_points, graph_width, NON_ZERO_DECIMALS)
    axis_row = canvas.height - req
    # The first plot column is right of the Y axis line, labels go one row
    # below the X axis line.
    space = _XSpace(start=y_start.x + 1, width=graph_width, row=axis_row + 1)
    labels = _x_labels(scale, space, custom_labels or {}, orientation)

    details = XDetails(
        start=Point(y_start.x, axis_row),
        end=Point(y_start.x + graph_width, axis_row),
        scale=scale,
        labels=tuple(labels),
    )
    LOGGER.debug("X axis on %s: row=%d %s labels=%d", canvas, axis_row, scale, len(labels))
    return details


def _longest(values: Iterable[Value]) -> int:
    return max((len(v.text()) for v in values), default=0)


def _y_labels(scale: YScale, label_width: int) -> list[Label]:
    """Returns labels for the rows of the scale, bottom row first."""
    if scale.graph_height == 1:
        # One row covers the whole range, show the bound away from zero.
        value = scale.max if scale.max.rounded != 0 else scale.min
        return [_row_label(scale, 0, label_width, value)]

    seen: set[str] = set()
    labels: list[Label] = []
    for y in range(scale.graph_height - 1, -1, -Y_LABEL_SPACING):
        label = _row_label(scale, y, label_width)
        if label.value.text() not in seen:
            seen.add(label.value.text())
            labels.append(label)

    # With data on the axis place at least two labels, the first and the last.
    have_data = scale.min.rounded != 0 or scale.max.rounded != 0
    if len(labels) < 2 and have_data:
        labels.append(_row_label(scale, 0, label_width))
    return labels


def _row_label(scale: YScale, y: int, label_width: int, value: Value | None = None) -> Label:
    if value is None:
        value = scale.cell_label(y)
    pos = align_right(Rect(0, y, label_width, y + 1), value.text())
    return Label(value=value, pos=pos)


class _XSpace:
    """The columns under the X axis that are still free for labels."""

    def __init__(self, start: int, width: int, row: int) -> None:
        self._min = start
        self._max = start + width
        self._cur = start
        self.row = row

    def __repr__(self) -> str:
        return f"_XSpace(remaining:{self.remaining}, cur:{self._cur}, min:{self._min}, max:{self._max})"

    @property
    def remaining(self) -> int:
        return self._max - self._cur

    @property
    def relative(self) -> int:
        """The current column counted from the first plot column."""
        return self._cur - self._min

    @property
    def label_pos(self) -> Point:
        return Point(self._cur, self.row)

    def sub(self, size: int) -> None:
        if self.remaining < size:
            raise ValueError(f"unable to take {size} columns, not enough space in {self!r}")
        self._cur += size


def _x_labels(
    scale: XScale,
    space: _XSpace,
    custom_labels: Mapping[int, str],
    orientation: LabelOrientation,
) -> list[Label]:
    """Returns labels under the X axis in increasing column order.

    Labels are never trimmed, their count is reduced until they fit.
    """
    labels: list[Label] = []
    last_index = int(scale.max.value)
    while True:
        placed = _col_label(scale, space, custom_labels, orientation)
        if placed is None:
            break
        label, index = placed
        labels.append(label)

        next_index = index + 1
        if next_index > last_index:
            break
        skip = max(scale.value_to_cell(next_index) - space.relative, X_LABEL_MIN_SPACING)
        if space.remaining <= skip:
            break
        space.sub(skip)
    return labels


def _col_label(
    scale: XScale,
    space: _XSpace,
    custom_labels: Mapping[int, str],
    orientation: LabelOrientation,
) -> tuple[Label, int] | None:
    """Places one label at the current column of the space.

    Returns the label and the point index it stands for, or None when the
    label doesn't fit into the remaining space.
    """
    value = scale.cell_label(space.relative)
    index = int(value.value)
    if index in custom_labels:
        value = new_text_value(custom_labels[index])

    if orientation is LabelOrientation.HORIZONTAL:
        label_len = len(value.text())
    else:
        label_len = 1
    if label_len > space.remaining:
        return None

    pos = space.label_pos
    space.sub(label_len)
    return Label(value=value, pos=pos), index
