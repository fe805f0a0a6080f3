from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import logging

from linechart_axes.adapters import series_limits
from linechart_axes.axes import (
    LabelOrientation,
    XDetails,
    YDetails,
    YProperties,
    new_x_details,
    new_y_details,
    required_height,
    required_width,
)
from linechart_axes.geometry import Rect
from linechart_axes.scales import YScaleMode
from linechart_axes.value import ValueFormatter


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AxesLayout:
    x: XDetails
    y: YDetails

    def plot_area(self) -> Rect:
        """Returns the cells right of the Y axis line and above the X axis line."""
        return Rect(self.y.start.x + 1, self.y.start.y, self.x.end.x + 1, self.x.start.y)


def minimum_size(
    y_min: float,
    y_max: float,
    num_points: int,
    custom_labels: Mapping[int, str] | None = None,
    orientation: LabelOrientation = LabelOrientation.HORIZONTAL,
    value_formatter: ValueFormatter | None = None,
) -> tuple[int, int]:
    """Returns the smallest (width, height) canvas both axes can be laid out on."""
    # One extra column and row for the graph itself.
    width = required_width(y_min, y_max, value_formatter) + 1
    height = required_height(num_points, custom_labels, orientation) + 1
    return (width, height)


def layout_axes(
    canvas: Rect,
    *,
    y_min: float,
    y_max: float,
    num_points: int,
    custom_labels: Mapping[int, str] | None = None,
    orientation: LabelOrientation = LabelOrientation.HORIZONTAL,
    scale_mode: YScaleMode = YScaleMode.ANCHORED,
    value_formatter: ValueFormatter | None = None,
) -> AxesLayout:
    """Lays out both axes on the canvas.

    The X axis reports its height first, the Y axis is laid out above that
    reservation and the X axis then starts in the column of the Y axis line.
    """
    req_x_height = required_height(num_points, custom_labels, orientation)
    props = YProperties(
        min=y_min,
        max=y_max,
        req_x_height=req_x_height,
        scale_mode=scale_mode,
        value_formatter=value_formatter,
    )
    y = new_y_details(canvas, props)
    x = new_x_details(num_points, y.start, canvas, custom_labels, orientation)
    LOGGER.debug("axes meet at (%d, %d)", y.end.x, x.start.y)
    return AxesLayout(x=x, y=y)


def layout_for_series(canvas: Rect, values: Any, **options: Any) -> AxesLayout:
    """Lays out both axes for a single series of values.

    Accepts anything series_limits() does; options are passed on to
    layout_axes().
    """
    limits = series_limits(values)
    return layout_axes(
        canvas,
        y_min=limits.min,
        y_max=limits.max,
        num_points=limits.num_points,
        **options,
    )
