from linechart_axes.axes import (
    LabelOrientation,
    Label,
    XDetails,
    YDetails,
    YProperties,
    new_x_details,
    new_y_details,
    required_height,
    required_width,
)
from linechart_axes.errors import (
    AxesError,
    CanvasTooSmallError,
    InvalidCellsError,
    InvalidPointCountError,
    InvalidRangeError,
    SeriesDataError,
)
from linechart_axes.geometry import Point, Rect
from linechart_axes.layout import AxesLayout, layout_axes, layout_for_series, minimum_size
from linechart_axes.scales import XScale, YScale, YScaleMode, new_x_scale, new_y_scale
from linechart_axes.value import Value, new_text_value, new_value

__all__ = [
    "AxesError",
    "AxesLayout",
    "CanvasTooSmallError",
    "InvalidCellsError",
    "InvalidPointCountError",
    "InvalidRangeError",
    "Label",
    "LabelOrientation",
    "Point",
    "Rect",
    "SeriesDataError",
    "Value",
    "XDetails",
    "XScale",
    "YDetails",
    "YProperties",
    "YScale",
    "YScaleMode",
    "layout_axes",
    "layout_for_series",
    "minimum_size",
    "new_text_value",
    "new_value",
    "new_x_details",
    "new_x_scale",
    "new_y_details",
    "new_y_scale",
    "required_height",
    "required_width",
]
