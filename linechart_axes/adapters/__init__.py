from .normalize import SeriesLimits, series_limits

__all__ = [
    "SeriesLimits",
    "series_limits",
]
