from __future__ import annotations

from decimal import Decimal
import importlib.util
import unittest

import numpy as np

from linechart_axes.adapters.normalize import SeriesLimits, series_limits
from linechart_axes.errors import SeriesDataError


HAS_TORCH = importlib.util.find_spec("torch") is not None
HAS_PANDAS = importlib.util.find_spec("pandas") is not None


class SeriesLimitsTests(unittest.TestCase):
    def test_list_input(self) -> None:
        self.assertEqual(series_limits([3, -1, 2]), SeriesLimits(min=-1.0, max=3.0, num_points=3))

    def test_empty_series(self) -> None:
        self.assertEqual(series_limits([]), SeriesLimits(min=0.0, max=0.0, num_points=0))

    def test_non_finite_points_are_counted_but_not_ranged(self) -> None:
        got = series_limits([None, 1.5, float("nan"), Decimal("2.5")])
        self.assertEqual(got, SeriesLimits(min=1.5, max=2.5, num_points=4))

    def test_all_non_finite(self) -> None:
        self.assertEqual(series_limits(np.asarray([np.nan, np.inf])), SeriesLimits(0.0, 0.0, 2))

    def test_rejects_text_and_nested_input(self) -> None:
        with self.assertRaises(SeriesDataError):
            series_limits(["1", 2])
        with self.assertRaises(SeriesDataError):
            series_limits("123")
        with self.assertRaises(SeriesDataError):
            series_limits(np.zeros((2, 2)))
        with self.assertRaises(SeriesDataError):
            series_limits([[1, 2], [3, 4]])

    def test_integer_arrays_give_float_limits(self) -> None:
        got = series_limits(np.arange(4))
        self.assertEqual(got, SeriesLimits(min=0.0, max=3.0, num_points=4))
        self.assertIsInstance(got.max, float)

    def test_object_array_is_scanned_item_by_item(self) -> None:
        arr = np.asarray([None, Decimal("-2"), 7], dtype=object)
        self.assertEqual(series_limits(arr), SeriesLimits(min=-2.0, max=7.0, num_points=3))
        with self.assertRaises(SeriesDataError):
            series_limits(np.asarray([1, "x"], dtype=object))

    def test_tuple_input(self) -> None:
        self.assertEqual(series_limits((4, float("inf"), 1)), SeriesLimits(min=1.0, max=4.0, num_points=3))

    @unittest.skipUnless(HAS_TORCH, "torch is not installed")
    def test_torch_tensor_input(self) -> None:
        import torch

        got = series_limits(torch.tensor([0.5, 4.0, -1.0]))
        self.assertEqual(got, SeriesLimits(min=-1.0, max=4.0, num_points=3))
        with self.assertRaises(SeriesDataError):
            series_limits(torch.zeros((2, 2)))
        with_nan = series_limits(torch.tensor([float("nan"), 2.0, 3.0]))
        self.assertEqual(with_nan, SeriesLimits(min=2.0, max=3.0, num_points=3))

    @unittest.skipUnless(HAS_PANDAS, "pandas is not installed")
    def test_pandas_series_input(self) -> None:
        import pandas as pd

        got = series_limits(pd.Series([2, 8, 5]))
        self.assertEqual(got, SeriesLimits(min=2.0, max=8.0, num_points=3))
        nullable = series_limits(pd.Series([1, None, 3], dtype="Int64"))
        self.assertEqual(nullable, SeriesLimits(min=1.0, max=3.0, num_points=3))
        mixed = series_limits(pd.Series([1.5, None, Decimal("4")], dtype=object))
        self.assertEqual(mixed, SeriesLimits(min=1.5, max=4.0, num_points=3))


if __name__ == "__main__":
    unittest.main()
