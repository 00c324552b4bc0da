from __future__ import annotations

from decimal import Decimal
import importlib.util
import unittest

import numpy as np

from pgfplots import Coordinate2D, PlotDataError, coordinates_from_xy, plot_from_xy


class CoordinateAdapterTests(unittest.TestCase):
    def test_matches_manual_construction(self) -> None:
        coords = coordinates_from_xy([0.0, 1.0, 4.0], x=[0, 1, 2])
        self.assertEqual(coords, [Coordinate2D(0.0, 0.0), Coordinate2D(1.0, 1.0), Coordinate2D(2.0, 4.0)])

    def test_x_defaults_to_index(self) -> None:
        coords = coordinates_from_xy(np.asarray([5.0, 6.0]))
        self.assertEqual([(c.x, c.y) for c in coords], [(0.0, 5.0), (1.0, 6.0)])

    def test_errors_are_attached_and_nan_errors_unset(self) -> None:
        coords = coordinates_from_xy(
            [8.0, 16.0],
            x=[1.0, 3.0],
            error_x=[0.2, np.nan],
            error_y=np.asarray([0.9, 1.4]),
        )
        self.assertEqual(coords[0], Coordinate2D(1.0, 8.0, 0.2, 0.9))
        self.assertEqual(coords[1], Coordinate2D(3.0, 16.0, None, 1.4))
        self.assertEqual(coords[1].render(), "(3,16)\t+- (0,1.4)")

    def test_non_finite_points_are_dropped(self) -> None:
        coords = coordinates_from_xy([1.0, None, Decimal("2.5")], x=[0.0, 1.0, np.inf])
        self.assertEqual(coords, [Coordinate2D(0.0, 1.0)])

    def test_rejects_bad_input(self) -> None:
        with self.assertRaises(PlotDataError):
            coordinates_from_xy(None)
        with self.assertRaises(PlotDataError):
            coordinates_from_xy([])
        with self.assertRaises(PlotDataError):
            coordinates_from_xy([1.0, 2.0], x=[1.0])
        with self.assertRaises(PlotDataError):
            coordinates_from_xy([1.0, 2.0], error_y=[1.0])
        with self.assertRaises(PlotDataError):
            coordinates_from_xy(np.zeros((2, 2)))
        with self.assertRaises(PlotDataError):
            coordinates_from_xy(["a", "b"])
        with self.assertRaises(PlotDataError):
            coordinates_from_xy([np.nan, np.nan])

    def test_plot_from_xy_renders_coordinates(self) -> None:
        plot = plot_from_xy([1.0, 4.0], x=[1.0, 2.0])
        self.assertEqual(plot.render(), "\t\\addplot[] coordinates {\n\t\t(1,1)\n\t\t(2,4)\n\t};")

    @unittest.skipUnless(importlib.util.find_spec("pandas") is not None, "pandas not installed")
    def test_dataframe_columns(self) -> None:
        import pandas as pd

        frame = pd.DataFrame({"r": [1.0, 2.0], "c": [6.0, 12.5], "err": [0.1, 0.2]})
        coords = coordinates_from_xy("c", x="r", error_y="err", data=frame)
        self.assertEqual(coords, [Coordinate2D(1.0, 6.0, None, 0.1), Coordinate2D(2.0, 12.5, None, 0.2)])
        with self.assertRaises(PlotDataError):
            coordinates_from_xy("missing", data=frame)

    @unittest.skipUnless(importlib.util.find_spec("torch") is not None, "torch not installed")
    def test_torch_tensor_input(self) -> None:
        import torch

        coords = coordinates_from_xy(torch.tensor([1.0, 2.0]))
        self.assertEqual(coords, [Coordinate2D(0.0, 1.0), Coordinate2D(1.0, 2.0)])


if __name__ == "__main__":
    unittest.main()
