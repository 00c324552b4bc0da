from __future__ import annotations

import importlib.util
from pathlib import Path
import unittest

from pgfplots import Axis, Picture


EXAMPLES_DIR = Path(__file__).resolve().parents[1] / "examples"


def _load_example(name: str):
    spec = importlib.util.spec_from_file_location(f"pgfplots_example_{name}", EXAMPLES_DIR / f"{name}.py")
    assert spec is not None
    mod = importlib.util.module_from_spec(spec)
    assert spec.loader is not None
    spec.loader.exec_module(mod)
    return mod


class ExampleTests(unittest.TestCase):
    def test_fitted_line_renders_error_bars(self) -> None:
        picture = _load_example("fitted_line").build_picture()
        self.assertIsInstance(picture, Picture)
        text = picture.standalone_string()
        self.assertIn("\ttitle={Slope is $2\\pi$},\n", text)
        self.assertIn("\t\t(1,8)\t+- (0.2,0.9)\n", text)
        self.assertIn("\t\terror bars/y dir=both,\n", text)
        self.assertTrue(text.endswith("\\end{tikzpicture}\n\\end{document}"))

    def test_rectangle_integration_orders_plots(self) -> None:
        axis = _load_example("rectangle_integration").build_axis()
        self.assertIsInstance(axis, Axis)
        self.assertEqual(len(axis.plots), 2)
        self.assertEqual(len(axis.plots[0].coordinates), 11)
        self.assertEqual(len(axis.plots[1].coordinates), 101)
        self.assertIn("\t\t(100,10000)\n", axis.render())

    def test_snowflake_closes_polygon(self) -> None:
        axis = _load_example("snowflake").build_axis(iterations=1)
        coordinates = axis.plots[0].coordinates
        self.assertEqual(len(coordinates), 13)
        self.assertEqual(coordinates[0], coordinates[-1])
        self.assertTrue(axis.render().startswith("\\begin{axis}[\n\ttitle={Koch Snowflake},\n\thide axis,\n]\n"))


if __name__ == "__main__":
    unittest.main()
