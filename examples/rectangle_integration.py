from __future__ import annotations

import numpy as np

from pgfplots import Axis, AxisKey, PlotKey, plot_from_xy


def build_axis() -> Axis:
    x = np.arange(0, 101, dtype=np.float64)
    line = plot_from_xy(x * x, x=x)

    steps = x[::10]
    rectangles = plot_from_xy(steps * steps, x=steps)
    rectangles.add_key(PlotKey.custom("ybar, bar width=19.5"))
    rectangles.add_key(PlotKey.custom("fill=gray!20"))
    rectangles.add_key(PlotKey.custom("draw opacity=0.5"))

    axis = Axis(plots=[rectangles, line])
    axis.set_title("Rectangle Integration")
    axis.set_x_label("$x$")
    axis.set_y_label("$y = x^2$")
    axis.add_key(AxisKey.custom("axis lines=middle"))
    axis.add_key(AxisKey.custom("xlabel near ticks"))
    axis.add_key(AxisKey.custom("ylabel near ticks"))
    return axis


if __name__ == "__main__":
    build_axis().show_pdf()
