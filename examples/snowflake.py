from __future__ import annotations

import math

from pgfplots import Axis, AxisKey, Plot2D, PlotKey


def snowflake_iter(points: list[tuple[float, float]]) -> list[tuple[float, float]]:
    out: list[tuple[float, float]] = []
    for i, start in enumerate(points):
        end = points[(i + 1) % len(points)]
        tx = (end[0] - start[0]) / 3.0
        ty = (end[1] - start[1]) / 3.0
        sx = tx * 0.5 - ty * math.sqrt(0.75)
        sy = ty * 0.5 + math.sqrt(0.75) * tx
        out.append(start)
        out.append((start[0] + tx, start[1] + ty))
        out.append((start[0] + tx + sx, start[1] + ty + sy))
        out.append((start[0] + tx * 2.0, start[1] + ty * 2.0))
    return out


def build_axis(iterations: int = 5) -> Axis:
    vertices = [(0.0, 1.0), (math.sqrt(3.0) / 2.0, -0.5), (-math.sqrt(3.0) / 2.0, -0.5)]
    for _ in range(iterations):
        vertices = snowflake_iter(vertices)
    vertices.append(vertices[0])

    plot = Plot2D(coordinates=vertices)
    plot.add_key(PlotKey.custom("fill=gray!20"))

    axis = Axis.from_plot(plot)
    axis.set_title("Koch Snowflake")
    axis.add_key(AxisKey.custom("hide axis"))
    return axis


if __name__ == "__main__":
    build_axis().show_pdf()
