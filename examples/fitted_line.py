from __future__ import annotations

import math

from pgfplots import (
    Axis,
    AxisKey,
    Engine,
    ErrorCharacter,
    ErrorDirection,
    Picture,
    Plot2D,
    PlotKey,
    Type2D,
)


def build_picture() -> Picture:
    line = Plot2D(coordinates=[(float(i), 2.0 * math.pi * i) for i in range(11)])
    line.add_key(PlotKey.custom("dashed"))

    points = Plot2D(
        coordinates=[
            (1.0, 8.0, 0.2, 0.9),
            (3.0, 16.0, 0.4, 1.4),
            (5.0, 33.0, 0.2, 3.4),
            (7.0, 41.0, 0.2, 3.4),
            (9.0, 58.0, 0.5, 1.4),
        ]
    )
    points.add_key(PlotKey.type_2d(Type2D.only_marks()))
    points.add_key(PlotKey.x_error(ErrorCharacter.ABSOLUTE))
    points.add_key(PlotKey.x_error_direction(ErrorDirection.BOTH))
    points.add_key(PlotKey.y_error(ErrorCharacter.ABSOLUTE))
    points.add_key(PlotKey.y_error_direction(ErrorDirection.BOTH))
    points.add_key(PlotKey.custom("mark size=1pt"))

    axis = Axis(plots=[line, points])
    axis.set_title("Slope is $2\\pi$")
    axis.set_x_label("Radius~[m]")
    axis.set_y_label("Circumference~[m]")
    axis.add_key(AxisKey.custom("legend entries={fit,data}"))
    axis.add_key(AxisKey.custom("legend pos=north west"))
    return Picture.from_axis(axis)


if __name__ == "__main__":
    build_picture().show_pdf(Engine.PDFLATEX)
