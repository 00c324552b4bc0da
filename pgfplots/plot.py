from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Literal

from pgfplots.coordinate import Coordinate2D, CoordinateLike, as_coordinate
from pgfplots.formatting import format_number
from pgfplots.marker import Marker
from pgfplots.options import CUSTOM, OptionKey, add_key, render_key_lines

if TYPE_CHECKING:
    from pgfplots.compile.engine import Engine
    from pgfplots.config import CompilerSettings


class ErrorCharacter(str, Enum):
    """Whether error values are absolute or relative to the coordinate."""

    ABSOLUTE = "explicit"
    RELATIVE = "explicit relative"

    def __str__(self) -> str:
        return self.value


class ErrorDirection(str, Enum):
    NONE = "none"
    PLUS = "plus"
    MINUS = "minus"
    BOTH = "both"

    def __str__(self) -> str:
        return self.value


Type2DKind = Literal[
    "sharp_plot",
    "smooth",
    "const_left",
    "const_right",
    "const_mid",
    "jump_left",
    "jump_right",
    "jump_mid",
    "xbar",
    "ybar",
    "xcomb",
    "ycomb",
    "only_marks",
]

_TYPE_2D_TEXT: dict[str, str] = {
    "sharp_plot": "sharp plot",
    "const_left": "const plot mark left",
    "const_right": "const plot mark right",
    "const_mid": "const plot mark mid",
    "jump_left": "jump mark left",
    "jump_right": "jump mark right",
    "jump_mid": "jump mark mid",
    "xcomb": "xcomb",
    "ycomb": "ycomb",
    "only_marks": "only marks",
}


@dataclass(frozen=True)
class Type2D:
    """How the coordinates of a two-dimensional plot are drawn.

    ``smooth`` uses ``tension`` (0.55 is a good start). ``xbar`` and ``ybar``
    use ``bar_width`` and ``bar_shift``, in pt unless the picture sets
    ``compat=1.7`` or higher.
    """

    kind: Type2DKind
    tension: float = 0.0
    bar_width: float = 0.0
    bar_shift: float = 0.0

    def __post_init__(self) -> None:
        if self.kind not in _TYPE_2D_TEXT and self.kind not in ("smooth", "xbar", "ybar"):
            raise ValueError(f"unsupported 2D plot type: {self.kind}")

    @classmethod
    def sharp_plot(cls) -> "Type2D":
        return cls("sharp_plot")

    @classmethod
    def smooth(cls, tension: float) -> "Type2D":
        return cls("smooth", tension=float(tension))

    @classmethod
    def xbar(cls, *, bar_width: float, bar_shift: float = 0.0) -> "Type2D":
        return cls("xbar", bar_width=float(bar_width), bar_shift=float(bar_shift))

    @classmethod
    def ybar(cls, *, bar_width: float, bar_shift: float = 0.0) -> "Type2D":
        return cls("ybar", bar_width=float(bar_width), bar_shift=float(bar_shift))

    @classmethod
    def only_marks(cls) -> "Type2D":
        return cls("only_marks")

    def render(self) -> str:
        if self.kind == "smooth":
            return f"smooth, tension={format_number(self.tension)}"
        if self.kind in ("xbar", "ybar"):
            return (
                f"{self.kind}, bar width={format_number(self.bar_width)}, "
                f"bar shift={format_number(self.bar_shift)}"
            )
        return _TYPE_2D_TEXT[self.kind]

    def __str__(self) -> str:
        return self.render()


PlotKeyKind = Literal[
    "custom",
    "type_2d",
    "x_error",
    "x_error_direction",
    "y_error",
    "y_error_direction",
    "marker",
]


@dataclass(frozen=True)
class PlotKey(OptionKey):
    """PGFPlots option passed to ``\\addplot[...]``.

    Error bars on an axis are only drawn when both its error character and
    its error direction are set.
    """

    kind: PlotKeyKind

    payload_types = {
        CUSTOM: str,
        "type_2d": Type2D,
        "x_error": ErrorCharacter,
        "x_error_direction": ErrorDirection,
        "y_error": ErrorCharacter,
        "y_error_direction": ErrorDirection,
        "marker": Marker,
    }

    @classmethod
    def custom(cls, text: str) -> "PlotKey":
        return cls(CUSTOM, text)

    @classmethod
    def type_2d(cls, value: Type2D) -> "PlotKey":
        return cls("type_2d", value)

    @classmethod
    def x_error(cls, value: ErrorCharacter) -> "PlotKey":
        return cls("x_error", ErrorCharacter(value))

    @classmethod
    def x_error_direction(cls, value: ErrorDirection) -> "PlotKey":
        return cls("x_error_direction", ErrorDirection(value))

    @classmethod
    def y_error(cls, value: ErrorCharacter) -> "PlotKey":
        return cls("y_error", ErrorCharacter(value))

    @classmethod
    def y_error_direction(cls, value: ErrorDirection) -> "PlotKey":
        return cls("y_error_direction", ErrorDirection(value))

    @classmethod
    def marker(cls, value: Marker) -> "PlotKey":
        return cls("marker", value)

    def render(self) -> str:
        if self.kind == "type_2d":
            return self.value.render()
        if self.kind == "x_error":
            return f"error bars/x {self.value}"
        if self.kind == "x_error_direction":
            return f"error bars/x dir={self.value}"
        if self.kind == "y_error":
            return f"error bars/y {self.value}"
        if self.kind == "y_error_direction":
            return f"error bars/y dir={self.value}"
        if self.kind == "marker":
            return self.value.render()
        return super().render()


@dataclass
class Plot2D:
    """Two-dimensional plot inside an axis environment.

    Renders as::

        \\addplot[PlotKeys] coordinates {
            % coordinates
        };
    """

    coordinates: list[Coordinate2D] = field(default_factory=list)
    _keys: list[PlotKey] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.coordinates = [as_coordinate(c) for c in self.coordinates]

    @property
    def keys(self) -> list[PlotKey]:
        return self._keys

    def add_key(self, key: PlotKey) -> None:
        add_key(self._keys, key)

    def add_coordinate(self, coordinate: CoordinateLike) -> None:
        self.coordinates.append(as_coordinate(coordinate))

    def extend_coordinates(self, coordinates: Iterable[CoordinateLike]) -> None:
        self.coordinates.extend(as_coordinate(c) for c in coordinates)

    def render(self) -> str:
        out = "\t\\addplot["
        if self._keys:
            out += "\n" + render_key_lines(self._keys, "\t\t") + "\t"
        out += "] coordinates {\n"
        for coordinate in self.coordinates:
            out += f"\t\t{as_coordinate(coordinate).render()}\n"
        return out + "\t};"

    def __str__(self) -> str:
        return self.render()

    def to_pdf(
        self,
        working_dir: str | Path,
        jobname: str,
        engine: "Engine | None" = None,
        *,
        settings: "CompilerSettings | None" = None,
    ) -> Path:
        from pgfplots.picture import Picture

        return Picture.from_plot(self).to_pdf(working_dir, jobname, engine, settings=settings)

    def show_pdf(self, engine: "Engine | None" = None, *, settings: "CompilerSettings | None" = None) -> Path:
        from pgfplots.picture import Picture

        return Picture.from_plot(self).show_pdf(engine, settings=settings)
