from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Union

from pgfplots.color import Color, ColorLike, as_color
from pgfplots.formatting import format_number


class MarkShape(str, Enum):
    O = "o"
    O_FILLED = "*"
    X = "x"
    PLUS = "+"
    MINUS = "-"
    PIPE = "|"
    STAR = "star"
    O_PLUS = "oplus"
    O_PLUS_FILLED = "oplus*"
    O_TIMES = "otimes"
    O_TIMES_FILLED = "otimes*"
    SQUARE = "square"
    SQUARE_FILLED = "square*"
    TRIANGLE = "triangle"
    TRIANGLE_FILLED = "triangle*"
    DIAMOND = "diamond"
    DIAMOND_FILLED = "diamond*"
    PENTAGON = "pentagon"
    PENTAGON_FILLED = "pentagon*"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TextMark:
    """Use arbitrary text as the marker."""

    text: str

    def __str__(self) -> str:
        return f"text, text mark={self.text}"


MarkOptionKind = Literal["scale", "fill", "draw", "xscale", "yscale"]


@dataclass(frozen=True)
class MarkOption:
    kind: MarkOptionKind
    value: Union[float, Color]

    @classmethod
    def scale(cls, factor: float) -> "MarkOption":
        return cls("scale", float(factor))

    @classmethod
    def x_scale(cls, factor: float) -> "MarkOption":
        return cls("xscale", float(factor))

    @classmethod
    def y_scale(cls, factor: float) -> "MarkOption":
        return cls("yscale", float(factor))

    @classmethod
    def fill(cls, color: ColorLike) -> "MarkOption":
        return cls("fill", as_color(color))

    @classmethod
    def draw(cls, color: ColorLike) -> "MarkOption":
        return cls("draw", as_color(color))

    def render(self) -> str:
        if isinstance(self.value, Color):
            return f"{self.kind}={self.value}"
        return f"{self.kind}={format_number(self.value)}"

    def __str__(self) -> str:
        return self.render()


@dataclass
class Marker:
    """Shape and styling of the marks drawn at each coordinate.

    Options keep insertion order and are not deduplicated.
    """

    shape: Union[MarkShape, TextMark]
    options: list[MarkOption] = field(default_factory=list)

    def add_option(self, option: MarkOption) -> None:
        self.options.append(option)

    def render(self) -> str:
        options = ", ".join(option.render() for option in self.options)
        return f"mark={self.shape}, mark options={{{options}}}"

    def __str__(self) -> str:
        return self.render()
