from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union


class PredefinedColor(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    CYAN = "cyan"
    MAGENTA = "magenta"
    YELLOW = "yellow"
    BLACK = "black"
    GRAY = "gray"
    WHITE = "white"
    DARK_GRAY = "darkgray"
    LIGHT_GRAY = "lightgray"
    BROWN = "brown"
    LIME = "lime"
    OLIVE = "olive"
    ORANGE = "orange"
    PINK = "pink"
    PURPLE = "purple"
    TEAL = "teal"
    VIOLET = "violet"

    def __str__(self) -> str:
        return self.value


RGB_MIX_PREFIX = "rgb,255:"


@dataclass(frozen=True)
class Color:
    """A color expression understood by xcolor."""

    value: str

    @classmethod
    def from_predefined(cls, color: PredefinedColor) -> "Color":
        return cls(PredefinedColor(color).value)

    @classmethod
    def from_mix(cls, weighted_colors: Iterable[tuple["ColorLike", int]]) -> "Color":
        """Mix colors in the RGB model, weighting each one on a 0-255 scale.

        ``Color.from_mix([(PredefinedColor.RED, 200), (PredefinedColor.BLUE, 55)])``
        renders as ``rgb,255:red,200;blue,55``.
        """
        entries = [f"{as_color(color)},{int(weight)}" for color, weight in weighted_colors]
        return cls(RGB_MIX_PREFIX + ";".join(entries))

    def render(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


ColorLike = Union[Color, PredefinedColor]


def as_color(color: ColorLike) -> Color:
    if isinstance(color, Color):
        return color
    if isinstance(color, PredefinedColor):
        return Color.from_predefined(color)
    raise TypeError(f"unsupported color type: {type(color)!r}")
