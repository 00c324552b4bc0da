from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from pgfplots.formatting import format_number


@dataclass(frozen=True)
class Coordinate2D:
    """A point of a two-dimensional plot.

    Errors are only drawn when the owning plot also sets both the error
    character and the error direction for that axis.
    """

    x: float
    y: float
    error_x: Optional[float] = None
    error_y: Optional[float] = None

    @classmethod
    def from_tuple(cls, values: Sequence[Optional[float]]) -> "Coordinate2D":
        if len(values) == 2:
            x, y = values
            return cls(x=float(x), y=float(y))
        if len(values) == 4:
            x, y, error_x, error_y = values
            return cls(
                x=float(x),
                y=float(y),
                error_x=None if error_x is None else float(error_x),
                error_y=None if error_y is None else float(error_y),
            )
        raise ValueError(f"coordinate tuple must have 2 or 4 items, got {len(values)}")

    def render(self) -> str:
        out = f"({format_number(self.x)},{format_number(self.y)})"
        if self.error_x is not None or self.error_y is not None:
            error_x = format_number(self.error_x) if self.error_x is not None else "0"
            error_y = format_number(self.error_y) if self.error_y is not None else "0"
            out += f"\t+- ({error_x},{error_y})"
        return out

    def __str__(self) -> str:
        return self.render()


CoordinateLike = Union[Coordinate2D, Sequence[Optional[float]]]


def as_coordinate(value: CoordinateLike) -> Coordinate2D:
    if isinstance(value, Coordinate2D):
        return value
    return Coordinate2D.from_tuple(value)
