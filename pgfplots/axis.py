from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from pgfplots.options import CUSTOM, OptionKey, add_key, render_environment
from pgfplots.plot import Plot2D

if TYPE_CHECKING:
    from pgfplots.compile.engine import Engine
    from pgfplots.config import CompilerSettings


class Scale(str, Enum):
    LOG = "log"
    NORMAL = "normal"

    def __str__(self) -> str:
        return self.value


AxisKeyKind = Literal["custom", "x_mode", "y_mode", "title", "x_label", "y_label"]


@dataclass(frozen=True)
class AxisKey(OptionKey):
    """PGFPlots option passed to the axis environment."""

    kind: AxisKeyKind

    payload_types = {
        CUSTOM: str,
        "x_mode": Scale,
        "y_mode": Scale,
        "title": str,
        "x_label": str,
        "y_label": str,
    }

    @classmethod
    def custom(cls, text: str) -> "AxisKey":
        return cls(CUSTOM, text)

    @classmethod
    def x_mode(cls, scale: Scale) -> "AxisKey":
        return cls("x_mode", Scale(scale))

    @classmethod
    def y_mode(cls, scale: Scale) -> "AxisKey":
        return cls("y_mode", Scale(scale))

    @classmethod
    def title(cls, text: str) -> "AxisKey":
        return cls("title", text)

    @classmethod
    def x_label(cls, text: str) -> "AxisKey":
        return cls("x_label", text)

    @classmethod
    def y_label(cls, text: str) -> "AxisKey":
        return cls("y_label", text)

    def render(self) -> str:
        if self.kind == "x_mode":
            return f"xmode={self.value}"
        if self.kind == "y_mode":
            return f"ymode={self.value}"
        if self.kind == "title":
            return f"title={{{self.value}}}"
        if self.kind == "x_label":
            return f"xlabel={{{self.value}}}"
        if self.kind == "y_label":
            return f"ylabel={{{self.value}}}"
        return super().render()


@dataclass
class Axis:
    """Axis environment holding one or more plots.

    Renders as::

        \\begin{axis}[AxisKeys]
            % plots
        \\end{axis}

    Titles and labels may contain LaTeX, e.g. ``axis.set_x_label("$x$~[m]")``.
    """

    plots: list[Plot2D] = field(default_factory=list)
    _keys: list[AxisKey] = field(default_factory=list, init=False)

    @classmethod
    def from_plot(cls, plot: Plot2D) -> "Axis":
        return cls(plots=[plot])

    @property
    def keys(self) -> list[AxisKey]:
        return self._keys

    def add_key(self, key: AxisKey) -> None:
        add_key(self._keys, key)

    def set_title(self, title: str) -> None:
        self.add_key(AxisKey.title(title))

    def set_x_label(self, label: str) -> None:
        self.add_key(AxisKey.x_label(label))

    def set_y_label(self, label: str) -> None:
        self.add_key(AxisKey.y_label(label))

    def render(self) -> str:
        return render_environment("axis", self._keys, self.plots)

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

        return Picture.from_axis(self).to_pdf(working_dir, jobname, engine, settings=settings)

    def show_pdf(self, engine: "Engine | None" = None, *, settings: "CompilerSettings | None" = None) -> Path:
        from pgfplots.picture import Picture

        return Picture.from_axis(self).show_pdf(engine, settings=settings)
