from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from pgfplots.axis import Axis
from pgfplots.compile.engine import Engine
from pgfplots.compile.pdf import compile_pdf, show_pdf
from pgfplots.config import CompilerSettings
from pgfplots.options import CUSTOM, OptionKey, add_key, render_environment
from pgfplots.plot import Plot2D


STANDALONE_PREAMBLE = "\\documentclass{standalone}\n\\usepackage{pgfplots}\n\\begin{document}\n"
STANDALONE_POSTAMBLE = "\n\\end{document}"

PictureKeyKind = Literal["custom"]


@dataclass(frozen=True)
class PictureKey(OptionKey):
    """TikZ option passed to the tikzpicture environment."""

    kind: PictureKeyKind

    @classmethod
    def custom(cls, text: str) -> "PictureKey":
        return cls(CUSTOM, text)


@dataclass
class Picture:
    """Top-level tikzpicture environment holding one or more axes.

    Only needed directly for layouts with several axis environments or for
    picture-wide keys such as ``compat=1.7``.
    """

    axes: list[Axis] = field(default_factory=list)
    _keys: list[PictureKey] = field(default_factory=list, init=False)

    @classmethod
    def from_axis(cls, axis: Axis) -> "Picture":
        return cls(axes=[axis])

    @classmethod
    def from_plot(cls, plot: Plot2D) -> "Picture":
        return cls.from_axis(Axis.from_plot(plot))

    @property
    def keys(self) -> list[PictureKey]:
        return self._keys

    def add_key(self, key: PictureKey) -> None:
        add_key(self._keys, key)

    def render(self) -> str:
        return render_environment("tikzpicture", self._keys, self.axes)

    def __str__(self) -> str:
        return self.render()

    def standalone_string(self) -> str:
        """LaTeX source of a standalone document containing this picture.

        The text keeps its newlines and tabs; they must be collapsed to spaces
        before passing it to ``pdflatex`` on the command line (``compile_pdf``
        does this).
        """
        return STANDALONE_PREAMBLE + self.render() + STANDALONE_POSTAMBLE

    def to_pdf(
        self,
        working_dir: str | Path,
        jobname: str,
        engine: Engine | None = None,
        *,
        settings: CompilerSettings | None = None,
    ) -> Path:
        return compile_pdf(
            self.standalone_string(),
            working_dir=working_dir,
            jobname=jobname,
            engine=engine,
            settings=settings,
        )

    def show_pdf(self, engine: Engine | None = None, *, settings: CompilerSettings | None = None) -> Path:
        return show_pdf(self.standalone_string(), engine=engine, settings=settings)
