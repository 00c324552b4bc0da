from __future__ import annotations

from enum import Enum
from pathlib import Path

from pgfplots.config import CompilerSettings


class Engine(str, Enum):
    """External LaTeX program used to compile standalone documents."""

    PDFLATEX = "pdflatex"
    TECTONIC = "tectonic"

    def __str__(self) -> str:
        return self.value


def flatten_source(source: str) -> str:
    # pdflatex reads the document from a single command-line argument.
    return source.replace("\n", " ").replace("\t", " ")


def build_pdflatex_command(source: str, *, jobname: str, settings: CompilerSettings) -> list[str]:
    return [
        settings.pdflatex,
        "-interaction=batchmode",
        "-halt-on-error",
        f"-jobname={jobname}",
        flatten_source(source),
    ]


def build_tectonic_command(tex_path: Path, *, settings: CompilerSettings) -> list[str]:
    return [
        settings.tectonic,
        "--chatter",
        "minimal",
        "--outdir",
        str(tex_path.parent),
        tex_path.name,
    ]
