from __future__ import annotations

from typing import Literal


class PgfplotsError(Exception):
    """Base class for errors raised by this package."""


class PlotDataError(PgfplotsError, ValueError):
    """Array-like input could not be turned into coordinates."""


class CompileError(PgfplotsError, RuntimeError):
    """Compiling a standalone document into a PDF failed."""


class CompileIOError(CompileError):
    """Writing the working files or launching the engine executable failed."""


class BadExitCodeError(CompileError):
    """The engine exited with a non-zero status; ``output`` holds its log."""

    def __init__(self, engine: str, returncode: int, output: str = "") -> None:
        super().__init__(f"{engine} exited with status {returncode}")
        self.engine = engine
        self.returncode = returncode
        self.output = output


class EngineError(CompileError):
    """The engine failed without a usable exit status (timeout, missing output)."""


class OpenError(PgfplotsError, RuntimeError):
    """The platform viewer could not open a file."""


ShowPdfErrorKind = Literal["compile", "open"]


class ShowPdfError(PgfplotsError, RuntimeError):
    """Showing a PDF failed; ``kind`` says whether compiling or opening failed."""

    def __init__(self, kind: ShowPdfErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
