from __future__ import annotations

import logging
from pathlib import Path
import subprocess
import tempfile
import uuid

from pgfplots.compile.engine import Engine, build_pdflatex_command, build_tectonic_command
from pgfplots.compile.viewer import open_file
from pgfplots.config import CompilerSettings, resolve_compiler_settings
from pgfplots.errors import (
    BadExitCodeError,
    CompileError,
    CompileIOError,
    EngineError,
    OpenError,
    ShowPdfError,
)


LOGGER = logging.getLogger(__name__)


def random_jobname() -> str:
    return f"pgfplots-{uuid.uuid4().hex[:12]}"


def compile_pdf(
    source: str,
    *,
    working_dir: str | Path,
    jobname: str,
    engine: Engine | None = None,
    settings: CompilerSettings | None = None,
) -> Path:
    """Compile standalone LaTeX ``source`` and return the path of the PDF.

    The PDF is written to ``working_dir/<jobname>.pdf`` and its absolute path
    is returned. Auxiliary files are left in ``working_dir``.
    """
    settings = settings or resolve_compiler_settings()
    engine = Engine(engine or settings.engine)
    root = Path(working_dir).resolve()
    try:
        root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CompileIOError(f"could not create working directory {root}: {exc}") from exc

    if engine is Engine.PDFLATEX:
        command = build_pdflatex_command(source, jobname=jobname, settings=settings)
    else:
        tex_path = root / f"{jobname}.tex"
        try:
            tex_path.write_text(source, encoding="utf-8")
        except OSError as exc:
            raise CompileIOError(f"could not write {tex_path}: {exc}") from exc
        command = build_tectonic_command(tex_path, settings=settings)

    LOGGER.debug("compiling %s with %s in %s", jobname, command[0], root)
    try:
        completed = subprocess.run(
            command,
            cwd=str(root),
            capture_output=True,
            text=True,
            timeout=settings.timeout_s,
        )
    except subprocess.TimeoutExpired as exc:
        LOGGER.warning("%s timed out after %ss compiling %s", engine, settings.timeout_s, jobname)
        raise EngineError(f"{engine} timed out after {settings.timeout_s}s") from exc
    except OSError as exc:
        raise CompileIOError(f"could not run {command[0]}: {exc}") from exc

    if completed.returncode != 0:
        output = (completed.stdout or "") + (completed.stderr or "")
        LOGGER.warning("%s exited with status %s compiling %s", engine, completed.returncode, jobname)
        raise BadExitCodeError(str(engine), completed.returncode, output)

    pdf_path = root / f"{jobname}.pdf"
    if not pdf_path.exists():
        raise EngineError(f"{engine} reported success but {pdf_path} was not produced")
    return pdf_path


def show_pdf(
    source: str,
    *,
    engine: Engine | None = None,
    settings: CompilerSettings | None = None,
) -> Path:
    """Compile ``source`` under a random job name in the temp dir and open it."""
    settings = settings or resolve_compiler_settings()
    working_dir = Path(settings.tmp_dir or tempfile.gettempdir())
    try:
        pdf_path = compile_pdf(
            source,
            working_dir=working_dir,
            jobname=random_jobname(),
            engine=engine,
            settings=settings,
        )
    except CompileError as exc:
        raise ShowPdfError("compile", str(exc)) from exc
    try:
        open_file(pdf_path)
    except OpenError as exc:
        raise ShowPdfError("open", str(exc)) from exc
    return pdf_path
