from .engine import Engine, build_pdflatex_command, build_tectonic_command, flatten_source
from .pdf import compile_pdf, random_jobname, show_pdf
from .viewer import open_file, viewer_command

__all__ = [
    "Engine",
    "build_pdflatex_command",
    "build_tectonic_command",
    "compile_pdf",
    "flatten_source",
    "open_file",
    "random_jobname",
    "show_pdf",
    "viewer_command",
]
