from pgfplots.adapters import coordinates_from_xy, plot_from_xy
from pgfplots.api import picture
from pgfplots.axis import Axis, AxisKey, Scale
from pgfplots.color import Color, PredefinedColor
from pgfplots.compile import Engine
from pgfplots.config import CompilerSettings, resolve_compiler_settings
from pgfplots.coordinate import Coordinate2D
from pgfplots.errors import (
    BadExitCodeError,
    CompileError,
    CompileIOError,
    EngineError,
    OpenError,
    PgfplotsError,
    PlotDataError,
    ShowPdfError,
)
from pgfplots.formatting import format_number
from pgfplots.marker import MarkOption, MarkShape, Marker, TextMark
from pgfplots.picture import Picture, PictureKey
from pgfplots.plot import ErrorCharacter, ErrorDirection, Plot2D, PlotKey, Type2D

__all__ = [
    "Axis",
    "AxisKey",
    "BadExitCodeError",
    "Color",
    "CompileError",
    "CompileIOError",
    "CompilerSettings",
    "Coordinate2D",
    "Engine",
    "EngineError",
    "ErrorCharacter",
    "ErrorDirection",
    "MarkOption",
    "MarkShape",
    "Marker",
    "OpenError",
    "PgfplotsError",
    "Picture",
    "PictureKey",
    "Plot2D",
    "PlotDataError",
    "PlotKey",
    "PredefinedColor",
    "Scale",
    "ShowPdfError",
    "TextMark",
    "Type2D",
    "coordinates_from_xy",
    "format_number",
    "picture",
    "plot_from_xy",
    "resolve_compiler_settings",
]
