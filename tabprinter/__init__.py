# __init__.py

from .logger import Logger
from .errors import TableError, RowLengthError, TableIOError
from .config import Settings, DEFAULT_SETTINGS
from .display import Display, DisplayTerminal, TextSink, AnsiSink, RichSink
from .display.style import TableStyle, LineStyle, StyleSet, resolve
from .table import Alignment, Column, Table, TableRenderer, from_csv, to_csv
from .interface import Interface

__all__ = [
    "Interface", "Logger", "Settings", "DEFAULT_SETTINGS",
    "Table", "Column", "Alignment", "TableRenderer", "from_csv", "to_csv",
    "TableStyle", "LineStyle", "StyleSet", "resolve",
    "Display", "DisplayTerminal", "TextSink", "AnsiSink", "RichSink",
    "TableError", "RowLengthError", "TableIOError",
]
