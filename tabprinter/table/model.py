# table/model.py

import io
import logging
from enum import Enum
from dataclasses import dataclass, replace
from typing import Callable, Iterable, List, Optional, Union

from ..errors import RowLengthError
from ..display.sinks import OutputSink
from ..display.terminal import DisplayTerminal
from ..display.style.registry import TableStyle, to_style
from .renderer import TableRenderer

logger = logging.getLogger(__name__)


class Alignment(Enum):
    """Horizontal placement of text inside a column."""
    LEFT = 'left'
    CENTER = 'center'
    RIGHT = 'right'

    @property
    def fill_spec(self) -> str:
        """The format-spec alignment character."""
        return {'left': '<', 'center': '^', 'right': '>'}[self.value]

    def apply(self, text: str, width: int) -> str:
        """Pad text to width; odd center padding goes to the right."""
        return format(text, f"{self.fill_spec}{max(width, 0)}")


@dataclass
class Column:
    """A declared column. Width None means computed from content at first render."""
    header: str
    width: Optional[int] = None
    alignment: Alignment = Alignment.LEFT


Row = List[str]


class Table:
    """
    A rectangular table of text cells rendered in one of the TableStyle presets.

    Columns fix the row arity; rows are appended and every row must have one
    cell per column. Column widths left unset are resolved once, on first
    render, and are then kept as they are.
    """

    def __init__(self, style: Union[TableStyle, str] = TableStyle.SIMPLE,
                 page_size: Optional[int] = None):
        self.style = to_style(style)
        self.columns: List[Column] = []
        self.rows: List[Row] = []
        self.page_size = page_size

    def __len__(self) -> int:
        return len(self.rows)

    def add_column(self, header: str, width: Optional[int] = None,
                   alignment: Union[Alignment, str] = Alignment.LEFT) -> Column:
        """
        Declare a column; returns it.

        Rows added before the column get an empty cell for it, so every row
        keeps one cell per column.
        """
        if not isinstance(alignment, Alignment):
            alignment = Alignment(alignment.lower())
        column = Column(header=header, width=width, alignment=alignment)
        self.columns.append(column)
        for row in self.rows:
            row.append("")
        return column

    def add_row(self, cells: Iterable) -> None:
        """Append a row; raises RowLengthError unless there is one cell per column."""
        row = [str(cell) for cell in cells]
        if len(row) != len(self.columns):
            raise RowLengthError(len(self.columns), len(row))
        self.rows.append(row)

    def add_rows(self, rows: Iterable[Iterable]) -> None:
        for cells in rows:
            self.add_row(cells)

    def set_page_size(self, page_size: int) -> None:
        self.page_size = page_size

    def resolve_widths(self) -> None:
        """
        Give every auto-width column the width of its longest header or cell
        plus two. Columns that already have a width are left alone, so this
        is idempotent and later rows never widen a resolved column.
        """
        for i, column in enumerate(self.columns):
            if column.width is not None:
                continue
            longest = max((len(row[i]) for row in self.rows), default=0)
            column.width = max(longest, len(column.header)) + 2
            logger.debug(f"Resolved width of column '{column.header}' to {column.width}")

    def sort_by_column(self, index: int, ascending: bool = True) -> None:
        """
        Stable in-place sort on the text of one column.

        The comparison is lexical only: "10" sorts before "9". Pad or format
        cells beforehand when numeric order is wanted.
        """
        if not -len(self.columns) <= index < len(self.columns):
            raise IndexError(f"Column index {index} out of range for {len(self.columns)} columns")
        # reverse=True keeps equal keys in their original order
        self.rows.sort(key=lambda row: row[index], reverse=not ascending)

    def filter(self, predicate: Callable[[Row], bool]) -> 'Table':
        """Return a new table with the same columns and style holding the matching rows."""
        result = Table(self.style, self.page_size)
        result.columns = [replace(column) for column in self.columns]
        result.rows = [list(row) for row in self.rows if predicate(row)]
        return result

    def render(self, sink: Optional[OutputSink] = None, colorized: bool = False) -> None:
        """Write the table to a sink (stdout when omitted)."""
        TableRenderer().render(self, sink, colorized=colorized)

    def render_paginated(self, sink: Optional[OutputSink] = None,
                         page_size: Optional[int] = None,
                         colorized: bool = False,
                         acknowledge: Optional[Callable[[], object]] = None) -> None:
        """Write the table page by page, pausing for acknowledge() between pages."""
        TableRenderer().render_paginated(
            self, sink, page_size=page_size, colorized=colorized, acknowledge=acknowledge
        )

    def to_string(self) -> str:
        """Render without color and return the text."""
        buffer = io.StringIO()
        self.render(buffer)
        return buffer.getvalue()

    def print(self, colorized: bool = True) -> None:
        """Render to the terminal."""
        self.render(DisplayTerminal(), colorized=colorized)

    @classmethod
    def from_csv(cls, path, style: Union[TableStyle, str] = TableStyle.SIMPLE,
                 width: Optional[int] = None) -> 'Table':
        from .csv_io import from_csv
        return from_csv(path, style=style, width=width)

    def to_csv(self, path) -> None:
        from .csv_io import to_csv
        to_csv(self, path)

    def __str__(self) -> str:
        return self.to_string()
