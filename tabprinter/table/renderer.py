# table/renderer.py

import math
import logging
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence

from prompt_toolkit import prompt

from ..config import Settings, DEFAULT_SETTINGS
from ..display.sinks import OutputSink, TextSink
from ..display.style.registry import LineStyle, StyleSet, resolve

if TYPE_CHECKING:
    from .model import Column, Table

logger = logging.getLogger(__name__)


def _prompt_acknowledgement() -> str:
    """Wait for Enter on the controlling terminal."""
    return prompt("")


class TableRenderer:
    """
    Turns a Table into lines of text using the glyph set of its style.

    Rendering is uniform across styles: border lines whose glyphs are all
    empty are skipped, and a blank row style switches cells to the unbordered
    layout (width - 1 per cell, each followed by one space).
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or DEFAULT_SETTINGS

    # Line formatting

    def format_border(self, columns: Sequence['Column'], line: LineStyle) -> str:
        """begin + hline * (width + 2) per column, joined by sep, + end."""
        fills = [line.hline * (max(column.width or 0, 0) + 2) for column in columns]
        return line.begin + line.sep.join(fills) + line.end

    def format_row(self, columns: Sequence['Column'], cells: Sequence[str], line: LineStyle) -> str:
        """Format header or data cells for one line."""
        if line.is_blank:
            return ''.join(
                column.alignment.apply(cell, (column.width or 0) - 1) + ' '
                for column, cell in zip(columns, cells)
            )
        padded = [
            f" {column.alignment.apply(cell, column.width or 0)} "
            for column, cell in zip(columns, cells)
        ]
        return line.begin + line.sep.join(padded) + line.end

    # Output

    def render(self, table: 'Table', sink: Optional[OutputSink] = None,
               colorized: bool = False) -> None:
        """Write the whole table; sink write errors propagate to the caller."""
        sink = sink if sink is not None else TextSink()
        table.resolve_widths()
        style_set = resolve(table.style)
        try:
            self._write_block(table, table.rows, sink, style_set, colorized)
        except OSError as e:
            logger.error(f"Failed writing {table.style.value} table: {e}")
            raise

    def render_paginated(self, table: 'Table', sink: Optional[OutputSink] = None,
                         page_size: Optional[int] = None,
                         colorized: bool = False,
                         acknowledge: Optional[Callable[[], object]] = None) -> None:
        """
        Write the table in pages of page_size rows.

        Each page is headed by "Page n of total" and carries the full header
        and border block. Between pages the pause prompt is written and
        acknowledge() is called; it is expected to block until the reader is
        ready. When acknowledge is omitted the sink's own
        wait_for_acknowledgement() is used, falling back to a terminal prompt.

        Args:
            table: Table to render
            sink: Output sink, stdout when omitted
            page_size: Rows per page; defaults to the table's page size, then to all rows
            colorized: Apply the style's colors when the sink supports them
            acknowledge: Blocking callable invoked between pages

        Raises:
            ValueError: If page_size is less than 1
        """
        sink = sink if sink is not None else TextSink()
        if page_size is None:
            page_size = table.page_size
        if page_size is not None and page_size < 1:
            raise ValueError(f"page_size must be at least 1, got {page_size}")

        row_count = len(table.rows)
        if page_size is None:
            page_size = max(row_count, 1)
        total_pages = math.ceil(row_count / page_size)
        logger.debug(f"Paginating {row_count} rows into {total_pages} pages of {page_size}")

        table.resolve_widths()
        style_set = resolve(table.style)
        try:
            for page in range(total_pages):
                start = page * page_size
                sink.write(self.settings.format_page_header(page + 1, total_pages) + "\n")
                self._write_block(table, table.rows[start:start + page_size], sink, style_set, colorized)

                if page < total_pages - 1:
                    sink.write(self.settings.pause_prompt + "\n")
                    self._flush(sink)
                    if acknowledge is None:
                        acknowledge = getattr(sink, 'wait_for_acknowledgement', _prompt_acknowledgement)
                    acknowledge()
        except OSError as e:
            logger.error(f"Failed writing page to sink: {e}")
            raise

    def _write_block(self, table: 'Table', rows: List[List[str]], sink: OutputSink,
                     style_set: StyleSet, colorized: bool) -> None:
        """Borders, header and the given rows."""
        columns = table.columns
        use_color = colorized and style_set.accent_color is not None and self._supports_color(sink)

        self._write_border(sink, columns, style_set.top)
        if use_color:
            sink.set_color(style_set.accent_color)
        self._write_line(sink, self.format_row(columns, [c.header for c in columns], style_set.row))
        self._write_border(sink, columns, style_set.below_header)
        if use_color and style_set.body_color:
            sink.set_color(style_set.body_color)
        for row in rows:
            self._write_line(sink, self.format_row(columns, row, style_set.row))
        self._write_border(sink, columns, style_set.bottom)

    def _write_border(self, sink: OutputSink, columns: Sequence['Column'], line: LineStyle) -> None:
        if not line.is_blank:
            self._write_line(sink, self.format_border(columns, line))

    @staticmethod
    def _write_line(sink: OutputSink, text: str) -> None:
        sink.write(text + "\n")

    @staticmethod
    def _supports_color(sink: OutputSink) -> bool:
        if callable(getattr(sink, 'set_color', None)):
            return True
        logger.debug(f"{type(sink).__name__} has no color support; rendering plain")
        return False

    @staticmethod
    def _flush(sink: OutputSink) -> None:
        flush = getattr(sink, 'flush', None)
        if flush:
            flush()
