# interface.py

from typing import Optional, TextIO, Union

from .logger import Logger
from .config import Settings, DEFAULT_SETTINGS
from .display import Display
from .display.style.registry import TableStyle
from .table import Table, TableRenderer, from_csv

class Interface:
    """
    Main entry point that assembles the Display, renderer and logger.
    """

    def __init__(self, logging_enabled: bool = False,
                 log_file: Optional[str] = None,
                 settings: Optional[Settings] = None,
                 color: bool = True,
                 stream: Optional[TextIO] = None):
        """
        Initialize components with optional logging and settings.

        Args:
            logging_enabled: Enable detailed logging.
            log_file: Path to log file. Use "-" for stdout.
            settings: Render defaults (page header, pause prompt, CSV width).
            color: Emit color for styles that define it.
            stream: Output stream, stdout when omitted.
        """
        try:
            self.logger = Logger(__name__, logging_enabled, log_file)
            self.settings = settings or DEFAULT_SETTINGS
            self.display = Display(stream, color=color)
            self.renderer = TableRenderer(self.settings)
            self.color = color
            self.logger.debug(f"Initialized interface (color={color})")
        except Exception as e:
            if hasattr(self, 'logger'):
                self.logger.error(f"Init error: {e}")
            raise

    def show(self, table: Table) -> None:
        """Render a table to the terminal."""
        self.logger.debug(f"Showing {len(table)} rows in {table.style.value} style")
        self.renderer.render(table, self.display.terminal, colorized=self.color)
        self.display.terminal.flush()

    def page(self, table: Table, page_size: Optional[int] = None) -> None:
        """Render a table one page at a time, waiting for Enter between pages.

        Ctrl-C or Ctrl-D at a pause stops paging quietly.
        """
        try:
            self.renderer.render_paginated(
                table, self.display.terminal, page_size=page_size, colorized=self.color
            )
        except (KeyboardInterrupt, EOFError):
            self.display.terminal.write_line()
        finally:
            self.display.reset()

    def load_csv(self, path, style: Union[TableStyle, str, None] = None) -> Table:
        """Read a CSV file into a table using the configured column width."""
        return from_csv(
            path,
            style=style or self.settings.default_style,
            width=self.settings.csv_column_width
        )

    def reset(self) -> None:
        self.display.reset()
