# table/csv_io.py

import csv
import logging
from typing import Optional, Union

from ..config import DEFAULT_SETTINGS
from ..errors import RowLengthError, TableIOError
from ..display.style.registry import TableStyle
from .model import Alignment, Table

logger = logging.getLogger(__name__)


def from_csv(path, style: Union[TableStyle, str] = TableStyle.SIMPLE,
             width: Optional[int] = None) -> Table:
    """
    Read a comma-separated file into a Table.

    The first record supplies the headers. Every column is left aligned with
    a fixed width (settings.csv_column_width unless given).

    Raises:
        TableIOError: If the file cannot be read, is not valid CSV, or a
            record has a different number of fields than the header
    """
    width = DEFAULT_SETTINGS.csv_column_width if width is None else width
    table = Table(style)
    try:
        with open(path, newline='', encoding='utf-8') as f:
            reader = csv.reader(f)
            headers = next(reader, None)
            if headers is None:
                raise TableIOError(f"{path}: no header record")
            for header in headers:
                table.add_column(header, width, Alignment.LEFT)
            for record in reader:
                # csv.reader yields [] for a blank line
                if not record:
                    continue
                try:
                    table.add_row(record)
                except RowLengthError as e:
                    raise TableIOError(f"{path}, line {reader.line_num}: {e}") from e
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise TableIOError(f"Cannot read {path}: {e}") from e

    logger.debug(f"Loaded {len(table.rows)} rows, {len(table.columns)} columns from {path}")
    return table


def to_csv(table: Table, path) -> None:
    """Write the header record followed by every row."""
    try:
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow([column.header for column in table.columns])
            writer.writerows(table.rows)
    except OSError as e:
        raise TableIOError(f"Cannot write {path}: {e}") from e

    logger.debug(f"Wrote {len(table.rows)} rows to {path}")
