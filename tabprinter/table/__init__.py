# table/__init__.py

from .model import Alignment, Column, Row, Table
from .renderer import TableRenderer
from .csv_io import from_csv, to_csv

__all__ = ['Alignment', 'Column', 'Row', 'Table', 'TableRenderer', 'from_csv', 'to_csv']
