# conftest.py

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from tabprinter import Alignment, Table, TableStyle


def build_people(style=TableStyle.GRID) -> Table:
    """Three fixed-width columns and two rows."""
    table = Table(style)
    table.add_column("Name", 8, Alignment.LEFT)
    table.add_column("Age", 5, Alignment.RIGHT)
    table.add_column("City", 13, Alignment.CENTER)
    table.add_row(["Alice", "30", "New York"])
    table.add_row(["Bob", "25", "Los Angeles"])
    return table


@pytest.fixture
def people():
    return build_people
