# test_pagination.py

import io
from unittest.mock import Mock

import pytest

from tabprinter import Alignment, Settings, Table, TableRenderer, TableStyle


def build_numbered(count: int, style=TableStyle.SIMPLE) -> Table:
    table = Table(style)
    table.add_column("ID", 5, Alignment.RIGHT)
    table.add_column("Name", 12, Alignment.LEFT)
    for i in range(1, count + 1):
        table.add_row([i, f"Person {i}"])
    return table


def split_pages(output: str):
    """Return {page header: [lines]} in order."""
    pages = []
    for line in output.splitlines():
        if line.startswith("Page "):
            pages.append((line, []))
        else:
            pages[-1][1].append(line)
    return pages


class TestRenderPaginated:
    """Chunking, page headers and pauses."""

    def setup_method(self):
        self.buffer = io.StringIO()
        self.acknowledge = Mock()

    def test_25_rows_in_pages_of_10(self):
        build_numbered(25).render_paginated(self.buffer, 10, acknowledge=self.acknowledge)
        pages = split_pages(self.buffer.getvalue())

        assert [header for header, _ in pages] == ["Page 1 of 3", "Page 2 of 3", "Page 3 of 3"]
        for _, lines in pages[:-1]:
            assert lines[-1] == "Press Enter to continue..."
        counts = [len([l for l in lines if "Person" in l]) for _, lines in pages]
        assert counts == [10, 10, 5]
        assert self.acknowledge.call_count == 2

    def test_each_page_repeats_header(self):
        build_numbered(5).render_paginated(self.buffer, 2, acknowledge=self.acknowledge)
        pages = split_pages(self.buffer.getvalue())
        assert len(pages) == 3
        assert all(lines[0].startswith("  ID Name") for _, lines in pages)
        assert pages[2][1] == ["  ID Name        ", "   5 Person 5    "]

    def test_bordered_pages(self):
        build_numbered(3, TableStyle.GRID).render_paginated(self.buffer, 2, acknowledge=self.acknowledge)
        pages = split_pages(self.buffer.getvalue())
        first = pages[0][1]
        assert first[0] == first[2] == first[-2] == "+-------+--------------+"
        assert first[-1] == "Press Enter to continue..."
        assert len(pages[1][1]) == 5

    def test_acknowledged_after_prompt(self):
        seen = []
        self.acknowledge.side_effect = lambda: seen.append(self.buffer.getvalue())
        build_numbered(4).render_paginated(self.buffer, 2, acknowledge=self.acknowledge)
        assert len(seen) == 1
        assert seen[0].endswith("Press Enter to continue...\n")
        assert "Page 2 of 2" not in seen[0]

    def test_no_pause_after_last_page(self):
        build_numbered(3).render_paginated(self.buffer, 3, acknowledge=self.acknowledge)
        assert "Press Enter" not in self.buffer.getvalue()
        self.acknowledge.assert_not_called()

    def test_table_page_size_is_default(self):
        table = build_numbered(4)
        table.set_page_size(3)
        table.render_paginated(self.buffer, acknowledge=self.acknowledge)
        assert "Page 2 of 2" in self.buffer.getvalue()

    def test_single_page_without_page_size(self):
        build_numbered(4).render_paginated(self.buffer, acknowledge=self.acknowledge)
        assert self.buffer.getvalue().startswith("Page 1 of 1\n")
        self.acknowledge.assert_not_called()

    def test_empty_table_has_no_pages(self):
        build_numbered(0).render_paginated(self.buffer, 10, acknowledge=self.acknowledge)
        assert self.buffer.getvalue() == ""

    @pytest.mark.parametrize("page_size", [0, -1])
    def test_invalid_page_size(self, page_size):
        with pytest.raises(ValueError):
            build_numbered(3).render_paginated(self.buffer, page_size, acknowledge=self.acknowledge)

    def test_sink_acknowledgement_used_by_default(self):
        class PausingSink:
            def __init__(self):
                self.text = []
                self.pauses = 0

            def write(self, text):
                self.text.append(text)

            def wait_for_acknowledgement(self):
                self.pauses += 1

        sink = PausingSink()
        build_numbered(5).render_paginated(sink, 2)
        assert sink.pauses == 2

    def test_custom_settings(self):
        renderer = TableRenderer(Settings(page_header="-- {page}/{total} --", pause_prompt="[more]"))
        renderer.render_paginated(build_numbered(3), self.buffer, 2, acknowledge=self.acknowledge)
        output = self.buffer.getvalue()
        assert output.startswith("-- 1/2 --\n")
        assert "[more]\n-- 2/2 --\n" in output

    def test_amiga_colors_every_page(self):
        sink = Mock()
        build_numbered(4, TableStyle.AMIGA).render_paginated(
            sink, 2, colorized=True, acknowledge=self.acknowledge
        )
        colors = [c.args[0] for c in sink.set_color.call_args_list]
        assert colors == ['BLUE', 'WHITE', 'BLUE', 'WHITE']
