# test_interface.py

import io
from unittest.mock import Mock

from tabprinter import Interface, Logger, Settings, TableStyle


class TestInterface:

    def setup_method(self):
        self.buffer = io.StringIO()
        self.ui = Interface(stream=self.buffer)

    def test_show(self, people):
        table = people(TableStyle.GRID)
        self.ui.show(table)
        assert self.buffer.getvalue() == table.to_string()

    def test_show_colored_amiga(self, people):
        self.ui.show(people(TableStyle.AMIGA))
        assert self.buffer.getvalue().startswith('\033[34mName')

    def test_show_without_color(self, people):
        ui = Interface(stream=self.buffer, color=False)
        ui.show(people(TableStyle.AMIGA))
        assert '\033[' not in self.buffer.getvalue()

    def test_page_waits_on_terminal_and_resets(self, people):
        self.ui.display.terminal.wait_for_acknowledgement = Mock()
        self.ui.page(people(TableStyle.AMIGA), page_size=1)
        self.ui.display.terminal.wait_for_acknowledgement.assert_called_once()
        output = self.buffer.getvalue()
        assert "Page 2 of 2" in output
        assert output.endswith('\033[0m')

    def test_page_interrupted(self, people):
        self.ui.display.terminal.wait_for_acknowledgement = Mock(side_effect=KeyboardInterrupt)
        self.ui.page(people(TableStyle.GRID), page_size=1)
        assert "Page 2 of 2" not in self.buffer.getvalue()

    def test_page_ended_with_eof(self, people):
        self.ui.display.terminal.wait_for_acknowledgement = Mock(side_effect=EOFError)
        self.ui.page(people(TableStyle.AMIGA), page_size=1)
        output = self.buffer.getvalue()
        assert "Page 2 of 2" not in output
        assert output.endswith("\n\033[0m")

    def test_load_csv_uses_settings(self, tmp_path):
        path = tmp_path / "t.csv"
        path.write_text("a,b\n1,2\n", encoding="utf-8")
        ui = Interface(stream=self.buffer, settings=Settings(csv_column_width=6, default_style=TableStyle.HEAVY))
        table = ui.load_csv(path)
        assert table.style is TableStyle.HEAVY
        assert [c.width for c in table.columns] == [6, 6]


class TestLogger:

    def test_disabled_logger_has_level_methods(self):
        logger = Logger("tabprinter.test")
        for level in ("debug", "info", "warning", "error"):
            getattr(logger, level)("message")
