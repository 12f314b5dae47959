# display/terminal.py

import sys
from typing import Optional, TextIO

from prompt_toolkit import PromptSession

from .sinks import AnsiSink
from .style.definitions import StyleDefinitions


class DisplayTerminal(AnsiSink):
    """Interactive terminal sink: colored output plus blocking acknowledgements."""

    def __init__(self, stream: Optional[TextIO] = None,
                 definitions: Optional[StyleDefinitions] = None,
                 color: bool = True):
        """
        Initialize the terminal sink.

        Args:
            stream: Output stream, stdout when omitted
            definitions: Color definitions for set_color()
            color: When False, color directives are dropped
        """
        super().__init__(stream, definitions)
        self.color_enabled = color
        self._prompt_session = None

    @property
    def prompt_session(self) -> PromptSession:
        # Created on first use; building a session needs a console
        if self._prompt_session is None:
            self._prompt_session = PromptSession()
        return self._prompt_session

    def set_color(self, name: str) -> None:
        if self.color_enabled:
            super().set_color(name)

    def reset_color(self) -> None:
        if self.color_enabled:
            super().reset_color()

    def write(self, text: str = "", newline: bool = False) -> None:
        """Write text; append newline if requested."""
        self.stream.write(text)
        if newline:
            self.stream.write("\n")
        self.stream.flush()

    def write_line(self, text: str = "") -> None:
        """Write text with newline."""
        self.write(text, newline=True)

    def wait_for_acknowledgement(self) -> str:
        """Block until the user submits a line of input."""
        self.flush()
        if not sys.stdin.isatty():
            return sys.stdin.readline()
        return self.prompt_session.prompt("")

    def reset(self) -> None:
        """Restore default attributes if anything was colored."""
        if self.current_color is not None:
            self.reset_color()
