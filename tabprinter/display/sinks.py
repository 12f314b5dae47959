# display/sinks.py

import sys
from typing import Optional, Protocol, TextIO, runtime_checkable

from rich.console import Console
from rich.style import Style

from .style.definitions import StyleDefinitions, DEFAULT_DEFINITIONS


@runtime_checkable
class OutputSink(Protocol):
    """Anything a table can be written to."""
    def write(self, text: str) -> None: ...


@runtime_checkable
class ColorSink(OutputSink, Protocol):
    """An output sink that can switch the foreground color."""
    def set_color(self, name: str) -> None: ...
    def reset_color(self) -> None: ...


class TextSink:
    """Plain-text sink over a text stream. Write errors propagate."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved late so pytest's capsys and redirected stdout are honoured
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)

    def flush(self) -> None:
        self.stream.flush()


class AnsiSink(TextSink):
    """Text sink that writes ANSI escapes for color directives."""

    def __init__(self, stream: Optional[TextIO] = None,
                 definitions: Optional[StyleDefinitions] = None):
        super().__init__(stream)
        self.definitions = definitions or DEFAULT_DEFINITIONS
        self.current_color: Optional[str] = None

    def set_color(self, name: str) -> None:
        """Switch the foreground color."""
        self.write(self.definitions.get_color(name)['ansi'])
        self.current_color = name

    def reset_color(self) -> None:
        """Return to the terminal's default attributes."""
        self.write(self.definitions.get_format('RESET'))
        self.current_color = None


class RichSink:
    """Sink writing through a Rich console, colored with Rich styles."""

    def __init__(self, console: Optional[Console] = None,
                 definitions: Optional[StyleDefinitions] = None):
        self.console = console or Console(highlight=False, emoji=False)
        self.definitions = definitions or DEFAULT_DEFINITIONS
        self._style: Optional[Style] = None

    def write(self, text: str) -> None:
        self.console.print(
            text,
            style=self._style,
            end='',
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True
        )

    def set_color(self, name: str) -> None:
        self._style = Style(color=self.definitions.get_color(name)['rich'])

    def reset_color(self) -> None:
        self._style = None

    def flush(self) -> None:
        self.console.file.flush()
