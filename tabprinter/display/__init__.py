# display/__init__.py

from typing import Optional, TextIO

from .terminal import DisplayTerminal
from .sinks import OutputSink, ColorSink, TextSink, AnsiSink, RichSink
from .style import StyleDefinitions, DEFAULT_DEFINITIONS

class Display:
    """
    Coordinates the terminal sink and the color definitions it draws with.

    Component Hierarchy:
    StyleDefinitions (base) → DisplayTerminal
    """
    def __init__(self, stream: Optional[TextIO] = None,
                 definitions: Optional[StyleDefinitions] = None,
                 color: bool = True):
        """Initialize components in dependency order."""
        self.definitions = definitions or DEFAULT_DEFINITIONS
        self.terminal = DisplayTerminal(stream, self.definitions, color=color)

    def reset(self) -> None:
        """Leave the terminal in its default colors."""
        self.terminal.reset()
        self.terminal.flush()

__all__ = [
    'Display', 'DisplayTerminal',
    'OutputSink', 'ColorSink', 'TextSink', 'AnsiSink', 'RichSink'
]
