# display/style/definitions.py

from typing import Dict, Optional

class StyleDefinitions:
    """
    Color and format definitions shared by the color-capable sinks.
    Each color carries an ANSI escape and the equivalent Rich color name.
    """

    # ANSI format utility
    FMT = staticmethod(lambda x: f'\033[{x}m')

    def __init__(
        self,
        formats: Optional[Dict[str, str]] = None,
        colors: Optional[Dict[str, Dict[str, str]]] = None
    ):
        """Initialize definitions with optional custom formats and colors."""
        self._default_formats = {
            'RESET': self.FMT('0')
        }

        # Plain 16-color codes so the classic palette shows on any terminal
        self._default_colors = {
            'BLUE': {'ansi': self.FMT('34'), 'rich': 'blue'},
            'WHITE': {'ansi': self.FMT('37'), 'rich': 'white'},
            'GREEN': {'ansi': self.FMT('32'), 'rich': 'green'},
            'PINK': {'ansi': '\033[38;5;212m', 'rich': 'pink1'},
            'GRAY': {'ansi': '\033[38;5;245m', 'rich': 'gray50'},
            'YELLOW': {'ansi': self.FMT('33'), 'rich': 'yellow'}
        }

        self.formats = formats if formats is not None else self._default_formats.copy()
        self.colors = colors if colors is not None else self._default_colors.copy()

    def get_format(self, name: str) -> str:
        """Get a format code by name."""
        return self.formats.get(name, '')

    def get_color(self, name: str) -> Dict[str, str]:
        """Get a color configuration by name; raises KeyError for unknown colors."""
        try:
            return self.colors[name.upper()]
        except KeyError:
            raise KeyError(f"Unknown color '{name}'") from None

DEFAULT_DEFINITIONS = StyleDefinitions()
