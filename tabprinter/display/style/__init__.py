# display/style/__init__.py

from .definitions import StyleDefinitions, DEFAULT_DEFINITIONS
from .registry import TableStyle, LineStyle, StyleSet, STYLES, resolve, to_style

__all__ = [
    'StyleDefinitions', 'DEFAULT_DEFINITIONS',
    'TableStyle', 'LineStyle', 'StyleSet', 'STYLES', 'resolve', 'to_style'
]
