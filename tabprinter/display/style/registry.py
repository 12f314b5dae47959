# display/style/registry.py

from enum import Enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Union


class TableStyle(Enum):
    """Named border presets."""
    SIMPLE = 'simple'
    GRID = 'grid'
    FANCY_GRID = 'fancy_grid'
    CLEAN = 'clean'
    ROUND = 'round'
    BANNER = 'banner'
    BLOCK = 'block'
    AMIGA = 'amiga'
    MINIMAL = 'minimal'
    COMPACT = 'compact'
    MARKDOWN = 'markdown'
    DOTTED = 'dotted'
    HEAVY = 'heavy'
    NEON = 'neon'


@dataclass(frozen=True)
class LineStyle:
    """Glyphs for one horizontal line: left cap, fill, column separator, right cap."""
    begin: str = ''
    hline: str = ''
    sep: str = ''
    end: str = ''

    @property
    def is_blank(self) -> bool:
        """True when every glyph is empty."""
        return not (self.begin or self.hline or self.sep or self.end)


@dataclass(frozen=True)
class StyleSet:
    """
    The four line styles of a table style.

    Styles drawn in color name an accent color for the header and a body
    color for the data rows; both refer to entries of StyleDefinitions.colors.
    """
    top: LineStyle
    below_header: LineStyle
    bottom: LineStyle
    row: LineStyle
    accent_color: Optional[str] = None
    body_color: Optional[str] = None

    @property
    def is_blank(self) -> bool:
        return all(line.is_blank for line in (self.top, self.below_header, self.bottom, self.row))

    @property
    def border_lines(self) -> int:
        """Number of border lines a render emits for this style."""
        return sum(not line.is_blank for line in (self.top, self.below_header, self.bottom))


L = LineStyle
BLANK = L()

_BOX = StyleSet(
    top=L('┌', '─', '┬', '┐'),
    below_header=L('├', '─', '┼', '┤'),
    bottom=L('└', '─', '┴', '┘'),
    row=L('│', '', '│', '│'),
)

_HEAVY = StyleSet(
    top=L('┏', '━', '┳', '┓'),
    below_header=L('┣', '━', '╋', '┫'),
    bottom=L('┗', '━', '┻', '┛'),
    row=L('┃', '', '┃', '┃'),
)

STYLES: Mapping[TableStyle, StyleSet] = MappingProxyType({
    TableStyle.SIMPLE: StyleSet(BLANK, BLANK, BLANK, BLANK),
    TableStyle.GRID: StyleSet(
        top=L('+', '-', '+', '+'),
        below_header=L('+', '-', '+', '+'),
        bottom=L('+', '-', '+', '+'),
        row=L('|', '', '|', '|'),
    ),
    TableStyle.FANCY_GRID: StyleSet(
        top=L('╒', '═', '╤', '╕'),
        below_header=L('╞', '═', '╪', '╡'),
        bottom=L('╘', '═', '╧', '╛'),
        row=L('│', '', '│', '│'),
    ),
    TableStyle.CLEAN: StyleSet(
        top=L('', '─', ' ', ''),
        below_header=L('', '─', ' ', ''),
        bottom=L('', '─', ' ', ''),
        row=L('', '', ' ', ''),
    ),
    TableStyle.ROUND: StyleSet(
        top=L('╭', '─', '┬', '╮'),
        below_header=L('├', '─', '┼', '┤'),
        bottom=L('╰', '─', '┴', '╯'),
        row=L('│', '', '│', '│'),
    ),
    TableStyle.BANNER: StyleSet(
        top=L('╒', '═', '╤', '╕'),
        below_header=L('╘', '═', '╧', '╛'),
        bottom=L('╘', '═', '╧', '╛'),
        row=L('│', '', '│', '│'),
    ),
    TableStyle.BLOCK: StyleSet(
        top=L('◢', '■', '■', '◣'),
        below_header=L(' ', '━', '━', ' '),
        bottom=L('◥', '■', '■', '◤'),
        row=L('', '', ' ', ''),
    ),
    TableStyle.AMIGA: StyleSet(BLANK, BLANK, BLANK, BLANK, accent_color='BLUE', body_color='WHITE'),
    TableStyle.MINIMAL: _BOX,
    TableStyle.COMPACT: _BOX,
    TableStyle.MARKDOWN: StyleSet(
        top=BLANK,
        below_header=L('|', '-', '|', '|'),
        bottom=BLANK,
        row=L('|', '', '|', '|'),
    ),
    TableStyle.DOTTED: StyleSet(
        top=L('.', '.', '.', '.'),
        below_header=L(':', '.', ':', ':'),
        bottom=L("'", '.', "'", "'"),
        row=L(':', '', ':', ':'),
    ),
    TableStyle.HEAVY: _HEAVY,
    TableStyle.NEON: _HEAVY,
})


def _validate_registry() -> None:
    """Fail at import if any style lacks a glyph set."""
    missing = [style.name for style in TableStyle if style not in STYLES]
    if missing:
        raise RuntimeError(f"No glyph set registered for: {', '.join(missing)}")

_validate_registry()


def to_style(style: Union[TableStyle, str]) -> TableStyle:
    """Coerce a style name ('grid', 'FANCY_GRID', ...) to a TableStyle."""
    if isinstance(style, TableStyle):
        return style
    try:
        return TableStyle(style.lower())
    except ValueError:
        raise ValueError(f"Unknown table style '{style}'") from None


def resolve(style: Union[TableStyle, str]) -> StyleSet:
    """Return the glyph set for a style."""
    return STYLES[to_style(style)]
