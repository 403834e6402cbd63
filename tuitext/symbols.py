"""Box-drawing, block and braille symbols used to draw widgets."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

BLOCK_FULL = "█"
BLOCK_SEVEN_EIGHTHS = "▉"
BLOCK_THREE_QUARTERS = "▊"
BLOCK_FIVE_EIGHTHS = "▋"
BLOCK_HALF = "▌"
BLOCK_THREE_EIGHTHS = "▍"
BLOCK_ONE_QUARTER = "▎"
BLOCK_ONE_EIGHTH = "▏"

BAR_FULL = "█"
BAR_SEVEN_EIGHTHS = "▇"
BAR_THREE_QUARTERS = "▆"
BAR_FIVE_EIGHTHS = "▅"
BAR_HALF = "▄"
BAR_THREE_EIGHTHS = "▃"
BAR_ONE_QUARTER = "▂"
BAR_ONE_EIGHTH = "▁"


@dataclass(frozen=True)
class LevelSet:
    """Symbols that fill a cell in steps of one eighth."""

    full: str
    seven_eighths: str
    three_quarters: str
    five_eighths: str
    half: str
    three_eighths: str
    one_quarter: str
    one_eighth: str
    empty: str

    def for_level(self, eighths: int) -> str:
        """Return the symbol for a fill level in eighths; 8 or more is full."""
        if eighths < 0:
            raise ValueError(f"fill level must not be negative, got {eighths}")
        if eighths >= 8:
            return self.full
        return (
            self.empty,
            self.one_eighth,
            self.one_quarter,
            self.three_eighths,
            self.half,
            self.five_eighths,
            self.three_quarters,
            self.seven_eighths,
        )[eighths]


BLOCK_THREE_LEVELS = LevelSet(
    full=BLOCK_FULL,
    seven_eighths=BLOCK_FULL,
    three_quarters=BLOCK_HALF,
    five_eighths=BLOCK_HALF,
    half=BLOCK_HALF,
    three_eighths=BLOCK_HALF,
    one_quarter=BLOCK_HALF,
    one_eighth=" ",
    empty=" ",
)

BLOCK_NINE_LEVELS = LevelSet(
    full=BLOCK_FULL,
    seven_eighths=BLOCK_SEVEN_EIGHTHS,
    three_quarters=BLOCK_THREE_QUARTERS,
    five_eighths=BLOCK_FIVE_EIGHTHS,
    half=BLOCK_HALF,
    three_eighths=BLOCK_THREE_EIGHTHS,
    one_quarter=BLOCK_ONE_QUARTER,
    one_eighth=BLOCK_ONE_EIGHTH,
    empty=" ",
)

BAR_THREE_LEVELS = LevelSet(
    full=BAR_FULL,
    seven_eighths=BAR_FULL,
    three_quarters=BAR_HALF,
    five_eighths=BAR_HALF,
    half=BAR_HALF,
    three_eighths=BAR_HALF,
    one_quarter=BAR_HALF,
    one_eighth=" ",
    empty=" ",
)

BAR_NINE_LEVELS = LevelSet(
    full=BAR_FULL,
    seven_eighths=BAR_SEVEN_EIGHTHS,
    three_quarters=BAR_THREE_QUARTERS,
    five_eighths=BAR_FIVE_EIGHTHS,
    half=BAR_HALF,
    three_eighths=BAR_THREE_EIGHTHS,
    one_quarter=BAR_ONE_QUARTER,
    one_eighth=BAR_ONE_EIGHTH,
    empty=" ",
)

VERTICAL = "│"
DOUBLE_VERTICAL = "║"
THICK_VERTICAL = "┃"

HORIZONTAL = "─"
DOUBLE_HORIZONTAL = "═"
THICK_HORIZONTAL = "━"

TOP_RIGHT = "┐"
ROUNDED_TOP_RIGHT = "╮"
DOUBLE_TOP_RIGHT = "╗"
THICK_TOP_RIGHT = "┓"

TOP_LEFT = "┌"
ROUNDED_TOP_LEFT = "╭"
DOUBLE_TOP_LEFT = "╔"
THICK_TOP_LEFT = "┏"

BOTTOM_RIGHT = "┘"
ROUNDED_BOTTOM_RIGHT = "╯"
DOUBLE_BOTTOM_RIGHT = "╝"
THICK_BOTTOM_RIGHT = "┛"

BOTTOM_LEFT = "└"
ROUNDED_BOTTOM_LEFT = "╰"
DOUBLE_BOTTOM_LEFT = "╚"
THICK_BOTTOM_LEFT = "┗"

VERTICAL_LEFT = "┤"
DOUBLE_VERTICAL_LEFT = "╣"
THICK_VERTICAL_LEFT = "┫"

VERTICAL_RIGHT = "├"
DOUBLE_VERTICAL_RIGHT = "╠"
THICK_VERTICAL_RIGHT = "┣"

HORIZONTAL_DOWN = "┬"
DOUBLE_HORIZONTAL_DOWN = "╦"
THICK_HORIZONTAL_DOWN = "┳"

HORIZONTAL_UP = "┴"
DOUBLE_HORIZONTAL_UP = "╩"
THICK_HORIZONTAL_UP = "┻"

CROSS = "┼"
DOUBLE_CROSS = "╬"
THICK_CROSS = "╋"


@dataclass(frozen=True)
class LineSet:
    """Symbols for drawing box borders."""

    vertical: str
    horizontal: str
    top_right: str
    top_left: str
    bottom_right: str
    bottom_left: str
    vertical_left: str
    vertical_right: str
    horizontal_down: str
    horizontal_up: str
    cross: str


NORMAL = LineSet(
    vertical=VERTICAL,
    horizontal=HORIZONTAL,
    top_right=TOP_RIGHT,
    top_left=TOP_LEFT,
    bottom_right=BOTTOM_RIGHT,
    bottom_left=BOTTOM_LEFT,
    vertical_left=VERTICAL_LEFT,
    vertical_right=VERTICAL_RIGHT,
    horizontal_down=HORIZONTAL_DOWN,
    horizontal_up=HORIZONTAL_UP,
    cross=CROSS,
)

ROUNDED = replace(
    NORMAL,
    top_right=ROUNDED_TOP_RIGHT,
    top_left=ROUNDED_TOP_LEFT,
    bottom_right=ROUNDED_BOTTOM_RIGHT,
    bottom_left=ROUNDED_BOTTOM_LEFT,
)

DOUBLE = LineSet(
    vertical=DOUBLE_VERTICAL,
    horizontal=DOUBLE_HORIZONTAL,
    top_right=DOUBLE_TOP_RIGHT,
    top_left=DOUBLE_TOP_LEFT,
    bottom_right=DOUBLE_BOTTOM_RIGHT,
    bottom_left=DOUBLE_BOTTOM_LEFT,
    vertical_left=DOUBLE_VERTICAL_LEFT,
    vertical_right=DOUBLE_VERTICAL_RIGHT,
    horizontal_down=DOUBLE_HORIZONTAL_DOWN,
    horizontal_up=DOUBLE_HORIZONTAL_UP,
    cross=DOUBLE_CROSS,
)

THICK = LineSet(
    vertical=THICK_VERTICAL,
    horizontal=THICK_HORIZONTAL,
    top_right=THICK_TOP_RIGHT,
    top_left=THICK_TOP_LEFT,
    bottom_right=THICK_BOTTOM_RIGHT,
    bottom_left=THICK_BOTTOM_LEFT,
    vertical_left=THICK_VERTICAL_LEFT,
    vertical_right=THICK_VERTICAL_RIGHT,
    horizontal_down=THICK_HORIZONTAL_DOWN,
    horizontal_up=THICK_HORIZONTAL_UP,
    cross=THICK_CROSS,
)

DOT = "•"

BRAILLE_BLANK = 0x2800
BRAILLE_DOTS = (
    (0x0001, 0x0008),
    (0x0002, 0x0010),
    (0x0004, 0x0020),
    (0x0040, 0x0080),
)


class Marker(enum.Enum):
    """How data points are plotted."""

    DOT = "dot"
    """One point per cell in the shape of a dot."""
    BLOCK = "block"
    """One point per cell in the shape of a block."""
    BRAILLE = "braille"
    """Up to eight points per cell."""