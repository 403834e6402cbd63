"""Colours, text modifiers and incremental styles for terminal cells."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Union


class Color(enum.Enum):
    """Named terminal colours."""

    RESET = "reset"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    GRAY = "gray"
    DARK_GRAY = "dark_gray"
    LIGHT_RED = "light_red"
    LIGHT_GREEN = "light_green"
    LIGHT_YELLOW = "light_yellow"
    LIGHT_BLUE = "light_blue"
    LIGHT_MAGENTA = "light_magenta"
    LIGHT_CYAN = "light_cyan"
    WHITE = "white"


def _check_byte(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")


@dataclass(frozen=True)
class Rgb:
    """A true-colour value with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _check_byte("r", self.r)
        _check_byte("g", self.g)
        _check_byte("b", self.b)


@dataclass(frozen=True)
class Indexed:
    """A colour from the 256-colour palette."""

    index: int

    def __post_init__(self) -> None:
        _check_byte("index", self.index)


AnyColor = Union[Color, Rgb, Indexed]


class Modifier(enum.Flag):
    """Text emphasis flags that can be combined with ``|``."""

    NONE = 0
    BOLD = 0b0000_0000_0001
    DIM = 0b0000_0000_0010
    ITALIC = 0b0000_0000_0100
    UNDERLINED = 0b0000_0000_1000
    SLOW_BLINK = 0b0000_0001_0000
    RAPID_BLINK = 0b0000_0010_0000
    REVERSED = 0b0000_0100_0000
    HIDDEN = 0b0000_1000_0000
    CROSSED_OUT = 0b0001_0000_0000
    ALL = 0b0001_1111_1111


def _without(flags: Modifier, removed: Modifier) -> Modifier:
    return Modifier(flags.value & ~removed.value)


@dataclass(frozen=True)
class Style:
    """An incremental change to a cell's colours and modifiers.

    The default style changes nothing; applying styles one after another
    merges them rather than replacing earlier ones.
    """

    fg: Optional[AnyColor] = None
    bg: Optional[AnyColor] = None
    add_modifier: Modifier = field(default=Modifier.NONE)
    sub_modifier: Modifier = field(default=Modifier.NONE)

    @classmethod
    def reset(cls) -> "Style":
        """Return a style that resets every property."""
        return cls(
            fg=Color.RESET,
            bg=Color.RESET,
            add_modifier=Modifier.NONE,
            sub_modifier=Modifier.ALL,
        )

    def with_fg(self, color: AnyColor) -> "Style":
        """Return a copy with the foreground colour set."""
        return Style(color, self.bg, self.add_modifier, self.sub_modifier)

    def with_bg(self, color: AnyColor) -> "Style":
        """Return a copy with the background colour set."""
        return Style(self.fg, color, self.add_modifier, self.sub_modifier)

    def adding(self, modifier: Modifier) -> "Style":
        """Return a copy that adds the given modifiers."""
        return Style(
            self.fg,
            self.bg,
            self.add_modifier | modifier,
            _without(self.sub_modifier, modifier),
        )

    def removing(self, modifier: Modifier) -> "Style":
        """Return a copy that removes the given modifiers."""
        return Style(
            self.fg,
            self.bg,
            _without(self.add_modifier, modifier),
            self.sub_modifier | modifier,
        )

    def patch(self, other: "Style") -> "Style":
        """Combine two styles as if ``other`` were applied after this one."""
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            add_modifier=_without(self.add_modifier, other.sub_modifier) | other.add_modifier,
            sub_modifier=_without(self.sub_modifier, other.add_modifier) | other.sub_modifier,
        )