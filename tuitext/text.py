"""Styled text: single-style spans, styled lines and multi-line text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Union

import regex
from wcwidth import wcwidth

from tuitext.style import Style

_GRAPHEME = regex.compile(r"\X")


def _str_width(content: str) -> int:
    """Display width of a string; characters without a width count as zero."""
    return sum(max(wcwidth(char), 0) for char in content)


def _split_lines(content: str) -> List[str]:
    """Split on line feeds, dropping a trailing empty line and any trailing CR."""
    parts = content.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


@dataclass(frozen=True)
class StyledGrapheme:
    """A grapheme cluster paired with the style it is drawn in."""

    symbol: str
    style: Style


@dataclass
class Span:
    """A string in which every grapheme has the same style."""

    content: str
    style: Style = field(default_factory=Style)

    @staticmethod
    def raw(content: str) -> "Span":
        """Create an unstyled span."""
        return Span(content)

    @staticmethod
    def styled(content: str, style: Style) -> "Span":
        """Create a span with the given style."""
        return Span(content, style)

    def width(self) -> int:
        """Return the display width of the content."""
        return _str_width(self.content)

    def styled_graphemes(self, base_style: Style) -> Iterator[StyledGrapheme]:
        """Yield each grapheme with ``base_style`` patched by this span's style.

        Line feeds are skipped.
        """
        style = base_style.patch(self.style)
        for grapheme in _GRAPHEME.findall(self.content):
            if grapheme != "\n":
                yield StyledGrapheme(grapheme, style)


SpansLike = Union[str, Span, "Spans", Iterable[Span]]


@dataclass
class Spans:
    """A single line made of spans, each with its own style."""

    spans: List[Span] = field(default_factory=list)

    @staticmethod
    def of(value: SpansLike) -> "Spans":
        """Build a line from a string, a span, a line or a sequence of spans."""
        if isinstance(value, Spans):
            return value
        if isinstance(value, str):
            return Spans([Span.raw(value)])
        if isinstance(value, Span):
            return Spans([value])
        return Spans(list(value))

    def width(self) -> int:
        """Return the display width of the whole line."""
        return sum(span.width() for span in self.spans)

    def __iter__(self) -> Iterator[Span]:
        return iter(self.spans)

    def __len__(self) -> int:
        return len(self.spans)

    def __str__(self) -> str:
        return "".join(span.content for span in self.spans)


TextLike = Union[str, Span, Spans, "Text", Iterable[Spans]]


@dataclass
class Text:
    """Text over several lines, each made of independently styled spans."""

    lines: List[Spans] = field(default_factory=list)

    @staticmethod
    def raw(content: str) -> "Text":
        """Create unstyled text, one line per line of ``content``."""
        if content == "":
            return Text([Spans.of("")])
        return Text([Spans.of(line) for line in _split_lines(content)])

    @staticmethod
    def styled(content: str, style: Style) -> "Text":
        """Create text whose every span is patched with ``style``."""
        text = Text.raw(content)
        text.patch_style(style)
        return text

    @staticmethod
    def of(value: TextLike) -> "Text":
        """Build text from a string, a span, a line or a sequence of lines."""
        if isinstance(value, Text):
            return value
        if isinstance(value, str):
            return Text.raw(value)
        if isinstance(value, Span):
            return Text([Spans.of(value)])
        if isinstance(value, Spans):
            return Text([value])
        return Text(list(value))

    def width(self) -> int:
        """Return the width of the widest line, or 0 with no lines."""
        return max((line.width() for line in self.lines), default=0)

    def height(self) -> int:
        """Return the number of lines."""
        return len(self.lines)

    def patch_style(self, style: Style) -> None:
        """Patch the style of every span in place."""
        for line in self.lines:
            for span in line.spans:
                span.style = span.style.patch(style)

    def extend(self, lines: Iterable[Spans]) -> None:
        """Append lines, for instance those of another ``Text``."""
        self.lines.extend(lines)

    def __iter__(self) -> Iterator[Spans]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)