# tuitext

Building blocks for styled text in terminal user interfaces:

- `tuitext.style`: the named colours of `Color`, true colours (`Rgb`) and
  palette colours (`Indexed`), the `Modifier` flags (bold, dim, italic,
  underlined, …) and `Style`, an incremental change to how a cell is drawn.
- `tuitext.symbols`: block and bar glyphs at three or nine levels
  (`LevelSet`), box-drawing line sets (`LineSet`), braille constants and
  the `Marker` kinds.
- `tuitext.text`: `Span` (one style), `Spans` (one line of spans) and
  `Text` (several lines), with display widths that count wide characters
  correctly and iteration over grapheme clusters.

## Installing

```
pip install tuitext
```

## Styles

A `Style` holds what it changes and nothing else. Patching one style with
another gives the same result as applying both in turn. Styles are frozen;
every method returns a new one.

```python
from tuitext.style import Color, Indexed, Modifier, Rgb, Style

base = Style().with_fg(Color.BLUE).adding(Modifier.BOLD | Modifier.ITALIC)
change = Style().with_bg(Color.RED).removing(Modifier.ITALIC)

merged = base.patch(change)
# merged.fg == Color.BLUE, merged.bg == Color.RED
# merged.add_modifier == Modifier.BOLD, merged.sub_modifier == Modifier.ITALIC

Style.reset()   # both colours Color.RESET, every modifier in sub_modifier

Style().with_fg(Rgb(255, 128, 0)).with_bg(Indexed(236))
```

`Rgb` channels and `Indexed` indices must be integers from 0 to 255;
anything else raises `ValueError`.

## Symbols

The level sets and line sets are module-level constants:
`BLOCK_THREE_LEVELS`, `BLOCK_NINE_LEVELS`, `BAR_THREE_LEVELS`,
`BAR_NINE_LEVELS`, and `NORMAL`, `ROUNDED`, `DOUBLE`, `THICK`.

```python
from tuitext.symbols import BAR_NINE_LEVELS, ROUNDED, Marker

BAR_NINE_LEVELS.for_level(4)    # "▄"
BAR_NINE_LEVELS.for_level(12)   # "█" (8 or more is full)
ROUNDED.top_left                # "╭"
Marker.BRAILLE
```

`for_level` raises `ValueError` for a negative level.

## Text

```python
from tuitext.style import Color, Style
from tuitext.text import Span, Spans, Text

line = Spans.of([Span.styled("My", Style().with_fg(Color.YELLOW)), Span.raw(" text")])
line.width()                 # 7
str(line)                    # "My text"

text = Text.of("The first line\nThe second line")
text.height()                # 2
text.width()                 # 15
text.extend(Text.raw("These are two\nmore lines!"))
text.height()                # 4

text.patch_style(Style().with_fg(Color.GREEN))   # patches every span in place

for grapheme in Span.raw("Text").styled_graphemes(Style().with_bg(Color.BLACK)):
    print(grapheme.symbol, grapheme.style)
```

`Text.raw` splits on line feeds, dropping a trailing carriage return from
each line and a final empty line; an empty string gives one empty line.
`styled_graphemes` skips line feeds.

## What it does not do

The package describes styles, symbols and styled text only. It has no cell
buffer, no layout, no widgets and no terminal output: nothing here draws to
a screen.

## Running the tests

```
pip install -e ".[test]"
pytest
```