import functools
import itertools

import pytest

from tuitext.style import Color, Indexed, Modifier, Rgb, Style

INDIVIDUAL_MODIFIERS = [
    Modifier.BOLD,
    Modifier.DIM,
    Modifier.ITALIC,
    Modifier.UNDERLINED,
    Modifier.SLOW_BLINK,
    Modifier.RAPID_BLINK,
    Modifier.REVERSED,
    Modifier.HIDDEN,
    Modifier.CROSSED_OUT,
]


def _styles():
    return [
        Style(),
        Style().with_fg(Color.YELLOW),
        Style().with_bg(Color.YELLOW),
        Style().adding(Modifier.BOLD),
        Style().removing(Modifier.BOLD),
        Style().adding(Modifier.ITALIC),
        Style().removing(Modifier.ITALIC),
        Style().adding(Modifier.ITALIC | Modifier.BOLD),
        Style().removing(Modifier.ITALIC | Modifier.BOLD),
    ]


def _chain(*styles):
    """Apply styles left to right, each one over the result so far."""
    return functools.reduce(Style.patch, styles)


def _nest(first, *rest):
    """Apply the combination of the later styles over the first one."""
    if not rest:
        return first
    return _chain(first, _nest(*rest))


def test_combined_patch_gives_same_result_as_individual_patch():
    styles = _styles()
    for a, b, c, d in itertools.product(styles, repeat=4):
        combined = _nest(a, b, c, d)
        assert _chain(Style(), a, b, c, d) == _chain(Style(), combined)


@pytest.mark.parametrize("modifier", INDIVIDUAL_MODIFIERS)
def test_combine_individual_modifiers(modifier):
    style = _chain(Style(), Style.reset(), Style().adding(modifier))
    assert modifier in style.add_modifier
    assert modifier not in style.sub_modifier


def test_default_changes_nothing():
    style = Style()
    assert style.fg is None
    assert style.bg is None
    assert style.add_modifier == Modifier.NONE
    assert style.sub_modifier == Modifier.NONE


def test_reset_style():
    style = Style.reset()
    assert style.fg == Color.RESET
    assert style.bg == Color.RESET
    assert style.add_modifier == Modifier.NONE
    assert style.sub_modifier == Modifier.ALL


def test_fg_patch_overrides():
    style = Style().with_fg(Color.BLUE)
    diff = Style().with_fg(Color.RED)
    assert _chain(style, diff) == Style().with_fg(Color.RED)


def test_bg_patch_overrides():
    style = Style().with_bg(Color.BLUE)
    diff = Style().with_bg(Color.RED)
    assert _chain(style, diff) == Style().with_bg(Color.RED)


def test_add_modifier_patch():
    style = Style().adding(Modifier.BOLD)
    diff = Style().adding(Modifier.ITALIC)
    patched = _chain(style, diff)
    assert patched.add_modifier == Modifier.BOLD | Modifier.ITALIC
    assert patched.sub_modifier == Modifier.NONE


def test_remove_modifier_patch():
    style = Style().adding(Modifier.BOLD | Modifier.ITALIC)
    diff = Style().removing(Modifier.ITALIC)
    patched = _chain(style, diff)
    assert patched.add_modifier == Modifier.BOLD
    assert patched.sub_modifier == Modifier.ITALIC


def test_patch_is_associative_with_default():
    style_1 = Style().with_fg(Color.YELLOW)
    style_2 = Style().with_bg(Color.RED)
    combined = _chain(style_1, style_2)
    assert _chain(Style(), style_1, style_2) == _chain(Style(), combined)


def test_sequence_of_styles_merges():
    styles = [
        Style().with_fg(Color.BLUE).adding(Modifier.BOLD | Modifier.ITALIC),
        Style().with_bg(Color.RED),
        Style().with_fg(Color.YELLOW).removing(Modifier.ITALIC),
    ]
    result = _chain(Style.reset(), *styles)
    assert result.fg == Color.YELLOW
    assert result.bg == Color.RED
    assert result.add_modifier == Modifier.BOLD
    assert Modifier.ITALIC in result.sub_modifier


def test_reset_then_fg():
    start = Style().with_fg(Color.BLUE).adding(Modifier.BOLD | Modifier.ITALIC)
    result = _chain(start, Style.reset().with_fg(Color.YELLOW))
    assert result.fg == Color.YELLOW
    assert result.bg == Color.RESET
    assert result.add_modifier == Modifier.NONE


def test_adding_then_removing_cancels():
    style = Style().adding(Modifier.BOLD).removing(Modifier.BOLD)
    assert style.add_modifier == Modifier.NONE
    assert style.sub_modifier == Modifier.BOLD


def test_style_is_immutable():
    style = Style()
    style.with_fg(Color.RED)
    assert style.fg is None


def test_rgb_and_indexed_colours():
    style = Style().with_fg(Rgb(1, 2, 3)).with_bg(Indexed(200))
    assert style.fg == Rgb(1, 2, 3)
    assert style.bg == Indexed(200)


@pytest.mark.parametrize("args", [(256, 0, 0), (0, -1, 0), (0, 0, 1000)])
def test_rgb_rejects_out_of_range(args):
    with pytest.raises(ValueError):
        Rgb(*args)


def test_indexed_rejects_out_of_range():
    with pytest.raises(ValueError):
        Indexed(256)


def test_reset_removes_every_modifier():
    style = Style.reset()
    for modifier in INDIVIDUAL_MODIFIERS:
        assert modifier in style.sub_modifier
        assert modifier not in style.add_modifier