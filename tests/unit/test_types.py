"""Tests for paintdiff.types module."""

import pytest

from paintdiff.types.highlight import Highlighter
from paintdiff.types.style import (
    NO_COLOR,
    NO_STYLE,
    Color,
    FontStyle,
    Style,
    StyleModifier,
)
from tests.conftest import StubHighlighter

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


class TestColor:
    def test_from_hex(self):
        assert Color.from_hex("#3f0001") == Color(0x3F, 0x00, 0x01)

    def test_from_hex_without_hash(self):
        assert Color.from_hex("ffc0c0") == Color(255, 192, 192)

    def test_from_hex_invalid_length(self):
        with pytest.raises(ValueError):
            Color.from_hex("#fff")

    def test_from_hex_invalid_digits(self):
        with pytest.raises(ValueError):
            Color.from_hex("#gggggg")

    def test_to_hex(self):
        assert Color(1, 2, 255).to_hex() == "#0102ff"
        assert NO_COLOR.to_hex() == "none"

    def test_no_color_differs_from_black(self):
        assert NO_COLOR != BLACK


class TestStyleApply:
    def test_set_channels_override(self):
        style = Style(foreground=BLACK, background=BLACK, font_style=FontStyle.BOLD)
        modifier = StyleModifier(
            foreground=WHITE, background=WHITE, font_style=FontStyle.UNDERLINE,
        )
        assert style.apply(modifier) == Style(
            foreground=WHITE, background=WHITE, font_style=FontStyle.UNDERLINE,
        )

    def test_unset_channels_pass_through(self):
        style = Style(foreground=BLACK, background=BLACK, font_style=FontStyle.BOLD)
        assert style.apply(StyleModifier(background=WHITE)) == Style(
            foreground=BLACK, background=WHITE, font_style=FontStyle.BOLD,
        )

    def test_empty_modifier_is_identity(self):
        style = Style(foreground=WHITE)
        assert style.apply(StyleModifier()) is style

    def test_no_color_is_a_value_not_unset(self):
        style = Style(foreground=WHITE, background=WHITE)
        assert style.apply(StyleModifier(background=NO_COLOR)).background == NO_COLOR

    def test_default_style(self):
        assert NO_STYLE.foreground == NO_COLOR
        assert NO_STYLE.background == NO_COLOR
        assert NO_STYLE.font_style == FontStyle(0)


class TestStyleModifierCompose:
    def test_later_modifier_wins(self):
        first = StyleModifier(foreground=BLACK, background=BLACK)
        second = StyleModifier(background=WHITE)
        assert first.compose(second) == StyleModifier(foreground=BLACK, background=WHITE)

    def test_compose_matches_sequential_apply(self):
        style = Style(foreground=BLACK, font_style=FontStyle.ITALIC)
        first = StyleModifier(foreground=WHITE, background=BLACK)
        second = StyleModifier(background=WHITE, font_style=FontStyle.BOLD)
        assert style.apply(first).apply(second) == style.apply(first.compose(second))


class TestHighlighterProtocol:
    def test_stub_satisfies_protocol(self):
        assert isinstance(StubHighlighter(), Highlighter)
