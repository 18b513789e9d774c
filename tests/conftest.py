"""Test fixtures including StubHighlighter for deterministic painting."""

from __future__ import annotations

from io import StringIO

import pytest

from paintdiff.types.config import PaintConfig
from paintdiff.types.style import Color, Style, StyleModifier, StyleSection

MINUS = Color(0x3F, 0x00, 0x01)
MINUS_EMPH = Color(0x90, 0x10, 0x11)
PLUS = Color(0x01, 0x3B, 0x01)
PLUS_EMPH = Color(0x11, 0x83, 0x1D)
SYNTAX_FG = Color(248, 248, 242)
SYNTAX_STYLE = Style(foreground=SYNTAX_FG)


class StubHighlighter:
    """A deterministic highlighter that styles every line with one style.

    Usage:
        highlighter = StubHighlighter(split_words=True)
        highlighter.highlight("a b")  # [(SYNTAX_STYLE, "a"), (SYNTAX_STYLE, " "), ...]
    """

    def __init__(self, style: Style = SYNTAX_STYLE, split_words: bool = False) -> None:
        self.style = style
        self.split_words = split_words
        self.lines: list[str] = []
        self.reset_count = 0

    def highlight(self, line: str) -> list[StyleSection]:
        self.lines.append(line)
        if not self.split_words:
            return [(self.style, line)]
        sections: list[StyleSection] = []
        for i, word in enumerate(line.split(" ")):
            if i:
                sections.append((self.style, " "))
            if word:
                sections.append((self.style, word))
        return sections

    def reset(self) -> None:
        self.reset_count += 1


class GarblingHighlighter(StubHighlighter):
    """A highlighter whose sections do not reproduce the line."""

    def highlight(self, line: str) -> list[StyleSection]:
        return [(self.style, line[::-1])]


def make_config(**kwargs) -> PaintConfig:
    return PaintConfig(
        minus_style_modifier=StyleModifier(background=MINUS),
        minus_emph_style_modifier=StyleModifier(background=MINUS_EMPH),
        plus_style_modifier=StyleModifier(background=PLUS),
        plus_emph_style_modifier=StyleModifier(background=PLUS_EMPH),
        **kwargs,
    )


def bg(color: Color) -> str:
    return f"\x1b[48;2;{color.r};{color.g};{color.b}m"


def fg(color: Color) -> str:
    return f"\x1b[38;2;{color.r};{color.g};{color.b}m"


@pytest.fixture
def config() -> PaintConfig:
    return make_config()


@pytest.fixture
def output() -> StringIO:
    return StringIO()


@pytest.fixture
def stub_highlighter() -> StubHighlighter:
    return StubHighlighter()
