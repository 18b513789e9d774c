"""Syntax highlighting of single lines via pygments lexers and rich themes."""

from __future__ import annotations

import logging
from typing import Any

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, get_lexer_for_filename
from pygments.util import ClassNotFound
from rich.style import Style as RichStyle
from rich.syntax import PygmentsSyntaxTheme

from paintdiff.types.style import NO_COLOR, Color, FontStyle, Style, StyleSection

logger = logging.getLogger(__name__)

# Lines carry no terminator; keep the lexer from adding or stripping one.
LEXER_OPTIONS = {"stripnl": False, "stripall": False, "ensurenl": False}


def to_style(rich_style: RichStyle) -> Style:
    """Convert a rich style to a foreground-only ``Style``.

    Theme backgrounds are dropped so that diff backgrounds show through.
    """
    foreground = NO_COLOR
    if rich_style.color is not None:
        triplet = rich_style.color.get_truecolor()
        foreground = Color(triplet.red, triplet.green, triplet.blue)

    font_style = FontStyle(0)
    if rich_style.bold:
        font_style |= FontStyle.BOLD
    if rich_style.italic:
        font_style |= FontStyle.ITALIC
    if rich_style.underline:
        font_style |= FontStyle.UNDERLINE
    return Style(foreground=foreground, background=NO_COLOR, font_style=font_style)


class PygmentsHighlighter:
    """Highlights one line at a time for a fixed language and theme."""

    def __init__(self, lexer: Lexer, theme: str = "monokai") -> None:
        self._lexer = lexer
        self._theme = PygmentsSyntaxTheme(theme)
        self._styles: dict[Any, Style] = {}

    @classmethod
    def for_language(cls, language: str, theme: str = "monokai") -> PygmentsHighlighter:
        """Raises ``pygments.util.ClassNotFound`` for an unknown language."""
        return cls(get_lexer_by_name(language, **LEXER_OPTIONS), theme)

    @classmethod
    def for_filename(cls, filename: str, theme: str = "monokai") -> PygmentsHighlighter | None:
        """Pick a lexer from *filename*; ``None`` when no lexer matches."""
        try:
            lexer = get_lexer_for_filename(filename, **LEXER_OPTIONS)
        except ClassNotFound:
            logger.warning("No syntax found for %s; painting without highlighting", filename)
            return None
        return cls(lexer, theme)

    @property
    def language(self) -> str:
        return self._lexer.name

    def highlight(self, line: str) -> list[StyleSection]:
        # get_tokens() rewrites \r and drops a leading BOM; the raw token
        # stream keeps the text intact.
        return [
            (self._style_for(token_type), value)
            for _, token_type, value in self._lexer.get_tokens_unprocessed(line)
            if value
        ]

    def reset(self) -> None:
        self._lexer = type(self._lexer)(**LEXER_OPTIONS)

    def _style_for(self, token_type: Any) -> Style:
        try:
            return self._styles[token_type]
        except KeyError:
            style = to_style(self._theme.get_style_for_token(token_type))
            self._styles[token_type] = style
            return style
