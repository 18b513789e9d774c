"""Resolved paint configuration."""

from __future__ import annotations

from dataclasses import dataclass

from paintdiff.types.style import NO_STYLE, Style, StyleModifier


@dataclass(frozen=True, slots=True)
class PaintConfig:
    """Immutable settings for one painting run.

    The four modifiers set the background of removed ("minus") and added
    ("plus") lines, in a normal and an emphasized variant.
    """

    minus_style_modifier: StyleModifier
    minus_emph_style_modifier: StyleModifier
    plus_style_modifier: StyleModifier
    plus_emph_style_modifier: StyleModifier
    no_style: Style = NO_STYLE
    theme: str = "monokai"
    highlight_removed: bool = False
    font_styles: bool = False
    tab_width: int = 4
