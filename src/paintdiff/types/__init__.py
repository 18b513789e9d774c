"""Type definitions for paintdiff."""

from paintdiff.types.config import PaintConfig
from paintdiff.types.highlight import Highlighter
from paintdiff.types.style import (
    NO_COLOR,
    NO_FONT_STYLE,
    NO_STYLE,
    Color,
    FontStyle,
    ModifierSection,
    Style,
    StyleModifier,
    StyleSection,
)

__all__ = [
    "NO_COLOR",
    "NO_FONT_STYLE",
    "NO_STYLE",
    "Color",
    "FontStyle",
    "Highlighter",
    "ModifierSection",
    "PaintConfig",
    "Style",
    "StyleModifier",
    "StyleSection",
]
