"""paintdiff: highlight the changed part of each line in a diff.

Usage:
    import sys
    import paintdiff

    config = paintdiff.build_config()
    painter = paintdiff.Painter(sys.stdout, config)
    painter.minus_lines.append("total = a + b")
    painter.plus_lines.append("total = a - b")
    painter.paint_buffered_lines()
    painter.emit()
"""

from paintdiff.core.classifier import BufferMode, background_sections
from paintdiff.core.compositor import StyleSectionMismatchError, superimpose_style_sections
from paintdiff.core.config import build_config
from paintdiff.core.diffstream import paint_diff
from paintdiff.core.locator import ChangeRange, change_ranges
from paintdiff.core.painter import Painter
from paintdiff.types.config import PaintConfig
from paintdiff.types.highlight import Highlighter
from paintdiff.types.style import NO_COLOR, Color, FontStyle, Style, StyleModifier

__version__ = "0.1.0"

__all__ = [
    # Painting
    "Painter",
    "paint_diff",
    # Core algorithms
    "BufferMode",
    "ChangeRange",
    "background_sections",
    "change_ranges",
    "superimpose_style_sections",
    "StyleSectionMismatchError",
    # Configuration
    "PaintConfig",
    "build_config",
    # Style types
    "NO_COLOR",
    "Color",
    "FontStyle",
    "Highlighter",
    "Style",
    "StyleModifier",
]
