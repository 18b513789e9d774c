"""Paint buffered removed/added lines with diff backgrounds over syntax highlighting."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TextIO

from paintdiff.core.classifier import BackgroundSections, background_sections
from paintdiff.core.compositor import StyleSectionMismatchError, superimpose_style_sections
from paintdiff.types.config import PaintConfig
from paintdiff.types.highlight import Highlighter
from paintdiff.types.style import ModifierSection, StyleModifier, StyleSection
from paintdiff.ui.emitter import TerminalEmitter

logger = logging.getLogger(__name__)

NO_MODIFIER = StyleModifier()


class Painter:
    """Buffers one region of removed ("minus") and added ("plus") lines at a
    time and paints it into an output buffer.

    Usage:
        painter = Painter(sys.stdout, config, highlighter)
        painter.minus_lines.append("x = 1")
        painter.plus_lines.append("x = 2")
        painter.paint_buffered_lines()
        painter.emit()
    """

    def __init__(
        self,
        writer: TextIO,
        config: PaintConfig,
        highlighter: Highlighter | None = None,
    ) -> None:
        self.minus_lines: list[str] = []
        self.plus_lines: list[str] = []
        self.config = config
        self.emitter = TerminalEmitter(writer, font_styles=config.font_styles)
        self._highlighter = highlighter

    @property
    def highlighter(self) -> Highlighter | None:
        return self._highlighter

    def set_highlighter(self, highlighter: Highlighter | None) -> None:
        """Switch the active syntax. Buffered lines are painted first."""
        if self.minus_lines or self.plus_lines:
            self.paint_buffered_lines()
        self._highlighter = highlighter
        self.reset_highlighter()

    def reset_highlighter(self) -> None:
        if self._highlighter is not None:
            self._highlighter.reset()

    @property
    def has_buffered_lines(self) -> bool:
        return bool(self.minus_lines or self.plus_lines)

    def paint_buffered_lines(self) -> BackgroundSections:
        """Paint and clear the buffered region."""
        sections = background_sections(self.minus_lines, self.plus_lines, self.config)
        try:
            if self.minus_lines:
                self.paint_lines(self.minus_lines, sections.minus, self.config.highlight_removed)
            if self.plus_lines:
                self.paint_lines(self.plus_lines, sections.plus, True)
        finally:
            self.minus_lines.clear()
            self.plus_lines.clear()
        return sections

    def paint_lines(
        self,
        lines: Sequence[str],
        line_style_sections: Sequence[list[ModifierSection]],
        syntax_highlight: bool,
    ) -> None:
        """Superimpose background styles on syntax highlighting and paint each line."""
        for line, style_sections in zip(lines, line_style_sections):
            syntax_sections = self._syntax_sections(line, syntax_highlight)
            try:
                superimposed = superimpose_style_sections(syntax_sections, style_sections)
            except StyleSectionMismatchError as exc:
                logger.error("Style sections do not match line %r", line)
                exc.add_note(f"while painting line {line!r}")
                raise
            self.emitter.paint_line(superimposed)

    def paint_unchanged_line(self, line: str) -> None:
        """Paint a context line: syntax highlighting, no diff background."""
        self.emitter.reset()
        self.paint_lines([line], [[(NO_MODIFIER, line)]], True)

    def write_raw_line(self, line: str) -> None:
        self.emitter.reset()
        self.emitter.write_raw(line)
        self.emitter.end_line()

    def emit(self) -> None:
        """Write the output buffer to the output stream, and clear the buffer."""
        self.emitter.flush()

    def _syntax_sections(self, line: str, syntax_highlight: bool) -> list[StyleSection]:
        if syntax_highlight and self._highlighter is not None:
            return self._highlighter.highlight(line)
        return [(self.config.no_style, line)]
