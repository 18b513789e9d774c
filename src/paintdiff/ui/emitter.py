"""Truecolor ANSI output for styled sections."""

from __future__ import annotations

import logging
from typing import TextIO

from paintdiff.types.style import NO_COLOR, FontStyle, Style

logger = logging.getLogger(__name__)

RESET = "\x1b[0m"

FONT_STYLE_CODES: dict[FontStyle, int] = {
    FontStyle.BOLD: 1,
    FontStyle.ITALIC: 3,
    FontStyle.UNDERLINE: 4,
}


def background_escape(style: Style) -> str:
    bg = style.background
    return f"\x1b[48;2;{bg.r};{bg.g};{bg.b}m"


def foreground_escape(style: Style) -> str:
    fg = style.foreground
    return f"\x1b[38;2;{fg.r};{fg.g};{fg.b}m"


def font_style_escape(style: Style) -> str:
    codes = [str(code) for flag, code in FONT_STYLE_CODES.items() if flag in style.font_style]
    return f"\x1b[{';'.join(codes)}m" if codes else ""


def paint_section(
    text: str,
    style: Style,
    buffer: list[str],
    *,
    font_styles: bool = False,
) -> None:
    """Append *text* with the escape codes for *style* to *buffer*.

    A channel set to ``NO_COLOR`` emits nothing. No reset code is written:
    each section sets the channels it needs and later sections override.
    """
    if style.background != NO_COLOR:
        buffer.append(background_escape(style))
    if font_styles:
        buffer.append(font_style_escape(style))
    if style.foreground != NO_COLOR:
        buffer.append(foreground_escape(style))
    buffer.append(text)


class TerminalEmitter:
    """Accumulates painted output and writes it to *writer* on flush."""

    def __init__(self, writer: TextIO, *, font_styles: bool = False) -> None:
        self._writer = writer
        self._font_styles = font_styles
        self._buffer: list[str] = []

    @property
    def buffer(self) -> str:
        return "".join(self._buffer)

    def paint_section(self, text: str, style: Style) -> None:
        paint_section(text, style, self._buffer, font_styles=self._font_styles)

    def paint_line(self, sections: list[tuple[Style, str]]) -> None:
        for style, text in sections:
            self.paint_section(text, style)
        self.end_line()

    def end_line(self) -> None:
        self._buffer.append("\n")

    def reset(self) -> None:
        self._buffer.append(RESET)

    def write_raw(self, text: str) -> None:
        self._buffer.append(text)

    def flush(self) -> None:
        """Write the buffer to the output stream in one call, then clear it.

        Write errors propagate and leave the buffer intact.
        """
        if not self._buffer:
            return
        output = "".join(self._buffer)
        self._writer.write(output)
        self._buffer.clear()
        logger.debug("Flushed %d characters", len(output))
