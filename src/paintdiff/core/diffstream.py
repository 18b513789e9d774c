"""Read a unified diff line by line and feed it to a ``Painter``."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from enum import Enum

from paintdiff.core.painter import Painter
from paintdiff.types.highlight import Highlighter

logger = logging.getLogger(__name__)

HighlighterFactory = Callable[[str], Highlighter | None]

HUNK_HEADER_RE = re.compile(r"^@@ -\d+(?:,(\d+))? \+\d+(?:,(\d+))? @@")


class LineKind(Enum):
    HEADER = "header"
    HUNK_HEADER = "hunk_header"
    MINUS = "minus"
    PLUS = "plus"
    CONTEXT = "context"
    OTHER = "other"


def classify_line(line: str, in_hunk: bool) -> LineKind:
    """Classify one diff line. Marker lines only count inside a hunk."""
    if line.startswith("@@"):
        return LineKind.HUNK_HEADER
    if in_hunk:
        if line.startswith("-"):
            return LineKind.MINUS
        if line.startswith("+"):
            return LineKind.PLUS
        if line.startswith(" ") or line == "":
            return LineKind.CONTEXT
    if line.startswith(("diff ", "--- ", "+++ ", "index ")):
        return LineKind.HEADER
    return LineKind.OTHER


def hunk_line_counts(line: str) -> tuple[int, int] | None:
    """Return the old and new line counts of a ``@@`` header.

    An omitted count means one line. Returns ``None`` when the header does
    not have the unified ``-a,b +c,d`` shape.
    """
    match = HUNK_HEADER_RE.match(line)
    if match is None:
        return None
    old_count, new_count = match.groups()
    return int(old_count or 1), int(new_count or 1)


def path_from_header(line: str) -> str | None:
    """Extract the file path from a ``---``/``+++`` header line."""
    path = line[4:].split("\t", 1)[0].strip()
    if path == "/dev/null":
        return None
    if path.startswith(("a/", "b/")):
        path = path[2:]
    return path or None


class DiffStream:
    """Drives a ``Painter`` over the lines of a unified diff."""

    def __init__(self, painter: Painter, highlighter_factory: HighlighterFactory) -> None:
        self._painter = painter
        self._highlighter_factory = highlighter_factory
        self._in_hunk = False
        # Lines still owed to the current hunk; None when the header did not parse.
        self._remaining: tuple[int, int] | None = None
        self._old_path: str | None = None
        self._current_path: str | None = None

    @property
    def current_path(self) -> str | None:
        return self._current_path

    def feed(self, raw_line: str) -> None:
        line = raw_line.rstrip("\n").rstrip("\r")
        kind = classify_line(line, self._in_hunk)
        painter = self._painter

        match kind:
            case LineKind.MINUS:
                # A removed line after added lines starts a new region.
                if painter.plus_lines:
                    self._paint_region()
                painter.minus_lines.append(self._prepare(line))
                self._consume(1, 0)
            case LineKind.PLUS:
                painter.plus_lines.append(self._prepare(line))
                self._consume(0, 1)
            case LineKind.CONTEXT:
                self._paint_region()
                painter.paint_unchanged_line(self._prepare(line))
                self._consume(1, 1)
            case LineKind.HUNK_HEADER:
                self._paint_region()
                self._remaining = hunk_line_counts(line)
                self._in_hunk = self._remaining != (0, 0)
                painter.write_raw_line(line)
            case LineKind.HEADER:
                self._paint_region()
                self._in_hunk = False
                self._remaining = None
                self._track_path(line)
                painter.write_raw_line(line)
            case LineKind.OTHER:
                self._paint_region()
                painter.write_raw_line(line)

    def close(self) -> None:
        """Paint anything still buffered and flush the output."""
        self._paint_region()
        self._painter.emitter.reset()
        self._painter.emit()

    def _paint_region(self) -> None:
        if self._painter.has_buffered_lines:
            self._painter.paint_buffered_lines()
            self._painter.emit()

    def _consume(self, old: int, new: int) -> None:
        if self._remaining is None:
            return
        old_left = max(self._remaining[0] - old, 0)
        new_left = max(self._remaining[1] - new, 0)
        self._remaining = (old_left, new_left)
        if self._remaining == (0, 0):
            self._in_hunk = False

    def _prepare(self, line: str) -> str:
        text = line[1:]
        if self._painter.config.tab_width:
            text = text.expandtabs(self._painter.config.tab_width)
        return text

    def _track_path(self, line: str) -> None:
        if line.startswith("--- "):
            self._old_path = path_from_header(line)
        elif line.startswith("+++ "):
            path = path_from_header(line) or self._old_path
            if path != self._current_path:
                self._current_path = path
                highlighter = self._highlighter_factory(path) if path else None
                logger.debug("Switching syntax for %s", path)
                self._painter.set_highlighter(highlighter)


def paint_diff(lines: Iterable[str], painter: Painter, highlighter_factory: HighlighterFactory) -> None:
    """Paint every line of a unified diff and flush the result."""
    stream = DiffStream(painter, highlighter_factory)
    for line in lines:
        stream.feed(line)
    stream.close()
