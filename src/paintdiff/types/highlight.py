"""Syntax highlighter contract."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from paintdiff.types.style import StyleSection


@runtime_checkable
class Highlighter(Protocol):
    """Protocol that syntax highlighters must implement."""

    def highlight(self, line: str) -> list[StyleSection]:
        """Return styled sections whose text concatenates to exactly *line*."""
        ...

    def reset(self) -> None:
        """Discard any grammar state carried over from previous lines."""
        ...
