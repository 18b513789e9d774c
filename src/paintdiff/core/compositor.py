"""Superimpose background style sections onto syntax highlighting sections.

Both inputs describe the same line but may be segmented differently. They
are exploded onto a per-character grid, combined character by character,
and coalesced back into the minimal run of sections.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

from paintdiff.types.style import ModifierSection, Style, StyleModifier, StyleSection

T = TypeVar("T")


class StyleSectionMismatchError(Exception):
    """The two section sequences do not describe the same text.

    This is a defect in the caller's line bookkeeping, never a condition to
    recover from.
    """

    def __init__(self, position: int, expected: str | None, found: str | None) -> None:
        self.position = position
        self.expected = expected
        self.found = found
        super().__init__(
            "String mismatch encountered while superimposing style sections "
            f"at position {position}: {expected!r} vs {found!r}"
        )


def superimpose_style_sections(
    sections_1: Sequence[StyleSection],
    sections_2: Sequence[ModifierSection],
) -> list[StyleSection]:
    """Apply the modifiers of *sections_2* on top of the styles of *sections_1*."""
    return coalesce(superimpose(explode(sections_1), explode(sections_2)))


def explode(style_sections: Iterable[tuple[T, str]]) -> list[tuple[T, str]]:
    """Expand sections into one ``(style, char)`` pair per character."""
    return [(style, c) for style, text in style_sections for c in text]


def superimpose(
    styled_chars: Sequence[tuple[Style, str]],
    modified_chars: Sequence[tuple[StyleModifier, str]],
) -> list[tuple[Style, str]]:
    superimposed: list[tuple[Style, str]] = []
    for i, ((style, c1), (modifier, c2)) in enumerate(zip(styled_chars, modified_chars)):
        if c1 != c2:
            raise StyleSectionMismatchError(i, c1, c2)
        superimposed.append((style.apply(modifier), c1))

    if len(styled_chars) != len(modified_chars):
        n = min(len(styled_chars), len(modified_chars))
        raise StyleSectionMismatchError(
            n,
            styled_chars[n][1] if n < len(styled_chars) else None,
            modified_chars[n][1] if n < len(modified_chars) else None,
        )
    return superimposed


def coalesce(styled_chars: Iterable[tuple[Style, str]]) -> list[StyleSection]:
    """Merge consecutive characters with identical style into one section."""
    coalesced: list[StyleSection] = []
    current_style: Style | None = None
    current_chars: list[str] = []
    for style, c in styled_chars:
        if style != current_style and current_chars:
            coalesced.append((current_style, "".join(current_chars)))
            current_chars = []
        current_style = style
        current_chars.append(c)
    if current_chars:
        coalesced.append((current_style, "".join(current_chars)))
    return coalesced
