"""Assign background style sections to a buffered region of removed/added lines."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from paintdiff.core.locator import change_ranges
from paintdiff.types.config import PaintConfig
from paintdiff.types.style import ModifierSection, StyleModifier

logger = logging.getLogger(__name__)


class BufferMode(Enum):
    """How a buffered region is styled."""

    PLAIN = "plain"    # counts differ: each line gets one uniform background
    PAIRED = "paired"  # counts match: line i of each side is compared


@dataclass(frozen=True, slots=True)
class BackgroundSections:
    """Per-line background sections for one buffered region."""

    mode: BufferMode
    minus: list[list[ModifierSection]]
    plus: list[list[ModifierSection]]


def classify(minus_lines: Sequence[str], plus_lines: Sequence[str]) -> BufferMode:
    if len(minus_lines) == len(plus_lines):
        return BufferMode.PAIRED
    return BufferMode.PLAIN


def plain_sections(
    lines: Sequence[str], modifier: StyleModifier,
) -> list[list[ModifierSection]]:
    return [[(modifier, line)] for line in lines]


def paired_sections(
    minus_lines: Sequence[str],
    plus_lines: Sequence[str],
    config: PaintConfig,
) -> tuple[list[list[ModifierSection]], list[list[ModifierSection]]]:
    """Build three sections per line: unchanged, changed (emphasized), unchanged.

    The middle section may be empty when nothing changed on that side.
    """
    minus_sections: list[list[ModifierSection]] = []
    plus_sections: list[list[ModifierSection]] = []
    for minus, plus in zip(minus_lines, plus_lines):
        minus_range, plus_range = change_ranges(minus, plus)
        logger.debug(
            "Change ranges: minus=[%d, %d) plus=[%d, %d)",
            minus_range.begin, minus_range.end, plus_range.begin, plus_range.end,
        )

        before, changed, after = minus_range.split(minus)
        minus_sections.append([
            (config.minus_style_modifier, before),
            (config.minus_emph_style_modifier, changed),
            (config.minus_style_modifier, after),
        ])
        before, changed, after = plus_range.split(plus)
        plus_sections.append([
            (config.plus_style_modifier, before),
            (config.plus_emph_style_modifier, changed),
            (config.plus_style_modifier, after),
        ])
    return minus_sections, plus_sections


def background_sections(
    minus_lines: Sequence[str],
    plus_lines: Sequence[str],
    config: PaintConfig,
) -> BackgroundSections:
    """Decide the buffer mode once and build sections for every buffered line."""
    mode = classify(minus_lines, plus_lines)
    logger.debug(
        "Buffered region: %d removed, %d added -> %s",
        len(minus_lines), len(plus_lines), mode.value,
    )
    match mode:
        case BufferMode.PAIRED:
            minus, plus = paired_sections(minus_lines, plus_lines, config)
        case BufferMode.PLAIN:
            minus = plain_sections(minus_lines, config.minus_style_modifier)
            plus = plain_sections(plus_lines, config.plus_style_modifier)
    return BackgroundSections(mode=mode, minus=minus, plus=plus)
