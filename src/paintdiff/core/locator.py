"""Locate the changed section of a removed/added line pair.

Consider a removed line ``m`` paired with an added line ``p``. The cases
are:

1. Whitespace deleted at line beginning: the deleted section is
   highlighted in ``m``; ``p`` is unstyled.
2. Whitespace inserted at line beginning: the inserted section is
   highlighted in ``p``; ``m`` is unstyled.
3. An internal section containing a non-whitespace character was
   deleted: it is highlighted in ``m``; ``p`` is unstyled.
4. An internal section was changed: the original is highlighted in
   ``m``, the replacement in ``p``.
5. An internal section was inserted: it is highlighted in ``p``; ``m``
   is unstyled.

Whitespace is never deleted or inserted at the end of a line: diff lines
by definition have no significant trailing whitespace, so trailing spaces
are ignored when matching suffixes.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import takewhile


def common_prefix_length(s0: Iterable[str], s1: Iterable[str]) -> int:
    """Number of leading characters shared by *s0* and *s1*."""
    i = 0
    for c0, c1 in zip(s0, s1):
        if c0 != c1:
            break
        i += 1
    return i


def trailing_space_count(s: str) -> int:
    # Plain spaces only; tabs are not trimmed.
    return sum(1 for _ in takewhile(lambda c: c == " ", reversed(s)))


def suffix_data(s0: str, s1: str) -> tuple[int, tuple[int, int]]:
    """Return the common suffix length of the right-trimmed strings, and the
    number of trailing spaces trimmed from each."""
    n0 = trailing_space_count(s0)
    n1 = trailing_space_count(s1)
    suffix = common_prefix_length(
        reversed(s0[:len(s0) - n0]),
        reversed(s1[:len(s1) - n1]),
    )
    return suffix, (n0, n1)


def common_suffix_length(s0: str, s1: str) -> int:
    """Number of trailing characters shared by *s0* and *s1*, ignoring trailing spaces."""
    return suffix_data(s0, s1)[0]


@dataclass(frozen=True, slots=True)
class StringPair:
    """Prefix/suffix measurements of a pair of strings."""

    common_prefix_length: int
    common_suffix_length: int
    lengths: tuple[int, int]  # right-trimmed lengths

    @classmethod
    def from_strings(cls, s0: str, s1: str) -> StringPair:
        suffix, (n0, n1) = suffix_data(s0, s1)
        return cls(
            common_prefix_length=common_prefix_length(s0, s1),
            common_suffix_length=suffix,
            lengths=(len(s0) - n0, len(s1) - n1),
        )


@dataclass(frozen=True, slots=True)
class ChangeRange:
    """Half-open ``[begin, end)`` character range of a line's changed section."""

    begin: int
    end: int

    def split(self, line: str) -> tuple[str, str, str]:
        """Split *line* into (before, changed, after)."""
        return line[:self.begin], line[self.begin:self.end], line[self.end:]


def change_ranges(minus: str, plus: str) -> tuple[ChangeRange, ChangeRange]:
    """Compute the changed section of *minus* and of *plus*.

    Both ranges satisfy ``0 <= begin <= end <= len(line)``.
    """
    pair = StringPair.from_strings(minus, plus)
    change_begin = pair.common_prefix_length

    # Right-trimmed length may be shorter than the common prefix, e.g.
    #   minus = "a    "
    #   plus  = "a b  "
    # has trimmed minus length 1 but common prefix length 2.
    minus_length = max(pair.lengths[0], change_begin)
    plus_length = max(pair.lengths[1], change_begin)

    # Prefix and suffix may overlap, e.g.
    #   minus = "a c"
    #   plus  = "a b c"
    # has prefix 2 and suffix 2 but minus length 3.
    minus_change_end = max(minus_length - pair.common_suffix_length, change_begin)
    plus_change_end = max(plus_length - pair.common_suffix_length, change_begin)

    return (
        ChangeRange(change_begin, minus_change_end),
        ChangeRange(change_begin, plus_change_end),
    )
