"""Tests for plain/paired background section assignment."""

from __future__ import annotations

from paintdiff.core.classifier import (
    BufferMode,
    background_sections,
    classify,
    paired_sections,
    plain_sections,
)


class TestClassify:
    def test_equal_counts_are_paired(self):
        assert classify(["a", "b"], ["c", "d"]) is BufferMode.PAIRED

    def test_different_counts_are_plain(self):
        assert classify(["a", "b"], ["c"]) is BufferMode.PLAIN

    def test_only_added_lines_are_plain(self):
        assert classify([], ["c"]) is BufferMode.PLAIN

    def test_empty_region(self):
        assert classify([], []) is BufferMode.PAIRED


class TestPlainSections:
    def test_whole_line_one_modifier(self, config):
        sections = plain_sections(["foo", "bar"], config.plus_style_modifier)
        assert sections == [
            [(config.plus_style_modifier, "foo")],
            [(config.plus_style_modifier, "bar")],
        ]


class TestPairedSections:
    def test_three_sections_per_line(self, config):
        minus, plus = paired_sections(["x = 1"], ["x = 2"], config)
        assert minus == [[
            (config.minus_style_modifier, "x = "),
            (config.minus_emph_style_modifier, "1"),
            (config.minus_style_modifier, ""),
        ]]
        assert plus == [[
            (config.plus_style_modifier, "x = "),
            (config.plus_emph_style_modifier, "2"),
            (config.plus_style_modifier, ""),
        ]]

    def test_insertion_has_empty_minus_emphasis(self, config):
        minus, plus = paired_sections(["a c"], ["a b c"], config)
        assert minus[0][1] == (config.minus_emph_style_modifier, "")
        assert plus[0][1] == (config.plus_emph_style_modifier, "b")

    def test_pairs_by_position(self, config):
        minus, plus = paired_sections(["one", "two"], ["one!", "twx"], config)
        assert [text for _, text in minus[0]] == ["one", "", ""]
        assert [text for _, text in plus[0]] == ["one", "!", ""]
        assert [text for _, text in minus[1]] == ["tw", "o", ""]
        assert [text for _, text in plus[1]] == ["tw", "x", ""]

    def test_sections_reconstruct_lines(self, config):
        lines = [("  foo(a, b)  ", "foo(a)"), ("a    ", "a b  "), ("", "new")]
        minus_lines = [m for m, _ in lines]
        plus_lines = [p for _, p in lines]
        minus, plus = paired_sections(minus_lines, plus_lines, config)
        assert ["".join(t for _, t in s) for s in minus] == minus_lines
        assert ["".join(t for _, t in s) for s in plus] == plus_lines


class TestBackgroundSections:
    def test_paired_region(self, config):
        result = background_sections(["x = 1"], ["x = 2"], config)
        assert result.mode is BufferMode.PAIRED
        assert len(result.minus[0]) == 3
        assert len(result.plus[0]) == 3

    def test_plain_region(self, config):
        result = background_sections(["a", "b"], ["c"], config)
        assert result.mode is BufferMode.PLAIN
        assert result.minus == [
            [(config.minus_style_modifier, "a")],
            [(config.minus_style_modifier, "b")],
        ]
        assert result.plus == [[(config.plus_style_modifier, "c")]]

    def test_plain_region_has_no_emphasis(self, config):
        result = background_sections(["x = 1"], ["x = 2", "y = 3"], config)
        modifiers = {m for sections in result.minus + result.plus for m, _ in sections}
        assert config.minus_emph_style_modifier not in modifiers
        assert config.plus_emph_style_modifier not in modifiers
