"""Tests for heading and horizontal rule conversion."""

from __future__ import annotations

import pytest

from md2wiki.blocks import convert_header_line, convert_headers, convert_horizontal_rules
from md2wiki.theme_manager import get_theme


class TestHeaders:

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_levels_without_color(self, level: int) -> None:
        line = f"{'#' * level} Title"
        equals = "=" * level
        assert convert_header_line(line, get_theme("neutral")) == f"{equals}Title{equals}"

    def test_tieto_color_span(self) -> None:
        result = convert_header_line("# Hello World", get_theme("tieto"))
        assert result == '=<span style="color:#021e57;">Hello World</span>='

    def test_dark_color_span(self) -> None:
        result = convert_header_line("## Section Title", get_theme("dark"))
        assert result == '==<span style="color:#7cb3ff;">Section Title</span>=='

    def test_empty_color_means_plain(self) -> None:
        theme = get_theme("tieto").derive(headings={1: ""})
        assert convert_header_line("# Plain", theme) == "=Plain="

    @pytest.mark.parametrize("line", ["#hashtag", "####### seven", "text # not heading", "#"])
    def test_non_headings_pass_through(self, line: str) -> None:
        assert convert_header_line(line, get_theme("neutral")) == line

    def test_multiline_document(self) -> None:
        text = "# One\nbody\n## Two"
        assert convert_headers(text, get_theme("neutral")) == "=One=\nbody\n==Two=="


class TestHorizontalRules:

    @pytest.mark.parametrize("line", ["---", "***", "___", "-----", "  ---  "])
    def test_rules(self, line: str) -> None:
        assert convert_horizontal_rules(line) == "----"

    @pytest.mark.parametrize("line", ["--", "-*-", "- - -", "--- text"])
    def test_non_rules(self, line: str) -> None:
        assert convert_horizontal_rules(line) == line

    def test_blank_lines_around_rule_kept(self) -> None:
        assert convert_horizontal_rules("above\n\n---\n\nbelow") == "above\n\n----\n\nbelow"
