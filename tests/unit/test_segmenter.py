"""
Unit tests for texpages/layout/segmenter.py - ContentSegmenter
"""
from datetime import date

import pytest

from texpages.layout.content import FrontMatter, ItemKind, ItemRole
from texpages.layout.geometry import process_geometry
from texpages.layout.segmenter import (
    ContentSegmenter,
    extract_front_matter,
    format_today,
    parse_latex_content,
)


def kinds(items):
    return [item.kind for item in items]


class TestBasicSegmentation:
    """Test paragraphs, headings, math and lists."""

    def test_heading_paragraphs_unterminated_math(self):
        text = (
            "\\section{Intro}\n"
            "First paragraph.\n"
            "\n"
            "Second paragraph.\n"
            "\\[\n"
            "a + b\n"
            "= c"
        )
        items = parse_latex_content(text)
        assert kinds(items) == [ItemKind.HEADING, ItemKind.PARAGRAPH, ItemKind.PARAGRAPH, ItemKind.MATH]
        assert items[3].content == "\\[\na + b\n= c"

    def test_paragraph_lines_joined_with_single_space(self):
        items = parse_latex_content("  one  \ntwo\n\n\nthree")
        assert [item.content for item in items] == ["one two", "three"]

    def test_paragraph_height(self):
        item = parse_latex_content("x" * 81)[0]
        assert item.estimated_height == 2 * 24 + 16
        assert item.can_split is True

    @pytest.mark.parametrize("command,level,height", [
        ("chapter", 1, 80),
        ("section", 2, 60),
        ("subsection", 3, 45),
        ("subsubsection", 4, 35),
    ])
    def test_heading_levels(self, command, level, height):
        item = parse_latex_content(f"\\{command}{{Title}}")[0]
        assert (item.kind, item.level, item.estimated_height) == (ItemKind.HEADING, level, height)
        assert item.content == "Title"
        assert item.can_split is False

    def test_starred_heading(self):
        item = parse_latex_content("\\section*{Unnumbered}")[0]
        assert (item.level, item.content) == (2, "Unnumbered")

    def test_heading_flushes_paragraph(self):
        items = parse_latex_content("text\n\\section{A}\nmore")
        assert kinds(items) == [ItemKind.PARAGRAPH, ItemKind.HEADING, ItemKind.PARAGRAPH]

    def test_single_line_math(self):
        item = parse_latex_content("$$ x^2 $$")[0]
        assert item.kind is ItemKind.MATH
        assert item.estimated_height == 40 + 20

    def test_multiline_math_height(self):
        items = parse_latex_content("$$\na\nb\nc\n$$\nafter")
        assert items[0].estimated_height == 5 * 30 + 20
        assert items[1].content == "after"

    def test_math_block_keeps_blank_lines(self):
        items = parse_latex_content("\\[\na\n\nb\n\\]")
        assert len(items) == 1
        assert items[0].content == "\\[\na\n\nb\n\\]"

    def test_list(self):
        items = parse_latex_content("\\begin{itemize}\n\\item a\n\\item b\n\\item c\n\\end{itemize}\nnext")
        assert kinds(items) == [ItemKind.LIST, ItemKind.PARAGRAPH]
        assert items[0].estimated_height == 3 * 25 + 20
        assert items[0].can_split is True

    def test_unterminated_list_runs_to_end(self):
        items = parse_latex_content("\\begin{enumerate}\n\\item a\n\nstill in list")
        assert len(items) == 1
        assert items[0].content.endswith("still in list")

    def test_nested_same_environment(self):
        text = (
            "\\begin{itemize}\n"
            "\\item outer\n"
            "\\begin{itemize}\n"
            "\\item inner\n"
            "\\end{itemize}\n"
            "\\item last\n"
            "\\end{itemize}\n"
            "after"
        )
        items = parse_latex_content(text)
        assert kinds(items) == [ItemKind.LIST, ItemKind.PARAGRAPH]
        assert items[0].content.endswith("\\item last\n\\end{itemize}")

    def test_empty_input(self):
        assert parse_latex_content("") == []
        assert parse_latex_content("\n\n  \n") == []

    def test_header_directives_removed(self):
        items = parse_latex_content("\\documentclass{article}\n\\begin{document}\nHello\n\\end{document}")
        assert [item.content for item in items] == ["Hello"]

    def test_reentrant(self):
        segmenter = ContentSegmenter()
        text = "\\section{A}\nbody"
        assert segmenter.segment(text) == segmenter.segment(text)


class TestTitleBlock:
    """Test \\maketitle handling."""

    def test_title_block_first(self):
        text = "Intro text\n\n\\maketitle\n\\title{T}\n\\author{Au}\n\\date{2020}"
        items = parse_latex_content(text)
        assert [item.role for item in items[:3]] == [ItemRole.TITLE, ItemRole.AUTHOR, ItemRole.DATE]
        assert [item.estimated_height for item in items[:3]] == [80, 35, 30]
        assert items[0].kind is ItemKind.HEADING and items[0].level == 1
        assert items[3].content == "Intro text"

    def test_no_maketitle_no_title_block(self):
        items = parse_latex_content("\\title{T}\nBody")
        assert [item.content for item in items] == ["Body"]

    def test_maketitle_without_values(self):
        assert parse_latex_content("\\maketitle") == []

    def test_today_expanded(self):
        items = ContentSegmenter(today=date(2024, 3, 5)).segment("\\date{\\today}\\maketitle")
        assert items[0].content == "March 5, 2024"

    def test_front_matter_fallback(self):
        segmenter = ContentSegmenter(front_matter=FrontMatter(title="From preamble", author="X"))
        items = segmenter.segment("\\title{Local}\n\\maketitle")
        assert [item.content for item in items] == ["Local", "X"]

    def test_font_size_from_geometry(self):
        geometry = process_geometry("\\documentclass[12pt]{article}")
        item = ContentSegmenter(geometry).segment("\\title{T}\\maketitle")[0]
        assert item.font_size == pytest.approx(15.996 * 1.875)

    def test_title_block_not_splittable(self):
        items = parse_latex_content("\\title{T}\\author{A}\\maketitle")
        assert all(not item.can_split for item in items)


class TestHelpers:
    """Test module helpers."""

    def test_extract_front_matter(self):
        fm = extract_front_matter("\\title{A {B}}\n\\date{D}")
        assert fm == FrontMatter(title="A {B}", author=None, date="D")

    def test_format_today(self):
        assert format_today(date(2026, 10, 18)) == "October 18, 2026"
