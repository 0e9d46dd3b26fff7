"""
Unit tests for texpages/latex/directives.py - directive matchers
"""
import pytest

from texpages.latex.directives import (
    DOCUMENT_CLASS,
    GEOMETRY,
    HEADING,
    ITEM,
    LIPSUM,
    LIST_BEGIN,
    DISPLAY_MATH_OPEN,
    MAKETITLE,
    TITLE,
    TODAY,
    read_braced,
    split_options,
    strip_header_directives,
)


class TestRegexDirectives:
    """Test fixed-pattern matchers."""

    def test_document_class_with_options(self):
        match = DOCUMENT_CLASS.search("\\documentclass[12pt,a4paper]{report}")
        assert match.groups == ("12pt,a4paper", "report")

    def test_document_class_without_options(self):
        match = DOCUMENT_CLASS.search("\\documentclass{article}")
        assert match.groups == (None, "article")

    def test_geometry_options(self):
        match = GEOMETRY.search("\\usepackage[margin=2cm]{geometry}")
        assert match.argument == "margin=2cm"

    def test_other_packages_are_not_geometry(self):
        assert GEOMETRY.search("\\usepackage[utf8]{inputenc}") is None

    def test_maketitle_not_prefix_of_longer_command(self):
        assert MAKETITLE.matches("\\maketitle")
        assert not MAKETITLE.matches("\\maketitlepage")

    def test_today(self):
        assert TODAY.matches(" \\today ")
        assert not TODAY.matches("\\today is nice")

    def test_display_math_open_at_line_start(self):
        assert DISPLAY_MATH_OPEN.search("\\[ x \\]").argument == "\\["
        assert DISPLAY_MATH_OPEN.search("$$x$$").argument == "$$"
        assert DISPLAY_MATH_OPEN.search("text $$x$$") is None

    def test_list_begin(self):
        assert LIST_BEGIN.search("\\begin{enumerate}").argument == "enumerate"
        assert LIST_BEGIN.search("\\begin{center}") is None

    def test_item_count_ignores_itemize(self):
        assert ITEM.count("\\begin{itemize}\n\\item a\n\\item b\n\\end{itemize}") == 2

    @pytest.mark.parametrize("text,groups", [
        ("\\lipsum", (None, None)),
        ("\\lipsum[4]", ("4", None)),
        ("\\lipsum[2-4]", ("2", "4")),
        ("\\lipsum[ 2 - 4 ]", ("2", "4")),
    ])
    def test_lipsum_forms(self, text, groups):
        assert LIPSUM.search(text).groups == groups

    def test_remove(self):
        assert MAKETITLE.remove("a\\maketitle b") == "a b"

    def test_none_input_is_total(self):
        assert DOCUMENT_CLASS.search(None) is None
        assert ITEM.count(None) == 0


class TestCommandDirectives:
    """Test braced-argument matchers."""

    def test_heading(self):
        assert HEADING.search("\\subsection{Results}").groups == ("subsection", "Results")

    def test_starred_heading(self):
        assert HEADING.search("\\section*{Preface}").groups == ("section", "Preface")

    def test_nested_braces_kept(self):
        assert TITLE.search("\\title{A \\textbf{bold} title}").argument == "A \\textbf{bold} title"

    def test_unclosed_argument_does_not_match(self):
        assert TITLE.search("\\title{Unclosed") is None

    def test_finditer_all_occurrences(self):
        found = [m.argument for m in HEADING.finditer("\\section{A} \\chapter{B}")]
        assert found == ["A", "B"]

    def test_remove_keeps_surrounding_text(self):
        assert TITLE.remove("x\\title{T}y") == "xy"


class TestHelpers:
    """Test braced reading, option splitting and header stripping."""

    def test_read_braced(self):
        assert read_braced("{a{b}c}d", 0) == ("a{b}c", 7)

    def test_read_braced_escaped_brace(self):
        assert read_braced("{a\\}b}", 0) == ("a\\}b", 6)

    def test_read_braced_not_a_brace(self):
        assert read_braced("abc", 0) is None

    def test_split_options_respects_braces(self):
        assert split_options("a4paper, papersize={10cm,20cm}, margin=1in") == [
            "a4paper", "papersize={10cm,20cm}", "margin=1in"
        ]

    def test_split_options_drops_empty(self):
        assert split_options("a,,b,") == ["a", "b"]

    def test_strip_header_directives(self):
        text = (
            "\\documentclass{article}\n"
            "\\usepackage{amsmath}\n"
            "\\title{T}\n"
            "\\begin{document}\n"
            "Body\n"
            "\\end{document}"
        )
        assert strip_header_directives(text).split() == ["Body"]
