"""
Unit tests for texpages/layout/executor/block_flow.py - pagination
"""
import pytest

from texpages.layout.content import (
    ContentItem,
    ItemKind,
    ItemRole,
    create_heading_item,
    create_list_item,
    create_math_item,
    create_paragraph_item,
)
from texpages.layout.executor.block_flow import (
    BlockFlowExecutor,
    paginate_content,
    split_list,
    split_paragraph,
)
from texpages.layout.page_dimensions import PageMargins


def fixed(height, kind=ItemKind.RAW, can_split=False, content="x"):
    return ContentItem(kind=kind, content=content, estimated_height=height, can_split=can_split)


def make_words(count):
    return " ".join(f"word{i}" for i in range(count))


def make_list(count, environment="itemize"):
    lines = [f"\\begin{{{environment}}}"] + [f"\\item entry {i}" for i in range(count)] + [f"\\end{{{environment}}}"]
    return create_list_item("\n".join(lines))


def assert_page_bounds(result):
    """Every page fits, except a page holding a single oversized item."""
    for page in result.pages:
        if page.total_height > result.available_height:
            assert len(page.items) == 1


class TestFirstFitPacking:
    """Test greedy packing."""

    def test_empty_input_gives_one_empty_page(self):
        result = BlockFlowExecutor(500).execute([])
        assert result.page_count == 1
        assert result.pages[0].items == ()

    def test_items_fit_on_one_page(self):
        items = [fixed(100), fixed(200), fixed(200)]
        result = BlockFlowExecutor(500).execute(items)
        assert result.page_count == 1
        assert result.pages[0].total_height == 500

    def test_overflow_opens_new_page(self):
        items = [fixed(300, content="a"), fixed(300, content="b"), fixed(100, content="c")]
        result = BlockFlowExecutor(500).execute(items)
        assert [[i.content for i in p.items] for p in result.pages] == [["a"], ["b", "c"]]

    def test_order_preserved(self):
        items = [fixed(h, content=str(n)) for n, h in enumerate([120, 400, 50, 300, 90, 10])]
        result = BlockFlowExecutor(500).execute(items)
        assert [item.content for item in result.items] == [str(n) for n in range(6)]

    def test_oversized_unsplittable_overflows_alone(self):
        items = [fixed(100, content="a"), create_math_item("\n".join(["x"] * 30)), fixed(100, content="b")]
        result = BlockFlowExecutor(500).execute(items)
        assert result.page_count == 3
        assert result.pages[1].items[0].kind is ItemKind.MATH
        assert result.overflowing_pages() == [result.pages[1]]

    def test_heading_never_split(self):
        result = BlockFlowExecutor(50).execute([create_heading_item("Big", 1)])
        assert result.page_count == 1
        assert result.pages[0].items[0].content == "Big"

    def test_title_block_never_split(self):
        item = ContentItem(
            kind=ItemKind.PARAGRAPH, content=make_words(200), estimated_height=5000,
            can_split=True, role=ItemRole.AUTHOR,
        )
        result = BlockFlowExecutor(500).execute([item])
        assert result.items == [item]

    def test_page_numbers_consecutive(self):
        result = BlockFlowExecutor(100).execute([fixed(80) for _ in range(4)])
        assert [page.number for page in result.pages] == [1, 2, 3, 4]

    def test_reentrant(self):
        executor = BlockFlowExecutor(300)
        items = [create_paragraph_item(make_words(150)), fixed(100)]
        assert executor.execute(items).to_dict() == executor.execute(items).to_dict()

    def test_paginate_content_uses_margins(self):
        result = paginate_content([fixed(10)], page_height=1000, margins=PageMargins(100, 50, 0, 0))
        assert result.available_height == 850


class TestParagraphSplitting:
    """Test paragraph splitting."""

    def test_three_times_available_height(self):
        paragraph = create_paragraph_item(make_words(1500))
        available = paragraph.estimated_height / 3
        result = BlockFlowExecutor(available).execute([paragraph])

        assert result.page_count >= 3
        for page in result.pages:
            assert page.total_height <= available
        assert " ".join(item.content for item in result.items) == paragraph.content

    def test_split_after_partial_page(self):
        items = [fixed(400), create_paragraph_item(make_words(400))]
        result = BlockFlowExecutor(500).execute(items)
        assert result.pages[0].items == (items[0],)
        assert_page_bounds(result)
        assert " ".join(item.content for item in result.items[1:]) == items[1].content

    @pytest.mark.parametrize("text", [
        make_words(300),
        "a  b   c " * 200,
        " leading and trailing " * 150,
        "x" * 500 + " tail",
    ])
    def test_rejoin_identity(self, text):
        fragments = split_paragraph(create_paragraph_item(text), 100)
        assert " ".join(fragment.content for fragment in fragments) == text

    def test_fragments_within_target(self):
        fragments = split_paragraph(create_paragraph_item(make_words(300)), 136)
        assert len(fragments) > 1
        assert all(fragment.estimated_height <= 136 for fragment in fragments)

    def test_single_long_word_overflows(self):
        paragraph = create_paragraph_item("y" * 2000)
        result = BlockFlowExecutor(100).execute([paragraph])
        assert result.page_count == 1
        assert result.items == [paragraph]


class TestListSplitting:
    """Test list splitting."""

    def test_halves(self):
        halves = split_list(make_list(5))
        assert [h.content.count("\\item") for h in halves] == [2, 3]
        for half in halves:
            assert half.content.startswith("\\begin{itemize}")
            assert half.content.endswith("\\end{itemize}")

    def test_single_item_unchanged(self):
        item = make_list(1)
        assert split_list(item) == [item]

    def test_enumerate_environment_kept(self):
        halves = split_list(make_list(4, "enumerate"))
        assert all(h.content.startswith("\\begin{enumerate}") for h in halves)

    def test_unterminated_list_gets_closed(self):
        item = create_list_item("\\begin{itemize}\n\\item a\n\\item b")
        halves = split_list(item)
        assert [h.content for h in halves] == [
            "\\begin{itemize}\n\\item a\n\\end{itemize}",
            "\\begin{itemize}\n\\item b\n\\end{itemize}",
        ]

    def test_nested_entries_stay_together(self):
        content = "\n".join([
            "\\begin{itemize}",
            "\\item outer",
            "\\begin{itemize}",
            "\\item inner one",
            "\\item inner two",
            "\\end{itemize}",
            "\\item last",
            "\\end{itemize}",
        ])
        first, second = split_list(create_list_item(content))
        assert "inner two" in first.content
        assert second.content == "\\begin{itemize}\n\\item last\n\\end{itemize}"

    def test_entries_on_directive_lines_not_duplicated(self):
        item = create_list_item("\\begin{itemize}\n\\item a\n\\item b\n\\item c \\end{itemize}")
        halves = split_list(item)
        assert [h.content for h in halves] == [
            "\\begin{itemize}\n\\item a\n\\end{itemize}",
            "\\begin{itemize}\n\\item b\n\\item c\n\\end{itemize}",
        ]

    def test_entry_on_opening_line_moves_inside(self):
        item = create_list_item("\\begin{enumerate} \\item a\n\\item b\n\\item c\n\\end{enumerate}")
        halves = split_list(item)
        assert sum(h.content.count("\\item") for h in halves) == 3
        assert halves[0].content == "\\begin{enumerate}\n\\item a\n\\end{enumerate}"

    def test_long_list_with_inline_closer_keeps_each_entry_once(self):
        lines = ["\\begin{itemize}"] + [f"\\item e{i}" for i in range(19)] + ["\\item e19 \\end{itemize}"]
        result = BlockFlowExecutor(200).execute([create_list_item("\n".join(lines))])
        text = "\n".join(item.content for item in result.items)
        assert text.count("\\item") == 20
        assert text.count("\\item e19") == 1

    def test_long_list_paginated_within_bounds(self):
        item = make_list(100)
        result = BlockFlowExecutor(300).execute([item])
        assert result.page_count > 1
        for page in result.pages:
            assert page.total_height <= 300
        assert sum(item.content.count("\\item") for item in result.items) == 100


class TestPaginationResult:
    """Test result helpers."""

    def test_to_dict(self):
        data = BlockFlowExecutor(500).execute([create_paragraph_item("hello")]).to_dict()
        assert data["page_count"] == 1
        assert data["available_height"] == 500
        assert data["pages"][0]["items"][0]["kind"] == "paragraph"
