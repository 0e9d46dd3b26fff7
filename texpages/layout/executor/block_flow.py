#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Block Flow Executor

Packs content items into fixed-height pages:
- Greedy first-fit, single pass, item order preserved
- Oversized splittable items (paragraphs, lists) are split
- Oversized unsplittable items overflow their own page

Version: 1.0.0
"""

from typing import List, Dict, Optional, Tuple, Any
from dataclasses import dataclass, field
import logging

from texpages.latex.directives import ITEM, LIST_BEGIN, list_begin_pattern, list_end_pattern
from texpages.layout.content import (
    ContentItem,
    ItemKind,
    Page,
    create_list_item,
    create_paragraph_item,
    paragraph_height_for_length,
)
from texpages.layout.page_dimensions import DEFAULT_PAGE_MARGINS, PageMargins

logger = logging.getLogger(__name__)


# ============================================================================
# Splitting
# ============================================================================

def split_paragraph(item: ContentItem, target_height: float) -> List[ContentItem]:
    """
    Split a paragraph at spaces into fragments of at most target_height.

    Fragments rejoined with single spaces give back the original content.
    A fragment holding a single word may still exceed the target.
    """
    words = item.content.split(' ')
    fragments: List[str] = []
    current: List[str] = []
    current_length = 0

    for word in words:
        candidate_length = current_length + len(word) + (1 if current else 0)
        if current and paragraph_height_for_length(candidate_length) > target_height:
            fragments.append(' '.join(current))
            current = [word]
            current_length = len(word)
        else:
            current.append(word)
            current_length = candidate_length

    if current:
        fragments.append(' '.join(current))

    return [create_paragraph_item(fragment) for fragment in fragments]


def _group_list_entries(lines: List[str], environment: str) -> List[List[str]]:
    """Top-level ``\\item`` entries with their continuation lines."""
    begin = list_begin_pattern(environment)
    end = list_end_pattern(environment)

    groups: List[List[str]] = []
    leading: List[str] = []
    depth = 0

    for line in lines:
        if depth == 0 and ITEM.matches(line):
            groups.append(leading + [line])
            leading = []
        elif groups:
            groups[-1].append(line)
        else:
            leading.append(line)
        depth = max(0, depth + len(begin.findall(line)) - len(end.findall(line)))

    if leading and groups:
        groups[-1].extend(leading)
    return groups


def _strip_list_wrapper(content: str, environment: str) -> Tuple[List[str], str]:
    """
    Lines between the outer ``\\begin{env}`` and ``\\end{env}``.

    Text sharing a line with either directive stays in the returned lines.
    Also returns the closing line: the directive plus any text after it, or
    a synthesized ``\\end{env}`` when the list is unterminated.
    """
    lines = content.split('\n')
    opening = lines[0].strip()
    match = LIST_BEGIN.search(opening)
    first = opening[match.end:].strip() if match else opening
    inner = ([first] if first else []) + lines[1:]

    begin = list_begin_pattern(environment)
    end = list_end_pattern(environment)
    terminated = len(end.findall(content)) >= len(begin.findall(content))

    closing = f'\\end{{{environment}}}'
    if inner and terminated:
        closers = list(end.finditer(inner[-1]))
        if closers:
            last = closers[-1]
            before = inner[-1][:last.start()].rstrip()
            after = inner[-1][last.end():].strip()
            inner = inner[:-1] + ([before] if before.strip() else [])
            if after:
                closing = f'{closing} {after}'

    return inner, closing


def split_list(item: ContentItem) -> List[ContentItem]:
    """
    Split a list in two halves by entry count, floor(n / 2) entries first.

    Each half gets its own ``\\begin{env}`` / ``\\end{env}`` pair; entries
    written on the directive lines move inside the pair, so every entry
    lands in exactly one half. Lists with at most one entry come back
    unchanged.
    """
    match = LIST_BEGIN.search(item.content.split('\n')[0].strip())
    environment = match.argument if match else 'itemize'

    inner, closing = _strip_list_wrapper(item.content, environment)
    entries = _group_list_entries(inner, environment)
    if len(entries) <= 1:
        return [item]

    middle = len(entries) // 2
    halves = (entries[:middle], entries[middle:])
    closings = (f'\\end{{{environment}}}', closing)
    opening = f'\\begin{{{environment}}}'

    return [
        create_list_item('\n'.join([opening] + [line for entry in half for line in entry] + [end]))
        for half, end in zip(halves, closings)
    ]


def split_item(item: ContentItem, target_height: float) -> List[ContentItem]:
    """Split a splittable item; anything else comes back as a single-element list."""
    if not item.can_split or item.is_title_block:
        return [item]
    if item.kind is ItemKind.PARAGRAPH:
        return split_paragraph(item, target_height)
    if item.kind is ItemKind.LIST:
        return split_list(item)
    return [item]


# ============================================================================
# Flow
# ============================================================================

@dataclass
class FlowState:
    """Running state of one pagination run"""
    available_height: float
    pages: List[Page] = field(default_factory=list)
    current_items: List[ContentItem] = field(default_factory=list)
    running_height: float = 0

    def fits(self, item: ContentItem) -> bool:
        return self.running_height + item.estimated_height <= self.available_height

    def add(self, item: ContentItem):
        self.current_items.append(item)
        self.running_height += item.estimated_height

    def close_page(self):
        """Close the current page if it has items"""
        if not self.current_items:
            return
        self.pages.append(Page(number=len(self.pages) + 1, items=tuple(self.current_items)))
        self.current_items = []
        self.running_height = 0


@dataclass
class PaginationResult:
    """Pages produced by one pagination run"""
    pages: List[Page]
    available_height: float

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def items(self) -> List[ContentItem]:
        return [item for page in self.pages for item in page.items]

    def overflowing_pages(self) -> List[Page]:
        """Pages whose items exceed the available height"""
        return [page for page in self.pages if page.overflows(self.available_height)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "available_height": self.available_height,
            "page_count": self.page_count,
            "pages": [page.to_dict() for page in self.pages],
        }


class BlockFlowExecutor:
    """
    Paginates content items with greedy first-fit packing.

    Usage:
        executor = BlockFlowExecutor(available_height=931)
        result = executor.execute(items)
        for page in result.pages:
            ...
    """

    def __init__(self, available_height: float):
        """
        Args:
            available_height: Page height minus top and bottom margins
        """
        self.available_height = available_height

    def execute(self, items: List[ContentItem]) -> PaginationResult:
        """
        Pack items into pages.

        Args:
            items: Ordered content items

        Returns:
            PaginationResult, always with at least one (possibly empty) page
        """
        state = FlowState(available_height=self.available_height)

        for item in items:
            self._place(item, state)
        state.close_page()

        if not state.pages:
            state.pages.append(Page(number=1))

        result = PaginationResult(pages=state.pages, available_height=self.available_height)

        overflowing = result.overflowing_pages()
        if overflowing:
            logger.debug(
                f"{len(overflowing)} page(s) overflow: "
                f"{', '.join(str(page.number) for page in overflowing)}"
            )
        logger.debug(f"Paginated {len(items)} items into {result.page_count} pages")
        return result

    def _place(self, item: ContentItem, state: FlowState):
        if state.fits(item):
            state.add(item)
            return

        state.close_page()

        if item.estimated_height > self.available_height and self.available_height > 0:
            fragments = split_item(item, self.available_height)
            if len(fragments) > 1:
                logger.debug(f"Split {item.kind.value} item into {len(fragments)} fragments")
                for fragment in fragments:
                    self._place(fragment, state)
                return

        # Whole item on the new page, overflowing if it must
        state.add(item)


def paginate_content(
    items: List[ContentItem],
    page_height: float,
    margins: Optional[PageMargins] = None,
) -> PaginationResult:
    """
    Paginate items for a page of the given height.

    Args:
        items: Ordered content items
        page_height: Full page height in pixels
        margins: Page margins (defaults to 96px on every side)

    Returns:
        PaginationResult
    """
    margins = margins or DEFAULT_PAGE_MARGINS
    available_height = page_height - margins.top - margins.bottom
    return BlockFlowExecutor(available_height).execute(items)
