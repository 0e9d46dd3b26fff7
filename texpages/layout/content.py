"""
Content Items and Pages

The unit of layout is a ContentItem: a typed, height-estimated block of
markup. The segmenter produces them, the block flow executor packs (and
possibly splits) them into Pages, the renderer turns them into HTML.

Height estimates are approximations, not font metrics:
    paragraph: ceil(chars / 80) * 24 + 16
    heading:   fixed per level {1: 80, 2: 60, 3: 45, 4: 35, 5: 30, 6: 25}
    math:      max(40, lines * 30) + 20
    list:      items * 25 + 20
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from config.constants import (
    CHARS_PER_LINE,
    DEFAULT_HEADING_HEIGHT,
    HEADING_HEIGHTS,
    LIST_ITEM_HEIGHT,
    LIST_SPACING,
    MATH_LINE_HEIGHT,
    MATH_MIN_HEIGHT,
    MATH_SPACING,
    PARAGRAPH_LINE_HEIGHT,
    PARAGRAPH_SPACING,
)
from texpages.latex.directives import ITEM


class ItemKind(Enum):
    """Block kinds known to the layout pipeline."""
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    MATH = "math"
    LIST = "list"
    RAW = "raw"


class ItemRole(Enum):
    """Where an item came from (title block items are never split)."""
    BODY = "body"
    TITLE = "title"
    AUTHOR = "author"
    DATE = "date"


# ============================================================================
# Height estimation
# ============================================================================

def paragraph_height_for_length(char_count: int) -> int:
    lines = math.ceil(char_count / CHARS_PER_LINE)
    return lines * PARAGRAPH_LINE_HEIGHT + PARAGRAPH_SPACING


def estimate_paragraph_height(content: str) -> int:
    return paragraph_height_for_length(len(content))


def estimate_heading_height(level: int) -> int:
    return HEADING_HEIGHTS.get(level, DEFAULT_HEADING_HEIGHT)


def estimate_math_height(content: str) -> int:
    lines = len(content.split('\n'))
    return max(MATH_MIN_HEIGHT, lines * MATH_LINE_HEIGHT) + MATH_SPACING


def count_list_items(content: str) -> int:
    return ITEM.count(content)


def estimate_list_height(content: str) -> int:
    return count_list_items(content) * LIST_ITEM_HEIGHT + LIST_SPACING


# ============================================================================
# Items
# ============================================================================

@dataclass(frozen=True)
class ContentItem:
    """
    A typed, height-estimated block of content.

    Attributes:
        kind: Block kind (paragraph, heading, math, list, raw)
        content: Markup text of the block
        estimated_height: Estimated rendered height in pixels (>= 0)
        can_split: Whether pagination may split this item across pages
        level: Heading level 1..6 (headings only)
        role: Title block role, BODY for regular content
        font_size: Explicit font size in pixels (title block only)
    """
    kind: ItemKind
    content: str
    estimated_height: float
    can_split: bool = False
    level: Optional[int] = None
    role: ItemRole = ItemRole.BODY
    font_size: Optional[float] = None

    @property
    def is_title_block(self) -> bool:
        return self.role is not ItemRole.BODY

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "kind": self.kind.value,
            "content": self.content,
            "estimated_height": self.estimated_height,
            "can_split": self.can_split,
        }
        if self.level is not None:
            data["level"] = self.level
        if self.role is not ItemRole.BODY:
            data["role"] = self.role.value
        if self.font_size is not None:
            data["font_size"] = self.font_size
        return data


def create_paragraph_item(content: str) -> ContentItem:
    return ContentItem(
        kind=ItemKind.PARAGRAPH,
        content=content,
        estimated_height=estimate_paragraph_height(content),
        can_split=True,
    )


def create_heading_item(content: str, level: int) -> ContentItem:
    return ContentItem(
        kind=ItemKind.HEADING,
        content=content,
        estimated_height=estimate_heading_height(level),
        level=level,
    )


def create_math_item(content: str) -> ContentItem:
    return ContentItem(
        kind=ItemKind.MATH,
        content=content,
        estimated_height=estimate_math_height(content),
    )


def create_list_item(content: str) -> ContentItem:
    return ContentItem(
        kind=ItemKind.LIST,
        content=content,
        estimated_height=estimate_list_height(content),
        can_split=True,
    )


@dataclass(frozen=True)
class FrontMatter:
    """Title block values (``\\title``, ``\\author``, ``\\date``)."""
    title: Optional[str] = None
    author: Optional[str] = None
    date: Optional[str] = None

    def is_empty(self) -> bool:
        return self.title is None and self.author is None and self.date is None

    def merged_over(self, fallback: Optional['FrontMatter']) -> 'FrontMatter':
        """Fields of self, falling back to fallback where self has none."""
        if fallback is None:
            return self
        return FrontMatter(
            title=self.title if self.title is not None else fallback.title,
            author=self.author if self.author is not None else fallback.author,
            date=self.date if self.date is not None else fallback.date,
        )


# ============================================================================
# Pages
# ============================================================================

@dataclass(frozen=True)
class Page:
    """An ordered run of items packed onto one page."""
    number: int
    items: Tuple[ContentItem, ...] = field(default_factory=tuple)

    @property
    def total_height(self) -> float:
        return sum(item.estimated_height for item in self.items)

    def is_empty(self) -> bool:
        return not self.items

    def overflows(self, available_height: float) -> bool:
        return self.total_height > available_height

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "number": self.number,
            "total_height": self.total_height,
            "items": [item.to_dict() for item in self.items],
        }
