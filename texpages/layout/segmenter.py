"""
Content Segmentation

Scans document body text into an ordered list of ContentItems:

    \\section{Intro}          -> heading (level 2)
    Some text                 -> paragraph (blank lines separate paragraphs)
    \\[ E = mc^2 \\]            -> math
    \\begin{itemize} ... \\end{itemize} -> list

A single forward pass over lines. Multi-line constructs (display math,
lists) are read ahead with a LineCursor and close implicitly at the end
of input when their terminator is missing.

If ``\\maketitle`` is present, a title block (title, author, date) is
emitted before any body content, wherever the directives appear.
"""

import logging
from datetime import date
from typing import List, Optional

from config.constants import (
    AUTHOR_FONT_SCALE,
    AUTHOR_HEIGHT,
    DATE_FONT_SCALE,
    DATE_HEIGHT,
    HEADING_LEVELS,
    TITLE_FONT_SCALE,
    TITLE_HEIGHT,
)
from texpages.latex.cursor import LineCursor
from texpages.latex.directives import (
    AUTHOR,
    DATE,
    DISPLAY_MATH_CLOSERS,
    DISPLAY_MATH_OPEN,
    HEADING,
    LIST_BEGIN,
    MAKETITLE,
    TITLE,
    TODAY,
    list_begin_pattern,
    list_end_pattern,
    strip_header_directives,
)
from texpages.layout.content import (
    ContentItem,
    FrontMatter,
    ItemKind,
    ItemRole,
    create_heading_item,
    create_list_item,
    create_math_item,
    create_paragraph_item,
)
from texpages.layout.geometry import DEFAULT_GEOMETRY, ParsedGeometry

logger = logging.getLogger(__name__)


def format_today(today: date) -> str:
    """``\\today`` the way LaTeX prints it, e.g. "October 18, 2026"."""
    return f"{today:%B} {today.day}, {today.year}"


def extract_front_matter(text: str) -> FrontMatter:
    """First ``\\title``, ``\\author`` and ``\\date`` arguments found in text."""
    values = {}
    for key, directive in (('title', TITLE), ('author', AUTHOR), ('date', DATE)):
        match = directive.search(text)
        values[key] = match.argument.strip() if match else None
    return FrontMatter(**values)


class ContentSegmenter:
    """
    Splits body text into typed, height-estimated content items.

    A segmenter holds configuration only; all scan state lives in
    segment(), so one instance can be reused across runs.

    Usage:
        segmenter = ContentSegmenter(geometry)
        items = segmenter.segment(body_text)
    """

    def __init__(
        self,
        geometry: Optional[ParsedGeometry] = None,
        front_matter: Optional[FrontMatter] = None,
        today: Optional[date] = None,
    ):
        """
        Args:
            geometry: Resolved geometry (font size of the title block)
            front_matter: Fallback title/author/date, typically taken from
                the preamble when the body only says ``\\maketitle``
            today: Date used for ``\\today`` (defaults to the current date)
        """
        self.geometry = geometry or DEFAULT_GEOMETRY
        self.front_matter = front_matter
        self.today = today

    # ------------------------------------------------------------------
    # Title block
    # ------------------------------------------------------------------

    def _resolve_date(self, value: str) -> str:
        if TODAY.matches(value):
            return format_today(self.today or date.today())
        return value

    def title_block(self, front_matter: FrontMatter) -> List[ContentItem]:
        """Title, author and date items, in that order, skipping empty values."""
        font_size = self.geometry.font_size
        items: List[ContentItem] = []

        if front_matter.title:
            items.append(ContentItem(
                kind=ItemKind.HEADING,
                content=front_matter.title,
                estimated_height=TITLE_HEIGHT,
                level=1,
                role=ItemRole.TITLE,
                font_size=font_size * TITLE_FONT_SCALE,
            ))

        if front_matter.author:
            items.append(ContentItem(
                kind=ItemKind.PARAGRAPH,
                content=front_matter.author,
                estimated_height=AUTHOR_HEIGHT,
                role=ItemRole.AUTHOR,
                font_size=font_size * AUTHOR_FONT_SCALE,
            ))

        if front_matter.date:
            items.append(ContentItem(
                kind=ItemKind.PARAGRAPH,
                content=self._resolve_date(front_matter.date),
                estimated_height=DATE_HEIGHT,
                role=ItemRole.DATE,
                font_size=font_size * DATE_FONT_SCALE,
            ))

        return items

    # ------------------------------------------------------------------
    # Multi-line constructs
    # ------------------------------------------------------------------

    @staticmethod
    def _read_math(opening: str, opener: str, cursor: LineCursor) -> str:
        closer = DISPLAY_MATH_CLOSERS[opener]
        if closer in opening[len(opener):]:
            return opening

        lines = [opening]
        lines.extend(cursor.advance_until(lambda line: closer in line))
        return '\n'.join(lines)

    @staticmethod
    def _read_list(opening: str, environment: str, cursor: LineCursor) -> str:
        begin = list_begin_pattern(environment)
        end = list_end_pattern(environment)

        depth = len(begin.findall(opening)) - len(end.findall(opening))
        lines = [opening]
        while depth > 0 and not cursor.at_end():
            line = cursor.advance()
            lines.append(line)
            depth += len(begin.findall(line)) - len(end.findall(line))
        return '\n'.join(lines)

    # ------------------------------------------------------------------
    # Scan
    # ------------------------------------------------------------------

    def segment(self, text: str) -> List[ContentItem]:
        """
        Segment body text into content items.

        Args:
            text: Body text, with filler directives already expanded

        Returns:
            Ordered list of ContentItems (empty for blank input)
        """
        text = text or ''
        items: List[ContentItem] = []

        if MAKETITLE.matches(text):
            front_matter = extract_front_matter(text).merged_over(self.front_matter)
            if not front_matter.is_empty():
                items.extend(self.title_block(front_matter))

        cursor = LineCursor.from_text(strip_header_directives(text))
        paragraph: List[str] = []

        def flush():
            if paragraph:
                items.append(create_paragraph_item(' '.join(paragraph)))
                paragraph.clear()

        while not cursor.at_end():
            line = cursor.advance().strip()

            if not line:
                flush()
                cursor.skip_while(lambda next_line: not next_line.strip())
                continue

            heading = HEADING.search(line)
            if heading:
                flush()
                command, title = heading.groups
                items.append(create_heading_item(title.strip(), HEADING_LEVELS[command]))
                continue

            math_open = DISPLAY_MATH_OPEN.search(line)
            if math_open:
                flush()
                items.append(create_math_item(self._read_math(line, math_open.argument, cursor)))
                continue

            list_open = LIST_BEGIN.search(line)
            if list_open:
                flush()
                items.append(create_list_item(self._read_list(line, list_open.argument, cursor)))
                continue

            paragraph.append(line)

        flush()

        logger.debug(f"Segmented {len(items)} items from {len(text)} chars")
        return items


def parse_latex_content(
    text: str,
    geometry: Optional[ParsedGeometry] = None,
    front_matter: Optional[FrontMatter] = None,
    today: Optional[date] = None,
) -> List[ContentItem]:
    """Convenience wrapper around ContentSegmenter.segment()."""
    return ContentSegmenter(geometry, front_matter, today).segment(text)
