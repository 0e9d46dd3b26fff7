#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document Context

Caller-owned state of one document being previewed: raw text, resolved
geometry, content items, pagination and rendered pages. Every update()
recomputes all of it from the text; nothing is kept between documents
except what the caller keeps by holding on to the context.

Usage:
    ctx = DocumentContext()
    pages = ctx.update(source)
    print(ctx.geometry.dimensions.name, len(pages))
"""

import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from config.settings import Settings, get_settings
from texpages.exceptions import DocumentSourceError
from texpages.latex.directives import BEGIN_DOCUMENT, END_DOCUMENT
from texpages.latex.lipsum import expand_lipsum
from texpages.layout.content import ContentItem
from texpages.layout.executor.block_flow import BlockFlowExecutor, PaginationResult
from texpages.layout.geometry import DEFAULT_GEOMETRY, ParsedGeometry, process_geometry
from texpages.layout.renderer.html_renderer import HtmlRenderer, RenderedPage
from texpages.layout.segmenter import ContentSegmenter, extract_front_matter
from texpages.streaming.stream_processor import LatexStreamProcessor, StreamResult

logger = logging.getLogger(__name__)


def split_document(text: str) -> Tuple[str, Optional[str]]:
    """
    Partition text into preamble and body.

    The body runs from ``\\begin{document}`` to ``\\end{document}`` (or to
    the end of the text); anything after the end marker is dropped.

    Returns:
        (preamble, body), body is None when there is no begin marker
    """
    text = text or ''
    begin = BEGIN_DOCUMENT.search(text)
    if not begin:
        return text, None

    preamble = text[:begin.start]
    body = text[begin.end:]
    end = END_DOCUMENT.search(body)
    if end:
        body = body[:end.start]
    return preamble, body


def load_document(path: Union[str, Path]) -> str:
    """
    Read a source document as UTF-8.

    Raises:
        DocumentSourceError: If the file is missing or unreadable
    """
    try:
        return Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentSourceError(str(path), str(e)) from e


class DocumentContext:
    """Pipeline state for one document, passed explicitly by its owner."""

    def __init__(self, settings: Optional[Settings] = None, today: Optional[date] = None):
        self.settings = settings or get_settings()
        self.today = today

        self.raw_text: str = ''
        self.geometry: ParsedGeometry = DEFAULT_GEOMETRY
        self.items: List[ContentItem] = []
        self.pagination: Optional[PaginationResult] = None
        self.pages: List[RenderedPage] = []

    def update(self, text: str) -> List[RenderedPage]:
        """
        Recompute everything from text, paginating the body as one flow.

        Returns:
            Rendered pages (a document without a body gives one empty page)
        """
        self.raw_text = text or ''
        preamble, body = split_document(self.raw_text)

        self.geometry = process_geometry(preamble)

        if body is None:
            logger.debug("No \\begin{document}, rendering an empty page")
            self.items = []
        else:
            segmenter = ContentSegmenter(
                self.geometry,
                front_matter=extract_front_matter(preamble),
                today=self.today,
            )
            self.items = segmenter.segment(expand_lipsum(body, self.settings))

        self.pagination = BlockFlowExecutor(self.geometry.available_height).execute(self.items)
        self.pages = HtmlRenderer(self.geometry).render(self.pagination)

        logger.info(
            f"Laid out {len(self.items)} items on {len(self.pages)} "
            f"{self.geometry.dimensions.name} pages"
        )
        return self.pages

    def stream(self, text: str) -> StreamResult:
        """Run the streaming splitter over text and keep its pages."""
        self.raw_text = text or ''
        result = LatexStreamProcessor(self.settings, today=self.today).process(self.raw_text)

        self.geometry = result.geometry
        self.items = [item for batch in result.batches for item in batch.items]
        self.pagination = None
        self.pages = result.pages
        return result

    def to_html(self) -> str:
        return '\n'.join(page.to_html() for page in self.pages)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "geometry": self.geometry.to_dict(),
            "items": [item.to_dict() for item in self.items],
            "pagination": self.pagination.to_dict() if self.pagination else None,
            "pages": [page.to_dict() for page in self.pages],
        }


def render_document(
    text: str,
    settings: Optional[Settings] = None,
    today: Optional[date] = None,
) -> List[RenderedPage]:
    """One-shot paged rendering of a complete document."""
    return DocumentContext(settings, today=today).update(text)
