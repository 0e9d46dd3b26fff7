#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Streaming Preamble/Body Splitter

Two-state machine run over the full document text on every edit:

    PREAMBLE: buffer lines until \\begin{document}, then resolve the
              geometry from the buffer and switch to BODY.
    BODY:     contiguous non-blank lines form a batch; a blank line run
              or \\end{document} closes it. Each batch goes through
              lipsum expansion -> segmentation -> pagination -> rendering.

All state is local to process(); nothing carries over between runs.
A document without \\begin{document} renders nothing.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from config.settings import Settings, get_settings
from texpages.latex.directives import BEGIN_DOCUMENT, END_DOCUMENT
from texpages.latex.lipsum import expand_lipsum
from texpages.layout.content import ContentItem, FrontMatter
from texpages.layout.executor.block_flow import BlockFlowExecutor, PaginationResult
from texpages.layout.geometry import DEFAULT_GEOMETRY, ParsedGeometry, process_geometry
from texpages.layout.renderer.html_renderer import HtmlRenderer, RenderedPage
from texpages.layout.segmenter import ContentSegmenter, extract_front_matter

logger = logging.getLogger(__name__)


class StreamState(Enum):
    PREAMBLE = "preamble"
    BODY = "body"


@dataclass
class RenderedBatch:
    """One body batch carried through the whole pipeline"""
    source: str
    items: List[ContentItem]
    pagination: PaginationResult
    pages: List[RenderedPage] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "items": [item.to_dict() for item in self.items],
            "pagination": self.pagination.to_dict(),
            "pages": [page.to_dict() for page in self.pages],
        }


@dataclass
class StreamResult:
    """Output of one streaming run"""
    geometry: ParsedGeometry = DEFAULT_GEOMETRY
    batches: List[RenderedBatch] = field(default_factory=list)
    body_found: bool = False
    front_matter: Optional[FrontMatter] = None

    @property
    def pages(self) -> List[RenderedPage]:
        return [page for batch in self.batches for page in batch.pages]

    def to_html(self) -> str:
        return '\n'.join(page.to_html() for page in self.pages)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "geometry": self.geometry.to_dict(),
            "body_found": self.body_found,
            "batches": [batch.to_dict() for batch in self.batches],
        }


class LatexStreamProcessor:
    """
    Re-runs the layout pipeline over a whole document, batch by batch.

    Usage:
        processor = LatexStreamProcessor()
        result = processor.process(editor_text)
        preview_html = result.to_html()
    """

    def __init__(self, settings: Optional[Settings] = None, today: Optional[date] = None):
        """
        Args:
            settings: Settings for lipsum generation (defaults to get_settings())
            today: Date used for \\today (defaults to the current date)
        """
        self.settings = settings or get_settings()
        self.today = today

    def _render_batch(
        self,
        lines: List[str],
        geometry: ParsedGeometry,
        front_matter: Optional[FrontMatter],
        page_offset: int,
    ) -> RenderedBatch:
        source = '\n'.join(lines)
        expanded = expand_lipsum(source, self.settings)

        segmenter = ContentSegmenter(geometry, front_matter=front_matter, today=self.today)
        items = segmenter.segment(expanded)
        pagination = BlockFlowExecutor(geometry.available_height).execute(items)

        pages: List[RenderedPage] = []
        if items:
            renderer = HtmlRenderer(geometry)
            pages = [
                renderer.render_page(page, number=page_offset + page.number)
                for page in pagination.pages
            ]
        else:
            logger.debug("Batch produced no content items, nothing rendered")

        return RenderedBatch(source=source, items=items, pagination=pagination, pages=pages)

    def process(self, text: str) -> StreamResult:
        """
        Run the state machine over the full text.

        Args:
            text: Complete document source

        Returns:
            StreamResult with the rendered batches in document order
        """
        state = StreamState.PREAMBLE
        result = StreamResult()
        preamble: List[str] = []
        batch: List[str] = []

        def flush():
            if not batch:
                return
            rendered = self._render_batch(
                batch, result.geometry, result.front_matter, len(result.pages)
            )
            result.batches.append(rendered)
            batch.clear()

        for line in (text or '').split('\n'):
            if state is StreamState.PREAMBLE:
                if BEGIN_DOCUMENT.matches(line):
                    header = '\n'.join(preamble)
                    result.geometry = process_geometry(header)
                    result.front_matter = extract_front_matter(header)
                    result.body_found = True
                    preamble = []
                    state = StreamState.BODY
                else:
                    preamble.append(line)
                continue

            if END_DOCUMENT.matches(line):
                flush()
                break

            if not line.strip():
                flush()
                continue

            batch.append(line)
        else:
            if state is StreamState.BODY:
                flush()

        if not result.body_found:
            logger.debug("No \\begin{document} found, preamble discarded")
        else:
            logger.debug(
                f"Streamed {len(result.batches)} batches into {len(result.pages)} pages"
            )
        return result
