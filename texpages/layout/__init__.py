#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Layout Engine

Turns LaTeX source into paginated HTML:

    header -> geometry.process_geometry -> ParsedGeometry
    body   -> segmenter.ContentSegmenter -> [ContentItem]
           -> executor.BlockFlowExecutor -> PaginationResult
           -> renderer.HtmlRenderer      -> [RenderedPage]
"""

from .page_dimensions import (
    PAGE_DIMENSIONS,
    PageDimensions,
    PageMargins,
    get_content_dimensions,
)
from .geometry import (
    DEFAULT_GEOMETRY,
    ParagraphSettings,
    ParsedGeometry,
    extract_document_class,
    extract_geometry_directive,
    extract_paragraph_directives,
    process_geometry,
    resolve,
)
from .content import ContentItem, FrontMatter, ItemKind, ItemRole, Page
from .segmenter import ContentSegmenter, extract_front_matter, parse_latex_content
from .executor import BlockFlowExecutor, PaginationResult, paginate_content
from .renderer import HtmlRenderer, RenderedPage, MATH_DELIMITERS

__all__ = [
    # Geometry
    "PAGE_DIMENSIONS",
    "PageDimensions",
    "PageMargins",
    "get_content_dimensions",
    "DEFAULT_GEOMETRY",
    "ParagraphSettings",
    "ParsedGeometry",
    "extract_document_class",
    "extract_geometry_directive",
    "extract_paragraph_directives",
    "process_geometry",
    "resolve",
    # Content
    "ContentItem",
    "FrontMatter",
    "ItemKind",
    "ItemRole",
    "Page",
    "ContentSegmenter",
    "extract_front_matter",
    "parse_latex_content",
    # Pagination
    "BlockFlowExecutor",
    "PaginationResult",
    "paginate_content",
    # Rendering
    "HtmlRenderer",
    "RenderedPage",
    "MATH_DELIMITERS",
]
