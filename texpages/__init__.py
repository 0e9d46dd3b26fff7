"""
texpages - LaTeX source to paginated HTML pages

Quick start:
    >>> from texpages import render_document
    >>> pages = render_document(r"\\begin{document} Hello \\end{document}")
    >>> len(pages)
    1
"""

__version__ = "1.0.0"

from texpages.exceptions import (
    TexPagesError,
    DocumentSourceError,
    InvalidConfigurationError,
    UnsupportedFormatError,
)
from texpages.layout import (
    BlockFlowExecutor,
    ContentItem,
    ContentSegmenter,
    HtmlRenderer,
    PaginationResult,
    ParsedGeometry,
    process_geometry,
)
from texpages.streaming import LatexStreamProcessor, StreamResult
from texpages.document import DocumentContext, load_document, render_document, split_document

__all__ = [
    "__version__",
    "TexPagesError",
    "DocumentSourceError",
    "InvalidConfigurationError",
    "UnsupportedFormatError",
    "BlockFlowExecutor",
    "ContentItem",
    "ContentSegmenter",
    "HtmlRenderer",
    "PaginationResult",
    "ParsedGeometry",
    "process_geometry",
    "LatexStreamProcessor",
    "StreamResult",
    "DocumentContext",
    "load_document",
    "render_document",
    "split_document",
]
