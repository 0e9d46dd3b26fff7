"""
Streaming front end: re-runs the layout pipeline per edit, batch by batch.
"""

from .stream_processor import LatexStreamProcessor, RenderedBatch, StreamResult, StreamState

__all__ = [
    "LatexStreamProcessor",
    "RenderedBatch",
    "StreamResult",
    "StreamState",
]
