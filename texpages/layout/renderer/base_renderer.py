#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Base Renderer Interface

Defines common interface for all renderers.

Version: 1.0.0
"""

from abc import ABC, abstractmethod
from typing import List, Optional, TYPE_CHECKING

from texpages.layout.geometry import DEFAULT_GEOMETRY, ParsedGeometry

if TYPE_CHECKING:
    from ..executor.block_flow import PaginationResult


class BaseRenderer(ABC):
    """
    Abstract base class for page renderers.

    All renderers must implement:
    - render(): Turn a pagination result into rendered pages
    - supports_format(): Check if format is supported
    """

    def __init__(self, geometry: Optional[ParsedGeometry] = None):
        """
        Initialize renderer.

        Args:
            geometry: Resolved page geometry (defaults to A4)
        """
        self.geometry = geometry or DEFAULT_GEOMETRY

    @abstractmethod
    def render(self, result: "PaginationResult") -> List:
        """
        Render every page of a pagination result.

        Args:
            result: PaginationResult from the block flow executor

        Returns:
            One rendered page per paginated page, in order
        """
        pass

    @classmethod
    @abstractmethod
    def supports_format(cls, format_name: str) -> bool:
        """Check if renderer supports given format"""
        pass

    @classmethod
    def get_supported_formats(cls) -> List[str]:
        """Get list of supported formats"""
        return []
