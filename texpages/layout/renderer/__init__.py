#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Renderer Module

Provides HTML rendering of paginated content.
"""

from .base_renderer import BaseRenderer
from .html_renderer import (
    COMMAND_TABLE,
    HEADING_CLASSES,
    MATH_DELIMITERS,
    HtmlRenderer,
    RenderedPage,
    apply_commands,
)

__all__ = [
    "BaseRenderer",
    "COMMAND_TABLE",
    "HEADING_CLASSES",
    "MATH_DELIMITERS",
    "HtmlRenderer",
    "RenderedPage",
    "apply_commands",
]
