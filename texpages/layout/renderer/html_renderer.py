#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HTML Renderer

Maps paginated content items to HTML fragments:
- Headings -> <h1>..<h6> with a per-level class
- Paragraphs -> <p> styled from the paragraph settings
- Lists -> <ul>/<ol> through the command table
- Math -> passed through (escaped) for a client-side math renderer

Text is HTML-escaped first, then a fixed table of LaTeX commands is
applied (\\textbf, \\emph, \\vspace, ...). Math delimiters are left in
place; see MATH_DELIMITERS.

Version: 1.0.0
"""

import html
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple, Union

from config.constants import PAGE_SPACING, SKIP_HEIGHTS
from texpages.latex.units import convert_latex_unit, convert_unit_value
from texpages.layout.content import ContentItem, ItemKind, ItemRole, Page
from texpages.layout.executor.block_flow import PaginationResult
from texpages.layout.geometry import ParsedGeometry

from .base_renderer import BaseRenderer

# Delimiters the external math renderer looks for (KaTeX auto-render format)
MATH_DELIMITERS = [
    {"left": "$$", "right": "$$", "display": True},
    {"left": "\\[", "right": "\\]", "display": True},
    {"left": "$", "right": "$", "display": False},
    {"left": "\\(", "right": "\\)", "display": False},
]

HEADING_CLASSES = {
    1: 'text-3xl font-bold mb-6 text-center',
    2: 'text-xl font-bold mt-8 mb-4',
    3: 'text-lg font-semibold mt-6 mb-3',
    4: 'text-base font-medium mt-4 mb-2',
    5: 'text-sm font-medium mt-3 mb-2',
    6: 'text-sm font-medium mt-2 mb-1',
}

TITLE_BLOCK_CLASSES = {
    ItemRole.TITLE: HEADING_CLASSES[1],
    ItemRole.AUTHOR: 'text-lg text-center mb-2 font-medium',
    ItemRole.DATE: 'text-sm text-center mb-8 text-gray-600',
}

PARAGRAPH_CLASS = 'mb-4 text-justify leading-relaxed'
BLOCK_CLASS = 'my-4'


def format_px(value: float) -> str:
    return f"{value:g}px"


def _font_size_span(match: re.Match) -> str:
    size, text = match.group(1).strip(), match.group(2)
    # Bare numbers are points, as in \fontsize{12}{14}
    pixels = convert_latex_unit(size, 'pt') if re.fullmatch(r'\d+(?:\.\d+)?', size) else convert_unit_value(size)
    return f'<span style="font-size: {format_px(pixels)};">{text}</span>'


def _vspace(match: re.Match) -> str:
    return f'<div style="height: {format_px(convert_unit_value(match.group(1)))};"></div>'


def _hspace(match: re.Match) -> str:
    return f'<span style="display: inline-block; width: {format_px(convert_unit_value(match.group(1)))};"></span>'


Replacement = Union[str, Callable[[re.Match], str]]

# Applied in order to already-escaped text
COMMAND_TABLE: List[Tuple[re.Pattern, Replacement]] = [
    (re.compile(r'\\textbf\{([^}]*)\}'), r'<strong>\1</strong>'),
    (re.compile(r'\\textit\{([^}]*)\}'), r'<em>\1</em>'),
    (re.compile(r'\\emph\{([^}]*)\}'), r'<em>\1</em>'),
    (re.compile(r'\\underline\{([^}]*)\}'), r'<u>\1</u>'),
    (re.compile(r'\\texttt\{([^}]*)\}'), r'<code class="bg-gray-100 px-1 rounded">\1</code>'),
    (re.compile(r'\\begin\{itemize\}'), '<ul class="list-disc list-inside mb-4">'),
    (re.compile(r'\\end\{itemize\}'), '</ul>'),
    (re.compile(r'\\begin\{enumerate\}'), '<ol class="list-decimal list-inside mb-4">'),
    (re.compile(r'\\end\{enumerate\}'), '</ol>'),
    (re.compile(r'\\item(?![a-zA-Z])\s*'), '<li class="mb-1">'),
    (re.compile(r'\{\\fontsize\{([^}]+)\}\{[^}]*\}\\selectfont\s*([^}]*)\}'), _font_size_span),
    (re.compile(r'\\begin\{center\}'), '<div class="text-center">'),
    (re.compile(r'\\end\{center\}'), '</div>'),
    (re.compile(r'\{\\centering\s*([^}]*)\}'), r'<div class="text-center">\1</div>'),
    (re.compile(r'\\vspace\*?\{([^}]+)\}'), _vspace),
    (re.compile(r'\\hspace\*?\{([^}]+)\}'), _hspace),
] + [
    (re.compile('\\\\' + name + r'(?![a-zA-Z])'), f'<div style="height: {format_px(height)};"></div>')
    for name, height in SKIP_HEIGHTS.items()
] + [
    (re.compile(r'\\\\'), '<br>'),
]


def apply_commands(text: str) -> str:
    """Escape text and apply the LaTeX command table."""
    result = html.escape(text, quote=False)
    for pattern, replacement in COMMAND_TABLE:
        result = pattern.sub(replacement, result)
    return result


@dataclass
class RenderedPage:
    """HTML fragments of one page"""
    number: int
    fragments: List[str] = field(default_factory=list)
    style: str = ''

    def to_html(self) -> str:
        return (
            f'<div class="latex-page" data-page="{self.number}" style="{self.style}">'
            + ''.join(self.fragments)
            + '</div>'
        )

    def to_dict(self) -> Dict:
        return {"number": self.number, "html": self.to_html()}


class HtmlRenderer(BaseRenderer):
    """
    Renders paginated content items as HTML.

    Usage:
        renderer = HtmlRenderer(geometry)
        pages = renderer.render(pagination_result)
        html = ''.join(page.to_html() for page in pages)
    """

    def page_style(self) -> str:
        """Inline style of a page container, sized from the geometry"""
        dims = self.geometry.dimensions
        margins = self.geometry.margins
        return (
            f"width: {format_px(dims.width)}; "
            f"min-height: {format_px(dims.height)}; "
            f"padding: {format_px(margins.top)} {format_px(margins.right)} "
            f"{format_px(margins.bottom)} {format_px(margins.left)}; "
            f"font-size: {format_px(self.geometry.font_size)}; "
            f"box-sizing: border-box;"
        )

    def paragraph_style(self) -> str:
        settings = self.geometry.paragraph_settings
        return (
            f"text-indent: {format_px(settings.parindent)}; "
            f"margin-bottom: {format_px(settings.parskip)}; "
            f"line-height: {settings.line_spread:g};"
        )

    def _render_title_block(self, item: ContentItem) -> str:
        css_class = TITLE_BLOCK_CLASSES[item.role]
        style = f' style="font-size: {format_px(item.font_size)};"' if item.font_size else ''
        tag = 'h1' if item.role is ItemRole.TITLE else 'p'
        return f'<{tag} class="{css_class}"{style}>{apply_commands(item.content)}</{tag}>'

    def render_item(self, item: ContentItem) -> str:
        """HTML fragment of a single content item"""
        if item.is_title_block:
            return self._render_title_block(item)

        if item.kind is ItemKind.HEADING:
            level = min(max(item.level or 2, 1), 6)
            return f'<h{level} class="{HEADING_CLASSES[level]}">{apply_commands(item.content)}</h{level}>'

        if item.kind is ItemKind.PARAGRAPH:
            return (
                f'<p class="{PARAGRAPH_CLASS}" style="{self.paragraph_style()}">'
                f'{apply_commands(item.content)}</p>'
            )

        if item.kind is ItemKind.MATH:
            return f'<div class="{BLOCK_CLASS}">{html.escape(item.content, quote=False)}</div>'

        if item.kind is ItemKind.LIST:
            return f'<div class="{BLOCK_CLASS}">{apply_commands(item.content)}</div>'

        return f'<div>{html.escape(item.content, quote=False)}</div>'

    def render_page(self, page: Page, number: Optional[int] = None) -> RenderedPage:
        return RenderedPage(
            number=number if number is not None else page.number,
            fragments=[self.render_item(item) for item in page.items],
            style=self.page_style(),
        )

    def render(self, result: PaginationResult) -> List[RenderedPage]:
        return [self.render_page(page) for page in result.pages]

    def render_html_document(self, pages: List[RenderedPage], title: str = 'Document') -> str:
        """Standalone HTML document holding the given pages"""
        body = '\n'.join(page.to_html() for page in pages)
        return (
            '<!DOCTYPE html>\n'
            '<html>\n<head>\n<meta charset="utf-8">\n'
            f'<title>{html.escape(title)}</title>\n'
            '<style>\n'
            f'.latex-page {{ margin: 0 auto {format_px(PAGE_SPACING)}; background: #fff; }}\n'
            '</style>\n'
            '</head>\n<body>\n'
            f'{body}\n'
            '</body>\n</html>\n'
        )

    @classmethod
    def supports_format(cls, format_name: str) -> bool:
        return format_name.lower() == "html"

    @classmethod
    def get_supported_formats(cls) -> List[str]:
        return ["html"]
