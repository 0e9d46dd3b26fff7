#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
texpages CLI - Render LaTeX sources as paginated HTML

Usage:
    texpages render paper.tex -o paper.html
    texpages render paper.tex --format json --mode stream
    texpages geometry paper.tex
"""

import sys
import json
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from config.constants import APP_LOGGER_NAME, SUPPORTED_OUTPUT_FORMATS
from config.logging_config import setup_logger
from config.settings import get_settings
from texpages.document import DocumentContext, load_document, split_document
from texpages.exceptions import TexPagesError, UnsupportedFormatError
from texpages.layout.geometry import process_geometry
from texpages.layout.renderer.html_renderer import HtmlRenderer

logger = logging.getLogger(__name__)

RENDER_MODES = ['paged', 'stream']


def check_output_format(output_format: str) -> str:
    fmt = (output_format or '').lower()
    if fmt not in SUPPORTED_OUTPUT_FORMATS:
        raise UnsupportedFormatError(output_format, SUPPORTED_OUTPUT_FORMATS)
    return fmt


def write_output(content: str, output: Optional[str]):
    """Write to the output file, or stdout when none is given"""
    if output:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
        logger.info(f"Wrote {path}")
    else:
        sys.stdout.write(content)
        if not content.endswith('\n'):
            sys.stdout.write('\n')


def cmd_render(args, settings) -> int:
    """Render a document to HTML or JSON"""
    output_format = check_output_format(args.format or settings.default_output_format)
    source = load_document(args.input)

    context = DocumentContext(settings)
    if args.mode == 'stream':
        context.stream(source)
    else:
        context.update(source)

    if output_format == 'json':
        content = json.dumps(context.to_dict(), indent=2, ensure_ascii=False)
    else:
        renderer = HtmlRenderer(context.geometry)
        content = renderer.render_html_document(context.pages, title=Path(args.input).stem)

    write_output(content, args.output)
    return 0


def cmd_geometry(args, settings) -> int:
    """Print the geometry resolved from the document header"""
    preamble, _ = split_document(load_document(args.input))
    geometry = process_geometry(preamble)
    write_output(json.dumps(geometry.to_dict(), indent=2), None)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='texpages',
        description="Render LaTeX sources as paginated HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--log-level', help='Override the configured log level (DEBUG, INFO, ...)')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Render command
    render_parser = subparsers.add_parser('render', help='Render a document')
    render_parser.add_argument('input', help='LaTeX source file')
    render_parser.add_argument('--output', '-o', help='Output file (default: stdout)')
    render_parser.add_argument('--format', '-f', choices=SUPPORTED_OUTPUT_FORMATS, help='Output format (default: from settings)')
    render_parser.add_argument('--mode', default='paged', choices=RENDER_MODES, help='paged: one flow, stream: per-batch (default: paged)')

    # Geometry command
    geometry_parser = subparsers.add_parser('geometry', help='Show the resolved page geometry')
    geometry_parser.add_argument('input', help='LaTeX source file')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Route to command handlers
    commands = {
        'render': cmd_render,
        'geometry': cmd_geometry,
    }

    handler = commands.get(args.command)
    if not handler:
        logger.error(f"Unknown command: {args.command}")
        return 1

    try:
        settings = get_settings()
        app_logger = setup_logger(APP_LOGGER_NAME, level=settings.log_level, log_file=settings.log_file)
        app_logger.setLevel(getattr(logging, (args.log_level or settings.log_level).upper(), logging.INFO))
        return handler(args, settings)
    except TexPagesError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
