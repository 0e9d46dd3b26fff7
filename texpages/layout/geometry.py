"""
Page Geometry Extraction

Derives page size, margins, font size and paragraph metrics from the
header directives of a LaTeX document:

    \\documentclass[12pt]{article}
    \\usepackage[a4paper,landscape,margin=2cm]{geometry}
    \\setlength{\\parindent}{1em}
    \\setlength{\\parskip}{6pt}
    \\linespread{1.5}

Resolution order (later layers win per field):
    1. Hardcoded defaults (A4, 96px margins, 14px font, ...)
    2. Document class font size option
    3. Paragraph directives
    4. Geometry: paper size, custom papersize, landscape swap,
       uniform margin, then top / bottom / left / right

Every function here is total: missing or malformed directives leave the
previous value in place.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from config.constants import (
    DEFAULT_DOCUMENT_CLASS,
    DEFAULT_FONT_SIZE_PX,
    DEFAULT_LINE_SPREAD,
    DEFAULT_PARINDENT_PX,
    DEFAULT_PARSKIP_PX,
    PAPER_SIZE_KEYWORDS,
)
from texpages.latex.directives import (
    DOCUMENT_CLASS,
    GEOMETRY,
    LINESPREAD,
    PARINDENT,
    PARSKIP,
    split_options,
)
from texpages.latex.units import convert_unit_value, parse_length
from texpages.layout.page_dimensions import (
    DEFAULT_PAGE_DIMENSIONS,
    PAGE_DIMENSIONS,
    PageDimensions,
    PageMargins,
    get_content_dimensions,
)

logger = logging.getLogger(__name__)

FONT_SIZE_OPTION = re.compile(r'\d+pt', re.ASCII)

MARGIN_SIDES = ('top', 'bottom', 'left', 'right')


# ============================================================================
# Parsed directive values
# ============================================================================

@dataclass(frozen=True)
class DocumentClassSettings:
    """``\\documentclass[options]{class_name}``"""
    class_name: str
    options: List[str] = field(default_factory=list)
    font_size_option: Optional[str] = None  # e.g. "12pt"


@dataclass(frozen=True)
class GeometrySettings:
    """Options of ``\\usepackage[...]{geometry}`` (lengths kept as written)"""
    paper_size: Optional[str] = None  # key into PAGE_DIMENSIONS
    landscape: bool = False
    margins: Dict[str, str] = field(default_factory=dict)  # margin/top/bottom/left/right
    custom_size: Optional[Dict[str, str]] = None  # {"width": "10cm", "height": "20cm"}


@dataclass(frozen=True)
class ParagraphDirectives:
    """Paragraph overrides found in the header (None = not present)"""
    parindent: Optional[float] = None
    parskip: Optional[float] = None
    line_spread: Optional[float] = None


# ============================================================================
# Resolved geometry
# ============================================================================

@dataclass(frozen=True)
class ParagraphSettings:
    """Paragraph metrics in pixels"""
    parindent: float = DEFAULT_PARINDENT_PX
    parskip: float = DEFAULT_PARSKIP_PX
    line_spread: float = DEFAULT_LINE_SPREAD  # 1.0 = normal, 2.0 = double spacing

    def to_dict(self) -> Dict:
        return {
            "parindent": self.parindent,
            "parskip": self.parskip,
            "line_spread": self.line_spread,
        }


@dataclass(frozen=True)
class ParsedGeometry:
    """
    Fully resolved page configuration.

    Never partial: every field holds either a header-derived value or the
    documented default. Recomputed from scratch on every header change.
    """
    dimensions: PageDimensions = DEFAULT_PAGE_DIMENSIONS
    margins: PageMargins = field(default_factory=PageMargins)
    font_size: float = DEFAULT_FONT_SIZE_PX
    document_class: str = DEFAULT_DOCUMENT_CLASS
    paragraph_settings: ParagraphSettings = field(default_factory=ParagraphSettings)

    @property
    def available_height(self) -> float:
        """Page height minus top and bottom margins"""
        return self.dimensions.height - self.margins.top - self.margins.bottom

    @property
    def content_width(self) -> float:
        return get_content_dimensions(self.dimensions, self.margins)["width"]

    def to_dict(self) -> Dict:
        return {
            "dimensions": self.dimensions.to_dict(),
            "margins": self.margins.to_dict(),
            "font_size": self.font_size,
            "document_class": self.document_class,
            "paragraph_settings": self.paragraph_settings.to_dict(),
        }


DEFAULT_GEOMETRY = ParsedGeometry()


# ============================================================================
# Extractors
# ============================================================================

def extract_document_class(header: str) -> Optional[DocumentClassSettings]:
    """
    Parse the first ``\\documentclass`` declaration.

    Returns:
        DocumentClassSettings, or None if there is no declaration
    """
    match = DOCUMENT_CLASS.search(header)
    if not match:
        return None

    options_str, class_name = match.groups
    options = [opt.strip() for opt in options_str.split(',')] if options_str else []
    options = [opt for opt in options if opt]

    font_size_option = next(
        (opt for opt in options if FONT_SIZE_OPTION.fullmatch(opt)),
        None
    )

    return DocumentClassSettings(
        class_name=class_name.strip() or DEFAULT_DOCUMENT_CLASS,
        options=options,
        font_size_option=font_size_option,
    )


def _paper_size_from_options(options: List[str]) -> Optional[str]:
    """First keyword of PAPER_SIZE_KEYWORDS present (bare or as paper=<name>)"""
    normalized = set()
    for option in options:
        opt = option.strip().lower()
        if opt.startswith('paper='):
            opt = opt[len('paper='):].strip()
        normalized.add(opt)

    for keyword, size_name in PAPER_SIZE_KEYWORDS:
        if keyword in normalized:
            return size_name
    return None


def extract_geometry_directive(header: str) -> Optional[GeometrySettings]:
    """
    Parse the options of the first ``\\usepackage[...]{geometry}``.

    ``key=value`` pairs are read left to right, so a repeated key keeps its
    last value.

    Returns:
        GeometrySettings, or None if there is no geometry directive
    """
    match = GEOMETRY.search(header)
    if not match:
        return None

    options = split_options(match.groups[0])

    margins: Dict[str, str] = {}
    custom_size = None
    landscape = False

    for option in options:
        if option.strip().lower() == 'landscape':
            landscape = True
            continue

        key, sep, value = option.partition('=')
        if not sep:
            continue
        key = key.strip().lower()
        value = value.strip()

        if key == 'margin' or key in MARGIN_SIDES:
            margins[key] = value
        elif key == 'papersize':
            dims = split_options(value.strip('{}'))
            if len(dims) == 2:
                custom_size = {"width": dims[0], "height": dims[1]}
            else:
                logger.debug(f"Ignoring malformed papersize option: {option!r}")

    return GeometrySettings(
        paper_size=_paper_size_from_options(options),
        landscape=landscape,
        margins=margins,
        custom_size=custom_size,
    )


def _parse_line_spread(value: str) -> Optional[float]:
    try:
        spread = float(value.strip())
    except ValueError:
        logger.debug(f"Ignoring non-numeric \\linespread value: {value!r}")
        return None
    if math.isnan(spread) or math.isinf(spread):
        return None
    return spread


def extract_paragraph_directives(header: str) -> ParagraphDirectives:
    """
    Parse ``\\setlength{\\parindent}``, ``\\setlength{\\parskip}`` and
    ``\\linespread``. Each is optional; unparsable values are left out.
    """
    parindent = parskip = line_spread = None

    match = PARINDENT.search(header)
    if match:
        parindent = parse_length(match.argument)

    match = PARSKIP.search(header)
    if match:
        parskip = parse_length(match.argument)

    match = LINESPREAD.search(header)
    if match:
        line_spread = _parse_line_spread(match.argument)

    return ParagraphDirectives(parindent=parindent, parskip=parskip, line_spread=line_spread)


# ============================================================================
# Resolution
# ============================================================================

def _apply_geometry(
    dimensions: PageDimensions,
    margins: PageMargins,
    geometry: GeometrySettings,
) -> tuple:
    if geometry.paper_size:
        if geometry.paper_size in PAGE_DIMENSIONS:
            dimensions = PAGE_DIMENSIONS[geometry.paper_size]
        else:
            logger.debug(f"Unknown paper size {geometry.paper_size!r}, keeping {dimensions.name}")

    if geometry.custom_size:
        width = parse_length(geometry.custom_size["width"])
        height = parse_length(geometry.custom_size["height"])
        if width is not None and height is not None and width > 0 and height > 0:
            dimensions = PageDimensions('Custom', width, height, width / height)

    if geometry.landscape:
        dimensions = dimensions.landscape()

    uniform = geometry.margins.get('margin')
    if uniform is not None:
        value = parse_length(uniform)
        if value is not None:
            margins = PageMargins.uniform(value)

    # Fixed order; each side overrides the uniform value only when present
    for side in MARGIN_SIDES:
        raw = geometry.margins.get(side)
        if raw is None:
            continue
        value = parse_length(raw)
        if value is not None:
            margins = margins.with_side(side, value)

    return dimensions, margins


def resolve(
    document_class: Optional[DocumentClassSettings] = None,
    geometry: Optional[GeometrySettings] = None,
    paragraph: Optional[ParagraphDirectives] = None,
) -> ParsedGeometry:
    """
    Layer extracted directives over the defaults.

    Args:
        document_class: Result of extract_document_class (optional)
        geometry: Result of extract_geometry_directive (optional)
        paragraph: Result of extract_paragraph_directives (optional)

    Returns:
        Fully populated ParsedGeometry
    """
    dimensions = DEFAULT_GEOMETRY.dimensions
    margins = DEFAULT_GEOMETRY.margins
    font_size = DEFAULT_GEOMETRY.font_size
    class_name = DEFAULT_GEOMETRY.document_class
    paragraph_settings = DEFAULT_GEOMETRY.paragraph_settings

    # 1. Document class
    if document_class:
        class_name = document_class.class_name
        if document_class.font_size_option:
            font_size = convert_unit_value(document_class.font_size_option)

    # 2. Paragraph directives
    if paragraph:
        paragraph_settings = ParagraphSettings(
            parindent=paragraph.parindent if paragraph.parindent is not None else paragraph_settings.parindent,
            parskip=paragraph.parskip if paragraph.parskip is not None else paragraph_settings.parskip,
            line_spread=paragraph.line_spread if paragraph.line_spread is not None else paragraph_settings.line_spread,
        )

    # 3. Geometry
    if geometry:
        dimensions, margins = _apply_geometry(dimensions, margins, geometry)

    return ParsedGeometry(
        dimensions=dimensions,
        margins=margins,
        font_size=font_size,
        document_class=class_name,
        paragraph_settings=paragraph_settings,
    )


def process_geometry(header: str) -> ParsedGeometry:
    """
    Extract every header directive and resolve the page geometry.

    Example:
        >>> g = process_geometry(r"\\usepackage[a4paper,landscape]{geometry}")
        >>> (g.dimensions.width, g.dimensions.height)
        (1123, 794)
    """
    header = header or ''
    geometry = resolve(
        document_class=extract_document_class(header),
        geometry=extract_geometry_directive(header),
        paragraph=extract_paragraph_directives(header),
    )
    logger.debug(
        f"Resolved geometry: {geometry.dimensions.name} "
        f"{geometry.dimensions.width}x{geometry.dimensions.height}px, "
        f"font {geometry.font_size:.1f}px"
    )
    return geometry
