"""
Centralized constants for texpages.
All magic numbers used by the layout pipeline live here.
"""

# ===========================================
# UNITS (multipliers to CSS pixels at 96 DPI)
# ===========================================
UNIT_TO_PX = {
    'pt': 1.333,
    'px': 1.0,
    'em': 16.0,                       # assumes a 16px base font
    'cm': 37.795,
    'mm': 3.7795,
    'in': 96.0,
}

# ===========================================
# PAGE GEOMETRY DEFAULTS
# ===========================================
DEFAULT_PAPER_SIZE = 'A4'
DEFAULT_MARGIN_PX = 96                # 1 inch
DEFAULT_FONT_SIZE_PX = 14
DEFAULT_DOCUMENT_CLASS = 'article'
DEFAULT_PARINDENT_PX = 20             # about 1.5em at 14px
DEFAULT_PARSKIP_PX = 0
DEFAULT_LINE_SPREAD = 1.0

# Order matters: the first keyword found in a geometry option list wins
PAPER_SIZE_KEYWORDS = [
    ('a4paper', 'A4'),
    ('a3paper', 'A3'),
    ('a5paper', 'A5'),
    ('letterpaper', 'LETTER'),
    ('legalpaper', 'LEGAL'),
]

# ===========================================
# HEIGHT ESTIMATION (pixels at scale=1)
# ===========================================
HEADING_HEIGHTS = {1: 80, 2: 60, 3: 45, 4: 35, 5: 30, 6: 25}
DEFAULT_HEADING_HEIGHT = 35

HEADING_LEVELS = {
    'chapter': 1,
    'section': 2,
    'subsection': 3,
    'subsubsection': 4,
}

TITLE_HEIGHT = 80
AUTHOR_HEIGHT = 35
DATE_HEIGHT = 30

# Title block font sizes relative to the document font size
TITLE_FONT_SCALE = 1.875
AUTHOR_FONT_SCALE = 1.125
DATE_FONT_SCALE = 0.875

CHARS_PER_LINE = 80                   # monospace-equivalent characters
PARAGRAPH_LINE_HEIGHT = 24
PARAGRAPH_SPACING = 16

MATH_LINE_HEIGHT = 30
MATH_MIN_HEIGHT = 40
MATH_SPACING = 20

LIST_ITEM_HEIGHT = 25
LIST_SPACING = 20

# ===========================================
# RENDERING
# ===========================================
SKIP_HEIGHTS = {
    'smallskip': 3,
    'medskip': 6,
    'bigskip': 12,
}
PAGE_SPACING = 24                     # gap between pages in multi-page view

# ===========================================
# FILLER TEXT (lipsum)
# ===========================================
LIPSUM_DEFAULT_PARAGRAPHS = 3
LIPSUM_MAX_PARAGRAPHS = 150           # matches the LaTeX lipsum package
LIPSUM_MIN_WORDS = 50
LIPSUM_MAX_WORDS = 100
LIPSUM_SEED = 0

# ===========================================
# OUTPUT
# ===========================================
SUPPORTED_OUTPUT_FORMATS = ['html', 'json']
DEFAULT_OUTPUT_FORMAT = 'html'

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
APP_LOGGER_NAME = 'texpages'
