"""
LaTeX Directive Matchers

A closed set of matchers for the directives the layout pipeline
understands. Every matcher is total: malformed input simply does not
match, nothing raises.

Two kinds of matcher:
- RegexDirective: fixed pattern (document class, geometry, setlength, ...)
- CommandDirective: ``\\name{...}`` with a balanced braced argument
  (headings, title/author/date), so ``\\title{A \\textbf{B}}`` keeps its
  inner braces.

Usage:
    >>> from texpages.latex.directives import HEADING, TITLE
    >>> HEADING.search(r"\\section{Intro}").groups
    ('section', 'Intro')
"""

import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class DirectiveMatch:
    """One directive occurrence in a text."""
    name: str
    groups: Tuple[Optional[str], ...]
    start: int
    end: int

    @property
    def argument(self) -> Optional[str]:
        """Last captured group (the braced argument for commands)."""
        return self.groups[-1] if self.groups else None


class RegexDirective:
    """Directive matched by a single compiled regular expression."""

    def __init__(self, name: str, pattern: str, flags: int = 0):
        self.name = name
        self.regex = re.compile(pattern, flags)

    def search(self, text: str) -> Optional[DirectiveMatch]:
        """First occurrence, or None."""
        match = self.regex.search(text or '')
        if not match:
            return None
        return DirectiveMatch(self.name, match.groups(), match.start(), match.end())

    def finditer(self, text: str) -> Iterator[DirectiveMatch]:
        for match in self.regex.finditer(text or ''):
            yield DirectiveMatch(self.name, match.groups(), match.start(), match.end())

    def count(self, text: str) -> int:
        return sum(1 for _ in self.regex.finditer(text or ''))

    def matches(self, text: str) -> bool:
        return self.regex.search(text or '') is not None

    def remove(self, text: str) -> str:
        return self.regex.sub('', text or '')


def read_braced(text: str, open_index: int) -> Optional[Tuple[str, int]]:
    """
    Read a balanced ``{...}`` group starting at ``text[open_index]``.

    Escaped braces (``\\{``, ``\\}``) do not count towards nesting.

    Returns:
        (inner content, index just past the closing brace), or None when
        the group is not closed.
    """
    if open_index >= len(text) or text[open_index] != '{':
        return None

    depth = 0
    i = open_index
    while i < len(text):
        char = text[i]
        if char == '\\':
            i += 2
            continue
        if char == '{':
            depth += 1
        elif char == '}':
            depth -= 1
            if depth == 0:
                return text[open_index + 1:i], i + 1
        i += 1
    return None


class CommandDirective:
    """``\\command{argument}`` with a balanced braced argument."""

    def __init__(self, name: str, commands: Sequence[str], allow_star: bool = False):
        self.name = name
        self.commands = tuple(commands)
        star = r'\*?' if allow_star else ''
        self.head = re.compile(
            r'\\(' + '|'.join(self.commands) + r')' + star + r'\s*(?=\{)'
        )

    def finditer(self, text: str) -> Iterator[DirectiveMatch]:
        text = text or ''
        pos = 0
        while True:
            head = self.head.search(text, pos)
            if not head:
                return
            braced = read_braced(text, head.end())
            if braced is None:
                # Unclosed argument: skip this head and keep scanning
                pos = head.end()
                continue
            argument, end = braced
            yield DirectiveMatch(self.name, (head.group(1), argument), head.start(), end)
            pos = end

    def search(self, text: str) -> Optional[DirectiveMatch]:
        return next(self.finditer(text), None)

    def matches(self, text: str) -> bool:
        return self.search(text) is not None

    def remove(self, text: str) -> str:
        text = text or ''
        parts: List[str] = []
        last = 0
        for match in self.finditer(text):
            parts.append(text[last:match.start])
            last = match.end
        parts.append(text[last:])
        return ''.join(parts)


# ============================================================================
# Header directives
# ============================================================================

DOCUMENT_CLASS = RegexDirective(
    'documentclass', r'\\documentclass(?:\[([^\]]*)\])?\{([^}]*)\}'
)
GEOMETRY = RegexDirective('geometry', r'\\usepackage\[([^\]]*)\]\{geometry\}')
USEPACKAGE = RegexDirective('usepackage', r'\\usepackage(?:\[[^\]]*\])?\{[^}]*\}')
PARINDENT = RegexDirective('parindent', r'\\setlength\{\\parindent\}\{([^}]+)\}')
PARSKIP = RegexDirective('parskip', r'\\setlength\{\\parskip\}\{([^}]+)\}')
SETLENGTH = RegexDirective('setlength', r'\\setlength\{\\[a-zA-Z@]+\}\{[^}]*\}')
LINESPREAD = RegexDirective('linespread', r'\\linespread\{([^}]+)\}')

BEGIN_DOCUMENT = RegexDirective('begin_document', r'\\begin\{document\}')
END_DOCUMENT = RegexDirective('end_document', r'\\end\{document\}')

# ============================================================================
# Title block
# ============================================================================

MAKETITLE = RegexDirective('maketitle', r'\\maketitle(?![a-zA-Z])')
TITLE = CommandDirective('title', ['title'])
AUTHOR = CommandDirective('author', ['author'])
DATE = CommandDirective('date', ['date'])
TODAY = RegexDirective('today', r'^\s*\\today\s*$')

# ============================================================================
# Body structure
# ============================================================================

HEADING = CommandDirective(
    'heading', ['chapter', 'section', 'subsection', 'subsubsection'], allow_star=True
)
DISPLAY_MATH_OPEN = RegexDirective('display_math_open', r'^(\\\[|\$\$)')
LIST_BEGIN = RegexDirective('list_begin', r'^\\begin\{(itemize|enumerate)\}')
ITEM = RegexDirective('item', r'\\item(?![a-zA-Z])')

# \lipsum, \lipsum[n], \lipsum[n-m]
LIPSUM = RegexDirective('lipsum', r'\\lipsum(?![a-zA-Z])(?:\[\s*(\d+)\s*(?:-\s*(\d+)\s*)?\])?')

DISPLAY_MATH_CLOSERS = {
    '\\[': '\\]',
    '$$': '$$',
}

# Removed from body text before segmentation; they configure, not render
HEADER_ONLY_DIRECTIVES = [
    DOCUMENT_CLASS,
    USEPACKAGE,
    SETLENGTH,
    LINESPREAD,
    BEGIN_DOCUMENT,
    END_DOCUMENT,
    TITLE,
    AUTHOR,
    DATE,
    MAKETITLE,
]


def list_begin_pattern(environment: str) -> re.Pattern:
    return re.compile(r'\\begin\{' + re.escape(environment) + r'\}')


def list_end_pattern(environment: str) -> re.Pattern:
    return re.compile(r'\\end\{' + re.escape(environment) + r'\}')


def split_options(options: str) -> List[str]:
    """
    Split a bracketed option list on commas that are not inside braces.

    >>> split_options("a4paper, papersize={10cm,20cm}, margin=1in")
    ['a4paper', 'papersize={10cm,20cm}', 'margin=1in']
    """
    parts: List[str] = []
    depth = 0
    current: List[str] = []
    for char in options or '':
        if char == '{':
            depth += 1
        elif char == '}':
            depth = max(0, depth - 1)
        if char == ',' and depth == 0:
            parts.append(''.join(current).strip())
            current = []
            continue
        current.append(char)
    parts.append(''.join(current).strip())
    return [part for part in parts if part]


def strip_header_directives(text: str) -> str:
    """Remove directives that only configure the document."""
    for directive in HEADER_ONLY_DIRECTIVES:
        text = directive.remove(text)
    return text
