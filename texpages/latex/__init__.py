"""
LaTeX source handling

Leaf utilities shared by the layout pipeline:
- units: LaTeX lengths to pixels
- directives: the closed set of directive matchers
- cursor: forward line cursor for multi-line constructs
- lipsum: filler text expansion

Example usage:
    >>> from texpages.latex import convert_unit_value, expand_lipsum
    >>> convert_unit_value("1in")
    96.0
    >>> body = expand_lipsum(r"\\lipsum[1-2]")
"""

from texpages.latex.units import (
    LATEX_UNITS,
    convert_latex_unit,
    convert_unit_value,
    is_latex_unit,
    parse_length,
)
from texpages.latex.cursor import LineCursor
from texpages.latex.lipsum import LipsumGenerator, expand_lipsum

__all__ = [
    'LATEX_UNITS',
    'convert_latex_unit',
    'convert_unit_value',
    'is_latex_unit',
    'parse_length',
    'LineCursor',
    'LipsumGenerator',
    'expand_lipsum',
]
