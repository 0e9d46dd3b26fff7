"""
LaTeX length units

Converts LaTeX lengths (``10pt``, ``2em``, ``1.5cm``) to CSS pixels at
96 DPI. Conversion is total: anything that does not parse as a number
converts to 0 and unknown units are treated as pixels.
"""

import re
import logging
from typing import Optional, Union

from config.constants import UNIT_TO_PX

logger = logging.getLogger(__name__)

LATEX_UNITS = tuple(UNIT_TO_PX.keys())

_UNIT_VALUE_RE = re.compile(r'^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))\s*([a-zA-Z]*)\s*$')
_LENGTH_TOKEN_RE = re.compile(
    r'^\s*\d+(?:\.\d+)?\s*(?:' + '|'.join(LATEX_UNITS) + r')\s*$',
    re.IGNORECASE,
)


def convert_latex_unit(magnitude: Union[float, int, str], unit: str = '') -> float:
    """
    Convert a magnitude in a LaTeX unit to pixels.

    Args:
        magnitude: Numeric magnitude (numbers or numeric strings)
        unit: One of pt, px, em, cm, mm, in (case-insensitive).
            Missing or unknown units are taken as pixels.

    Returns:
        Pixel value, 0.0 for malformed magnitudes

    Examples:
        >>> convert_latex_unit(1, 'in')
        96.0
        >>> convert_latex_unit('abc', 'pt')
        0.0
    """
    try:
        value = float(magnitude)
    except (TypeError, ValueError):
        logger.debug(f"Non-numeric magnitude {magnitude!r}, using 0")
        return 0.0

    # nan/inf are not lengths
    if value != value or value in (float('inf'), float('-inf')):
        return 0.0

    multiplier = UNIT_TO_PX.get((unit or '').strip().lower(), 1.0)
    return value * multiplier


def parse_length(token: str) -> Optional[float]:
    """
    Pixel value of a combined length token, or None if it does not parse.

    Callers that must keep a previous value on bad input use this instead
    of convert_unit_value.
    """
    if not isinstance(token, str):
        return None

    match = _UNIT_VALUE_RE.match(token)
    if not match:
        return None

    number, unit = match.groups()
    return convert_latex_unit(number, unit)


def convert_unit_value(token: str) -> float:
    """
    Convert a combined length token such as ``"12pt"`` or ``"1.5 cm"``.

    Returns 0.0 when the token has no leading number.
    """
    value = parse_length(token)
    if value is None:
        logger.debug(f"Unparsable length {token!r}, using 0")
        return 0.0
    return value


def is_latex_unit(token: str) -> bool:
    """True if token is a plain ``<number><unit>`` length."""
    return bool(isinstance(token, str) and _LENGTH_TOKEN_RE.match(token))
