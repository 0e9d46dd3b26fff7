"""
Page dimensions in pixels (at 96 DPI for web display)
"""

from dataclasses import dataclass, replace
from typing import Dict

from config.constants import DEFAULT_MARGIN_PX, DEFAULT_PAPER_SIZE


@dataclass(frozen=True)
class PageDimensions:
    """Paper size in pixels"""
    name: str
    width: float
    height: float
    aspect_ratio: float

    def landscape(self) -> 'PageDimensions':
        """Same paper turned sideways"""
        return PageDimensions(
            name=self.name,
            width=self.height,
            height=self.width,
            aspect_ratio=1 / self.aspect_ratio if self.aspect_ratio else 0.0,
        )

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "width": self.width,
            "height": self.height,
            "aspect_ratio": self.aspect_ratio,
        }


@dataclass(frozen=True)
class PageMargins:
    """Page margins in pixels"""
    top: float = DEFAULT_MARGIN_PX
    bottom: float = DEFAULT_MARGIN_PX
    left: float = DEFAULT_MARGIN_PX
    right: float = DEFAULT_MARGIN_PX

    @classmethod
    def uniform(cls, value: float) -> 'PageMargins':
        return cls(top=value, bottom=value, left=value, right=value)

    def with_side(self, side: str, value: float) -> 'PageMargins':
        return replace(self, **{side: value})

    def to_dict(self) -> Dict:
        return {
            "top": self.top,
            "bottom": self.bottom,
            "left": self.left,
            "right": self.right,
        }


PAGE_DIMENSIONS: Dict[str, PageDimensions] = {
    'A4': PageDimensions('A4', 794, 1123, 210 / 297),          # 210mm x 297mm
    'A3': PageDimensions('A3', 1123, 1587, 297 / 420),         # 297mm x 420mm
    'A5': PageDimensions('A5', 559, 794, 148 / 210),           # 148mm x 210mm
    'LETTER': PageDimensions('Letter', 816, 1056, 8.5 / 11),   # 8.5" x 11"
    'LEGAL': PageDimensions('Legal', 816, 1344, 8.5 / 14),     # 8.5" x 14"
}

DEFAULT_PAGE_DIMENSIONS = PAGE_DIMENSIONS[DEFAULT_PAPER_SIZE]
DEFAULT_PAGE_MARGINS = PageMargins()


def get_content_dimensions(dimensions: PageDimensions, margins: PageMargins) -> Dict[str, float]:
    """Content area inside the margins"""
    return {
        "width": dimensions.width - margins.left - margins.right,
        "height": dimensions.height - margins.top - margins.bottom,
    }
