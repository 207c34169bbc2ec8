"""
Typography for the audit report.

Every style uses Times-Roman; only size and colour change.
Colours are RGB floats in 0..1, used for both stroke and fill.
"""

from dataclasses import dataclass
from typing import Tuple

FONT_FAMILY = "Times-Roman"

BLACK = (0, 0, 0)
TITLE_BLUE = (0, 0, 0.85)
SUB_TITLE_BLUE = (0, 0.45, 0.85)
ERROR_RED = (0.85, 0, 0)
WARNING_ORANGE = (0.85, 0.45, 0)
FILE_GRAY = (0.2, 0.2, 0.2)


@dataclass(frozen=True)
class Style:
    font: str = FONT_FAMILY
    size: float = 9
    color: Tuple[float, float, float] = BLACK


def general_style(size=9, r=0, g=0, b=0) -> Style:
    return Style(FONT_FAMILY, size, (r, g, b))


def title_style(size=20) -> Style:
    return Style(FONT_FAMILY, size, TITLE_BLUE)


def sub_title_style(size=12) -> Style:
    return Style(FONT_FAMILY, size, SUB_TITLE_BLUE)


def error_style(size=11) -> Style:
    return Style(FONT_FAMILY, size, ERROR_RED)


def warning_style(size=11) -> Style:
    return Style(FONT_FAMILY, size, WARNING_ORANGE)
