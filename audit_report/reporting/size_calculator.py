"""
Vertical space estimates for upcoming blocks.

These are lower bounds used to avoid orphaned titles: they count the
title of a block plus its first line of content, not the wrapped height
of the whole block. Nothing here draws or touches layout state.
"""

import math
import re
from typing import Any, List, Mapping

from audit_report.core.results import SECTION_KINDS, first_entry

PAGE_TOP = 850 - 50
BOTTOM_MARGIN = 50
WRAP_WIDTH = 130

BODY_SIZE = 9
CAUTION_SIZE = 8

SECTION_TITLE_HEIGHT = 15 + 20
BLOCK_LABEL_HEIGHT = 15
INTRO_TITLE_HEIGHT = 20
EXPLANATION_GAP = 10

_WHITESPACE = re.compile(r"\s+")


def line_height(size: float = BODY_SIZE) -> int:
    return math.floor(size * 1.3)


def normalize_whitespace(text: str) -> str:
    """Collapses every run of spaces, tabs and line breaks to one space."""
    return _WHITESPACE.sub(" ", text)


def wrap_text(text: str, width: int = WRAP_WIDTH) -> List[str]:
    """
    Splits ``text`` into fragments of at most ``width`` characters.

    A fragment ends right after the last space that fits; a word longer
    than ``width`` is cut. When the space falls just past ``width`` the
    next fragment starts with it. ``"".join(fragments) == text`` always
    holds.
    """
    fragments = []
    remaining = text
    while len(remaining) > width:
        if remaining[width] == " ":
            cut = width
        else:
            cut = remaining.rfind(" ", 0, width)
            cut = width if cut <= 0 else cut + 1
        fragments.append(remaining[:cut])
        remaining = remaining[cut:]
    if remaining or not fragments:
        fragments.append(remaining)
    return fragments


def intro_size(entry: Mapping[str, Any]) -> int:
    """Room needed for an entry's title, first explanation line and first caution line."""
    size = BOTTOM_MARGIN
    if entry.get("title") is not None:
        size += INTRO_TITLE_HEIGHT
    if entry.get("explanation") is not None:
        size += EXPLANATION_GAP + line_height(BODY_SIZE)
    if entry.get("caution") is not None:
        size += line_height(CAUTION_SIZE)
    return size


def title_plus_first_subsection(block: Mapping[str, Any], is_error_section: bool = False) -> int:
    """
    With ``is_error_section`` the block is a whole sub result: section
    title plus the estimate of its first non-empty list. Otherwise the
    block is one errors/warnings/suggestions mapping: label, intro of the
    first entry and one file line.
    """
    if is_error_section:
        for kind in SECTION_KINDS:
            entries = block.get(kind)
            if entries:
                return SECTION_TITLE_HEIGHT + title_plus_first_subsection(entries)
        return SECTION_TITLE_HEIGHT + BOTTOM_MARGIN

    size = BLOCK_LABEL_HEIGHT + line_height(BODY_SIZE)
    entry = first_entry(block)
    if isinstance(entry, Mapping):
        size += intro_size(entry)
    else:
        size += BOTTOM_MARGIN
    return size
