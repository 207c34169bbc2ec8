"""
Layout engine for the audit report.

Owns the cursor (``x``, ``y``), the current page and its style, and
decides page breaks. One instance per generated report; never shared.

Coordinates follow the PDF convention: origin at the bottom-left corner,
so writing moves ``y`` down towards the bottom margin.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from .document import Document, Page
from .size_calculator import (
    BOTTOM_MARGIN,
    CAUTION_SIZE,
    PAGE_TOP,
    WRAP_WIDTH,
    intro_size,
    line_height,
    normalize_whitespace,
    wrap_text,
)
from .styles import (
    ERROR_RED,
    Style,
    error_style,
    general_style,
    sub_title_style,
    title_style,
    warning_style,
)

logger = logging.getLogger(__name__)

TITLE_BREAK_THRESHOLD = 130
SECTION_BREAK_THRESHOLD = 140

SECTION_TITLE_X = 43
BLOCK_LABEL_X = 44
INTRO_TITLE_X = 48


def _identity(text):
    return str(text)


class LayoutEngine:
    """Cursor, page stack and drawing primitives."""

    def __init__(
        self,
        translate: Optional[Callable[[str], str]] = None,
        header_text: str = "EasyAudit Report",
        logo: Any = None,
        x: int = 50,
        created_at: Optional[datetime] = None,
        document: Optional[Document] = None,
    ):
        self.translate = translate or _identity
        self.header_text = header_text
        self.logo = logo
        self.x = x
        self.y = PAGE_TOP
        self.created_at = created_at or datetime.now()
        self.document = document if document is not None else Document()
        self.current_page: Optional[Page] = None

    # -- page management ----------------------------------------------------

    def add_page(self) -> Page:
        """Append a page, reset style and cursor, and draw the chrome."""
        self.current_page = self.document.new_page()
        self.set_general_style()
        self.y = PAGE_TOP
        self._make_header_and_footer()
        logger.debug("Page %s started", self.document.page_count)
        return self.current_page

    def ensure_room(self, needed: float) -> bool:
        """Break the page when fewer than ``needed`` units remain. Returns True on a break."""
        if self.y < needed:
            self.add_page()
            return True
        return False

    def _page(self) -> Page:
        if self.current_page is None:
            self.add_page()
        return self.current_page

    def _make_header_and_footer(self) -> None:
        page = self.current_page
        page.draw_text(self.header_text, 20, 20)
        if self.logo is not None:
            page.draw_image(self.logo, 500, 800, 550, 820)
        page.draw_text(f"Created on : {self.created_at:%Y-%m-%d %H:%M:%S}", 420, 20)

    # -- styles -------------------------------------------------------------

    def _apply(self, style: Style) -> None:
        self._page().set_style(style)

    def set_general_style(self, size=9, r=0, g=0, b=0) -> None:
        self._apply(general_style(size, r, g, b))

    def set_title_style(self, size=20) -> None:
        self._apply(title_style(size))

    def set_sub_title_style(self, size=12) -> None:
        self._apply(sub_title_style(size))

    def set_error_style(self, size=11) -> None:
        self._apply(error_style(size))

    def set_warning_style(self, size=11) -> None:
        self._apply(warning_style(size))

    # -- primitives ---------------------------------------------------------

    def draw_text(self, text: str, x: float, y: Optional[float] = None) -> None:
        """Raw draw at the cursor height (or ``y``); the cursor does not move."""
        self._page().draw_text(text, x, self.y if y is None else y)

    def write_title(self, text, x: Optional[float] = None) -> None:
        text = self.translate(text)
        self._page()
        self.y -= 10
        if self.y < TITLE_BREAK_THRESHOLD:
            self.add_page()
        x = self.x if x is None else x
        self.set_title_style()
        self.y -= 15
        self.draw_text(text.upper(), x)
        self.y -= 30
        self.set_general_style()

    def write_section_title(self, text) -> None:
        text = self.translate(text)
        self.set_title_style(15)
        self.y -= 15
        self.draw_text(text.upper(), SECTION_TITLE_X)
        self.y -= 20
        if self.y < BOTTOM_MARGIN:
            self.add_page()
        self.set_general_style()

    def write_block_label(self, text) -> None:
        """Errors / Warnings / Suggestions label, drawn in the style already set."""
        self.draw_text(self.translate(text), BLOCK_LABEL_X)

    def write_sub_section_intro(self, entry: Mapping[str, Any]) -> None:
        self._page()
        self.ensure_room(intro_size(entry))

        title = entry.get("title")
        if title is not None:
            self.y -= 20
            self.set_sub_title_style()
            self.draw_text(self.translate(title), INTRO_TITLE_X)

        explanation = entry.get("explanation")
        if explanation is not None:
            self.y -= 10
            self.write_line(normalize_whitespace(str(explanation)))

        caution = entry.get("caution")
        if caution is not None:
            self.write_line(normalize_whitespace(str(caution)), CAUTION_SIZE, *ERROR_RED)

    def write_line(self, text, size=9, r=0, g=0, b=0) -> None:
        """
        Draws ``text`` after translation, wrapping past 130 characters.

        Wrapped fragments keep ``size`` and the colour of the whole line,
        so a long caution stays small and red on every fragment.
        """
        text = self.translate(text)
        style = general_style(size, r, g, b)

        if len(text) > WRAP_WIDTH:
            # each fragment restyles: a break in between resets the page style
            for index, fragment in enumerate(wrap_text(text, WRAP_WIDTH)):
                if index:
                    fragment = fragment.lstrip()
                self._apply(style)
                self._draw_line(fragment.rstrip(), size)
            return

        self._apply(style)
        self._draw_line(text, size)

    def _draw_line(self, text: str, size) -> None:
        self.draw_text(text, self.x)
        self.y -= line_height(size)
        if self.y < BOTTOM_MARGIN:
            self.add_page()
