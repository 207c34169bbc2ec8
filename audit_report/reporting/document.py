"""
In-memory page model.

Layout code draws into :class:`Page` objects; nothing touches the PDF
library until :mod:`audit_report.reporting.pdf_renderer` replays them.
"""

from dataclasses import dataclass, field
from typing import Any, List

from reportlab.lib.pagesizes import A4

from .styles import Style, general_style

PAGE_WIDTH, PAGE_HEIGHT = A4


@dataclass(frozen=True)
class TextOp:
    text: str
    x: float
    y: float
    style: Style


@dataclass(frozen=True)
class ImageOp:
    image: Any
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass
class Page:
    width: float = PAGE_WIDTH
    height: float = PAGE_HEIGHT
    style: Style = field(default_factory=general_style)
    operations: List[Any] = field(default_factory=list)

    def set_style(self, style: Style) -> None:
        self.style = style

    def draw_text(self, text: str, x: float, y: float) -> None:
        self.operations.append(TextOp(text, x, y, self.style))

    def draw_image(self, image, x1: float, y1: float, x2: float, y2: float) -> None:
        self.operations.append(ImageOp(image, x1, y1, x2, y2))

    @property
    def texts(self) -> List[TextOp]:
        return [op for op in self.operations if isinstance(op, TextOp)]

    @property
    def images(self) -> List[ImageOp]:
        return [op for op in self.operations if isinstance(op, ImageOp)]


@dataclass
class Document:
    pages: List[Page] = field(default_factory=list)

    def new_page(self) -> Page:
        page = Page()
        self.pages.append(page)
        return page

    @property
    def page_count(self) -> int:
        return len(self.pages)
