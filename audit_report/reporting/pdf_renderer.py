"""
Replays a :class:`Document` on a ReportLab canvas.
"""

import io
import logging
from pathlib import Path
from typing import Optional

from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas as pdf_canvas

from .document import Document, ImageOp, Page, TextOp

logger = logging.getLogger(__name__)

PRODUCER = "audit-report"


def load_logo(path: Optional[Path]) -> Optional[ImageReader]:
    """
    Reads the logo once. A missing or unreadable image means no logo,
    never a failed report.
    """
    if path is None:
        return None
    try:
        with open(path, "rb") as fh:
            data = fh.read()
        logo = ImageReader(io.BytesIO(data))
        logo.getSize()
        return logo
    except Exception as exc:
        logger.warning("Failed to load report logo from %s: %s", path, exc)
        return None


def _draw_page(canvas, page: Page) -> None:
    for op in page.operations:
        if isinstance(op, TextOp):
            style = op.style
            canvas.setFont(style.font, style.size)
            canvas.setFillColorRGB(*style.color)
            canvas.setStrokeColorRGB(*style.color)
            canvas.drawString(op.x, op.y, op.text)
        elif isinstance(op, ImageOp):
            canvas.drawImage(
                op.image,
                op.x1,
                op.y1,
                width=op.x2 - op.x1,
                height=op.y2 - op.y1,
                preserveAspectRatio=True,
                mask="auto",
            )


def render_pdf(document: Document, title: str = "Audit report") -> bytes:
    buffer = io.BytesIO()
    canvas = pdf_canvas.Canvas(buffer)
    canvas.setProducer(PRODUCER)
    canvas.setTitle(title)
    # uncompressed page streams keep the report text greppable
    canvas.setPageCompression(0)

    for page in document.pages:
        canvas.setPageSize((page.width, page.height))
        _draw_page(canvas, page)
        canvas.showPage()

    canvas.save()
    return buffer.getvalue()
