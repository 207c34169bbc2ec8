"""
PDF audit report generation.

Module Structure:
- size_calculator.py: space estimates, wrapping, whitespace normalization
- styles.py: typography
- document.py: in-memory pages and draw operations
- layout.py: cursor, page breaks and drawing primitives
- specific_sections.py: renderers for tagged entries
- assembler.py: result tree walk
- pdf_renderer.py: ReportLab serialization

Usage:
    from audit_report.reporting import ReportAssembler

    path = ReportAssembler(config).generate(result_tree, "fr_FR")
"""
from .assembler import ReportAssembler, generate_report, summarize
from .document import Document, Page
from .layout import LayoutEngine
from .pdf_renderer import load_logo, render_pdf
from .specific_sections import (
    SectionRenderer,
    SpecificSectionRegistry,
    default_registry,
)

__all__ = [
    "ReportAssembler",
    "generate_report",
    "summarize",
    "Document",
    "Page",
    "LayoutEngine",
    "load_logo",
    "render_pdf",
    "SectionRenderer",
    "SpecificSectionRegistry",
    "default_registry",
]
