"""
Audit Report v1.0

Paginated PDF reports for nested audit results
(errors, warnings and suggestions per type, section and subsection).
"""

from .__version__ import __version__

from .config import ReportConfig, load_config, load_report_config
from .core.exceptions import ReportError, ReportIOError, UnknownSectionError
from .reporting import ReportAssembler, generate_report

__all__ = [
    "__version__",
    "ReportConfig",
    "load_config",
    "load_report_config",
    "ReportError",
    "ReportIOError",
    "UnknownSectionError",
    "ReportAssembler",
    "generate_report",
]
