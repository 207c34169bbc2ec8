from .exceptions import ReportError, ReportIOError, UnknownSectionError
from .results import (
    SECTION_KINDS,
    count_entries,
    is_actionable,
    select_results,
)

__all__ = [
    "ReportError",
    "ReportIOError",
    "UnknownSectionError",
    "SECTION_KINDS",
    "count_entries",
    "is_actionable",
    "select_results",
]
