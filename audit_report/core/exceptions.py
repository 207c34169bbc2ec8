class ReportError(Exception):
    """Base class for report generation failures."""


class ReportIOError(ReportError):
    """Output directory or file could not be written."""


class UnknownSectionError(ReportError):
    """An entry asks for a specific section renderer that is not registered."""

    def __init__(self, tag: str, available=None):
        self.tag = tag
        self.available = sorted(available or [])
        super().__init__(
            f"No renderer registered for specific section '{tag}' "
            f"(available: {', '.join(self.available) or 'none'})"
        )
