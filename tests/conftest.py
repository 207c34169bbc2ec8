from datetime import datetime

import pytest

from audit_report.config.report_config import ReportConfig


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 1, 2, 3, 4, 5)


@pytest.fixture
def report_config(tmp_path):
    """
    Report config writing into a temporary folder, no cover page.
    """
    return ReportConfig(output_dir=tmp_path / "out", cover_page=False)


@pytest.fixture
def one_error_tree():
    """
    One type, one section, one subsection with a single error entry.
    """
    return {
        "Code quality": {
            "Helpers": {
                "extensionOfAbstractHelper": {
                    "hasErrors": True,
                    "errors": {
                        "helpersExtension": {
                            "title": "Helper extends AbstractHelper",
                            "explanation": "Helpers should not extend\n\tAbstractHelper.",
                            "files": ["Helper/Data.php", "Helper/Price.php", "Helper/Url.php"],
                        },
                    },
                    "warnings": {},
                    "suggestions": {},
                },
            },
        },
    }
