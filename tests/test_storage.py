import pytest

from audit_report.core.exceptions import ReportIOError
from audit_report.storage import write_output


def test_write_output_creates_directory(tmp_path):
    path = write_output(b"%PDF-1.4", "audit.pdf", tmp_path / "media" / "audit")

    assert path == tmp_path / "media" / "audit" / "audit.pdf"
    assert path.read_bytes() == b"%PDF-1.4"


def test_write_output_failure_is_reported(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(ReportIOError) as excinfo:
        write_output(b"data", "audit.pdf", blocker / "sub")

    assert isinstance(excinfo.value.__cause__, OSError)
