import logging
from pathlib import Path

from audit_report.core.exceptions import ReportIOError

logger = logging.getLogger(__name__)


def write_output(data: bytes, name: str, output_dir) -> Path:
    """
    Writes ``data`` to ``output_dir / name``, creating the directory first.
    """
    output_path = Path(output_dir) / name
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)
    except OSError as exc:
        raise ReportIOError(f"Could not write report to {output_path}: {exc}") from exc

    logger.info("Report written: %s", output_path)
    return output_path
