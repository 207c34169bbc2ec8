import json
import shutil
from pathlib import Path
from datetime import datetime
from typing import Optional, Dict, Any, List

from audit_report.config.loader import load_config
from audit_report.config.report_config import ReportConfig
from audit_report.core.exceptions import ReportError
from audit_report.utils.logger import get_logger

log = get_logger("batch-runner")

SUPPORTED_EXT = (".json",)


# =====================================================
# PROCESS SINGLE FILE
# =====================================================

def run_single_file(
    file_path: Path,
    config: Dict[str, Any],
    run_dir: Path,
    locale: str = "en_US",
) -> Dict[str, Any]:
    """
    One results file -> one PDF in ``run_dir / <file stem>``.
    """
    from audit_report.reporting.assembler import ReportAssembler

    src = Path(file_path)
    file_run_dir = run_dir / src.stem

    log.info("Processing file: %s", src.name)

    with open(src, "r", encoding="utf-8") as f:
        result_tree = json.load(f)

    if not isinstance(result_tree, dict):
        raise ValueError(f"{src.name} must contain a JSON object")

    local_config = dict(config)
    local_config["output_dir"] = str(file_run_dir)

    pdf_path = ReportAssembler(ReportConfig.from_dict(local_config)).generate(result_tree, locale)

    log.info("Completed file: %s", src.name)

    return {
        "file": src.name,
        "pdf": str(pdf_path),
        "run_dir": str(file_run_dir),
    }


# =====================================================
# BATCH ENTRY POINT
# =====================================================

def run_batch(
    input_folder: str,
    config_path: Optional[str],
    output_root: str = "runs",
    locale: str = "en_US",
) -> List[Dict[str, Any]]:
    """
    - One timestamped run directory
    - One subfolder per results file
    - A failing file is copied to ``failed/`` and does not stop the batch
    """

    config = load_config(config_path)

    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    run_dir = Path(output_root) / timestamp
    run_dir.mkdir(parents=True, exist_ok=True)

    files = sorted(
        f for f in Path(input_folder).iterdir()
        if f.is_file() and f.suffix.lower() in SUPPORTED_EXT
    )

    log.info("Found %d input files", len(files))
    log.info("Batch run directory: %s", run_dir)

    results = []
    for src in files:
        try:
            results.append(run_single_file(src, config, run_dir, locale))

        except (ReportError, ValueError) as e:
            failed_path = run_dir / "failed" / src.name
            failed_path.parent.mkdir(exist_ok=True)
            shutil.copyfile(src, failed_path)

            log.error(
                "File failed: %s | Reason: %s",
                src.name,
                str(e),
            )

    log.info("Batch run completed: %s (%d/%d reports)", run_dir, len(results), len(files))
    return results
