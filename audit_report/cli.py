"""
Audit Report CLI
v1.0 - JSON results → paginated PDF (ReportLab)
"""

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import Any, Dict, List, Optional

from audit_report.__version__ import __version__
from audit_report.config.loader import load_config
from audit_report.config.report_config import ReportConfig
from audit_report.core.exceptions import ReportError
from audit_report.core.results import parse_selection, select_results

logger = logging.getLogger(__name__)


# -------------------------------------------------
# PROGRAMMATIC ENTRY
# -------------------------------------------------
def run_single_file(
    input_path: str,
    locale: str = "en_US",
    config_path: Optional[str] = None,
    config: Optional[Dict[str, Any]] = None,
    output_dir: Optional[str] = None,
    only: Optional[List[str]] = None,
) -> Dict[str, Optional[str]]:
    """
    Returns:
        {
            "pdf": <path>,
            "locale": <requested locale>
        }
    """
    from audit_report.reporting.assembler import ReportAssembler

    final_config = dict(config) if config is not None else load_config(config_path)
    if output_dir:
        final_config["output_dir"] = output_dir

    with open(input_path, "r", encoding="utf-8") as f:
        result_tree = json.load(f)

    if not isinstance(result_tree, dict):
        raise ValueError("Results file must contain a JSON object")

    if only:
        result_tree = select_results(result_tree, parse_selection(only))

    assembler = ReportAssembler(ReportConfig.from_dict(final_config))
    pdf_path = assembler.generate(result_tree, locale)

    return {
        "pdf": str(pdf_path),
        "locale": locale,
    }


# -------------------------------------------------
# CLI ENTRY
# -------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description=f"Audit Report v{__version__}"
    )

    parser.add_argument("input", nargs="?", help="Audit results JSON file")
    parser.add_argument("--config", required=False, help="Path to config YAML")
    parser.add_argument("--locale", default="en_US", help="Report locale, e.g. fr_FR")
    parser.add_argument("--output-dir", help="Override output directory")
    parser.add_argument("--batch", help="Render every results JSON in this folder")
    parser.add_argument(
        "--only",
        action="append",
        metavar="TYPE[/SECTION[/SUBSECTION]]",
        help="Restrict the report to these results (repeatable)",
    )

    parser.add_argument("--version", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args(argv)

    # ---- VERSION ----
    if args.version:
        print(f"Audit Report v{__version__}")
        return 0

    # ---- LOGGING ----
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    # ---- BATCH ----
    if args.batch:
        from audit_report.automation.batch_runner import run_batch

        run_batch(
            args.batch,
            args.config,
            output_root=args.output_dir or "runs",
            locale=args.locale,
        )
        return 0

    # ---- SINGLE FILE ----
    if not args.input:
        parser.error("Input file required")

    input_path = Path(args.input)
    if not input_path.exists():
        raise FileNotFoundError(input_path)

    try:
        result = run_single_file(
            input_path=str(input_path),
            locale=args.locale,
            config_path=args.config,
            output_dir=args.output_dir,
            only=args.only,
        )
    except ReportError:
        logger.exception("Report generation failed")
        return 1

    print("\nReport generated")
    print(f"PDF: {result['pdf']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
