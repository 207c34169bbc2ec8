from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from audit_report.i18n.translator import DEFAULT_FALLBACKS

BUNDLED_I18N_DIR = Path(__file__).resolve().parent.parent / "i18n" / "locales"


# -------------------------------------------------
# REPORT CONFIG
# -------------------------------------------------
@dataclass
class ReportConfig:
    """
    Typed view over the merged configuration dict.
    """
    header_text: str = "EasyAudit Report"
    logo_path: Optional[Path] = None
    cover_page: bool = True
    left_margin: int = 50
    block_vm_ratio_threshold: float = 0.5
    i18n_dir: Path = BUNDLED_I18N_DIR
    language_fallbacks: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_FALLBACKS))
    output_dir: Path = Path("output")
    file_name: str = "audit.pdf"

    @classmethod
    def from_dict(cls, cfg: dict) -> "ReportConfig":
        report = cfg.get("report", {}) or {}
        locale = cfg.get("locale", {}) or {}

        logo_path = report.get("logo_path")
        i18n_dir = locale.get("i18n_dir")

        defaults = cls()
        fallbacks = dict(defaults.language_fallbacks)
        fallbacks.update(locale.get("fallbacks") or {})

        return cls(
            header_text=report.get("header_text", defaults.header_text),
            logo_path=Path(logo_path) if logo_path else None,
            cover_page=bool(report.get("cover_page", defaults.cover_page)),
            left_margin=int(report.get("left_margin", defaults.left_margin)),
            block_vm_ratio_threshold=float(
                report.get("block_vm_ratio_threshold", defaults.block_vm_ratio_threshold)
            ),
            i18n_dir=Path(i18n_dir) if i18n_dir else BUNDLED_I18N_DIR,
            language_fallbacks=fallbacks,
            output_dir=Path(cfg.get("output_dir", defaults.output_dir)),
            file_name=cfg.get("file_name", defaults.file_name),
        )
