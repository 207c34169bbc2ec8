import yaml
import copy
from pathlib import Path

from .defaults import DEFAULT_CONFIG
from audit_report.config.report_config import ReportConfig


# -------------------------------------------------
# MAIN CONFIG LOADER
# -------------------------------------------------
def load_config(path: str | None) -> dict:
    """
    Load and merge user config with defaults.

    Rules:
    - Defaults must ALWAYS win if user omits fields
    - nested sections are merged one level deep
    - output_dir / file_name MUST always exist
    """

    # -------------------------------------------------
    # 1️⃣ Load user config (if provided)
    # -------------------------------------------------
    user_config = {}

    if path:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}

        if not isinstance(user_config, dict):
            raise ValueError("Config file must contain a YAML dictionary")

    return merge_config(user_config)


def merge_config(user_config: dict | None) -> dict:
    config = copy.deepcopy(DEFAULT_CONFIG)

    for key, value in (user_config or {}).items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key].update(value)
        else:
            config[key] = value

    config.setdefault("output_dir", "output")
    config.setdefault("file_name", "audit.pdf")

    return config


def load_report_config(path: str | None = None) -> ReportConfig:
    return ReportConfig.from_dict(load_config(path))
