from .loader import load_config, load_report_config, merge_config
from .defaults import DEFAULT_CONFIG
from .report_config import ReportConfig

__all__ = [
    "load_config",
    "load_report_config",
    "merge_config",
    "DEFAULT_CONFIG",
    "ReportConfig",
]
