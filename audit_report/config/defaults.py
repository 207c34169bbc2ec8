from audit_report.i18n.translator import DEFAULT_FALLBACKS

DEFAULT_CONFIG = {
    # -----------------------------
    # REPORT LAYOUT
    # -----------------------------
    "report": {
        "header_text": "EasyAudit Report",
        "logo_path": None,          # no logo by default
        "cover_page": True,
        "left_margin": 50,
        # modules above this block / view model ratio are flagged
        "block_vm_ratio_threshold": 0.5,
    },

    # -----------------------------
    # TRANSLATIONS
    # -----------------------------
    "locale": {
        "i18n_dir": None,           # None = bundled dictionaries
        "fallbacks": dict(DEFAULT_FALLBACKS),
    },

    # -----------------------------
    # OUTPUT CONTROL
    # -----------------------------
    "output_dir": "output",
    "file_name": "audit.pdf",
}
