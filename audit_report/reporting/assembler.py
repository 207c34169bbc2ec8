"""
Walks the audit result tree and drives the layout engine.

Render order is the insertion order of the tree. A section gets a new
page and its title only when at least one of its subsections has
findings; subsections without findings leave no trace in the report.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

from audit_report.config.report_config import ReportConfig
from audit_report.core.results import (
    SECTION_KINDS,
    count_entries,
    is_actionable,
    split_specific_section,
)
from audit_report.i18n.translator import Translator
from audit_report.storage import write_output

from .document import Document
from .layout import SECTION_BREAK_THRESHOLD, LayoutEngine
from .pdf_renderer import load_logo, render_pdf
from .size_calculator import title_plus_first_subsection
from .specific_sections import SpecificSectionRegistry, default_registry
from .styles import FILE_GRAY

logger = logging.getLogger(__name__)

SECTION_TITLE_X = 40
BLOCK_LABEL_SIZE = 14


def summarize(result_tree: Mapping[str, Any]) -> Dict[str, Dict[str, int]]:
    """
    Per type: number of subsections with findings and number of entries
    per kind. Types without findings are left out.
    """
    summary = {}
    for type_name, sections in result_tree.items():
        totals = {"subsections": 0, **{kind: 0 for kind in SECTION_KINDS}}
        for subsections in (sections or {}).values():
            for sub_result in (subsections or {}).values():
                if not is_actionable(sub_result):
                    continue
                totals["subsections"] += 1
                for kind, count in count_entries(sub_result).items():
                    totals[kind] += count
        if totals["subsections"]:
            summary[type_name] = totals
    return summary


class ReportAssembler:
    def __init__(
        self,
        config: Optional[ReportConfig] = None,
        registry: Optional[SpecificSectionRegistry] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.config = config or ReportConfig()
        self.registry = registry or default_registry(self.config.block_vm_ratio_threshold)
        self.clock = clock

    # =================================================
    # ENTRY POINTS
    # =================================================
    def build_document(self, result_tree: Mapping[str, Any], locale: str) -> Document:
        cfg = self.config
        translator = Translator.for_locale(locale, cfg.i18n_dir, cfg.language_fallbacks)

        layout = LayoutEngine(
            translate=translator.translate,
            header_text=cfg.header_text,
            logo=load_logo(cfg.logo_path),
            x=cfg.left_margin,
            created_at=self.clock(),
        )

        if cfg.cover_page:
            self._write_cover(layout, result_tree, translator)

        for type_name, sections in result_tree.items():
            logger.debug("Rendering type %s", type_name)
            for section, subsections in (sections or {}).items():
                is_first = True
                for subsection, sub_result in (subsections or {}).items():
                    if not is_actionable(sub_result):
                        continue
                    if is_first:
                        layout.add_page()
                        layout.write_title(section, SECTION_TITLE_X)
                        is_first = False
                    layout.ensure_room(
                        SECTION_BREAK_THRESHOLD + title_plus_first_subsection(sub_result, True)
                    )
                    layout.write_section_title(subsection)
                    self._manage_sub_result(layout, sub_result)

        logger.info("Report laid out on %s page(s)", layout.document.page_count)
        return layout.document

    def generate(self, result_tree: Mapping[str, Any], locale: str) -> Path:
        """Lays out, serializes and writes the report. Returns the written path."""
        document = self.build_document(result_tree, locale)
        data = render_pdf(document, title=self.config.header_text)
        return write_output(data, self.config.file_name, self.config.output_dir)

    # =================================================
    # COVER
    # =================================================
    def _write_cover(self, layout: LayoutEngine, result_tree, translator: Translator) -> None:
        t = translator.translate
        layout.add_page()
        layout.write_title("Audit report")
        layout.write_line(f"{t('Locale')}: {translator.locale}")
        layout.write_line(f"{layout.created_at:%Y-%m-%d %H:%M:%S}")

        summary = summarize(result_tree)
        layout.write_section_title("Summary")
        if not summary:
            layout.write_line("No findings.")
            return

        for type_name, totals in summary.items():
            layout.write_line(
                f"{t(type_name)} - {t('Sections with findings')}: {totals['subsections']}, "
                f"{t('Errors')}: {totals['errors']}, "
                f"{t('Warnings')}: {totals['warnings']}, "
                f"{t('Suggestions')}: {totals['suggestions']}"
            )

    # =================================================
    # SUB RESULTS
    # =================================================
    def _manage_sub_result(self, layout: LayoutEngine, sub_result: Mapping[str, Any]) -> None:
        errors = sub_result.get("errors")
        if errors:
            layout.ensure_room(title_plus_first_subsection(errors))
            layout.set_error_style(BLOCK_LABEL_SIZE)
            self._display_section(layout, "Errors", errors)

        warnings = sub_result.get("warnings")
        if warnings:
            if not layout.ensure_room(title_plus_first_subsection(warnings)):
                layout.y -= 15
            layout.set_warning_style(BLOCK_LABEL_SIZE)
            self._display_section(layout, "Warnings", warnings)

        suggestions = sub_result.get("suggestions")
        if suggestions:
            if not layout.ensure_room(title_plus_first_subsection(suggestions)):
                layout.y -= 15
            layout.set_general_style(BLOCK_LABEL_SIZE)
            self._display_section(layout, "Suggestions", suggestions)

    def _display_section(self, layout: LayoutEngine, label: str, entries: Mapping[str, Any]) -> None:
        layout.write_block_label(label)
        for name, entry in entries.items():
            tag, remainder = split_specific_section(entry)
            if tag is not None:
                logger.debug("Entry %s uses specific section %s", name, tag)
                self.registry.get(tag).render(remainder, layout)
            else:
                self._manage_subsection(layout, entry)

    def _manage_subsection(self, layout: LayoutEngine, entry: Mapping[str, Any]) -> None:
        files = entry.get("files")
        if not files:
            return

        layout.write_sub_section_intro(entry)
        layout.write_line("Files:")

        if isinstance(files, Mapping):
            for key, group in files.items():
                if isinstance(group, (list, tuple)):
                    layout.write_line(key)
                    for file_name in group:
                        layout.write_line("-" + str(file_name), 8, *FILE_GRAY)
                else:
                    layout.write_line("-" + str(group))
        else:
            for file_name in files:
                layout.write_line("-" + str(file_name))


def generate_report(result_tree: Mapping[str, Any], locale: str, config: Optional[ReportConfig] = None) -> Path:
    return ReportAssembler(config).generate(result_tree, locale)
