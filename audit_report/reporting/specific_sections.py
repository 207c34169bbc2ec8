"""
Renderers for entries that need their own layout.

An entry carrying ``specificSections: <tag>`` is handed, without the tag,
to the renderer registered under that tag. Renderers draw through the
shared :class:`LayoutEngine`, so they inherit its cursor and must respect
the same page-break thresholds.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping

from audit_report.core.exceptions import UnknownSectionError

from .size_calculator import BOTTOM_MARGIN, CAUTION_SIZE, line_height
from .styles import ERROR_RED, FILE_GRAY


class SectionRenderer(ABC):
    """Draws one tagged entry."""

    @abstractmethod
    def render(self, entry: Mapping[str, Any], layout) -> None:
        ...


# -------------------------------------------------
# MULTIPLE PREFERENCES
# -------------------------------------------------
class MultiplePreferencesRenderer(SectionRenderer):
    """
    ``files`` maps an interface to the classes declared as its preference.
    Each interface is kept on the same page as its first preference.
    """

    def render(self, entry, layout) -> None:
        preferences = entry.get("files") or {}
        if not preferences:
            return

        layout.write_sub_section_intro(entry)
        for interface, classes in preferences.items():
            layout.ensure_room(BOTTOM_MARGIN + line_height() + line_height(CAUTION_SIZE))
            layout.write_line(interface)
            if isinstance(classes, str):
                classes = [classes]
            for class_name in classes:
                layout.write_line("  -" + str(class_name), CAUTION_SIZE, *FILE_GRAY)


# -------------------------------------------------
# BLOCK / VIEW MODEL RATIO
# -------------------------------------------------
class BlockViewModelRatioRenderer(SectionRenderer):
    """
    ``files`` maps a module to its share of blocks among blocks and view
    models (0..1). Modules above ``threshold`` are drawn in red.
    """

    def __init__(self, threshold: float = 0.5):
        self.threshold = threshold

    def render(self, entry, layout) -> None:
        ratios = entry.get("files") or {}
        if not ratios:
            return

        layout.write_sub_section_intro(entry)
        for module, ratio in ratios.items():
            ratio = float(ratio)
            color = ERROR_RED if ratio > self.threshold else (0, 0, 0)
            layout.write_line(f"-{module} : {ratio:.0%}", 9, *color)


# -------------------------------------------------
# REGISTRY
# -------------------------------------------------
class SpecificSectionRegistry:
    def __init__(self):
        self._renderers: Dict[str, SectionRenderer] = {}

    def register(self, tag: str, renderer: SectionRenderer) -> None:
        if not isinstance(renderer, SectionRenderer):
            raise TypeError(f"Renderer for '{tag}' must be a SectionRenderer")
        self._renderers[tag] = renderer

    def get(self, tag: str) -> SectionRenderer:
        renderer = self._renderers.get(tag)
        if renderer is None:
            raise UnknownSectionError(tag, self._renderers)
        return renderer

    def tags(self):
        return list(self._renderers.keys())

    def __contains__(self, tag) -> bool:
        return tag in self._renderers


def default_registry(block_vm_ratio_threshold: float = 0.5) -> SpecificSectionRegistry:
    registry = SpecificSectionRegistry()
    registry.register("manageMultiplePreferences", MultiplePreferencesRenderer())
    registry.register(
        "manageBlockVMRatio",
        BlockViewModelRatioRenderer(threshold=block_vm_ratio_threshold),
    )
    return registry
