"""
Helpers around the audit result tree.

The tree is a plain nested mapping produced by the audit run:

    type -> section -> subsection -> sub result

A sub result carries a ``hasErrors`` flag and up to three entry mappings
(``errors``, ``warnings``, ``suggestions``). The tree is never mutated here.
"""

from typing import Any, Dict, Iterable, Mapping, Optional

SECTION_KINDS = ("errors", "warnings", "suggestions")

SPECIFIC_SECTION_KEY = "specificSections"


def is_actionable(sub_result: Any) -> bool:
    """
    A sub result is rendered only when it is a non-empty mapping
    whose ``hasErrors`` flag is truthy.
    """
    if not isinstance(sub_result, Mapping) or not sub_result:
        return False
    return bool(sub_result.get("hasErrors"))


def count_entries(sub_result: Mapping[str, Any]) -> Dict[str, int]:
    counts = {}
    for kind in SECTION_KINDS:
        entries = sub_result.get(kind) or {}
        counts[kind] = len(entries)
    return counts


def first_entry(entries: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    for entry in entries.values():
        return entry
    return None


def split_specific_section(entry: Mapping[str, Any]):
    """
    Returns ``(tag, remainder)``. ``tag`` is None for generic entries.
    The remainder is a copy without the tag key.
    """
    if SPECIFIC_SECTION_KEY not in entry:
        return None, entry
    remainder = {k: v for k, v in entry.items() if k != SPECIFIC_SECTION_KEY}
    return entry[SPECIFIC_SECTION_KEY], remainder


# -------------------------------------------------
# SELECTION
# -------------------------------------------------
def parse_selection(paths: Iterable[str]) -> Dict[str, Any]:
    """
    Turns ``["type/section", "other"]`` into the nested mapping used by
    :func:`select_results`. A ``None`` leaf keeps the whole subtree.
    """
    selection: Dict[str, Any] = {}
    for raw in paths:
        parts = [p for p in raw.strip("/").split("/") if p]
        if not parts:
            continue
        node = selection
        for depth, part in enumerate(parts):
            last = depth == len(parts) - 1
            if last:
                node[part] = None
                break
            child = node.get(part, {})
            if child is None:
                # already selected as a whole
                break
            node[part] = child
            node = child
    return selection


def select_results(tree: Mapping[str, Any], selection: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Recursive key intersection between ``tree`` and ``selection``.

    Order follows ``tree``. Keys missing from the tree are ignored.
    A ``None`` (or empty) selection keeps everything.
    """
    if not selection:
        return dict(tree)

    selected = {}
    for key, value in tree.items():
        if key not in selection:
            continue
        wanted = selection[key]
        if wanted is None or not isinstance(value, Mapping):
            selected[key] = value
        else:
            selected[key] = select_results(value, wanted)
    return selected
