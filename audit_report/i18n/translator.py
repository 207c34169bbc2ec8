"""
Locale resolution and string translation for the report.

Dictionaries are CSV files named after their locale (``fr_FR.csv``), one
``"source","translation"`` pair per row.
"""

import csv
import logging
from pathlib import Path
from typing import Dict, List, Mapping

logger = logging.getLogger(__name__)

DEFAULT_FALLBACKS = {
    "en": "en_US",
    "es": "es_ES",
    "fr": "fr_FR",
    "other": "en_US",
}


def available_locales(i18n_dir: Path) -> List[str]:
    i18n_dir = Path(i18n_dir)
    if not i18n_dir.is_dir():
        return []
    return sorted(entry.name[:5] for entry in i18n_dir.iterdir() if entry.is_file())


def resolve_locale(
    locale: str,
    i18n_dir: Path,
    fallbacks: Mapping[str, str] = DEFAULT_FALLBACKS,
) -> str:
    """
    Exact match on the available dictionaries first, then the language
    fallback table, then the ``other`` default.
    """
    locale = locale or ""
    if locale in available_locales(i18n_dir):
        return locale

    language = locale[:2]
    if language in fallbacks and language != "other":
        return fallbacks[language]

    return fallbacks.get("other", DEFAULT_FALLBACKS["other"])


def load_dictionary(path: Path) -> Dict[str, str]:
    phrases = {}
    with open(path, "r", encoding="utf-8", newline="") as f:
        for row in csv.reader(f):
            if len(row) < 2 or not row[0]:
                continue
            phrases[row[0]] = row[1]
    return phrases


class Translator:
    """
    Looks phrases up in the dictionary of one locale.
    Unknown phrases come back unchanged.
    """

    def __init__(self, locale: str, phrases: Mapping[str, str] | None = None):
        self.locale = locale
        self._phrases = dict(phrases or {})

    @classmethod
    def for_locale(
        cls,
        locale: str,
        i18n_dir: Path,
        fallbacks: Mapping[str, str] = DEFAULT_FALLBACKS,
    ) -> "Translator":
        resolved = resolve_locale(locale, i18n_dir, fallbacks)
        path = Path(i18n_dir) / f"{resolved}.csv"

        phrases = {}
        if path.is_file():
            phrases = load_dictionary(path)
        else:
            logger.debug("No dictionary for %s in %s", resolved, i18n_dir)

        logger.info("Report locale: %s (requested %s)", resolved, locale)
        return cls(resolved, phrases)

    def translate(self, text) -> str:
        text = str(text)
        return self._phrases.get(text, text)

    __call__ = translate
