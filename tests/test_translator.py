from audit_report.config.report_config import BUNDLED_I18N_DIR
from audit_report.i18n.translator import (
    Translator,
    available_locales,
    load_dictionary,
    resolve_locale,
)


def test_bundled_locales():
    assert available_locales(BUNDLED_I18N_DIR) == ["en_US", "es_ES", "fr_FR"]


def test_exact_locale_match():
    assert resolve_locale("fr_FR", BUNDLED_I18N_DIR) == "fr_FR"


def test_language_fallback():
    assert resolve_locale("fr_CA", BUNDLED_I18N_DIR) == "fr_FR"
    assert resolve_locale("es_MX", BUNDLED_I18N_DIR) == "es_ES"


def test_unknown_language_falls_back_to_default():
    assert resolve_locale("de_DE", BUNDLED_I18N_DIR) == "en_US"
    assert resolve_locale("", BUNDLED_I18N_DIR) == "en_US"


def test_locale_match_uses_first_five_characters_of_file_names(tmp_path):
    (tmp_path / "de_DE.csv").write_text('"Errors","Fehler"\n', encoding="utf-8")
    (tmp_path / "nl_NL.backup.csv").write_text("", encoding="utf-8")

    assert resolve_locale("de_DE", tmp_path) == "de_DE"
    assert resolve_locale("nl_NL", tmp_path) == "nl_NL"


def test_missing_i18n_dir_uses_fallbacks(tmp_path):
    assert available_locales(tmp_path / "missing") == []
    assert resolve_locale("fr_FR", tmp_path / "missing") == "fr_FR"
    assert resolve_locale("it_IT", tmp_path / "missing", {"other": "es_ES"}) == "es_ES"


def test_load_dictionary_skips_malformed_rows(tmp_path):
    path = tmp_path / "fr_FR.csv"
    path.write_text('"Errors","Erreurs"\n"lonely"\n,"no source"\n', encoding="utf-8")

    assert load_dictionary(path) == {"Errors": "Erreurs"}


def test_translator_translates_known_phrases():
    translator = Translator.for_locale("fr_FR", BUNDLED_I18N_DIR)

    assert translator.locale == "fr_FR"
    assert translator.translate("Errors") == "Erreurs"
    assert translator("Files:") == "Fichiers :"


def test_translator_returns_unknown_phrases_unchanged():
    translator = Translator.for_locale("de_DE", BUNDLED_I18N_DIR)

    assert translator.locale == "en_US"
    assert translator.translate("Nicht übersetzt") == "Nicht übersetzt"
    assert translator.translate(42) == "42"
