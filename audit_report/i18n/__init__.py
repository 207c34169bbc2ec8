from .translator import Translator, available_locales, resolve_locale

__all__ = ["Translator", "available_locales", "resolve_locale"]
