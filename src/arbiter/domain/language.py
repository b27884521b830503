"""Default language resolution for new profiles."""

import locale
from typing import Optional

FALLBACK_LANGUAGE = "en"
_NEUTRAL_LOCALES = {"C", "POSIX"}


def language_from_locale(locale_name: Optional[str]) -> str:
    """
    Extracts the language code from a locale name.

    Args:
        locale_name: A locale such as "de_DE.UTF-8", or None.

    Returns:
        The lower-cased language part, or the fallback language.
    """
    if not locale_name:
        return FALLBACK_LANGUAGE
    base = locale_name.split(".")[0].split("@")[0]
    if base in _NEUTRAL_LOCALES:
        return FALLBACK_LANGUAGE
    language = base.replace("-", "_").split("_")[0].lower()
    return language or FALLBACK_LANGUAGE


def default_language_code() -> str:
    """Returns the language code of the process locale."""

    try:
        locale_name, _ = locale.getlocale()
    except ValueError:
        return FALLBACK_LANGUAGE
    return language_from_locale(locale_name)
