"""Key-to-string lookup for the supported interface languages."""

from __future__ import annotations

from engage_app.constants.translations import EN, ZH
from engage_app.core.models import Language

_TABLES: dict[Language, dict[str, str]] = {
    Language.EN: EN,
    Language.ZH: ZH,
}


def translate(key: str, language: Language = Language.EN) -> str:
    """Return the string for ``key`` in ``language``, or the key itself when missing."""
    return _TABLES[language].get(key, key)


def get_translation_table(language: Language) -> dict[str, str]:
    return dict(_TABLES[language])
