"""UI string lookup over LANG_PACK.

Language resolution order: explicit argument, TOMATODO_LANG, the config
file, then the locale from LANG. Tests always render English.
"""

import os
from typing import Dict, Optional

from config import get_user_lang
from core.desktop.devtools.interface.constants import LANG_PACK

BASE_LANG = "en"


def _backfill(base_lang: str = BASE_LANG) -> None:
    base = LANG_PACK[base_lang]
    for lang, strings in LANG_PACK.items():
        if lang != base_lang:
            for key, text in base.items():
                strings.setdefault(key, text)


_backfill()


def _locale_lang() -> str:
    # "zh_CN.UTF-8" -> "zh"
    return os.getenv("LANG", "").split(".")[0].split("_")[0].lower()


def effective_lang(preferred: Optional[str] = None) -> str:
    if preferred in LANG_PACK:
        return preferred
    forced = os.getenv("TOMATODO_LANG")
    if forced:
        return forced if forced in LANG_PACK else BASE_LANG
    if os.getenv("PYTEST_CURRENT_TEST"):
        return BASE_LANG
    for candidate in (get_user_lang(), _locale_lang()):
        if candidate in LANG_PACK:
            return candidate
    return BASE_LANG


def strings_for(lang: Optional[str] = None) -> Dict[str, str]:
    return LANG_PACK[effective_lang(lang)]


def translate(key: str, lang: Optional[str] = None, **kwargs) -> str:
    """Look up `key` and fill its placeholders; unknown keys come back as-is."""
    template = strings_for(lang).get(key, key)
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        return template


__all__ = ["BASE_LANG", "effective_lang", "strings_for", "translate"]
