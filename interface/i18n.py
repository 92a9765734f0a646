"""Message catalog lookup for the task list UI.

Every language in ``LANG_PACK`` is backfilled from English at import, so a
missing translation shows the English text instead of the raw key.
"""

import os
from typing import List, Optional

from config import get_user_lang
from interface.constants import LANG_PACK

FALLBACK_LANG = "en"


def _fill_lang_pack_defaults(base_lang: str = FALLBACK_LANG) -> None:
    """Backfill missing translations with English defaults."""
    base = LANG_PACK.get(base_lang, {})
    for lang, values in LANG_PACK.items():
        if lang == base_lang:
            continue
        for key, val in base.items():
            values.setdefault(key, val)


_fill_lang_pack_defaults()


def available_languages() -> List[str]:
    return sorted(LANG_PACK)


def effective_lang(preferred: Optional[str] = None) -> str:
    """Resolve the active language.

    Order: ``TASKLIST_LANG``, an explicit preference, English under pytest,
    the user config, English.
    """
    env_lang = (os.getenv("TASKLIST_LANG") or "").strip()
    if env_lang in LANG_PACK:
        return env_lang
    if preferred and preferred in LANG_PACK:
        return preferred
    if os.getenv("PYTEST_CURRENT_TEST"):
        return FALLBACK_LANG
    candidate = get_user_lang()
    return candidate if candidate in LANG_PACK else FALLBACK_LANG


def translate(key: str, lang: Optional[str] = None, **kwargs) -> str:
    """Look up key in lang (resolved when missing or unknown) and fill placeholders.

    A template whose placeholders are not all supplied is returned unformatted.
    """
    base = LANG_PACK[FALLBACK_LANG]
    active_lang = lang if lang in LANG_PACK else effective_lang(lang)
    template = LANG_PACK[active_lang].get(key) or base.get(key, key)
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        return template


class Translator:
    """``translate`` bound to one language, resolved once at construction."""

    def __init__(self, lang: Optional[str] = None):
        self.lang = effective_lang(lang)

    def __call__(self, key: str, **kwargs) -> str:
        return translate(key, lang=self.lang, **kwargs)

    def __repr__(self) -> str:
        return f"Translator(lang={self.lang!r})"


__all__ = ["FALLBACK_LANG", "Translator", "available_languages", "effective_lang", "translate"]
