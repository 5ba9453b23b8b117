"""Localised UI string tables keyed by Windows language identifiers."""

from __future__ import annotations

import locale
import os
import threading
from collections.abc import Mapping

BASE_LANG = -1
"""Language id under which the fallback (base) table is registered."""

_DEFAULT_UI_LANG = 0x0409  # en-US


class StringTable:
    """A read-only mapping from string keys to localised text."""

    def __init__(self, strings: Mapping[str, str] | None = None) -> None:
        self._strings: dict[str, str] = dict(strings or {})

    def get(self, key: str) -> str | None:
        """Return the text for ``key`` or None when the table lacks it."""
        return self._strings.get(key)

    def keys(self) -> set[str]:
        return set(self._strings)

    def __contains__(self, key: object) -> bool:
        return key in self._strings

    def __len__(self) -> int:
        return len(self._strings)


class StringsManager:
    """Process-wide registry of string tables, one per language id."""

    _instance: StringsManager | None = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._tables: dict[int, StringTable] = {}

    @staticmethod
    def get_instance() -> StringsManager:
        """Return the shared manager, creating it on first use."""
        with StringsManager._instance_lock:
            if StringsManager._instance is None:
                StringsManager._instance = StringsManager()
            return StringsManager._instance

    @staticmethod
    def reset_instance() -> None:
        """Drop the shared manager and every table registered with it."""
        with StringsManager._instance_lock:
            StringsManager._instance = None

    def register(self, lang_id: int, table: StringTable) -> None:
        """Register ``table`` for ``lang_id``, replacing any earlier one."""
        self._tables[lang_id] = table

    def get(self, lang_id: int, key: str) -> str:
        """Look ``key`` up for ``lang_id``, then in the base table, else echo it."""
        table = self._tables.get(lang_id)
        text = table.get(key) if table is not None else None
        if text is None:
            base = self._tables.get(BASE_LANG)
            if base is not None:
                text = base.get(key)
        return key if text is None else text


def _locale_name() -> str | None:
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX"):
            return value
    try:
        return locale.getlocale()[0]
    except ValueError:
        return None


def _lang_id_for_locale(name: str | None) -> int:
    if not name:
        return _DEFAULT_UI_LANG
    name = name.split(".", 1)[0].split("@", 1)[0].replace("-", "_").lower()
    for lcid, loc in locale.windows_locale.items():
        if loc.lower() == name:
            return lcid & 0xFFFF
    return _DEFAULT_UI_LANG


_ui_lang_lock = threading.Lock()
_ui_lang: int | None = None


def current_ui_lang() -> int:
    """Return the user's UI language id, detected once from the locale."""
    global _ui_lang
    with _ui_lang_lock:
        if _ui_lang is None:
            _ui_lang = _lang_id_for_locale(_locale_name())
        return _ui_lang


def register_strings_for_lang(lang_id: int, table: StringTable) -> None:
    """Register ``table`` with the shared manager for ``lang_id``."""
    StringsManager.get_instance().register(lang_id, table)


def get_string(key: str) -> str:
    """Return the text for ``key`` in the current UI language."""
    return StringsManager.get_instance().get(current_ui_lang(), key)