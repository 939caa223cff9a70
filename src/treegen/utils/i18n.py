from __future__ import annotations

"""
Internationalization (i18n) Utility.

Provides a singleton manager for user-facing strings. Locale files are
nested JSON documents resolved with dot-notation keys and formatted with
keyword interpolation.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALES_REL_PATH = os.path.join("..", "interface", "locales")


class I18n:
    """
    Resource manager for locale-specific string translations.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self._locale = locale
        self._translations: Dict[str, Any] = {}
        self.is_loaded = False

        base_dir = os.path.dirname(os.path.abspath(__file__))
        self._locales_path = os.path.abspath(os.path.join(base_dir, LOCALES_REL_PATH))

        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def available_locales(self) -> List[str]:
        if not os.path.isdir(self._locales_path):
            return []
        return sorted(
            os.path.splitext(name)[0]
            for name in os.listdir(self._locales_path)
            if name.endswith(".json")
        )

    def load_locale(self, locale: str) -> None:
        """
        Load a translation dictionary from the locales directory.

        A missing or corrupt file leaves the manager empty, in which case
        t() falls back to defaults or to the key itself.
        """
        file_path = os.path.join(self._locales_path, f"{locale}.json")

        if not os.path.exists(file_path):
            logger.warning(f"I18n: Locale resource missing at '{file_path}'. Fallback active.")
            self._translations = {}
            self.is_loaded = False
            return

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                self._translations = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Corruption in locale file {file_path}: {e}")
            self._translations = {}
            self.is_loaded = False
            return

        self._locale = locale
        self.is_loaded = True
        logger.debug(f"I18n: Loaded locale dictionary: {locale}")

    def t(self, key: str, default: Optional[str] = None, **kwargs: Any) -> str:
        """
        Resolve and format a translation string using dot-notation.

        Args:
            key: Hierarchical identifier (e.g., 'cli.status.dry_run_done').
            default: Template used when the key is missing.
            **kwargs: Variables for str.format interpolation.

        Returns:
            str: The formatted string, or the key itself if unresolved.
        """
        current_val: Any = self._translations
        for k in key.split("."):
            current_val = current_val.get(k) if isinstance(current_val, dict) else None

        if not isinstance(current_val, str):
            if default is None:
                return key
            current_val = default

        try:
            return current_val.format(**kwargs) if kwargs else current_val
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Formatting error for '{key}': {e}")
            return current_val


# Global singleton instance for application-wide resource access
i18n = I18n(DEFAULT_LOCALE)
