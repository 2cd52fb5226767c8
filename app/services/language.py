from typing import Callable, Dict, List, MutableMapping, Optional

from app.core.exceptions.exceptions import UnsupportedLanguageError
from app.utils.log import app_logger

LANGUAGE_KEY = "language"
DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ("en", "zh")

LABELS = {
    "en": "🇺🇸 EN",
    "zh": "🇨🇳 中文",
}

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "language.english": "English",
        "language.chinese": "中文",
        "language.switch": "Switch Language",
        "diagnostics.title": "Database Connection Test",
        "diagnostics.relational": "PostgreSQL",
        "diagnostics.key_value": "Redis",
        "status.success": "Success",
        "status.failed": "Failed",
    },
    "zh": {
        "language.english": "English",
        "language.chinese": "中文",
        "language.switch": "切换语言",
        "diagnostics.title": "数据库连接测试",
        "diagnostics.relational": "PostgreSQL",
        "diagnostics.key_value": "Redis",
        "status.success": "成功",
        "status.failed": "失败",
    },
}


def translate(key: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Look up `key` for `language`, falling back to English, then to the key itself."""
    table = TRANSLATIONS.get(language, TRANSLATIONS[DEFAULT_LANGUAGE])
    return table.get(key) or TRANSLATIONS[DEFAULT_LANGUAGE].get(key, key)


Listener = Callable[[str], None]


class LanguagePreferenceStore:
    """Two-state language preference kept in a persistent key-value storage.

    `storage` is whatever outlives the current view: browser cookies over
    HTTP, a plain dict in tests. Subscribers are told about every change, so
    dependent views can re-render without a reload.
    """

    def __init__(self, storage: MutableMapping[str, str], key: str = LANGUAGE_KEY):
        self.storage = storage
        self.key = key
        self._listeners: List[Listener] = []

    def current(self) -> str:
        value = self.storage.get(self.key)
        return value if value in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE

    def label(self, language: Optional[str] = None) -> str:
        language = language or self.current()
        if language not in LABELS:
            raise UnsupportedLanguageError(language)
        return LABELS[language]

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set(self, language: str) -> str:
        if language not in SUPPORTED_LANGUAGES:
            raise UnsupportedLanguageError(language)
        self.storage[self.key] = language
        app_logger.info("language.changed", language=language)
        for listener in list(self._listeners):
            listener(language)
        return language

    def toggle(self) -> str:
        return self.set("zh" if self.current() == "en" else "en")
