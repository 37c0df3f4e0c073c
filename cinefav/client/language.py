# cinefav/client/language.py

import logging
from cinefav.client.i18n import CATALOG_LANGUAGES, SUPPORTED_LANGUAGES, translate
from cinefav.client.storage import LocalStorage

logger = logging.getLogger(__name__)

LANGUAGE_KEY = "userLanguage"
DEFAULT_LANGUAGE = "pt"


class LanguageStore:
    """선택한 앱 언어 보관"""

    def __init__(self, storage: LocalStorage):
        self._storage = storage
        self._language = DEFAULT_LANGUAGE

    @property
    def language(self) -> str:
        return self._language

    @property
    def catalog_language(self) -> str:
        return CATALOG_LANGUAGES.get(self._language, "en-US")

    def load(self) -> None:
        saved = self._storage.get_item(LANGUAGE_KEY)
        if saved in SUPPORTED_LANGUAGES:
            self._language = saved

    def set_language(self, language: str) -> None:
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {language}")
        try:
            self._storage.set_item(LANGUAGE_KEY, language)
        except OSError as e:
            logger.error(f"언어 설정 저장 실패: {str(e)}")
            return
        self._language = language

    def translate(self, key: str) -> str:
        return translate(self._language, key)
