"""In-memory host translation registry.

Stores the resolved language tables and reports the active language.
"""

from typing import Dict, List, Optional

from infrastructure.i18n.models import (
    DEFAULT_SEPARATOR,
    Bundle,
    TranslationCatalog,
    TranslationKey,
    find_template,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class InMemoryTranslationRegistry:
    """Registry of loaded translations, one catalog per language.

    Attributes:
        catalogs: Loaded TranslationCatalogs by language.
    """

    def __init__(self, default_language: str = "en"):
        """Initialize the registry.

        Args:
            default_language: Language active until ``use`` is called.
        """
        self._current_language = default_language
        self.catalogs: Dict[str, TranslationCatalog] = {}
        logger.info("initialized_translation_registry", default_language=default_language)

    @property
    def current_language(self) -> str:
        return self._current_language

    def use(self, language: str) -> None:
        """Switch the active language."""
        if language != self._current_language:
            logger.info(
                "switched_language",
                previous_language=self._current_language,
                language=language,
            )
        self._current_language = language

    def set_translation(self, language: str, bundle: Bundle, merge: bool = False) -> None:
        """Store a bundle for a language.

        Args:
            language: Language the bundle belongs to.
            bundle: Mapping of namespace to messages.
            merge: Add to the namespaces already loaded instead of replacing
                the whole table.
        """
        catalog = self.catalogs.setdefault(language, TranslationCatalog(language=language))
        if merge:
            catalog.merge(bundle)
        else:
            catalog.replace(bundle)
        logger.info(
            "stored_translations",
            language=language,
            namespaces=sorted(bundle.keys()),
            merge=merge,
        )

    def get_translation(self, language: str) -> Bundle:
        catalog = self.catalogs.get(language)
        return catalog.messages if catalog else {}

    def get_template(
        self, language: str, key: str, separator: str = DEFAULT_SEPARATOR
    ) -> Optional[str]:
        """Look up a raw template by full key.

        Returns:
            Template string, or None when the key is malformed or not loaded.
        """
        namespace, found, message_key = key.partition(separator)
        if not found or not namespace or not message_key:
            return None
        return find_template(
            self.get_translation(language), namespace, message_key, separator
        )

    def get_catalog(self, language: str) -> Optional[TranslationCatalog]:
        return self.catalogs.get(language)

    def has_message(self, key: TranslationKey, language: str) -> bool:
        catalog = self.catalogs.get(language)
        return catalog.get_template(key) is not None if catalog else False

    def languages(self) -> List[str]:
        return list(self.catalogs.keys())
