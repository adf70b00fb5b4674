"""Translation service for dependency injection.

Provides a class-based interface to the lazy translation system for easier
DI and testing. Keys already loaded in the registry are answered directly;
everything else goes through the registered missing translation handler.
"""

from typing import Any, Dict, Iterable, Optional

from infrastructure.i18n.interpolation import TemplateInterpolator
from infrastructure.i18n.models import DEFAULT_SEPARATOR, MissingTranslationParams
from infrastructure.i18n.registry import InMemoryTranslationRegistry
from infrastructure.i18n.protocols import Interpolator, MissingTranslationHandler


class TranslationService:
    """Class-based translation service.

    Usage:
        service = create_translation_service()
        message = await service.translate("core.firstname", {"name": "Bob"})

        service.use("fr")
        message = await service.translate("core.firstname", {"name": "Bob"})
    """

    def __init__(
        self,
        registry: InMemoryTranslationRegistry,
        missing_handler: MissingTranslationHandler,
        interpolator: Optional[Interpolator] = None,
        separator: str = DEFAULT_SEPARATOR,
    ):
        """Initialize translation service.

        Args:
            registry: Host registry holding loaded translations.
            missing_handler: Called for keys the registry cannot answer.
            interpolator: Placeholder substitution for registry hits.
            separator: Separator between namespace and message key.
        """
        self._registry = registry
        self._missing_handler = missing_handler
        self._interpolator = interpolator or TemplateInterpolator()
        self._separator = separator

    @property
    def current_language(self) -> str:
        return self._registry.current_language

    @property
    def registry(self) -> InMemoryTranslationRegistry:
        return self._registry

    @property
    def missing_handler(self) -> MissingTranslationHandler:
        return self._missing_handler

    def use(self, language: str) -> None:
        """Switch the active language."""
        self._registry.use(language)

    async def translate(
        self,
        key: str,
        variables: Optional[Dict[str, Any]] = None,
        language: Optional[str] = None,
    ) -> str:
        """Retrieve and interpolate a translated message.

        Args:
            key: Full key (e.g., "core.firstname")
            variables: Optional dict of variables for interpolation
            language: Language to translate to; defaults to the current one

        Returns:
            Translated message, or ``key`` when its namespace has no template

        Raises:
            MalformedKeyError: If key has no namespace separator
            FetchFailure: If the key's namespace could not be loaded
        """
        variables = variables or {}
        language = language or self._registry.current_language

        template = self._registry.get_template(language, key, self._separator)
        if template is not None:
            return self._interpolator.interpolate(template, variables)

        return await self._missing_handler.resolve_missing(
            MissingTranslationParams(
                key=key,
                interpolate_params=variables,
                registry=self._registry,
                language=language,
            )
        )

    async def preload(
        self, namespaces: Iterable[str], language: Optional[str] = None
    ) -> None:
        """Load namespaces ahead of use, when the handler supports it."""
        preload = getattr(self._missing_handler, "preload", None)
        if preload is not None:
            await preload(namespaces, language)
