"""Factory functions for creating i18n components.

Provides convenience functions for wiring the resolver, its fetcher and the
translation service from application settings.
"""

from pathlib import Path
from typing import Optional

from infrastructure.configuration import I18nSettings, settings
from infrastructure.i18n.fetchers import RestNamespaceFetcher, YAMLNamespaceFetcher
from infrastructure.i18n.interpolation import TemplateInterpolator
from infrastructure.i18n.protocols import Fetcher
from infrastructure.i18n.registry import InMemoryTranslationRegistry
from infrastructure.i18n.resolver import MissingKeyResolver
from infrastructure.i18n.service import TranslationService
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def default_translations_dir() -> Path:
    """Return the bundled locales directory (app/locales)."""
    # this file is at .../app/infrastructure/i18n/factory.py
    app_root = Path(__file__).resolve().parents[2]
    return app_root / "locales"


def create_fetcher(i18n_settings: Optional[I18nSettings] = None) -> Fetcher:
    """Create the fetcher selected by I18N_FETCHER.

    Args:
        i18n_settings: Settings to read (default: application settings)

    Returns:
        YAMLNamespaceFetcher or RestNamespaceFetcher

    Raises:
        ValueError: If the YAML translations directory does not exist
    """
    i18n_settings = i18n_settings or settings.i18n

    if i18n_settings.fetcher == "rest":
        logger.info(
            "fetcher_created",
            fetcher="rest",
            base_url=i18n_settings.rest_base_url,
        )
        return RestNamespaceFetcher(
            base_url=i18n_settings.rest_base_url,
            path_template=i18n_settings.rest_path_template,
            timeout=i18n_settings.rest_timeout_seconds,
        )

    translations_dir = (
        Path(i18n_settings.translations_dir)
        if i18n_settings.translations_dir
        else default_translations_dir()
    )
    logger.info("fetcher_created", fetcher="yaml", translations_dir=str(translations_dir))
    return YAMLNamespaceFetcher(translations_dir)


def create_resolver(
    registry: InMemoryTranslationRegistry,
    fetcher: Optional[Fetcher] = None,
    i18n_settings: Optional[I18nSettings] = None,
) -> MissingKeyResolver:
    """Create a MissingKeyResolver bound to a registry.

    Args:
        registry: Host registry that receives loaded bundles
        fetcher: Bundle source (default: created from settings)
        i18n_settings: Settings to read (default: application settings)

    Returns:
        MissingKeyResolver: Configured resolver with an empty cache

    Usage:
        registry = InMemoryTranslationRegistry("en")
        resolver = create_resolver(registry)
        message = await resolver.resolve("core.firstname", {"name": "Bob"})
    """
    i18n_settings = i18n_settings or settings.i18n

    return MissingKeyResolver(
        fetcher=fetcher or create_fetcher(i18n_settings),
        registry=registry,
        interpolator=TemplateInterpolator(strict=i18n_settings.strict_interpolation),
        separator=i18n_settings.key_separator,
        fetch_timeout=i18n_settings.fetch_timeout_seconds,
    )


def create_translation_service(
    fetcher: Optional[Fetcher] = None,
    i18n_settings: Optional[I18nSettings] = None,
) -> TranslationService:
    """Create a TranslationService with a lazily loading resolver.

    Args:
        fetcher: Bundle source (default: created from settings)
        i18n_settings: Settings to read (default: application settings)

    Returns:
        TranslationService: Service whose registry starts empty

    Usage:
        service = create_translation_service()
        message = await service.translate("core.firstname", {"name": "Bob"})
    """
    i18n_settings = i18n_settings or settings.i18n

    registry = InMemoryTranslationRegistry(
        default_language=i18n_settings.default_language
    )
    resolver = create_resolver(registry, fetcher=fetcher, i18n_settings=i18n_settings)

    logger.info(
        "translation_service_created",
        default_language=i18n_settings.default_language,
        fetcher=type(resolver.loader.fetcher).__name__,
    )
    return TranslationService(
        registry=registry,
        missing_handler=resolver,
        interpolator=resolver.interpolator,
        separator=i18n_settings.key_separator,
    )
