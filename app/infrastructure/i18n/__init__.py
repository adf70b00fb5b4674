"""i18n system - lazy, namespace-scoped translation loading.

A key such as ``core.firstname`` belongs to the ``core`` namespace. When a
key has no loaded value, only its namespace bundle is fetched for the current
language, and concurrent requests for the same bundle share one fetch.

Main components:
- models: TranslationKey, LoadState, TranslationCatalog, MissingTranslationParams
- cache: NamespaceCache of per-(language, namespace) load states
- broadcast: BroadcastFuture, a settle-once future replayed to late waiters
- loader: NamespaceLoader, single-flight fetch and publish
- resolver: MissingKeyResolver, key splitting, projection and fallback
- fetchers: YAMLNamespaceFetcher and RestNamespaceFetcher
- registry: InMemoryTranslationRegistry host registry
- interpolation: TemplateInterpolator for {{variable}} placeholders
- service: TranslationService facade
"""

from infrastructure.i18n.broadcast import BroadcastFuture
from infrastructure.i18n.cache import NamespaceCache
from infrastructure.i18n.errors import (
    FetchFailure,
    InterpolationError,
    MalformedKeyError,
    TranslationError,
)
from infrastructure.i18n.fetchers import RestNamespaceFetcher, YAMLNamespaceFetcher
from infrastructure.i18n.interpolation import TemplateInterpolator
from infrastructure.i18n.loader import NamespaceLoader
from infrastructure.i18n.models import (
    Bundle,
    LoadState,
    LoadStatus,
    MissingTranslationParams,
    TranslationCatalog,
    TranslationKey,
)
from infrastructure.i18n.protocols import (
    Fetcher,
    Interpolator,
    MissingTranslationHandler,
    TranslationRegistry,
)
from infrastructure.i18n.registry import InMemoryTranslationRegistry
from infrastructure.i18n.resolver import MissingKeyResolver
from infrastructure.i18n.service import TranslationService
from infrastructure.i18n.factory import (
    create_fetcher,
    create_resolver,
    create_translation_service,
)

__all__ = [
    "Bundle",
    "BroadcastFuture",
    "NamespaceCache",
    "NamespaceLoader",
    "MissingKeyResolver",
    "TranslationKey",
    "LoadState",
    "LoadStatus",
    "TranslationCatalog",
    "MissingTranslationParams",
    "Fetcher",
    "Interpolator",
    "MissingTranslationHandler",
    "TranslationRegistry",
    "YAMLNamespaceFetcher",
    "RestNamespaceFetcher",
    "InMemoryTranslationRegistry",
    "TemplateInterpolator",
    "TranslationService",
    "TranslationError",
    "MalformedKeyError",
    "FetchFailure",
    "InterpolationError",
    "create_fetcher",
    "create_resolver",
    "create_translation_service",
]
