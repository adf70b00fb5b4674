"""Missing-key resolution with lazy namespace loading.

When a host has no value for a key such as ``core.firstname``, the resolver
loads only the ``core`` bundle for the current language. Concurrent
requests for a namespace that is already loading attach to the same fetch.

Usage:
    resolver = MissingKeyResolver(fetcher, registry)
    message = await resolver.handle("core.firstname", {"name": "Bob"}, "en")
"""

import asyncio
from functools import partial
from typing import Any, Dict, Iterable, Optional

from infrastructure.i18n.broadcast import BroadcastFuture
from infrastructure.i18n.cache import NamespaceCache
from infrastructure.i18n.interpolation import TemplateInterpolator
from infrastructure.i18n.loader import NamespaceLoader
from infrastructure.i18n.models import (
    DEFAULT_SEPARATOR,
    Bundle,
    LoadState,
    MissingTranslationParams,
    TranslationKey,
    find_template,
)
from infrastructure.i18n.protocols import Fetcher, Interpolator, TranslationRegistry
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class MissingKeyResolver:
    """Resolves keys that have no loaded value.

    Owns the namespace cache for its whole lifetime; the cache starts empty
    and only shrinks through ``reset``.

    Attributes:
        registry: Host registry storing loaded bundles.
        interpolator: Placeholder substitution for templates.
        separator: Separator between namespace and message key.
        cache: Per-(language, namespace) load states.
        loader: Single-flight namespace loader.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        registry: TranslationRegistry,
        interpolator: Optional[Interpolator] = None,
        separator: str = DEFAULT_SEPARATOR,
        fetch_timeout: Optional[float] = None,
    ):
        """Initialize the resolver.

        Args:
            fetcher: Source of namespace bundles.
            registry: Host registry; receives each loaded bundle.
            interpolator: Defaults to a non-strict TemplateInterpolator.
            separator: Separator between namespace and message key.
            fetch_timeout: Optional upper bound on one fetch, in seconds.
        """
        self.registry = registry
        self.interpolator = interpolator or TemplateInterpolator()
        self.separator = separator
        self.cache = NamespaceCache()
        self.loader = NamespaceLoader(
            fetcher, registry, self.cache, fetch_timeout=fetch_timeout
        )
        logger.info(
            "initialized_missing_key_resolver",
            separator=separator,
            fetch_timeout=fetch_timeout,
        )

    def handle(
        self,
        full_key: str,
        interpolation_params: Optional[Dict[str, Any]] = None,
        current_language: Optional[str] = None,
    ) -> "asyncio.Future[str]":
        """Resolve a key whose value is not loaded yet.

        Must be called with an event loop running.

        Args:
            full_key: Requested key (e.g., "core.firstname").
            interpolation_params: Parameters for placeholder substitution.
            current_language: Language to resolve in; defaults to the
                registry's current language.

        Returns:
            Future of the interpolated message, or of ``full_key`` when the
            loaded namespace has no template for it. Already resolved when
            the namespace is loaded.

        Raises:
            MalformedKeyError: If the key has no namespace separator. No
                fetch is attempted.
        """
        key = TranslationKey.from_string(full_key, self.separator)
        language = current_language or self.registry.current_language
        params = interpolation_params or {}
        project = partial(self._project, key, full_key, params, language)

        self.cache.ensure_language(language)
        state = self.cache.get(language, key.namespace)

        if state.is_loaded:
            bundle = self.registry.get_translation(language)
            if key.namespace in bundle:
                future = asyncio.get_running_loop().create_future()
                try:
                    future.set_result(project(bundle))
                except Exception as e:  # pylint: disable=broad-except
                    future.set_exception(e)
                return future
            # the host replaced the language table without this namespace
            logger.info(
                "loaded_namespace_missing_from_registry",
                language=language,
                namespace=key.namespace,
            )
        elif state.is_loading:
            logger.debug(
                "attached_to_inflight_fetch",
                key=full_key,
                language=language,
                namespace=key.namespace,
            )
            return state.future.attach(project)

        return self._start_load(language, key.namespace).attach(project)

    async def resolve(
        self,
        full_key: str,
        interpolation_params: Optional[Dict[str, Any]] = None,
        language: Optional[str] = None,
    ) -> str:
        """Coroutine form of ``handle``."""
        return await self.handle(full_key, interpolation_params, language)

    def resolve_missing(self, params: MissingTranslationParams) -> "asyncio.Future[str]":
        """Missing-translation capability registered with the host.

        Args:
            params: Missing key event from the host.

        Returns:
            Future of the resolved message, as returned by ``handle``.
        """
        return self.handle(
            params.key, params.interpolate_params, params.resolve_language()
        )

    async def preload(
        self, namespaces: Iterable[str], language: Optional[str] = None
    ) -> None:
        """Load several namespaces ahead of use.

        Shares in-flight fetches and skips loaded namespaces.

        Raises:
            FetchFailure: If any namespace fails to load.
            ValueError: If a namespace name is empty.
        """
        language = language or self.registry.current_language
        self.cache.ensure_language(language)
        loaded = self.registry.get_translation(language)
        pending = []
        for namespace in namespaces:
            if not namespace:
                raise ValueError("Namespace name must not be empty")
            state = self.cache.get(language, namespace)
            if state.is_loaded and namespace in loaded:
                continue
            if state.is_loading:
                pending.append(state.future)
            else:
                pending.append(self._start_load(language, namespace))

        logger.info("preloading_namespaces", language=language, count=len(pending))
        await asyncio.gather(*(broadcast.wait() for broadcast in pending))

    def reset(self, language: Optional[str] = None) -> None:
        """Forget load states so namespaces are fetched again on next use.

        In-flight fetches still complete and publish their bundles to the
        registry, but leave the forgotten entries Absent.

        Args:
            language: Only forget this language; everything when omitted.
        """
        if language is None:
            self.cache.reset()
        else:
            self.cache.evict(language)

    def _start_load(self, language: str, namespace: str) -> BroadcastFuture[Bundle]:
        broadcast = self.loader.load(language, namespace)
        self.cache.set(language, namespace, LoadState.loading(broadcast))
        return broadcast

    def _project(
        self,
        key: TranslationKey,
        full_key: str,
        params: Dict[str, Any],
        language: str,
        bundle: Bundle,
    ) -> str:
        template = find_template(bundle, key.namespace, key.message_key, self.separator)
        if template is None:
            logger.warning(
                "translation_missing_template",
                key=full_key,
                language=language,
                namespace=key.namespace,
            )
            return full_key
        return self.interpolator.interpolate(template, params)
