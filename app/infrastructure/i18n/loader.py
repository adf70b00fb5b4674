"""Single-flight namespace loader.

Runs one fetch per call and broadcasts its outcome to every current and
future waiter. On success the bundle is published to the host registry and
the cache entry becomes Loaded; on failure the entry reverts to Absent so
the next request retries. Either way the cache is only touched while the
entry still refers to this fetch.
"""

import asyncio
from collections.abc import Mapping
from typing import Optional, Set

from infrastructure.i18n.broadcast import BroadcastFuture
from infrastructure.i18n.cache import NamespaceCache
from infrastructure.i18n.errors import FetchFailure
from infrastructure.i18n.models import Bundle, LoadState
from infrastructure.i18n.protocols import Fetcher, TranslationRegistry
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class NamespaceLoader:
    """Fetches namespace bundles and shares the result.

    Attributes:
        fetcher: Source of namespace bundles.
        registry: Host registry receiving loaded bundles.
        cache: Load-state cache updated when a fetch settles.
        fetch_timeout: Optional upper bound on one fetch, in seconds.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        registry: TranslationRegistry,
        cache: NamespaceCache,
        fetch_timeout: Optional[float] = None,
    ):
        self.fetcher = fetcher
        self.registry = registry
        self.cache = cache
        self.fetch_timeout = fetch_timeout
        self._tasks: Set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        """Number of fetches still running."""
        return len(self._tasks)

    def load(self, language: str, namespace: str) -> BroadcastFuture[Bundle]:
        """Start fetching a namespace.

        The fetch runs in a task, so this returns before any part of it
        executes. Callers record the returned future as Loading before the
        fetch can settle.

        Args:
            language: Language to fetch.
            namespace: Namespace to fetch.

        Returns:
            Shared future of the bundle.
        """
        broadcast: BroadcastFuture[Bundle] = BroadcastFuture()
        task = asyncio.ensure_future(self._run(language, namespace, broadcast))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return broadcast

    async def drain(self) -> None:
        """Wait for every running fetch to settle."""
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    async def _run(
        self, language: str, namespace: str, broadcast: BroadcastFuture[Bundle]
    ) -> None:
        log = logger.bind(language=language, namespace=namespace)
        log.info("namespace_fetch_started", timeout=self.fetch_timeout)

        try:
            bundle = await self._fetch(language, namespace)
            if namespace not in bundle:
                log.warning("namespace_missing_from_bundle", namespaces=list(bundle))
                bundle = {**bundle, namespace: {}}
            self.registry.set_translation(language, bundle, True)
        except asyncio.CancelledError:
            log.warning("namespace_fetch_cancelled")
            self._revert(language, namespace, broadcast)
            broadcast.set_exception(FetchFailure(language, namespace, "cancelled"))
            raise
        except Exception as e:  # pylint: disable=broad-except
            log.error(
                "namespace_fetch_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            self._revert(language, namespace, broadcast)
            failure = FetchFailure(language, namespace, str(e))
            failure.__cause__ = e
            broadcast.set_exception(failure)
            return

        state = self.cache.get(language, namespace)
        if state.future is broadcast:
            self.cache.set(language, namespace, LoadState.loaded())
        else:
            # evicted while fetching, or a newer fetch owns the entry
            log.info("namespace_loaded_superseded", status=state.status.value)

        log.info(
            "namespace_loaded",
            namespace_count=len(bundle),
            attachments=broadcast.attachments,
        )
        broadcast.set_result(bundle)

    async def _fetch(self, language: str, namespace: str) -> Bundle:
        fetch = self.fetcher.fetch(language, namespace)
        if self.fetch_timeout:
            bundle = await asyncio.wait_for(fetch, timeout=self.fetch_timeout)
        else:
            bundle = await fetch

        if not isinstance(bundle, Mapping):
            raise ValueError(
                f"Fetcher returned {type(bundle).__name__}, expected a mapping of namespaces"
            )
        return bundle

    def _revert(
        self, language: str, namespace: str, broadcast: BroadcastFuture[Bundle]
    ) -> None:
        state = self.cache.get(language, namespace)
        if state.future is broadcast:
            self.cache.set(language, namespace, LoadState.absent())
