"""Per-(language, namespace) load-state cache.

The cache is owned by a single MissingKeyResolver and lives as long as it
does. All access happens on one event loop, so no locking is needed.
"""

from typing import Dict, List, Optional

from infrastructure.i18n.models import ABSENT, LoadState
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class NamespaceCache:
    """Keyed store mapping (language, namespace) to a LoadState.

    Pairs never observed are Absent. Entries only go away through
    ``evict`` or ``reset``.
    """

    def __init__(self) -> None:
        self._states: Dict[str, Dict[str, LoadState]] = {}

    def get(self, language: str, namespace: str) -> LoadState:
        """Return the state of a pair, Absent if unset."""
        return self._states.get(language, {}).get(namespace, ABSENT)

    def set(self, language: str, namespace: str, state: LoadState) -> None:
        """Store the state of a pair."""
        self.ensure_language(language)[namespace] = state

    def ensure_language(self, language: str) -> Dict[str, LoadState]:
        """Create the per-language sub-map if missing and return it."""
        return self._states.setdefault(language, {})

    def evict(self, language: str, namespace: Optional[str] = None) -> None:
        """Drop one entry, or every entry of a language.

        In-flight fetches are not cancelled.

        Args:
            language: Language to evict.
            namespace: Namespace to evict; all namespaces when omitted.
        """
        if namespace is None:
            removed = self._states.pop(language, {})
            logger.info(
                "evicted_language", language=language, namespace_count=len(removed)
            )
            return

        namespaces = self._states.get(language)
        if namespaces is not None and namespaces.pop(namespace, None) is not None:
            logger.info("evicted_namespace", language=language, namespace=namespace)

    def reset(self) -> None:
        """Drop every entry."""
        self._states.clear()
        logger.info("cleared_namespace_cache")

    def languages(self) -> List[str]:
        return list(self._states.keys())

    def namespaces(self, language: str) -> List[str]:
        return list(self._states.get(language, {}).keys())

    def __contains__(self, item) -> bool:
        language, namespace = item
        return namespace in self._states.get(language, {})

    def __len__(self) -> int:
        return sum(len(namespaces) for namespaces in self._states.values())
