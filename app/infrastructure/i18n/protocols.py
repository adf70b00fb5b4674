"""Contracts for the collaborators of the lazy translation system.

The resolver only depends on these protocols; concrete implementations live
in ``fetchers``, ``registry`` and ``interpolation``.
"""

from typing import Any, Awaitable, Dict, Protocol, runtime_checkable

from infrastructure.i18n.models import Bundle, MissingTranslationParams


@runtime_checkable
class Fetcher(Protocol):
    """Retrieves the bundle of one namespace in one language.

    Implementations may raise any exception; it is propagated to every
    waiter chained on a ``FetchFailure``.
    """

    async def fetch(self, language: str, namespace: str) -> Bundle:
        """Return a mapping of namespace to messages for ``namespace``."""
        ...


@runtime_checkable
class TranslationRegistry(Protocol):
    """Host registry that stores resolved language tables.

    Reports the active language and receives each successfully loaded bundle
    exactly once, with ``merge=True``.
    """

    @property
    def current_language(self) -> str: ...

    def set_translation(self, language: str, bundle: Bundle, merge: bool) -> None:
        """Publish a bundle; merge adds without clearing loaded namespaces."""
        ...

    def get_translation(self, language: str) -> Bundle:
        """Return everything loaded for ``language`` so far."""
        ...


@runtime_checkable
class Interpolator(Protocol):
    """Substitutes named parameters into a template. Pure."""

    def interpolate(self, template: str, params: Dict[str, Any]) -> str: ...


@runtime_checkable
class MissingTranslationHandler(Protocol):
    """Capability a host calls when a key has no loaded value."""

    def resolve_missing(self, params: MissingTranslationParams) -> Awaitable[str]: ...
