"""Translation models for the lazy translation system.

Defines the data structures shared by the cache, loader and resolver.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

from infrastructure.i18n.errors import MalformedKeyError

if TYPE_CHECKING:
    from infrastructure.i18n.broadcast import BroadcastFuture
    from infrastructure.i18n.protocols import TranslationRegistry

# namespace -> {key: template}
Bundle = Dict[str, Dict[str, Any]]

DEFAULT_SEPARATOR = "."


@dataclass(frozen=True)
class TranslationKey:
    """Represents a translation key split at its first separator.

    Keys are hierarchical (e.g., "core.firstname", "admin_module.configuration.sub").
    Only the first separator is significant: everything after it is the
    message key, separators included.

    Attributes:
        namespace: Bundle the key belongs to (e.g., "core", "validations").
        message_key: Key inside the bundle (e.g., "firstname", "configuration.sub").
        separator: Separator the key was split on.
    """

    namespace: str
    message_key: str
    separator: str = field(default=DEFAULT_SEPARATOR, compare=False)

    def __str__(self) -> str:
        """Return the full key path.

        Returns:
            Full key (e.g., "core.firstname").
        """
        return f"{self.namespace}{self.separator}{self.message_key}"

    @classmethod
    def from_string(
        cls, key_string: str, separator: str = DEFAULT_SEPARATOR
    ) -> "TranslationKey":
        """Create TranslationKey from a separated string.

        Args:
            key_string: Separated key (e.g., "core.firstname").
            separator: Separator between namespace and message key.

        Returns:
            TranslationKey instance.

        Raises:
            MalformedKeyError: If the key has no separator, or an empty
                namespace or message key.
        """
        if not isinstance(key_string, str):
            raise MalformedKeyError(repr(key_string), separator)

        namespace, found, message_key = key_string.partition(separator)
        if not found or not namespace or not message_key:
            raise MalformedKeyError(key_string, separator)
        return cls(namespace=namespace, message_key=message_key, separator=separator)


def find_template(
    bundle: Mapping,
    namespace: str,
    message_key: str,
    separator: str = DEFAULT_SEPARATOR,
) -> Optional[str]:
    """Look up a template in a bundle.

    Tries ``bundle[namespace][message_key]`` first, then walks nested
    mappings one separator segment at a time.

    Returns:
        The template string, or None when absent or not a string.
    """
    messages = bundle.get(namespace) if isinstance(bundle, Mapping) else None
    if not isinstance(messages, Mapping):
        return None

    value = messages.get(message_key)
    if value is None and separator in message_key:
        value = messages
        for part in message_key.split(separator):
            if not isinstance(value, Mapping) or part not in value:
                return None
            value = value[part]

    return value if isinstance(value, str) else None


class LoadStatus(str, Enum):
    """Load status of one (language, namespace) pair."""

    ABSENT = "absent"
    LOADING = "loading"
    LOADED = "loaded"


@dataclass(frozen=True)
class LoadState:
    """Load state of one (language, namespace) pair.

    Attributes:
        status: Where the pair is in the Absent -> Loading -> Loaded lifecycle.
        future: Shared in-flight fetch; set only while loading.
    """

    status: LoadStatus
    future: Optional["BroadcastFuture[Bundle]"] = None

    @classmethod
    def absent(cls) -> "LoadState":
        return ABSENT

    @classmethod
    def loading(cls, future: "BroadcastFuture[Bundle]") -> "LoadState":
        return cls(status=LoadStatus.LOADING, future=future)

    @classmethod
    def loaded(cls) -> "LoadState":
        return LOADED

    @property
    def is_absent(self) -> bool:
        return self.status is LoadStatus.ABSENT

    @property
    def is_loading(self) -> bool:
        return self.status is LoadStatus.LOADING

    @property
    def is_loaded(self) -> bool:
        return self.status is LoadStatus.LOADED


ABSENT = LoadState(status=LoadStatus.ABSENT)
LOADED = LoadState(status=LoadStatus.LOADED)


def _check_bundle(bundle: Mapping) -> None:
    for namespace, messages in bundle.items():
        if not isinstance(messages, Mapping):
            raise ValueError(
                f"Namespace {namespace!r} must map message keys to templates, "
                f"got {type(messages).__name__}"
            )


@dataclass
class TranslationCatalog:
    """Container for the loaded translations of one language.

    Stores every namespace bundle published for the language.

    Attributes:
        language: Language this catalog is for.
        messages: Nested dict structure {namespace: {key: template}}.
    """

    language: str
    messages: Bundle = field(default_factory=dict)

    def get_template(self, key: TranslationKey) -> Optional[str]:
        """Retrieve a template by key.

        Args:
            key: TranslationKey with namespace and message_key.

        Returns:
            Template string, or None if not found.
        """
        return find_template(
            self.messages, key.namespace, key.message_key, key.separator
        )

    def has_namespace(self, namespace: str) -> bool:
        return namespace in self.messages

    def merge(self, bundle: Mapping) -> None:
        """Merge a bundle into this catalog.

        Namespaces already present are updated key by key; later entries
        override earlier ones.

        Args:
            bundle: Mapping of namespace to messages.

        Raises:
            ValueError: If a namespace does not map to messages. The catalog
                is left unchanged.
        """
        _check_bundle(bundle)
        for namespace, messages in bundle.items():
            self.messages.setdefault(namespace, {}).update(messages)

    def replace(self, bundle: Mapping) -> None:
        """Replace every namespace of this catalog with ``bundle``.

        Raises:
            ValueError: If a namespace does not map to messages.
        """
        _check_bundle(bundle)
        self.messages = {namespace: dict(messages) for namespace, messages in bundle.items()}


@dataclass
class MissingTranslationParams:
    """Event passed to a missing translation handler.

    Attributes:
        key: Full requested key (e.g., "core.firstname").
        interpolate_params: Parameters for placeholder substitution.
        registry: Host registry reporting the active language.
        language: Explicit language; defaults to the registry's current language.
    """

    key: str
    interpolate_params: Dict[str, Any] = field(default_factory=dict)
    registry: Optional["TranslationRegistry"] = None
    language: Optional[str] = None

    def resolve_language(self) -> str:
        """Return the language the key should be resolved in.

        Raises:
            ValueError: If neither a language nor a registry is available.
        """
        if self.language:
            return self.language
        if self.registry is None:
            raise ValueError(
                f"No language available to resolve missing translation: {self.key}"
            )
        return self.registry.current_language
