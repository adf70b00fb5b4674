"""Custom exceptions for the lazy translation system.

A template missing from a loaded namespace is not an error: the resolver
recovers by returning the requested key unchanged.
"""


class TranslationError(Exception):
    """Base exception for all translation-related errors.

    Example:
        try:
            message = await resolver.resolve("core.firstname")
        except TranslationError as e:
            logger.error("translation_error", error=str(e))
    """

    pass


class MalformedKeyError(TranslationError, ValueError):
    """Raised when a key cannot be split into namespace and message key.

    Raised before any fetch is attempted.

    Example:
        >>> TranslationKey.from_string("firstname")
        Traceback (most recent call last):
        ...
        MalformedKeyError: Translation key must be in format 'namespace.key': firstname
    """

    def __init__(self, key: str, separator: str = "."):
        self.key = key
        self.separator = separator
        super().__init__(
            f"Translation key must be in format 'namespace{separator}key': {key}"
        )


class FetchFailure(TranslationError):
    """Raised to every waiter when a namespace bundle could not be fetched.

    The error raised by the fetcher is available as ``__cause__``.

    Attributes:
        language: Language the fetch was issued for.
        namespace: Namespace the fetch was issued for.
    """

    def __init__(self, language: str, namespace: str, reason: str = ""):
        self.language = language
        self.namespace = namespace
        message = f"Failed to fetch namespace '{namespace}' for language '{language}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InterpolationError(TranslationError, ValueError):
    """Raised by strict interpolation when a placeholder has no parameter."""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"Missing interpolation variable: {variable}")
