"""Lazy translation loading infrastructure settings."""

from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings

SUPPORTED_FETCHERS = ("yaml", "rest")


class I18nSettings(InfrastructureSettings):
    """Configuration for lazily loaded translation namespaces.

    Translation keys are split on ``key_separator``; the first segment names
    the namespace bundle fetched on the first miss for a language.

    Environment Variables:
        I18N_DEFAULT_LANGUAGE: Language active when the registry starts (default: en)
        I18N_KEY_SEPARATOR: Separator between namespace and message key (default: ".")
        I18N_FETCHER: Bundle source - 'yaml' or 'rest' (default: yaml)
        I18N_TRANSLATIONS_DIR: Directory of <namespace>.<language>.yml files
        I18N_REST_BASE_URL: Base URL of the translation endpoint
        I18N_REST_PATH_TEMPLATE: Path with {language} and {namespace} placeholders
        I18N_REST_TIMEOUT_SECONDS: HTTP timeout for the REST fetcher (default: 30)
        I18N_FETCH_TIMEOUT_SECONDS: Upper bound on one namespace fetch (default: unset)
        I18N_STRICT_INTERPOLATION: Raise on unknown placeholders (default: False)

    Example:
        ```python
        from infrastructure.configuration import settings

        if settings.i18n.fetcher == "rest":
            base_url = settings.i18n.rest_base_url
            # Configure REST fetcher...
        ```
    """

    default_language: str = Field(
        default="en",
        alias="I18N_DEFAULT_LANGUAGE",
        description="Language active when the registry is created",
    )
    key_separator: str = Field(
        default=".",
        alias="I18N_KEY_SEPARATOR",
        description="Separator between the namespace and the message key",
    )
    fetcher: str = Field(
        default="yaml",
        alias="I18N_FETCHER",
        description="Bundle source: 'yaml' or 'rest'",
    )
    translations_dir: Optional[str] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory holding <namespace>.<language>.yml files (default: app/locales)",
    )
    rest_base_url: str = Field(
        default="http://127.0.0.1:8000",
        alias="I18N_REST_BASE_URL",
        description="Base URL of the translation endpoint",
    )
    rest_path_template: str = Field(
        default="/translations/{language}/{namespace}",
        alias="I18N_REST_PATH_TEMPLATE",
        description="Endpoint path with {language} and {namespace} placeholders",
    )
    rest_timeout_seconds: int = Field(
        default=30,
        alias="I18N_REST_TIMEOUT_SECONDS",
        description="HTTP timeout for the REST fetcher (seconds)",
    )
    fetch_timeout_seconds: Optional[float] = Field(
        default=None,
        alias="I18N_FETCH_TIMEOUT_SECONDS",
        description="Upper bound on a single namespace fetch (seconds, unset disables)",
    )
    strict_interpolation: bool = Field(
        default=False,
        alias="I18N_STRICT_INTERPOLATION",
        description="Raise instead of keeping unknown placeholders",
    )

    @field_validator("key_separator")
    @classmethod
    def validate_key_separator(cls, v: str) -> str:
        """Reject an empty separator."""
        if not v:
            raise ValueError("I18N_KEY_SEPARATOR must not be empty")
        return v

    @field_validator("fetcher", mode="before")
    @classmethod
    def validate_fetcher(cls, v: str) -> str:
        """Normalize and validate the fetcher name."""
        value = str(v).strip().lower()
        if value not in SUPPORTED_FETCHERS:
            raise ValueError(
                f"I18N_FETCHER must be one of {', '.join(SUPPORTED_FETCHERS)}: {v}"
            )
        return value

    @field_validator("fetch_timeout_seconds", mode="before")
    @classmethod
    def validate_fetch_timeout(cls, v):
        """Treat empty and non-positive values as no timeout."""
        if v in (None, ""):
            return None
        if float(v) <= 0:
            return None
        return v
