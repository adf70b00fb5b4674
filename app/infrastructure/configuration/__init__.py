"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the lazy
translation system using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation loading settings class (for testing)

Example:
    ```python
    from infrastructure.configuration import settings

    separator = settings.i18n.key_separator
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.infrastructure.i18n import I18nSettings
from infrastructure.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
