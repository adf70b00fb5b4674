"""Infrastructure modules for the lazy translation system.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Lazy namespace loading, missing-key resolution and interpolation
"""

# Configuration
from infrastructure.configuration import settings

# Observability
from infrastructure.logging import configure_logging, get_module_logger

__all__ = [
    # Configuration
    "settings",
    # Observability
    "configure_logging",
    "get_module_logger",
]
