"""Fixtures for infrastructure.logging tests."""

import pytest
from unittest.mock import Mock

from infrastructure.configuration import Settings


@pytest.fixture
def mock_settings():
    """Development-mode Settings stand-in read by configure_logging."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.PREFIX = "dev-"
    settings.is_production = False
    return settings


@pytest.fixture
def production_settings():
    """Production Settings stand-in (empty PREFIX) for JSON rendering."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "WARNING"
    settings.PREFIX = ""
    settings.is_production = True
    return settings
