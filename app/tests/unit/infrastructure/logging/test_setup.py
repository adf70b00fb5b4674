"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- get_logger and get_module_logger functions
- Test logging suppression in test environment
"""

import logging

import pytest
import structlog

from infrastructure.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
    _is_test_environment,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_bound_logger(self, mock_settings):
        """configure_logging returns a BoundLogger instance."""
        result = configure_logging(settings=mock_settings)

        assert result is not None
        assert hasattr(result, "info")
        assert hasattr(result, "debug")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")

    def test_configure_logging_with_overrides(self, mock_settings):
        """configure_logging accepts log_level and is_production overrides."""
        assert configure_logging(settings=mock_settings, log_level="DEBUG") is not None
        assert configure_logging(settings=mock_settings, is_production=True) is not None
        assert configure_logging(settings=mock_settings, is_production=False) is not None

    def test_configure_logging_production_settings(self, production_settings):
        """Production settings are accepted; output stays suppressed under pytest."""
        assert configure_logging(settings=production_settings) is not None
        assert logging.getLogger().level >= logging.CRITICAL

    def test_configure_logging_default_settings(self):
        """configure_logging falls back to the application settings."""
        assert configure_logging() is not None

    def test_configure_logging_idempotent(self, mock_settings):
        """Multiple configure_logging calls are safe."""
        logger1 = configure_logging(settings=mock_settings)
        logger2 = configure_logging(settings=mock_settings)

        assert logger1 is not None
        assert logger2 is not None

    def test_configure_logging_suppresses_in_test_env(self, mock_settings):
        """In test environment, root logger level is set high to suppress output."""
        configure_logging(settings=mock_settings)

        root_logger = logging.getLogger()
        assert root_logger.level >= logging.CRITICAL


@pytest.mark.unit
class TestModuleLoggers:
    """Test suite for get_logger and get_module_logger."""

    def test_get_module_logger_returns_logger(self, mock_settings):
        configure_logging(settings=mock_settings)

        logger = get_module_logger()

        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_get_logger_with_name(self, mock_settings):
        configure_logging(settings=mock_settings)

        logger = get_logger("infrastructure.i18n.loader")

        assert hasattr(logger, "info")

    def test_get_logger_without_name(self, mock_settings):
        configure_logging(settings=mock_settings)

        assert hasattr(get_logger(), "info")

    def test_module_loggers_do_not_raise(self, mock_settings):
        """Logging calls execute without raising (output is suppressed in tests)."""
        configure_logging(settings=mock_settings)
        logger = get_module_logger()

        logger.debug("namespace_fetch_started", language="en", namespace="core")
        logger.info("namespace_loaded", language="en", namespace="core")
        logger.warning("namespace_fetch_failed", error="boom")


@pytest.mark.unit
class TestLoggingBestPractices:
    """Tests demonstrating structlog best practices."""

    def test_bind_for_context(self, mock_settings):
        """Use .bind() for adding context."""
        configure_logging(settings=mock_settings)

        logger = structlog.get_logger()
        log = logger.bind(language="en", namespace="core")

        assert log is not None
        assert hasattr(log, "info")

    def test_exception_logging(self, mock_settings):
        """Exception logging works correctly."""
        configure_logging(settings=mock_settings)

        logger = structlog.get_logger()

        try:
            raise ValueError("test error")
        except ValueError:
            logger.exception("namespace_fetch_failed")
