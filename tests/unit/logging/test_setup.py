"""Unit tests for localekit.logging.setup module.

Tests cover:
- configure_logging function
- processor chain selection
- get_module_logger context binding
"""

# pylint: disable=protected-access

import logging

import pytest
import structlog

from localekit.logging.setup import (
    _is_test_environment,
    _processors,
    configure_logging,
    get_module_logger,
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

    def test_configure_logging_returns_bound_logger(self):
        """configure_logging returns a logger with the usual methods."""
        result = configure_logging()

        for method in ("debug", "info", "warning", "error"):
            assert hasattr(result, method)

    def test_configure_logging_accepts_overrides(self):
        """configure_logging accepts log_level and is_production."""
        assert configure_logging(log_level="DEBUG") is not None
        assert configure_logging(is_production=True) is not None

    def test_configure_logging_suppresses_in_test_env(self):
        """In test environment, the root logger is silenced."""
        configure_logging()
        assert logging.root.level > logging.CRITICAL

    def test_logging_calls_do_not_raise(self):
        logger = configure_logging()
        logger.info("catalog_loaded", source="test", message_count=3)


@pytest.mark.unit
class TestProcessors:
    """Test suite for the processor chain."""

    def test_json_renderer_in_production(self):
        chain = _processors(json_output=True)
        assert isinstance(chain[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_in_development(self):
        chain = _processors(json_output=False)
        assert isinstance(chain[-1], structlog.dev.ConsoleRenderer)

    def test_exceptions_formatted_before_rendering(self):
        chain = _processors(json_output=True)
        assert chain.index(structlog.processors.format_exc_info) < len(chain) - 1


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger."""

    def test_binds_component_and_module_path(self):
        context = get_module_logger()._context
        assert context["component"] == "test_setup"
        assert context["module_path"].endswith("logging.test_setup")
