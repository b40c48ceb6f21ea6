"""Unit tests for structured logging."""
# ruff: noqa: ARG002  # Fixtures used for setup side effects

import logging
from unittest.mock import MagicMock, patch

import pytest
import structlog

from ssic.core.logging import (
    LogContext,
    add_environment_info,
    get_logger,
    log_exception,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Restore root logger handlers changed by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers = handlers
    root_logger.setLevel(level)
    structlog.contextvars.clear_contextvars()


class TestAddEnvironmentInfo:
    """Tests for add_environment_info processor."""

    def test_adds_environment(self):
        """Test environment is added to event dict."""
        mock_settings = MagicMock()
        mock_settings.ENVIRONMENT = "production"

        with patch("ssic.core.logging.get_settings", return_value=mock_settings):
            result = add_environment_info(None, "info", {})

        assert result["environment"] == "production"


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self, patch_settings):
        """Test logging setup with default settings."""
        patch_settings.log_level = "INFO"

        setup_logging()

        assert logging.getLogger().level == logging.INFO
        assert get_logger("test") is not None

    def test_setup_logging_json_format(self, patch_settings):
        """Test logging setup with JSON format."""
        patch_settings.ENVIRONMENT = "production"

        setup_logging(json_format=True)

        handler = logging.getLogger().handlers[0]
        assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)

    def test_setup_logging_custom_level(self, patch_settings):
        """Test logging setup with custom log level."""
        setup_logging(log_level="WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_single_root_handler(self, patch_settings):
        """Test repeated setup does not stack handlers."""
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1


class TestLogContext:
    """Tests for LogContext context manager."""

    def test_log_context_binds_values(self, patch_settings):
        """Test that LogContext binds values during block."""
        structlog.contextvars.clear_contextvars()

        with LogContext(operation="reload_records", record_count=12):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx.get("operation") == "reload_records"
            assert ctx.get("record_count") == 12

        ctx = structlog.contextvars.get_contextvars()
        assert "operation" not in ctx
        assert "record_count" not in ctx


class TestLogException:
    """Tests for log_exception."""

    def test_log_exception(self):
        """Test logging exception."""
        mock_logger = MagicMock()
        log_exception(mock_logger, ValueError("Test error"), context="testing")

        mock_logger.exception.assert_called_once()
        args, kwargs = mock_logger.exception.call_args
        assert args[0] == "exception_occurred"
        assert kwargs["error_type"] == "ValueError"
        assert kwargs["error_message"] == "Test error"
        assert kwargs["context"] == "testing"
