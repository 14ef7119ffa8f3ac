"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- Level methods forward message and context
- Exception details on error/critical
- Context binding
- Renderer and level configuration

Architecture:
- structlog is patched; no real output
"""

from unittest.mock import MagicMock, patch

import pytest

from error_responder.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "error_responder.infrastructure.logging.console_adapter.structlog"


@pytest.fixture
def structlog_mock():
    with patch(STRUCTLOG) as mock_structlog:
        mock_structlog.get_logger.return_value = MagicMock()
        yield mock_structlog


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test level methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_level_forwards_context(self, structlog_mock, level):
        """Test message and context reach the structlog logger."""
        adapter = ConsoleAdapter()

        getattr(adapter, level)("Resolved error", error_code="user_banned", status=403)

        getattr(structlog_mock.get_logger.return_value, level).assert_called_once_with(
            "Resolved error", error_code="user_banned", status=403
        )

    @pytest.mark.parametrize("level", ["error", "critical"])
    def test_exception_details_added(self, structlog_mock, level):
        """Test error/critical expand the exception into type and message."""
        adapter = ConsoleAdapter()

        getattr(adapter, level)("Unhandled exception", error=KeyError("user"), path="/x")

        getattr(structlog_mock.get_logger.return_value, level).assert_called_once_with(
            "Unhandled exception",
            path="/x",
            error_type="KeyError",
            error_message="'user'",
        )

    def test_error_without_exception(self, structlog_mock):
        """Test error() without an exception adds no error fields."""
        adapter = ConsoleAdapter()

        adapter.error("Failed", status=500)

        structlog_mock.get_logger.return_value.error.assert_called_once_with(
            "Failed", status=500
        )


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test context binding."""

    def test_bind_returns_new_adapter(self, structlog_mock):
        """Test bind() wraps the bound structlog logger in a new adapter."""
        base_logger = structlog_mock.get_logger.return_value
        bound_logger = MagicMock()
        base_logger.bind.return_value = bound_logger
        adapter = ConsoleAdapter()

        bound = adapter.bind(request_path="/users/1")
        bound.info("Handled")

        assert bound is not adapter
        base_logger.bind.assert_called_once_with(request_path="/users/1")
        bound_logger.info.assert_called_once_with("Handled")
        base_logger.info.assert_not_called()

    def test_with_context_is_bind(self, structlog_mock):
        """Test with_context() delegates to bind()."""
        base_logger = structlog_mock.get_logger.return_value
        adapter = ConsoleAdapter()

        adapter.with_context(request_method="GET")

        base_logger.bind.assert_called_once_with(request_method="GET")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration."""

    def test_json_renderer(self, structlog_mock):
        """Test JSON output selects the JSON renderer."""
        ConsoleAdapter(use_json=True)

        structlog_mock.processors.JSONRenderer.assert_called_once()
        structlog_mock.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer(self, structlog_mock):
        """Test development output selects the console renderer."""
        ConsoleAdapter(use_json=False)

        structlog_mock.dev.ConsoleRenderer.assert_called_once_with(colors=True)

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("DEBUG", 10), ("warning", 30), ("nonsense", 20)],
    )
    def test_level_filtering(self, structlog_mock, level, expected):
        """Test level names map to filtering levels, unknown names to INFO."""
        ConsoleAdapter(level=level)

        structlog_mock.make_filtering_bound_logger.assert_called_once_with(expected)
