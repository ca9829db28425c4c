"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- debug() and bind(), the LoggerProtocol surface
- Real JSON output, bound context and level filtering

Architecture:
- Method tests with mocked structlog
- Output tests with real structlog captured from stdout
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from valobs.domain.protocols import LoggerProtocol
from valobs.infrastructure.logging.console_adapter import ConsoleAdapter


@pytest.fixture
def mock_logger():
    """Patch structlog and return the logger ConsoleAdapter wraps."""
    with patch(
        "valobs.infrastructure.logging.console_adapter.structlog"
    ) as mock_structlog:
        logger = MagicMock()
        mock_structlog.get_logger.return_value = logger
        yield logger


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter methods against a mocked structlog."""

    def test_debug_logs_message_with_context(self, mock_logger):
        """Test debug() logs message with structured context."""
        ConsoleAdapter().debug("value_rejected", value_type="Date", code="invalid_date")

        mock_logger.debug.assert_called_once_with(
            "value_rejected", value_type="Date", code="invalid_date"
        )

    def test_bind_returns_new_adapter(self, mock_logger):
        """Test bind() wraps the bound structlog logger."""
        bound_logger = MagicMock()
        mock_logger.bind.return_value = bound_logger

        adapter = ConsoleAdapter()
        bound = adapter.bind(value_type="Money")
        bound.debug("value_rejected", code="invalid_amount")

        assert bound is not adapter
        assert isinstance(bound, ConsoleAdapter)
        mock_logger.bind.assert_called_once_with(value_type="Money")
        bound_logger.debug.assert_called_once_with(
            "value_rejected", code="invalid_amount"
        )
        mock_logger.debug.assert_not_called()

    def test_adapter_satisfies_protocol(self, mock_logger):
        """Test ConsoleAdapter exposes every LoggerProtocol method."""
        adapter = ConsoleAdapter()

        for method in ("debug", "bind"):
            assert hasattr(LoggerProtocol, method)
            assert callable(getattr(adapter, method))


@pytest.mark.unit
class TestConsoleAdapterOutput:
    """Test real structlog output."""

    def test_json_mode_produces_valid_json(self, capsys):
        """Test JSON mode writes one parseable object per event."""
        adapter = ConsoleAdapter(use_json=True, level="DEBUG")
        adapter.debug("JSON test", key="value", count=42)

        log_data = json.loads(capsys.readouterr().out.strip())
        assert log_data["event"] == "JSON test"
        assert log_data["key"] == "value"
        assert log_data["count"] == 42
        assert log_data["level"] == "debug"
        assert "timestamp" in log_data

    def test_level_filters_lower_events(self, capsys):
        """Test debug events are dropped at INFO."""
        adapter = ConsoleAdapter(use_json=True, level="INFO")
        adapter.debug("hidden")

        assert "hidden" not in capsys.readouterr().out

    def test_bound_context_is_rendered(self, capsys):
        """Test bound fields appear on every event from the bound adapter."""
        adapter = ConsoleAdapter(use_json=True, level="debug")
        adapter.bind(value_type="Time").debug("value_rejected", code="invalid_time")

        log_data = json.loads(capsys.readouterr().out.strip())
        assert log_data["event"] == "value_rejected"
        assert log_data["value_type"] == "Time"
        assert log_data["code"] == "invalid_time"
