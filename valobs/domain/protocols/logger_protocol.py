"""LoggerProtocol definition for structured logging.

Backend-agnostic logging port. Implementations emit a message plus
key-value context. The library only logs rejected input at parse
boundaries, at DEBUG level.

Usage:
    from valobs.core.container import get_logger

    logger = get_logger().bind(value_type="Date")
    logger.debug("value_rejected", code="invalid_date")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return a logger that adds context to every event.

        The original logger is unchanged.
        """
        ...
