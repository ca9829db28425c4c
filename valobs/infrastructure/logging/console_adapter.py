"""structlog-backed adapter for LoggerProtocol.

Events go to stdout as JSON (testing, ci, production) or through the
colored console renderer (development). The adapter matches LoggerProtocol
structurally and does not inherit from it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _renderer(use_json: bool) -> structlog.types.Processor:
    if use_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


class ConsoleAdapter:
    """Writes value-boundary events to stdout through structlog.

    Args:
        use_json (bool): Render JSON lines instead of colored console text.
        level (str): Lowest level name that is emitted, case-insensitive.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        threshold = logging.getLevelNamesMapping()[level.upper()]
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                _renderer(use_json),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(threshold),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    @classmethod
    def _wrapping(cls, logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = logger
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        """Emit a debug event with structured context."""
        self._logger.debug(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return an adapter whose events all carry context; self is unchanged."""
        return self._wrapping(self._logger.bind(**context))
