"""Dependency factories.

Application-scoped singletons for cross-cutting services. Adapter selection
is centralized here (composition root).
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from valobs.core.config import get_settings
from valobs.core.enums import Environment

if TYPE_CHECKING:
    from valobs.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from valobs.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = settings.environment is not Environment.DEVELOPMENT
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)
