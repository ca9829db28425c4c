"""Logging adapters implementing LoggerProtocol."""

from valobs.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
