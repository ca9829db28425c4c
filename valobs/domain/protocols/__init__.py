"""Domain protocols (ports) package.

Value objects and adapters implement these protocols without inheritance.

Usage:
    from valobs.domain.protocols import LoggerProtocol, ValueObjectProtocol
"""

from valobs.domain.protocols.logger_protocol import LoggerProtocol
from valobs.domain.protocols.value_object_protocol import (
    OrderedValueObjectProtocol,
    ValueObjectProtocol,
)

__all__ = [
    "LoggerProtocol",
    "OrderedValueObjectProtocol",
    "ValueObjectProtocol",
]
