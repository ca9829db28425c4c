"""Domain errors package.

Exports all value object exception classes for convenient importing.

Usage:
    from valobs.domain.errors import InvalidDateError, CurrencyMismatchError
"""

from valobs.domain.errors.money_error import (
    CurrencyMismatchError,
    InvalidAmountError,
    InvalidCurrencyError,
)
from valobs.domain.errors.parse_error import ParseError
from valobs.domain.errors.temporal_error import (
    InvalidDateError,
    InvalidDurationError,
    InvalidOffsetError,
    InvalidTimeError,
)
from valobs.domain.errors.value_object_error import ValueObjectError

__all__ = [
    "ValueObjectError",
    # Temporal
    "InvalidDateError",
    "InvalidTimeError",
    "InvalidOffsetError",
    "InvalidDurationError",
    # Money
    "InvalidAmountError",
    "InvalidCurrencyError",
    "CurrencyMismatchError",
    # Parsing
    "ParseError",
]
