"""valobs: immutable value objects for domain modeling.

Usage:
    from valobs import Date, DateTime, Duration, Money

    DateTime.of(2024, 12, 31, 23, 30) + Duration.of(hours=2)
    Money("10.00", "USD") + Money("5.00", "USD")
"""

from valobs.domain.errors import (
    CurrencyMismatchError,
    InvalidAmountError,
    InvalidCurrencyError,
    InvalidDateError,
    InvalidDurationError,
    InvalidOffsetError,
    InvalidTimeError,
    ParseError,
    ValueObjectError,
)
from valobs.domain.value_objects import (
    Date,
    DateTime,
    DateTimeTZ,
    Duration,
    Money,
    Time,
    Weekday,
)

__all__ = [
    # Value objects
    "Date",
    "DateTime",
    "DateTimeTZ",
    "Duration",
    "Money",
    "Time",
    "Weekday",
    # Errors
    "CurrencyMismatchError",
    "InvalidAmountError",
    "InvalidCurrencyError",
    "InvalidDateError",
    "InvalidDurationError",
    "InvalidOffsetError",
    "InvalidTimeError",
    "ParseError",
    "ValueObjectError",
]
