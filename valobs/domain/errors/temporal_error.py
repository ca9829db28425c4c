"""Temporal value object errors.

Raised by Date, Time, DateTime, DateTimeTZ and Duration when a constructor
or operation would produce a value outside its valid range.
"""

from valobs.domain.errors.value_object_error import ValueObjectError


class InvalidDateError(ValueObjectError):
    """Raised when year, month and day do not form a valid calendar date."""


class InvalidTimeError(ValueObjectError):
    """Raised when a time of day is out of range or would cross midnight."""


class InvalidOffsetError(InvalidTimeError):
    """Raised when a fixed UTC offset is outside -14:00..+14:00."""


class InvalidDurationError(ValueObjectError):
    """Raised when a duration is not an integer or overflows 64 bits."""
