"""Value object error codes (machine-readable).

Used with Result types for railway-oriented parsing. Each code maps to one
exception class of the value object error taxonomy.
"""

from enum import Enum


class ErrorCode(Enum):
    """Value object error codes (machine-readable)."""

    # Temporal
    INVALID_DATE = "invalid_date"
    INVALID_TIME = "invalid_time"
    INVALID_OFFSET = "invalid_offset"
    INVALID_DURATION = "invalid_duration"

    # Money
    INVALID_AMOUNT = "invalid_amount"
    INVALID_CURRENCY = "invalid_currency"
    CURRENCY_MISMATCH = "currency_mismatch"

    # Text forms
    PARSE_FAILED = "parse_failed"

    # Fallback
    VALIDATION_FAILED = "validation_failed"
