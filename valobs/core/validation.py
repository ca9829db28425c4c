"""Result-typed parsing of canonical strings.

Value objects raise on invalid input. Callers written in the
railway-oriented style can use ``parse_value`` instead: it returns
``Success(value=...)`` or ``Failure(error=ValidationError(...))`` with a
machine-readable ErrorCode, and never raises for invalid text.

Usage:
    from valobs.core.result import Failure, Success
    from valobs.core.validation import parse_value
    from valobs.domain.value_objects import Money

    match parse_value(Money, "19.99 USD"):
        case Success(value=money):
            ...
        case Failure(error=error):
            print(error.code, error.message)
"""

from typing import TypeVar

from valobs.core.container import get_logger
from valobs.core.enums import ErrorCode
from valobs.core.errors import ValidationError
from valobs.core.result import Failure, Result, Success
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
from valobs.domain.protocols import ValueObjectProtocol

V = TypeVar("V", bound=ValueObjectProtocol)

# Most specific first: InvalidOffsetError is an InvalidTimeError.
_ERROR_CODES: tuple[tuple[type[ValueObjectError], ErrorCode], ...] = (
    (InvalidOffsetError, ErrorCode.INVALID_OFFSET),
    (InvalidDateError, ErrorCode.INVALID_DATE),
    (InvalidTimeError, ErrorCode.INVALID_TIME),
    (InvalidDurationError, ErrorCode.INVALID_DURATION),
    (InvalidAmountError, ErrorCode.INVALID_AMOUNT),
    (InvalidCurrencyError, ErrorCode.INVALID_CURRENCY),
    (CurrencyMismatchError, ErrorCode.CURRENCY_MISMATCH),
    (ParseError, ErrorCode.PARSE_FAILED),
)


def error_code_for(error: ValueObjectError) -> ErrorCode:
    """Map a value object exception to its ErrorCode.

    A ParseError caused by a domain error reports the underlying code, so
    '2023-02-29' yields INVALID_DATE rather than PARSE_FAILED.
    """
    if isinstance(error, ParseError) and isinstance(error.__cause__, ValueObjectError):
        return error_code_for(error.__cause__)
    for error_type, code in _ERROR_CODES:
        if isinstance(error, error_type):
            return code
    return ErrorCode.VALIDATION_FAILED


def parse_value(value_type: type[V], text: str) -> Result[V, ValidationError]:
    """Parse canonical text into a value object without raising.

    Args:
        value_type: Value object class exposing ``parse``.
        text: Canonical string form.

    Returns:
        Success with the parsed value, or Failure with a ValidationError.
    """
    try:
        return Success(value=value_type.parse(text))
    except ValueObjectError as e:
        code = error_code_for(e)
        logger = get_logger().bind(value_type=value_type.__name__)
        logger.debug("value_rejected", code=code.value, reason=str(e))
        return Failure(
            error=ValidationError(
                code=code,
                message=str(e),
                field=value_type.__name__,
                details={"input": repr(text)},
            )
        )
