"""Annotated pydantic field types for value objects.

Define conversion once, use in any pydantic model. Each field accepts either
a value object instance or its canonical string, and serializes back to the
canonical string, so models round-trip through JSON losslessly.

Usage:
    from pydantic import BaseModel
    from valobs.domain.types import DateField, MoneyField

    class Invoice(BaseModel):
        issued_on: DateField
        total: MoneyField

    invoice = Invoice.model_validate_json(
        '{"issued_on": "2024-02-29", "total": "19.99 USD"}'
    )
    invoice.model_dump_json()
    # '{"issued_on":"2024-02-29","total":"19.99 USD"}'
"""

from collections.abc import Callable
from typing import Annotated, Any, TypeVar

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from valobs.domain.protocols import ValueObjectProtocol
from valobs.domain.value_objects import (
    Date,
    DateTime,
    DateTimeTZ,
    Duration,
    Money,
    Time,
)

V = TypeVar("V", bound=ValueObjectProtocol)


def _from_canonical(value_type: type[V]) -> Callable[[Any], V]:
    """Build a validator accepting an instance or its canonical string."""

    def validate(value: Any) -> V:
        if isinstance(value, value_type):
            return value
        if isinstance(value, str):
            return value_type.parse(value)
        raise ValueError(
            f"Expected {value_type.__name__} or its canonical string, "
            f"got {type(value).__name__}"
        )

    return validate


def _to_canonical(value: ValueObjectProtocol) -> str:
    return value.to_canonical_string()


def _validate_duration(value: Any) -> Duration:
    if isinstance(value, int) and not isinstance(value, bool):
        return Duration(value)
    return _from_canonical(Duration)(value)


# ============================================================================
# Temporal Types
# ============================================================================

DateField = Annotated[
    Date,
    PlainValidator(_from_canonical(Date)),
    PlainSerializer(_to_canonical, return_type=str),
    WithJsonSchema({"type": "string", "format": "date", "examples": ["2024-02-29"]}),
]
"""Calendar date serialized as YYYY-MM-DD."""

TimeField = Annotated[
    Time,
    PlainValidator(_from_canonical(Time)),
    PlainSerializer(_to_canonical, return_type=str),
    WithJsonSchema({"type": "string", "examples": ["23:30:00.000"]}),
]
"""Time of day serialized as HH:MM:SS.mmm."""

DateTimeField = Annotated[
    DateTime,
    PlainValidator(_from_canonical(DateTime)),
    PlainSerializer(_to_canonical, return_type=str),
    WithJsonSchema({"type": "string", "examples": ["2024-02-29T23:30:00.000"]}),
]
"""Local date and time serialized as YYYY-MM-DDTHH:MM:SS.mmm."""

DateTimeTZField = Annotated[
    DateTimeTZ,
    PlainValidator(_from_canonical(DateTimeTZ)),
    PlainSerializer(_to_canonical, return_type=str),
    WithJsonSchema(
        {"type": "string", "examples": ["2024-02-29T23:30:00.000+05:30"]}
    ),
]
"""Date and time at a fixed offset, serialized with a +HH:MM suffix."""

DurationField = Annotated[
    Duration,
    PlainValidator(_validate_duration),
    PlainSerializer(lambda value: value.total_milliseconds, return_type=int),
    WithJsonSchema({"type": "integer", "examples": [5_400_000]}),
]
"""Duration serialized as total signed milliseconds.

Accepts an int, the canonical integer string, or the unit form
('1h 30m').
"""

# ============================================================================
# Monetary Types
# ============================================================================

MoneyField = Annotated[
    Money,
    PlainValidator(_from_canonical(Money)),
    PlainSerializer(_to_canonical, return_type=str),
    WithJsonSchema({"type": "string", "examples": ["19.99 USD", "100 JPY"]}),
]
"""Money serialized as '<amount> <CODE>' with the currency's fixed decimals."""
