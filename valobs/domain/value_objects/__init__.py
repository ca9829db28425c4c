"""Domain value objects with validation.

Immutable value objects that enforce their invariants at construction time.
"""

from valobs.domain.value_objects.currency import (
    CURRENCY_MINOR_UNITS,
    VALID_CURRENCIES,
    minor_unit_exponent,
    validate_currency,
)
from valobs.domain.value_objects.date import (
    Date,
    Weekday,
    days_in_month,
    is_leap_year,
)
from valobs.domain.value_objects.date_time import DateTime
from valobs.domain.value_objects.date_time_tz import DateTimeTZ
from valobs.domain.value_objects.duration import Duration, DurationComponents
from valobs.domain.value_objects.money import Money
from valobs.domain.value_objects.time import Time

__all__ = [
    "CURRENCY_MINOR_UNITS",
    "Date",
    "DateTime",
    "DateTimeTZ",
    "Duration",
    "DurationComponents",
    "Money",
    "Time",
    "VALID_CURRENCIES",
    "Weekday",
    "days_in_month",
    "is_leap_year",
    "minor_unit_exponent",
    "validate_currency",
]
