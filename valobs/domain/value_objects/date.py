"""Immutable calendar Date value object.

Dates use the proleptic Gregorian calendar: the Gregorian leap-year rule
(divisible by 4, except centuries not divisible by 400) is applied to every
year without historical discontinuities. Years are limited to 1..9999 so the
canonical YYYY-MM-DD form is always fixed width.

Day arithmetic goes through ordinal day numbers (0001-01-01 is day 1), which
makes month, year and leap-year rollover a single integer addition.

Usage:
    from valobs.domain.value_objects import Date

    due = Date(2024, 2, 28).add_days(1)   # Date(year=2024, month=2, day=29)
    due.day_of_week()                     # Weekday.THURSDAY
    str(due)                              # '2024-02-29'
"""

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Self

from valobs.domain.errors import InvalidDateError, ParseError


MIN_YEAR = 1
MAX_YEAR = 9999

DATE_REGEX = r"([0-9]{4})-([0-9]{2})-([0-9]{2})"
_PATTERN = re.compile(DATE_REGEX)
_EXPECTED = "YYYY-MM-DD"

# Index 0 unused so months index directly.
_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DAYS_BEFORE_MONTH = tuple(sum(_DAYS_IN_MONTH[:month]) for month in range(13))


class Weekday(IntEnum):
    """ISO 8601 day of week (Monday=1 .. Sunday=7)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


def is_leap_year(year: int) -> bool:
    """Return True if year is a leap year in the proleptic Gregorian calendar.

    Example:
        >>> is_leap_year(2000), is_leap_year(1900), is_leap_year(2024)
        (True, False, True)
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month of the given year."""
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def _days_before_year(year: int) -> int:
    previous = year - 1
    return previous * 365 + previous // 4 - previous // 100 + previous // 400


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, order=True)
class Date:
    """Immutable calendar date.

    Ordering is chronological (year, then month, then day). Comparing a
    Date with a DateTime is not defined and raises TypeError.

    Attributes:
        year: 1..9999.
        month: 1..12.
        day: 1..days_in_month(year, month).

    Raises:
        InvalidDateError: If the fields do not form a valid date.

    Example:
        >>> Date(2024, 2, 29)
        Date(year=2024, month=2, day=29)
        >>> Date(2023, 2, 29)
        Traceback (most recent call last):
        ...
        InvalidDateError: Day 29 is out of range for 2023-02 (1..28)
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        """Validate year, month and day.

        Raises:
            InvalidDateError: If any field is out of range or not an int.
        """
        for name in ("year", "month", "day"):
            value = getattr(self, name)
            if not _is_int(value):
                raise InvalidDateError(f"{name} must be an integer: {value!r}")

        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise InvalidDateError(
                f"Year {self.year} is out of range ({MIN_YEAR}..{MAX_YEAR})"
            )
        if not 1 <= self.month <= 12:
            raise InvalidDateError(f"Month {self.month} is out of range (1..12)")

        max_day = days_in_month(self.year, self.month)
        if not 1 <= self.day <= max_day:
            raise InvalidDateError(
                f"Day {self.day} is out of range for "
                f"{self.year:04d}-{self.month:02d} (1..{max_day})"
            )

    # -------------------------------------------------------------------------
    # Ordinal Conversion
    # -------------------------------------------------------------------------

    def to_ordinal(self) -> int:
        """Return the day number, counting 0001-01-01 as day 1."""
        leap_day = 1 if self.month > 2 and is_leap_year(self.year) else 0
        return (
            _days_before_year(self.year)
            + _DAYS_BEFORE_MONTH[self.month]
            + leap_day
            + self.day
        )

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Self:
        """Build a Date from its day number.

        Args:
            ordinal: Day number where 0001-01-01 is 1.

        Returns:
            The corresponding Date.

        Raises:
            InvalidDateError: If ordinal is outside 0001-01-01..9999-12-31.
        """
        if not _is_int(ordinal) or not _MIN_ORDINAL <= ordinal <= _MAX_ORDINAL:
            raise InvalidDateError(
                f"Ordinal {ordinal!r} is outside the supported date range "
                f"({MIN_YEAR:04d}-01-01..{MAX_YEAR:04d}-12-31)"
            )

        # Estimate the year from the average Gregorian year, then correct.
        year = max(MIN_YEAR, min(MAX_YEAR, (ordinal * 400) // 146097 + 1))
        while _days_before_year(year) >= ordinal:
            year -= 1
        while _days_before_year(year + 1) < ordinal:
            year += 1

        day_of_year = ordinal - _days_before_year(year)
        month = 1
        while day_of_year > days_in_month(year, month):
            day_of_year -= days_in_month(year, month)
            month += 1
        return cls(year, month, day_of_year)

    # -------------------------------------------------------------------------
    # Calendar Operations
    # -------------------------------------------------------------------------

    def day_of_week(self) -> Weekday:
        """Return the ISO day of week.

        Example:
            >>> Date(2024, 1, 1).day_of_week()
            <Weekday.MONDAY: 1>
        """
        # 0001-01-01 is a Monday in the proleptic Gregorian calendar.
        return Weekday((self.to_ordinal() - 1) % 7 + 1)

    def add_days(self, days: int) -> "Date":
        """Return the date ``days`` days later (earlier when negative).

        Args:
            days: Signed number of days to move.

        Returns:
            New Date; month, year and leap-year boundaries roll over.

        Raises:
            TypeError: If days is not an int.
            InvalidDateError: If the result leaves the supported year range.
        """
        if not _is_int(days):
            raise TypeError(f"days must be an int, not {type(days).__name__}")
        return Date.from_ordinal(self.to_ordinal() + days)

    def days_until(self, other: "Date") -> int:
        """Return the signed number of days from self to other."""
        if not isinstance(other, Date):
            raise TypeError(f"Expected Date, got {type(other).__name__}")
        return other.to_ordinal() - self.to_ordinal()

    # -------------------------------------------------------------------------
    # String Representations
    # -------------------------------------------------------------------------

    def to_canonical_string(self) -> str:
        """Return the ISO 8601 form YYYY-MM-DD."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.to_canonical_string()

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse a YYYY-MM-DD string.

        Raises:
            ParseError: If text is malformed or names an invalid date.
        """
        match = _PATTERN.fullmatch(text) if isinstance(text, str) else None
        if match is None:
            raise ParseError(text, _EXPECTED)
        try:
            return cls(*(int(group) for group in match.groups()))
        except InvalidDateError as e:
            raise ParseError(text, _EXPECTED) from e


_MIN_ORDINAL = 1
_MAX_ORDINAL = _days_before_year(MAX_YEAR + 1)
