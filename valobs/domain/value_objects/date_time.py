"""Immutable DateTime value object (Date + Time composition).

DateTime owns one Date and one Time. It adds no cross-field invariant of its
own; its job is arithmetic that crosses midnight.

Rollover:
    Adding a Duration combines the time's millisecond-of-day with the
    duration and floor-divides by the length of a day. The quotient is the
    day shift handed to Date.add_days, the remainder becomes the new Time.
    Floor division keeps the remainder non-negative, so negative durations
    move backward through midnight exactly the way positive ones move
    forward, and ``dt.add(d).subtract(d) == dt`` holds for every d.

Usage:
    from valobs.domain.value_objects import DateTime, Duration

    late = DateTime.of(2024, 12, 31, 23, 30)
    late.add(Duration.of(hours=2))   # 2025-01-01T01:30:00.000
"""

import re
from dataclasses import dataclass
from typing import Self

from valobs.domain.errors import (
    InvalidDateError,
    InvalidTimeError,
    ParseError,
)
from valobs.domain.value_objects.date import DATE_REGEX, Date
from valobs.domain.value_objects.duration import MILLISECONDS_PER_DAY, Duration
from valobs.domain.value_objects.time import TIME_REGEX, Time


DATE_TIME_REGEX = f"{DATE_REGEX}T{TIME_REGEX}"
_PATTERN = re.compile(DATE_TIME_REGEX)
_EXPECTED = "YYYY-MM-DDTHH:MM:SS.mmm"


@dataclass(frozen=True, order=True)
class DateTime:
    """Immutable local date and time.

    Ordering is chronological: Date first, then Time.

    Attributes:
        date: Calendar date component.
        time: Time-of-day component.

    Raises:
        InvalidDateError: If date is not a Date.
        InvalidTimeError: If time is not a Time.
    """

    date: Date
    time: Time

    def __post_init__(self) -> None:
        if not isinstance(self.date, Date):
            raise InvalidDateError(
                f"date must be a Date, not {type(self.date).__name__}"
            )
        if not isinstance(self.time, Time):
            raise InvalidTimeError(
                f"time must be a Time, not {type(self.time).__name__}"
            )

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> Self:
        """Create a DateTime from individual fields.

        Raises:
            InvalidDateError: If the date fields are invalid.
            InvalidTimeError: If the time fields are invalid.

        Example:
            >>> str(DateTime.of(2024, 2, 29, 12))
            '2024-02-29T12:00:00.000'
        """
        return cls(Date(year, month, day), Time(hour, minute, second, millisecond))

    # -------------------------------------------------------------------------
    # Arithmetic Operations
    # -------------------------------------------------------------------------

    def add(self, duration: Duration) -> "DateTime":
        """Return the DateTime ``duration`` later.

        Durations may span many days and may be negative; the Date absorbs
        any rollover, including month, year and leap-day boundaries.

        Args:
            duration: Signed Duration.

        Returns:
            New DateTime.

        Raises:
            TypeError: If duration is not a Duration.
            InvalidDateError: If the result leaves the supported year range.

        Example:
            >>> DateTime.of(2024, 3, 1, 0, 30).add(Duration.of(hours=-1))
            DateTime(date=Date(year=2024, month=2, day=29), time=Time(hour=23, minute=30, second=0, millisecond=0))
        """
        if not isinstance(duration, Duration):
            raise TypeError(f"Expected Duration, got {type(duration).__name__}")
        return self._shifted(duration.total_milliseconds)

    def subtract(self, duration: Duration) -> "DateTime":
        """Return the DateTime ``duration`` earlier.

        Raises:
            TypeError: If duration is not a Duration.
            InvalidDateError: If the result leaves the supported year range.
        """
        if not isinstance(duration, Duration):
            raise TypeError(f"Expected Duration, got {type(duration).__name__}")
        return self._shifted(-duration.total_milliseconds)

    def difference(self, other: "DateTime") -> Duration:
        """Return the Duration from other to self.

        Positive when self is after other, negative when before.

        Raises:
            TypeError: If other is not a DateTime.

        Example:
            >>> DateTime.of(2024, 1, 2).difference(DateTime.of(2024, 1, 1))
            Duration(total_milliseconds=86400000)
        """
        if not isinstance(other, DateTime):
            raise TypeError(f"Expected DateTime, got {type(other).__name__}")
        return Duration(
            self._absolute_milliseconds() - other._absolute_milliseconds()
        )

    def __add__(self, other: object) -> "DateTime":
        if isinstance(other, Duration):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other: object) -> "DateTime":
        return self.__add__(other)

    def __sub__(self, other: object) -> "DateTime | Duration":
        if isinstance(other, Duration):
            return self.subtract(other)
        if isinstance(other, DateTime):
            return self.difference(other)
        return NotImplemented

    def _absolute_milliseconds(self) -> int:
        """Position on a single millisecond timeline keyed by date ordinal."""
        return (
            self.date.to_ordinal() * MILLISECONDS_PER_DAY
            + self.time.millisecond_of_day()
        )

    def _shifted(self, delta: int) -> "DateTime":
        day_shift, millisecond_of_day = divmod(
            self.time.millisecond_of_day() + delta, MILLISECONDS_PER_DAY
        )
        return DateTime(
            self.date.add_days(day_shift),
            Time.from_millisecond_of_day(millisecond_of_day),
        )

    # -------------------------------------------------------------------------
    # String Representations
    # -------------------------------------------------------------------------

    def to_canonical_string(self) -> str:
        """Return YYYY-MM-DDTHH:MM:SS.mmm."""
        return f"{self.date.to_canonical_string()}T{self.time.to_canonical_string()}"

    def __str__(self) -> str:
        return self.to_canonical_string()

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse a YYYY-MM-DDTHH:MM:SS.mmm string.

        Raises:
            ParseError: If text is malformed or names an invalid date or time.
        """
        match = _PATTERN.fullmatch(text) if isinstance(text, str) else None
        if match is None:
            raise ParseError(text, _EXPECTED)
        try:
            return cls.of(*(int(group) for group in match.groups()))
        except (InvalidDateError, InvalidTimeError) as e:
            raise ParseError(text, _EXPECTED) from e
