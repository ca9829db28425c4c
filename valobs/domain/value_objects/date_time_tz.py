"""Immutable DateTime with a fixed UTC offset.

A DateTimeTZ is a local DateTime plus a constant offset from UTC in minutes.
There is no timezone database and no daylight-saving logic; the offset is
just a number between -14:00 and +14:00.

Equality vs. ordering:
    Equality is structural: 12:00+02:00 and 10:00+00:00 name the same
    instant but are different values. Ordering is by instant, with the
    offset as tie-breaker so that the ordering stays consistent with
    equality. Use ``same_instant()`` to compare instants only.
"""

import re
from dataclasses import dataclass
from typing import Self

from valobs.domain.errors import (
    InvalidDateError,
    InvalidOffsetError,
    InvalidTimeError,
    ParseError,
)
from valobs.domain.value_objects.date_time import DATE_TIME_REGEX, DateTime
from valobs.domain.value_objects.duration import MILLISECONDS_PER_MINUTE, Duration


MAX_OFFSET_MINUTES = 14 * 60

_PATTERN = re.compile(f"{DATE_TIME_REGEX}([+-])([0-9]{{2}}):([0-9]{{2}})")
_EXPECTED = "YYYY-MM-DDTHH:MM:SS.mmm+HH:MM"


@dataclass(frozen=True)
class DateTimeTZ:
    """Immutable local DateTime at a fixed UTC offset.

    Attributes:
        date_time: Local wall-clock DateTime.
        offset_minutes: Offset from UTC in minutes (-840..840).

    Raises:
        InvalidDateError: If date_time is not a DateTime.
        InvalidOffsetError: If the offset is out of range or not an int.

    Example:
        >>> str(DateTimeTZ(DateTime.of(2024, 6, 1, 9), offset_minutes=-300))
        '2024-06-01T09:00:00.000-05:00'
    """

    date_time: DateTime
    offset_minutes: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.date_time, DateTime):
            raise InvalidDateError(
                f"date_time must be a DateTime, not {type(self.date_time).__name__}"
            )
        offset = self.offset_minutes
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise InvalidOffsetError(f"Offset must be integer minutes: {offset!r}")
        if not -MAX_OFFSET_MINUTES <= offset <= MAX_OFFSET_MINUTES:
            raise InvalidOffsetError(
                f"Offset {offset} minutes is out of range "
                f"(-{MAX_OFFSET_MINUTES}..{MAX_OFFSET_MINUTES})"
            )

    @classmethod
    def from_utc(cls, utc: DateTime, offset_minutes: int = 0) -> Self:
        """Express a UTC DateTime at the given offset."""
        local = utc.add(Duration(offset_minutes * MILLISECONDS_PER_MINUTE))
        return cls(local, offset_minutes)

    def _offset(self) -> Duration:
        return Duration(self.offset_minutes * MILLISECONDS_PER_MINUTE)

    def _instant(self) -> int:
        """Milliseconds on the UTC timeline; defined even where to_utc() is not."""
        return (
            self.date_time._absolute_milliseconds()
            - self.offset_minutes * MILLISECONDS_PER_MINUTE
        )

    def to_utc(self) -> DateTime:
        """Return the same instant as a UTC DateTime.

        Raises:
            InvalidDateError: If the UTC wall clock falls outside years
                1..9999, e.g. 0001-01-01T00:00+01:00.
        """
        return self.date_time.subtract(self._offset())

    def with_offset(self, offset_minutes: int) -> "DateTimeTZ":
        """Return the same instant expressed at another offset.

        Raises:
            InvalidDateError: If the instant cannot be written at either
                UTC or the new offset within years 1..9999.
        """
        return DateTimeTZ.from_utc(self.to_utc(), offset_minutes)

    def same_instant(self, other: "DateTimeTZ") -> bool:
        """Return True if both values name the same instant."""
        return self._instant() == other._instant()

    # -------------------------------------------------------------------------
    # Arithmetic Operations
    # -------------------------------------------------------------------------

    def add(self, duration: Duration) -> "DateTimeTZ":
        """Return the value ``duration`` later, keeping the offset."""
        return DateTimeTZ(self.date_time.add(duration), self.offset_minutes)

    def subtract(self, duration: Duration) -> "DateTimeTZ":
        """Return the value ``duration`` earlier, keeping the offset."""
        return DateTimeTZ(self.date_time.subtract(duration), self.offset_minutes)

    def difference(self, other: "DateTimeTZ") -> Duration:
        """Return the elapsed Duration between the two instants.

        Positive when self is after other.
        """
        if not isinstance(other, DateTimeTZ):
            raise TypeError(f"Expected DateTimeTZ, got {type(other).__name__}")
        return Duration(self._instant() - other._instant())

    def __add__(self, other: object) -> "DateTimeTZ":
        if isinstance(other, Duration):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other: object) -> "DateTimeTZ":
        return self.__add__(other)

    def __sub__(self, other: object) -> "DateTimeTZ | Duration":
        if isinstance(other, Duration):
            return self.subtract(other)
        if isinstance(other, DateTimeTZ):
            return self.difference(other)
        return NotImplemented

    # -------------------------------------------------------------------------
    # Comparison Operations (by instant, then offset)
    # -------------------------------------------------------------------------

    def _sort_key(self) -> tuple[int, int]:
        return (self._instant(), self.offset_minutes)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTimeTZ):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTimeTZ):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTimeTZ):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTimeTZ):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    # -------------------------------------------------------------------------
    # String Representations
    # -------------------------------------------------------------------------

    def to_canonical_string(self) -> str:
        """Return YYYY-MM-DDTHH:MM:SS.mmm+HH:MM ('+00:00' for UTC)."""
        sign = "-" if self.offset_minutes < 0 else "+"
        hours, minutes = divmod(abs(self.offset_minutes), 60)
        return f"{self.date_time}{sign}{hours:02d}:{minutes:02d}"

    def __str__(self) -> str:
        return self.to_canonical_string()

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse a YYYY-MM-DDTHH:MM:SS.mmm+HH:MM string.

        '-00:00' is rejected; UTC is written '+00:00'.

        Raises:
            ParseError: If text is malformed or any field is out of range.
        """
        match = _PATTERN.fullmatch(text) if isinstance(text, str) else None
        if match is None:
            raise ParseError(text, _EXPECTED)

        *fields, sign, offset_hours, offset_minutes = match.groups()
        hours, minutes = int(offset_hours), int(offset_minutes)
        if minutes > 59 or (sign == "-" and hours == 0 and minutes == 0):
            raise ParseError(text, _EXPECTED)
        offset = hours * 60 + minutes
        try:
            return cls(
                DateTime.of(*(int(field) for field in fields)),
                -offset if sign == "-" else offset,
            )
        except (InvalidDateError, InvalidTimeError) as e:
            raise ParseError(text, _EXPECTED) from e
