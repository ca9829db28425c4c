"""Immutable time-of-day value object with millisecond precision.

Time covers 00:00:00.000 through 23:59:59.999. There is no leap second and
no 24:00:00. Adding a Duration to a Time never wraps past midnight: a result
outside the day raises InvalidTimeError, and day rollover is left to
DateTime, which owns a Date to absorb it.

Canonical form always renders milliseconds: HH:MM:SS.mmm.
"""

import re
from dataclasses import dataclass
from typing import Self

from valobs.domain.errors import InvalidTimeError, ParseError
from valobs.domain.value_objects.duration import (
    MILLISECONDS_PER_DAY,
    MILLISECONDS_PER_HOUR,
    MILLISECONDS_PER_MINUTE,
    MILLISECONDS_PER_SECOND,
    Duration,
)


TIME_REGEX = r"([0-9]{2}):([0-9]{2}):([0-9]{2})\.([0-9]{3})"
_PATTERN = re.compile(TIME_REGEX)
_EXPECTED = "HH:MM:SS.mmm"

_BOUNDS = {
    "hour": 23,
    "minute": 59,
    "second": 59,
    "millisecond": 999,
}


@dataclass(frozen=True, order=True)
class Time:
    """Immutable time of day.

    Attributes:
        hour: 0..23.
        minute: 0..59.
        second: 0..59 (default 0).
        millisecond: 0..999 (default 0).

    Raises:
        InvalidTimeError: If any field is out of bounds or not an int.

    Example:
        >>> Time(23, 30)
        Time(hour=23, minute=30, second=0, millisecond=0)
        >>> str(Time(9, 5, 7, 42))
        '09:05:07.042'
    """

    hour: int
    minute: int
    second: int = 0
    millisecond: int = 0

    def __post_init__(self) -> None:
        for name, upper in _BOUNDS.items():
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidTimeError(f"{name} must be an integer: {value!r}")
            if not 0 <= value <= upper:
                raise InvalidTimeError(
                    f"{name.capitalize()} {value} is out of range (0..{upper})"
                )

    @classmethod
    def midnight(cls) -> Self:
        """Return 00:00:00.000."""
        return cls(0, 0)

    def millisecond_of_day(self) -> int:
        """Return milliseconds elapsed since midnight."""
        return (
            self.hour * MILLISECONDS_PER_HOUR
            + self.minute * MILLISECONDS_PER_MINUTE
            + self.second * MILLISECONDS_PER_SECOND
            + self.millisecond
        )

    @classmethod
    def from_millisecond_of_day(cls, milliseconds: int) -> Self:
        """Build a Time from milliseconds elapsed since midnight.

        Raises:
            InvalidTimeError: If milliseconds is outside 0..86_399_999.
        """
        if not 0 <= milliseconds < MILLISECONDS_PER_DAY:
            raise InvalidTimeError(
                f"Millisecond of day {milliseconds} is out of range "
                f"(0..{MILLISECONDS_PER_DAY - 1})"
            )
        hour, rest = divmod(milliseconds, MILLISECONDS_PER_HOUR)
        minute, rest = divmod(rest, MILLISECONDS_PER_MINUTE)
        second, millisecond = divmod(rest, MILLISECONDS_PER_SECOND)
        return cls(hour, minute, second, millisecond)

    # -------------------------------------------------------------------------
    # Arithmetic Operations (within one day)
    # -------------------------------------------------------------------------

    def add(self, duration: Duration) -> "Time":
        """Return the time ``duration`` later on the same day.

        Args:
            duration: Signed Duration; negative moves earlier.

        Returns:
            New Time.

        Raises:
            TypeError: If duration is not a Duration.
            InvalidTimeError: If the result would cross midnight. Use
                DateTime.add when day rollover is intended.

        Example:
            >>> Time(10, 0).add(Duration.of(minutes=90))
            Time(hour=11, minute=30, second=0, millisecond=0)
        """
        if not isinstance(duration, Duration):
            raise TypeError(f"Expected Duration, got {type(duration).__name__}")
        return self._shifted(duration.total_milliseconds)

    def subtract(self, duration: Duration) -> "Time":
        """Return the time ``duration`` earlier on the same day.

        Raises:
            TypeError: If duration is not a Duration.
            InvalidTimeError: If the result would cross midnight.
        """
        if not isinstance(duration, Duration):
            raise TypeError(f"Expected Duration, got {type(duration).__name__}")
        return self._shifted(-duration.total_milliseconds)

    def __add__(self, other: object) -> "Time":
        if isinstance(other, Duration):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other: object) -> "Time":
        return self.__add__(other)

    def __sub__(self, other: object) -> "Time":
        if isinstance(other, Duration):
            return self.subtract(other)
        return NotImplemented

    def _shifted(self, delta: int) -> "Time":
        total = self.millisecond_of_day() + delta
        if not 0 <= total < MILLISECONDS_PER_DAY:
            raise InvalidTimeError(
                f"Shifting {self} by {delta} ms crosses a day boundary; "
                "use DateTime for day rollover"
            )
        return Time.from_millisecond_of_day(total)

    # -------------------------------------------------------------------------
    # String Representations
    # -------------------------------------------------------------------------

    def to_canonical_string(self) -> str:
        """Return HH:MM:SS.mmm (milliseconds always rendered)."""
        return (
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
            f".{self.millisecond:03d}"
        )

    def __str__(self) -> str:
        return self.to_canonical_string()

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse an HH:MM:SS.mmm string.

        Raises:
            ParseError: If text is malformed or any field is out of range.
        """
        match = _PATTERN.fullmatch(text) if isinstance(text, str) else None
        if match is None:
            raise ParseError(text, _EXPECTED)
        try:
            return cls(*(int(group) for group in match.groups()))
        except InvalidTimeError as e:
            raise ParseError(text, _EXPECTED) from e
