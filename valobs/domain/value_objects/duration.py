"""Immutable Duration value object with millisecond precision.

A Duration is a signed span of time held as a single integer count of
milliseconds. Only fixed-length units are representable (days, hours,
minutes, seconds, milliseconds); calendar units such as months are
ambiguous and deliberately absent.

Range:
    The magnitude is bounded to a signed 64-bit integer. Any constructor or
    arithmetic result outside that range raises InvalidDurationError rather
    than silently growing or wrapping.

Conversions:
    total_days(), total_hours(), total_minutes() and total_seconds() truncate
    toward zero, so Duration(-1500).total_seconds() == -1.

Usage:
    from valobs.domain.value_objects import Duration

    lunch = Duration.of(hours=1, minutes=30)
    lunch.total_minutes()      # 90
    lunch.to_unit_string()     # '1h 30m'
    str(lunch)                 # '5400000'
"""

import re
from dataclasses import dataclass
from typing import NamedTuple, Self

from valobs.domain.errors import InvalidDurationError, ParseError


MILLISECONDS_PER_SECOND = 1_000
MILLISECONDS_PER_MINUTE = 60 * MILLISECONDS_PER_SECOND
MILLISECONDS_PER_HOUR = 60 * MILLISECONDS_PER_MINUTE
MILLISECONDS_PER_DAY = 24 * MILLISECONDS_PER_HOUR

MIN_MILLISECONDS = -(2**63)
MAX_MILLISECONDS = 2**63 - 1

_CANONICAL_PATTERN = re.compile(r"-?[0-9]+")
_UNIT_TOKEN_PATTERN = re.compile(r"([0-9]+)(ms|d|h|m|s)")
_UNIT_ORDER = ("d", "h", "m", "s", "ms")
_UNIT_SIZES = {
    "d": MILLISECONDS_PER_DAY,
    "h": MILLISECONDS_PER_HOUR,
    "m": MILLISECONDS_PER_MINUTE,
    "s": MILLISECONDS_PER_SECOND,
    "ms": 1,
}
_EXPECTED = "signed integer milliseconds or unit form like '-1d 2h 3m 4s 5ms'"

# Any digit run longer than MAX_MILLISECONDS overflows; convert it to a value
# just past the range so the range check reports it.
_MAX_DIGITS = len(str(MAX_MILLISECONDS))
_OVERFLOW = 10**_MAX_DIGITS


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _digits_to_int(digits: str) -> int:
    """Convert an ASCII digit run, saturating at _OVERFLOW."""
    significant = digits.lstrip("0") or "0"
    if len(significant) > _MAX_DIGITS:
        return _OVERFLOW
    return int(significant)


def _truncate(total: int, unit: int) -> int:
    """Divide total by unit, truncating toward zero."""
    quotient = abs(total) // unit
    return -quotient if total < 0 else quotient


class DurationComponents(NamedTuple):
    """Unsigned breakdown of a Duration plus its sign (-1, 0 or 1)."""

    sign: int
    days: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int


@dataclass(frozen=True, order=True)
class Duration:
    """Immutable signed span of time.

    Attributes:
        total_milliseconds: Signed length in milliseconds. Positive moves
            forward in time, negative moves backward.

    Raises:
        InvalidDurationError: If the magnitude is not an integer or lies
            outside the signed 64-bit range.

    Example:
        >>> Duration.of(days=1, milliseconds=-1)
        Duration(total_milliseconds=86399999)
        >>> Duration(5) + Duration.zero()
        Duration(total_milliseconds=5)
    """

    total_milliseconds: int = 0

    def __post_init__(self) -> None:
        """Validate the millisecond magnitude.

        Raises:
            InvalidDurationError: If not an int or outside 64-bit range.
        """
        if not _is_int(self.total_milliseconds):
            raise InvalidDurationError(
                f"Duration must be an integer number of milliseconds: "
                f"{self.total_milliseconds!r}"
            )
        if not MIN_MILLISECONDS <= self.total_milliseconds <= MAX_MILLISECONDS:
            raise InvalidDurationError(
                "Duration overflows representable range "
                f"({MIN_MILLISECONDS}..{MAX_MILLISECONDS} ms)"
            )

    # -------------------------------------------------------------------------
    # Factory Methods
    # -------------------------------------------------------------------------

    @classmethod
    def of(
        cls,
        *,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
    ) -> Self:
        """Create a Duration from any combination of unit components.

        Components may carry mixed signs; they are summed into a single
        millisecond magnitude.

        Args:
            days: Whole days (24 hours each).
            hours: Whole hours.
            minutes: Whole minutes.
            seconds: Whole seconds.
            milliseconds: Whole milliseconds.

        Returns:
            Normalized Duration.

        Raises:
            InvalidDurationError: If a component is not an integer or the
                total overflows.

        Example:
            >>> Duration.of(hours=1, minutes=-30).total_minutes()
            30
        """
        components = {
            "days": days,
            "hours": hours,
            "minutes": minutes,
            "seconds": seconds,
            "milliseconds": milliseconds,
        }
        for name, value in components.items():
            if not _is_int(value):
                raise InvalidDurationError(f"{name} must be an integer: {value!r}")

        return cls(
            days * MILLISECONDS_PER_DAY
            + hours * MILLISECONDS_PER_HOUR
            + minutes * MILLISECONDS_PER_MINUTE
            + seconds * MILLISECONDS_PER_SECOND
            + milliseconds
        )

    @classmethod
    def zero(cls) -> Self:
        """Return the zero-length Duration (additive identity)."""
        return cls(0)

    # -------------------------------------------------------------------------
    # Arithmetic Operations
    # -------------------------------------------------------------------------

    def add(self, other: "Duration") -> "Duration":
        """Return the sum of two durations.

        Raises:
            TypeError: If other is not a Duration.
            InvalidDurationError: If the sum overflows.
        """
        if not isinstance(other, Duration):
            raise TypeError(f"Cannot add {type(other).__name__} to Duration")
        return Duration(self.total_milliseconds + other.total_milliseconds)

    def subtract(self, other: "Duration") -> "Duration":
        """Return self minus other.

        Raises:
            TypeError: If other is not a Duration.
            InvalidDurationError: If the difference overflows.
        """
        if not isinstance(other, Duration):
            raise TypeError(f"Cannot subtract {type(other).__name__} from Duration")
        return Duration(self.total_milliseconds - other.total_milliseconds)

    def negate(self) -> "Duration":
        """Return the Duration pointing the opposite direction.

        Raises:
            InvalidDurationError: For the minimum value, whose negation
                does not fit in 64 bits.
        """
        return Duration(-self.total_milliseconds)

    def multiply(self, factor: int) -> "Duration":
        """Scale by an integer factor.

        Only integer factors are accepted so the result stays exact.

        Raises:
            TypeError: If factor is not an int.
            InvalidDurationError: If the product overflows.
        """
        if not _is_int(factor):
            raise TypeError(
                f"Duration can only be multiplied by int, not {type(factor).__name__}"
            )
        return Duration(self.total_milliseconds * factor)

    def __add__(self, other: object) -> "Duration":
        if isinstance(other, Duration):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: object) -> "Duration":
        if isinstance(other, Duration):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, factor: object) -> "Duration":
        if _is_int(factor):
            return self.multiply(factor)  # type: ignore[arg-type]
        return NotImplemented

    def __rmul__(self, factor: object) -> "Duration":
        return self.__mul__(factor)

    def __neg__(self) -> "Duration":
        return self.negate()

    def __abs__(self) -> "Duration":
        return Duration(abs(self.total_milliseconds))

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.total_milliseconds == 0

    def is_negative(self) -> bool:
        return self.total_milliseconds < 0

    def is_positive(self) -> bool:
        return self.total_milliseconds > 0

    def total_days(self) -> int:
        """Whole days, truncated toward zero."""
        return _truncate(self.total_milliseconds, MILLISECONDS_PER_DAY)

    def total_hours(self) -> int:
        """Whole hours, truncated toward zero."""
        return _truncate(self.total_milliseconds, MILLISECONDS_PER_HOUR)

    def total_minutes(self) -> int:
        """Whole minutes, truncated toward zero."""
        return _truncate(self.total_milliseconds, MILLISECONDS_PER_MINUTE)

    def total_seconds(self) -> int:
        """Whole seconds, truncated toward zero."""
        return _truncate(self.total_milliseconds, MILLISECONDS_PER_SECOND)

    def components(self) -> DurationComponents:
        """Break the magnitude into days, hours, minutes, seconds, milliseconds.

        Returns:
            DurationComponents with non-negative fields and the sign of the
            Duration.

        Example:
            >>> Duration.of(days=-1, hours=-2).components()
            DurationComponents(sign=-1, days=1, hours=2, minutes=0, seconds=0, milliseconds=0)
        """
        total = self.total_milliseconds
        sign = (total > 0) - (total < 0)
        rest = abs(total)
        days, rest = divmod(rest, MILLISECONDS_PER_DAY)
        hours, rest = divmod(rest, MILLISECONDS_PER_HOUR)
        minutes, rest = divmod(rest, MILLISECONDS_PER_MINUTE)
        seconds, milliseconds = divmod(rest, MILLISECONDS_PER_SECOND)
        return DurationComponents(sign, days, hours, minutes, seconds, milliseconds)

    # -------------------------------------------------------------------------
    # String Representations
    # -------------------------------------------------------------------------

    def to_canonical_string(self) -> str:
        """Return total signed milliseconds, e.g. '-90061001'."""
        return str(self.total_milliseconds)

    def to_unit_string(self) -> str:
        """Return the readable unit form, e.g. '-1d 1h 1m 1s 1ms'.

        Zero units are omitted; the zero Duration renders as '0ms'.
        """
        sign, *values = self.components()
        parts = [
            f"{value}{unit}" for value, unit in zip(values, _UNIT_ORDER) if value
        ]
        if not parts:
            return "0ms"
        return ("-" if sign < 0 else "") + " ".join(parts)

    def __str__(self) -> str:
        return self.to_canonical_string()

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse the canonical integer form or the unit form.

        Args:
            text: '-90061001' or '-1d 1h 1m 1s 1ms'. Units must appear in
                descending order, each at most once, separated by one space.

        Returns:
            Parsed Duration.

        Raises:
            ParseError: If text matches neither form or overflows.
        """
        if not isinstance(text, str):
            raise ParseError(text, _EXPECTED)

        if _CANONICAL_PATTERN.fullmatch(text):
            magnitude = _digits_to_int(text.removeprefix("-"))
            total = -magnitude if text.startswith("-") else magnitude
        else:
            parsed = _parse_unit_form(text)
            if parsed is None:
                raise ParseError(text, _EXPECTED)
            total = parsed

        try:
            return cls(total)
        except InvalidDurationError as e:
            raise ParseError(text, _EXPECTED) from e


def _parse_unit_form(text: str) -> int | None:
    """Return total milliseconds for unit-form text, or None if malformed."""
    negative = text.startswith("-")
    body = text[1:] if negative else text
    if not body:
        return None

    total = 0
    last_index = -1
    for token in body.split(" "):
        match = _UNIT_TOKEN_PATTERN.fullmatch(token)
        if match is None:
            return None
        value, unit = match.groups()
        index = _UNIT_ORDER.index(unit)
        if index <= last_index:
            return None
        last_index = index
        total += _digits_to_int(value) * _UNIT_SIZES[unit]

    return -total if negative else total
