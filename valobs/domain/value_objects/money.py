"""Immutable Money value object on integer minor units.

Financial calculations require exact precision - floats introduce rounding
errors that accumulate in financial systems. Money keeps its amount as an
integer count of the currency's minor unit (cents for USD, fils for KWD,
whole yen for JPY) and exposes it as a Decimal for display.

Precision:
    An amount may not carry more decimal places than its currency allows.
    Money("19.999", "USD") raises InvalidAmountError; Money("19.990", "USD")
    is accepted because it is exactly 1999 cents. The minor-unit count is
    limited to MAX_MINOR_UNIT_DIGITS digits; larger amounts and arithmetic
    results raise InvalidAmountError.

Rounding:
    Scalar multiplication and division are computed exactly with
    fractions.Fraction on the minor-unit count, then rounded once to a whole
    minor unit using round-half-to-even (banker's rounding). Binary floating
    point is never used for the arithmetic; float scalars are converted via
    str() first.

Currency Safety:
    Addition, subtraction and ordering between different currencies raise
    CurrencyMismatchError. Equality across currencies is simply False.

Usage:
    from valobs.domain.value_objects import Money

    balance = Money("1000.00", "USD")
    fee = Money("9.99", "USD")
    balance - fee            # Money(amount=Decimal('990.01'), currency='USD')
    Money("0.10", "USD") * 3 # Money(amount=Decimal('0.30'), currency='USD')
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Self

from valobs.domain.errors import (
    CurrencyMismatchError,
    InvalidAmountError,
    InvalidCurrencyError,
    ParseError,
)
from valobs.domain.value_objects.currency import (
    CURRENCY_MINOR_UNITS,
    validate_currency,
)


_PATTERN = re.compile(r"(-?[0-9]+)(?:\.([0-9]+))? ([A-Z]{3})")
_EXPECTED = "'<amount with the currency's fixed decimals> <CODE>', e.g. '19.99 USD'"

Scalar = int | Decimal | Fraction | float

# Same bound as a NUMERIC(38) column.
MAX_MINOR_UNIT_DIGITS = 38
_MINOR_UNIT_LIMIT = 10**MAX_MINOR_UNIT_DIGITS
# Beyond this exponent a non-zero scalar always overflows or rounds to zero.
_MAX_SCALAR_EXPONENT = 2 * MAX_MINOR_UNIT_DIGITS


def _to_decimal(amount: object) -> Decimal:
    """Convert a supported amount type to Decimal.

    Raises:
        InvalidAmountError: If the amount cannot be read as a finite number.
    """
    if isinstance(amount, bool):
        raise InvalidAmountError(f"Amount must be a number, not {amount!r}")
    try:
        if isinstance(amount, Decimal):
            value = amount
        elif isinstance(amount, int):
            value = Decimal(amount)
        elif isinstance(amount, (float, str)):
            # str() first so 0.1 becomes Decimal('0.1'), not its binary expansion
            value = Decimal(str(amount).strip())
        else:
            raise InvalidAmountError(
                f"Amount must be Decimal, int, str or float, "
                f"not {type(amount).__name__}"
            )
    except InvalidOperation as e:
        raise InvalidAmountError(f"Amount must be a valid number: {amount!r}") from e

    if value.is_nan() or value.is_infinite():
        raise InvalidAmountError("Amount cannot be NaN or Infinite")
    return value


def _to_minor_units(amount: Decimal, exponent: int, currency: str) -> int:
    """Scale a Decimal to an exact integer count of minor units.

    Works on the digit tuple so that huge exponents are rejected before any
    big power of ten is built.

    Raises:
        InvalidAmountError: If the amount has more precision than exponent
            or more than MAX_MINOR_UNIT_DIGITS digits in minor units.
    """
    sign, digits, amount_exponent = amount.as_tuple()
    if not any(digits):
        return 0

    shift = amount_exponent + exponent
    if shift < 0:
        if any(digits[shift:]):
            raise InvalidAmountError(
                f"Amount {amount} exceeds {exponent} decimal places for {currency}"
            )
        digits, shift = digits[:shift], 0
    if len(digits) + shift > MAX_MINOR_UNIT_DIGITS:
        raise InvalidAmountError(
            f"Amount exceeds {MAX_MINOR_UNIT_DIGITS} digits in minor units "
            f"for {currency}"
        )

    units = int("".join(map(str, digits))) * 10**shift
    return -units if sign else units


def _from_minor_units(units: int, exponent: int) -> Decimal:
    """Build the exact Decimal for a minor-unit count (no context rounding).

    Raises:
        InvalidAmountError: If units has more than MAX_MINOR_UNIT_DIGITS digits.
    """
    if abs(units) >= _MINOR_UNIT_LIMIT:
        raise InvalidAmountError(
            f"Amount exceeds {MAX_MINOR_UNIT_DIGITS} digits in minor units"
        )
    digits = tuple(int(digit) for digit in str(abs(units)))
    return Decimal((1 if units < 0 else 0, digits, -exponent))


def _to_fraction(scalar: object) -> Fraction:
    """Convert a scalar multiplier or divisor to an exact Fraction.

    Raises:
        TypeError: If scalar is not a supported numeric type.
        InvalidAmountError: If scalar is NaN, infinite or a Decimal or float
            whose exponent lies beyond _MAX_SCALAR_EXPONENT.
    """
    if isinstance(scalar, bool) or not isinstance(scalar, Scalar):
        raise TypeError(f"Unsupported scalar type: {type(scalar).__name__}")
    if isinstance(scalar, (Fraction, int)):
        return Fraction(scalar)
    value = _to_decimal(scalar)
    if value and abs(value.adjusted()) > _MAX_SCALAR_EXPONENT:
        raise InvalidAmountError(f"Scalar exponent {value.adjusted()} is out of range")
    return Fraction(value)


@dataclass(frozen=True, eq=False)
class Money:
    """Immutable monetary value with currency.

    Attributes:
        amount: Decimal amount, quantized to the currency's minor unit.
        currency: ISO 4217 currency code (normalized to uppercase).
        minor_units: Exact integer count of minor units; the canonical
            representation used for equality, hashing and arithmetic.

    Raises:
        InvalidAmountError: If the amount is not finite or has more decimal
            places than the currency supports.
        InvalidCurrencyError: If the currency code is not recognized.

    Example:
        >>> Money("19.99", "usd")
        Money(amount=Decimal('19.99'), currency='USD')
        >>> Money("19.999", "USD")
        Traceback (most recent call last):
        ...
        InvalidAmountError: Amount 19.999 exceeds 2 decimal places for USD
    """

    amount: Decimal
    currency: str
    minor_units: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate currency and amount, then freeze the minor-unit count.

        Raises:
            InvalidCurrencyError: If currency is invalid.
            InvalidAmountError: If amount is invalid or too precise.
        """
        currency = validate_currency(self.currency)
        exponent = CURRENCY_MINOR_UNITS[currency]
        units = _to_minor_units(_to_decimal(self.amount), exponent, currency)

        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "currency", currency)
        object.__setattr__(self, "minor_units", units)
        object.__setattr__(self, "amount", _from_minor_units(units, exponent))

    # -------------------------------------------------------------------------
    # Factory Methods
    # -------------------------------------------------------------------------

    @classmethod
    def from_minor_units(cls, units: int, currency: str) -> Self:
        """Create Money from a count of minor units.

        Unlike a fixed divide-by-100, this honours the currency's exponent.

        Example:
            >>> Money.from_minor_units(12345, "USD")
            Money(amount=Decimal('123.45'), currency='USD')
            >>> Money.from_minor_units(12345, "JPY")
            Money(amount=Decimal('12345'), currency='JPY')
        """
        if isinstance(units, bool) or not isinstance(units, int):
            raise InvalidAmountError(f"Minor units must be an integer: {units!r}")
        code = validate_currency(currency)
        return cls(_from_minor_units(units, CURRENCY_MINOR_UNITS[code]), code)

    @classmethod
    def zero(cls, currency: str | None = None) -> Self:
        """Create Money with zero amount.

        Args:
            currency: Currency code. Defaults to the configured
                ``default_currency`` setting.
        """
        if currency is None:
            from valobs.core.config import get_settings

            currency = get_settings().default_currency
        return cls.from_minor_units(0, currency)

    # -------------------------------------------------------------------------
    # Arithmetic Operations
    # -------------------------------------------------------------------------

    @property
    def exponent(self) -> int:
        """Number of decimal places of this currency's minor unit."""
        return CURRENCY_MINOR_UNITS[self.currency]

    def add(self, other: "Money") -> "Money":
        """Add two Money values.

        Raises:
            TypeError: If other is not Money.
            CurrencyMismatchError: If currencies differ.
        """
        self._check_same_currency(other)
        return self._with_units(self.minor_units + other.minor_units)

    def subtract(self, other: "Money") -> "Money":
        """Subtract other from this Money.

        Raises:
            TypeError: If other is not Money.
            CurrencyMismatchError: If currencies differ.
        """
        self._check_same_currency(other)
        return self._with_units(self.minor_units - other.minor_units)

    def multiply(self, scalar: Scalar) -> "Money":
        """Multiply by a scalar, rounding half-to-even to the minor unit.

        Args:
            scalar: int, Decimal, Fraction or float (floats go through str()).

        Returns:
            New Money in the same currency.

        Example:
            >>> Money("0.10", "USD").multiply(3)
            Money(amount=Decimal('0.30'), currency='USD')
            >>> Money("0.05", "USD").multiply(Decimal("0.5"))  # 2.5 cents
            Money(amount=Decimal('0.02'), currency='USD')
        """
        return self._with_units(round(self.minor_units * _to_fraction(scalar)))

    def divide(self, scalar: Scalar) -> "Money":
        """Divide by a scalar, rounding half-to-even to the minor unit.

        Raises:
            ZeroDivisionError: If scalar is zero.
        """
        return self._with_units(round(self.minor_units / _to_fraction(scalar)))

    def allocate(self, ratios: Sequence[int]) -> list["Money"]:
        """Split into parts proportional to ratios without losing minor units.

        Each part first receives the floor of its proportional share; the
        leftover minor units are then handed out one at a time to the parts
        with a non-zero ratio, in order. The parts always sum to self.

        Args:
            ratios: Non-negative integer weights with a positive sum.

        Returns:
            One Money per ratio, in the same order.

        Raises:
            ValueError: If ratios is empty, contains negatives or non-ints,
                or sums to zero.

        Example:
            >>> [str(m) for m in Money("0.05", "USD").allocate([3, 7])]
            ['0.02 USD', '0.03 USD']
            >>> [str(m) for m in Money("100.00", "USD").allocate([1, 1, 1])]
            ['33.34 USD', '33.33 USD', '33.33 USD']
        """
        if not ratios:
            raise ValueError("Cannot allocate to an empty list of ratios")
        for ratio in ratios:
            if isinstance(ratio, bool) or not isinstance(ratio, int) or ratio < 0:
                raise ValueError(f"Ratios must be non-negative integers: {ratio!r}")
        total = sum(ratios)
        if total == 0:
            raise ValueError("Ratios must not all be zero")

        magnitude = abs(self.minor_units)
        shares = [magnitude * ratio // total for ratio in ratios]
        leftover = magnitude - sum(shares)
        for index, ratio in enumerate(ratios):
            if leftover == 0:
                break
            if ratio:
                shares[index] += 1
                leftover -= 1

        sign = -1 if self.minor_units < 0 else 1
        return [self._with_units(sign * share) for share in shares]

    def negate(self) -> "Money":
        """Return the Money with the opposite sign."""
        return self._with_units(-self.minor_units)

    def __add__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar: object) -> "Money":
        if isinstance(scalar, bool) or not isinstance(scalar, Scalar):
            return NotImplemented
        return self.multiply(scalar)

    def __rmul__(self, scalar: object) -> "Money":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: object) -> "Money":
        if isinstance(scalar, bool) or not isinstance(scalar, Scalar):
            return NotImplemented
        return self.divide(scalar)

    def __neg__(self) -> "Money":
        return self.negate()

    def __abs__(self) -> "Money":
        return self._with_units(abs(self.minor_units))

    # -------------------------------------------------------------------------
    # Equality and Comparison (Same Currency Only)
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return (self.minor_units, self.currency) == (other.minor_units, other.currency)

    def __hash__(self) -> int:
        return hash((self.minor_units, self.currency))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.minor_units < other.minor_units

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.minor_units <= other.minor_units

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.minor_units > other.minor_units

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.minor_units >= other.minor_units

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def is_positive(self) -> bool:
        return self.minor_units > 0

    def is_negative(self) -> bool:
        return self.minor_units < 0

    def is_zero(self) -> bool:
        return self.minor_units == 0

    # -------------------------------------------------------------------------
    # String Representations
    # -------------------------------------------------------------------------

    def to_canonical_string(self) -> str:
        """Return '<amount> <CODE>' with exactly the currency's decimals.

        Example:
            >>> Money(5, "USD").to_canonical_string()
            '5.00 USD'
        """
        return f"{self.amount:f} {self.currency}"

    def __str__(self) -> str:
        return self.to_canonical_string()

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse '<amount> <CODE>' where amount has the currency's decimals.

        '19.99 USD' and '100 JPY' parse; '19.9 USD' and '100.00 JPY' do not.

        Raises:
            ParseError: If text is malformed, the currency is unknown, or
                the number of decimals does not match the currency.
        """
        match = _PATTERN.fullmatch(text) if isinstance(text, str) else None
        if match is None:
            raise ParseError(text, _EXPECTED)

        whole, fraction, code = match.groups()
        try:
            exponent = CURRENCY_MINOR_UNITS[validate_currency(code)]
        except InvalidCurrencyError as e:
            raise ParseError(text, _EXPECTED) from e
        if len(fraction or "") != exponent:
            raise ParseError(text, _EXPECTED)

        amount = f"{whole}.{fraction}" if fraction else whole
        try:
            return cls(Decimal(amount), code)
        except InvalidAmountError as e:
            raise ParseError(text, _EXPECTED) from e

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _with_units(self, units: int) -> "Money":
        return Money.from_minor_units(units, self.currency)

    def _check_same_currency(self, other: "Money") -> None:
        """Verify other is Money in the same currency.

        Raises:
            TypeError: If other is not Money.
            CurrencyMismatchError: If currencies differ.
        """
        if not isinstance(other, Money):
            raise TypeError(f"Expected Money, got {type(other).__name__}")
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)
