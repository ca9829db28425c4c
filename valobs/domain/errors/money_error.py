"""Money value object errors."""

from valobs.domain.errors.value_object_error import ValueObjectError


class InvalidAmountError(ValueObjectError):
    """Raised when an amount is not finite or exceeds currency precision."""


class InvalidCurrencyError(ValueObjectError):
    """Raised when a currency code is not a recognized ISO 4217 code."""


class CurrencyMismatchError(ValueObjectError):
    """Raised when attempting operations on different currencies."""

    def __init__(self, currency1: str, currency2: str) -> None:
        """Initialize currency mismatch error.

        Args:
            currency1: First currency code.
            currency2: Second currency code.
        """
        super().__init__(
            f"Cannot perform operation between {currency1} and {currency2}"
        )
        self.currency1 = currency1
        self.currency2 = currency2
