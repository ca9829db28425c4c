"""ISO 4217 currency codes and their minor-unit exponents.

The exponent is the number of decimal places in the currency's minor unit
(2 for USD cents, 0 for JPY, 3 for KWD fils). Money uses it to bound
precision and to scale amounts to integer minor units.
"""

from collections.abc import Mapping
from types import MappingProxyType

from valobs.domain.errors import InvalidCurrencyError


# Expand as needed for international accounts
CURRENCY_MINOR_UNITS: Mapping[str, int] = MappingProxyType(
    {
        # Major currencies
        "USD": 2,  # US Dollar
        "EUR": 2,  # Euro
        "GBP": 2,  # British Pound
        "JPY": 0,  # Japanese Yen
        "CHF": 2,  # Swiss Franc
        "CAD": 2,  # Canadian Dollar
        "AUD": 2,  # Australian Dollar
        "NZD": 2,  # New Zealand Dollar
        # Asian currencies
        "CNY": 2,  # Chinese Yuan
        "HKD": 2,  # Hong Kong Dollar
        "SGD": 2,  # Singapore Dollar
        "KRW": 0,  # South Korean Won
        "INR": 2,  # Indian Rupee
        "TWD": 2,  # Taiwan Dollar
        "VND": 0,  # Vietnamese Dong
        # European currencies
        "SEK": 2,  # Swedish Krona
        "NOK": 2,  # Norwegian Krone
        "DKK": 2,  # Danish Krone
        "PLN": 2,  # Polish Zloty
        "CZK": 2,  # Czech Koruna
        "ISK": 0,  # Icelandic Krona
        # Americas
        "MXN": 2,  # Mexican Peso
        "BRL": 2,  # Brazilian Real
        "CLP": 0,  # Chilean Peso
        # Middle East / Africa (three-decimal currencies)
        "BHD": 3,  # Bahraini Dinar
        "JOD": 3,  # Jordanian Dinar
        "KWD": 3,  # Kuwaiti Dinar
        "OMR": 3,  # Omani Rial
        "TND": 3,  # Tunisian Dinar
        # Other
        "ZAR": 2,  # South African Rand
        "RUB": 2,  # Russian Ruble
        "TRY": 2,  # Turkish Lira
    }
)

VALID_CURRENCIES: frozenset[str] = frozenset(CURRENCY_MINOR_UNITS)


def validate_currency(code: str) -> str:
    """Validate and normalize currency code.

    Args:
        code: Currency code (case-insensitive, surrounding whitespace ignored).

    Returns:
        Uppercase ISO 4217 currency code.

    Raises:
        InvalidCurrencyError: If code is not a recognized ISO 4217 currency.

    Example:
        >>> validate_currency("usd")
        'USD'
    """
    if not code or not isinstance(code, str):
        raise InvalidCurrencyError("Currency code cannot be empty")

    normalized = code.upper().strip()

    if len(normalized) != 3:
        raise InvalidCurrencyError(f"Currency code must be 3 characters: {code}")

    if normalized not in CURRENCY_MINOR_UNITS:
        raise InvalidCurrencyError(f"Invalid currency code: {code}")

    return normalized


def minor_unit_exponent(code: str) -> int:
    """Return the number of minor-unit decimal places for a currency.

    Raises:
        InvalidCurrencyError: If code is not a recognized currency.
    """
    return CURRENCY_MINOR_UNITS[validate_currency(code)]
