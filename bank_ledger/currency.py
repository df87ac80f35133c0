"""
Currency Formatting Module

Display currency, Decimal precision and parsing helpers for the ledger.
Amounts are always Decimal, NEVER float. A ledger carries exactly one
display currency; there is no conversion between currencies.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext, localcontext
from enum import Enum
from typing import Union
import re

# Set global decimal context for financial precision
getcontext().prec = 28

Numeric = Union[Decimal, int, str, float]


class Currency(Enum):
    """ISO 4217 Currency Codes with symbol and precision info"""
    USD = ("USD", "$", 2)  # US Dollar, 2 decimal places
    EUR = ("EUR", "€", 2)  # Euro, 2 decimal places
    GBP = ("GBP", "£", 2)  # British Pound, 2 decimal places
    JPY = ("JPY", "¥", 0)  # Japanese Yen, 0 decimal places
    CAD = ("CAD", "CA$", 2)  # Canadian Dollar, 2 decimal places
    CHF = ("CHF", "CHF ", 2)  # Swiss Franc, 2 decimal places

    def __init__(self, code: str, symbol: str, precision: int):
        self.code = code
        self.symbol = symbol
        self.precision = precision

    @classmethod
    def from_code(cls, code: str) -> 'Currency':
        """Look up a currency by its ISO code (case-insensitive)"""
        try:
            return cls[code.strip().upper()]
        except KeyError:
            raise ValueError(f"Unsupported currency code '{code}'") from None


def to_decimal(value: Numeric) -> Decimal:
    """Coerce a numeric value to Decimal without going through binary floats"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def validate_decimal_precision(value: Decimal, currency: Currency) -> Decimal:
    """
    Round decimal to currency precision

    Args:
        value: Decimal to round
        currency: Currency defining precision

    Returns:
        Properly rounded Decimal
    """
    if not value.is_finite():
        return value

    # Rounded result keeps every integer digit, so widen precision to fit
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + currency.precision + 2)
        return value.quantize(
            Decimal('0.1') ** currency.precision,
            rounding=ROUND_HALF_UP
        )


def format_amount(value: Decimal, currency: Currency = Currency.USD) -> str:
    """
    Format an amount for display, e.g. ``$1,234.50`` or ``-$600.00``

    Negative amounts carry a leading minus before the symbol.
    """
    rounded = validate_decimal_precision(to_decimal(value), currency)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{currency.symbol}{abs(rounded):,.{currency.precision}f}"


def decimal_from_string(value: str) -> Decimal:
    """
    Safely convert string to Decimal, handling common formats

    Args:
        value: String representation of number

    Returns:
        Decimal value

    Raises:
        ValueError: If string cannot be converted to valid Decimal
    """
    if not value or not isinstance(value, str):
        raise ValueError("Value must be a non-empty string")

    # Remove currency symbols and whitespace
    clean_value = re.sub(r'[^\d.,\-+]', '', value.strip())

    if ',' in clean_value and '.' in clean_value:
        # Both comma and dot - assume comma is thousands separator
        clean_value = clean_value.replace(',', '')
    elif ',' in clean_value and clean_value.count(',') == 1:
        parts = clean_value.split(',')
        if len(parts[1]) < 3:  # Decimal separator
            clean_value = clean_value.replace(',', '.')
        else:  # Thousands separator
            clean_value = clean_value.replace(',', '')
    elif ',' in clean_value:
        clean_value = clean_value.replace(',', '')

    try:
        return Decimal(clean_value)
    except InvalidOperation:
        raise ValueError(f"Cannot convert '{value}' to Decimal") from None
