"""
Money Utilities - Safe Decimal operations for prices.

Prices stay Decimal from the moment they enter the cart, including in the
persisted JSON. Rounding happens only for display.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

from storefront import config

# Soles are shown with 2 decimal places
MONEY_PRECISION = Decimal("0.01")

# Largest unit price accepted from a product card
MAX_PRICE = Decimal("1000000000")

Number = Union[str, int, float, Decimal]


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        if isinstance(value, float):
            # Go through str so 49.9 stays 49.9
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def parse_price(value: Union[Number, None], prefix: str = config.CURRENCY_PREFIX) -> Decimal:
    """
    Strict price parsing for values coming from the page.

    Accepts numbers or text such as "S/ 49.90". Unlike to_decimal, bad input
    raises instead of turning into zero.

    Raises:
        ValueError: If the value is missing, not numeric, negative or not finite
    """
    if value is None or isinstance(value, bool):
        raise ValueError(f"Invalid price: {value!r}")

    if isinstance(value, str):
        text = value.strip()
        if prefix and text.startswith(prefix):
            text = text[len(prefix):].strip()
        if not text:
            raise ValueError(f"Invalid price: {value!r}")
        value = text

    try:
        price = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, ValueError, TypeError) as e:
        raise ValueError(f"Invalid price: {value!r}") from e

    if not price.is_finite() or price < 0:
        raise ValueError(f"Invalid price: {value!r}")
    return price


def round_money(value: Number) -> Decimal:
    """Round a monetary value to cents (half up)."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def format_amount(value: Number) -> str:
    """Two-decimal amount without currency, e.g. "149.70"."""
    return f"{round_money(value):.2f}"


def format_money(value: Number, prefix: str = config.CURRENCY_PREFIX) -> str:
    """
    Format monetary value with the currency prefix.

    Args:
        value: Value to format
        prefix: Currency prefix (default "S/")

    Returns:
        Formatted string, e.g. "S/ 149.70"
    """
    return f"{prefix} {format_amount(value)}"


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)
