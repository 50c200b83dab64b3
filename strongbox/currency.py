"""
Amount Handling Module

Coerces incoming amounts to Decimal and formats balances for display.
Floats are converted through their string form so 1.50 stays 1.50.
"""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation, getcontext
from typing import Union

getcontext().prec = 28

Amount = Union[Decimal, int, float, str]

CENTS = Decimal('0.01')
ZERO = Decimal('0')
HUNDRED = Decimal('100')


def to_decimal(value: Amount) -> Decimal:
    """
    Convert an amount to Decimal

    Args:
        value: Decimal, int, float or numeric string

    Returns:
        Decimal value (not rounded)

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValueError(f"Cannot convert {value!r} to Decimal")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Cannot convert {value!r} to Decimal")
    if not result.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return result


def percent_of(value: Decimal, rate: Decimal) -> Decimal:
    """Return rate percent of value"""
    return value * rate / HUNDRED


def format_money(value: Decimal, symbol: str = "$") -> str:
    """Format a balance with two decimal places, e.g. $1498.50"""
    rounded = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    if rounded < ZERO:
        return f"-{symbol}{-rounded:.2f}"
    return f"{symbol}{rounded:.2f}"


def format_rate(rate: Decimal) -> str:
    """Format an interest rate without trailing zeros (5.0 -> 5, 2.50 -> 2.5)"""
    if rate == ZERO:
        return "0"
    return f"{rate.normalize():f}"


def format_amount(value: Decimal) -> str:
    """Format a requested amount as given: 1000 stays 1000, 2000.5 stays 2000.5"""
    if value == value.to_integral_value():
        return f"{value.to_integral_value():f}"
    return f"{value.normalize():f}"
