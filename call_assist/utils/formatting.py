"""
Display formatting shared by prompts and fallback content.
"""
from decimal import Decimal
from typing import Union


def format_currency(amount: Union[int, float, Decimal]) -> str:
    """
    Format a dollar amount with thousands separators.

    Whole amounts drop the cents (3400 -> "$3,400"); fractional amounts keep
    two decimals (2033.5 -> "$2,033.50").
    """
    value = Decimal(str(amount))
    if value == value.to_integral_value():
        return f"${int(value):,}"
    return f"${value:,.2f}"


def json_amount(amount: Union[int, float, Decimal]) -> Union[int, float]:
    """JSON number for an amount: whole amounts as int (3400.0 -> 3400)."""
    value = Decimal(str(amount))
    if value == value.to_integral_value():
        return int(value)
    return float(value)
