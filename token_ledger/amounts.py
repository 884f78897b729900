"""
Token Amount Module

Amounts are held as integer base units bounded to an unsigned 128-bit range.
Decimals are a display-only scaling factor; conversions to and from display
values use Decimal and NEVER float.
"""

from decimal import Decimal, InvalidOperation, localcontext
import re
from typing import Optional

from .errors import InvalidAmount

U128_MAX = 2 ** 128 - 1
MAX_DECIMALS = 255


def validate_amount(amount: int, field: str = "amount") -> int:
    """
    Check that an amount is a plain int in [0, U128_MAX]

    Args:
        amount: Quantity in base units
        field: Name used in the error message

    Returns:
        The amount unchanged

    Raises:
        InvalidAmount: If amount is not an int (bools included) or out of range
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmount(f"{field} must be an integer, got {type(amount).__name__}")
    if amount < 0:
        raise InvalidAmount(f"{field} cannot be negative: {amount}")
    if amount > U128_MAX:
        raise InvalidAmount(f"{field} exceeds 128-bit range: {amount}")
    return amount


def validate_decimals(decimals: int) -> int:
    """Check that decimals fits an unsigned byte"""
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise ValueError(f"decimals must be an integer, got {type(decimals).__name__}")
    if not 0 <= decimals <= MAX_DECIMALS:
        raise ValueError(f"decimals must be between 0 and {MAX_DECIMALS}: {decimals}")
    return decimals


def to_display(amount: int, decimals: int) -> Decimal:
    """Scale base units down to a display value"""
    with localcontext() as ctx:
        # U128_MAX has 39 digits; leave room for any scale
        ctx.prec = 40 + decimals
        return Decimal(amount).scaleb(-decimals)


def format_amount(amount: int, decimals: int, symbol: Optional[str] = None) -> str:
    """
    Format base units for display

    Args:
        amount: Quantity in base units
        decimals: Token decimal precision
        symbol: Optional ticker prefixed to the value

    Returns:
        Thousands-separated string, e.g. "MTK 1,000.50"
    """
    value = to_display(amount, decimals)
    if decimals == 0:
        text = f"{value:,.0f}"
    else:
        text = f"{value:,.{decimals}f}"

    if symbol:
        return f"{symbol} {text}"
    return text


def parse_amount(value: str, decimals: int) -> int:
    """
    Convert a display string to base units

    Args:
        value: Display value such as "1,000.5"
        decimals: Token decimal precision

    Returns:
        Integer base units

    Raises:
        ValueError: If the value is not a number or has more fractional
            digits than the token supports
    """
    if not value or not isinstance(value, str):
        raise ValueError("Value must be a non-empty string")

    clean_value = re.sub(r'[\s,_]', '', value)

    try:
        parsed = Decimal(clean_value)
    except InvalidOperation:
        raise ValueError(f"Cannot convert '{value}' to an amount")

    if not parsed.is_finite():
        raise ValueError(f"Cannot convert '{value}' to an amount")

    with localcontext() as ctx:
        # scaleb only moves the exponent; keep every coefficient digit
        ctx.prec = len(parsed.as_tuple().digits) + 1
        scaled = parsed.scaleb(decimals)
        if scaled != scaled.to_integral_value():
            raise ValueError(f"'{value}' has more than {decimals} decimal places")
        return validate_amount(int(scaled))
