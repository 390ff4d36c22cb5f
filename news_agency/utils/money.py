"""Money helpers built on decimal.Decimal."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Union

MoneyLike = Union[Decimal, int, float, str]

ZERO = Decimal("0")


def to_money(value: MoneyLike) -> Decimal:
    """
    Convert a numeric value to Decimal.

    Floats go through str() so that 1.5 becomes Decimal("1.5") rather than
    its binary approximation.

    Args:
        value: Decimal, int, float or numeric string

    Returns:
        Decimal representation of the value
    """
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def sum_money(values: Iterable[MoneyLike]) -> Decimal:
    """Sum money values, returning Decimal zero for an empty iterable."""
    total = ZERO
    for value in values:
        total += to_money(value)
    return total


def quantize_money(value: MoneyLike, places: Optional[int] = None) -> Decimal:
    """
    Round a money value to a fixed number of decimal places.

    Args:
        value: Amount to round
        places: Decimal places, None leaves the value untouched

    Returns:
        Rounded Decimal (ROUND_HALF_UP)
    """
    amount = to_money(value)
    if places is None:
        return amount
    exponent = Decimal(1).scaleb(-places)
    return amount.quantize(exponent, rounding=ROUND_HALF_UP)
