"""Delivery person model."""

from dataclasses import dataclass, field
from decimal import Decimal

from ..utils.money import ZERO, MoneyLike, to_money


@dataclass
class DeliveryPerson:
    """A delivery person and their cumulative earnings."""
    name: str
    total_earnings: Decimal = field(default=ZERO)

    def __post_init__(self):
        self.total_earnings = to_money(self.total_earnings)

    def add_earnings(self, amount: MoneyLike) -> None:
        """Accumulate earnings. Totals are never reset."""
        self.total_earnings += to_money(amount)

    def get_earnings(self) -> Decimal:
        return self.total_earnings
