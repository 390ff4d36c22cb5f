"""Delivery schedule data structures."""

from dataclasses import dataclass
from decimal import Decimal

from ..utils.money import sum_money
from .publication import Publication


@dataclass(frozen=True)
class DeliveryEntry:
    """One stop on a delivery route with the publications to drop off."""
    address: str
    publications: tuple[Publication, ...]

    @property
    def copy_count(self) -> int:
        return len(self.publications)

    def total_price(self) -> Decimal:
        """Sum of the per-copy prices delivered at this address."""
        return sum_money(pub.price_per_copy for pub in self.publications)


# Delivery person name -> ordered route
DeliverySchedules = dict[str, list[DeliveryEntry]]
