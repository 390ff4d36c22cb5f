"""Delivery earnings calculation."""

from decimal import Decimal
from typing import Iterable

from ..models.schedule import DeliveryEntry
from ..utils.money import ZERO, MoneyLike, to_money

DEFAULT_COMMISSION_RATE = Decimal("0.025")


def delivery_commission(
    entries: Iterable[DeliveryEntry],
    commission_rate: MoneyLike = DEFAULT_COMMISSION_RATE
) -> Decimal:
    """
    Calculate the commission earned for a delivery route.

    Each delivered copy earns ``commission_rate`` times its per-copy price.

    Args:
        entries: Route entries for one delivery person
        commission_rate: Share of each copy's price paid to the deliverer

    Returns:
        Commission for the whole route, unrounded
    """
    rate = to_money(commission_rate)
    earnings = ZERO
    for entry in entries:
        for pub in entry.publications:
            earnings += pub.price_per_copy * rate
    return earnings
