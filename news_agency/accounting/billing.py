"""Customer bill calculation."""

from decimal import Decimal
from typing import Iterable

from ..models.publication import Publication
from ..utils.money import sum_money


def bill_total(subscriptions: Iterable[Publication]) -> Decimal:
    """
    Calculate a customer's bill.

    The bill is one copy of every subscribed publication; duplicate
    subscriptions are billed once per occurrence.

    Args:
        subscriptions: Publications the customer currently subscribes to

    Returns:
        Sum of per-copy prices, Decimal zero when there are none
    """
    return sum_money(pub.price_per_copy for pub in subscriptions)
