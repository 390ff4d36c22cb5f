"""Billing and delivery earnings calculations"""

from .billing import bill_total
from .earnings import DEFAULT_COMMISSION_RATE, delivery_commission

__all__ = [
    "DEFAULT_COMMISSION_RATE",
    "bill_total",
    "delivery_commission",
]
