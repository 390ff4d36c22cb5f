"""
Domain models module.

Publications, customers, delivery persons and the derived delivery
schedule entries.
"""
from .customer import Customer, StopRequest
from .delivery_person import DeliveryPerson
from .publication import Publication
from .schedule import DeliveryEntry, DeliverySchedules

__all__ = [
    "Customer",
    "DeliveryEntry",
    "DeliveryPerson",
    "DeliverySchedules",
    "Publication",
    "StopRequest",
]
