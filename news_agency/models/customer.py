"""
Customer model.

A customer holds an ordered list of subscribed publications, an
outstanding dues balance and the delivery-stop windows they requested.

Stop windows are stored as plain date strings. ``deliveries_stopped`` is a
flag set by any stop request and cleared only by ``resume_deliveries()``;
it is not derived from the stored windows.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from ..utils.dates import is_within_window
from ..utils.money import ZERO, MoneyLike, to_money
from .publication import Publication


@dataclass(frozen=True)
class StopRequest:
    """Inclusive window during which deliveries are suppressed."""
    start_date: str
    end_date: str

    def covers(self, current_date: str) -> bool:
        return is_within_window(current_date, self.start_date, self.end_date)


@dataclass
class Customer:
    """A subscriber with an address, subscriptions and a dues balance."""
    name: str
    address: str
    subscriptions: list[Publication] = field(default_factory=list)
    dues: Decimal = field(default=ZERO)
    deliveries_stopped: bool = False
    stop_requests: list[StopRequest] = field(default_factory=list)

    def __post_init__(self):
        self.dues = to_money(self.dues)

    @property
    def has_outstanding_due(self) -> bool:
        """True while the dues balance is above zero."""
        return self.dues > 0

    def add_subscription(self, pub: Publication) -> None:
        """Append a publication; repeated subscriptions are allowed."""
        self.subscriptions.append(pub)

    def remove_subscription(self, pub: Publication) -> None:
        """Drop every subscription whose name matches ``pub.name``."""
        self.subscriptions = [p for p in self.subscriptions if p.name != pub.name]

    def set_dues(self, amount: MoneyLike) -> None:
        """Replace the dues balance with ``amount``."""
        self.dues = to_money(amount)

    def make_payment(self, amount: MoneyLike) -> None:
        """
        Reduce dues by ``amount``.

        Overpayment clamps the balance at zero. The amount is not checked,
        so a negative payment raises the balance.
        """
        self.dues -= to_money(amount)
        if self.dues <= 0:
            self.dues = ZERO

    def get_dues(self) -> Decimal:
        return self.dues

    def get_address(self) -> str:
        return self.address

    def request_stop_delivery(self, start_date: str, end_date: str) -> None:
        """Record a stop window and stop deliveries immediately."""
        self.stop_requests.append(StopRequest(start_date, end_date))
        self.deliveries_stopped = True

    def is_delivery_stopped(self, current_date: str) -> bool:
        """
        Check whether any recorded stop window covers ``current_date``.

        Dates are compared as strings, so they must be ISO-8601
        (YYYY-MM-DD) for the result to be meaningful.
        """
        return any(request.covers(current_date) for request in self.stop_requests)

    def resume_deliveries(self) -> None:
        """Clear the stop flag. Recorded stop windows are kept."""
        self.deliveries_stopped = False
