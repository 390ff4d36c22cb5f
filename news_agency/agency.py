"""
Main agency coordinator.

Owns the publications, customers and delivery persons of one agency and
derives delivery schedules, bills, receipts and delivery earnings from
them. Reports are rendered as console text and handed to a report writer.
"""

from decimal import Decimal
from typing import Optional

import structlog

from .accounting import bill_total, delivery_commission
from .config.defaults import AgencyConfig, get_default_config
from .logging.config import get_ledger_logger, log_dues_change, log_schedule_built
from .models import Customer, DeliveryEntry, DeliveryPerson, DeliverySchedules, Publication
from .reports import BaseReportWriter, ReportFormatter, StdoutReportWriter
from .scheduling import build_schedules, get_strategy
from .utils.money import MoneyLike, sum_money, to_money

logger = structlog.get_logger(__name__)
ledger_logger = get_ledger_logger(__name__)


class NewspaperAgency:
    """
    Coordinator for the subscription ledger.

    Lookups by name use the first exact match. Operations on unknown names
    print nothing and change nothing, except ``print_daily_delivery`` which
    reports the missing schedule.
    """

    def __init__(
        self,
        config: Optional[AgencyConfig] = None,
        writer: Optional[BaseReportWriter] = None
    ) -> None:
        self.config = config or get_default_config()
        self.writer = writer or StdoutReportWriter()
        self.formatter = ReportFormatter(self.config.display)

        # Unknown strategies are rejected here, not at the first build
        get_strategy(self.config.schedule.assignment)

        self._publications: list[Publication] = []
        self._customers: list[Customer] = []
        self._delivery_persons: list[DeliveryPerson] = []
        self._delivery_schedules: DeliverySchedules = {}

        self.logger = logger
        self.ledger_logger = ledger_logger

    # Collections

    @property
    def publications(self) -> tuple[Publication, ...]:
        return tuple(self._publications)

    @property
    def customers(self) -> tuple[Customer, ...]:
        return tuple(self._customers)

    @property
    def delivery_persons(self) -> tuple[DeliveryPerson, ...]:
        return tuple(self._delivery_persons)

    @property
    def delivery_schedules(self) -> DeliverySchedules:
        """Copy of the current schedules, keyed by delivery person name."""
        return {name: list(entries) for name, entries in self._delivery_schedules.items()}

    def add_publication(self, pub: Publication) -> None:
        self._publications.append(pub)
        self.logger.debug("Publication added", publication=pub.name, price=str(pub.price_per_copy))

    def add_customer(self, customer: Customer) -> None:
        self._customers.append(customer)
        self.logger.debug("Customer added", customer=customer.name, address=customer.address)

    def add_delivery_person(self, person: DeliveryPerson) -> None:
        self._delivery_persons.append(person)
        self.logger.debug("Delivery person added", delivery_person=person.name)

    def find_customer(self, name: str) -> Optional[Customer]:
        """First customer whose name matches exactly, or None."""
        for customer in self._customers:
            if customer.name == name:
                return customer
        return None

    def find_delivery_person(self, name: str) -> Optional[DeliveryPerson]:
        """First delivery person whose name matches exactly, or None."""
        for person in self._delivery_persons:
            if person.name == name:
                return person
        return None

    def get_schedule(self, person_name: str) -> Optional[list[DeliveryEntry]]:
        entries = self._delivery_schedules.get(person_name)
        return list(entries) if entries is not None else None

    # Scheduling

    def create_delivery_schedule(self) -> DeliverySchedules:
        """
        Rebuild every delivery person's schedule from scratch.

        Customers with ``deliveries_stopped`` set are left out. Each entry
        snapshots the customer's subscriptions at call time. With the
        default ``all`` strategy every person gets the same full list.

        Returns:
            Copy of the new schedules
        """
        strategy = self.config.schedule.assignment
        person_names = [person.name for person in self._delivery_persons]

        schedules, skipped = build_schedules(person_names, self._customers, strategy)
        self._delivery_schedules = schedules

        log_schedule_built(
            self.logger,
            strategy=strategy,
            person_count=len(schedules),
            eligible_customers=len(self._customers) - skipped,
            skipped_customers=skipped,
        )
        return self.delivery_schedules

    def print_daily_delivery(self, person_name: str) -> None:
        """Print one delivery person's schedule, or a not-found message."""
        entries = self._delivery_schedules.get(person_name)
        if entries is None:
            self.logger.info("No schedule for delivery person", delivery_person=person_name)
            self.writer.write(self.formatter.missing_schedule_lines(person_name))
            return

        self.writer.write(self.formatter.schedule_lines(person_name, entries))

    # Billing

    def print_monthly_bill(self, customer_name: str) -> Optional[Decimal]:
        """
        Bill a customer for their current subscriptions.

        The bill replaces any existing dues rather than adding to them.

        Returns:
            The bill total, or None if no customer has that name
        """
        customer = self.find_customer(customer_name)
        if customer is None:
            self.logger.debug("Bill requested for unknown customer", customer=customer_name)
            return None

        total = bill_total(customer.subscriptions)
        previous = customer.get_dues()
        customer.set_dues(total)
        log_dues_change(self.ledger_logger, customer.name, previous, customer.get_dues(),
                        trigger="monthly_bill",
                        context={"subscriptions": len(customer.subscriptions)})

        self.writer.write(self.formatter.bill_lines(customer_name, total))
        return total

    def print_receipts(self, customer_name: str, amount: MoneyLike) -> Optional[Decimal]:
        """
        Record a payment and print a receipt.

        Returns:
            Remaining dues, or None if no customer has that name
        """
        customer = self.find_customer(customer_name)
        if customer is None:
            self.logger.debug("Payment received for unknown customer", customer=customer_name)
            return None

        paid = to_money(amount)
        previous = customer.get_dues()
        customer.make_payment(paid)
        log_dues_change(self.ledger_logger, customer.name, previous, customer.get_dues(),
                        trigger="payment",
                        context={"amount_paid": str(paid)})

        self.writer.write(self.formatter.receipt_lines(customer_name, paid, customer.get_dues()))
        return customer.get_dues()

    # Earnings

    def calculate_delivery_earnings(self) -> dict[str, Decimal]:
        """
        Credit every delivery person with commission for their schedule.

        Earnings accumulate, so calling this again without rebuilding the
        schedule pays the same route twice.

        Returns:
            Amount credited in this call, keyed by delivery person name
        """
        rate = self.config.earnings.commission_rate
        credited: dict[str, Decimal] = {}

        for person in self._delivery_persons:
            entries = self._delivery_schedules.get(person.name, [])
            earnings = delivery_commission(entries, rate)
            person.add_earnings(earnings)
            credited[person.name] = credited.get(person.name, Decimal(0)) + earnings

            self.ledger_logger.info(
                "Delivery earnings credited",
                delivery_person=person.name,
                earned=str(earnings),
                total_earnings=str(person.get_earnings()),
                stops=len(entries),
                copies=sum(entry.copy_count for entry in entries),
                route_value=str(sum_money(entry.total_price() for entry in entries)),
            )
            self.writer.write(self.formatter.earnings_lines(person.name, person.get_earnings()))

        return credited

    # Requests

    def process_customer_requests(self, current_date: Optional[str] = None) -> list[str]:
        """
        Reconcile customers' stop flags with their stop windows.

        Without ``current_date`` nothing happens. With a date, each
        customer's ``deliveries_stopped`` flag is set to whether one of
        their stop windows covers that date. Schedules are not rebuilt.

        Args:
            current_date: ISO-8601 date to reconcile against

        Returns:
            Names of customers whose flag changed
        """
        if current_date is None:
            return []

        changed = []
        for customer in self._customers:
            stopped = customer.is_delivery_stopped(current_date)
            if stopped == customer.deliveries_stopped:
                continue

            if stopped:
                customer.deliveries_stopped = True
            else:
                customer.resume_deliveries()
            changed.append(customer.name)

            self.logger.info(
                "Delivery stop flag reconciled",
                customer=customer.name,
                current_date=current_date,
                deliveries_stopped=stopped,
            )

        return changed
