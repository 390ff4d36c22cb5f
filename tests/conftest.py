"""Pytest configuration and shared fixtures."""

import io

import pytest

from news_agency.agency import NewspaperAgency
from news_agency.logging.config import configure_logging
from news_agency.models import Customer, DeliveryPerson, Publication
from news_agency.reports import MemoryReportWriter


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Route structlog output away from stdout, where reports are printed."""
    configure_logging(level="DEBUG", stream=io.StringIO())


@pytest.fixture
def newspaper() -> Publication:
    return Publication("Newspaper1", "1.50")


@pytest.fixture
def magazine() -> Publication:
    return Publication("Magazine1", "2.00")


@pytest.fixture
def writer() -> MemoryReportWriter:
    return MemoryReportWriter()


@pytest.fixture
def agency(writer) -> NewspaperAgency:
    """Empty agency writing reports to memory."""
    return NewspaperAgency(writer=writer)


@pytest.fixture
def populated_agency(agency, newspaper, magazine) -> NewspaperAgency:
    """Agency with Alice (Newspaper1), Bob (Magazine1), John and Jane."""
    agency.add_publication(newspaper)
    agency.add_publication(magazine)

    alice = Customer("Alice", "123 Main St")
    alice.add_subscription(newspaper)
    agency.add_customer(alice)

    bob = Customer("Bob", "456 Elm St")
    bob.add_subscription(magazine)
    agency.add_customer(bob)

    agency.add_delivery_person(DeliveryPerson("John"))
    agency.add_delivery_person(DeliveryPerson("Jane"))
    return agency
