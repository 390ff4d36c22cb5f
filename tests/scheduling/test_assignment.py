"""Tests for delivery assignment strategies."""

import pytest

from news_agency.errors import ConfigurationError, UnknownAssignmentStrategyError
from news_agency.models import Customer
from news_agency.scheduling import (
    assign_all,
    assign_round_robin,
    available_strategies,
    build_schedules,
    get_strategy,
)


@pytest.fixture
def customers(newspaper, magazine) -> list[Customer]:
    result = []
    for i, pub in enumerate([newspaper, magazine, newspaper, magazine, newspaper]):
        customer = Customer(f"C{i}", f"{i} Oak St")
        customer.add_subscription(pub)
        result.append(customer)
    return result


def addresses(entries):
    return [entry.address for entry in entries]


class TestAssignAll:
    """Test the full-list strategy."""

    def test_identical_lists(self, customers):
        schedules = assign_all(["John", "Jane", "Jim"], customers)

        assert list(schedules) == ["John", "Jane", "Jim"]
        assert schedules["John"] == schedules["Jane"] == schedules["Jim"]
        assert len(schedules["John"]) == 5

    def test_lists_are_independent(self, customers):
        schedules = assign_all(["John", "Jane"], customers)
        schedules["John"].pop()

        assert len(schedules["Jane"]) == 5

    def test_entry_snapshots_subscriptions(self, customers, magazine):
        schedules = assign_all(["John"], customers)

        customers[0].add_subscription(magazine)

        assert len(schedules["John"][0].publications) == 1


class TestAssignRoundRobin:
    """Test the partitioning strategy."""

    def test_deals_in_turn(self, customers):
        schedules = assign_round_robin(["John", "Jane"], customers)

        assert addresses(schedules["John"]) == ["0 Oak St", "2 Oak St", "4 Oak St"]
        assert addresses(schedules["Jane"]) == ["1 Oak St", "3 Oak St"]

    def test_every_customer_assigned_once(self, customers):
        schedules = assign_round_robin(["A", "B", "C"], customers)

        assigned = [a for entries in schedules.values() for a in addresses(entries)]
        assert sorted(assigned) == sorted(c.address for c in customers)

    def test_more_persons_than_customers(self, customers):
        names = [f"P{i}" for i in range(7)]

        schedules = assign_round_robin(names, customers)

        assert schedules["P5"] == []
        assert schedules["P6"] == []

    def test_no_persons(self, customers):
        assert assign_round_robin([], customers) == {}


class TestStrategyRegistry:
    """Test strategy lookup."""

    def test_available(self):
        assert available_strategies() == ("all", "round_robin")

    def test_get_strategy(self):
        assert get_strategy("all") is assign_all

    def test_unknown_strategy(self):
        with pytest.raises(UnknownAssignmentStrategyError) as exc_info:
            get_strategy("nearest")

        assert isinstance(exc_info.value, ConfigurationError)
        assert exc_info.value.strategy == "nearest"
        assert exc_info.value.available == ["all", "round_robin"]


class TestBuildSchedules:
    """Test eligibility filtering."""

    def test_skips_stopped_customers(self, customers):
        customers[1].request_stop_delivery("2024-08-01", "2024-08-15")
        customers[3].request_stop_delivery("2024-08-01", "2024-08-15")

        schedules, skipped = build_schedules(["John"], customers)

        assert skipped == 2
        assert addresses(schedules["John"]) == ["0 Oak St", "2 Oak St", "4 Oak St"]

    def test_round_robin_after_filtering(self, customers):
        customers[0].request_stop_delivery("2024-08-01", "2024-08-15")

        schedules, _ = build_schedules(["John", "Jane"], customers, "round_robin")

        assert addresses(schedules["John"]) == ["1 Oak St", "3 Oak St"]
        assert addresses(schedules["Jane"]) == ["2 Oak St", "4 Oak St"]
