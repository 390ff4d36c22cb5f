"""Tests for the Customer model."""

from decimal import Decimal

import pytest

from news_agency.models import Customer, Publication, StopRequest


@pytest.fixture
def customer() -> Customer:
    return Customer("Alice", "123 Main St")


class TestCustomerDefaults:
    """Test a freshly created customer."""

    def test_initial_state(self, customer):
        assert customer.subscriptions == []
        assert customer.dues == Decimal("0")
        assert customer.has_outstanding_due is False
        assert customer.deliveries_stopped is False
        assert customer.stop_requests == []
        assert customer.get_address() == "123 Main St"


class TestSubscriptions:
    """Test adding and removing subscriptions."""

    def test_add_allows_duplicates(self, customer, newspaper):
        customer.add_subscription(newspaper)
        customer.add_subscription(newspaper)

        assert customer.subscriptions == [newspaper, newspaper]

    def test_remove_drops_every_match(self, customer, newspaper, magazine):
        """All subscriptions with the same name are removed, not just the first."""
        customer.add_subscription(newspaper)
        customer.add_subscription(magazine)
        customer.add_subscription(Publication("Newspaper1", "9.99"))

        customer.remove_subscription(Publication("Newspaper1", "0"))

        assert customer.subscriptions == [magazine]

    def test_remove_unknown_is_noop(self, customer, newspaper, magazine):
        customer.add_subscription(newspaper)

        customer.remove_subscription(magazine)

        assert customer.subscriptions == [newspaper]


class TestDues:
    """Test dues balance and the outstanding-due flag."""

    @pytest.mark.parametrize("amount,outstanding", [
        ("1.50", True),
        ("0", False),
        ("-2", False),
    ])
    def test_set_dues(self, customer, amount, outstanding):
        """Dues are set as given and the flag follows the balance."""
        customer.set_dues(amount)

        assert customer.get_dues() == Decimal(amount)
        assert customer.has_outstanding_due is outstanding

    def test_set_dues_overwrites(self, customer):
        customer.set_dues(5)
        customer.set_dues(2)

        assert customer.get_dues() == Decimal("2")

    def test_partial_payment(self, customer):
        customer.set_dues("3.50")

        customer.make_payment("1.25")

        assert customer.get_dues() == Decimal("2.25")
        assert customer.has_outstanding_due is True

    def test_exact_payment_clears_due(self, customer):
        customer.set_dues("1.5")

        customer.make_payment(1.5)

        assert customer.get_dues() == Decimal("0")
        assert customer.has_outstanding_due is False

    def test_overpayment_clamps_to_zero(self, customer):
        customer.set_dues("1.00")

        customer.make_payment("5.00")

        assert customer.get_dues() == Decimal("0")
        assert customer.has_outstanding_due is False

    def test_negative_payment_raises_balance(self, customer):
        """Payments are not validated; a negative one adds to the dues."""
        customer.make_payment("-2")

        assert customer.get_dues() == Decimal("2")
        assert customer.has_outstanding_due is True


class TestDeliveryStops:
    """Test stop requests, date checks and resuming."""

    def test_request_stop_sets_flag(self, customer):
        customer.request_stop_delivery("2024-08-01", "2024-08-15")

        assert customer.deliveries_stopped is True
        assert customer.stop_requests == [StopRequest("2024-08-01", "2024-08-15")]

    def test_request_stop_in_the_past_still_sets_flag(self, customer):
        customer.request_stop_delivery("1999-01-01", "1999-01-02")

        assert customer.deliveries_stopped is True

    @pytest.mark.parametrize("current_date,expected", [
        ("2024-07-31", False),
        ("2024-08-01", True),
        ("2024-08-10", True),
        ("2024-08-15", True),
        ("2024-08-16", False),
    ])
    def test_is_delivery_stopped_inclusive_window(self, customer, current_date, expected):
        customer.request_stop_delivery("2024-08-01", "2024-08-15")

        assert customer.is_delivery_stopped(current_date) is expected

    def test_is_delivery_stopped_any_window(self, customer):
        customer.request_stop_delivery("2024-01-01", "2024-01-05")
        customer.request_stop_delivery("2024-03-01", "2024-03-05")

        assert customer.is_delivery_stopped("2024-03-03") is True
        assert customer.is_delivery_stopped("2024-02-01") is False

    def test_dates_compared_as_strings(self, customer):
        """Non ISO dates compare lexicographically, not chronologically."""
        customer.request_stop_delivery("1/1/2024", "1/3/2024")

        assert customer.is_delivery_stopped("1/20/2024") is True

    def test_flag_not_derived_from_dates(self, customer):
        customer.request_stop_delivery("2024-08-01", "2024-08-15")

        assert customer.is_delivery_stopped("2030-01-01") is False
        assert customer.deliveries_stopped is True

    def test_resume_keeps_requests(self, customer):
        customer.request_stop_delivery("2024-08-01", "2024-08-15")

        customer.resume_deliveries()

        assert customer.deliveries_stopped is False
        assert len(customer.stop_requests) == 1
        assert customer.is_delivery_stopped("2024-08-05") is True
