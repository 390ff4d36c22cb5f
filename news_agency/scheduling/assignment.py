"""
Customer assignment strategies for delivery schedules.

A strategy receives the delivery person names in agency order and the
eligible customers in agency order, and returns the route for each person.
Every person named appears in the result, possibly with an empty route.
"""

from typing import Callable, Sequence

import structlog

from ..errors import UnknownAssignmentStrategyError
from ..models.customer import Customer
from ..models.schedule import DeliveryEntry, DeliverySchedules

logger = structlog.get_logger(__name__)

AssignmentStrategy = Callable[[Sequence[str], Sequence[Customer]], DeliverySchedules]


def snapshot_entry(customer: Customer) -> DeliveryEntry:
    """Capture a customer's address and current subscriptions."""
    return DeliveryEntry(
        address=customer.get_address(),
        publications=tuple(customer.subscriptions),
    )


def assign_all(person_names: Sequence[str], customers: Sequence[Customer]) -> DeliverySchedules:
    """
    Give every delivery person the full list of customers.

    Routes are not split between persons, so each one delivers to every
    eligible address.
    """
    schedules: DeliverySchedules = {}
    for name in person_names:
        schedules[name] = [snapshot_entry(customer) for customer in customers]
    return schedules


def assign_round_robin(person_names: Sequence[str], customers: Sequence[Customer]) -> DeliverySchedules:
    """
    Deal customers out to delivery persons in turn.

    The first customer goes to the first person, the second to the second
    and so on, wrapping around. Persons that appear more than once under the
    same name share one route.
    """
    schedules: DeliverySchedules = {name: [] for name in person_names}
    if not person_names:
        return schedules

    for index, customer in enumerate(customers):
        name = person_names[index % len(person_names)]
        schedules[name].append(snapshot_entry(customer))
    return schedules


_STRATEGIES: dict[str, AssignmentStrategy] = {
    "all": assign_all,
    "round_robin": assign_round_robin,
}


def available_strategies() -> tuple[str, ...]:
    return tuple(_STRATEGIES)


def get_strategy(name: str) -> AssignmentStrategy:
    """
    Look up an assignment strategy by name.

    Raises:
        UnknownAssignmentStrategyError: If no strategy has that name
    """
    try:
        return _STRATEGIES[name]
    except KeyError:
        raise UnknownAssignmentStrategyError(
            f"Unknown assignment strategy: {name!r}",
            strategy=name,
            available=list(_STRATEGIES),
        ) from None


def build_schedules(
    person_names: Sequence[str],
    customers: Sequence[Customer],
    strategy: str = "all"
) -> tuple[DeliverySchedules, int]:
    """
    Build fresh delivery schedules.

    Customers whose ``deliveries_stopped`` flag is set are left out; stop
    windows are not consulted.

    Args:
        person_names: Delivery person names in agency order
        customers: All customers in agency order
        strategy: Registered assignment strategy name

    Returns:
        Tuple of (schedules, number of customers skipped)
    """
    assign = get_strategy(strategy)
    eligible = [customer for customer in customers if not customer.deliveries_stopped]
    skipped = len(customers) - len(eligible)

    if skipped:
        logger.debug(
            "Skipping customers with stopped deliveries",
            skipped=[c.name for c in customers if c.deliveries_stopped]
        )

    return assign(person_names, eligible), skipped
