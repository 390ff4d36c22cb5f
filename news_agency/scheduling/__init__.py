"""
Delivery scheduling module.

Builds per-person delivery routes from the customers whose deliveries
are active.
"""
from .assignment import (
    AssignmentStrategy,
    assign_all,
    assign_round_robin,
    available_strategies,
    build_schedules,
    get_strategy,
)

__all__ = [
    "AssignmentStrategy",
    "assign_all",
    "assign_round_robin",
    "available_strategies",
    "build_schedules",
    "get_strategy",
]
