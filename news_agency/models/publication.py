"""Publication value object."""

from dataclasses import dataclass, field
from decimal import Decimal

from ..utils.money import to_money


@dataclass(frozen=True)
class Publication:
    """
    A named periodical with a fixed per-copy price.

    Two publications compare equal when their names match exactly; the
    price takes no part in equality or hashing.
    """
    name: str
    price_per_copy: Decimal = field(compare=False)

    def __post_init__(self):
        object.__setattr__(self, "price_per_copy", to_money(self.price_per_copy))
