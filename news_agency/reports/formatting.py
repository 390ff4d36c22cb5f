"""
Text formatting for agency reports.

Each ``*_lines`` method returns the report as a list of lines without
trailing newlines; writers decide where the lines go.
"""

from decimal import Decimal
from typing import Optional, Sequence

from ..config.defaults import DisplayParams
from ..models.schedule import DeliveryEntry
from ..utils.money import ZERO, MoneyLike, quantize_money, to_money


def format_money(amount: MoneyLike, symbol: str = "$", places: Optional[int] = None) -> str:
    """
    Render an amount with its currency symbol.

    With ``places`` unset the amount is printed without trailing zeros
    (1.50 -> 1.5, 2.00 -> 2, 0.0375 -> 0.0375). With ``places`` set it is
    rounded half-up to that many decimals.
    """
    value = to_money(amount)
    if value == 0:
        value = ZERO

    if places is None:
        text = format(value.normalize(), "f")
    else:
        text = format(quantize_money(value, places), "f")

    return f"{symbol}{text}"


class ReportFormatter:
    """Builds the console text of every agency report."""

    def __init__(self, display: Optional[DisplayParams] = None):
        self.display = display or DisplayParams()

    def money(self, amount: MoneyLike) -> str:
        return format_money(amount, self.display.currency_symbol, self.display.money_places)

    def schedule_lines(self, person_name: str, entries: Sequence[DeliveryEntry]) -> list[str]:
        lines = [f"Delivery Schedule for {person_name}:"]
        for entry in entries:
            lines.append(f"Deliver to: {entry.address}")
            lines.append("Publications:")
            for pub in entry.publications:
                lines.append(f"  {pub.name} - {self.money(pub.price_per_copy)}")
        return lines

    def missing_schedule_lines(self, person_name: str) -> list[str]:
        return [f"No schedule found for {person_name}"]

    def bill_lines(self, customer_name: str, total: Decimal) -> list[str]:
        return [
            f"Bill for {customer_name}:",
            f"Total Cost: {self.money(total)}",
        ]

    def receipt_lines(self, customer_name: str, amount_paid: Decimal, remaining_dues: Decimal) -> list[str]:
        return [
            f"Receipt for {customer_name}:",
            f"Amount Paid: {self.money(amount_paid)}",
            f"Remaining Dues: {self.money(remaining_dues)}",
        ]

    def earnings_lines(self, person_name: str, cumulative_total: Decimal) -> list[str]:
        return [f"Earnings for {person_name}: {self.money(cumulative_total)}"]
