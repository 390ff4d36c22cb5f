"""Default configuration parameters for the agency ledger."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class EarningsParams:
    """Delivery earnings parameters."""
    commission_rate: Decimal = Decimal("0.025")      # Share of each delivered copy's price


@dataclass(frozen=True)
class ScheduleParams:
    """Delivery schedule parameters."""
    # "all" gives every delivery person the full customer list,
    # "round_robin" splits eligible customers across persons
    assignment: str = "all"


@dataclass(frozen=True)
class DisplayParams:
    """Report rendering parameters."""
    currency_symbol: str = "$"
    money_places: Optional[int] = None               # None prints amounts without trailing zeros


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "WARNING"
    format_json: bool = False


@dataclass(frozen=True)
class AgencyConfig:
    """Complete agency configuration."""
    earnings: EarningsParams
    schedule: ScheduleParams
    display: DisplayParams
    logging: LoggingParams


def get_default_config() -> AgencyConfig:
    """Get the default configuration instance."""
    return AgencyConfig(
        earnings=EarningsParams(),
        schedule=ScheduleParams(),
        display=DisplayParams(),
        logging=LoggingParams(),
    )
