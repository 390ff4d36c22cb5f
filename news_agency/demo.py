#!/usr/bin/env python3
"""
Example driver for the agency ledger.

Sets up two publications, two customers and two delivery persons, stops
Alice's deliveries for the first half of August 2024 and walks through
scheduling, billing, payment and earnings.

Run: python -m news_agency [--config-dir DIR] [--log-level LEVEL] [--json-logs]
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .agency import NewspaperAgency
from .config.loader import ConfigLoader
from .errors import ConfigurationError
from .logging.config import configure_logging
from .models import Customer, DeliveryPerson, Publication
from .reports import BaseReportWriter


def build_demo_agency(agency: NewspaperAgency) -> NewspaperAgency:
    """Populate an agency with the demo publications, customers and staff."""
    newspaper = Publication("Newspaper1", "1.50")
    magazine = Publication("Magazine1", "2.00")
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


def run_demo(
    agency: Optional[NewspaperAgency] = None,
    writer: Optional[BaseReportWriter] = None
) -> NewspaperAgency:
    """
    Run the demo scenario.

    Args:
        agency: Empty agency to populate, a default one is created if None
        writer: Report writer for a newly created agency

    Returns:
        The agency after the scenario has run
    """
    if agency is None:
        agency = NewspaperAgency(writer=writer)
    build_demo_agency(agency)

    agency.create_delivery_schedule()

    agency.find_customer("Alice").request_stop_delivery("2024-08-01", "2024-08-15")
    agency.create_delivery_schedule()

    agency.print_daily_delivery("John")

    agency.print_monthly_bill("Alice")
    agency.print_receipts("Alice", "1.5")

    agency.calculate_delivery_earnings()
    return agency


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Newspaper agency ledger demo")
    parser.add_argument("--config-dir", type=Path, default=None,
                        help="Directory containing agency.yaml")
    parser.add_argument("--log-level", default=None,
                        help="Override the configured log level")
    parser.add_argument("--json-logs", action="store_true",
                        help="Emit logs as JSON")
    args = parser.parse_args(argv)

    overrides = {}
    if args.log_level:
        overrides.setdefault("logging", {})["level"] = args.log_level
    if args.json_logs:
        overrides.setdefault("logging", {})["format_json"] = True

    try:
        config = ConfigLoader.create(args.config_dir).load(overrides)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    configure_logging(level=config.logging.level, format_json=config.logging.format_json)

    run_demo(NewspaperAgency(config=config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
