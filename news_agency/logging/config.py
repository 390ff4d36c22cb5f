"""
Centralized logging configuration for the agency ledger.

This module provides standardized logging configuration using structlog
for all components. Log output goes to stderr so it never interleaves with
the report text the agency prints to stdout.

Until ``configure_logging()`` is called, structlog is routed through the
standard library with its defaults: nothing below WARNING is emitted and
the rest goes to stderr.
"""
import logging
import sys
from decimal import Decimal
from typing import IO, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

# Root handler installed by configure_logging, replaced on reconfiguration
_handler: Optional[logging.Handler] = None


def _base_processors() -> list:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def configure_library_defaults() -> None:
    """
    Route structlog through stdlib logging unless the host already configured it.

    Called on package import so embedding code that never calls
    ``configure_logging()`` does not get log lines on stdout.
    """
    if structlog.is_configured():
        return

    structlog.configure(
        processors=_base_processors() + [structlog.dev.ConsoleRenderer(colors=False)],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Optional[IO[str]] = None
) -> None:
    """
    Configure structlog for the entire application.

    Calling it again replaces the handler installed by the previous call,
    so a new ``stream`` takes effect.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        stream: Destination stream, defaults to stderr
    """
    global _handler

    log_level = getattr(logging, level.upper())

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setFormatter(logging.Formatter("%(message)s"))  # structlog will handle formatting
    root.addHandler(_handler)
    root.setLevel(log_level)

    processors = _base_processors()

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        # Decimal amounts are not JSON native
        processors.append(structlog.processors.JSONRenderer(default=str))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_ledger_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for money movements (bills, payments, earnings).

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger bound to the ledger subsystem
    """
    # Initial values keep the proxy lazy until first use
    return structlog.get_logger(
        name,
        subsystem="ledger",
        audit_trail=True
    )


def log_dues_change(
    logger: FilteringBoundLogger,
    customer_name: str,
    previous_dues: Decimal,
    new_dues: Decimal,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a change of a customer's dues with standardized format.

    Args:
        logger: Structlog logger instance
        customer_name: Customer whose dues changed
        previous_dues: Dues before the change
        new_dues: Dues after the change
        trigger: Operation that changed the dues (bill, payment)
        context: Additional context data
    """
    bound_logger = logger.bind(
        customer=customer_name,
        previous_dues=str(previous_dues),
        new_dues=str(new_dues),
        outstanding=new_dues > 0,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Dues changed")


def log_schedule_built(
    logger: FilteringBoundLogger,
    strategy: str,
    person_count: int,
    eligible_customers: int,
    skipped_customers: int
) -> None:
    """
    Log a delivery schedule rebuild with standardized format.

    Args:
        logger: Structlog logger instance
        strategy: Assignment strategy used
        person_count: Number of delivery persons scheduled
        eligible_customers: Customers with deliveries active
        skipped_customers: Customers excluded by a stop request
    """
    logger.info(
        "Delivery schedule built",
        strategy=strategy,
        person_count=person_count,
        eligible_customers=eligible_customers,
        skipped_customers=skipped_customers,
    )
