"""
Logging configuration and utilities for the agency ledger.
"""
from .config import configure_library_defaults, configure_logging, get_ledger_logger, get_logger

__all__ = ["configure_library_defaults", "configure_logging", "get_ledger_logger", "get_logger"]
