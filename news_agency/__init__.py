"""
News Agency - Newspaper Subscription Ledger

A small in-memory ledger for a newspaper subscription agency. Tracks
publications, customers and their delivery-stop windows, delivery staff,
and derives delivery schedules, monthly bills, receipts and delivery
earnings.
"""

__version__ = "0.1.0"
__author__ = "News Agency Team"

from .logging.config import configure_library_defaults

configure_library_defaults()
