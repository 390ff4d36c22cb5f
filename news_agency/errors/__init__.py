"""
Error classification for the agency ledger.

Domain operations are permissive and do not raise; these exceptions are
used by the configuration layer and strategy lookup.
"""

from .configuration import (
    AgencyError,
    ConfigurationError,
    UnknownAssignmentStrategyError,
)

__all__ = [
    "AgencyError",
    "ConfigurationError",
    "UnknownAssignmentStrategyError",
]
