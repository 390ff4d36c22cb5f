"""
Configuration error classifications.

These exceptions represent setup problems that must be fixed before the
ledger can run, so none of them are recoverable.
"""

from typing import Any, Dict, List, Optional


class AgencyError(Exception):
    """Base class for agency ledger errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ConfigurationError(AgencyError):
    """Configuration file or override values failed validation."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None,
                 source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.source = source


class UnknownAssignmentStrategyError(ConfigurationError):
    """Requested schedule assignment strategy is not registered."""

    def __init__(self, message: str, strategy: Optional[str] = None,
                 available: Optional[List[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.strategy = strategy
        self.available = available or []
