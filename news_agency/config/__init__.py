"""
Configuration module.

Frozen defaults, YAML overrides and validation for the agency ledger.
"""
from .defaults import AgencyConfig, get_default_config
from .loader import ConfigLoader

__all__ = ["AgencyConfig", "ConfigLoader", "get_default_config"]
