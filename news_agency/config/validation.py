"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from decimal import Decimal, InvalidOperation
from typing import Any

from ..scheduling import available_strategies
from .defaults import AgencyConfig, get_default_config

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

SECTION_FIELDS = {
    section.name: {f.name for f in fields(getattr(get_default_config(), section.name))}
    for section in fields(AgencyConfig)
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _as_decimal(value: Any):
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, (int, float, str)):
        try:
            number = Decimal(str(value))
        except InvalidOperation:
            return None
        return number if number.is_finite() else None
    return None


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_earnings_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate earnings parameters."""
        errors = []

        if "commission_rate" in params:
            value = params["commission_rate"]
            rate = _as_decimal(value)
            if rate is None or rate < 0 or rate > 1:
                errors.append(ValidationError(
                    field="commission_rate",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_schedule_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate schedule parameters."""
        errors = []

        if "assignment" in params:
            value = params["assignment"]
            if value not in available_strategies():
                errors.append(ValidationError(
                    field="assignment",
                    message=f"Must be one of {', '.join(available_strategies())}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_display_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate display parameters."""
        errors = []

        if "currency_symbol" in params:
            value = params["currency_symbol"]
            if not isinstance(value, str):
                errors.append(ValidationError(
                    field="currency_symbol",
                    message="Must be a string",
                    value=value
                ))

        if "money_places" in params:
            value = params["money_places"]
            if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value < 0):
                errors.append(ValidationError(
                    field="money_places",
                    message="Must be a non-negative integer or null",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_sections(config: dict[str, Any]) -> list[ValidationError]:
        """Validate section names and setting names against the defaults."""
        errors = []

        for section, value in config.items():
            if section not in SECTION_FIELDS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=value
                ))
                continue

            if not isinstance(value, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=value
                ))
                continue

            for key in value:
                if key not in SECTION_FIELDS[section]:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown setting",
                        value=value[key]
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = ConfigValidator.validate_sections(config)
        if errors:
            return errors

        if "earnings" in config:
            errors.extend(ConfigValidator.validate_earnings_params(config["earnings"]))

        if "schedule" in config:
            errors.extend(ConfigValidator.validate_schedule_params(config["schedule"]))

        if "display" in config:
            errors.extend(ConfigValidator.validate_display_params(config["display"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
