"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_source_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate document source parameters."""
        errors = []

        # Validate timeout_seconds
        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                errors.append(ValidationError(
                    field="timeout_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        # Validate encoding
        if "encoding" in params:
            value = params["encoding"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="encoding",
                    message="Must be a non-empty string",
                    value=value
                ))

        # Validate user_agent
        if "user_agent" in params:
            value = params["user_agent"]
            if not isinstance(value, str):
                errors.append(ValidationError(
                    field="user_agent",
                    message="Must be a string",
                    value=value
                ))

        # Validate max_bytes
        if "max_bytes" in params:
            value = params["max_bytes"]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                errors.append(ValidationError(
                    field="max_bytes",
                    message="Must be a positive integer",
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

        for flag in ("format_json", "include_timestamp"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=flag,
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_tour_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate tour parameters."""
        errors = []

        if "min_amount" in params:
            value = params["min_amount"]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                errors.append(ValidationError(
                    field="min_amount",
                    message="Must be a non-negative number",
                    value=value
                ))

        if "html_source" in params:
            value = params["html_source"]
            if value is not None and (not isinstance(value, str) or not value.strip()):
                errors.append(ValidationError(
                    field="html_source",
                    message="Must be a non-empty string or null",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "source" in config:
            errors.extend(ConfigValidator.validate_source_params(config["source"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        if "tour" in config:
            errors.extend(ConfigValidator.validate_tour_params(config["tour"]))

        return errors
