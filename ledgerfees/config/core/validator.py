"""
Configuration validation framework.

This module provides validation capabilities for configuration data.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional, Callable

from ledgerfees.logger import get_ledgerfees_logger


class ConfigValidationError(Exception):
    """A single configuration validation failure."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        self.message = message
        self.field = field
        self.value = value
        super().__init__(message)


class ValidationResult:
    """Result of configuration validation."""

    def __init__(self, is_valid: bool = True, errors: Optional[List[ConfigValidationError]] = None):
        self.is_valid = is_valid
        self.errors = errors or []

    def add_error(self, error: ConfigValidationError):
        """Add a validation error."""
        self.errors.append(error)
        self.is_valid = False

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        for error in other.errors:
            self.add_error(error)
        return self

    def __bool__(self):
        return self.is_valid


class ConfigValidator(ABC):
    """Abstract base class for configuration validators."""

    def __init__(self, domain: str):
        self.domain = domain
        self.logger = get_ledgerfees_logger().bind(component=f"ConfigValidator_{domain}")

    @abstractmethod
    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """Validate configuration data."""
        pass


class SchemaValidator(ConfigValidator):
    """
    Schema-based configuration validator.

    The schema maps each key to an expected type (or tuple of types). Keys
    missing from the config are reported only when listed in ``required``.
    """

    def __init__(self, domain: str, schema: Dict[str, Any], required: Optional[List[str]] = None):
        super().__init__(domain)
        self.schema = schema
        self.required = set(required or [])

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """Validate configuration against schema."""
        result = ValidationResult()

        if not isinstance(config, dict):
            result.add_error(ConfigValidationError(
                f"{self.domain} configuration must be a mapping, got {type(config).__name__}"
            ))
            return result

        for key in self.required:
            if key not in config:
                result.add_error(ConfigValidationError(f"Missing required field: {key}", field=key))

        for key, value in config.items():
            if key not in self.schema:
                result.add_error(ConfigValidationError(f"Unknown field: {key}", field=key, value=value))
                continue

            expected_type = self.schema[key]
            # bool is an int subclass; never accept it for numeric fields
            if isinstance(value, bool) and bool not in _as_tuple(expected_type):
                valid = False
            else:
                valid = isinstance(value, expected_type)
            if not valid:
                result.add_error(ConfigValidationError(
                    f"Field {key} must be of type {_type_name(expected_type)}, got {type(value).__name__}",
                    field=key, value=value
                ))

        if not result.is_valid:
            self.logger.debug("Schema validation failed", errors=[e.message for e in result.errors])
        return result


class BusinessValidator(ConfigValidator):
    """Business logic validator for configuration data."""

    def __init__(self, domain: str, validation_rules: List[Callable[[Dict[str, Any]], Any]]):
        super().__init__(domain)
        self.validation_rules = validation_rules

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """Validate configuration using business rules."""
        result = ValidationResult()

        for rule in self.validation_rules:
            rule_result = rule(config)
            if isinstance(rule_result, ValidationResult):
                result.merge(rule_result)
            elif isinstance(rule_result, str):
                result.add_error(ConfigValidationError(rule_result))
            elif rule_result is False:
                result.add_error(ConfigValidationError(f"Business rule {rule.__name__} failed"))

        return result


def _as_tuple(expected_type) -> tuple:
    return expected_type if isinstance(expected_type, tuple) else (expected_type,)


def _type_name(expected_type) -> str:
    return " or ".join(t.__name__ for t in _as_tuple(expected_type))


class CompositeValidator(ConfigValidator):
    """Runs validators in order, stopping at the first one that fails."""

    def __init__(self, domain: str, validators: List[ConfigValidator]):
        super().__init__(domain)
        self.validators = validators

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        for validator in self.validators:
            result = validator.validate(config)
            if not result.is_valid:
                return result
        return ValidationResult()
