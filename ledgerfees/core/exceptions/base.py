"""
Base exception classes for the ledgerfees package.
"""


class LedgerFeesError(Exception):
    """Base exception for all ledgerfees errors."""
    pass


class ValidationError(LedgerFeesError):
    """Base exception for validation errors."""

    def __init__(self, field: str, value=None, message: str = None):
        self.field = field
        self.value = value
        self.reason = message
        error_msg = f"Validation error for field '{field}'"
        if value is not None:
            error_msg += f" with value '{value}'"
        if message:
            error_msg += f": {message}"
        super().__init__(error_msg)


class ConfigurationError(LedgerFeesError):
    """Base exception for configuration errors."""

    def __init__(self, config_key: str = None, config_value: str = None, reason: str = None):
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason
        message = "Configuration error"
        if config_key:
            message += f" for '{config_key}'"
        if config_value:
            message += f" with value '{config_value}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class StateError(LedgerFeesError):
    """Base exception for operations attempted in the wrong state."""

    def __init__(self, entity: str, current_state: str, required_state: str = None, operation: str = None):
        self.entity = entity
        self.current_state = current_state
        self.required_state = required_state
        self.operation = operation

        message = f"{entity} is in state '{current_state}'"
        if operation:
            message += f" but operation '{operation}' is not allowed"
        if required_state:
            message += f" (requires state '{required_state}')"
        super().__init__(message)
