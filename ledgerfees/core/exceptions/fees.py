"""
Fee schedule exceptions for the ledgerfees package.
"""

from .base import ValidationError, StateError


class StructuralValidationError(ValidationError):
    """Raised when a single field of a fee, fraction or identifier violates its local constraint."""

    def __init__(self, field: str, value=None, message: str = None, bound: str = None):
        self.bound = bound
        super().__init__(field, value, message)


class AggregateEmptyError(ValidationError):
    """Raised when a custom fee schedule holds no fee of any type."""

    def __init__(self):
        super().__init__(
            "custom_fees",
            None,
            "Custom fees configuration must contain at least one fee type"
        )


class FeeLimitExceededError(ValidationError):
    """Raised when a fee schedule holds more fees than the network accepts per token."""

    def __init__(self, fee_count: int, max_fees: int):
        self.fee_count = fee_count
        self.max_fees = max_fees
        super().__init__(
            "custom_fees",
            fee_count,
            f"a token may carry at most {max_fees} custom fees"
        )


class ConversionPreconditionError(StateError):
    """Raised when a fee schedule is converted before it has been validated."""

    def __init__(self, operation: str = "to_network_fees"):
        super().__init__("CustomFees", "unvalidated", "validated", operation)
