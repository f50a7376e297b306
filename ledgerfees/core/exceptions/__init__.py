"""
Core exceptions for the ledgerfees package.

This module provides all exception classes used throughout the package,
organized by domain and with a clear inheritance hierarchy.
"""

# Base exceptions
from .base import (
    LedgerFeesError,
    ValidationError,
    ConfigurationError,
    StateError
)

# Fee schedule exceptions
from .fees import (
    StructuralValidationError,
    AggregateEmptyError,
    FeeLimitExceededError,
    ConversionPreconditionError
)

# Request exceptions
from .requests import RequestValidationError

__all__ = [
    # Base exceptions
    'LedgerFeesError',
    'ValidationError',
    'ConfigurationError',
    'StateError',

    # Fee schedule exceptions
    'StructuralValidationError',
    'AggregateEmptyError',
    'FeeLimitExceededError',
    'ConversionPreconditionError',

    # Request exceptions
    'RequestValidationError'
]
