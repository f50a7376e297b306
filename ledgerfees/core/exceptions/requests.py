"""
Request-level exceptions for the ledgerfees package.
"""

from .base import ValidationError


class RequestValidationError(ValidationError):
    """Raised when a request or its envelope carries an invalid field."""

    def __init__(self, request_type: str, field: str, value=None, message: str = None):
        self.request_type = request_type
        super().__init__(f"{request_type}.{field}", value, message)
