"""
Structural validation for fee schedule values.

Validators are stateless and only check a field against its local constraint.
They never resolve whether an account or token exists on the ledger.
"""

from typing import Optional, Union

from ..core.exceptions import StructuralValidationError
from ..core.identifiers import AccountId, TokenId


class FeeValidator:
    """Validates the individual fields of fee schedule values."""

    @staticmethod
    def validate_non_negative_int(field: str, value) -> int:
        """
        Validate an amount expressed in the smallest unit of its denomination.

        Raises:
            StructuralValidationError: If the value is not an int or is negative
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise StructuralValidationError(
                field, value, f"must be an integer, got {type(value).__name__}"
            )
        if value < 0:
            raise StructuralValidationError(
                field, value, "must be non-negative", bound=">= 0"
            )
        return value

    @staticmethod
    def validate_fraction(numerator, denominator, field: str = "amount") -> None:
        """
        Validate the two halves of a fraction.

        Raises:
            StructuralValidationError: If numerator < 0 or denominator <= 0
        """
        FeeValidator.validate_non_negative_int(f"{field}.numerator", numerator)
        if isinstance(denominator, bool) or not isinstance(denominator, int):
            raise StructuralValidationError(
                f"{field}.denominator", denominator,
                f"must be an integer, got {type(denominator).__name__}"
            )
        if denominator <= 0:
            raise StructuralValidationError(
                f"{field}.denominator", denominator,
                "must be greater than zero", bound="> 0"
            )

    @staticmethod
    def validate_is_fraction(field: str, value) -> None:
        from .fraction import Fraction

        if not isinstance(value, Fraction):
            raise StructuralValidationError(
                field, value, f"must be a Fraction, got {type(value).__name__}"
            )

    @staticmethod
    def validate_bounds(minimum, maximum) -> None:
        """
        Validate the minimum/maximum clamp of a fractional fee.

        A maximum of zero means the fee is uncapped.

        Raises:
            StructuralValidationError: If either bound is negative or maximum < minimum
        """
        FeeValidator.validate_non_negative_int("minimum", minimum)
        FeeValidator.validate_non_negative_int("maximum", maximum)
        if maximum != 0 and maximum < minimum:
            raise StructuralValidationError(
                "maximum", maximum,
                f"must be greater than or equal to minimum ({minimum})",
                bound=f">= {minimum}"
            )

    @staticmethod
    def validate_mapping(field: str, value) -> dict:
        """Payload sections handed to ``from_dict`` must be mappings."""
        if not isinstance(value, dict):
            raise StructuralValidationError(
                field, value, f"must be a mapping, got {type(value).__name__}"
            )
        return value

    @staticmethod
    def validate_flag(field: str, value) -> bool:
        if not isinstance(value, bool):
            raise StructuralValidationError(
                field, value, f"must be a boolean, got {type(value).__name__}"
            )
        return value

    @staticmethod
    def validate_collector(value) -> None:
        from .base import FeeCollector

        if not isinstance(value, FeeCollector):
            raise StructuralValidationError(
                "collector", value, f"must be a FeeCollector, got {type(value).__name__}"
            )

    @staticmethod
    def validate_account_id(value: Union[AccountId, str], field: str = "collector_account_id") -> AccountId:
        return AccountId.parse(value, field)

    @staticmethod
    def validate_token_id(value: Optional[Union[TokenId, str]], field: str = "denominating_token_id") -> Optional[TokenId]:
        """Parse an optional token id; ``None`` and ``""`` both mean absent."""
        if value is None or value == "":
            return None
        return TokenId.parse(value, field)
