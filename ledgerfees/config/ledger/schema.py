"""
Ledger configuration validation schemas.
"""

from typing import Dict, Any

from ..core import (
    ConfigValidator, SchemaValidator, BusinessValidator, CompositeValidator,
    ConfigValidationError, ValidationResult
)
from .config import LedgerNetwork


LEDGER_SCHEMA = {
    'network': str,
    'max_custom_fees': int,
    'native_currency': str,
    'native_decimals': int,
    'enforce_fee_limit': bool
}


def _check_network(config: Dict[str, Any]):
    network = config.get('network')
    if network is not None and network not in {n.value for n in LedgerNetwork}:
        return f"Unknown ledger network: {network}"
    return None


def _check_limits(config: Dict[str, Any]) -> ValidationResult:
    result = ValidationResult()

    max_fees = config.get('max_custom_fees')
    if max_fees is not None and max_fees < 1:
        result.add_error(ConfigValidationError(
            "max_custom_fees must be at least 1", field='max_custom_fees', value=max_fees
        ))

    decimals = config.get('native_decimals')
    if decimals is not None and not 0 <= decimals <= 18:
        result.add_error(ConfigValidationError(
            "native_decimals must be between 0 and 18", field='native_decimals', value=decimals
        ))

    return result


def get_ledger_validator() -> ConfigValidator:
    """Schema then business validation for the ledger domain."""
    return CompositeValidator('ledger', [
        SchemaValidator('ledger', LEDGER_SCHEMA),
        BusinessValidator('ledger', [_check_network, _check_limits])
    ])


def validate_ledger_config(config_data: Dict[str, Any]) -> ValidationResult:
    """
    Validate ledger configuration data.

    Parameters
    ----------
    config_data : Dict[str, Any]
        Ledger configuration data to validate

    Returns
    -------
    ValidationResult
        Validation result with errors
    """
    return get_ledger_validator().validate(config_data)
