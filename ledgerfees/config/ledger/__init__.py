"""
Ledger configuration domain.

This module provides the target-network configuration: configuration
classes, validation schema and network presets.
"""

from .config import LedgerConfig, LedgerNetwork
from .schema import LEDGER_SCHEMA, get_ledger_validator, validate_ledger_config
from .presets import get_ledger_preset, list_available_ledger_presets

__all__ = [
    # Configuration classes
    'LedgerConfig',
    'LedgerNetwork',

    # Schema and validation
    'LEDGER_SCHEMA',
    'get_ledger_validator',
    'validate_ledger_config',

    # Presets
    'get_ledger_preset',
    'list_available_ledger_presets'
]
