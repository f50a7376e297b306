"""
Configuration management system with domain-based architecture.

This module provides a domain-based configuration system with:
- System-level settings and logging
- Ledger network settings (fee limit, native currency)
- Core registry and provider infrastructure

Domain settings are read from ``<config_dir>/<domain>.yaml`` when present.
The directory defaults to ``settings`` and can be moved with the
``LEDGERFEES_CONFIG_DIR`` environment variable.
"""

import os
from typing import Optional

# Core infrastructure
from .core import (
    ConfigRegistry, ConfigProvider, FileConfigProvider, RuntimeConfigProvider,
    ConfigValidator, SchemaValidator, BusinessValidator, CompositeValidator,
    ConfigValidationError, ValidationResult
)

# Domain configurations
from .system import SystemConfig, Environment, get_system_validator

from .ledger import (
    LedgerConfig, LedgerNetwork, validate_ledger_config, get_ledger_validator,
    get_ledger_preset, list_available_ledger_presets
)


# Convenience functions
def get_config_registry(config_dir: Optional[str] = None) -> ConfigRegistry:
    """Create a configuration registry with the package domains registered."""
    if config_dir is None:
        config_dir = os.getenv("LEDGERFEES_CONFIG_DIR", "settings")
    registry = ConfigRegistry(config_dir)
    registry.register_domain("system", validator=get_system_validator())
    registry.register_domain("ledger", validator=get_ledger_validator())
    return registry


def get_system_config(registry: ConfigRegistry = None) -> SystemConfig:
    """Get the system configuration, environment overrides applied."""
    if registry is None:
        registry = get_config_registry()
    return SystemConfig.from_env(registry.get_config("system"))


def get_ledger_config(registry: ConfigRegistry = None) -> LedgerConfig:
    """Get the ledger network configuration."""
    if registry is None:
        registry = get_config_registry()
    return LedgerConfig.from_dict(registry.get_config("ledger"))


__all__ = [
    # Core infrastructure
    'ConfigRegistry',
    'ConfigProvider',
    'FileConfigProvider',
    'RuntimeConfigProvider',
    'ConfigValidator',
    'SchemaValidator',
    'BusinessValidator',
    'CompositeValidator',
    'ConfigValidationError',
    'ValidationResult',

    # System domain
    'SystemConfig',
    'Environment',

    # Ledger domain
    'LedgerConfig',
    'LedgerNetwork',
    'validate_ledger_config',
    'get_ledger_preset',
    'list_available_ledger_presets',

    # Convenience functions
    'get_config_registry',
    'get_system_config',
    'get_ledger_config'
]
