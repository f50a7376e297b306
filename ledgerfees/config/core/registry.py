"""
Configuration registry for managing domain-specific configurations.

This module provides a centralized registry for configuration management
across the package's domains (system, ledger).
"""

import threading
from typing import Dict, Any, Optional, List
from pathlib import Path

from .provider import ConfigProvider, FileConfigProvider
from .validator import ConfigValidator
from ledgerfees.logger import get_ledgerfees_logger


class ConfigRegistry:
    """
    Central registry for domain-specific configuration management.

    This registry manages configuration providers for different domains
    and provides a unified interface for configuration operations.
    """

    def __init__(self, config_dir: str = "settings"):
        self.config_dir = Path(config_dir)
        self.logger = get_ledgerfees_logger().bind(component="ConfigRegistry")
        self._lock = threading.RLock()

        self._providers: Dict[str, ConfigProvider] = {}
        self._validators: Dict[str, ConfigValidator] = {}

    def register_domain(self, domain: str, provider: Optional[ConfigProvider] = None,
                        validator: Optional[ConfigValidator] = None) -> ConfigProvider:
        """
        Register a domain with its configuration provider.

        Args:
            domain: Domain name (e.g., 'system', 'ledger')
            provider: Optional custom provider, defaults to FileConfigProvider
            validator: Optional validator applied on every update

        Returns:
            The registered configuration provider
        """
        with self._lock:
            if validator is None:
                validator = self._validators.get(domain)
            if provider is None:
                provider = FileConfigProvider(domain, str(self.config_dir), validator)
            elif validator is not None and provider.validator is None:
                provider.validator = validator

            self._providers[domain] = provider
            if validator is not None:
                self._validators[domain] = validator
            self.logger.debug("Domain registered", domain=domain, provider_type=type(provider).__name__)

            return provider

    def get_provider(self, domain: str) -> ConfigProvider:
        """
        Get configuration provider for a domain.

        Unknown domains are registered on first use with a file provider.
        """
        with self._lock:
            if domain not in self._providers:
                return self.register_domain(domain)

            return self._providers[domain]

    def get_validator(self, domain: str) -> Optional[ConfigValidator]:
        """Get validator for a domain."""
        return self._validators.get(domain)

    def get_config(self, domain: str) -> Dict[str, Any]:
        """Get configuration for a domain."""
        return self.get_provider(domain).get_config()

    def update_config(self, domain: str, updates: Dict[str, Any]) -> bool:
        """Update configuration for a domain."""
        return self.get_provider(domain).update_config(updates)

    def list_domains(self) -> List[str]:
        """List all registered domains."""
        with self._lock:
            return list(self._providers.keys())

    def reset_all(self):
        """Reset all domains and clear registry."""
        with self._lock:
            for provider in self._providers.values():
                provider.reset_to_defaults()

            self._providers.clear()
            self._validators.clear()

            self.logger.debug("Registry reset completed")
