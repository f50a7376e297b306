"""
Configuration providers: where the raw settings of one domain live.

Providers hold the raw configuration mapping of one domain. Typed config
objects are built from that mapping by the domain modules.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional
from pathlib import Path
import threading

import yaml

from ledgerfees.logger import get_ledgerfees_logger
from .validator import ConfigValidator


class ConfigProvider(ABC):
    """Holds the raw settings mapping of one domain."""

    def __init__(self, domain: str, validator: Optional[ConfigValidator] = None):
        self.domain = domain
        self.validator = validator
        self.logger = get_ledgerfees_logger().bind(component=f"ConfigProvider_{domain}")
        self._lock = threading.RLock()

    @abstractmethod
    def get_config(self) -> Dict[str, Any]:
        """Current settings of the domain."""
        pass

    @abstractmethod
    def update_config(self, updates: Dict[str, Any]) -> bool:
        """Merge ``updates`` in; False when validation rejects the result."""
        pass

    @abstractmethod
    def reset_to_defaults(self) -> bool:
        """Drop every override."""
        pass

    def validate_config(self, config: Dict[str, Any]) -> bool:
        """Validate configuration data with the domain validator, if any."""
        if not isinstance(config, dict):
            return False
        if self.validator is None:
            return True

        result = self.validator.validate(config)
        if not result.is_valid:
            self.logger.warning("Config validation failed",
                                errors=[e.message for e in result.errors])
        return result.is_valid


class FileConfigProvider(ConfigProvider):
    """
    File-based configuration provider that reads from YAML files.

    A missing file yields an empty mapping, so every domain falls back to its
    dataclass defaults.
    """

    def __init__(self, domain: str, config_dir: str = "settings", validator: Optional[ConfigValidator] = None):
        super().__init__(domain, validator)
        self.config_dir = Path(config_dir)
        self._cache: Optional[Dict[str, Any]] = None
        self._mtime: Optional[float] = None

    @property
    def path(self) -> Path:
        """YAML file backing this domain."""
        return self.config_dir / f"{self.domain}.yaml"

    def get_config(self) -> Dict[str, Any]:
        """Current file contents, reloaded when the file changes."""
        with self._lock:
            self._refresh_cache()
            return self._cache.copy() if self._cache else {}

    def update_config(self, updates: Dict[str, Any]) -> bool:
        """Merge updates, validate, then write the file."""
        with self._lock:
            merged = self.get_config()
            merged.update(updates)

            if not self.validate_config(merged):
                return False

            try:
                self._save_config(merged)
            except OSError as e:
                self.logger.error("Failed to update config", error=str(e))
                return False
            self._cache = merged
            return True

    def reset_to_defaults(self) -> bool:
        """Delete the file so the domain falls back to its defaults."""
        with self._lock:
            try:
                if self.path.exists():
                    self.path.unlink()
            except OSError as e:
                self.logger.error("Failed to reset config", error=str(e))
                return False

            self._cache = None
            self._mtime = None
            return True

    def _refresh_cache(self):
        """Reload the file when its mtime moved forward."""
        if not self.path.exists():
            self._cache = None
            self._mtime = None
            return

        mtime = self.path.stat().st_mtime
        if self._mtime is None or mtime > self._mtime:
            with open(self.path, 'r') as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                raise ValueError(f"{self.path} must contain a mapping, got {type(loaded).__name__}")
            self._cache = loaded
            self._mtime = mtime
            self.logger.debug("Config loaded", path=str(self.path))

    def _save_config(self, config: Dict[str, Any]):
        self.path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.path, 'w') as f:
            yaml.safe_dump(config, f, default_flow_style=False, indent=2)


class RuntimeConfigProvider(ConfigProvider):
    """In-memory provider for programmatic overrides and tests."""

    def __init__(self, domain: str, initial_config: Optional[Dict[str, Any]] = None,
                 validator: Optional[ConfigValidator] = None):
        super().__init__(domain, validator)
        self._initial_config = dict(initial_config or {})
        self._config = dict(self._initial_config)

    def get_config(self) -> Dict[str, Any]:
        with self._lock:
            return self._config.copy()

    def update_config(self, updates: Dict[str, Any]) -> bool:
        with self._lock:
            merged = self._config.copy()
            merged.update(updates)

            if self.validate_config(merged):
                self._config = merged
                return True
            return False

    def reset_to_defaults(self) -> bool:
        """Reset to the configuration the provider was created with."""
        with self._lock:
            self._config = dict(self._initial_config)
            return True
