"""
System domain configuration classes.

Process-level settings: environment name and logging. Every value can be
overridden through environment variables:

    LEDGERFEES_ENV        development | test | staging | production
    LEDGERFEES_LOG_LEVEL  DEBUG, INFO, WARNING, ERROR, CRITICAL. Default: INFO
    LEDGERFEES_JSON_LOGS  "1"/"true" for JSON log lines
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Mapping, Optional

from ledgerfees.core.exceptions import ConfigurationError
from ..core import (
    SchemaValidator, BusinessValidator, CompositeValidator, ConfigValidator,
    ValidationResult, ConfigValidationError
)


class Environment(Enum):
    """Environment types."""
    DEVELOPMENT = "development"
    TEST = "test"
    STAGING = "staging"
    PRODUCTION = "production"


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

SYSTEM_SCHEMA = {
    'environment': str,
    'debug': bool,
    'log_level': str,
    'json_logs': bool
}


@dataclass
class SystemConfig:
    """System-level settings for the ledgerfees package."""
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False
    log_level: str = "INFO"
    json_logs: bool = False

    def __post_init__(self):
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError("log_level", self.log_level, f"must be one of {', '.join(LOG_LEVELS)}")
        self.log_level = self.log_level.upper()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'environment': self.environment.value,
            'debug': self.debug,
            'log_level': self.log_level,
            'json_logs': self.json_logs
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SystemConfig':
        config = cls()
        if 'environment' in data:
            try:
                config.environment = Environment(data['environment'])
            except ValueError:
                raise ConfigurationError("environment", data['environment'], "unknown environment")
        config.debug = data.get('debug', config.debug)
        config.log_level = data.get('log_level', config.log_level)
        config.json_logs = data.get('json_logs', config.json_logs)
        config.__post_init__()
        return config

    @classmethod
    def from_env(cls, base: Optional[Dict[str, Any]] = None, environ: Optional[Mapping[str, str]] = None) -> 'SystemConfig':
        """Build the config from ``base`` with environment variable overrides applied."""
        environ = os.environ if environ is None else environ
        data = dict(base or {})

        if environ.get('LEDGERFEES_ENV'):
            data['environment'] = environ['LEDGERFEES_ENV']
        if environ.get('LEDGERFEES_LOG_LEVEL'):
            data['log_level'] = environ['LEDGERFEES_LOG_LEVEL']
        if environ.get('LEDGERFEES_JSON_LOGS'):
            data['json_logs'] = environ['LEDGERFEES_JSON_LOGS'].lower() in ('1', 'true', 'yes')

        return cls.from_dict(data)


def _check_log_level(config: Dict[str, Any]) -> ValidationResult:
    result = ValidationResult()
    level = config.get('log_level')
    if level is not None and str(level).upper() not in LOG_LEVELS:
        result.add_error(ConfigValidationError(f"Unknown log level: {level}", field='log_level', value=level))
    return result


def _check_environment(config: Dict[str, Any]):
    environment = config.get('environment')
    if environment is not None and environment not in {e.value for e in Environment}:
        return f"Unknown environment: {environment}"
    return None


def get_system_validator() -> ConfigValidator:
    """Schema then business validation for the system domain."""
    return CompositeValidator('system', [
        SchemaValidator('system', SYSTEM_SCHEMA),
        BusinessValidator('system', [_check_log_level, _check_environment])
    ])
