"""
System configuration domain.
"""

from .config import SystemConfig, Environment, LOG_LEVELS, SYSTEM_SCHEMA, get_system_validator

__all__ = [
    'SystemConfig',
    'Environment',
    'LOG_LEVELS',
    'SYSTEM_SCHEMA',
    'get_system_validator'
]
