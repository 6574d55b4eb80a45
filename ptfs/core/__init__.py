"""
ptfs Core Module

Shared configuration for backends and wrappers.
"""

from .config_loader import (
    ConfigLoader,
    Config,
    MemFSConfig,
    LoggingConfig,
    get_config,
    validate_config,
    configure_logging,
)

__all__ = [
    'ConfigLoader',
    'Config',
    'MemFSConfig',
    'LoggingConfig',
    'get_config',
    'validate_config',
    'configure_logging',
]
