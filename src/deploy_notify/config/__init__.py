"""Configuration management.

Modules:
    settings: Config loading and validation
"""

from deploy_notify.config.settings import (
    CONFIG_FILE,
    CONFIG_SCHEMA,
    DEFAULT_CONFIG,
    MAX_TIMEOUT,
    load_config,
    validate_config,
)

__all__ = [
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "CONFIG_SCHEMA",
    "MAX_TIMEOUT",
    "validate_config",
    "load_config",
]
