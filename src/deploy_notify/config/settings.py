"""Configuration management for deploy-notify.

Provides functions for loading and validating the optional JSON config
file that supplies defaults for webhook settings.
"""

import json
import sys
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple

from deploy_notify.errors import ConfigError
from deploy_notify.message.builder import DEFAULT_USERNAME
from deploy_notify.webhook.sender import DEFAULT_TIMEOUT

# File paths
CONFIG_FILE = Path.home() / ".config" / "deploy-notify" / "config.json"

# Default configuration values
DEFAULT_CONFIG = {
    "hook_url": None,
    "channel": None,
    "username": DEFAULT_USERNAME,
    "timeout": DEFAULT_TIMEOUT,
    "fail_on_error": False,
}

MAX_TIMEOUT = 120

# Config schema for validation
# Format: key -> (expected_types, validator_func or None)
# validator_func takes value and returns (is_valid, error_message)
ValidatorFunc = Callable[[Any], Tuple[bool, str]]

CONFIG_SCHEMA: dict[str, tuple[tuple, Optional[ValidatorFunc]]] = {
    "hook_url": (
        (str, type(None)),
        lambda v: (True, "")
        if v.startswith(("http://", "https://"))
        else (False, "must be a valid HTTP/HTTPS URL"),
    ),
    "channel": (
        (str, type(None)),
        lambda v: (True, "") if len(v) > 0 else (False, "must be a non-empty string or null"),
    ),
    "username": (
        (str,),
        lambda v: (True, "") if len(v) > 0 else (False, "must be a non-empty string"),
    ),
    "timeout": (
        (int, float),
        lambda v: (True, "")
        if 0 < v <= MAX_TIMEOUT
        else (False, f"must be between 0 and {MAX_TIMEOUT}"),
    ),
    "fail_on_error": ((bool,), None),
}


def validate_config(config: dict) -> List[str]:
    """Validate configuration against schema.

    Args:
        config: Configuration dictionary to validate.

    Returns:
        List of validation error messages. Empty list if valid.
    """
    errors = []

    for key in config:
        if key not in CONFIG_SCHEMA:
            errors.append(f"Unknown config key: '{key}'")

    for key, (expected_types, validator) in CONFIG_SCHEMA.items():
        if key not in config:
            continue

        value = config[key]

        # bool is an int subclass; keep it out of numeric fields
        if isinstance(value, bool) and bool not in expected_types:
            errors.append(f"'{key}' has invalid type: expected number, got bool")
            continue

        if not isinstance(value, expected_types):
            type_names = " or ".join(t.__name__ for t in expected_types)
            errors.append(
                f"'{key}' has invalid type: expected {type_names}, got {type(value).__name__}"
            )
            continue

        if validator and value is not None:
            is_valid, error_msg = validator(value)
            if not is_valid:
                errors.append(f"'{key}' {error_msg}")

    return errors


def load_config(
    config_file: Optional[Path] = None,
    silent: bool = False,
) -> dict:
    """Load configuration from file.

    An explicitly given file must exist and be valid. The default file is
    optional: when it is missing or broken, defaults are used and a warning
    is printed.

    Args:
        config_file: Optional path to config file. Defaults to CONFIG_FILE.
        silent: If True, suppress warning output. Default False.

    Returns:
        Configuration dictionary merged with defaults.

    Raises:
        ConfigError: If an explicitly given config file cannot be used.
    """
    explicit = config_file is not None
    if config_file is None:
        config_file = CONFIG_FILE

    if not config_file.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {config_file}")
        return DEFAULT_CONFIG.copy()

    try:
        with open(config_file) as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        if explicit:
            raise ConfigError(f"Cannot read config file {config_file}", details=str(e)) from e
        if not silent:
            print(f"Warning: Ignoring unreadable config file {config_file}: {e}", file=sys.stderr)
        return DEFAULT_CONFIG.copy()

    if not isinstance(config, dict):
        errors = [f"expected a JSON object, got {type(config).__name__}"]
    else:
        errors = validate_config(config)

    if errors:
        if explicit:
            raise ConfigError(
                f"Invalid config file {config_file}",
                details="; ".join(errors),
            )
        if not silent:
            print("Warning: Config validation errors:", file=sys.stderr)
            for error in errors:
                print(f"  - {error}", file=sys.stderr)
        return DEFAULT_CONFIG.copy()

    # Merge with defaults for any missing keys
    return {**DEFAULT_CONFIG, **config}


__all__ = [
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "CONFIG_SCHEMA",
    "MAX_TIMEOUT",
    "validate_config",
    "load_config",
]
