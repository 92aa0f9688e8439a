"""Configuration utilities for floatsize."""

import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..exceptions import ConfigurationError
from .constants import (
    DEFAULT_POLL_INTERVAL_SECONDS,
    ENV_VAR_DEFINITIONS,
    MIN_POLL_INTERVAL_SECONDS,
)


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS or value is None:
        return True, None

    if name == "FLOATSIZE_POLL_INTERVAL":
        try:
            interval = float(value)
        except ValueError:
            return False, f"Invalid value '{value}' for {name}. Expected a number of seconds"
        if interval < MIN_POLL_INTERVAL_SECONDS:
            return False, f"{name} must be at least {MIN_POLL_INTERVAL_SECONDS}"
        return True, None

    valid_values = ENV_VAR_DEFINITIONS[name].get("valid_values")
    if valid_values is None:
        return True, None

    if value.lower() not in [v.lower() for v in valid_values]:
        return False, f"Invalid value '{value}' for {name}. Valid values: {valid_values}"

    return True, None


def validate_all_env_vars() -> List[str]:
    """Validate all FLOATSIZE_* environment variables.

    Returns:
        List of error messages (empty if all valid).
    """
    errors = []
    for name in ENV_VAR_DEFINITIONS:
        is_valid, error = validate_env_var(name, os.environ.get(name))
        if not is_valid:
            errors.append(error)
    return errors


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Get an environment variable with optional validation.

    Raises:
        ConfigurationError: If validate=True and the value is invalid.
    """
    value = os.environ.get(name)

    if validate and value is not None:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            raise ConfigurationError(error, setting=name)

    if value is None and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")

    return value


def get_snapshot_path() -> Path:
    return Path(get_env_var("FLOATSIZE_SNAPSHOT")).expanduser()


def get_poll_interval() -> float:
    value = get_env_var("FLOATSIZE_POLL_INTERVAL")
    return float(value) if value else DEFAULT_POLL_INTERVAL_SECONDS


def get_dispatcher_name() -> str:
    return get_env_var("FLOATSIZE_DISPATCHER").lower()


def get_log_level() -> str:
    return get_env_var("FLOATSIZE_LOG_LEVEL").upper()


def get_env_info() -> Dict[str, Dict]:
    """Describe every FLOATSIZE_* variable with its current value and validity."""
    info = {}
    for name, definition in ENV_VAR_DEFINITIONS.items():
        value = os.environ.get(name)
        is_valid, _ = validate_env_var(name, value)
        info[name] = {
            "description": definition.get("description", ""),
            "value": value,
            "is_set": value is not None,
            "valid": is_valid,
            "default": definition.get("default"),
        }
    return info
