"""
floatsize UI configuration.

Handles persistence of UI preferences: theme selection and key overrides.
Config is stored in ~/.config/floatsize/ui_config.json
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .constants import DEFAULT_KEYMAP, FLOATSIZE_CONFIG_DIR

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "theme": "floatsize-dark",
    "keys": {},
}


def get_ui_config_path() -> Path:
    """
    Get path to UI config file.

    Returns:
        Path to ~/.config/floatsize/ui_config.json
    """
    FLOATSIZE_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return FLOATSIZE_CONFIG_DIR / "ui_config.json"


def load_ui_config() -> dict[str, Any]:
    """
    Load UI configuration from file.

    Returns:
        Config dict, or defaults if file doesn't exist or is invalid
    """
    path = get_ui_config_path()
    if path.exists():
        try:
            config = json.loads(path.read_text())
            if isinstance(config, dict):
                return {**DEFAULT_CONFIG, **config}
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable UI config {path}: {e}")
    return dict(DEFAULT_CONFIG)


def save_ui_config(config: dict[str, Any]) -> None:
    """
    Save UI configuration to file.

    Args:
        config: Configuration dict to save
    """
    path = get_ui_config_path()
    try:
        path.write_text(json.dumps(config, indent=2) + "\n")
    except OSError as e:
        # Config is non-critical
        logger.warning(f"Could not save UI config {path}: {e}")


def get_theme() -> str:
    return str(load_ui_config().get("theme", DEFAULT_CONFIG["theme"]))


def set_theme(theme_name: str) -> None:
    """
    Set and persist theme preference.

    Args:
        theme_name: Name of theme to set
    """
    config = load_ui_config()
    config["theme"] = theme_name
    save_ui_config(config)


def get_keymap() -> dict[str, str]:
    """Textual key name -> router key name, with user overrides applied.

    An override whose value is empty removes that key.
    """
    overrides = load_ui_config().get("keys", {})
    if not isinstance(overrides, dict):
        return dict(DEFAULT_KEYMAP)
    keymap = {**DEFAULT_KEYMAP, **{str(k): str(v) for k, v in overrides.items()}}
    return {key: action for key, action in keymap.items() if action}
