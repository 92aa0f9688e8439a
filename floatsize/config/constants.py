"""
Centralized constants for floatsize.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

FLOATSIZE_CONFIG_DIR = Path.home() / ".config" / "floatsize"

# Where the host is expected to write its workspace snapshot
DEFAULT_SNAPSHOT_PATH = FLOATSIZE_CONFIG_DIR / "snapshot.json"

# =============================================================================
# REFRESH
# =============================================================================

DEFAULT_POLL_INTERVAL_SECONDS = 1.0  # Snapshot file poll interval
MIN_POLL_INTERVAL_SECONDS = 0.1

# =============================================================================
# KEYS
# =============================================================================

# Textual key name -> semantic key understood by the router
DEFAULT_KEYMAP = {
    "down": "down",
    "up": "up",
    "enter": "enter",
    "escape": "escape",
    "delete": "delete",
    "ctrl+s": "resize_confirm",
    "ctrl+r": "resize_abort",
    "ctrl+e": "exit",
}

# =============================================================================
# ENVIRONMENT
# =============================================================================

DISPATCHERS = ["zellij", "dry-run"]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

ENV_VAR_DEFINITIONS = {
    "FLOATSIZE_SNAPSHOT": {
        "description": "Path of the JSON workspace snapshot to watch",
        "default": str(DEFAULT_SNAPSHOT_PATH),
        "valid_values": None,
    },
    "FLOATSIZE_POLL_INTERVAL": {
        "description": "Seconds between snapshot file polls",
        "default": str(DEFAULT_POLL_INTERVAL_SECONDS),
        "valid_values": None,
    },
    "FLOATSIZE_DISPATCHER": {
        "description": "How resize commands are delivered",
        "default": "zellij",
        "valid_values": DISPATCHERS,
    },
    "FLOATSIZE_LOG_LEVEL": {
        "description": "Log level for ~/.config/floatsize/floatsize.log",
        "default": "INFO",
        "valid_values": LOG_LEVELS,
    },
}
