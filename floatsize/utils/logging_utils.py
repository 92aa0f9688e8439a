"""Logging setup for floatsize.

Modules use the standard pattern:

    import logging
    logger = logging.getLogger(__name__)

The overlay owns the terminal, so nothing is logged to the console. Output
goes to a rotating file under ~/.config/floatsize instead.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_log_file() -> Path:
    # Inline path instead of FLOATSIZE_CONFIG_DIR: logging is set up before config loads
    log_dir = Path.home() / ".config" / "floatsize"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "floatsize.log"


def setup_logging(level: str = "INFO", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Route floatsize.* loggers to a rotating file.

    The root logger stays at WARNING to keep third-party libraries quiet.

    Returns:
        The ``floatsize`` package logger.
    """
    package_logger = logging.getLogger("floatsize")
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if package_logger.handlers:
        return package_logger

    try:
        handler = RotatingFileHandler(
            log_file or get_log_file(), maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
        )
    except OSError as e:
        # We can't log this failure since logging is what's failing
        print(f"Warning: logging setup failed: {e}", file=sys.stderr)
        return package_logger

    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    package_logger.addHandler(handler)
    logging.getLogger().setLevel(logging.WARNING)
    return package_logger
