"""
Logging for the contraction-clock CLI.

Console messages go to stderr so they never interleave with the chart and
status panels on stdout. Unless ``[logging] enabled = false``, every record
is also written to a rotating file under ``~/.contraction-clock/logs``.
"""

import glob
import logging
import logging.config
import os
import sys

from pathlib import Path
from typing import Any

from contraction_clock.config import LoggingSettings, get_logging_settings
from contraction_clock.constants import DEFAULT_LOG_DIR, DEFAULT_LOG_FILE

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"

_logging_configured = False


def get_log_dir() -> Path:
    """Log directory, created owner-only on first use."""
    os.makedirs(DEFAULT_LOG_DIR, mode=0o700, exist_ok=True)
    return DEFAULT_LOG_DIR


def get_log_path() -> Path:
    """Path to the active log file."""
    return get_log_dir() / DEFAULT_LOG_FILE


def list_log_files() -> list[Path]:
    """The active log file and its rotated backups, whichever exist."""
    active = get_log_path()
    rotated = sorted(Path(p) for p in glob.glob(f"{active}.*"))
    return [path for path in [active, *rotated] if path.exists()]


def build_logging_config(
    settings: LoggingSettings, verbose: bool = False
) -> dict[str, Any]:
    """
    Build the dictConfig dictionary for one CLI invocation.

    The console shows warnings only (everything with ``verbose``) so the
    ``watch`` redraw is not interrupted by routine messages. SQLAlchemy is
    held at WARNING even in the file.

    Args:
        settings: Parsed [logging] section
        verbose: Show debug output on the console

    Returns:
        Dictionary for logging.config.dictConfig()
    """
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {"format": CONSOLE_FORMAT},
            "file": {"format": FILE_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": "DEBUG" if verbose else "WARNING",
                "formatter": "console",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "sqlalchemy": {"level": "WARNING"},
        },
        "root": {
            "level": "DEBUG",
            "handlers": ["console"],
        },
    }

    if settings.enabled:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": settings.level,
            "formatter": "file",
            "filename": str(get_log_path()),
            "maxBytes": settings.max_size_mb * 1024 * 1024,
            "backupCount": settings.backup_count,
            "encoding": "utf-8",
        }
        config["root"]["handlers"].append("file")

    return config


def setup_logging(*, verbose: bool = False) -> None:
    """
    Configure logging once per process.

    Falls back to console-only logging if the log file cannot be opened.

    Args:
        verbose: Show debug output on the console
    """
    global _logging_configured

    if _logging_configured:
        return

    try:
        logging.config.dictConfig(
            build_logging_config(get_logging_settings(), verbose=verbose)
        )
    except (OSError, ValueError) as e:
        sys.stderr.write(f"WARNING: Failed to configure logging: {e}\n")
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format=CONSOLE_FORMAT,
        )

    _logging_configured = True
