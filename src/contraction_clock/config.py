"""Configuration management for contraction_clock."""

import logging
import os
import tomllib

from pathlib import Path
from typing import Any, Literal

import tomli_w

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from contraction_clock.constants import (
    APP_DIR,
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_MAX_SIZE_MB,
)
from contraction_clock.constants import SessionConstants as SC

logger = logging.getLogger(__name__)


class LoggingSettings(BaseModel):
    """The [logging] section: rotating log file options."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(default=True, description="Write the log file")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default=DEFAULT_LOG_LEVEL, description="Log file level"
    )
    max_size_mb: int = Field(
        default=DEFAULT_LOG_MAX_SIZE_MB, ge=1, description="Rotate after this size"
    )
    backup_count: int = Field(
        default=DEFAULT_LOG_BACKUP_COUNT, ge=0, description="Rotated files to keep"
    )

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


def get_config_path() -> Path:
    """
    Get the path to the configuration file.

    Returns:
        Path to ~/.contraction-clock/config.toml
    """
    return APP_DIR / "config.toml"


def load_config() -> dict[str, Any]:
    """
    Load configuration from TOML file.

    Returns:
        Configuration dictionary. Returns empty dict if file doesn't exist
        or is corrupted.
    """
    config_path = get_config_path()

    if not config_path.exists():
        return {}

    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except Exception as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        logger.warning("Treating config as empty. Fix or delete the file to resolve.")
        return {}


def save_config(config: dict[str, Any]) -> None:
    """
    Save configuration to TOML file using atomic write.

    Creates the parent directory if it doesn't exist.
    Uses temp file + rename for atomic operation.

    Raises:
        PermissionError: If directory cannot be created or file cannot be written
    """
    config_path = get_config_path()

    config_dir = config_path.parent
    try:
        os.makedirs(config_dir, exist_ok=True)
    except PermissionError as e:
        raise PermissionError(
            f"Cannot create config directory {config_dir}: {e}"
        ) from e

    temp_path = config_path.with_suffix(".toml.tmp")

    try:
        with open(temp_path, "wb") as f:
            tomli_w.dump(config, f)

        os.replace(temp_path, config_path)

    except Exception:
        if temp_path.exists():
            temp_path.unlink()
        raise


def get_rule_name() -> str | None:
    """
    Get the configured timing rule name.

    Returns:
        Rule name (e.g., "411"), or None if not set
    """
    config = load_config()
    name: str | None = config.get("clock", {}).get("rule")
    return name


def set_rule_name(name: str) -> None:
    """Persist the timing rule name in the [clock] section."""
    config = load_config()
    config.setdefault("clock", {})["rule"] = name
    save_config(config)


def unset_rule_name() -> None:
    """
    Remove the timing rule setting.

    Drops the [clock] section if it becomes empty, and deletes the config
    file if nothing is left.
    """
    config = load_config()

    if "clock" in config and "rule" in config["clock"]:
        del config["clock"]["rule"]

        if not config["clock"]:
            del config["clock"]

        if not config:
            config_path = get_config_path()
            if config_path.exists():
                config_path.unlink()
        else:
            save_config(config)


def get_default_intensity() -> int:
    """
    Intensity used for a fresh session.

    Falls back to the built-in default when unset or out of range.
    """
    value = load_config().get("clock", {}).get("default_intensity")
    if (
        isinstance(value, int)
        and not isinstance(value, bool)
        and SC.INTENSITY_MIN <= value <= SC.INTENSITY_MAX
    ):
        return value
    if value is not None:
        logger.warning(f"Ignoring invalid default_intensity in config: {value!r}")
    return SC.DEFAULT_INTENSITY


def get_follow_mode() -> bool:
    """
    Whether charts follow the latest contraction (default: True).

    Only a TOML boolean is accepted; anything else is ignored with a warning.
    """
    value = load_config().get("display", {}).get("follow")
    if isinstance(value, bool):
        return value
    if value is not None:
        logger.warning(f"Ignoring invalid display.follow in config: {value!r}")
    return True


def get_logging_settings() -> LoggingSettings:
    """
    Read the [logging] section.

    Invalid values are reported and the built-in defaults used instead.
    """
    section = load_config().get("logging", {})
    if not isinstance(section, dict):
        logger.warning(f"Ignoring [logging] config that is not a table: {section!r}")
        return LoggingSettings()

    try:
        return LoggingSettings.model_validate(section)
    except ValidationError as e:
        logger.warning(f"Ignoring invalid [logging] config: {e}")
        return LoggingSettings()
