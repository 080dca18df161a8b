"""Configuration management for resultboard."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .core.classify import BoardSettings

logger = logging.getLogger(__name__)

RESULTBOARD_HOME = Path(os.environ.get("RESULTBOARD_HOME", Path.home() / "resultboard"))
CONFIG_FILE = RESULTBOARD_HOME / "config" / "resultboard.conf"
DATA_DIR = RESULTBOARD_HOME / "data"

DEFAULT_TIMEZONE = "Asia/Kolkata"


@dataclass
class Config:
    """resultboard configuration."""

    timezone: str = DEFAULT_TIMEZONE
    recent_window_minutes: int = 120
    suppression_threshold_minutes: int = 30
    default_limit: int = 3
    # HTTP result store; the file store under data_dir is used when empty
    store_url: str = ""
    store_token: str = ""
    store_timeout: float = 10.0
    data_dir: str = ""

    def board_settings(self) -> BoardSettings:
        """Engine settings derived from this config."""
        return BoardSettings(
            recent_window_minutes=self.recent_window_minutes,
            suppression_threshold_minutes=self.suppression_threshold_minutes,
            default_limit=self.default_limit,
        )

    def tzinfo(self) -> ZoneInfo:
        """Reference timezone; falls back to the default on unknown names."""
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown timezone {self.timezone!r}, using {DEFAULT_TIMEZONE}")
            return ZoneInfo(DEFAULT_TIMEZONE)

    def data_path(self) -> Path:
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return DATA_DIR


def _parse_int(key: str, value: str, default: int) -> int:
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key.upper()}: {value!r}")
        return default


def load_config() -> Config:
    """Load configuration from resultboard.conf file."""
    config = Config()

    if not CONFIG_FILE.exists():
        return config

    for line in CONFIG_FILE.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value.startswith('"') or value.startswith("'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "timezone":
                config.timezone = value
            case "recent_window_minutes":
                config.recent_window_minutes = _parse_int(key, value, config.recent_window_minutes)
            case "suppression_threshold_minutes":
                config.suppression_threshold_minutes = _parse_int(
                    key, value, config.suppression_threshold_minutes
                )
            case "default_limit":
                config.default_limit = _parse_int(key, value, config.default_limit)
            case "store_url":
                config.store_url = value.rstrip("/")
            case "store_token":
                config.store_token = value
            case "store_timeout":
                try:
                    config.store_timeout = float(value)
                except ValueError:
                    logger.warning(f"Invalid number for STORE_TIMEOUT: {value!r}")
            case "data_dir":
                config.data_dir = value
            case _:
                logger.debug(f"Ignoring unknown config key {key!r}")

    return config
