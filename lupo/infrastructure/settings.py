"""Settings for locating the data directory and configuring logs."""

from dataclasses import dataclass
import logging
import os
from pathlib import Path
from typing import Optional

import dotenv

from lupo.infrastructure.logging.logger import get_app_logger

DEFAULT_HOME = "~/.lupo"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class LupoSettings:
    """Runtime settings for the store and its command-line adapter.

    Attributes:
        home_dir: Default data directory.
        log_level: Minimum level of emitted log records.
        log_dir: Optional directory receiving dated log files.
    """

    home_dir: Path
    log_level: int = logging.WARNING
    log_dir: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "LupoSettings":
        """Build settings from the environment and an optional ``.env`` file.

        Returns:
            LupoSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        home_dir = cls._normalize_path(os.getenv("LUPO_HOME") or DEFAULT_HOME)
        raw_level = os.getenv("LUPO_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        log_level = cls._parse_level(raw_level, logger=logger)
        raw_log_dir = os.getenv("LUPO_LOG_DIR")
        log_dir = cls._normalize_path(raw_log_dir) if raw_log_dir else None
        return cls(home_dir=home_dir, log_level=log_level, log_dir=log_dir)

    @staticmethod
    def _normalize_path(raw_path: str) -> Path:
        return Path(raw_path).expanduser().resolve()

    @staticmethod
    def _parse_level(raw_level: str, logger) -> int:
        """Convert a level name such as ``INFO`` into its numeric value.

        Args:
            raw_level: Level name from the environment.
            logger: Logger used for warnings.

        Returns:
            int: Numeric level, WARNING when the name is unknown.
        """
        level = logging.getLevelName(raw_level.strip().upper())
        if isinstance(level, int):
            return level
        logger.warning(
            f"Unknown log level '{raw_level}', using {DEFAULT_LOG_LEVEL}"
        )
        return logging.WARNING


__all__ = ["LupoSettings"]
