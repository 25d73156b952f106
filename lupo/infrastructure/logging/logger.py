"""Logging helpers for the store and its command-line adapter.

Loggers are configured through ``LoggerBuilder`` and exposed as a process-wide
singleton through ``get_app_logger``. Components accept an optional logger and
fall back to the application logger.
"""

from datetime import date
import logging
from pathlib import Path
import sys
from typing import Callable, Optional

DEFAULT_FORMAT = "%(message)s"
TIMESTAMP_FORMAT = "%(asctime)s %(message)s"

FormatterFactory = Callable[[], logging.Formatter]
FileHandlerFactory = Callable[[Path, logging.Formatter], logging.Handler]
ConsoleHandlerFactory = Callable[[logging.Formatter], logging.Handler]


class LoggerBuilder:
    """Fluent builder for configured ``logging.Logger`` instances."""

    def __init__(self) -> None:
        self._name = "lupo"
        self._subdir = ""
        self._prefix = "lupo"
        self._console = True
        self._level = logging.WARNING
        self._log_dir: Optional[Path] = None
        self._formatter: FormatterFactory = self._default_formatter
        self._file_handler: FileHandlerFactory = self._default_file_handler
        self._console_handler: ConsoleHandlerFactory = (
            self._default_console_handler
        )

    def name(self, name: str) -> "LoggerBuilder":
        self._name = name
        return self

    def subdir(self, subdir: str) -> "LoggerBuilder":
        self._subdir = subdir
        return self

    def prefix(self, prefix: str) -> "LoggerBuilder":
        self._prefix = prefix
        return self

    def console(self, enabled: bool) -> "LoggerBuilder":
        self._console = enabled
        return self

    def level(self, level: int) -> "LoggerBuilder":
        self._level = level
        return self

    def log_dir(self, log_dir: Optional[Path]) -> "LoggerBuilder":
        """Enable file logging under ``log_dir``; None disables it."""
        self._log_dir = log_dir
        return self

    def formatter(self, factory: FormatterFactory) -> "LoggerBuilder":
        self._formatter = factory
        return self

    def file_handler(self, factory: FileHandlerFactory) -> "LoggerBuilder":
        self._file_handler = factory
        return self

    def console_handler(
        self,
        factory: ConsoleHandlerFactory,
    ) -> "LoggerBuilder":
        self._console_handler = factory
        return self

    def build(self) -> logging.Logger:
        """Return the configured logger.

        Handlers are attached only once, so building twice with the same
        name returns the same, unchanged logger.

        Returns:
            logging.Logger: Logger with console and optional file handlers.
        """
        logger = logging.getLogger(self._name)
        if logger.handlers:
            return logger
        logger.setLevel(self._level)
        logger.propagate = False
        fmt = self._formatter()
        if self._log_dir is not None:
            log_path = self.log_path(self._log_dir)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            logger.addHandler(self._file_handler(log_path, fmt))
        if self._console:
            logger.addHandler(self._console_handler(fmt))
        return logger

    def log_path(self, log_dir: Path) -> Path:
        """Return the dated log file path under ``log_dir``."""
        directory = log_dir / self._subdir if self._subdir else log_dir
        return directory / f"{self._today_stamp()}_{self._prefix}.log"

    @staticmethod
    def _today_stamp() -> str:
        return date.today().strftime("%Y%m%d")

    @staticmethod
    def _default_formatter() -> logging.Formatter:
        return logging.Formatter(DEFAULT_FORMAT)

    @staticmethod
    def _default_file_handler(
        path: Path,
        fmt: logging.Formatter,
    ) -> logging.Handler:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(fmt)
        return handler

    @staticmethod
    def _default_console_handler(fmt: logging.Formatter) -> logging.Handler:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(fmt)
        return handler


class Logger:
    """Singleton wrapper around a built ``logging.Logger``."""

    _instance: Optional["Logger"] = None

    def __new__(cls, name: str = "lupo", log_dir: Optional[Path] = None):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.logger = (
                LoggerBuilder().name(name).prefix(name).log_dir(log_dir).build()
            )
            cls._instance = instance
        return cls._instance

    def __init__(self, name: str = "lupo", log_dir: Optional[Path] = None):
        pass

    def set_level(self, level: int) -> None:
        """Change the level of the wrapped logger."""
        self.logger.setLevel(level)

    def add_file_handler(self, log_dir: Path) -> None:
        """Also write records to a dated file under ``log_dir``."""
        log_path = LoggerBuilder().prefix(self.logger.name).log_path(log_dir)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        self.logger.addHandler(
            LoggerBuilder._default_file_handler(
                log_path,
                LoggerBuilder._default_formatter(),
            )
        )

    def set_formatter(self, fmt: logging.Formatter) -> None:
        """Apply a formatter to every handler of the wrapped logger."""
        for handler in self.logger.handlers:
            handler.setFormatter(fmt)

    def debug(self, msg: str) -> None:
        self.logger.debug(msg)

    def info(self, msg: str) -> None:
        self.logger.info(msg)

    def warning(self, msg: str) -> None:
        self.logger.warning(msg)

    def error(self, msg: str) -> None:
        self.logger.error(msg)

    def critical(self, msg: str) -> None:
        self.logger.critical(msg)


class AppLogger(Logger):
    """Diagnostics emitted by the store."""

    _instance: Optional["AppLogger"] = None


def get_app_logger() -> AppLogger:
    """Return the application logger singleton."""
    return AppLogger("lupo")


def configure_app_logger(
    level: int,
    log_dir: Optional[Path] = None,
    timestamp: bool = False,
) -> AppLogger:
    """Apply runtime options to the application logger.

    Args:
        level: Minimum level of emitted records.
        log_dir: Directory receiving a dated log file, if any.
        timestamp: Whether to prefix records with their time.

    Returns:
        AppLogger: The configured application logger.
    """
    logger = get_app_logger()
    logger.set_level(level)
    if timestamp:
        logger.set_formatter(logging.Formatter(TIMESTAMP_FORMAT))
    if log_dir is not None:
        logger.add_file_handler(log_dir)
    return logger


__all__ = [
    "LoggerBuilder",
    "Logger",
    "AppLogger",
    "get_app_logger",
    "configure_app_logger",
]
