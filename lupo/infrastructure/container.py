"""Composition root for wiring the store with its collaborators."""

from collections.abc import Callable
from pathlib import Path

from lupo.infrastructure.logging.logger import get_app_logger
from lupo.infrastructure.settings import LupoSettings
from lupo.infrastructure.tsv_store import TsvStore


def resolve_home_dir(home_dir: Path | str | None = None) -> Path:
    """Return ``home_dir`` or the configured default data directory."""
    if home_dir is not None:
        return Path(home_dir).expanduser()
    return LupoSettings.from_env().home_dir


def build_store(
    home_dir: Path | str | None = None,
    display: Callable[[str], None] | None = None,
) -> TsvStore:
    """Return a store attached to an existing data directory."""
    return TsvStore.open(
        resolve_home_dir(home_dir),
        logger=get_app_logger(),
        display=display,
    )


def init_store(
    home_dir: Path | str | None = None,
    force: bool = False,
    display: Callable[[str], None] | None = None,
) -> TsvStore:
    """Initialize a data directory and return its store."""
    return TsvStore.new(
        resolve_home_dir(home_dir),
        force=force,
        logger=get_app_logger(),
        display=display,
    )


__all__ = ["resolve_home_dir", "build_store", "init_store"]
