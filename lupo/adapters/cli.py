"""Command-line interface for the lupo data store.

Usage:
    lupo init [--force]        # Create the data directory and its files
    lupo check                 # Validate every trade and stock
    lupo trades [SUBSTRING]    # List trades whose stock matches
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from lupo.domain.errors import LupoError
from lupo.infrastructure.container import build_store, init_store
from lupo.infrastructure.logging.logger import (
    configure_app_logger,
    get_app_logger,
)
from lupo.infrastructure.settings import LupoSettings

_VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def _resolve_level(default: int, verbose: int, quiet: bool) -> int:
    """Map the verbosity flags onto a logging level.

    Args:
        default: Level used when no flag is given.
        verbose: Number of ``-v`` flags.
        quiet: Whether ``-q`` was given.

    Returns:
        int: Logging level to apply.
    """
    if quiet:
        return logging.ERROR
    if not verbose:
        return default
    return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS) - 1)]


def format_error_chain(error: BaseException) -> str:
    """Render an error followed by each of its chained causes."""
    message = str(error)
    cause = error.__cause__
    while cause is not None:
        message += f"\n\tcaused by: {cause}"
        cause = cause.__cause__
    return message


def _run(action) -> None:
    """Run ``action``, turning store errors into a non-zero exit."""
    try:
        action()
    except LupoError as exc:
        get_app_logger().error(format_error_chain(exc))
        sys.exit(1)


@click.group()
@click.option(
    "--directory",
    "-d",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Data directory (defaults to LUPO_HOME or ~/.lupo)",
)
@click.option("--verbose", "-v", count=True, help="Increase log verbosity")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors")
@click.option("--timestamp", "-t", is_flag=True, help="Timestamp log lines")
@click.pass_context
def main(
    ctx: click.Context,
    directory: Optional[Path],
    verbose: int,
    quiet: bool,
    timestamp: bool,
) -> None:
    """Lupo - local store for trades and stock metadata."""
    settings = LupoSettings.from_env()
    configure_app_logger(
        _resolve_level(settings.log_level, verbose, quiet),
        log_dir=settings.log_dir,
        timestamp=timestamp,
    )
    ctx.obj = directory or settings.home_dir


@main.command()
@click.option("--force", is_flag=True, help="Delete the directory first")
@click.pass_obj
def init(home_dir: Path, force: bool) -> None:
    """Create the data directory and its files."""

    def action() -> None:
        store = init_store(home_dir, force=force)
        click.echo(f"Data directory: {store.home_dir}")

    _run(action)


@main.command()
@click.pass_obj
def check(home_dir: Path) -> None:
    """Validate every trade and stock."""

    def action() -> None:
        build_store(home_dir, display=click.echo).check()

    _run(action)


@main.command()
@click.argument("name_substring", required=False)
@click.pass_obj
def trades(home_dir: Path, name_substring: Optional[str]) -> None:
    """List trades whose stock contains NAME_SUBSTRING."""

    def action() -> None:
        build_store(home_dir, display=click.echo).trades(name_substring)

    _run(action)


if __name__ == "__main__":  # pragma: no cover
    main()
