"""Error reporting for CLI commands."""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from colorbits.exceptions import ColorBitsError, format_error_for_display
from colorbits.models import AppConfig

logger = logging.getLogger(__name__)


def exit_with_error(error: Exception) -> NoReturn:
    """Show a clean error message and recovery hint, then exit with code 1."""
    logger.debug(f"Command failed: {error!r}")

    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    sys.exit(1)


def load_config(ctx: click.Context) -> AppConfig:
    """Load the configuration selected with --config, exiting on errors."""
    path: Path = ctx.obj["config_path"]
    try:
        return AppConfig.load_or_default(path)
    except (ColorBitsError, OSError) as e:
        logger.error(f"Failed to load configuration from {path}: {e}")
        exit_with_error(e)
