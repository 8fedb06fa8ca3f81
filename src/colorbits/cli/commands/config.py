"""
Config command implementation.

Commands:
    - config show [--field FIELD]           # Display configuration
    - config set --option VALUE ...         # Update configuration
    - config reset [--field FIELD]          # Reset to defaults
"""

import logging
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from colorbits.exceptions import ErrorContext, wrap_pydantic_error
from colorbits.models import AppConfig

from ..errors import exit_with_error, load_config

logger = logging.getLogger(__name__)

FIELD_NAMES = list(AppConfig.model_fields)


def _save(config: AppConfig, path: Path) -> None:
    try:
        with ErrorContext(f"save config to {path}", logger_instance=logger):
            config.save(path)
    except OSError as e:
        exit_with_error(e)


@click.group(name="config")
def config():
    """Show and change colorbits settings."""
    pass


@config.command(name="show")
@click.option("--field", type=click.Choice(FIELD_NAMES), default=None, help="Show a single field")
@click.pass_context
def show(ctx, field: Optional[str]):
    """Display the current configuration."""
    app_config = load_config(ctx)
    path = ctx.obj["config_path"]

    if field:
        click.echo(getattr(app_config, field))
        return

    click.echo(f"Configuration ({path}):\n")
    for name, info in AppConfig.model_fields.items():
        click.echo(f"  {name}: {getattr(app_config, name)}")
        if info.description:
            click.echo(f"      {info.description}")


@config.command(name="set")
@click.option("--default-order", default=None, help="Default channel order, e.g. GRB")
@click.option(
    "--output-format",
    type=click.Choice(["bits", "levels", "json"], case_sensitive=False),
    default=None,
    help="Default output format",
)
@click.option("--group-channels/--no-group-channels", default=None, help="Space between channels in text output")
@click.option("--high-symbol", default=None, help="Symbol for a set bit in levels output")
@click.option("--low-symbol", default=None, help="Symbol for a clear bit in levels output")
@click.pass_context
def set_values(ctx, **options):
    """Update configuration values and save."""
    app_config = load_config(ctx)
    path = ctx.obj["config_path"]

    updates = {name: value for name, value in options.items() if value is not None}
    if not updates:
        raise click.UsageError("Nothing to set. See 'colorbits config set --help'.")

    try:
        updated = AppConfig.model_validate({**app_config.model_dump(), **updates})
    except ValidationError as e:
        exit_with_error(wrap_pydantic_error(e, str(path)))

    _save(updated, path)
    for name in updates:
        click.echo(f"{name} = {getattr(updated, name)}")
    logger.info(f"Updated configuration fields: {', '.join(updates)}")


@config.command(name="reset")
@click.option("--field", type=click.Choice(FIELD_NAMES), default=None, help="Reset a single field")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def reset(ctx, field: Optional[str], yes: bool):
    """Reset configuration to defaults."""
    path = ctx.obj["config_path"]
    defaults = AppConfig()

    if field:
        app_config = load_config(ctx)
        updated = app_config.model_copy(update={field: getattr(defaults, field)})
        _save(updated, path)
        click.echo(f"{field} = {getattr(updated, field)}")
        return

    if not yes:
        click.confirm(f"Reset all settings in {path}?", abort=True)

    _save(defaults, path)
    click.echo("Configuration reset to defaults")
