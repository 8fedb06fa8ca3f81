"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from colorbits import __version__
from colorbits.models.config import DEFAULT_CONFIG_PATH

from .commands import config, encode, orders

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = Path.home() / ".colorbits" / "logs" / "colorbits.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> logging.Handler:
    """
    Configure logging for the application.

    Messages go to a rotating log file, never to stdout, so encoded bits
    stay clean: DEFAULT_LOG_PATH normally, ./colorbits-debug.log with
    --debug, or the --log-file path.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)

    Returns:
        The installed handler, to be passed to teardown_logging()
    """
    if debug:
        level = logging.DEBUG
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Override with explicit log level if provided
    if log_file:
        level = getattr(logging, log_level.upper())

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if debug and not log_file:
        log_path = Path.cwd() / "colorbits-debug.log"
    elif log_file:
        log_path = log_file
    else:
        log_path = DEFAULT_LOG_PATH

    log_path.parent.mkdir(parents=True, exist_ok=True)
    # Rotating file handler (keeps last 5 files, max 10MB each)
    handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )

    handler.setLevel(level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return handler


def teardown_logging(handler: logging.Handler) -> None:
    """Detach and close a handler installed by setup_logging()."""
    logging.getLogger().removeHandler(handler)
    handler.close()


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="colorbits")
@click.option(
    '--config', '-c',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help='Configuration file'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./colorbits-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path (default: ~/.colorbits/logs/colorbits.log)'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_path: Path,
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    colorbits - turn 24-bit colors into MSB-first bit streams for addressable LEDs.

    Each color becomes 24 bits, one channel at a time, in the channel order
    your LED chip expects (GRB for WS2812).

    \b
    Examples:
      # Encode pure red for a WS2812 strip
      colorbits encode 255 0 0

      # Same color, RGB order, as high/low levels
      colorbits encode --hex ff0000 --order rgb --format levels

      # Named color as a JSON list
      colorbits encode --name orange --format json

      # Show the available channel orders
      colorbits orders

      # Change the default order
      colorbits config set --default-order rgb
    """
    handler = setup_logging(verbose, debug, log_file, log_level)
    ctx.call_on_close(lambda: teardown_logging(handler))
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


cli.add_command(encode)
cli.add_command(orders)
cli.add_command(config)

if __name__ == "__main__":
    cli()
