"""Encode command implementation."""

import json
import logging
from collections.abc import Iterable
from typing import Optional

import click

from colorbits.bits import BITS_PER_BYTE
from colorbits.colors import COLORS
from colorbits.exceptions import ColorBitsError
from colorbits.models import AppConfig, Color
from colorbits.ordering import get_order
from colorbits.sequence import ColorBitSequence

from ..errors import exit_with_error, load_config

logger = logging.getLogger(__name__)


def format_bits(bits: Iterable[bool], config: AppConfig, output_format: Optional[str] = None) -> str:
    """
    Render a bit stream as text.

    Args:
        bits: Bits to render, in transmission order
        config: Supplies grouping and level symbols
        output_format: "bits", "levels" or "json" (defaults to config.output_format)
    """
    output_format = output_format or config.output_format
    values = list(bits)

    if output_format == "json":
        return json.dumps(values)

    if output_format == "levels":
        symbols = [config.high_symbol if bit else config.low_symbol for bit in values]
    else:
        symbols = ["1" if bit else "0" for bit in values]

    if not config.group_channels:
        return "".join(symbols)

    groups = [
        "".join(symbols[i:i + BITS_PER_BYTE])
        for i in range(0, len(symbols), BITS_PER_BYTE)
    ]
    return " ".join(groups)


def _resolve_color(channels: tuple[int, ...], hex_value: Optional[str], name: Optional[str]) -> Color:
    """Build the color from exactly one of the three input styles."""
    given = sum([bool(channels), hex_value is not None, name is not None])
    if given != 1:
        raise click.UsageError("Give the color as RED GREEN BLUE, --hex or --name (exactly one)")

    if channels:
        if len(channels) != 3:
            raise click.UsageError(f"Expected 3 channel values (RED GREEN BLUE), got {len(channels)}")
        return Color.from_rgb(*channels)

    if hex_value is not None:
        try:
            return Color.from_hex(hex_value)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--hex") from e

    color = COLORS.get(name)
    if color is None:
        raise click.BadParameter(
            f"Unknown color name '{name}'. Known names: {', '.join(COLORS.names())}",
            param_hint="--name",
        )
    return color


@click.command(name="encode")
@click.argument("channels", nargs=-1, type=click.IntRange(0, 255))
@click.option("--hex", "hex_value", default=None, help="Color as hex, e.g. ff8000 or '#FF8000'")
@click.option("--name", "-n", default=None, help="Named color, e.g. orange or warm-white")
@click.option("--order", "-o", default=None, help="Channel order, e.g. GRB (default: from config)")
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["bits", "levels", "json"], case_sensitive=False),
    default=None,
    help="Output format (default: from config)",
)
@click.pass_context
def encode(
    ctx,
    channels: tuple[int, ...],
    hex_value: Optional[str],
    name: Optional[str],
    order: Optional[str],
    output_format: Optional[str],
):
    """
    Print the 24 bits of a color, MSB first, in LED channel order.

    \b
    Examples:
      colorbits encode 255 170 225
      colorbits encode --hex ff8000 --order rgb
      colorbits encode --name teal --format levels
    """
    config = load_config(ctx)
    color = _resolve_color(channels, hex_value, name)

    try:
        order_class = get_order(order or config.default_order)
    except ColorBitsError as e:
        exit_with_error(e)

    logger.info(f"Encoding {color.to_hex()} with order {order_class.name()}")
    bits = ColorBitSequence(color, order_class)
    click.echo(format_bits(bits, config, output_format.lower() if output_format else None))
