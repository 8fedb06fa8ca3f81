"""Orders command implementation."""

import click

from colorbits.exceptions import collect_errors
from colorbits.models import Component
from colorbits.ordering import list_orders, validate_order

from ..errors import load_config


@click.command(name="orders")
@click.option("--check", is_flag=True, help="Validate every registered order and report problems")
@click.pass_context
def orders(ctx, check: bool):
    """List available channel orders."""
    config = load_config(ctx)
    registered = list_orders()

    click.echo("Available channel orders:\n")
    for name, order in registered.items():
        marker = "  [Default]" if name == config.default_order else ""
        channels = " -> ".join(c.value for c in _walk(order))
        click.echo(f"  {name:<4} {channels}{marker}")

    if not check:
        return

    collector = collect_errors("check orders")
    for name, order in registered.items():
        with collector.try_operation(f"check {name}"):
            validate_order(order)

    click.echo()
    click.echo(collector.get_summary())
    if collector.has_errors:
        ctx.exit(1)


def _walk(order):
    """Components of an order in visiting order, stopping after one full pass."""
    components = []
    current = order.first()
    while current is not None and len(components) < len(Component):
        components.append(current)
        current = order.next(current)
    return components
