"""Component order registry.

Maps order names (as used in config files and on the command line) to
component order policy classes. The six built-in orders are registered
under their channel letters ("RGB", "GRB", ...) on import.
"""

import logging

from colorbits.exceptions import UnknownOrderError

from .base import ComponentOrder, FixedOrder
from .orders import (
    BUILTIN_ORDERS,
    OrderBGR,
    OrderBRG,
    OrderGBR,
    OrderGRB,
    OrderRBG,
    OrderRGB,
)
from .validation import validate_order

logger = logging.getLogger(__name__)

# Registry of orders
# Format: "NAME": OrderClass
ORDERS: dict[str, type[ComponentOrder]] = {}


def register_order(name: str, order: type[ComponentOrder], validate: bool = True) -> None:
    """
    Register a component order under `name`.

    Args:
        name: Order name, stored upper-case
        order: Component order policy class
        validate: Check the policy with validate_order() before registering

    Raises:
        MalformedOrderError: If validate is True and the policy is malformed
    """
    if validate:
        validate_order(order)
    ORDERS[name.upper()] = order
    logger.debug(f"Registered component order {name.upper()} -> {order.__name__}")


def get_order(name: str) -> type[ComponentOrder]:
    """
    Get an order class by name (case-insensitive).

    Raises:
        UnknownOrderError: If no order is registered under `name`
    """
    order = ORDERS.get(name.upper())
    if order is None:
        raise UnknownOrderError(name, available=sorted(ORDERS))
    return order


def list_orders() -> dict[str, type[ComponentOrder]]:
    """Return a copy of the registry, sorted by name."""
    return dict(sorted(ORDERS.items()))


def _register_builtin_orders() -> None:
    """Register built-in orders. Called on module import."""
    for order in BUILTIN_ORDERS:
        register_order(order.name(), order)


_register_builtin_orders()

__all__ = [
    "ORDERS",
    "ComponentOrder",
    "FixedOrder",
    "OrderBGR",
    "OrderBRG",
    "OrderGBR",
    "OrderGRB",
    "OrderRBG",
    "OrderRGB",
    "get_order",
    "list_orders",
    "register_order",
    "validate_order",
]
