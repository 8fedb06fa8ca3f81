"""Built-in component orders.

Addressable LED chips disagree on channel order. WS2812/WS2812B and SK6812
take green, red, blue; APA106 and many PL9823 take red, green, blue; the
rest show up on less common parts and clones.
"""

from colorbits.models import Component

from .base import FixedOrder

RED = Component.RED
GREEN = Component.GREEN
BLUE = Component.BLUE


class OrderRGB(FixedOrder):
    """Red, green, blue."""

    components = (RED, GREEN, BLUE)


class OrderRBG(FixedOrder):
    """Red, blue, green."""

    components = (RED, BLUE, GREEN)


class OrderGRB(FixedOrder):
    """Green, red, blue. The WS2812 order."""

    components = (GREEN, RED, BLUE)


class OrderGBR(FixedOrder):
    """Green, blue, red."""

    components = (GREEN, BLUE, RED)


class OrderBRG(FixedOrder):
    """Blue, red, green."""

    components = (BLUE, RED, GREEN)


class OrderBGR(FixedOrder):
    """Blue, green, red."""

    components = (BLUE, GREEN, RED)


BUILTIN_ORDERS: tuple[type[FixedOrder], ...] = (
    OrderRGB,
    OrderRBG,
    OrderGRB,
    OrderGBR,
    OrderBRG,
    OrderBGR,
)
