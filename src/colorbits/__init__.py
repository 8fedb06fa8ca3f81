"""colorbits: 24-bit colors as MSB-first bit streams for addressable LEDs."""

__version__ = "0.1.0"

from .bits import ByteBitSequence
from .models import Color, Component
from .ordering import ComponentOrder, OrderGRB, get_order
from .sequence import ColorBitSequence

__all__ = [
    "ByteBitSequence",
    "Color",
    "ColorBitSequence",
    "Component",
    "ComponentOrder",
    "OrderGRB",
    "get_order",
]
