"""Bit sequence over the three channels of a color."""

from typing import Optional

from colorbits.bits import BITS_PER_BYTE, ByteBitSequence
from colorbits.models import Color, Component
from colorbits.ordering import ComponentOrder, OrderGRB


class ColorBitSequence:
    """Iterates the 24 bits of a color using a component order policy.

    Each channel is emitted MSB first; channels follow the order given by
    `order.first()` and `order.next()`. One embedded ByteBitSequence is
    reseeded for every channel.

    Example:
        >>> bits = ColorBitSequence(Color(red=255, green=0, blue=0), OrderGRB)
        >>> "".join("1" if b else "0" for b in bits)
        '000000001111111100000000'
    """

    def __init__(self, color: Color, order: type[ComponentOrder] = OrderGRB):
        self._color = color
        self._order = order
        self._component: Optional[Component] = order.first()
        self._bits = ByteBitSequence.from_byte(self._component.select_from(color))

    @property
    def color(self) -> Color:
        return self._color

    @property
    def order(self) -> type[ComponentOrder]:
        return self._order

    @property
    def cursor(self) -> Optional[Component]:
        """Channel currently being emitted, or None once the color is done."""
        return self._component

    @property
    def remaining(self) -> int:
        """Bits still to come: the current channel plus 8 per channel after it."""
        if self._component is None:
            return 0
        count = self._bits.remaining
        component = self._order.next(self._component)
        # bounded so a cycling order cannot hang
        for _ in range(len(Component)):
            if component is None:
                break
            count += BITS_PER_BYTE
            component = self._order.next(component)
        return count

    def reset_to(self, color: Color) -> None:
        """Restart on `color` from the first channel, reusing this sequence."""
        self._color = color
        self._component = self._order.first()
        self._bits.reset_to(self._component.select_from(color))

    def __iter__(self) -> "ColorBitSequence":
        return self

    def __next__(self) -> bool:
        if self._bits.remaining:
            return next(self._bits)

        if self._component is None:
            raise StopIteration

        self._component = self._order.next(self._component)
        if self._component is None:
            raise StopIteration

        # start on the next channel
        self._bits.reset_to(self._component.select_from(self._color))
        return next(self._bits)

    def __length_hint__(self) -> int:
        return self.remaining

    def __repr__(self) -> str:
        cursor = self._component.value if self._component else None
        return (
            f"ColorBitSequence(color={self._color.to_hex()}, order={self._order.name()}, "
            f"cursor={cursor}, remaining={self.remaining})"
        )
