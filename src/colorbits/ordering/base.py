"""Component order policies.

A component order decides which channel of a color is turned into bits
first, which one follows, and when the color is done. Policies are
stateless classes used directly, never instantiated:

    ColorBitSequence(color, OrderGRB)

Policy author contract: starting at `first()` and repeatedly calling
`next()` must visit red, green and blue exactly once each and then return
None. `ColorBitSequence` trusts this and does not check it while
iterating; a policy that cycles, skips a channel or stops early produces
the wrong number of bits. Use `validate_order()` to check a policy up front.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from colorbits.models import Component


class ComponentOrder(ABC):
    """Specifies the iteration order of color components."""

    @classmethod
    @abstractmethod
    def first(cls) -> Component:
        """Return the first color component."""

    @classmethod
    @abstractmethod
    def next(cls, current: Component) -> Optional[Component]:
        """Return the component after `current`, or None if it was the last."""

    @classmethod
    def name(cls) -> str:
        """Short display name of the order."""
        return cls.__name__


class FixedOrder(ComponentOrder):
    """Component order read from a `components` tuple.

    Subclasses only declare the tuple:

        class OrderGRB(FixedOrder):
            components = (Component.GREEN, Component.RED, Component.BLUE)
    """

    components: ClassVar[tuple[Component, ...]] = ()

    @classmethod
    def first(cls) -> Component:
        return cls.components[0]

    @classmethod
    def next(cls, current: Component) -> Optional[Component]:
        position = cls.components.index(current)
        if position + 1 < len(cls.components):
            return cls.components[position + 1]
        return None

    @classmethod
    def name(cls) -> str:
        return "".join(component.letter for component in cls.components)
