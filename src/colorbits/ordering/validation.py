"""Up-front checking of component order policies."""

import logging
from typing import Optional

from colorbits.exceptions import MalformedOrderError
from colorbits.models import Component

from .base import ComponentOrder

logger = logging.getLogger(__name__)


def validate_order(order: type[ComponentOrder]) -> tuple[Component, ...]:
    """
    Walk `order` from `first()` and check it visits every channel once.

    The walk is bounded: a repeated component is reported as soon as it
    shows up, so a cycling policy cannot loop forever.

    Args:
        order: Component order policy class

    Returns:
        The components in visiting order

    Raises:
        MalformedOrderError: If the policy repeats or skips a component,
            returns something that is not a Component, or raises while
            being walked
    """
    name = order.name()
    visited: list[Component] = []

    try:
        current: Optional[Component] = order.first()
        while current is not None:
            if not isinstance(current, Component):
                raise MalformedOrderError(name, f"returned {current!r}, not a Component", visited)
            if current in visited:
                raise MalformedOrderError(name, f"visits {current.value} twice", visited)
            visited.append(current)
            current = order.next(current)
    except (LookupError, ValueError) as e:
        raise MalformedOrderError(name, f"raised {type(e).__name__}: {e}", visited) from e

    if len(visited) != len(Component):
        missing = ", ".join(c.value for c in Component if c not in visited)
        raise MalformedOrderError(name, f"never visits {missing}", visited)

    logger.debug(f"Order {name} is valid: {' -> '.join(c.value for c in visited)}")
    return tuple(visited)
