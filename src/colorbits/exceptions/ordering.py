"""Component order exceptions.

This module defines exceptions for component order policies:
- OrderError: Base class for order errors
- MalformedOrderError: A policy does not visit each channel exactly once
- UnknownOrderError: No order is registered under the requested name
"""

from typing import Optional

from .base import ColorBitsError


class OrderError(ColorBitsError):
    """Component order policy is unusable."""
    pass


class MalformedOrderError(OrderError):
    """Order policy breaks the visit-each-channel-once contract."""

    def __init__(self, order_name: str, reason: str, visited: Optional[list] = None):
        """
        Initialize malformed order error.

        Args:
            order_name: Name of the offending policy class
            reason: What is wrong with the traversal
            visited: Components visited before the problem was found
        """
        visited = list(visited or [])
        path = " -> ".join(str(c.value) for c in visited) or "(nothing)"

        super().__init__(
            user_message=f"Component order '{order_name}' is malformed: {reason}",
            technical_message=f"Order {order_name} visited {path}: {reason}",
            recoverable=False,
            recovery_hint=(
                "first() and next() must visit red, green and blue exactly once, "
                "then next() must return None"
            ),
        )
        self.order_name = order_name
        self.reason = reason
        self.visited = visited


class UnknownOrderError(OrderError):
    """No component order is registered under the given name."""

    def __init__(self, name: str, available: Optional[list[str]] = None):
        """
        Initialize unknown order error.

        Args:
            name: The name that was looked up
            available: Registered order names, for the recovery hint
        """
        recovery = "Run 'colorbits orders' to see available orders"
        if available:
            recovery = f"Available orders: {', '.join(available)}\n" + recovery

        super().__init__(
            user_message=f"Unknown component order: '{name}'",
            technical_message=f"Order lookup failed for {name!r}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.name = name
        self.available = available or []
