"""Enumerations for color channels."""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .color import Color


class Component(str, Enum):
    """Color channel selected while walking a color bit by bit."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"

    @property
    def letter(self) -> str:
        """Single upper-case letter used in order names (R, G, B)."""
        return self.value[0].upper()

    @classmethod
    def from_letter(cls, letter: str) -> "Component":
        """Look up a component by its letter (case-insensitive)."""
        for component in cls:
            if component.letter == letter.upper():
                return component
        raise ValueError(f"Unknown color component letter: {letter!r}")

    def select_from(self, color: "Color") -> int:
        """Return this channel's 8-bit value from `color`."""
        if self is Component.RED:
            return color.red
        elif self is Component.GREEN:
            return color.green
        else:
            return color.blue
