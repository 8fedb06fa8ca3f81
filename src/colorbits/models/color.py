"""Color model for LED bit streams."""

import string
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from colorbits.ordering import ComponentOrder
    from colorbits.sequence import ColorBitSequence


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    Three independent 0-255 channels. The model is frozen, so a color
    handed to a bit sequence cannot change underneath it, and colors are
    hashable for use as dict keys.
    """

    model_config = ConfigDict(frozen=True)

    red: int = Field(ge=0, le=255, description="Red (0-255)")
    green: int = Field(ge=0, le=255, description="Green (0-255)")
    blue: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> "Color":
        """Create a color from positional channel values."""
        return cls(red=red, green=green, blue=blue)

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(red=0, green=0, blue=0)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse a CSS hex color string such as '#FF8000' or 'ff8000'.

        Raises:
            ValueError: If the string is not exactly six hex digits
        """
        digits = value[1:] if value.startswith("#") else value
        if len(digits) != 6:
            raise ValueError(f"Hex color must have 6 digits: {value!r}")
        if any(c not in string.hexdigits for c in digits):
            raise ValueError(f"Invalid hex color: {value!r}")
        channels = [int(digits[i:i + 2], 16) for i in (0, 2, 4)]
        return cls.from_rgb(*channels)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000').

        Example:
            >>> Color(red=255, green=0, blue=0).to_hex()
            '#FF0000'
        """
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

    def into_bits(self, order: type["ComponentOrder"]) -> "ColorBitSequence":
        """Iterate the 24 bits of this color in the channel order of `order`."""
        from colorbits.sequence import ColorBitSequence

        return ColorBitSequence(self, order)

    def into_bits_grb(self) -> "ColorBitSequence":
        """Iterate the 24 bits of this color green first, then red, then blue.

        This is the channel order WS2812 style LEDs expect.

        Example:
            >>> bits = list(Color(red=255, green=255, blue=255).into_bits_grb())
            >>> bits == [True] * 24
            True
        """
        from colorbits.ordering import OrderGRB

        return self.into_bits(OrderGRB)
