"""Named color constants.

Standard 8-bit RGB values (0-255 per channel) for common LED colors, so
callers can write `COLORS.ORANGE` instead of magic tuples.

Example:
    ```python
    from colorbits.colors import COLORS

    bits = list(COLORS.ORANGE.into_bits_grb())
    ```
"""

from typing import Optional

from colorbits.models import Color


class COLORS:
    """Standard color constants - 8-bit RGB (0-255)."""

    # ============================================================================
    # PRIMARY COLORS (Full saturation)
    # ============================================================================

    RED: Color = Color(red=255, green=0, blue=0)
    GREEN: Color = Color(red=0, green=255, blue=0)
    BLUE: Color = Color(red=0, green=0, blue=255)
    YELLOW: Color = Color(red=255, green=255, blue=0)
    MAGENTA: Color = Color(red=255, green=0, blue=255)
    CYAN: Color = Color(red=0, green=255, blue=255)

    WHITE: Color = Color(red=255, green=255, blue=255)
    """Pure white - all 24 bits set"""

    BLACK: Color = Color(red=0, green=0, blue=0)
    """Black (off) - all 24 bits clear"""

    # ============================================================================
    # SECONDARY COLORS
    # ============================================================================

    ORANGE: Color = Color(red=255, green=128, blue=0)
    PURPLE: Color = Color(red=128, green=0, blue=255)
    PINK: Color = Color(red=255, green=0, blue=128)
    LIME: Color = Color(red=128, green=255, blue=0)
    TEAL: Color = Color(red=0, green=255, blue=128)
    INDIGO: Color = Color(red=0, green=128, blue=255)

    # ============================================================================
    # GREYS
    # ============================================================================

    GREY_DARK: Color = Color(red=64, green=64, blue=64)
    GREY: Color = Color(red=128, green=128, blue=128)
    GREY_LIGHT: Color = Color(red=192, green=192, blue=192)

    # ============================================================================
    # WHITE BALANCE
    # ============================================================================

    WARM_WHITE: Color = Color(red=255, green=180, blue=107)
    """Roughly 3000K - incandescent look on RGB strips"""

    @classmethod
    def names(cls) -> list[str]:
        """Return the names of all color constants, lower-case and sorted."""
        return sorted(
            name.lower()
            for name, value in vars(cls).items()
            if isinstance(value, Color)
        )

    @classmethod
    def get(cls, name: str) -> Optional[Color]:
        """Look up a color constant by name (case-insensitive, '-' or '_')."""
        value = getattr(cls, name.upper().replace("-", "_"), None)
        return value if isinstance(value, Color) else None


__all__ = ["COLORS"]
