"""Bit sequences over colors."""

from .color import ColorBitSequence

__all__ = ["ColorBitSequence"]
