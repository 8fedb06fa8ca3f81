"""Bit sequences over primitive values."""

from .byte import BITS_PER_BYTE, ByteBitSequence

__all__ = ["BITS_PER_BYTE", "ByteBitSequence"]
