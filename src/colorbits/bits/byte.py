"""Bit-wise iteration over a single byte."""

import operator

MSB_MASK = 0b1000_0000
BYTE_MASK = 0xFF
BITS_PER_BYTE = 8


class ByteBitSequence:
    """Iterates the bits of an 8-bit value from MSB to LSB, one bool per bit.

    The sequence can be pointed at a new value at any time with `reset_to()`,
    which lets a single instance walk many bytes without being rebuilt.

    Example:
        >>> list(ByteBitSequence.from_byte(0b1010_1010))
        [True, False, True, False, True, False, True, False]
    """

    def __init__(self) -> None:
        """Create an empty sequence. Use `from_byte()` to start with a value."""
        self._value = 0
        self._remaining = 0

    @classmethod
    def empty(cls) -> "ByteBitSequence":
        """Create a sequence with no bits left.

        Pulling from it always ends the iteration, so it can stand in
        until the first real value is known.
        """
        return cls()

    @classmethod
    def from_byte(cls, value: int) -> "ByteBitSequence":
        """Create a sequence over the 8 bits of `value`."""
        sequence = cls.empty()
        sequence.reset_to(value)
        return sequence

    def reset_to(self, value: int) -> None:
        """Restart on `value` with all 8 bits remaining.

        Valid in any state. Bits of the previous value that were not
        read yet are dropped.

        Raises:
            TypeError: If value is not an integer
            ValueError: If value is not in 0-255
        """
        value = operator.index(value)
        if not 0 <= value <= BYTE_MASK:
            raise ValueError(f"Byte value must be between 0 and 255, got {value}")
        self._value = value
        self._remaining = BITS_PER_BYTE

    @property
    def value(self) -> int:
        """Working value; the next bit to emit sits in the MSB position."""
        return self._value

    @property
    def remaining(self) -> int:
        """Exact number of bits still to be produced (0-8)."""
        return self._remaining

    def size_hint(self) -> tuple[int, int]:
        """Lower and upper bound on the bits still to come. Always equal."""
        return (self._remaining, self._remaining)

    def __iter__(self) -> "ByteBitSequence":
        return self

    def __next__(self) -> bool:
        if self._remaining == 0:
            raise StopIteration

        bit = bool(self._value & MSB_MASK)
        # advance to next bit
        self._remaining -= 1
        self._value = (self._value << 1) & BYTE_MASK
        return bit

    def __len__(self) -> int:
        return self._remaining

    def __length_hint__(self) -> int:
        return self._remaining

    def __repr__(self) -> str:
        return f"ByteBitSequence(value=0b{self._value:08b}, remaining={self._remaining})"
