"""Fixed-capacity bit array used to pack satellite packet fields."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Union

CHAR_BITS = 8
MAX_SYMBOLS = 77
MAX_BITS = MAX_SYMBOLS * CHAR_BITS

BitSource = Union[bytes, bytearray, memoryview, int]


class BitArray:
    """An append-only sequence of bits with a fixed capacity.

    Bit ``i`` is stored in byte ``i // 8`` at position ``i % 8`` (LSB first).
    """

    def __init__(self) -> None:
        self._value = 0
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        value = self._value
        for _ in range(self._length):
            yield value & 1
            value >>= 1

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._length:
            raise IndexError(f"bit index {index} out of range (length {self._length})")

    def append(self, data: BitSource, bit_count: int) -> None:
        """Append the low ``bit_count`` bits of ``data``, most significant first.

        ``data`` is either an integer or bytes read as a little-endian integer;
        bits beyond the supplied bytes are zero.
        """
        if bit_count < 0:
            raise ValueError("bit count must not be negative")
        if self._length + bit_count >= MAX_BITS:
            raise ValueError(
                f"appending {bit_count} bits would exceed the capacity of {MAX_BITS} bits"
            )
        if isinstance(data, int):
            if data < 0:
                raise ValueError("integer data must not be negative")
            source = data
        else:
            source = int.from_bytes(bytes(data), "little")
        for bit in reversed(range(bit_count)):
            if (source >> bit) & 1:
                self._value |= 1 << self._length
            self._length += 1

    def get_bit(self, index: int) -> int:
        """Return the bit at ``index`` (0 or 1)."""
        self._check_index(index)
        return (self._value >> index) & 1

    def set_bit(self, index: int, value: int) -> None:
        """Set the bit at ``index``; any non-zero ``value`` sets it to 1."""
        self._check_index(index)
        if value:
            self._value |= 1 << index
        else:
            self._value &= ~(1 << index)

    def to_bytes(self) -> bytes:
        """Return the packed bits, LSB first within each byte."""
        return self._value.to_bytes((self._length + CHAR_BITS - 1) // CHAR_BITS, "little")