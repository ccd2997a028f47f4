"""Building satellite packets: MAC frame symbols plus Reed-Solomon parity."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .bitarray import CHAR_BITS, BitArray
from .reed_solomon import ReedSolomonEncoder

PACKET_MAX_SIZE = 44

DEVICE_ID_BITS = 34
SEQUENCE_NUMBER_BITS = 10
AUTH_TAG_BITS = 16
MAC_HEADER_SYMBOLS = 10
SYMBOL_BITS = 6

MAC_FRAME_SYMBOLS = (11, 13, 15, 17, 19, 21, 23, 25)
ERROR_CONTROL_SYMBOLS = (10, 10, 12, 12, 14, 14, 16, 16)
PACKET_TOTAL_SYMBOLS = (24, 26, 30, 32, 36, 38, 42, 44)

# Positions of the repeated length symbol within a packet.
LENGTH_SYMBOL_POSITIONS = frozenset({0, 9, 18})

_SEQUENCE_NUMBER_LIMIT = 1 << 16


@dataclass(frozen=True)
class SatPacket:
    """A packet as frequency-step symbols, without the preamble."""

    symbols: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "symbols", tuple(self.symbols))
        if len(self.symbols) > PACKET_MAX_SIZE:
            raise ValueError(f"a packet holds at most {PACKET_MAX_SIZE} symbols")

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[int]:
        return iter(self.symbols)


def max_payload_length() -> int:
    """Largest payload in bytes that fits in the biggest frame."""
    return (MAC_FRAME_SYMBOLS[-1] - MAC_HEADER_SYMBOLS) * SYMBOL_BITS // CHAR_BITS


def _frame_size_index(symbol_count: int) -> int:
    for index, frame_symbols in enumerate(MAC_FRAME_SYMBOLS):
        if symbol_count <= frame_symbols:
            return index
    raise ValueError(f"{symbol_count} symbols do not fit in any frame")


def _to_symbols(bits: BitArray) -> list[int]:
    chunks = zip(*[iter(bits)] * SYMBOL_BITS)
    return [
        sum(bit << (SYMBOL_BITS - 1 - position) for position, bit in enumerate(chunk))
        for chunk in chunks
    ]


class SatPacketEncoder:
    """Encodes payloads into packets, numbering them in sequence."""

    def __init__(self, sequence_number: int = 0) -> None:
        if not 0 <= sequence_number < _SEQUENCE_NUMBER_LIMIT:
            raise ValueError("sequence number must fit in 16 bits")
        self.sequence_number = sequence_number

    def encode(self, device_id: int, payload: bytes) -> SatPacket:
        """Build the packet carrying ``payload`` for ``device_id``."""
        payload = bytes(payload)
        if len(payload) > max_payload_length():
            raise ValueError(f"payload is longer than {max_payload_length()} bytes")
        if not 0 <= device_id < 1 << 64:
            raise ValueError("device id must fit in 64 bits")

        bits = BitArray()
        bits.append(device_id, DEVICE_ID_BITS)
        bits.append(self.sequence_number, SEQUENCE_NUMBER_BITS)
        self.sequence_number = (self.sequence_number + 1) % _SEQUENCE_NUMBER_LIMIT
        bits.append(0, AUTH_TAG_BITS)
        bits.append(payload, len(payload) * CHAR_BITS)

        # Alignment bit, then zero padding up to the next symbol boundary.
        bits.append(1, 1)
        bits.append(0, SYMBOL_BITS - len(bits) % SYMBOL_BITS)

        symbol_count = len(bits) // SYMBOL_BITS
        size_index = _frame_size_index(symbol_count)
        padding_symbols = MAC_FRAME_SYMBOLS[size_index] - symbol_count
        if padding_symbols > 0:
            bits.append(0, padding_symbols * SYMBOL_BITS)
            # Only one padding symbol takes part in the parity computation.
            symbol_count += 1

        symbols = _to_symbols(bits)
        encoder = ReedSolomonEncoder(ERROR_CONTROL_SYMBOLS[size_index] // 2)
        parity = encoder.encode(symbols[:symbol_count])

        body = iter(symbols + parity)
        packet_symbols = tuple(
            size_index if position in LENGTH_SYMBOL_POSITIONS else next(body)
            for position in range(PACKET_TOTAL_SYMBOLS[size_index])
        )
        return SatPacket(packet_symbols)