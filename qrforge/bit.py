"""Single QR modules and conversions between integers, bytes and bit sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Bit:
    """One module of a QR symbol: its colour and whether it belongs to a function pattern."""

    value: bool
    functional: bool = False

    def invert(self) -> Bit:
        """Return the bit with the opposite value and the same functional flag."""
        return Bit(not self.value, self.functional)


def bits_from_int(data: int, n_bits: int, functional: bool, reverse: bool) -> list[Bit]:
    """Split the low ``n_bits`` of ``data`` into bits.

    With ``reverse`` the most significant bit comes first, otherwise the least.
    """
    positions = range(n_bits - 1, -1, -1) if reverse else range(n_bits)
    return [Bit(bool(data & (1 << position)), functional) for position in positions]


def bits_to_bytes(bits: Sequence[Bit]) -> list[int]:
    """Pack bits into bytes, most significant bit first; a short last chunk is left-aligned."""
    result = []
    for start in range(0, len(bits), 8):
        byte = 0
        for shift, bit in enumerate(bits[start:start + 8]):
            byte |= int(bit.value) << (7 - shift)
        result.append(byte)
    return result


def bytes_to_bits(data: Iterable[int], size: int) -> list[Bit]:
    """Unpack bytes into non-functional bits, most significant first, keeping the first ``size``."""
    bits = [bit for byte in data for bit in bits_from_int(byte, 8, False, True)]
    return bits[:size]