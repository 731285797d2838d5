"""Data encoding modes and their bit streams."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from qrforge.bit import Bit, bits_from_int

_ALPHANUMERIC_SPECIALS = {
    " ": 36,
    "$": 37,
    "%": 38,
    "*": 39,
    "+": 40,
    "-": 41,
    ".": 42,
    "/": 43,
    ":": 44,
}


class EncodingError(ValueError):
    """Raised when data cannot be encoded in the requested mode."""


def to_bits_str(data: str) -> list[Bit]:
    """Return the low byte of each character as eight bits, most significant first."""
    return [bit for char in data for bit in bits_from_int(ord(char) & 0xFF, 8, False, True)]


def to_bits_array(data: Iterable[int]) -> list[Bit]:
    """Return each byte as eight bits, most significant first."""
    return [bit for byte in data for bit in bits_from_int(byte & 0xFF, 8, False, True)]


def alphanumeric_value(c: str) -> int:
    """Return the alphanumeric-mode value of a character."""
    if "0" <= c <= "9" and len(c) == 1:
        return ord(c) - ord("0")
    if "A" <= c <= "Z" and len(c) == 1:
        return ord(c) - ord("A") + 10
    try:
        return _ALPHANUMERIC_SPECIALS[c]
    except KeyError:
        raise EncodingError(f"Invalid character: {c}") from None


def _encode_numeric(data: str) -> list[Bit]:
    bits: list[Bit] = []
    for start in range(0, len(data), 3):
        value = 0
        for digit in data[start:start + 3]:
            if not "0" <= digit <= "9":
                raise EncodingError(f"Invalid character: {digit}")
            value = value * 10 + ord(digit) - ord("0")
        bits.extend(bits_from_int(value, 10, False, True))
    return bits


def _encode_alphanumeric(data: str) -> list[Bit]:
    values = [alphanumeric_value(c) for c in data]
    bits: list[Bit] = []
    for start in range(0, len(values), 2):
        pair = values[start:start + 2]
        if len(pair) == 2:
            bits.extend(bits_from_int(pair[0] * 45 + pair[1], 11, False, True))
        else:
            bits.extend(bits_from_int(pair[0], 6, False, True))
    return bits


def _encode_byte(data: str) -> list[Bit]:
    for char in data:
        if ord(char) > 0xFF:
            raise EncodingError(f"Invalid character: {char}")
    return [bit for char in data for bit in bits_from_int(ord(char), 8, False, True)]


class Encoding(Enum):
    """Encoding modes, valued by their four-bit mode indicator."""

    NUMERIC = 0b0001
    ALPHANUMERIC = 0b0010
    BYTE = 0b0100
    KANJI = 0b1000

    def mod_indicator(self) -> list[Bit]:
        """Return the four-bit mode indicator."""
        return bits_from_int(self.value, 4, False, True)

    def encode(self, data: str) -> list[Bit]:
        """Encode ``data`` in this mode, raising EncodingError for unusable characters."""
        if self is Encoding.NUMERIC:
            return _encode_numeric(data)
        if self is Encoding.ALPHANUMERIC:
            return _encode_alphanumeric(data)
        if self is Encoding.BYTE:
            return _encode_byte(data)
        raise EncodingError("Kanji mode is not supported")