"""Turning input text into the final codeword bit stream and the finished symbol."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from qrforge.bit import Bit, bits_from_int, bits_to_bytes, bytes_to_bits
from qrforge.ec import EcLevel, codewords
from qrforge.encoding import Encoding, to_bits_array
from qrforge.mask import MaskPattern
from qrforge.qrcode import QrCode
from qrforge.tables import (
    ALPHANUMERIC_CHAR_COUNT,
    ALPHANUMERIC_SIZE,
    BYTE_CHAR_COUNT,
    BYTE_SIZE,
    KANJI_CHAR_COUNT,
    KANJI_SIZE,
    NUMERIC_CHAR_COUNT,
    NUMERIC_SIZE,
    data_block_layout,
    ec_bytes_per_block,
)

_log = logging.getLogger(__name__)

_CAPACITY_TABLES = {
    Encoding.NUMERIC: NUMERIC_SIZE,
    Encoding.ALPHANUMERIC: ALPHANUMERIC_SIZE,
    Encoding.BYTE: BYTE_SIZE,
    Encoding.KANJI: KANJI_SIZE,
}

_CHAR_COUNT_TABLES = {
    Encoding.NUMERIC: NUMERIC_CHAR_COUNT,
    Encoding.ALPHANUMERIC: ALPHANUMERIC_CHAR_COUNT,
    Encoding.BYTE: BYTE_CHAR_COUNT,
    Encoding.KANJI: KANJI_CHAR_COUNT,
}

_PAD_BYTES = (236, 17)
_TERMINATOR_LENGTH = 4


def table_from_encoding(encoding: Encoding) -> tuple[int, ...]:
    """Return the character capacity table (L, M, Q, H per version) of an encoding."""
    return _CAPACITY_TABLES[encoding]


def char_count(version: int, encoding: Encoding) -> int:
    """Return the width of the character count indicator for a version and encoding."""
    if 1 <= version <= 9:
        index = 0
    elif 10 <= version <= 26:
        index = 1
    elif 27 <= version <= 40:
        index = 2
    else:
        raise ValueError("Invalid version.")
    return _CHAR_COUNT_TABLES[encoding][index]


def format_bits(bits: Iterable[Bit]) -> str:
    """Render bits as a string of '0' and '1'."""
    return "".join("1" if bit.value else "0" for bit in bits)


def _smallest_version(length: int, encoding: Encoding, ec_level: EcLevel) -> int:
    capacities = table_from_encoding(encoding)[ec_level.ordinal()::4]
    for version, capacity in enumerate(capacities, start=1):
        if length <= capacity:
            return version
    raise ValueError("Not enough space.")


class Preprocessor:
    """Encodes data, picks the smallest version and computes the final bit stream."""

    def __init__(
        self,
        data: str,
        encoding: Encoding,
        ec_level: EcLevel,
        mask_pattern: MaskPattern,
    ) -> None:
        bits = encoding.encode(data)
        version = _smallest_version(len(data), encoding, ec_level)

        count_width = char_count(version, encoding)
        if len(bits) < count_width:
            bits.extend([Bit(False)] * (count_width - len(bits)))

        segment = [
            *encoding.mod_indicator(),
            *bits_from_int(len(data), count_width, False, True),
            *bits,
        ]

        size_1, count_1, size_2, count_2 = data_block_layout(version, ec_level.ordinal())
        total_data_bits = (size_1 * count_1 + size_2 * count_2) * 8

        if len(segment) < total_data_bits:
            terminator = min(_TERMINATOR_LENGTH, total_data_bits - len(segment))
            segment.extend([Bit(False)] * terminator)

        segment.extend([Bit(False)] * (-len(segment) % 8))

        pad_index = 0
        while len(segment) < total_data_bits:
            segment.extend(to_bits_array([_PAD_BYTES[pad_index % 2]]))
            pad_index += 1

        cw_per_block = ec_bytes_per_block(version, ec_level.ordinal())
        data_codewords, ec_codewords = codewords(
            bits_to_bytes(segment), version, ec_level, cw_per_block
        )

        stream = bytes_to_bits(data_codewords, len(data_codewords) * 8)
        stream.extend(bytes_to_bits(ec_codewords, len(ec_codewords) * 8))
        _log.debug("%s", format_bits(stream))

        self.qrcode_bits: list[Bit] = stream
        self.encoding = encoding
        self.ec_level = ec_level
        self.version = version
        self.mask_pattern = mask_pattern

    def generate_qrcode(self) -> QrCode:
        """Build the masked symbol holding the computed bit stream."""
        code = QrCode(self.version, self.ec_level, self.mask_pattern, self.encoding)
        code.all_functional_patterns()
        code.fill(self.qrcode_bits)
        code.apply_mask()
        return code