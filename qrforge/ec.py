"""Reed-Solomon error correction and block interleaving."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from itertools import zip_longest

from qrforge.tables import data_block_layout, generator_polynomial, gf_exp, gf_log


class EcLevel(Enum):
    """Error correction levels, valued by their table column."""

    L = 0
    M = 1
    Q = 2
    H = 3

    def ordinal(self) -> int:
        """Return the table column of the level."""
        return self.value


def _chunks(data: Sequence[int], size: int) -> list[list[int]]:
    return [list(data[start:start + size]) for start in range(0, len(data), size)]


def groups(data: Sequence[int], version: int, ec_level: EcLevel) -> list[list[int]]:
    """Split data codewords into the blocks of both groups for a version and level."""
    size_1, count_1, size_2, _ = data_block_layout(version, ec_level.ordinal())
    group_1_size = size_1 * count_1
    if group_1_size < len(data):
        blocks = _chunks(data[:group_1_size], size_1)
        if size_2 > 0:
            blocks.extend(_chunks(data[group_1_size:], size_2))
        return blocks
    return _chunks(data, size_1)


def create_ec_for_block(
    block: Sequence[int], ec_size: int, generator_polynomial: Sequence[int]
) -> list[int]:
    """Return the ``ec_size`` error correction codewords of one block."""
    data_len = len(block)
    remainder = list(block) + [0] * ec_size
    for i in range(data_len):
        lead = remainder[i]
        if lead == 0:
            continue
        log_lead = gf_log(lead)
        available = len(remainder) - i - 1
        for offset, coeff in enumerate(generator_polynomial[:available], start=i + 1):
            remainder[offset] ^= gf_exp(coeff + log_lead)
    return remainder[data_len:]


def interleave(blocks: Sequence[Sequence[int]]) -> list[int]:
    """Take the codewords of all blocks column by column, skipping exhausted blocks."""
    if not blocks:
        raise ValueError("no blocks to interleave")
    missing = object()
    return [
        value
        for column in zip_longest(*blocks, fillvalue=missing)
        for value in column
        if value is not missing
    ]


def codewords(
    data: Sequence[int], version: int, ec_level: EcLevel, cw_per_block: int
) -> tuple[list[int], list[int]]:
    """Return the interleaved data codewords and interleaved error correction codewords."""
    blocks = groups(data, version, ec_level)
    polynomial = generator_polynomial(cw_per_block)
    ec_blocks = [create_ec_for_block(block, cw_per_block, polynomial) for block in blocks]
    return interleave(blocks), interleave(ec_blocks)