import pytest

from qrforge.ec import EcLevel, codewords, create_ec_for_block, groups, interleave
from qrforge.tables import GENERATOR_POLYNOMIALS, ec_bytes_per_block

HELLO_DATA = [32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236]
HELLO_EC = [168, 72, 22, 82, 217, 54, 156, 0, 46, 15, 180, 122, 16]


def test_interleave_works_with_equal_length_blocks():
    assert interleave([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [1, 4, 7, 2, 5, 8, 3, 6, 9]


def test_interleave_works_with_unequal_length_blocks():
    assert interleave([[1, 2], [3, 4, 5], [6]]) == [1, 3, 6, 2, 4, 5]


def test_interleave_works_with_empty_blocks():
    assert interleave([[], [], []]) == []


def test_interleave_works_with_single_block():
    assert interleave([[1, 2, 3]]) == [1, 2, 3]


def test_interleave_rejects_no_blocks():
    with pytest.raises(ValueError):
        interleave([])


def test_create_ec_for_block_works_simple():
    block = [1, 2, 3]
    ec = create_ec_for_block(block, len(block), GENERATOR_POLYNOMIALS[len(block)])
    assert ec == [92, 236, 176]


def test_create_ec_for_block_works_complex():
    ec = create_ec_for_block(HELLO_DATA, len(HELLO_DATA), GENERATOR_POLYNOMIALS[len(HELLO_DATA)])
    assert ec == HELLO_EC


def test_create_ec_for_block_of_zeros_is_zero():
    assert create_ec_for_block([0, 0, 0, 0], 7, GENERATOR_POLYNOMIALS[7]) == [0] * 7


def test_create_ec_does_not_modify_input():
    block = list(HELLO_DATA)
    create_ec_for_block(block, 13, GENERATOR_POLYNOMIALS[13])
    assert block == HELLO_DATA


def test_codewords_single_block():
    data, ec = codewords(HELLO_DATA, 1, EcLevel.Q, ec_bytes_per_block(1, EcLevel.Q.ordinal()))
    assert data == HELLO_DATA
    assert ec == HELLO_EC


def test_groups_single_group():
    data = list(range(13))
    assert groups(data, 1, EcLevel.Q) == [data]


def test_groups_two_groups():
    data = list(range(62))
    blocks = groups(data, 5, EcLevel.Q)
    assert [len(block) for block in blocks] == [15, 15, 16, 16]
    assert [value for block in blocks for value in block] == data


def test_codewords_multi_block_lengths():
    data = list(range(62))
    cw = ec_bytes_per_block(5, EcLevel.Q.ordinal())
    interleaved, ec = codewords(data, 5, EcLevel.Q, cw)
    assert sorted(interleaved) == data
    assert interleaved[:4] == [0, 15, 30, 46]
    assert len(ec) == 4 * cw


def test_ec_level_ordinals():
    assert [level.ordinal() for level in (EcLevel.L, EcLevel.M, EcLevel.Q, EcLevel.H)] == [0, 1, 2, 3]