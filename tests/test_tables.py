import pytest

from qrforge import tables
from qrforge.tables import (
    data_block_layout,
    ec_bytes_per_block,
    generator_polynomial,
    gf_exp,
    gf_log,
)


def _mul(a, b):
    if a == 0 or b == 0:
        return 0
    return gf_exp(gf_log(a) + gf_log(b))


def _data_codewords(version, ec_index):
    s1, c1, s2, c2 = data_block_layout(version, ec_index)
    return s1 * c1 + s2 * c2


def test_gf_exp_pinned_values():
    assert gf_exp(0) == 1
    assert gf_exp(8) == 0x1D
    assert gf_exp(255) == 1


def test_gf_log_pinned_values():
    assert gf_log(1) == 0
    assert gf_log(2) == 1
    assert gf_log(0x1D) == 8


def test_exp_log_round_trip():
    for power in range(255):
        assert gf_log(gf_exp(power)) == power


def test_exp_is_permutation_of_nonzero_elements():
    assert sorted(gf_exp(n) for n in range(255)) == list(range(1, 256))


def test_generator_polynomial_lengths_match_degree():
    for degree in range(70):
        assert len(generator_polynomial(degree)) == degree


@pytest.mark.parametrize("value", [0, 256, -1])
def test_gf_log_rejects_out_of_field(value):
    with pytest.raises(ValueError):
        gf_log(value)


@pytest.mark.parametrize(
    "degree, expected",
    [
        (0, ()),
        (1, (0x00,)),
        (2, (0x19, 0x01)),
        (7, (0x57, 0xE5, 0x92, 0x95, 0xEE, 0x66, 0x15)),
        (10, (0xFB, 0x43, 0x2E, 0x3D, 0x76, 0x46, 0x40, 0x5E, 0x20, 0x2D)),
        (13, (0x4A, 0x98, 0xB0, 0x64, 0x56, 0x64, 0x6A, 0x68, 0x82, 0xDA, 0xCE, 0x8C, 0x4E)),
    ],
)
def test_generator_polynomial_matches_known(degree, expected):
    assert generator_polynomial(degree) == expected


@pytest.mark.parametrize("degree", [1, 5, 17, 30, 69])
def test_generator_polynomial_roots(degree):
    coeffs = [1] + [gf_exp(c) for c in generator_polynomial(degree)]
    assert len(coeffs) == degree + 1
    for j in range(degree):
        x = gf_exp(j)
        acc = 0
        for c in coeffs:
            acc = _mul(acc, x) ^ c
        assert acc == 0


@pytest.mark.parametrize("degree", [-1, 70])
def test_generator_polynomial_out_of_range(degree):
    with pytest.raises(ValueError):
        generator_polynomial(degree)


def test_data_block_layout_values():
    assert data_block_layout(1, 0) == (19, 1, 0, 0)
    assert data_block_layout(5, 2) == (15, 2, 16, 2)
    assert data_block_layout(40, 3) == (15, 20, 16, 61)


def test_ec_bytes_per_block_values():
    assert ec_bytes_per_block(1, 0) == 7
    assert ec_bytes_per_block(1, 3) == 17
    assert ec_bytes_per_block(40, 1) == 28


@pytest.mark.parametrize("version, ec_index", [(0, 0), (41, 0), (1, 4), (1, -1)])
def test_layout_rejects_bad_arguments(version, ec_index):
    with pytest.raises(ValueError):
        data_block_layout(version, ec_index)
    with pytest.raises(ValueError):
        ec_bytes_per_block(version, ec_index)


def test_layout_sums_match_data_codeword_sizes():
    sizes = (tables.SIZE_EC_L, tables.SIZE_EC_M, tables.SIZE_EC_Q, tables.SIZE_EC_H)
    for version in range(1, 41):
        for ec_index, size_table in enumerate(sizes):
            assert _data_codewords(version, ec_index) == size_table[version - 1]


def test_total_codewords_same_for_every_level():
    for version in range(1, 41):
        totals = set()
        for ec_index in range(4):
            s1, c1, s2, c2 = data_block_layout(version, ec_index)
            ec = ec_bytes_per_block(version, ec_index)
            totals.add(s1 * c1 + s2 * c2 + ec * (c1 + c2))
        assert len(totals) == 1


@pytest.mark.parametrize(
    "table",
    [tables.NUMERIC_SIZE, tables.ALPHANUMERIC_SIZE, tables.BYTE_SIZE, tables.KANJI_SIZE],
)
def test_capacity_tables_grow_with_version(table):
    assert len(table) == 160
    for ec_index in range(4):
        column = table[ec_index::4]
        assert len(column) == 40
        assert all(a < b for a, b in zip(column, column[1:]))


def test_data_codewords_decrease_with_stronger_correction():
    for version in range(1, 41):
        row = [_data_codewords(version, ec_index) for ec_index in range(4)]
        assert row == sorted(row, reverse=True)
        assert len(set(row)) == 4


def test_byte_capacity_fits_in_data_codewords():
    for version in range(1, 41):
        for ec_index in range(4):
            capacity = tables.BYTE_SIZE[(version - 1) * 4 + ec_index]
            assert capacity < _data_codewords(version, ec_index)