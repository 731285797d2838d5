import pytest

from qrforge.bit import Bit, bytes_to_bits
from qrforge.ec import EcLevel
from qrforge.encoding import Encoding, EncodingError
from qrforge.mask import MaskPattern
from qrforge.preprocessor import Preprocessor, char_count, format_bits, table_from_encoding
from qrforge.qrcode import QrCode, size_from_version
from qrforge.tables import BYTE_SIZE, NUMERIC_SIZE, data_block_layout, ec_bytes_per_block


def _expected_stream_length(version, ec_level):
    size_1, count_1, size_2, count_2 = data_block_layout(version, ec_level.ordinal())
    data = size_1 * count_1 + size_2 * count_2
    ec = ec_bytes_per_block(version, ec_level.ordinal()) * (count_1 + count_2)
    return (data + ec) * 8


@pytest.mark.parametrize(
    "version, encoding, expected",
    [
        (1, Encoding.NUMERIC, 10),
        (9, Encoding.ALPHANUMERIC, 9),
        (10, Encoding.BYTE, 16),
        (26, Encoding.KANJI, 10),
        (27, Encoding.ALPHANUMERIC, 13),
        (40, Encoding.NUMERIC, 14),
    ],
)
def test_char_count(version, encoding, expected):
    assert char_count(version, encoding) == expected


@pytest.mark.parametrize("version", [0, 41])
def test_char_count_rejects_invalid_version(version):
    with pytest.raises(ValueError, match="Invalid version."):
        char_count(version, Encoding.BYTE)


def test_table_from_encoding():
    assert table_from_encoding(Encoding.BYTE) is BYTE_SIZE
    assert table_from_encoding(Encoding.NUMERIC) is NUMERIC_SIZE


def test_format_bits():
    assert format_bits([Bit(True), Bit(False), Bit(True, True)]) == "101"
    assert format_bits([]) == ""


def test_hello_world_quartile_stream():
    pre = Preprocessor("HELLO WORLD", Encoding.ALPHANUMERIC, EcLevel.Q, MaskPattern.CHECKERBOARD)
    data = [32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236]
    ec = [168, 72, 22, 82, 217, 54, 156, 0, 46, 15, 180, 122, 16]
    assert pre.version == 1
    assert pre.qrcode_bits == bytes_to_bits(data + ec, 26 * 8)


def test_version_selection_follows_capacity_table():
    assert Preprocessor("a" * BYTE_SIZE[0], Encoding.BYTE, EcLevel.L, MaskPattern.FIELDS).version == 1
    larger = Preprocessor("a" * (BYTE_SIZE[0] + 1), Encoding.BYTE, EcLevel.L, MaskPattern.FIELDS)
    assert larger.version == 2


@pytest.mark.parametrize("ec_level", list(EcLevel))
@pytest.mark.parametrize("text", ["1", "12345678", "https://example.com " * 5])
def test_stream_length_matches_tables(ec_level, text):
    encoding = Encoding.NUMERIC if text.isdigit() else Encoding.BYTE
    pre = Preprocessor(text, encoding, ec_level, MaskPattern.DIAGONAL)
    assert len(pre.qrcode_bits) == _expected_stream_length(pre.version, ec_level)
    assert all(not bit.functional for bit in pre.qrcode_bits)


def test_empty_numeric_data():
    pre = Preprocessor("", Encoding.NUMERIC, EcLevel.L, MaskPattern.CHECKERBOARD)
    assert pre.version == 1
    assert len(pre.qrcode_bits) == _expected_stream_length(1, EcLevel.L)


def test_too_much_data_raises():
    with pytest.raises(ValueError, match="Not enough space."):
        Preprocessor("a" * (BYTE_SIZE[-4] + 1), Encoding.BYTE, EcLevel.L, MaskPattern.CHECKERBOARD)


def test_invalid_character_raises():
    with pytest.raises(EncodingError, match="Invalid character"):
        Preprocessor("12a", Encoding.NUMERIC, EcLevel.M, MaskPattern.CHECKERBOARD)


def test_generate_qrcode_places_patterns():
    pre = Preprocessor("HELLO WORLD", Encoding.ALPHANUMERIC, EcLevel.Q, MaskPattern.MEADOW)
    code = pre.generate_qrcode()
    assert code.version == pre.version
    assert len(code.data) == size_from_version(pre.version) ** 2
    assert code.get(0, 0) == Bit(True, True)
    assert code.get(8, 4 * pre.version + 9) == Bit(True, True)


def test_generate_qrcode_is_deterministic():
    pre = Preprocessor("https://example.com", Encoding.BYTE, EcLevel.H, MaskPattern.DIAGONAL)
    first = pre.generate_qrcode()
    second = pre.generate_qrcode()
    assert first.data == second.data
    assert len(first.data) == size_from_version(pre.version) ** 2
    assert str(first).endswith(f"Version: {pre.version}\n")


def test_mask_is_an_involution_on_generated_code():
    pre = Preprocessor("HELLO WORLD", Encoding.ALPHANUMERIC, EcLevel.Q, MaskPattern.DIAMONDS)
    masked = pre.generate_qrcode()
    masked.apply_mask()
    plain = QrCode(pre.version, pre.ec_level, pre.mask_pattern, pre.encoding)
    plain.all_functional_patterns()
    plain.fill(pre.qrcode_bits)
    assert masked.data == plain.data