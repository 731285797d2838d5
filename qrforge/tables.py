"""Lookup tables for QR code encoding: capacities, block layouts and GF(256) arithmetic."""

from __future__ import annotations

# Width of the character count indicator, indexed by version range:
# 0 for versions 1-9, 1 for versions 10-26, 2 for versions 27-40.
NUMERIC_CHAR_COUNT: tuple[int, int, int] = (10, 12, 14)
ALPHANUMERIC_CHAR_COUNT: tuple[int, int, int] = (9, 11, 13)
BYTE_CHAR_COUNT: tuple[int, int, int] = (8, 16, 16)
KANJI_CHAR_COUNT: tuple[int, int, int] = (8, 10, 12)

# Number of data codewords per version for each error correction level.
SIZE_EC_L: tuple[int, ...] = (
    19, 34, 55, 80, 108, 136, 156, 194, 232, 274, 324, 370, 428, 461, 523, 589, 647, 721, 795, 861,
    932, 1006, 1094, 1174, 1276, 1370, 1468, 1531, 1631, 1735, 1843, 1955, 2071, 2191, 2306, 2434,
    2566, 2702, 2812, 2956,
)

SIZE_EC_M: tuple[int, ...] = (
    16, 28, 44, 64, 86, 108, 124, 154, 182, 216, 254, 290, 334, 365, 415, 453, 507, 563, 627, 669,
    714, 782, 860, 914, 1000, 1062, 1128, 1193, 1267, 1373, 1455, 1541, 1631, 1725, 1812, 1914,
    1992, 2102, 2216, 2334,
)

SIZE_EC_Q: tuple[int, ...] = (
    13, 22, 34, 48, 62, 76, 88, 110, 132, 154, 180, 206, 244, 261, 295, 325, 367, 397, 445, 485,
    512, 568, 614, 664, 718, 754, 808, 871, 911, 985, 1033, 1115, 1171, 1231, 1286, 1354, 1426,
    1502, 1582, 1666,
)

SIZE_EC_H: tuple[int, ...] = (
    9, 16, 26, 36, 46, 60, 66, 86, 100, 122, 140, 158, 180, 197, 223, 253, 283, 313, 341, 385, 406,
    442, 464, 514, 538, 596, 628, 661, 701, 745, 793, 845, 901, 961, 986, 1054, 1096, 1142, 1222,
    1276,
)

# Character capacities, four entries (L, M, Q, H) per version, versions 1 to 40.
NUMERIC_SIZE: tuple[int, ...] = (
    41, 34, 27, 17, 77, 63, 48, 34, 127, 101, 77, 58, 187, 149, 111, 82, 255, 202, 144, 106, 322,
    255, 178, 139, 370, 293, 207, 154, 461, 365, 259, 202, 552, 432, 312, 235, 652, 513, 364, 288,
    772, 604, 427, 331, 883, 691, 489, 374, 1022, 796, 580, 427, 1101, 871, 621, 468, 1250, 991,
    703, 530, 1408, 1082, 775, 602, 1548, 1212, 876, 674, 1725, 1346, 948, 746, 1903, 1500, 1063,
    813, 2061, 1600, 1159, 919, 2232, 1708, 1224, 969, 2409, 1872, 1358, 1056, 2620, 2059, 1468,
    1108, 2812, 2188, 1588, 1228, 3057, 2395, 1718, 1286, 3283, 2544, 1804, 1425, 3517, 2701, 1933,
    1501, 3669, 2857, 2085, 1581, 3909, 3035, 2181, 1677, 4158, 3289, 2358, 1782, 4417, 3486, 2473,
    1897, 4686, 3693, 2670, 2022, 4965, 3909, 2805, 2157, 5253, 4134, 2949, 2301, 5529, 4343, 3081,
    2361, 5836, 4588, 3244, 2524, 6153, 4775, 3417, 2625, 6479, 5039, 3599, 2735, 6743, 5313, 3791,
    2927, 7089, 5596, 3993, 3057,
)

ALPHANUMERIC_SIZE: tuple[int, ...] = (
    25, 20, 16, 10, 47, 38, 29, 20, 77, 61, 47, 35, 114, 90, 67, 50, 154, 122, 87, 64, 195, 154,
    108, 84, 224, 178, 125, 93, 279, 221, 157, 122, 335, 262, 189, 143, 395, 311, 221, 174, 468,
    366, 259, 200, 535, 419, 296, 227, 619, 483, 352, 259, 667, 528, 376, 283, 758, 600, 426, 321,
    854, 656, 470, 365, 938, 734, 531, 408, 1046, 816, 574, 452, 1153, 909, 644, 493, 1249, 970,
    702, 557, 1352, 1035, 742, 587, 1460, 1134, 823, 640, 1588, 1248, 890, 672, 1704, 1326, 963,
    744, 1853, 1451, 1041, 779, 1990, 1542, 1094, 864, 2132, 1637, 1172, 910, 2223, 1732, 1263,
    958, 2369, 1839, 1322, 1016, 2520, 1994, 1429, 1080, 2677, 2113, 1499, 1150, 2840, 2238, 1618,
    1226, 3009, 2369, 1700, 1307, 3183, 2506, 1787, 1394, 3351, 2632, 1867, 1431, 3537, 2780, 1966,
    1530, 3729, 2894, 2071, 1591, 3927, 3054, 2181, 1658, 4087, 3220, 2298, 1774, 4296, 3391, 2420,
    1852,
)

BYTE_SIZE: tuple[int, ...] = (
    17, 14, 11, 7, 32, 26, 20, 14, 53, 42, 32, 24, 78, 62, 46, 34, 106, 84, 60, 44, 134, 106, 74,
    58, 154, 122, 86, 64, 192, 152, 108, 84, 230, 180, 130, 98, 271, 213, 151, 119, 321, 251, 177,
    137, 367, 287, 203, 155, 425, 331, 241, 177, 458, 362, 258, 194, 520, 412, 292, 220, 586, 450,
    322, 250, 644, 504, 364, 280, 718, 560, 394, 310, 792, 624, 442, 338, 858, 666, 482, 382, 929,
    711, 509, 403, 1003, 779, 565, 439, 1091, 857, 611, 461, 1171, 911, 661, 511, 1273, 997, 715,
    535, 1367, 1059, 751, 593, 1465, 1125, 805, 625, 1528, 1190, 868, 658, 1628, 1264, 908, 698,
    1732, 1370, 982, 742, 1840, 1452, 1030, 790, 1952, 1538, 1112, 842, 2068, 1628, 1168, 898,
    2188, 1722, 1228, 958, 2303, 1809, 1283, 983, 2431, 1911, 1351, 1051, 2563, 1989, 1423, 1093,
    2699, 2099, 1499, 1139, 2809, 2213, 1579, 1219, 2953, 2331, 1663, 1273,
)

KANJI_SIZE: tuple[int, ...] = (
    10, 8, 7, 4, 20, 16, 12, 8, 32, 26, 20, 15, 48, 38, 28, 21, 65, 52, 37, 27, 82, 65, 45, 36, 95,
    75, 53, 39, 118, 93, 66, 52, 141, 111, 80, 60, 167, 131, 93, 74, 198, 155, 109, 85, 226, 177,
    125, 96, 262, 204, 149, 109, 282, 223, 159, 120, 320, 254, 180, 136, 361, 277, 198, 154, 397,
    310, 224, 173, 442, 345, 243, 191, 488, 384, 272, 208, 528, 410, 297, 235, 572, 438, 314, 248,
    618, 480, 348, 270, 672, 528, 376, 284, 721, 561, 407, 315, 784, 614, 440, 330, 842, 652, 462,
    365, 902, 692, 496, 385, 940, 732, 534, 405, 1002, 778, 559, 430, 1066, 843, 604, 457, 1132,
    894, 634, 486, 1201, 947, 684, 518, 1273, 1002, 719, 553, 1347, 1060, 756, 590, 1417, 1113,
    790, 605, 1496, 1176, 832, 647, 1577, 1224, 876, 673, 1661, 1292, 923, 701, 1729, 1362, 972,
    750, 1817, 1435, 1024, 784,
)

# Error correction codewords per block, one row per version, columns L, M, Q, H.
EC_BYTES_PER_BLOCK: tuple[tuple[int, int, int, int], ...] = (
    (7, 10, 13, 17),  # 1
    (10, 16, 22, 28),  # 2
    (15, 26, 18, 22),  # 3
    (20, 18, 26, 16),  # 4
    (26, 24, 18, 22),  # 5
    (18, 16, 24, 28),  # 6
    (20, 18, 18, 26),  # 7
    (24, 22, 22, 26),  # 8
    (30, 22, 20, 24),  # 9
    (18, 26, 24, 28),  # 10
    (20, 30, 28, 24),  # 11
    (24, 22, 26, 28),  # 12
    (26, 22, 24, 22),  # 13
    (30, 24, 20, 24),  # 14
    (22, 24, 30, 24),  # 15
    (24, 28, 24, 30),  # 16
    (28, 28, 28, 28),  # 17
    (30, 26, 28, 28),  # 18
    (28, 26, 26, 26),  # 19
    (28, 26, 30, 28),  # 20
    (28, 26, 28, 30),  # 21
    (28, 28, 30, 24),  # 22
    (30, 28, 30, 30),  # 23
    (30, 28, 30, 30),  # 24
    (26, 28, 30, 30),  # 25
    (28, 28, 28, 30),  # 26
    (30, 28, 30, 30),  # 27
    (30, 28, 30, 30),  # 28
    (30, 28, 30, 30),  # 29
    (30, 28, 30, 30),  # 30
    (30, 28, 30, 30),  # 31
    (30, 28, 30, 30),  # 32
    (30, 28, 30, 30),  # 33
    (30, 28, 30, 30),  # 34
    (30, 28, 30, 30),  # 35
    (30, 28, 30, 30),  # 36
    (30, 28, 30, 30),  # 37
    (30, 28, 30, 30),  # 38
    (30, 28, 30, 30),  # 39
    (30, 28, 30, 30),  # 40
)

# Block layout per version and level:
# (group 1 block size, group 1 block count, group 2 block size, group 2 block count).
DATA_BYTES_PER_BLOCK: tuple[tuple[tuple[int, int, int, int], ...], ...] = (
    ((19, 1, 0, 0), (16, 1, 0, 0), (13, 1, 0, 0), (9, 1, 0, 0)),  # 1
    ((34, 1, 0, 0), (28, 1, 0, 0), (22, 1, 0, 0), (16, 1, 0, 0)),  # 2
    ((55, 1, 0, 0), (44, 1, 0, 0), (17, 2, 0, 0), (13, 2, 0, 0)),  # 3
    ((80, 1, 0, 0), (32, 2, 0, 0), (24, 2, 0, 0), (9, 4, 0, 0)),  # 4
    ((108, 1, 0, 0), (43, 2, 0, 0), (15, 2, 16, 2), (11, 2, 12, 2)),  # 5
    ((68, 2, 0, 0), (27, 4, 0, 0), (19, 4, 0, 0), (15, 4, 0, 0)),  # 6
    ((78, 2, 0, 0), (31, 4, 0, 0), (14, 2, 15, 4), (13, 4, 14, 1)),  # 7
    ((97, 2, 0, 0), (38, 2, 39, 2), (18, 4, 19, 2), (14, 4, 15, 2)),  # 8
    ((116, 2, 0, 0), (36, 3, 37, 2), (16, 4, 17, 4), (12, 4, 13, 4)),  # 9
    ((68, 2, 69, 2), (43, 4, 44, 1), (19, 6, 20, 2), (15, 6, 16, 2)),  # 10
    ((81, 4, 0, 0), (50, 1, 51, 4), (22, 4, 23, 4), (12, 3, 13, 8)),  # 11
    ((92, 2, 93, 2), (36, 6, 37, 2), (20, 4, 21, 6), (14, 7, 15, 4)),  # 12
    ((107, 4, 0, 0), (37, 8, 38, 1), (20, 8, 21, 4), (11, 12, 12, 4)),  # 13
    ((115, 3, 116, 1), (40, 4, 41, 5), (16, 11, 17, 5), (12, 11, 13, 5)),  # 14
    ((87, 5, 88, 1), (41, 5, 42, 5), (24, 5, 25, 7), (12, 11, 13, 7)),  # 15
    ((98, 5, 99, 1), (45, 7, 46, 3), (19, 15, 20, 2), (15, 3, 16, 13)),  # 16
    ((107, 1, 108, 5), (46, 10, 47, 1), (22, 1, 23, 15), (14, 2, 15, 17)),  # 17
    ((120, 5, 121, 1), (43, 9, 44, 4), (22, 17, 23, 1), (14, 2, 15, 19)),  # 18
    ((113, 3, 114, 4), (44, 3, 45, 11), (21, 17, 22, 4), (13, 9, 14, 16)),  # 19
    ((107, 3, 108, 5), (41, 3, 42, 13), (24, 15, 25, 5), (15, 15, 16, 10)),  # 20
    ((116, 4, 117, 4), (42, 17, 0, 0), (22, 17, 23, 6), (16, 19, 17, 6)),  # 21
    ((111, 2, 112, 7), (46, 17, 0, 0), (24, 7, 25, 16), (13, 34, 0, 0)),  # 22
    ((121, 4, 122, 5), (47, 4, 48, 14), (24, 11, 25, 14), (15, 16, 16, 14)),  # 23
    ((117, 6, 118, 4), (45, 6, 46, 14), (24, 11, 25, 16), (16, 30, 17, 2)),  # 24
    ((106, 8, 107, 4), (47, 8, 48, 13), (24, 7, 25, 22), (15, 22, 16, 13)),  # 25
    ((114, 10, 115, 2), (46, 19, 47, 4), (22, 28, 23, 6), (16, 33, 17, 4)),  # 26
    ((122, 8, 123, 4), (45, 22, 46, 3), (23, 8, 24, 26), (15, 12, 16, 28)),  # 27
    ((117, 3, 118, 10), (45, 3, 46, 23), (24, 4, 25, 31), (15, 11, 16, 31)),  # 28
    ((116, 7, 117, 7), (45, 21, 46, 7), (23, 1, 24, 37), (15, 19, 16, 26)),  # 29
    ((115, 5, 116, 10), (47, 19, 48, 10), (24, 15, 25, 25), (15, 23, 16, 25)),  # 30
    ((115, 13, 116, 3), (46, 2, 47, 29), (24, 42, 25, 1), (15, 23, 16, 28)),  # 31
    ((115, 17, 0, 0), (46, 10, 47, 23), (24, 10, 25, 35), (15, 19, 16, 35)),  # 32
    ((115, 17, 116, 1), (46, 14, 47, 21), (24, 29, 25, 19), (15, 11, 16, 46)),  # 33
    ((115, 13, 116, 6), (46, 14, 47, 23), (24, 44, 25, 7), (16, 59, 17, 1)),  # 34
    ((121, 12, 122, 7), (47, 12, 48, 26), (24, 39, 25, 14), (15, 22, 16, 41)),  # 35
    ((121, 6, 122, 14), (47, 6, 48, 34), (24, 46, 25, 10), (15, 2, 16, 64)),  # 36
    ((122, 17, 123, 4), (46, 29, 47, 14), (24, 49, 25, 10), (15, 24, 16, 46)),  # 37
    ((122, 4, 123, 18), (46, 13, 47, 32), (24, 48, 25, 14), (15, 42, 16, 32)),  # 38
    ((117, 20, 118, 4), (47, 40, 48, 7), (24, 43, 25, 22), (15, 10, 16, 67)),  # 39
    ((118, 19, 119, 6), (47, 18, 48, 31), (24, 34, 25, 34), (15, 20, 16, 61)),  # 40
)

# Reduction polynomial x^8 + x^4 + x^3 + x^2 + 1 used by QR codes.
_PRIMITIVE_POLYNOMIAL = 0x11D
_MAX_GENERATOR_DEGREE = 69


def _build_exp_table() -> tuple[int, ...]:
    values = []
    value = 1
    for _ in range(255):
        values.append(value)
        value <<= 1
        if value & 0x100:
            value ^= _PRIMITIVE_POLYNOMIAL
    values.append(1)
    return tuple(values)


EXP_TABLE: tuple[int, ...] = _build_exp_table()


def _build_log_table() -> tuple[int, ...]:
    logs = [0xFF] * 256
    for power, value in enumerate(EXP_TABLE[:255]):
        logs[value] = power
    return tuple(logs)


LOG_TABLE: tuple[int, ...] = _build_log_table()


def _gf_mul(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return EXP_TABLE[(LOG_TABLE[a] + LOG_TABLE[b]) % 255]


def _build_generator(degree: int) -> tuple[int, ...]:
    # Product of (x - a^j) for j < degree, highest power first.
    poly = [1]
    for j in range(degree):
        root = EXP_TABLE[j]
        shifted = poly + [0]
        for i, coeff in enumerate(poly, start=1):
            shifted[i] ^= _gf_mul(coeff, root)
        poly = shifted
    return tuple(LOG_TABLE[coeff] for coeff in poly[1:])


# Generator polynomials in log form, without the leading coefficient,
# indexed by the number of error correction codewords.
GENERATOR_POLYNOMIALS: tuple[tuple[int, ...], ...] = tuple(
    _build_generator(degree) for degree in range(_MAX_GENERATOR_DEGREE + 1)
)


def gf_exp(n: int) -> int:
    """Return 2 raised to ``n`` in GF(256)."""
    return EXP_TABLE[n % 255]


def gf_log(x: int) -> int:
    """Return the discrete logarithm of a non-zero element of GF(256)."""
    if not 1 <= x <= 255:
        raise ValueError(f"no logarithm for {x} in GF(256)")
    return LOG_TABLE[x]


def generator_polynomial(degree: int) -> tuple[int, ...]:
    """Return the generator polynomial of ``degree`` as logs of its non-leading coefficients."""
    if not 0 <= degree <= _MAX_GENERATOR_DEGREE:
        raise ValueError(f"no generator polynomial of degree {degree}")
    return GENERATOR_POLYNOMIALS[degree]


def _check(version: int, ec_index: int) -> None:
    if not 1 <= version <= 40:
        raise ValueError(f"Invalid version: {version}")
    if not 0 <= ec_index <= 3:
        raise ValueError(f"Invalid error correction index: {ec_index}")


def data_block_layout(version: int, ec_index: int) -> tuple[int, int, int, int]:
    """Return (size 1, count 1, size 2, count 2) of the data blocks for a version and level."""
    _check(version, ec_index)
    return DATA_BYTES_PER_BLOCK[version - 1][ec_index]


def ec_bytes_per_block(version: int, ec_index: int) -> int:
    """Return the number of error correction codewords per block."""
    _check(version, ec_index)
    return EC_BYTES_PER_BLOCK[version - 1][ec_index]