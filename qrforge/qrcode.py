"""The QR symbol grid: function patterns, data placement, masking and text rendering."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from qrforge.bit import Bit, bits_from_int
from qrforge.ec import EcLevel
from qrforge.encoding import Encoding
from qrforge.mask import MaskPattern

_FINDER_PATTERN = (
    "1111111",
    "1000001",
    "1011101",
    "1011101",
    "1011101",
    "1000001",
    "1111111",
)

_ALIGNMENT_PATTERN = (
    "11111",
    "10001",
    "10101",
    "10001",
    "11111",
)

# Alignment pattern centre coordinates for versions 2 to 40.
_ALIGNMENT_COORDS: tuple[tuple[int, ...], ...] = (
    (6, 18),
    (6, 22),
    (6, 26),
    (6, 30),
    (6, 34),
    (6, 22, 38),
    (6, 24, 42),
    (6, 26, 46),
    (6, 28, 50),
    (6, 30, 54),
    (6, 32, 58),
    (6, 34, 62),
    (6, 26, 46, 66),
    (6, 26, 48, 70),
    (6, 26, 50, 74),
    (6, 30, 54, 78),
    (6, 30, 56, 82),
    (6, 30, 58, 86),
    (6, 34, 62, 90),
    (6, 28, 50, 72, 94),
    (6, 26, 50, 74, 98),
    (6, 30, 54, 78, 102),
    (6, 28, 54, 80, 106),
    (6, 32, 58, 84, 110),
    (6, 30, 58, 86, 114),
    (6, 34, 62, 90, 118),
    (6, 26, 50, 74, 98, 122),
    (6, 30, 54, 78, 102, 126),
    (6, 26, 52, 78, 104, 130),
    (6, 30, 56, 82, 108, 134),
    (6, 34, 60, 86, 112, 138),
    (6, 30, 58, 86, 114, 142),
    (6, 34, 62, 90, 118, 146),
    (6, 30, 54, 78, 102, 126, 150),
    (6, 24, 50, 76, 102, 128, 154),
    (6, 28, 54, 80, 106, 132, 158),
    (6, 32, 58, 84, 110, 136, 162),
    (6, 26, 54, 82, 110, 138, 166),
    (6, 30, 58, 86, 114, 142, 170),
)

# Format information words, indexed by 8 * level ordinal + mask ordinal.
_FORMAT_BITS = (
    0x77C4, 0x72F3, 0x7DAA, 0x789D, 0x662F, 0x6318, 0x6C41, 0x6976, 0x5412, 0x5125, 0x5E7C,
    0x5B4B, 0x45F9, 0x40CE, 0x4F97, 0x4AA0, 0x355F, 0x3068, 0x3F31, 0x3A06, 0x24B4, 0x2183,
    0x2EDA, 0x2BED, 0x1689, 0x13BE, 0x1CE7, 0x19D0, 0x762, 0x255, 0xD0C, 0x83B,
)

# Version information words for versions 7 to 40.
_VERSION_BITS = (
    0x07C94, 0x085BC, 0x09A99, 0x0A4D3, 0x0BBF6, 0x0C762, 0x0D847, 0x0E60D, 0x0F928,
    0x10B78, 0x1145D, 0x12A17, 0x13532, 0x149A6, 0x15683, 0x168C9, 0x177EC, 0x18EC4,
    0x191E1, 0x1AFAB, 0x1B08E, 0x1CC1A, 0x1D33F, 0x1ED75, 0x1F250, 0x209D5, 0x216F0,
    0x228BA, 0x2379F, 0x24B0B, 0x2542E, 0x26A64, 0x27541, 0x28C69,
)

_DARK = "██"
_LIGHT = "  "
_QUIET_ZONE = 4


def size_from_version(version: int) -> int:
    """Return the side length in modules of a symbol of ``version``."""
    return 17 + 4 * version


def combination(array: Sequence[int]) -> list[tuple[int, int]]:
    """Return every ordered pair of elements of ``array``, the first element varying slowest."""
    return [(first, second) for first in array for second in array]


class QrCode:
    """A square grid of modules for one QR symbol."""

    def __init__(
        self,
        version: int,
        ec_level: EcLevel,
        mask_pattern: MaskPattern,
        encoding: Encoding,
    ) -> None:
        if not 1 <= version <= 40:
            raise ValueError("Invalid version.")
        self.version = version
        self.ec_level = ec_level
        self.mask_pattern = mask_pattern
        self.encoding = encoding
        side = size_from_version(version)
        self.data: list[Bit] = [Bit(False, False)] * (side * side)

    def size(self) -> int:
        """Return the side length in modules."""
        return size_from_version(self.version)

    def _index(self, x: int, y: int) -> int | None:
        side = self.size()
        if 0 <= x < side and 0 <= y < side:
            return x + side * y
        return None

    def get(self, x: int, y: int) -> Bit | None:
        """Return the module at (x, y), or None outside the grid."""
        index = self._index(x, y)
        return None if index is None else self.data[index]

    def put(self, x: int, y: int, bit: Bit) -> None:
        """Set the module at (x, y); positions outside the grid are ignored."""
        index = self._index(x, y)
        if index is not None:
            self.data[index] = bit

    def _is_functional(self, x: int, y: int) -> bool:
        bit = self.get(x, y)
        if bit is None:
            raise IndexError(f"module ({x}, {y}) is outside the symbol")
        return bit.functional

    def _draw(self, left: int, top: int, pattern: Sequence[str]) -> None:
        for dy, row in enumerate(pattern):
            for dx, cell in enumerate(row):
                self.put(left + dx, top + dy, Bit(cell == "1", True))

    def finder_patterns(self) -> None:
        """Draw the three finder patterns in the corners."""
        far = self.size() - 7
        for left, top in ((0, 0), (far, 0), (0, far)):
            self._draw(left, top, _FINDER_PATTERN)

    def separators_patterns(self) -> None:
        """Draw the light separators around the finder patterns."""
        side = self.size()
        for x, y in ((7, 0), (side - 8, 0), (7, side - 8)):
            for dy in range(8):
                self.put(x, y + dy, Bit(False, True))
        for x, y in ((0, 7), (side - 7, 7), (0, side - 8)):
            for dx in range(7):
                self.put(x + dx, y, Bit(False, True))

    def _draw_alignment_pattern(self, x: int, y: int) -> None:
        if not self._is_functional(x, y):
            self._draw(x - 2, y - 2, _ALIGNMENT_PATTERN)

    def alignment_patterns(self) -> None:
        """Draw the alignment patterns whose centres are not already taken."""
        if self.version == 1:
            return
        for x, y in combination(_ALIGNMENT_COORDS[self.version - 2]):
            self._draw_alignment_pattern(x, y)

    def timing_patterns(self) -> None:
        """Draw the alternating timing patterns along row 6 and column 6."""
        for x in range(8, self.size() - 8):
            if not self._is_functional(x, 6):
                self.put(x, 6, Bit(x % 2 == 0, True))
        for y in range(8, self.size() - 8):
            if not self._is_functional(6, y):
                self.put(6, y, Bit(y % 2 == 0, True))

    def dark_module(self) -> None:
        """Set the always-dark module beside the bottom-left finder."""
        self.put(8, 4 * self.version + 9, Bit(True, True))

    def format_information(self) -> None:
        """Write the two copies of the format information."""
        index = 8 * self.ec_level.ordinal() + self.mask_pattern.ordinal()
        bits = bits_from_int(_FORMAT_BITS[index], 15, True, True)
        side = self.size()

        free_row = (x for x in range(9) if not self._is_functional(x, 8))
        for x, bit in zip(free_row, bits):
            self.put(x, 8, bit)

        free_column = (y for y in range(7, -1, -1) if not self._is_functional(8, y))
        for y, bit in zip(free_column, bits[8:]):
            self.put(8, y, bit)

        for y, bit in zip(range(side - 1, side - 8, -1), bits):
            self.put(8, y, bit)

        for x, bit in zip(range(side - 8, side), bits[7:]):
            self.put(x, 8, bit)

    def version_information(self) -> None:
        """Write the two version information blocks; only versions 7 and up carry them."""
        if self.version < 7:
            raise ValueError("Version information is not available for versions below 7.")
        bits = bits_from_int(_VERSION_BITS[self.version - 7], 18, True, False)
        start = self.size() - 11
        for i, bit in enumerate(bits):
            across, along = divmod(i, 3)
            self.put(across, start + along, bit)
            self.put(start + along, across, bit)

    def apply_mask(self) -> None:
        """Invert every non-functional module selected by the mask pattern."""
        mask = self.mask_pattern.get_mask()
        side = self.size()
        for y in range(side):
            for x in range(side):
                bit = self.data[x + side * y]
                if not bit.functional and mask(x, y):
                    self.data[x + side * y] = bit.invert()

    def all_functional_patterns(self) -> None:
        """Draw every function pattern of the symbol."""
        self.finder_patterns()
        self.separators_patterns()
        self.alignment_patterns()
        self.timing_patterns()
        self.dark_module()
        self.format_information()
        if self.version >= 7:
            self.version_information()

    def _placement_order(self) -> Iterable[tuple[int, int]]:
        side = self.size()
        col = side - 1
        upward = True
        while col >= 0:
            width = 1 if col == 0 else 2
            rows = range(side - 1, -1, -1) if upward else range(side)
            for row in rows:
                for offset in range(width):
                    x = col - offset
                    if x != 6:
                        yield x, row
            upward = not upward
            col -= width

    def fill(self, bits: Iterable[Bit]) -> None:
        """Place data bits in the zigzag order over the free modules until bits run out."""
        source = iter(bits)
        for x, y in self._placement_order():
            if self._is_functional(x, y):
                continue
            bit = next(source, None)
            if bit is None:
                return
            self.put(x, y, bit)

    def __str__(self) -> str:
        side = self.size()
        border_row = _DARK * (side + 2 * _QUIET_ZONE) + "\n"
        margin = _DARK * _QUIET_ZONE
        lines = [border_row * _QUIET_ZONE]
        for y in range(side):
            row = self.data[side * y:side * (y + 1)]
            modules = "".join(_LIGHT if bit.value else _DARK for bit in row)
            lines.append(f"{margin}{modules}{margin}\n")
        lines.append(border_row * _QUIET_ZONE)
        lines.append("\n" + " " * side + f"Version: {self.version}\n")
        return "".join(lines)