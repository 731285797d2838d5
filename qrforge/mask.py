"""The eight data mask patterns of a QR symbol."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

MaskFunction = Callable[[int, int], bool]


class MaskPattern(Enum):
    """Mask patterns, valued by their reference number."""

    CHECKERBOARD = 0
    HORIZONTAL = 1
    VERTICAL = 2
    DIAGONAL = 3
    LARGE_CHECKERBOARD = 4
    FIELDS = 5
    DIAMONDS = 6
    MEADOW = 7

    def get_mask(self) -> MaskFunction:
        """Return the predicate telling whether the module at (x, y) is inverted."""
        return _MASKS[self]

    def ordinal(self) -> int:
        """Return the reference number of the pattern."""
        return self.value


_MASKS: dict[MaskPattern, MaskFunction] = {
    MaskPattern.CHECKERBOARD: lambda x, y: (x + y) % 2 == 0,
    MaskPattern.HORIZONTAL: lambda x, y: y % 2 == 0,
    MaskPattern.VERTICAL: lambda x, y: x % 3 == 0,
    MaskPattern.DIAGONAL: lambda x, y: (x + y) % 3 == 0,
    MaskPattern.LARGE_CHECKERBOARD: lambda x, y: (x // 2 + y // 3) % 2 == 0,
    MaskPattern.FIELDS: lambda x, y: (x * y) % 2 + (x * y) % 3 == 0,
    MaskPattern.DIAMONDS: lambda x, y: ((x * y) % 2 + (x * y) % 3) % 2 == 0,
    MaskPattern.MEADOW: lambda x, y: ((x + y) % 2 + (x * y) % 3) % 2 == 0,
}