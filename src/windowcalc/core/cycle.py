"""Cycle sizes

Sizes a window steps through when the same shortcut is pressed repeatedly.

Cycle order is a property of the size, not of set iteration:
1/2 first, then the larger sizes ascending, then the smaller ones
ascending, i.e. 1/2 → 2/3 → 3/4 → 1/4 → 1/3 → (repeat).
"""

from collections.abc import Iterable
from enum import Enum


class CycleSize(Enum):
    """A fraction of the screen a window can occupy.

    The value is the persisted id, which is also the bit position used by
    ``to_bits`` / ``from_bits``.
    """

    TWO_THIRDS = 0
    ONE_HALF = 1
    ONE_THIRD = 2
    ONE_QUARTER = 3
    THREE_QUARTERS = 4

    @property
    def fraction(self) -> float:
        return _FRACTIONS[self]

    @property
    def title(self) -> str:
        """Unicode fraction glyph for display"""
        return _TITLES[self]

    @property
    def is_first_size(self) -> bool:
        return self is CycleSize.ONE_HALF

    @property
    def cycle_position(self) -> int:
        """Index of this size in the canonical cycle"""
        return CYCLE_ORDER.index(self)

    @classmethod
    def from_bits(cls, bits: int) -> frozenset["CycleSize"]:
        """Decode a stored bitmask (bit n set = size with id n selected)."""
        return frozenset(size for size in cls if (bits >> size.value) & 1)

    @staticmethod
    def to_bits(sizes: Iterable["CycleSize"]) -> int:
        """Encode a set of sizes into a bitmask for storage."""
        bits = 0
        for size in sizes:
            bits |= 1 << size.value
        return bits


_FRACTIONS = {
    CycleSize.TWO_THIRDS: 2.0 / 3.0,
    CycleSize.ONE_HALF: 1.0 / 2.0,
    CycleSize.ONE_THIRD: 1.0 / 3.0,
    CycleSize.ONE_QUARTER: 1.0 / 4.0,
    CycleSize.THREE_QUARTERS: 3.0 / 4.0,
}

_TITLES = {
    CycleSize.TWO_THIRDS: "⅔",
    CycleSize.ONE_HALF: "½",
    CycleSize.ONE_THIRD: "⅓",
    CycleSize.ONE_QUARTER: "¼",
    CycleSize.THREE_QUARTERS: "¾",
}


def _build_cycle_order() -> tuple[CycleSize, ...]:
    by_fraction = sorted(CycleSize, key=lambda size: size.fraction)
    first = by_fraction.index(CycleSize.ONE_HALF)
    smaller = by_fraction[:first]
    larger = by_fraction[first + 1:]
    return (CycleSize.ONE_HALF, *larger, *smaller)


CYCLE_ORDER: tuple[CycleSize, ...] = _build_cycle_order()

DEFAULT_CYCLE_SIZES: frozenset[CycleSize] = frozenset(
    {CycleSize.ONE_HALF, CycleSize.TWO_THIRDS, CycleSize.ONE_THIRD}
)


def sorted_for_cycle(sizes: Iterable[CycleSize]) -> list[CycleSize]:
    """Return ``sizes`` in canonical cycle order, duplicates dropped."""
    selected = set(sizes)
    return [size for size in CYCLE_ORDER if size in selected]
