from __future__ import annotations

import random
from typing import List, MutableSequence, Optional, Protocol, Sequence, TypeVar

from .pieces import BlockPattern, PatternKind
from .primitives import Block, Color


T = TypeVar("T")

COLORS: Sequence[Color] = (Color.BLUE, Color.RED, Color.YELLOW)
PATTERN_KINDS: Sequence[PatternKind] = (
    PatternKind.PATTERN4,
    PatternKind.PATTERN3X1,
    PatternKind.PATTERN2X2,
    PatternKind.PATTERN2X1X1,
)


class RandomSource(Protocol):
    """The subset of `random.Random` the generator relies on."""

    def randrange(self, stop: int) -> int: ...


class BlockPatternGenerator:
    """Produces the 2x2 patterns new falling blocks are spawned from.

    Pass a seeded `random.Random` (or any `RandomSource`) for reproducible
    sequences.
    """

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self.rng: RandomSource = rng if rng is not None else random.Random()

    @classmethod
    def seeded(cls, seed: Optional[int]) -> "BlockPatternGenerator":
        return cls(random.Random(seed))

    def generate(self) -> BlockPattern:
        kind = PATTERN_KINDS[self.rng.randrange(len(PATTERN_KINDS))]
        if kind is PatternKind.PATTERN4:
            return self.generate_pattern4()
        if kind is PatternKind.PATTERN3X1:
            return self.generate_pattern3x1()
        if kind is PatternKind.PATTERN2X2:
            return self.generate_pattern2x2()
        return self.generate_pattern2x1x1()

    def generate_pattern4(self) -> BlockPattern:
        block = Block(self.random_color())
        return BlockPattern(PatternKind.PATTERN4, ((block, block), (block, block)))

    def generate_pattern3x1(self) -> BlockPattern:
        main = self.random_color()
        odd = self.random_color_except(main)
        cells = [Block(main)] * 4
        cells[self.rng.randrange(4)] = Block(odd)
        return BlockPattern(PatternKind.PATTERN3X1, ((cells[0], cells[1]), (cells[2], cells[3])))

    def generate_pattern2x2(self) -> BlockPattern:
        first = Block(self.random_color())
        second = Block(self.random_color_except(first.color))
        layouts = [
            ((first, first), (second, second)),  # horizontal halves
            ((first, second), (first, second)),  # vertical halves
            ((first, second), (second, first)),  # diagonal
        ]
        return BlockPattern(PatternKind.PATTERN2X2, layouts[self.rng.randrange(len(layouts))])

    def generate_pattern2x1x1(self) -> BlockPattern:
        first = self.random_color()
        second = self.random_color_except(first)
        third = self.random_color_except(first, second)
        cells = [Block(first), Block(first), Block(second), Block(third)]
        self._shuffle(cells)
        return BlockPattern(PatternKind.PATTERN2X1X1, ((cells[0], cells[1]), (cells[2], cells[3])))

    def random_color(self) -> Color:
        return COLORS[self.rng.randrange(len(COLORS))]

    def random_color_except(self, *excluded: Color) -> Color:
        available: List[Color] = [c for c in COLORS if c not in excluded]
        if not available:
            names = ", ".join(c.tag for c in excluded)
            raise ValueError(f"Cannot pick a color: every color is excluded ({names})")
        return available[self.rng.randrange(len(available))]

    def _shuffle(self, items: MutableSequence[T]) -> None:
        # Fisher-Yates driven by the injected source
        for i in range(len(items) - 1, 0, -1):
            j = self.rng.randrange(i + 1)
            items[i], items[j] = items[j], items[i]
