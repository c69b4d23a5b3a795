from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from square_game.game import (
    Block,
    BlockPattern,
    BlockPatternGenerator,
    Color,
    Field,
    PatternKind,
    Position,
)

B = Block(Color.BLUE)
R = Block(Color.RED)
Y = Block(Color.YELLOW)


def solid(color: Color) -> BlockPattern:
    block = Block(color)
    return BlockPattern(PatternKind.PATTERN4, ((block, block), (block, block)))


def checker(first: Block = B, second: Block = R) -> BlockPattern:
    """Diagonal pattern; stacking copies of it never forms a match."""
    return BlockPattern(PatternKind.PATTERN2X2, ((first, second), (second, first)))


def fill(field: Field, cells: Iterable[Tuple[int, int]], color: Color) -> None:
    for x, y in cells:
        field.place_block(Position(x, y), Block(color))


def fill_rect(field: Field, x: int, y: int, width: int, height: int, color: Color) -> None:
    fill(field, [(x + dx, y + dy) for dy in range(height) for dx in range(width)], color)


def occupied(field: Field) -> List[Tuple[int, int]]:
    return [
        (x, y)
        for y in range(field.height)
        for x in range(field.width)
        if not field.is_empty(Position(x, y))
    ]


class FixedPatternGenerator(BlockPatternGenerator):
    """Hands out the given patterns in order, cycling when exhausted."""

    def __init__(self, patterns: Sequence[BlockPattern]) -> None:
        super().__init__()
        self._patterns = list(patterns)
        self._index = 0

    def generate(self) -> BlockPattern:
        pattern = self._patterns[self._index % len(self._patterns)]
        self._index += 1
        return pattern
