from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, NamedTuple, Optional, Tuple

import numpy as np

from .collision import CollisionDetectionService
from .errors import InvalidPatternError
from .grid import FIELD_WIDTH, Field
from .primitives import Block, Position


PATTERN_SIZE = 2

Cell = Optional[Block]
Matrix = Tuple[Tuple[Cell, Cell], Tuple[Cell, Cell]]


class Rotation(IntEnum):
    R0 = 0
    R90 = 90
    R180 = 180
    R270 = 270

    def clockwise(self) -> "Rotation":
        return Rotation((self.value + 90) % 360)

    def counterclockwise(self) -> "Rotation":
        return Rotation((self.value - 90) % 360)


class PatternKind(str, Enum):
    PATTERN4 = "pattern4"
    PATTERN3X1 = "pattern3x1"
    PATTERN2X2 = "pattern2x2"
    PATTERN2X1X1 = "pattern2x1x1"


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"


class RotationDirection(str, Enum):
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"


_OFFSETS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
}


def _rot90(shape: np.ndarray, k: int) -> np.ndarray:
    k = k % 4
    if k == 0:
        return shape
    return np.rot90(shape, k, axes=(1, 0))  # rotate clockwise when k>0


def _as_matrix(shape: np.ndarray) -> Matrix:
    return (
        (shape[0, 0], shape[0, 1]),
        (shape[1, 0], shape[1, 1]),
    )


@dataclass(frozen=True)
class BlockPattern:
    """Immutable 2x2 template a falling block is built from."""

    kind: PatternKind
    blocks: Matrix

    def __post_init__(self) -> None:
        rows = self.blocks
        if len(rows) != PATTERN_SIZE or any(len(row) != PATTERN_SIZE for row in rows):
            raise InvalidPatternError("BlockPattern must be 2x2")
        for row in rows:
            for cell in row:
                if cell is not None and not isinstance(cell, Block):
                    raise InvalidPatternError(f"BlockPattern cells must be Block or None, got {cell!r}")
        object.__setattr__(self, "kind", PatternKind(self.kind))
        object.__setattr__(self, "blocks", tuple(tuple(row) for row in rows))

    def rotate(self, angle: int) -> Matrix:
        rotation = Rotation(angle)
        shape = np.empty((PATTERN_SIZE, PATTERN_SIZE), dtype=object)
        for y in range(PATTERN_SIZE):
            for x in range(PATTERN_SIZE):
                shape[y, x] = self.blocks[y][x]
        return _as_matrix(_rot90(shape, rotation.value // 90))

    def get_block_at(self, x: int, y: int, angle: int) -> Cell:
        if not (0 <= x < PATTERN_SIZE and 0 <= y < PATTERN_SIZE):
            return None
        return self.rotate(angle)[y][x]

    def __str__(self) -> str:
        return f"BlockPattern({self.kind.value})"


class PlacedBlock(NamedTuple):
    block: Block
    position: Position


def spawn_position(field_width: int = FIELD_WIDTH) -> Position:
    return Position(field_width // 2 - 1, 0)


class FallingBlock:
    """The active piece. Movement is unconditional; check `can_move` first."""

    _collision = CollisionDetectionService()

    def __init__(self, pattern: BlockPattern, position: Position, rotation: Rotation = Rotation.R0) -> None:
        self._pattern = pattern
        self.position = position
        self.rotation = Rotation(rotation)

    @classmethod
    def create(cls, pattern: BlockPattern, position: Optional[Position] = None) -> "FallingBlock":
        return cls(pattern, position or spawn_position())

    @property
    def pattern(self) -> BlockPattern:
        return self._pattern

    @property
    def rotated_blocks(self) -> Matrix:
        return self._pattern.rotate(self.rotation)

    def move_left(self) -> None:
        self.position = Position(self.position.x - 1, self.position.y)

    def move_right(self) -> None:
        self.position = Position(self.position.x + 1, self.position.y)

    def move_down(self) -> None:
        self.position = Position(self.position.x, self.position.y + 1)

    def rotate_clockwise(self) -> None:
        self.rotation = self.rotation.clockwise()

    def rotate_counterclockwise(self) -> None:
        self.rotation = self.rotation.counterclockwise()

    def can_move(self, direction: Direction | str, field: Field) -> bool:
        dx, dy = _OFFSETS[Direction(direction)]
        new_x = self.position.x + dx
        new_y = self.position.y + dy
        if new_x < 0 or new_y < 0:
            return False
        return self._can_place_at(new_x, new_y, self.rotation, field)

    def can_rotate(self, direction: RotationDirection | str, field: Field) -> bool:
        if RotationDirection(direction) is RotationDirection.CLOCKWISE:
            new_rotation = self.rotation.clockwise()
        else:
            new_rotation = self.rotation.counterclockwise()
        return self._can_place_at(self.position.x, self.position.y, new_rotation, field)

    def overlaps(self, field: Field) -> bool:
        return not self._can_place_at(self.position.x, self.position.y, self.rotation, field)

    def get_blocks(self) -> List[PlacedBlock]:
        placed: List[PlacedBlock] = []
        for dy, row in enumerate(self.rotated_blocks):
            for dx, block in enumerate(row):
                if block is not None:
                    placed.append(PlacedBlock(block, Position(self.position.x + dx, self.position.y + dy)))
        return placed

    def _can_place_at(self, x: int, y: int, rotation: Rotation, field: Field) -> bool:
        return self._collision.can_place_block(x, y, self._pattern.rotate(rotation), field)

    def __repr__(self) -> str:
        return f"FallingBlock({self._pattern}, {self.position}, rotation={self.rotation.value})"
