from __future__ import annotations

from typing import List, Optional

import numpy as np

from .errors import CellOccupiedError, InvalidPositionError
from .primitives import Block, Color, Position


FIELD_WIDTH = 8
FIELD_HEIGHT = 20

EMPTY = 0


class Field:
    """Fixed-size board of settled blocks.

    The backing store is an int8 array where 0 is an empty cell and any other
    value is the `Color` of the block occupying it. Row 0 is the top.
    """

    def __init__(self, width: int = FIELD_WIDTH, height: int = FIELD_HEIGHT) -> None:
        self.width = int(width)
        self.height = int(height)
        self._cells = np.zeros((self.height, self.width), dtype=np.int8)

    @property
    def grid(self) -> List[List[Optional[Block]]]:
        # Fresh lists every call; the array itself never leaves the field.
        return [[self._block_from_value(v) for v in row] for row in self._cells.tolist()]

    def is_valid_position(self, position: Position) -> bool:
        return position.is_valid(self.width, self.height)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def place_block(self, position: Position, block: Block) -> None:
        if not self.is_valid_position(position):
            raise InvalidPositionError(f"Invalid position: {position}")
        if not self.is_empty(position):
            raise CellOccupiedError(f"Position already occupied: {position}")
        self._cells[position.y, position.x] = int(block.color)

    def remove_block(self, position: Position) -> None:
        if not self.is_valid_position(position):
            raise InvalidPositionError(f"Invalid position: {position}")
        self._cells[position.y, position.x] = EMPTY

    def get_block(self, position: Position) -> Optional[Block]:
        if not self.is_valid_position(position):
            return None
        return self._block_from_value(int(self._cells[position.y, position.x]))

    def is_empty(self, position: Position) -> bool:
        return self.get_block(position) is None

    def has_block_in_top_row(self) -> bool:
        return bool(np.any(self._cells[0] != EMPTY))

    def count_blocks(self) -> int:
        return int(np.count_nonzero(self._cells))

    def clear(self) -> None:
        self._cells.fill(EMPTY)

    def clone(self) -> "Field":
        new_field = Field(self.width, self.height)
        new_field._cells = self._cells.copy()
        return new_field

    def clone_state(self) -> np.ndarray:
        return self._cells.copy()

    @staticmethod
    def _block_from_value(value: int) -> Optional[Block]:
        if value == EMPTY:
            return None
        return Block(Color(value))

    def __str__(self) -> str:
        rows = []
        for row in self._cells:
            rows.append("".join("." if v == EMPTY else Color(int(v)).tag[0].upper() for v in row))
        return "\n".join(rows)
