from __future__ import annotations

from typing import Optional, Sequence

from .grid import Field
from .primitives import Block, Position


BlockMatrix = Sequence[Sequence[Optional[Block]]]


class CollisionDetectionService:
    """Placement checks for a block matrix anchored at an absolute cell.

    Coordinates are plain ints so that candidate positions left of or above
    the field can be probed without building an invalid `Position`.
    """

    def can_place_block(self, x: int, y: int, blocks: BlockMatrix, field: Field) -> bool:
        if self.is_out_of_bounds(x, y, blocks, field.width, field.height):
            return False
        return not self.is_colliding(x, y, blocks, field)

    def is_colliding(self, x: int, y: int, blocks: BlockMatrix, field: Field) -> bool:
        for dy, row in enumerate(blocks):
            for dx, block in enumerate(row):
                if block is None:
                    continue
                abs_x, abs_y = x + dx, y + dy
                if abs_x < 0 or abs_y < 0:
                    continue
                if not field.is_empty(Position(abs_x, abs_y)):
                    return True
        return False

    def is_out_of_bounds(self, x: int, y: int, blocks: BlockMatrix, width: int, height: int) -> bool:
        for dy, row in enumerate(blocks):
            for dx, block in enumerate(row):
                if block is None:
                    continue
                if not (0 <= x + dx < width and 0 <= y + dy < height):
                    return True
        return False
