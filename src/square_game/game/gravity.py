from __future__ import annotations

from .grid import Field
from .primitives import Position


class BlockFallService:
    """Drops unsupported blocks straight down within their column."""

    def apply_gravity(self, field: Field) -> bool:
        """Run one pass over every column. Returns True if any block moved."""
        moved = False
        for x in range(field.width):
            if self._settle_column(x, field):
                moved = True
        return moved

    def settle(self, field: Field) -> int:
        """Apply gravity until nothing moves; returns the number of passes that moved blocks."""
        passes = 0
        while self.apply_gravity(field):
            passes += 1
        return passes

    def get_lowest_empty_position(self, column: int, start_y: int, field: Field) -> int:
        lowest = start_y
        for y in range(start_y + 1, field.height):
            if not field.is_empty(Position(column, y)):
                break
            lowest = y
        return lowest

    def can_fall(self, position: Position, field: Field) -> bool:
        if field.get_block(position) is None:
            return False
        if position.y >= field.height - 1:
            return False
        return field.is_empty(Position(position.x, position.y + 1))

    def _settle_column(self, column: int, field: Field) -> bool:
        moved = False
        for y in range(field.height - 2, -1, -1):
            position = Position(column, y)
            block = field.get_block(position)
            if block is None:
                continue
            lowest = self.get_lowest_empty_position(column, y, field)
            if lowest > y:
                field.remove_block(position)
                field.place_block(Position(column, lowest), block)
                moved = True
        return moved
