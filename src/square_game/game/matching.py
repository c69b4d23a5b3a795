from __future__ import annotations

from typing import Iterable, List

from .grid import Field
from .primitives import Color, Position, Rectangle


class BlockMatchingService:
    """Finds same-color rectangles of at least 2x2 on a field.

    Every occupied cell is tried as a top-left corner. For each width from 2
    up to the same-color run starting there, the rectangle is extended down
    while the whole row matches. Rectangles contained in another candidate
    are dropped, so only the maximal ones are returned. L-shapes and other
    non-rectangular regions never qualify.
    """

    def find_matching_rectangles(self, field: Field) -> List[Rectangle]:
        rectangles: List[Rectangle] = []
        for y in range(field.height):
            for x in range(field.width):
                position = Position(x, y)
                if field.is_empty(position):
                    continue
                rectangles.extend(self._rectangles_at(position, field))
        return self._remove_contained(rectangles)

    def is_rectangle(self, positions: Iterable[Position], color: Color, field: Field) -> bool:
        for position in positions:
            block = field.get_block(position)
            if block is None or block.color != color:
                return False
        return True

    def _rectangles_at(self, corner: Position, field: Field) -> List[Rectangle]:
        block = field.get_block(corner)
        if block is None:
            return []
        color = block.color

        max_width = 1
        while corner.x + max_width < field.width:
            if not self._matches(field, corner.x + max_width, corner.y, color):
                break
            max_width += 1

        found: List[Rectangle] = []
        for width in range(2, max_width + 1):
            height = 1
            while corner.y + height < field.height:
                row_y = corner.y + height
                if not all(self._matches(field, corner.x + dx, row_y, color) for dx in range(width)):
                    break
                height += 1
            if height >= 2:
                found.append(Rectangle(corner, width, height))
        return found

    @staticmethod
    def _matches(field: Field, x: int, y: int, color: Color) -> bool:
        block = field.get_block(Position(x, y))
        return block is not None and block.color == color

    @staticmethod
    def _remove_contained(rectangles: List[Rectangle]) -> List[Rectangle]:
        unique: List[Rectangle] = []
        for rect in rectangles:
            if any(rect.is_within(kept) for kept in unique):
                continue
            # A larger rectangle replaces every kept one it swallows.
            unique = [kept for kept in unique if not kept.is_within(rect)]
            unique.append(rect)
        return unique
