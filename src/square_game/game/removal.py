from __future__ import annotations

import logging
from typing import Iterable, Optional

from .gravity import BlockFallService
from .grid import Field
from .matching import BlockMatchingService
from .primitives import Rectangle


logger = logging.getLogger(__name__)


class BlockRemovalService:
    def __init__(
        self,
        fall_service: Optional[BlockFallService] = None,
        matching_service: Optional[BlockMatchingService] = None,
    ) -> None:
        self.fall_service = fall_service or BlockFallService()
        self.matching_service = matching_service or BlockMatchingService()
        self.last_chain_count = 0

    def remove_blocks(self, rectangles: Iterable[Rectangle], field: Field) -> int:
        """Clear every cell of `rectangles` once; returns the summed area."""
        total = 0
        for rect in rectangles:
            for position in rect.positions():
                field.remove_block(position)
            total += rect.area()
        return total

    def process_removal_chain(self, field: Field) -> int:
        """Match, remove and settle until the field is stable.

        Each iteration removes at least four cells, so the loop runs at most
        width * height / 4 times.
        """
        total = 0
        chain = 0
        max_iterations = field.width * field.height
        while chain < max_iterations:
            rectangles = self.matching_service.find_matching_rectangles(field)
            if not rectangles:
                break
            before = field.count_blocks()
            total += self.remove_blocks(rectangles, field)
            assert field.count_blocks() < before, "removal pass cleared no cells"
            chain += 1
            self.fall_service.settle(field)
        self.last_chain_count = chain
        if chain:
            logger.debug("removal chain of %d step(s) cleared %d cells", chain, total)
        return total
