from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from square_game.game import BlockPattern, FallingBlock, Field, Game, GameState, Position
from square_game.game.pieces import Matrix


EMPTY_CELL = "empty"

PatternCells = Tuple[Tuple[str, str], Tuple[str, str]]


@dataclass(frozen=True)
class FallingBlockSnapshot:
    pattern: PatternCells  # already rotated
    x: int
    y: int
    rotation: int


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a game for renderers and other consumers."""

    game_id: str
    state: GameState
    score: int
    field: Tuple[Tuple[Optional[str], ...], ...]
    falling_block: Optional[FallingBlockSnapshot]
    next_pattern: PatternCells
    frame_count: int = 0

    @property
    def width(self) -> int:
        return len(self.field[0]) if self.field else 0

    @property
    def height(self) -> int:
        return len(self.field)

    def to_dict(self) -> Dict[str, Any]:
        falling: Optional[Dict[str, Any]] = None
        if self.falling_block is not None:
            falling = {
                "pattern": [list(row) for row in self.falling_block.pattern],
                "position": {"x": self.falling_block.x, "y": self.falling_block.y},
                "rotation": self.falling_block.rotation,
            }
        return {
            "gameId": self.game_id,
            "state": self.state.value,
            "score": self.score,
            "field": [list(row) for row in self.field],
            "fallingBlock": falling,
            "nextBlock": [list(row) for row in self.next_pattern],
        }


def _pattern_cells(blocks: Matrix) -> PatternCells:
    return tuple(  # type: ignore[return-value]
        tuple(block.color.tag if block is not None else EMPTY_CELL for block in row) for row in blocks
    )


def _field_cells(field: Field) -> Tuple[Tuple[Optional[str], ...], ...]:
    rows = []
    for y in range(field.height):
        row = []
        for x in range(field.width):
            block = field.get_block(Position(x, y))
            row.append(block.color.tag if block is not None else None)
        rows.append(tuple(row))
    return tuple(rows)


def _falling_snapshot(falling: FallingBlock) -> FallingBlockSnapshot:
    return FallingBlockSnapshot(
        pattern=_pattern_cells(falling.rotated_blocks),
        x=falling.position.x,
        y=falling.position.y,
        rotation=int(falling.rotation),
    )


def pattern_snapshot(pattern: BlockPattern) -> PatternCells:
    return _pattern_cells(pattern.blocks)


def snapshot_game(game: Game) -> GameSnapshot:
    # A piece that ended the game by overlapping at spawn is not drawn
    falling = game.falling_block if game.state is not GameState.GAME_OVER else None
    return GameSnapshot(
        game_id=game.game_id,
        state=game.state,
        score=game.score.value,
        field=_field_cells(game.field),
        falling_block=_falling_snapshot(falling) if falling is not None else None,
        next_pattern=pattern_snapshot(game.next_pattern),
        frame_count=game.frame_count,
    )


def cell_rows(snapshot: GameSnapshot) -> Sequence[str]:
    """Plain-text rows of the board with the falling block overlaid, for debugging."""
    grid = [[cell[0].upper() if cell else "." for cell in row] for row in snapshot.field]
    falling = snapshot.falling_block
    if falling is not None:
        for dy, row in enumerate(falling.pattern):
            for dx, cell in enumerate(row):
                y, x = falling.y + dy, falling.x + dx
                if cell != EMPTY_CELL and 0 <= y < len(grid) and 0 <= x < len(grid[y]):
                    grid[y][x] = cell[0].lower()
    return ["".join(row) for row in grid]
