"""Game module for the square-matching block puzzle.

Exports the core engine and supporting classes:
- Field: fixed 8x20 board of settled blocks
- BlockPattern / FallingBlock: the 2x2 piece and its movement and rotation
- BlockMatchingService / BlockFallService / BlockRemovalService: match, gravity and chain
- BlockPatternGenerator: seedable source of new patterns
- Game: the frame-driven state machine
"""

from .errors import (
    CellOccupiedError,
    GameNotFoundError,
    InvalidBlockError,
    InvalidPatternError,
    InvalidPositionError,
    InvalidRectangleError,
    InvalidScoreError,
    SquareGameError,
)
from .primitives import Block, Color, Position, Rectangle, Score
from .grid import FIELD_HEIGHT, FIELD_WIDTH, Field
from .collision import CollisionDetectionService
from .pieces import (
    BlockPattern,
    Direction,
    FallingBlock,
    PatternKind,
    PlacedBlock,
    Rotation,
    RotationDirection,
    spawn_position,
)
from .patterns import BlockPatternGenerator, RandomSource
from .matching import BlockMatchingService
from .gravity import BlockFallService
from .removal import BlockRemovalService
from .core import FAST_FALL_SPEED, NORMAL_FALL_SPEED, Action, Game, GameConfig, GameState

__all__ = [
    "SquareGameError",
    "InvalidPositionError",
    "CellOccupiedError",
    "InvalidPatternError",
    "InvalidScoreError",
    "InvalidBlockError",
    "InvalidRectangleError",
    "GameNotFoundError",
    "Position",
    "Color",
    "Block",
    "Rectangle",
    "Score",
    "FIELD_WIDTH",
    "FIELD_HEIGHT",
    "Field",
    "CollisionDetectionService",
    "BlockPattern",
    "PatternKind",
    "Rotation",
    "Direction",
    "RotationDirection",
    "FallingBlock",
    "PlacedBlock",
    "spawn_position",
    "BlockPatternGenerator",
    "RandomSource",
    "BlockMatchingService",
    "BlockFallService",
    "BlockRemovalService",
    "NORMAL_FALL_SPEED",
    "FAST_FALL_SPEED",
    "GameState",
    "Action",
    "GameConfig",
    "Game",
]
