from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

from .grid import FIELD_HEIGHT, FIELD_WIDTH, Field
from .patterns import BlockPatternGenerator
from .pieces import BlockPattern, Direction, FallingBlock, RotationDirection, spawn_position
from .primitives import Score
from .removal import BlockRemovalService


logger = logging.getLogger(__name__)

NORMAL_FALL_SPEED = 30
FAST_FALL_SPEED = 5


class GameState(str, Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameOver"


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE_CW = 2
    ROTATE_CCW = 3
    FAST_FALL_ON = 4
    FAST_FALL_OFF = 5
    HARD_DROP = 6
    NONE = 7


@dataclass
class GameConfig:
    width: int = FIELD_WIDTH
    height: int = FIELD_HEIGHT
    normal_fall_speed: int = NORMAL_FALL_SPEED
    fast_fall_speed: int = FAST_FALL_SPEED
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width < 2 or self.height < 2:
            raise ValueError("Field must be at least 2x2")
        if self.normal_fall_speed < 1 or self.fast_fall_speed < 1:
            raise ValueError("Fall speeds must be positive tick counts")


class Game:
    """One game session: the field, the active piece and the tick loop.

    `update()` is called once per frame by an outside timer. Every
    `fall_speed`-th frame the falling block moves down one row or, when it
    cannot, lands; landing runs the removal chain and adds the cleared cell
    count to the score.
    """

    def __init__(
        self,
        game_id: str,
        config: Optional[GameConfig] = None,
        generator: Optional[BlockPatternGenerator] = None,
    ) -> None:
        self.config = config or GameConfig()
        self._game_id = game_id
        self._generator = generator or BlockPatternGenerator.seeded(self.config.random_seed)
        self._removal = BlockRemovalService()
        self._field = Field(self.config.width, self.config.height)
        self._state = GameState.PLAYING
        self._falling_block: Optional[FallingBlock] = None
        self._next_pattern = self._generator.generate()
        self._score = Score.zero()
        self._frame_count = 0
        self._fall_speed = self.config.normal_fall_speed
        self._fast_falling = False

    @classmethod
    def create(
        cls,
        game_id: str,
        config: Optional[GameConfig] = None,
        generator: Optional[BlockPatternGenerator] = None,
    ) -> "Game":
        game = cls(game_id, config, generator)
        logger.debug("created game %s", game_id)
        return game

    @property
    def game_id(self) -> str:
        return self._game_id

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def field(self) -> Field:
        return self._field

    @property
    def falling_block(self) -> Optional[FallingBlock]:
        return self._falling_block

    @property
    def next_pattern(self) -> BlockPattern:
        return self._next_pattern

    @property
    def score(self) -> Score:
        return self._score

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def fall_speed(self) -> int:
        return self._fall_speed

    @property
    def is_fast_falling(self) -> bool:
        return self._fast_falling

    @property
    def last_chain_count(self) -> int:
        return self._removal.last_chain_count

    # Lifecycle

    def start(self) -> None:
        if self._state is GameState.GAME_OVER:
            return
        self._state = GameState.PLAYING
        self._spawn()

    def pause(self) -> None:
        if self._state is GameState.PLAYING:
            self._state = GameState.PAUSED

    def resume(self) -> None:
        if self._state is GameState.PAUSED:
            self._state = GameState.PLAYING

    def restart(self) -> None:
        self._field.clear()
        self._score = Score.zero()
        self._frame_count = 0
        self._fast_falling = False
        self._fall_speed = self.config.normal_fall_speed
        self._next_pattern = self._generator.generate()
        self._state = GameState.PLAYING
        self.start()

    def update(self) -> None:
        if self._state is not GameState.PLAYING:
            return

        self._frame_count += 1

        if self._falling_block is None:
            self._spawn()
            if self._state is GameState.GAME_OVER:
                return

        assert self._falling_block is not None
        if self._frame_count % self._fall_speed == 0:
            if self._falling_block.can_move(Direction.DOWN, self._field):
                self._falling_block.move_down()
            else:
                self._land_block()

    def is_game_over(self) -> bool:
        return self._field.has_block_in_top_row()

    # Commands

    def move_falling_block_left(self) -> None:
        if self._can_command() and self._falling_block.can_move(Direction.LEFT, self._field):
            self._falling_block.move_left()

    def move_falling_block_right(self) -> None:
        if self._can_command() and self._falling_block.can_move(Direction.RIGHT, self._field):
            self._falling_block.move_right()

    def rotate_falling_block_clockwise(self) -> None:
        if self._can_command() and self._falling_block.can_rotate(RotationDirection.CLOCKWISE, self._field):
            self._falling_block.rotate_clockwise()

    def rotate_falling_block_counterclockwise(self) -> None:
        if self._can_command() and self._falling_block.can_rotate(
            RotationDirection.COUNTERCLOCKWISE, self._field
        ):
            self._falling_block.rotate_counterclockwise()

    def enable_fast_fall(self) -> None:
        self._fast_falling = True
        self._fall_speed = self.config.fast_fall_speed

    def disable_fast_fall(self) -> None:
        self._fast_falling = False
        self._fall_speed = self.config.normal_fall_speed

    def drop_instantly(self) -> None:
        if not self._can_command():
            return
        while self._falling_block.can_move(Direction.DOWN, self._field):
            self._falling_block.move_down()
        self._land_block()

    def step(self, action: Action) -> None:
        if action == Action.LEFT:
            self.move_falling_block_left()
        elif action == Action.RIGHT:
            self.move_falling_block_right()
        elif action == Action.ROTATE_CW:
            self.rotate_falling_block_clockwise()
        elif action == Action.ROTATE_CCW:
            self.rotate_falling_block_counterclockwise()
        elif action == Action.FAST_FALL_ON:
            self.enable_fast_fall()
        elif action == Action.FAST_FALL_OFF:
            self.disable_fast_fall()
        elif action == Action.HARD_DROP:
            self.drop_instantly()
        elif action == Action.NONE:
            pass

    # Internals

    def _can_command(self) -> bool:
        return self._state is GameState.PLAYING and self._falling_block is not None

    def _spawn(self) -> None:
        self._falling_block = FallingBlock.create(self._next_pattern, spawn_position(self._field.width))
        self._next_pattern = self._generator.generate()
        # Immediate collision check: if overlaps, game over
        if self._falling_block.overlaps(self._field):
            self._set_game_over()

    def _land_block(self) -> None:
        assert self._falling_block is not None
        for block, position in self._falling_block.get_blocks():
            self._field.place_block(position, block)
        self._falling_block = None

        removed = self._removal.process_removal_chain(self._field)
        if removed > 0:
            self._score = self._score.add(removed)

        if self.is_game_over():
            self._set_game_over()

    def _set_game_over(self) -> None:
        self._state = GameState.GAME_OVER
        logger.info("game %s over at frame %d with score %d", self._game_id, self._frame_count, self._score.value)
