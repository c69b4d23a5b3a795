from __future__ import annotations

import logging
import uuid
from typing import Callable, Optional

from square_game.game import Action, Game, GameConfig, GameNotFoundError, GameState

from .repository import GameRepository, InMemoryGameRepository
from .snapshot import GameSnapshot, snapshot_game


logger = logging.getLogger(__name__)


class GameService:
    """Command surface over stored games, keyed by game id.

    Each command loads the game, applies one engine call and saves it back.
    Unknown ids raise `GameNotFoundError`. Calls for a given id must be
    serialized by the caller; the engine holds no locks.
    """

    def __init__(
        self,
        repository: Optional[GameRepository] = None,
        config: Optional[GameConfig] = None,
        game_factory: Optional[Callable[[str], Game]] = None,
    ) -> None:
        self.repository: GameRepository = repository if repository is not None else InMemoryGameRepository()
        self.config = config
        self._game_factory = game_factory or (lambda game_id: Game.create(game_id, self.config))

    def start_new_game(self, game_id: Optional[str] = None) -> GameSnapshot:
        game = self._game_factory(game_id or str(uuid.uuid4()))
        game.start()
        self.repository.save(game)
        return snapshot_game(game)

    def pause_game(self, game_id: str) -> None:
        self._apply(game_id, Game.pause)

    def resume_game(self, game_id: str) -> None:
        self._apply(game_id, Game.resume)

    def toggle_pause(self, game_id: str) -> GameState:
        game = self._get_game(game_id)
        if game.state is GameState.PLAYING:
            game.pause()
        elif game.state is GameState.PAUSED:
            game.resume()
        self.repository.save(game)
        return game.state

    def restart_game(self, game_id: str) -> GameSnapshot:
        return snapshot_game(self._apply(game_id, Game.restart))

    def move_block_left(self, game_id: str) -> None:
        self._apply(game_id, Game.move_falling_block_left)

    def move_block_right(self, game_id: str) -> None:
        self._apply(game_id, Game.move_falling_block_right)

    def rotate_block_clockwise(self, game_id: str) -> None:
        self._apply(game_id, Game.rotate_falling_block_clockwise)

    def rotate_block_counterclockwise(self, game_id: str) -> None:
        self._apply(game_id, Game.rotate_falling_block_counterclockwise)

    def accelerate_fall(self, game_id: str) -> None:
        self._apply(game_id, Game.enable_fast_fall)

    def disable_fast_fall(self, game_id: str) -> None:
        self._apply(game_id, Game.disable_fast_fall)

    def drop_instantly(self, game_id: str) -> None:
        self._apply(game_id, Game.drop_instantly)

    def update_frame(self, game_id: str) -> GameSnapshot:
        return snapshot_game(self._apply(game_id, Game.update))

    def dispatch(self, game_id: str, action: Action) -> None:
        game = self._get_game(game_id)
        game.step(action)
        self.repository.save(game)

    def get_game_state(self, game_id: str) -> GameSnapshot:
        return snapshot_game(self._get_game(game_id))

    def _apply(self, game_id: str, command: Callable[[Game], None]) -> Game:
        game = self._get_game(game_id)
        command(game)
        self.repository.save(game)
        return game

    def _get_game(self, game_id: str) -> Game:
        game = self.repository.find_by_id(game_id)
        if game is None:
            logger.warning("command for unknown game %s", game_id)
            raise GameNotFoundError(game_id)
        return game
