from __future__ import annotations

from typing import Dict, Optional, Protocol

from square_game.game import Game


class GameRepository(Protocol):
    def save(self, game: Game) -> None: ...

    def find_by_id(self, game_id: str) -> Optional[Game]: ...

    def delete(self, game_id: str) -> None: ...


class InMemoryGameRepository:
    """Keeps live games in a dict keyed by game id. Saving is an upsert."""

    def __init__(self) -> None:
        self._games: Dict[str, Game] = {}

    def save(self, game: Game) -> None:
        self._games[game.game_id] = game

    def find_by_id(self, game_id: str) -> Optional[Game]:
        return self._games.get(game_id)

    def delete(self, game_id: str) -> None:
        self._games.pop(game_id, None)

    def clear(self) -> None:
        self._games.clear()

    def __len__(self) -> int:
        return len(self._games)
