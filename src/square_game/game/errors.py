from __future__ import annotations


class SquareGameError(Exception):
    """Base class for all engine errors."""


class InvalidPositionError(SquareGameError, ValueError):
    pass


class CellOccupiedError(SquareGameError):
    pass


class InvalidPatternError(SquareGameError, ValueError):
    pass


class InvalidScoreError(SquareGameError, ValueError):
    pass


class InvalidBlockError(SquareGameError, ValueError):
    pass


class InvalidRectangleError(SquareGameError, ValueError):
    pass


class GameNotFoundError(SquareGameError, LookupError):
    def __init__(self, game_id: str) -> None:
        super().__init__(f"Game not found: {game_id}")
        self.game_id = game_id
