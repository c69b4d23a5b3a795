"""Boundary layer: read snapshots, id-keyed commands, persistence and ranking."""

from .input import COOLDOWN_MS, CooldownManager, InputCommand
from .ranking import InMemoryRankingRepository, RankingEntry, RankingRepository, RankingService
from .repository import GameRepository, InMemoryGameRepository
from .service import GameService
from .snapshot import EMPTY_CELL, FallingBlockSnapshot, GameSnapshot, snapshot_game

__all__ = [
    "InputCommand",
    "CooldownManager",
    "COOLDOWN_MS",
    "RankingEntry",
    "RankingRepository",
    "InMemoryRankingRepository",
    "RankingService",
    "GameRepository",
    "InMemoryGameRepository",
    "GameService",
    "EMPTY_CELL",
    "FallingBlockSnapshot",
    "GameSnapshot",
    "snapshot_game",
]
