from __future__ import annotations

import time
from dataclasses import dataclass
from typing import List, Optional, Protocol


MAX_RANKING_SIZE = 10


@dataclass(frozen=True)
class RankingEntry:
    score: int
    timestamp: float


class RankingRepository(Protocol):
    def find_all(self) -> List[RankingEntry]: ...

    def save(self, entries: List[RankingEntry]) -> None: ...


class InMemoryRankingRepository:
    def __init__(self) -> None:
        self._entries: List[RankingEntry] = []

    def find_all(self) -> List[RankingEntry]:
        return sorted(self._entries, key=lambda e: e.score, reverse=True)

    def save(self, entries: List[RankingEntry]) -> None:
        self._entries = list(entries)


class RankingService:
    """Keeps the best scores of finished games, highest first."""

    def __init__(self, repository: Optional[RankingRepository] = None, max_size: int = MAX_RANKING_SIZE) -> None:
        self.repository: RankingRepository = repository if repository is not None else InMemoryRankingRepository()
        self.max_size = max_size

    def add_score(self, score: int, timestamp: Optional[float] = None) -> None:
        entries = self.repository.find_all()
        entries.append(RankingEntry(score, time.time() if timestamp is None else timestamp))
        # sorted() is stable, so earlier entries win ties
        entries = sorted(entries, key=lambda e: e.score, reverse=True)
        self.repository.save(entries[: self.max_size])

    def get_ranking(self) -> List[RankingEntry]:
        return self.repository.find_all()

    def is_top_score(self, score: int) -> bool:
        entries = self.repository.find_all()
        if len(entries) < self.max_size:
            return True
        return score > entries[-1].score

    def clear_ranking(self) -> None:
        self.repository.save([])
