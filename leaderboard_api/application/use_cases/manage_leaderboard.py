"""Use cases for reading and mutating the leaderboard."""

import logging
from dataclasses import dataclass, field
from typing import List

from leaderboard.errors import LeaderboardError, PlayerNotFoundError
from leaderboard.models import Entry

from ..ports.leaderboard_store import LeaderboardStorePort

logger = logging.getLogger(__name__)


@dataclass
class AddPlayerRequest:
    """Request to add a player."""

    name: str
    score: int


@dataclass
class LeaderboardResult:
    """Outcome of a leaderboard operation.

    On failure ``entry`` is None and ``code`` names the condition; no
    placeholder entry is ever returned.
    """

    success: bool
    entry: Entry | None = None
    entries: List[Entry] = field(default_factory=list)
    error: str | None = None
    code: str | None = None

    @classmethod
    def failed(cls, exc: LeaderboardError) -> "LeaderboardResult":
        return cls(success=False, error=exc.user_message, code=exc.code)


class LeaderboardUseCase:
    """Use case for leaderboard operations.

    Each method runs one store operation to completion and converts
    leaderboard errors into a failed result.
    """

    def __init__(self, store: LeaderboardStorePort):
        self._store = store

    @property
    def store(self) -> LeaderboardStorePort:
        return self._store

    def add_player(self, request: AddPlayerRequest) -> LeaderboardResult:
        entry = self._store.add(request.name, request.score)
        logger.info(f"Added {entry.name} with power {entry.score} ({entry.rank})")
        return LeaderboardResult(success=True, entry=entry)

    def view_top(self) -> LeaderboardResult:
        try:
            return LeaderboardResult(success=True, entry=self._store.top())
        except LeaderboardError as e:
            return LeaderboardResult.failed(e)

    def remove_top(self) -> LeaderboardResult:
        try:
            entry = self._store.remove_top()
        except LeaderboardError as e:
            logger.info(f"Remove top rejected: {e}")
            return LeaderboardResult.failed(e)
        logger.info(f"Removed {entry.name}")
        return LeaderboardResult(success=True, entry=entry)

    def find_player(self, name: str) -> LeaderboardResult:
        entry = self._store.find(name)
        if entry is None:
            return LeaderboardResult.failed(PlayerNotFoundError(name))
        return LeaderboardResult(success=True, entry=entry)

    def list_entries(self) -> LeaderboardResult:
        return LeaderboardResult(success=True, entries=self._store.snapshot())
