"""Application use cases."""

from .manage_leaderboard import (
    AddPlayerRequest,
    LeaderboardResult,
    LeaderboardUseCase,
)

__all__ = [
    "AddPlayerRequest",
    "LeaderboardResult",
    "LeaderboardUseCase",
]
