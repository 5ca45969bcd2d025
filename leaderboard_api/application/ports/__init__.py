"""Application ports (interfaces)."""

from .leaderboard_store import LeaderboardStorePort

__all__ = [
    "LeaderboardStorePort",
]
