"""Infrastructure adapters."""

from .heap_leaderboard_adapter import HeapLeaderboardAdapter

__all__ = [
    "HeapLeaderboardAdapter",
]
