"""Port (interface) for leaderboard storage."""

from abc import ABC, abstractmethod
from typing import List, Optional

from leaderboard.heap import Orientation
from leaderboard.models import Entry


class LeaderboardStorePort(ABC):
    """Port for the ranked player store."""

    @property
    @abstractmethod
    def orientation(self) -> Orientation:
        """Whether the highest or lowest power surfaces first."""
        ...

    @abstractmethod
    def add(self, name: str, score: int) -> Entry:
        """Create an entry (rank derived from score) and store it.

        Args:
            name: Player name, non-empty
            score: Player power

        Returns:
            The stored entry
        """
        ...

    @abstractmethod
    def top(self) -> Entry:
        """Return the top entry without removing it.

        Raises:
            EmptyLeaderboardError: when the store holds no entries
        """
        ...

    @abstractmethod
    def remove_top(self) -> Entry:
        """Remove and return the top entry.

        Raises:
            EmptyLeaderboardError: when the store holds no entries
        """
        ...

    @abstractmethod
    def find(self, name: str) -> Optional[Entry]:
        """Return the first entry with this name, or None."""
        ...

    @abstractmethod
    def snapshot(self) -> List[Entry]:
        """Return all entries in storage order."""
        ...

    @abstractmethod
    def size(self) -> int:
        ...
