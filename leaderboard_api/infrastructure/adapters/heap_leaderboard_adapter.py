"""Adapter wrapping the leaderboard heap."""

from typing import Iterable, List, Optional

from leaderboard.heap import Orientation, PriorityHeap
from leaderboard.models import Entry
from leaderboard.seed import load_seed, seed_heap

from ...application.ports.leaderboard_store import LeaderboardStorePort


class HeapLeaderboardAdapter(LeaderboardStorePort):
    """In-memory store backed by a PriorityHeap."""

    def __init__(
        self,
        orientation: Orientation | str = Orientation.MAX,
        entries: Iterable[Entry] = (),
    ):
        """Initialize the heap and insert any initial entries.

        Args:
            orientation: "max" or "min"
            entries: Entries inserted in iteration order
        """
        self._heap: PriorityHeap[Entry] = PriorityHeap(orientation)
        seed_heap(self._heap, entries)

    @classmethod
    def from_seed(
        cls,
        orientation: Orientation | str,
        source: str | None,
        timeout_s: float = 10.0,
    ) -> "HeapLeaderboardAdapter":
        """Build a store seeded from a path or URL; "sample" means bundled data."""
        if not source:
            return cls(orientation)
        return cls(orientation, load_seed(None if source == "sample" else source, timeout_s=timeout_s))

    @property
    def orientation(self) -> Orientation:
        return self._heap.orientation

    def add(self, name: str, score: int) -> Entry:
        entry = Entry(name=name, score=score)
        self._heap.insert(entry)
        return entry

    def top(self) -> Entry:
        return self._heap.peek_top()

    def remove_top(self) -> Entry:
        return self._heap.extract_top()

    def find(self, name: str) -> Optional[Entry]:
        return self._heap.find_by_name(name)

    def snapshot(self) -> List[Entry]:
        return self._heap.to_ordered_snapshot()

    def size(self) -> int:
        return self._heap.size()
