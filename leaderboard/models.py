from __future__ import annotations

from dataclasses import dataclass, field

from .ranks import classify


@dataclass(frozen=True)
class Entry:
    name: str
    score: int
    rank: str = field(init=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Entry name must be non-empty")
        # frozen: rank is derived once, at creation
        object.__setattr__(self, "rank", classify(self.score))
