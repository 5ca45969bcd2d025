from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple


class Rank(str, Enum):
    """Rank label derived from a player's power."""

    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"
    DIAMOND = "Diamond"
    MASTER = "Master"
    GRANDMASTER = "Grandmaster"


# (rank, exclusive upper bound); None means unbounded
RANK_BANDS: List[Tuple[Rank, Optional[int]]] = [
    (Rank.BRONZE, 100),
    (Rank.SILVER, 300),
    (Rank.GOLD, 500),
    (Rank.PLATINUM, 700),
    (Rank.DIAMOND, 900),
    (Rank.MASTER, 1100),
    (Rank.GRANDMASTER, None),
]


def classify_rank(score: int) -> Rank:
    for rank, upper in RANK_BANDS:
        if upper is None or score < upper:
            return rank
    return Rank.GRANDMASTER


def classify(score: int) -> str:
    return classify_rank(score).value
