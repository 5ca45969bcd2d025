"""Transform leaderboard entries into the frontend format."""

from typing import Any, Dict, List, Sequence

from leaderboard.heap import Orientation
from leaderboard.models import Entry


def transform_entry(entry: Entry) -> Dict[str, Any]:
    return {
        "name": entry.name,
        "power": entry.score,
        "rank": entry.rank,
    }


def transform_leaderboard(entries: Sequence[Entry], orientation: Orientation) -> Dict[str, Any]:
    """Leaderboard payload; ``heapIndex`` is the position in the backing array.

    Entries keep heap-array order so clients see the same layout as the
    console listing.
    """
    rows: List[Dict[str, Any]] = []
    for idx, entry in enumerate(entries):
        row = transform_entry(entry)
        row["heapIndex"] = idx
        rows.append(row)
    return {
        "orientation": orientation.value,
        "size": len(rows),
        "entries": rows,
    }


def error_detail(code: str, message: str, **details: Any) -> Dict[str, Any]:
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details,
        }
    }
