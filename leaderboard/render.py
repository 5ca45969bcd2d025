from __future__ import annotations

from typing import List, Sequence

from .models import Entry

MENU_OPTIONS = [
    (1, "Add User"),
    (2, "View Top User"),
    (3, "View Leaderboard"),
    (4, "Find User"),
    (5, "Remove Top User"),
    (0, "Exit"),
]


def render_menu() -> str:
    lines = ["Leaderboard Operations"]
    for number, label in MENU_OPTIONS:
        lines.append(f"[{number}] {label}")
    return "\n".join(lines)


def render_entry(entry: Entry, label: str = "User") -> str:
    return f"{label}: {entry.name}, Rank: {entry.rank}, Power: {entry.score}"


def render_table_lines(entries: Sequence[Entry]) -> List[str]:
    """Leaderboard rows in the order given; callers pass raw heap order."""
    name_w = max([len("Username")] + [len(e.name) for e in entries])
    rank_w = max([len("Rank")] + [len(e.rank) for e in entries])

    lines = [f"{'Username':<{name_w}}  {'Rank':<{rank_w}}  Power"]
    for e in entries:
        lines.append(f"{e.name:<{name_w}}  {e.rank:<{rank_w}}  {e.score}")
    return lines


def render_leaderboard(entries: Sequence[Entry]) -> str:
    lines = ["LEADERBOARD"]
    lines.extend(render_table_lines(entries))
    if not entries:
        lines.append("(no users)")
    return "\n".join(lines)
