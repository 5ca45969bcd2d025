"""
Exceptions for the leaderboard with user-facing messages.
"""

from __future__ import annotations

from typing import Optional


class LeaderboardError(Exception):
    """Base exception for leaderboard errors."""

    code = "LEADERBOARD_ERROR"

    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.user_message = user_message or message


class EmptyLeaderboardError(LeaderboardError):
    """Raised when the top entry is requested from an empty leaderboard."""

    code = "EMPTY_LEADERBOARD"

    def __init__(self) -> None:
        super().__init__("Leaderboard has no entries", "Leaderboard is empty.")


class PlayerNotFoundError(LeaderboardError):
    """Raised by callers that treat a missing name as an error."""

    code = "PLAYER_NOT_FOUND"

    def __init__(self, name: str):
        super().__init__(f"No entry named '{name}'", f"User '{name}' not found.")
        self.name = name


class MalformedRecordError(LeaderboardError):
    """Raised when a record cannot be parsed into (name, score)."""

    code = "MALFORMED_RECORD"

    def __init__(self, raw: object, reason: str):
        super().__init__(f"Malformed record {raw!r}: {reason}", "Invalid input. Try again.")
        self.raw = raw
        self.reason = reason
