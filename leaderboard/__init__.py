"""Player power leaderboard backed by a binary heap."""

__all__ = [
    "config",
    "errors",
    "ranks",
    "models",
    "heap",
    "parsing",
    "seed",
    "render",
    "console",
    "report_pdf",
    "cli",
]
