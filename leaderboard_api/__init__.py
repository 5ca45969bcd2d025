"""Power Leaderboard API.

This package exposes the heap-backed leaderboard over HTTP using a
hexagonal layout.

Layers:
- application: Use cases and port interfaces
- infrastructure: Adapters over the leaderboard heap
- api: REST endpoints and response transformers
"""

__version__ = "1.0.0"
