"""REST API routes for the leaderboard."""

import io
import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, Field

from leaderboard.config import config_from_env
from leaderboard.report_pdf import build_pdf

from ..transformers.entry_transformer import (
    error_detail,
    transform_entry,
    transform_leaderboard,
)
from ...application.use_cases.manage_leaderboard import (
    AddPlayerRequest,
    LeaderboardResult,
    LeaderboardUseCase,
)
from ...infrastructure.adapters.heap_leaderboard_adapter import HeapLeaderboardAdapter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["leaderboard"])

_use_case: LeaderboardUseCase | None = None


def get_use_case() -> LeaderboardUseCase:
    """Process-wide use case over a single heap, built on first use."""
    global _use_case
    if _use_case is None:
        config = config_from_env()
        store = HeapLeaderboardAdapter.from_seed(
            config.orientation, config.seed_source, timeout_s=config.http_timeout_s
        )
        logger.info(
            f"Leaderboard store ready: {store.orientation.value}-heap with {store.size()} players"
        )
        _use_case = LeaderboardUseCase(store)
    return _use_case


class PlayerRequest(BaseModel):
    """Request body for adding a player."""

    name: str = Field(
        ...,
        description="Player name",
        min_length=1,
    )
    score: int = Field(
        ...,
        alias="power",
        description="Player power; rank is derived from it",
    )

    class Config:
        populate_by_name = True


def _raise_for_failure(result: LeaderboardResult, **details) -> None:
    if result.success:
        return
    raise HTTPException(
        status_code=404,
        detail=error_detail(result.code or "LEADERBOARD_ERROR", result.error or "", **details),
    )


@router.post("/players", status_code=201)
async def add_player(request: PlayerRequest, use_case: LeaderboardUseCase = Depends(get_use_case)):
    """Add a player; the rank label is computed from power."""
    result = use_case.add_player(AddPlayerRequest(name=request.name, score=request.score))
    return transform_entry(result.entry)


@router.get("/players/top")
async def get_top_player(use_case: LeaderboardUseCase = Depends(get_use_case)):
    """Return the top player without removing it."""
    result = use_case.view_top()
    _raise_for_failure(result)
    return transform_entry(result.entry)


@router.delete("/players/top")
async def remove_top_player(use_case: LeaderboardUseCase = Depends(get_use_case)):
    """Remove and return the top player."""
    result = use_case.remove_top()
    _raise_for_failure(result)
    return transform_entry(result.entry)


@router.get("/players/{name}")
async def find_player(name: str, use_case: LeaderboardUseCase = Depends(get_use_case)):
    """Find the first player with this name.

    Note: "top" is reserved by the routes above, so a player named "top"
    can only be reached through the leaderboard listing.
    """
    result = use_case.find_player(name)
    _raise_for_failure(result, name=name)
    return transform_entry(result.entry)


@router.get("/leaderboard")
async def get_leaderboard(use_case: LeaderboardUseCase = Depends(get_use_case)):
    """Return every player in heap-array order (not sorted)."""
    result = use_case.list_entries()
    return transform_leaderboard(result.entries, use_case.store.orientation)


@router.get("/leaderboard/export.pdf")
async def export_leaderboard_pdf(use_case: LeaderboardUseCase = Depends(get_use_case)):
    """Render the current leaderboard to PDF."""
    result = use_case.list_entries()
    buffer = io.BytesIO()
    try:
        build_pdf(result.entries, buffer, orientation=use_case.store.orientation)
    except Exception as e:
        logger.error(f"PDF export failed: {e}")
        raise HTTPException(
            status_code=500,
            detail=error_detail("INTERNAL_ERROR", f"Error rendering PDF: {str(e)}"),
        )
    return Response(
        content=buffer.getvalue(),
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="leaderboard.pdf"'},
    )
