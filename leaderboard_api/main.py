"""Main FastAPI application with hexagonal architecture."""

from __future__ import annotations

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from pydantic import BaseModel

from leaderboard.config import config_from_env

from . import __version__
from .api.rest.routes import get_use_case, router as leaderboard_router

# Load environment variables
load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the leaderboard store at startup."""
    get_use_case()
    yield


app = FastAPI(
    title="Power Leaderboard API",
    description="Heap-backed player leaderboard ranked by power",
    version=__version__,
    lifespan=lifespan,
)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    orientation: str
    seed_configured: bool


@app.get("/", tags=["meta"])
async def root():
    """API root with information and available endpoints."""
    return {
        "name": "Power Leaderboard API",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "health": "GET /health",
            "add": "POST /api/players",
            "top": "GET /api/players/top",
            "removeTop": "DELETE /api/players/top",
            "find": "GET /api/players/{name}",
            "leaderboard": "GET /api/leaderboard",
            "export": "GET /api/leaderboard/export.pdf",
        },
    }


@app.get("/health", response_model=HealthResponse, tags=["meta"])
async def health_check():
    """Check API health and configuration status."""
    config = config_from_env()
    return HealthResponse(
        status="healthy",
        version=__version__,
        orientation=config.orientation.value,
        seed_configured=bool(config.seed_source),
    )


# Include REST routes
app.include_router(leaderboard_router)

__all__ = ["app", "get_use_case"]
