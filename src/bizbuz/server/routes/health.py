"""Liveness check: ``GET /health``. Does not contact the profile service."""

from __future__ import annotations

from fastapi import APIRouter

from bizbuz import __version__
from bizbuz.server.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)
