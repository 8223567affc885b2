"""Profile JSON endpoint: ``GET /api/profile/{identifier}``."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request

from bizbuz.errors import ProfileNotFoundError
from bizbuz.server.models import ErrorResponse, ProfileResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/profile/{identifier}",
    response_model=ProfileResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_profile(identifier: str, request: Request) -> ProfileResponse:
    """Return the resolved profile as ``{"success": true, "profile": {...}}``."""
    resolver = request.app.state.profile_resolver

    try:
        profile = await resolver.require(identifier)
    except ProfileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Error fetching profile %s", identifier)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return ProfileResponse(profile=profile.to_dict())
