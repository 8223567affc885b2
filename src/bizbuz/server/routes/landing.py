"""Landing page: ``GET /`` serves the packaged ``static/index.html``."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter
from starlette.responses import HTMLResponse

router = APIRouter()

# Static directory (bundled with package)
_STATIC_DIR = Path(__file__).parent.parent / "static"


@router.get("/", response_class=HTMLResponse)
async def landing() -> HTMLResponse:
    page = (_STATIC_DIR / "index.html").read_text(encoding="utf-8")
    return HTMLResponse(page)
