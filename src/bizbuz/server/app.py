"""FastAPI application factory for the BizBuz card service."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import httpx
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse

from bizbuz import __version__
from bizbuz.profiles import ProfileResolver, create_profile_client
from bizbuz.server.config import Settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Own the shared profile service client across the app lifetime."""
    settings = app.state.settings
    client = create_profile_client(
        settings.prof_base_url,
        timeout=settings.profile_timeout,
        transport=app.state.profile_transport,
    )
    app.state.profile_client = client
    app.state.profile_resolver = ProfileResolver(client)
    logger.info(
        "BizBuz card service starting: port=%d prof_url=%s",
        settings.port,
        settings.prof_base_url,
    )

    yield

    await client.aclose()
    logger.info("BizBuz card service stopped")


def create_app(
    settings: Settings | None = None,
    *,
    profile_transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create and configure the BizBuz FastAPI application.

    Args:
        settings: Service settings.  Read from the environment if omitted.
        profile_transport: Optional httpx transport for the profile service
            client (tests pass an ``httpx.MockTransport``).
    """
    if settings is None:
        settings = Settings()

    # Configure logging from settings
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.debug:
        logging.getLogger("bizbuz").setLevel(logging.DEBUG)

    app = FastAPI(
        title="BizBuz",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.profile_transport = profile_transport

    # JSON error shape: {"error": "<message>"}
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"error": str(exc)})

    from bizbuz.server.routes.api import router as api_router
    from bizbuz.server.routes.cards import router as cards_router
    from bizbuz.server.routes.health import router as health_router
    from bizbuz.server.routes.landing import router as landing_router

    app.include_router(landing_router)
    app.include_router(cards_router)
    app.include_router(api_router, prefix="/api")
    app.include_router(health_router)

    return app
