"""Card endpoints: HTML business card, vCard download and QR image.

- ``GET /card/{identifier}`` -- business card page (HTML error page on failure).
- ``GET /vcard/{identifier}`` -- vCard 3.0 attachment.
- ``GET /qr/{identifier}`` -- PNG QR code of the card URL on this host.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request
from starlette.responses import HTMLResponse, Response

from bizbuz.cards.html import render_card_page, render_error_page
from bizbuz.cards.qr import render_qr_png
from bizbuz.cards.vcard import generate_profile_vcard, vcard_filename
from bizbuz.errors import ProfileNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/card/{identifier}", response_class=HTMLResponse)
async def view_card(identifier: str, request: Request) -> HTMLResponse:
    """Render the business card page for an identifier.

    Failures are rendered as the HTML error page: 404 when the profile
    cannot be resolved, 500 with the exception message otherwise.
    """
    logger.info("Fetching business card for %s", identifier)
    resolver = request.app.state.profile_resolver

    try:
        profile = await resolver.require(identifier)
        page = render_card_page(profile, identifier)
    except ProfileNotFoundError as exc:
        return HTMLResponse(render_error_page(str(exc)), status_code=404)
    except Exception as exc:
        logger.exception("Error rendering card for %s", identifier)
        return HTMLResponse(render_error_page(str(exc)), status_code=500)

    return HTMLResponse(page)


@router.get("/vcard/{identifier}")
async def download_vcard(identifier: str, request: Request) -> Response:
    """Download the profile as a vCard 3.0 file.

    Returns ``text/vcard`` with a ``Content-Disposition: attachment`` header
    whose filename is derived from the profile name.
    """
    logger.info("Generating vCard for %s", identifier)
    resolver = request.app.state.profile_resolver

    try:
        profile = await resolver.require(identifier)
        vcf_content = generate_profile_vcard(profile)
    except ProfileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Error generating vCard for %s", identifier)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return Response(
        content=vcf_content,
        media_type="text/vcard",
        headers={
            "Content-Disposition": f'attachment; filename="{vcard_filename(profile)}"',
        },
    )


@router.get("/qr/{identifier}")
async def qr_image(identifier: str, request: Request) -> Response:
    """Return a 300x300 PNG QR code pointing at this host's card page.

    The target URL uses the scheme and Host of the incoming request, unlike
    the QR embedded in the card page, which always points at the public host.
    """
    host = request.headers.get("host") or request.url.netloc
    target = f"{request.url.scheme}://{host}/card/{identifier}"

    try:
        png = render_qr_png(target, size=300, margin=2)
    except Exception as exc:
        logger.exception("Error generating QR for %s", identifier)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return Response(content=png, media_type="image/png")
