"""Newsletter API endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

if TYPE_CHECKING:
    from blog_functions.containers import AppContainer

router = APIRouter(prefix="/api", tags=["newsletter"])

_logger = logging.getLogger(__name__)


@router.get("/newsletter-signup")
async def newsletter_signup(request: Request, email: str | None = None) -> Response:
    """Subscribe an email address and relay the provider's response."""
    if email is None or not email.strip():
        return PlainTextResponse("email query parameter required", status_code=400)
    container: AppContainer = request.app.state.container
    try:
        result = await container.newsletter_service.subscribe(email)
    except Exception:
        _logger.exception("Newsletter signup failed")
        return PlainTextResponse("Error", status_code=500)
    return JSONResponse(result.payload, status_code=result.status_code)


@router.get("/get-stats")
async def newsletter_stats(request: Request) -> Response:
    """Return the newsletter subscriber count."""
    container: AppContainer = request.app.state.container
    try:
        stats = await container.newsletter_service.stats()
    except Exception:
        _logger.exception("Newsletter stats lookup failed")
        return PlainTextResponse("Error", status_code=500)
    return JSONResponse({"buttondownCount": stats.regular_count})
