"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict
from datetime import UTC, date, datetime

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from blog_functions.api.newsletter import router as newsletter_router
from blog_functions.app_logging import configure_logging
from blog_functions.containers import AppContainer
from blog_functions.domain.moon import MoonIcon
from blog_functions.services.moon_icon import moon_phase_icon
from blog_functions.services.moon_phase import current_phase

_COLOR_PATTERN = r"^[#A-Za-z0-9(),.% ]+$"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Starting blog functions: env=%s", container.settings.environment)
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(newsletter_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/get-recommendations")
    async def get_recommendations(
        request: Request, path: str | None = None
    ) -> Response:
        """Return related content for a post path."""
        if path is None or not path.strip():
            return PlainTextResponse("No path!", status_code=400)
        state_container: AppContainer = request.app.state.container
        recommendations = (
            await state_container.recommendation_service.get_recommendations(path)
        )
        return JSONResponse([asdict(reco) for reco in recommendations])

    @app.get("/api/moon-phase")
    async def moon_phase(
        on: date | None = Query(default=None, alias="date"),
        size: float = Query(default=24, gt=4, le=1024),
        color: str = Query(
            default="currentColor", max_length=32, pattern=_COLOR_PATTERN
        ),
    ) -> dict[str, str]:
        """Return the moon phase for a date along with its icon."""
        resolved, icon = _moon_icon(on, size, color)
        return {
            "date": resolved.isoformat(),
            "phase": icon.phase.value,
            "svg": icon.to_svg(),
        }

    @app.get("/api/moon-phase.svg")
    async def moon_phase_svg(
        on: date | None = Query(default=None, alias="date"),
        size: float = Query(default=24, gt=4, le=1024),
        color: str = Query(
            default="currentColor", max_length=32, pattern=_COLOR_PATTERN
        ),
    ) -> Response:
        """Return the moon phase icon as an SVG document."""
        _, icon = _moon_icon(on, size, color)
        return Response(content=icon.to_svg(), media_type="image/svg+xml")

    @app.get("/api/log")
    async def tracker_log(request: Request) -> JSONResponse:
        """Return the analytics tracker log."""
        state_container: AppContainer = request.app.state.container
        return JSONResponse(state_container.tracker_service.get_log())

    return app


def _moon_icon(on: date | None, size: float, color: str) -> tuple[date, MoonIcon]:
    """Resolve the requested date and build its icon."""
    resolved = on or _today()
    return resolved, moon_phase_icon(current_phase(resolved), size=size, color=color)


def _today() -> date:
    return datetime.now(tz=UTC).date()
