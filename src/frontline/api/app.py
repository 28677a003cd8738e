"""FastAPI application hosting one Frontline client session."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from frontline.api import routes
from frontline.api.runtime import ApiState, build_state
from frontline.config import Settings, configure_logging, get_settings
from frontline.domain.errors import FrontlineError

logger = logging.getLogger(__name__)


async def _reject_update(request: Request, exc: FrontlineError) -> JSONResponse:
    logger.warning("rejected update from %s: %s", request.client, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app(
    *,
    settings: Settings | None = None,
    state_factory: Callable[[Settings], ApiState] = build_state,
) -> FastAPI:
    """
    Build the bridge app.

    Logging is configured from ``settings.log_level`` when the lifespan
    starts, so every launch path (``main.py``, ``uvicorn --reload`` or a bare
    ``uvicorn frontline.api.app:app``) honours ``FRONTLINE_LOG_LEVEL``.
    Model errors raised by a route become 422 responses.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        state = state_factory(settings)
        app.state.api_state = state
        logger.info("client bridge ready; server feed expected on /ws")
        try:
            yield
        finally:
            await state.shutdown()

    app = FastAPI(title="Frontline client bridge", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_exception_handler(FrontlineError, _reject_update)
    app.include_router(routes.router)
    return app


app = create_app()
