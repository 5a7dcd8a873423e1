"""
FastAPI Application Factory & Configuration.

This module initializes the blockstyle HTTP application. It is responsible for:
1.  **Middleware Setup**: CORS so editor plugins and web tools can call it.
2.  **Exception Handling**: Global handlers so all errors return structured JSON.
3.  **Routing**: Mounting the lint router and the health probe.

We use an **Application Factory** pattern (`create_app`) so each test can
spin up an isolated app instance.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blockstyle import __version__
from blockstyle.api.routers import lint
from blockstyle.core.settings import get_logger, load_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """ASGI lifespan: log startup and shutdown."""
    logger.info("blockstyle API starting (env=%s)", load_settings().environment)
    yield
    logger.info("blockstyle API shutting down")


def create_app() -> FastAPI:
    """
    Construct and configure the blockstyle FastAPI application.

    Returns
    -------
    FastAPI
        The configured ASGI application ready to be served by Uvicorn.
    """
    app = FastAPI(
        title="blockstyle API",
        description="Single-line / multi-line policy checks for doc comment blocks",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -----------------------------------------------------------------------
    # Global Exception Handlers
    # -----------------------------------------------------------------------
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Return unhandled exceptions as a JSON 500 payload."""
        logger.exception("unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "detail": str(exc),
                "path": request.url.path,
            },
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        """Map Python ValueErrors (bad options files, bad input) to HTTP 400."""
        return JSONResponse(
            status_code=400,
            content={
                "error": "Bad Request",
                "detail": str(exc),
            },
        )

    # -----------------------------------------------------------------------
    # Routes
    # -----------------------------------------------------------------------
    app.include_router(lint.router)

    @app.get("/health", tags=["System"])
    async def health_check() -> dict[str, str]:
        """Simple liveness probe."""
        return {
            "status": "ok",
            "environment": load_settings().environment,
            "version": __version__,
        }

    return app


__all__ = ["create_app"]
