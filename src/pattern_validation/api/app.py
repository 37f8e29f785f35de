"""
FastAPI Application Factory & Configuration.

This module builds the FastAPI application that hosts the pattern write path.
It is responsible for:
1.  **Exception Handling**: Global handlers so every error returns structured JSON.
2.  **Routing**: Mounting the pattern router and the health check.
3.  **Lifecycle**: Initializing the post store before requests arrive.

Validation rejections are not exceptions; the router turns them into HTTP 400
responses itself. The handlers here only cover unexpected failures.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pattern_validation import __version__
from pattern_validation.api.routers import patterns
from pattern_validation.api.schemas import HealthInfo
from pattern_validation.core.settings import get_logger, load_settings
from pattern_validation.core.store.posts import InMemoryPostStore

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    ASGI Lifespan context manager.

    - **Startup**: Initialize the in-memory post store singleton.
    - **Shutdown**: Nothing to release.
    """
    logger.info("Pattern Validation API starting up")
    InMemoryPostStore.get_instance()
    yield
    logger.info("Pattern Validation API shutting down")


def create_app() -> FastAPI:
    """
    Construct and configure the Pattern Validation FastAPI application.

    Returns
    -------
    FastAPI
        The configured ASGI application ready to be served by Uvicorn.
    """
    app = FastAPI(
        title="Pattern Validation API",
        description="Pre-save validation for block pattern content",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all handler so unhandled exceptions return structured JSON."""
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "detail": str(exc),
                "path": request.url.path,
            },
        )

    app.include_router(patterns.router)

    @app.get("/health", tags=["System"], response_model=HealthInfo)
    async def health_check() -> HealthInfo:
        """Simple liveness check."""
        return HealthInfo(environment=load_settings().environment, version=__version__)

    return app


__all__ = ["create_app"]
