"""
FastAPI application entry point.

Wires the relay routers, CORS and error handling together. The relay service
(configuration, secret provider and Replicate client factory) is built once
at startup and shared by all requests.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from seedance_relay import __version__
from seedance_relay.models.relay import RelayService
from .routers import health, video
from .dependencies.relay import app_state

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load configuration and build the relay service once per process."""
    logger.info("Starting Seedance relay...")
    relay_service = RelayService.from_config()
    app_state["relay_service"] = relay_service
    logger.info(
        f"Relay ready: model={relay_service.config.generation.model}, "
        f"secrets={relay_service.config.secrets.type}"
    )

    yield

    logger.info("Shutting down Seedance relay...")
    app_state.clear()


def create_app() -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    Tests build their own instance and override ``get_relay_service``.
    """

    app = FastAPI(
        title="Seedance Relay API",
        description="Relay for image-to-video generation on Replicate",
        version=__version__,
        lifespan=lifespan
    )

    # Any origin may call the relay
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "details": str(exc)}
        )

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(video.router, prefix="/api", tags=["video"])

    @app.get("/")
    async def root():
        """Root endpoint with basic API information."""
        return {
            "name": "Seedance Relay API",
            "version": __version__,
            "endpoints": {
                "GET /api/createVideo": "Start a generation task (prompt, imageUrl, resolution)",
                "GET /api/checkStatus": "Current status of a task (taskId)",
                "GET /api/test": "Fixed mock response",
                "GET /health": "Liveness check",
                "GET /docs": "API documentation"
            }
        }

    return app


app = create_app()
