"""FastAPI main application."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .aggregator import LiveMatchAggregator
from .api import live_router
from .config import Settings

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    aggregator: Optional[LiveMatchAggregator] = None
) -> FastAPI:
    """
    Create the API application.

    Args:
        settings: Optional settings, loaded from the environment when omitted
        aggregator: Optional prebuilt aggregator

    Returns:
        FastAPI application
    """
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(f"Starting {settings.app_name}...")
        app.state.aggregator = aggregator or LiveMatchAggregator.from_settings(settings)
        logger.info(f"Configured {len(app.state.aggregator.clients)} upstream clients")
        yield
        logger.info(f"Stopped {settings.app_name}")

    app = FastAPI(
        title=settings.app_name,
        description="Live football matches aggregated from several upstream feeds",
        version="0.1.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(live_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
