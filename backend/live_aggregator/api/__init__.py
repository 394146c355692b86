"""HTTP API for live match consumers."""

from .live_api import router as live_router

__all__ = ["live_router"]
