"""API routes."""

from ghkeep.api.router import api_router

__all__ = ["api_router"]
