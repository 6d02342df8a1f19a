"""Upload router package."""

from .uploads_router import router

__all__ = ["router"]
