"""API routers."""

from .auth import router as auth_router
from .health import router as health_router
from .jobs import router as jobs_router
from .providers import router as providers_router
from .results import router as results_router
from .uploads import router as uploads_router

__all__ = [
    "auth_router",
    "health_router",
    "jobs_router",
    "providers_router",
    "results_router",
    "uploads_router",
]
