"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, ratecard_backend.api, ratecard_backend.observability, ratecard_backend.configs
System role: Application initialization and configuration
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ratecard_backend import __version__
from ratecard_backend.api.deps import get_service_cache
from ratecard_backend.api.routers import (
    auth_router,
    health_router,
    jobs_router,
    providers_router,
    results_router,
    uploads_router,
)
from ratecard_backend.boundary.db.connection import get_async_engine
from ratecard_backend.boundary.db.create_tables import create_all_tables
from ratecard_backend.configs import get_settings
from ratecard_backend.observability.logger import configure_logging
from ratecard_backend.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging, creates missing tables and builds the provider
    registry on startup; disposes the engine on shutdown.
    """
    settings = get_settings()

    # Startup
    configure_logging(settings.log_level)
    logger.info(
        "Application startup: logging configured",
        extra={"environment": settings.environment},
    )

    try:
        await create_all_tables()
        registry = get_service_cache().provider_registry
        logger.info(
            "Extraction providers configured",
            extra={"providers": [info.id for info in registry.describe()]},
        )
    except Exception as e:
        logger.exception(
            "Failed to initialize application resources",
            extra={"error": str(e)},
        )
        raise

    yield

    # Shutdown
    get_service_cache().clear()
    await get_async_engine().dispose()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        debug=get_settings().debug,
        title="Rate Card Extraction API",
        description="Extracts advertising rate card entries from uploaded documents",
        version=__version__,
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(auth_router, prefix="/api")
    app.include_router(uploads_router, prefix="/api")
    app.include_router(providers_router, prefix="/api")
    app.include_router(jobs_router, prefix="/api")
    app.include_router(results_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "ratecard_backend.main:app",
        host="0.0.0.0",
        port=5000,
    )
