"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, ratecard_backend.configs
System role: Database schema initialization

Usage:
    python -m ratecard_backend.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from ratecard_backend.boundary.db.base import Base
from ratecard_backend.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from ratecard_backend.boundary.db.models.processing_job_model import ProcessingJobModel  # noqa: F401
from ratecard_backend.boundary.db.models.ratecard_entry_model import RatecardEntryModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Args:
        engine: Engine to create tables on; defaults to the configured engine

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(create_all_tables())
