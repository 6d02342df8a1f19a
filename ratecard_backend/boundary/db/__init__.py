"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IntegerIdMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - ProcessingJobModel, RatecardEntryModel: Domain entities
  - JobStatus: Job state enum
  - processing_job_crud, ratecard_entry_crud: CRUD operation singletons

Dependencies: sqlalchemy, ratecard_backend.configs
System role: Persistent storage for processing jobs and extracted entries
"""

from ratecard_backend.boundary.db.base import Base, IntegerIdMixin, TimestampMixin
from ratecard_backend.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from ratecard_backend.boundary.db.models import (
    JOB_TYPE_RATE_CARD,
    JobStatus,
    ProcessingJobModel,
    RatecardEntryModel,
)
from ratecard_backend.boundary.db.CRUD import (
    BaseCRUD,
    ProcessingJobCRUD,
    RatecardEntryCRUD,
    processing_job_crud,
    ratecard_entry_crud,
)

__all__ = [
    # Base classes
    "Base",
    "IntegerIdMixin",
    "TimestampMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "JOB_TYPE_RATE_CARD",
    "JobStatus",
    "ProcessingJobModel",
    "RatecardEntryModel",
    # CRUD
    "BaseCRUD",
    "ProcessingJobCRUD",
    "RatecardEntryCRUD",
    "processing_job_crud",
    "ratecard_entry_crud",
]
