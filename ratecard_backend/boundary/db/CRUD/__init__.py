"""
CRUD operations for database models.

Exports:
  - BaseCRUD: Generic CRUD base class
  - ProcessingJobCRUD, processing_job_crud: Job operations
  - RatecardEntryCRUD, ratecard_entry_crud: Entry operations
"""

from ratecard_backend.boundary.db.CRUD.base_crud import BaseCRUD
from ratecard_backend.boundary.db.CRUD.processing_job_crud import (
    ProcessingJobCRUD,
    processing_job_crud,
)
from ratecard_backend.boundary.db.CRUD.ratecard_entry_crud import (
    RatecardEntryCRUD,
    ratecard_entry_crud,
)

__all__ = [
    "BaseCRUD",
    "ProcessingJobCRUD",
    "RatecardEntryCRUD",
    "processing_job_crud",
    "ratecard_entry_crud",
]
