"""
Test suite for RatecardEntryCRUD against an in-memory SQLite database.

System role: Verification of entry persistence and listing order
"""

import pytest
from sqlalchemy import Text

from ratecard_backend.boundary.db.CRUD.processing_job_crud import processing_job_crud
from ratecard_backend.boundary.db.CRUD.ratecard_entry_crud import RatecardEntryCRUD
from ratecard_backend.boundary.db.models.processing_job_model import JobStatus
from ratecard_backend.boundary.db.models.ratecard_entry_model import RatecardEntryModel


@pytest.fixture
def entry_crud() -> RatecardEntryCRUD:
    return RatecardEntryCRUD()


async def _create_job(session, file_name: str) -> int:
    job = await processing_job_crud.create(
        session,
        file_name=file_name,
        status=JobStatus.PROCESSING,
    )
    return job.id


async def test_create_many_and_get_by_job_id(entry_crud, test_async_db):
    job_id = await _create_job(test_async_db, "cardA.pdf")
    other_job_id = await _create_job(test_async_db, "cardB.pdf")

    created = await entry_crud.create_many(
        test_async_db,
        [
            {"job_id": job_id, "original_file_name": "cardA.pdf", "media_type": "Print"},
            {"job_id": job_id, "original_file_name": "cardA.pdf", "media_type": "Digital"},
            {"job_id": other_job_id, "original_file_name": "cardB.pdf", "media_type": "Radio"},
        ],
    )

    assert all(entry.id is not None for entry in created)
    entries = await entry_crud.get_by_job_id(test_async_db, job_id)
    assert [e.media_type for e in entries] == ["Print", "Digital"]
    assert all(e.confidence == "medium" for e in entries)


async def test_get_by_job_id_without_entries(entry_crud, test_async_db):
    job_id = await _create_job(test_async_db, "empty.pdf")

    assert list(await entry_crud.get_by_job_id(test_async_db, job_id)) == []


async def test_get_all_newest_first(entry_crud, test_async_db):
    job_id = await _create_job(test_async_db, "cardA.pdf")
    for media_type in ("Print", "Digital", "Radio"):
        await entry_crud.create(
            test_async_db,
            job_id=job_id,
            original_file_name="cardA.pdf",
            media_type=media_type,
        )

    entries = await entry_crud.get_all_newest_first(test_async_db)

    assert [e.media_type for e in entries] == ["Radio", "Digital", "Print"]


def test_original_file_name_is_unbounded_text():
    column_type = RatecardEntryModel.__table__.c["original_file_name"].type

    assert isinstance(column_type, Text)
    assert getattr(column_type, "length", None) is None


@pytest.mark.parametrize("crud", [processing_job_crud, RatecardEntryCRUD()])
def test_jobs_and_entries_have_no_delete_operation(crud):
    assert not any(name.startswith("delete") for name in dir(crud))
