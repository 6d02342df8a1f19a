"""
Rate card entry CRUD operations.

Dependencies: sqlalchemy, ratecard_backend.boundary.db.models
System role: Entry persistence and listing
"""

from typing import Iterable, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ratecard_backend.boundary.db.CRUD.base_crud import BaseCRUD
from ratecard_backend.boundary.db.models.ratecard_entry_model import RatecardEntryModel


class RatecardEntryCRUD(BaseCRUD[RatecardEntryModel]):
    """CRUD operations for RatecardEntryModel."""

    def __init__(self) -> None:
        super().__init__(RatecardEntryModel)

    async def create_many(
        self,
        session: AsyncSession,
        rows: Iterable[dict],
    ) -> list[RatecardEntryModel]:
        """
        Insert a batch of entries in the current transaction.

        Args:
            session: Async database session
            rows: Column values per entry

        Returns:
            Created entries with generated ids
        """
        instances = [RatecardEntryModel(**row) for row in rows]
        session.add_all(instances)
        await session.flush()
        return instances

    async def get_by_job_id(
        self,
        session: AsyncSession,
        job_id: int,
    ) -> Sequence[RatecardEntryModel]:
        """
        Retrieve the entries extracted for one job, in insertion order.

        Args:
            session: Async database session
            job_id: Owning job id

        Returns:
            Sequence of entries for the job
        """
        stmt = (
            select(RatecardEntryModel)
            .where(RatecardEntryModel.job_id == job_id)
            .order_by(RatecardEntryModel.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_all_newest_first(
        self,
        session: AsyncSession,
    ) -> Sequence[RatecardEntryModel]:
        """Retrieve every stored entry, newest first."""
        stmt = select(RatecardEntryModel).order_by(
            RatecardEntryModel.created_at.desc(),
            RatecardEntryModel.id.desc(),
        )
        result = await session.execute(stmt)
        return result.scalars().all()


ratecard_entry_crud = RatecardEntryCRUD()
