"""
Rate card entry ORM model.

One row per extracted advertising placement. Cost fields are display
strings and are never parsed.

Dependencies: sqlalchemy, ratecard_backend.boundary.db.base
System role: Persistent extraction results
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ratecard_backend.boundary.db.base import Base, CreatedAtMixin, IntegerIdMixin


class RatecardEntryModel(Base, IntegerIdMixin, CreatedAtMixin):
    """
    Extracted rate card entry.

    Entries are written in one batch after a successful extraction and are
    never updated or deleted afterwards.
    """

    __tablename__ = "ratecard_entries"

    job_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("processing_jobs.id"),
        nullable=True,
        index=True,
    )
    original_file_name: Mapped[str] = mapped_column(Text, nullable=False)
    source_page: Mapped[int | None] = mapped_column(Integer, nullable=True)

    media_type: Mapped[str | None] = mapped_column(Text, nullable=True)
    media_format: Mapped[str | None] = mapped_column(Text, nullable=True)
    placement_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    dimensions: Mapped[str | None] = mapped_column(Text, nullable=True)

    cost_media_4weeks: Mapped[str | None] = mapped_column(Text, nullable=True)
    production_cost: Mapped[str | None] = mapped_column(Text, nullable=True)
    total_cost: Mapped[str | None] = mapped_column(Text, nullable=True)

    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    confidence: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default="medium",
    )
